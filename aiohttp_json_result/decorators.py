"""Handlers decorators."""
from functools import wraps
from typing import Optional

from aiohttp import web

from .encoder import SerializerSettings
from .formatters import JsonOutputFormatter
from .result import JsonResult


def json_result_handler(
    content_type: Optional[str] = None,
    *,
    serializer_settings: Optional[SerializerSettings] = None,
    formatter: Optional[JsonOutputFormatter] = None,
):
    """
    JSON result handler decorator.

    Value returned by decorated handler is wrapped into
    :class:`~aiohttp_json_result.result.JsonResult` with passed options
    and rendered to response. Returned responses and JSON results
    are left as is (results are rendered).

    .. code-block:: python3

        @json_result_handler('application/message+json')
        async def message(request):
            return {'Message': 'hello'}
    """
    def decorator(handler):
        @wraps(handler)
        async def wrapper(request: web.Request) -> web.StreamResponse:
            """JSON result handler wrapper."""
            result = await handler(request)
            if isinstance(result, web.StreamResponse):
                return result

            if not isinstance(result, JsonResult):
                result = JsonResult(
                    result,
                    content_type=content_type,
                    serializer_settings=serializer_settings,
                    formatter=formatter,
                )
            return await result.execute(request)

        return wrapper

    return decorator
