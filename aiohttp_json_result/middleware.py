"""Middleware."""
from aiohttp import web

from .common import JSON_RESULT, logger
from .errors import Error, ErrorList
from .result import JsonResult
from .typings import CallableHandler
from .utils import error_to_response


@web.middleware
async def json_result_middleware(request: web.Request, handler: CallableHandler) -> web.StreamResponse:
    """Middleware for rendering of JSON results and handling of errors."""
    try:
        response = await handler(request)

        if isinstance(response, JsonResult):
            logger.debug('[aiohttp-json-result middleware] Render %r', response)
            response = await response.execute(request)

        return response
    except (Error, ErrorList) as exc:
        if request.app.get(JSON_RESULT, {}).get('log_errors', True):
            logger.exception(exc)
        return error_to_response(exc)
