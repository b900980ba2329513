"""Utilities related to JSON results."""

from typing import Optional, Union

from aiohttp import web
from aiohttp.typedefs import LooseHeaders

from .common import DEFAULT_CHARSET, DEFAULT_CONTENT_TYPE
from .encoder import json_dumps
from .errors import Error, ErrorList


def error_to_response(
    error: Union[Error, ErrorList],
    *,
    headers: Optional[LooseHeaders] = None,
) -> web.Response:
    """
    Convert an :class:`Error` or :class:`ErrorList` to JSON response.

    :arg typing.Union[Error, ErrorList] error:
        The error, which is converted into a response.
    :arg headers:
        Additional headers of response

    :rtype: ~aiohttp.web.Response
    """
    if not isinstance(error, (Error, ErrorList)):
        raise TypeError('Error or ErrorList instance is required.')

    document = {'errors': [error.as_dict] if isinstance(error, Error) else error.json}
    return web.Response(
        body=json_dumps(document, separators=(',', ':')).encode(DEFAULT_CHARSET),
        status=error.status.value,
        headers=headers,
        content_type=DEFAULT_CONTENT_TYPE,
        charset=DEFAULT_CHARSET,
    )
