"""Set up of JSON results in aiohttp application."""

from typing import Optional, Sequence

import trafaret as t
from aiohttp import web

from .common import (
    DEFAULT_CHARSET, DEFAULT_CONTENT_TYPE, JSON_RESULT, MEDIA_TYPE_RULE,
    SUPPORTED_MEDIA_TYPES, logger,
)
from .encoder import SerializerSettings
from .errors import ConfigurationError
from .formatters import JsonOutputFormatter
from .middleware import json_result_middleware

MEDIA_TYPE_TRAFARET = t.String() & t.Regexp(MEDIA_TYPE_RULE)

OPTIONS_TRAFARET = t.Dict({
    t.Key('serializer_settings'): t.Type(SerializerSettings) | t.Null(),
    t.Key('supported_media_types'): t.List(MEDIA_TYPE_TRAFARET, min_length=1),
    t.Key('default_content_type'): MEDIA_TYPE_TRAFARET,
    t.Key('charset'): t.String(),
    t.Key('log_errors'): t.Bool(),
})


def setup_json_result(
    app: web.Application,
    *,
    serializer_settings: Optional[SerializerSettings] = None,
    supported_media_types: Sequence[str] = SUPPORTED_MEDIA_TYPES,
    default_content_type: str = DEFAULT_CONTENT_TYPE,
    charset: str = DEFAULT_CHARSET,
    log_errors: bool = True,
) -> web.Application:
    """
    Set up JSON results in aiohttp application.

    This function will store application-wide options and install
    the middleware, so handlers are able to return
    :class:`~aiohttp_json_result.result.JsonResult` instances.

    :param ~aiohttp.web.Application app:
        Application instance
    :param serializer_settings:
        Default serializer settings of application
    :param supported_media_types:
        Media types negotiable by default formatter, sorted in order
        of increasing desirability
    :param str default_content_type:
        Content type of response when ``Accept`` header of request
        is absent or can't be satisfied
    :param str charset:
        Charset of responses
    :param bool log_errors:
        Log errors handled by
        :func:`~aiohttp_json_result.middleware.json_result_middleware`
    :return:
        aiohttp Application instance with configured JSON results
    :raises ConfigurationError: if options are invalid
    :rtype: ~aiohttp.web.Application
    """
    if JSON_RESULT in app:
        logger.warning(
            'JSON result is initialized already. '
            'Please check your aiohttp.web.Application instance does not have a "%s" dictionary key.',
            JSON_RESULT,
        )
        return app

    try:
        options = OPTIONS_TRAFARET.check({
            'serializer_settings': serializer_settings,
            'supported_media_types': list(supported_media_types),
            'default_content_type': default_content_type,
            'charset': charset,
            'log_errors': log_errors,
        })
    except t.DataError as exc:
        raise ConfigurationError(exc.as_dict()) from exc

    formatter = JsonOutputFormatter(options['serializer_settings'], options['supported_media_types'])
    app[JSON_RESULT] = {
        'formatter': formatter,
        'default_content_type': options['default_content_type'],
        'charset': options['charset'],
        'log_errors': options['log_errors'],
    }
    logger.debug('JSON result options: %r', app[JSON_RESULT])

    app.middlewares.append(json_result_middleware)
    return app
