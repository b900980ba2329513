"""JSON result."""

import codecs
from collections.abc import Iterator
from http import HTTPStatus
from typing import Any, Dict

import attr
from aiohttp import hdrs, web
from mimeparse import parse_mime_type

from .common import DEFAULT_CHARSET, DEFAULT_CONTENT_TYPE, JSON_RESULT, MEDIA_TYPE_REGEX, logger
from .encoder import SerializerSettings
from .formatters import JsonOutputFormatter
from .helpers import build_content_type, get_accept_header, normalize_media_range

#: Formatter used when application has no JSON result set up
DEFAULT_FORMATTER = JsonOutputFormatter()


def get_app_options(app: web.Application) -> Dict[str, Any]:
    """Return JSON result options of application (or defaults)."""
    options = app.get(JSON_RESULT)
    if options is None:
        return {
            'formatter': DEFAULT_FORMATTER,
            'default_content_type': DEFAULT_CONTENT_TYPE,
            'charset': DEFAULT_CHARSET,
        }
    return options


def materialize(value: Any) -> Any:
    """Read out iterators, so value can be rendered many times."""
    if isinstance(value, Iterator):
        return list(value)
    return value


def check_media_type(instance, attribute, value) -> None:
    """Validate declared media type (parameters are allowed)."""
    if value is None:
        return

    try:
        type_, subtype, params = normalize_media_range(parse_mime_type(value))
    except ValueError as exc:
        raise ValueError(f"'{attribute.name}' must be a media type. Got: {value!r}") from exc

    if not MEDIA_TYPE_REGEX.match(f'{type_}/{subtype}'):
        raise ValueError(f"'{attribute.name}' must be a media type. Got: {value!r}")

    if 'charset' in params:
        try:
            codecs.lookup(params['charset'].strip('"'))
        except LookupError as exc:
            raise ValueError(f"Unknown charset in '{attribute.name}'. Got: {value!r}") from exc


@attr.s(frozen=True)
class JsonResult:
    """
    Result of handler which is formatted as JSON.

    Any value is formatted as JSON, ``None`` included
    (it becomes ``null``, not ``204 No Content``), strings as well
    (they become JSON strings, not ``text/plain``).

    :param value:
        Value to serialize. Iterators (generators included) are read
        out to list on creation, so result can be shared between requests.
    :param content_type:
        Declared Content-Type of response (parameters are allowed).
        If passed, it is used as is whatever ``Accept`` header of request is.
        Body is encoded with its ``charset`` if any.
    :param serializer_settings:
        Custom serializer settings of this result
    :param formatter:
        Custom formatter of this result.
        Takes precedence over *serializer_settings*.
    :param status:
        HTTP status of response
    """
    value = attr.ib(default=None, converter=materialize)
    content_type = attr.ib(
        default=None,
        validator=[attr.validators.optional(attr.validators.instance_of(str)), check_media_type],
    )
    serializer_settings = attr.ib(
        default=None,
        validator=attr.validators.optional(attr.validators.instance_of(SerializerSettings)),
    )
    formatter = attr.ib(
        default=None,
        validator=attr.validators.optional(attr.validators.instance_of(JsonOutputFormatter)),
    )
    status = attr.ib(default=HTTPStatus.OK, converter=HTTPStatus)

    def get_formatter(self, app: web.Application) -> JsonOutputFormatter:
        """Return formatter of this result for application."""
        if self.formatter is not None:
            return self.formatter

        app_formatter = get_app_options(app)['formatter']
        if self.serializer_settings is not None:
            return JsonOutputFormatter(self.serializer_settings, app_formatter.supported_media_types)
        return app_formatter

    async def execute(self, request: web.Request) -> web.Response:
        """Render result to response of request."""
        options = get_app_options(request.app)
        formatter = self.get_formatter(request.app)

        content_type = formatter.select_content_type(
            get_accept_header(request.headers),
            declared=self.content_type,
            default=options['default_content_type'],
        )
        header, charset = build_content_type(content_type, options['charset'])
        body = formatter.write(self.value, charset=charset)

        logger.debug('%r is rendered as %s (%d bytes).', self, header, len(body))
        return web.Response(
            body=body,
            status=self.status.value,
            headers={hdrs.CONTENT_TYPE: header},
        )


def json_result(value: Any = None, **kwargs) -> JsonResult:
    """Shortcut to create :class:`JsonResult` instance."""
    return JsonResult(value, **kwargs)
