"""Output formatters."""

from typing import Any, Optional, Sequence, Tuple

from .common import DEFAULT_CHARSET, SUPPORTED_MEDIA_TYPES, logger
from .encoder import DEFAULT_SERIALIZER_SETTINGS, SerializerSettings
from .errors import SerializationError
from .negotiation import select_content_type


class JsonOutputFormatter:
    """
    JSON output formatter.

    Knows media types it is able to write and how to serialize values.
    Formatter instance is stateless, therefore it can be shared
    between requests.

    :param settings:
        Serializer settings (defaults are used if not passed)
    :param supported_media_types:
        Media types which formatter is able to write, sorted in order
        of increasing desirability
    """

    __slots__ = ('_settings', '_supported_media_types')

    def __init__(self,
                 settings: Optional[SerializerSettings] = None,
                 supported_media_types: Sequence[str] = SUPPORTED_MEDIA_TYPES) -> None:
        if settings is not None and not isinstance(settings, SerializerSettings):
            raise TypeError(f'SerializerSettings instance is required. Got: {settings!r}')
        if not supported_media_types:
            raise ValueError('At least one supported media type is required.')

        self._settings = settings or DEFAULT_SERIALIZER_SETTINGS
        self._supported_media_types = tuple(supported_media_types)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self._supported_media_types}, {self._settings!r})>'

    @property
    def settings(self) -> SerializerSettings:
        return self._settings

    @property
    def supported_media_types(self) -> Tuple[str, ...]:
        return self._supported_media_types

    def select_content_type(self, accept: Optional[str], *,
                            declared: Optional[str] = None,
                            default: Optional[str] = None) -> str:
        """Return Content-Type of response for ``Accept`` header value."""
        if default is None:
            default = self._supported_media_types[-1]
        return select_content_type(
            accept,
            declared=declared,
            supported=self._supported_media_types,
            default=default,
        )

    def write(self, value: Any, charset: str = DEFAULT_CHARSET) -> bytes:
        """
        Serialize value to response body.

        :raises SerializationError: if value can't be serialized
        """
        try:
            return self._settings.dumps(value).encode(charset)
        except (TypeError, ValueError, RecursionError, LookupError) as exc:
            logger.error('Serialization of %r failed: %s', type(value), exc)
            raise SerializationError(type(value), str(exc)) from exc
