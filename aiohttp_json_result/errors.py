"""Errors."""

from http import HTTPStatus

from .encoder import json_dumps

__all__ = (
    'Error',
    'ErrorList',
    'HTTPInternalServerError',
    'SerializationError',
    'ConfigurationError',
)


class Error(Exception):
    """
    Base class for all exceptions thrown by the library.

    Errors raised while a request is handled are caught by
    :func:`~aiohttp_json_result.middleware.json_result_middleware`
    and converted into a JSON response.
    All other exceptions are propagated to aiohttp.
    """

    status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, *, code=None, title=None, detail='', meta=None):
        """
        Error instance initializer.

        :param code:
            An application specific error code, expressed as a string value.
        :param title:
            A short, human-readable summary of the problem.
            The default value is the phrase of HTTP status.
        :param detail:
            A human-readable explanation specific to this occurrence
            of the problem.
        :param meta:
            A meta object containing non-standard meta-information
            about the error.
        """
        super(Error, self).__init__()
        self.code = code
        self.title = title if title is not None else self.status.phrase
        self.detail = detail if detail else self.status.description
        self.meta = meta if meta is not None else dict()

    def __str__(self):
        """Return the JSON representation of error."""
        return json_dumps(self.as_dict, indent=4, sort_keys=True)

    @property
    def as_dict(self):
        """Represent instance of Error as dictionary."""
        result = {
            'status': str(self.status.value),
            'title': self.title,
        }
        if self.code:
            result['code'] = self.code
        if self.detail:
            result['detail'] = self.detail
        if self.meta:
            result['meta'] = self.meta
        return result


class ErrorList(Exception):
    """
    Exception contains list of errors.

    Can be used to store a list of exceptions, which occur during the
    execution of a request.
    """

    def __init__(self, errors=None):
        """Error list initializer."""
        super(ErrorList, self).__init__()
        self.errors = list()
        if errors:
            self.extend(errors)

    def __bool__(self):
        """Return True if errors are exists."""
        return bool(self.errors)

    def __len__(self):
        """Return count of errors."""
        return len(self.errors)

    def __str__(self):
        """Return string representation of errors list."""
        return json_dumps(self.json, indent=4, sort_keys=True)

    @property
    def status(self):
        """
        Return the most specific HTTP status code for all errors.

        For single error in list returns its status.
        For many errors returns maximal status code.
        """
        if not self.errors:
            return None
        elif len(self.errors) == 1:
            return self.errors[0].status
        elif any(400 <= err.status < 500 for err in self.errors):
            return max(e.status for e in self.errors)

        return HTTPStatus.INTERNAL_SERVER_ERROR

    def append(self, error):
        """
        Append the :class:`Error` error to the error list.

        :arg Error error: Error instance
        """
        if not isinstance(error, Error):
            raise TypeError('*error* must be of type Error')
        self.errors.append(error)

    def extend(self, errors):
        """
        Append errors to the list.

        :arg errors: :class:`ErrorList` or a sequence of :class:`Error`.
        """
        if isinstance(errors, ErrorList):
            self.errors.extend(errors.errors)
        elif all(isinstance(err, Error) for err in errors):
            self.errors.extend(errors)
        else:
            raise TypeError(
                '*errors* must be of type ErrorList or a sequence of Error.'
            )

    @property
    def json(self):
        """Create the list of error objects."""
        return [error.as_dict for error in self.errors]


class HTTPInternalServerError(Error):
    """
    HTTP 500 Internal Server Error.

    A generic error message, given when an unexpected condition
    was encountered and no more specific message is suitable.
    """

    status = HTTPStatus.INTERNAL_SERVER_ERROR


class SerializationError(HTTPInternalServerError):
    """Value of result can't be serialized to JSON."""

    def __init__(self, value_type, reason, **kwargs):
        kwargs.setdefault('detail', f"Value of type '{value_type.__name__}' can't be serialized: {reason}")
        super(SerializationError, self).__init__(**kwargs)
        self.value_type = value_type
        self.reason = reason


class ConfigurationError(Error):
    """Invalid options passed on set up of application."""

    def __init__(self, errors, **kwargs):
        formatted = '; '.join(f'{k}: {v}' for k, v in errors.items())
        kwargs.setdefault('detail', f'Invalid configuration ({formatted})')
        super(ConfigurationError, self).__init__(**kwargs)
        self.errors = errors
