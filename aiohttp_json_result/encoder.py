"""JSON encoder extension and serializer settings."""

import datetime
import decimal
import functools
import json
import uuid
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

import attr
import inflection
from yarl import URL

from .common import NamingPolicy
from .helpers import is_iterable_but_not_string
from .typings import NameConverter

#: Types serialized by :meth:`JSONEncoder.default`
ENCODER_TYPES = (
    datetime.datetime, datetime.date, datetime.time,
    decimal.Decimal, uuid.UUID, Enum, URL,
)

#: Member name converters of naming policies
NAME_CONVERTERS = {
    NamingPolicy.PRESERVE: None,
    NamingPolicy.CAMEL_CASE: functools.partial(inflection.camelize, uppercase_first_letter=False),
    NamingPolicy.SNAKE_CASE: inflection.underscore,
    NamingPolicy.LOWER_CASE: str.lower,
}


class JSONEncoder(json.JSONEncoder):
    """Overloaded JSON encoder with support of some standard types."""

    def default(self, o: Any) -> Any:
        """Add dates, decimals, UUIDs, enumerations and URLs support to default json.dumps."""
        if isinstance(o, (datetime.datetime, datetime.date, datetime.time)):
            return o.isoformat()
        if isinstance(o, (decimal.Decimal, uuid.UUID, URL)):
            return str(o)
        if isinstance(o, Enum):
            return o.value

        return super(JSONEncoder, self).default(o)


# pylint: disable=C0103
json_dumps = functools.partial(json.dumps, cls=JSONEncoder)


def to_primitive(value: Any, convert_name: Optional[NameConverter] = None) -> Any:
    """
    Convert value to structure of JSON primitives.

    Mappings, ``attrs`` instances and plain objects become dictionaries.
    Their member names are passed through *convert_name* (if any).
    Other collections become lists.

    :raises ValueError: if two member names are converted to the same name
    """
    if value is None or isinstance(value, (str, int, float, bool)):
        return value

    if isinstance(value, ENCODER_TYPES):
        # Leave it for JSONEncoder
        return value

    if isinstance(value, Mapping):
        members = value.items()
    elif attr.has(type(value)):
        members = ((a.name, getattr(value, a.name)) for a in attr.fields(type(value)))
    elif is_iterable_but_not_string(value):
        return [to_primitive(item, convert_name) for item in value]
    elif hasattr(value, '__dict__'):
        members = ((k, v) for k, v in vars(value).items() if not k.startswith('_'))
    else:
        return value

    result = {}
    for name, member in members:
        if convert_name is not None and isinstance(name, str):
            name = convert_name(name)
        if name in result:
            raise ValueError(f'Member name {name!r} is duplicated after conversion.')
        result[name] = to_primitive(member, convert_name)
    return result


@attr.s(frozen=True)
class SerializerSettings:
    """
    Settings of JSON serialization.

    :param naming_policy:
        Naming convention of object members
        (:class:`~aiohttp_json_result.common.NamingPolicy` or its value)
    :param indent:
        Indentation of pretty printed output. Output is compact if ``None``.
    :param sort_keys:
        Sort object members by name
    :param ensure_ascii:
        Escape all non-ASCII characters
    """
    naming_policy = attr.ib(default=NamingPolicy.PRESERVE, converter=NamingPolicy)
    indent = attr.ib(default=None, validator=attr.validators.optional(attr.validators.instance_of(int)))
    sort_keys = attr.ib(default=False, validator=attr.validators.instance_of(bool))
    ensure_ascii = attr.ib(default=False, validator=attr.validators.instance_of(bool))

    @property
    def name_converter(self) -> Optional[NameConverter]:
        return NAME_CONVERTERS[self.naming_policy]

    def dumps(self, value: Any) -> str:
        """Serialize value to JSON text."""
        separators = (',', ':') if self.indent is None else (',', ': ')
        return json_dumps(
            to_primitive(value, self.name_converter),
            indent=self.indent,
            sort_keys=self.sort_keys,
            ensure_ascii=self.ensure_ascii,
            separators=separators,
        )


#: Serializer settings used when nothing is configured
DEFAULT_SERIALIZER_SETTINGS = SerializerSettings()
