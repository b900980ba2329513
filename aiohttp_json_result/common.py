"""Common constants, enumerations and structures."""

import logging
import re
from enum import Enum
from typing import Pattern, Tuple

#: Logger instance
logger = logging.getLogger('aiohttp-json-result')

#: Key of JSON result stuff in aiohttp.web.Application
JSON_RESULT: str = 'json_result'

#: Content-Type used when negotiation finds nothing better
DEFAULT_CONTENT_TYPE: str = 'application/json'

#: Media types the default formatter is able to write.
#: Sorted in order of increasing desirability (ties go to the last one).
SUPPORTED_MEDIA_TYPES: Tuple[str, ...] = ('text/json', 'application/json')

#: Charset of response body
DEFAULT_CHARSET: str = 'utf-8'

#: Regular expression rule for media type check
MEDIA_TYPE_RULE: str = r'^[\w!#$&^.+-]+/[\w!#$&^.+-]+$'

#: Compiled regexp of rule
MEDIA_TYPE_REGEX: Pattern = re.compile(MEDIA_TYPE_RULE)


class NamingPolicy(Enum):
    """Naming convention of serialized object members."""
    PRESERVE = 'preserve'
    CAMEL_CASE = 'camel_case'
    SNAKE_CASE = 'snake_case'
    LOWER_CASE = 'lower_case'
