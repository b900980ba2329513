"""Helpers."""

import inspect
from collections.abc import Iterable
from typing import Dict, Optional, Tuple, List, Iterable as IterableType

from aiohttp import hdrs
from multidict import CIMultiDictProxy
from mimeparse import MimeTypeParseException, parse_media_range, parse_mime_type

from .common import logger
from .typings import MimeTypeComponents, QFParsed


def is_generator(obj):
    """Return True if ``obj`` is a generator."""
    return inspect.isgeneratorfunction(obj) or inspect.isgenerator(obj)


def is_iterable_but_not_string(obj):
    """Return True if ``obj`` is an iterable object that isn't a string."""
    return (
        (isinstance(obj, Iterable) and not isinstance(obj, (str, bytes))) or
        is_generator(obj)
    )


def get_accept_header(headers: CIMultiDictProxy) -> Optional[str]:
    """
    Return all ``Accept`` headers joined as one header value.

    Returns ``None`` if there is no ``Accept`` header at all.
    """
    values = headers.getall(hdrs.ACCEPT, ())
    if not values:
        return None
    return ','.join(values)


def normalize_media_range(media_range: MimeTypeComponents) -> MimeTypeComponents:
    """Lower-case type, subtype and parameter names of parsed media range."""
    type_, subtype, params = media_range
    return type_.lower(), subtype.lower(), {k.lower(): v for k, v in params.items()}


def parse_accept_header(header: str) -> List[MimeTypeComponents]:
    """
    Parse the value of ``Accept`` header to the list of media ranges.

    Malformed media ranges are skipped. Media types are case-insensitive,
    so they are lower-cased.
    """
    result = []
    for media_range in header.split(','):
        if not media_range.strip():
            continue
        try:
            result.append(normalize_media_range(parse_media_range(media_range)))
        except (MimeTypeParseException, ValueError) as exc:
            logger.debug('Malformed media range %r is ignored (%s).', media_range, exc)
    return result


def quality_and_fitness_parsed(mime_type: str,
                               parsed_ranges: List[MimeTypeComponents]
                               ) -> QFParsed:
    """Find the best match for a mime-type amongst parsed media-ranges.

    Find the best match for a given mime-type against a list of media_ranges
    that have already been parsed by parse_media_range(). Returns a tuple of
    the fitness value and the value of the 'q' quality parameter of the best
    match, or (-1, 0) if no match was found. Just as for quality_parsed(),
    'parsed_ranges' must be a list of parsed media ranges.

    Cherry-picked from python-mimeparse and improved.
    """
    best_fitness = -1
    best_fit_q = 0
    (target_type, target_subtype, target_params) = \
        normalize_media_range(parse_media_range(mime_type))
    best_matched = None

    for (type_, subtype, params) in parsed_ranges:

        # check if the type and the subtype match
        type_match = (
            type_ in (target_type, '*') or
            target_type == '*'
        )
        subtype_match = (
            subtype in (target_subtype, '*') or
            target_subtype == '*'
        )

        # if they do, assess the "fitness" of this mime_type
        if type_match and subtype_match:

            # 100 points if the type matches w/o a wildcard
            fitness = type_ == target_type and 100 or 0

            # 10 points if the subtype matches w/o a wildcard
            fitness += subtype == target_subtype and 10 or 0

            # 1 bonus point for each matching param besides "q"
            param_matches = sum([
                1 for (key, value) in target_params.items()
                if key != 'q' and key in params and value == params[key]
            ])
            fitness += param_matches

            # finally, add the target's "q" param (between 0 and 1)
            fitness += float(target_params.get('q', 1))

            if fitness > best_fitness:
                best_fitness = fitness
                best_fit_q = params['q']
                best_matched = (type_, subtype, params)

    return (float(best_fit_q), best_fitness), best_matched


def best_match(supported: IterableType[str],
               header: str) -> Tuple[str, Optional[MimeTypeComponents]]:
    """Return mime-type with the highest quality ('q') from list of candidates.

    Takes a list of supported mime-types and finds the best match for all the
    media-ranges listed in header. The value of header must be a string that
    conforms to the format of the HTTP Accept: header. The value of 'supported'
    is a list of mime-types. The list of supported mime-types should be sorted
    in order of increasing desirability, in case of a situation where there is
    a tie.

    Returns ``('', None)`` when nothing is matched.

    Cherry-picked from python-mimeparse and improved.

    >>> best_match(['text/json', 'application/json'], 'text/*;q=0.5,*/*; q=0.1')
    ('text/json', ('text', '*', {'q': '0.5'}))
    """
    parsed_header = parse_accept_header(header)
    weighted_matches = {}
    for i, mime_type in enumerate(supported):
        weight, match = quality_and_fitness_parsed(mime_type, parsed_header)
        weighted_matches[(weight, i)] = (mime_type, match)
    if not weighted_matches:
        return '', None
    best = max(weighted_matches.keys())
    return best[0][0] and weighted_matches[best] or ('', None)


def get_content_type_params(media_type: str) -> Dict[str, str]:
    """
    Return parameters of media type (names are lower-cased).

    :raises ValueError: if media type is malformed
    """
    return normalize_media_range(parse_mime_type(media_type))[2]


def build_content_type(media_type: str, charset: str) -> Tuple[str, str]:
    """
    Return value of ``Content-Type`` header and charset of body.

    Media type is used as is. If it has no ``charset`` parameter,
    passed *charset* is appended.
    """
    params = get_content_type_params(media_type)
    if 'charset' in params:
        return media_type.strip(), params['charset'].strip('"')
    return f'{media_type.strip()}; charset={charset}', charset
