"""
Content negotiation policy.

The policy is *soft*: when nothing in the ``Accept`` header can be
satisfied, the default content type is used instead of answering
with ``406 Not Acceptable``.
"""

from typing import Optional, Sequence

from .common import DEFAULT_CONTENT_TYPE, SUPPORTED_MEDIA_TYPES, logger
from .helpers import best_match


def select_content_type(
    accept: Optional[str],
    *,
    declared: Optional[str] = None,
    supported: Sequence[str] = SUPPORTED_MEDIA_TYPES,
    default: str = DEFAULT_CONTENT_TYPE,
) -> str:
    """
    Choose Content-Type of response.

    :param accept:
        Value of ``Accept`` header of request (``None`` if absent)
    :param declared:
        Content type declared by result. It is used as is,
        whatever client accepts.
    :param supported:
        Media types which can be written, sorted in order
        of increasing desirability
    :param default:
        Content type used when ``Accept`` header is absent
        or can't be satisfied
    :return: Media type of response
    """
    if declared:
        logger.debug('Negotiation skipped. Declared content type: %s', declared)
        return declared

    if accept is None or not accept.strip():
        return default

    matched, parsed = best_match(supported, accept)
    logger.debug('Negotiation. Accept: %s. Matched: %s (%s)', accept, matched, parsed)
    if not matched:
        logger.debug('Nothing acceptable in %r, fallback to %s.', accept, default)
        return default

    return matched
