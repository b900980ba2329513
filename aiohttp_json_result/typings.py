"""Useful typing."""

# pylint: disable=C0103
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple, Union

from aiohttp import web

MimeTypeComponents = Tuple[str, str, Dict[str, str]]
QualityAndFitness = Tuple[float, float]
QFParsed = Tuple[QualityAndFitness, Optional[MimeTypeComponents]]

#: Naming policy callable (member name in, member name out)
NameConverter = Callable[[str], str]

CallableHandler = Callable[[web.Request], Awaitable[Union[web.StreamResponse, Any]]]
