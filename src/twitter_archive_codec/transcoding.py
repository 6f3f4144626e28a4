"""Prefix handling and the JSON layer shared by every schema.

Archive files are JavaScript assignments::

    window.YTD.tweets.part0 = [ ... ]

The prefix is checked literally and removed before the remainder is parsed
as JSON. Encoding reverses both steps.
"""

import re
from typing import Any, Tuple

import orjson

from .errors import MalformedRecord, PrefixMismatch

PREFIX_PATTERN = re.compile(r'^window\.YTD\.(?P<category>[a-z0-9_]+)\.part(?P<part>0|[1-9][0-9]*) = ')
ASSIGNMENT_PATTERN = re.compile(r'^window\.[^=\n]*= ?')


def category_prefix(category: str, part: int = 0) -> str:
    """Literal prefix of a category file, e.g. ``window.YTD.tweets.part0 = ``."""
    return f"window.YTD.{category}.part{part} = "


def strip_prefix(raw_text: str, expected_prefix: str) -> str:
    """Return the JSON text following ``expected_prefix``."""
    if raw_text.startswith(expected_prefix):
        return raw_text[len(expected_prefix):]
    match = ASSIGNMENT_PATTERN.match(raw_text)
    observed = match.group(0) if match else raw_text[:len(expected_prefix)]
    raise PrefixMismatch(expected_prefix, observed)


def split_prefix(raw_text: str) -> Tuple[str, int, str]:
    """Split a category file into ``(category, part, json_text)``."""
    match = PREFIX_PATTERN.match(raw_text)
    if not match:
        observed_match = ASSIGNMENT_PATTERN.match(raw_text)
        observed = observed_match.group(0) if observed_match else raw_text[:32]
        raise PrefixMismatch("window.YTD.<category>.part<N> = ", observed)
    return match.group('category'), int(match.group('part')), raw_text[match.end():]


def loads(json_text: str) -> Any:
    """Parse JSON text, reporting syntax errors as :class:`MalformedRecord`."""
    try:
        return orjson.loads(json_text)
    except orjson.JSONDecodeError as e:
        raise MalformedRecord(f"invalid JSON: {e}") from None


def dumps(value: Any, indent: bool = False) -> str:
    """Serialize compactly, or with two-space indentation when ``indent`` is set."""
    option = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(value, option=option).decode('utf-8')


def expect_array(value: Any) -> list:
    if not isinstance(value, list):
        raise MalformedRecord(f"expected top-level array, got {type(value).__name__}")
    return value
