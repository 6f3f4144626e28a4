"""Error taxonomy shared by every decoder and encoder."""

from typing import Tuple, Union

PathSegment = Union[str, int]


def format_path(path: Tuple[PathSegment, ...]) -> str:
    """Render a field path as ``tweet.entities.urls[0].indices``."""
    rendered = ""
    for segment in path:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = segment
    return rendered


class ArchiveError(Exception):
    """Base class for all archive transcoding failures."""


class PrefixMismatch(ArchiveError):
    """Raw text does not start with the expected assignment prefix."""

    def __init__(self, expected: str, observed: str):
        self.expected = expected
        self.observed = observed
        super().__init__(f"Expected prefix {expected!r}, found {observed!r}")


class MalformedRecord(ArchiveError):
    """Structural decode failure: wrong JSON shape, missing or unknown field."""

    def __init__(self, reason: str, path: Tuple[PathSegment, ...] = ()):
        self.reason = reason
        self.path = tuple(path)
        super().__init__(reason)

    def prefixed(self, *segments: PathSegment) -> 'MalformedRecord':
        """Prepend path segments while the error travels up the decoder."""
        self.path = tuple(segments) + self.path
        return self

    @property
    def field_path(self) -> str:
        return format_path(self.path)

    def __str__(self) -> str:
        if self.path:
            return f"{self.field_path}: {self.reason}"
        return self.reason


class MalformedPrimitive(MalformedRecord):
    """A leaf value does not match its adapter's lexical shape."""

    def __init__(self, raw: object, expected: str, path: Tuple[PathSegment, ...] = ()):
        self.raw = raw
        self.expected = expected
        super().__init__(f"expected {expected}, got {raw!r}", path)


class UnsupportedCategory(ArchiveError):
    """No Record Schema is defined for the requested archive category."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Unsupported archive category: {category}")
