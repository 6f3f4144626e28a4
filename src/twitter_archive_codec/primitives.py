"""Two-way adapters for values whose wire text does not match their type.

Every adapter exposes ``decode(text)`` and ``encode(value)``. ``decode``
raises :class:`MalformedPrimitive` for text of the wrong lexical shape and
only accepts text that ``encode`` reproduces exactly, so
``encode(decode(text)) == text`` for everything it returns.
"""

import re
from datetime import datetime, timezone
from typing import Tuple

from .errors import MalformedPrimitive

MAX_UINT64 = 2 ** 64 - 1


class IntegerString:
    """Non-negative integer written as a decimal string, e.g. ``"1234"``."""

    PATTERN = re.compile(r'0|[1-9][0-9]*')

    def __init__(self, name: str, maximum: int = MAX_UINT64):
        self.name = name
        self.maximum = maximum

    def decode(self, text: str) -> int:
        if not isinstance(text, str) or not self.PATTERN.fullmatch(text):
            raise MalformedPrimitive(text, self.name)
        value = int(text)
        if value > self.maximum:
            raise MalformedPrimitive(text, f"{self.name} <= {self.maximum}")
        return value

    def encode(self, value: int) -> str:
        return str(value)


class QuotedBool:
    """Boolean written as the JSON string ``"true"`` or ``"false"``."""

    name = "quoted boolean"

    def decode(self, text: str) -> bool:
        if text == "true":
            return True
        if text == "false":
            return False
        raise MalformedPrimitive(text, self.name)

    def encode(self, value: bool) -> str:
        return "true" if value else "false"


class CommaList:
    """List of strings packed into one comma separated string."""

    name = "comma separated list"

    def decode(self, text: str) -> Tuple[str, ...]:
        if not isinstance(text, str):
            raise MalformedPrimitive(text, self.name)
        if not text:
            return ()
        return tuple(text.split(","))

    def encode(self, value: Tuple[str, ...]) -> str:
        return ",".join(value)


class Timestamp:
    """Timestamp in a fixed ``strftime`` format.

    Formats carrying ``%z`` keep the parsed offset. Formats without one are
    UTC by definition and decode to UTC-aware datetimes.
    """

    def __init__(self, name: str, fmt: str):
        self.name = name
        self.fmt = fmt
        self.has_offset = "%z" in fmt

    def decode(self, text: str) -> datetime:
        if not isinstance(text, str):
            raise MalformedPrimitive(text, self.name)
        try:
            value = self.parse(text)
        except ValueError:
            raise MalformedPrimitive(text, self.name) from None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        # strptime ignores weekday names and accepts unpadded fields
        if self.encode(value) != text:
            raise MalformedPrimitive(text, f"canonical {self.name}")
        return value

    def parse(self, text: str) -> datetime:
        return datetime.strptime(text, self.fmt)

    def encode(self, value: datetime) -> str:
        return self._normalize(value).strftime(self.fmt)

    def _normalize(self, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        if self.has_offset:
            return value
        return value.astimezone(timezone.utc)


class IsoTimestamp(Timestamp):
    """``2023-08-12T17:10:37.000Z``: UTC with exactly three fraction digits."""

    def __init__(self, name: str = "ISO 8601 timestamp"):
        super().__init__(name, "%Y-%m-%dT%H:%M:%S.%fZ")

    def encode(self, value: datetime) -> str:
        value = self._normalize(value)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class CreatedAt(Timestamp):
    """``Wed Oct 10 20:19:24 +0000 2018``, the tweet ``created_at`` form.

    Day and month names are always English. They are looked up in fixed
    tables because ``%a`` and ``%b`` follow the process ``LC_TIME`` locale.
    """

    DAYS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')
    MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
              'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

    def __init__(self, name: str = "created_at timestamp"):
        super().__init__(name, "%d %H:%M:%S %z %Y")

    def parse(self, text: str) -> datetime:
        _, month, rest = text.split(' ', 2)
        month_number = self.MONTHS.index(month) + 1
        return datetime.strptime(f"{month_number:02d} {rest}", "%m " + self.fmt)

    def encode(self, value: datetime) -> str:
        value = self._normalize(value)
        day = self.DAYS[value.weekday()]
        month = self.MONTHS[value.month - 1]
        return f"{day} {month} {value.strftime(self.fmt)}"


ID_STRING = IntegerString("decimal identifier")
COUNT = IntegerString("decimal count")
QUOTED_BOOL = QuotedBool()
COMMA_LIST = CommaList()
CREATED_AT = CreatedAt()
ISO_8601 = IsoTimestamp()
DATE_YMD = Timestamp("year.month.day date", "%Y.%m.%d")
DATE_TIME = Timestamp("date and time", "%Y-%m-%d %H:%M:%S")
