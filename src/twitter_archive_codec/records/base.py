"""Field tables and JSON-level codecs shared by all record classes.

A record class is a frozen dataclass whose ``FIELDS`` table lists, in wire
order, every attribute together with the exact source key and the codec
that converts between the JSON value and the typed value::

    @dataclass(frozen=True)
    class Follow(Record):
        account_id: int
        user_link: str

        FIELDS = (
            Field('account_id', 'accountId', Quoted(ID_STRING)),
            Field('user_link', 'userLink', TEXT),
        )

Decoding is strict: keys missing from the table are rejected, required keys
must be present and optional keys decode to ``None`` when absent.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, FrozenSet, Sequence, Tuple, Type

from ..errors import MalformedPrimitive, MalformedRecord


class Text:
    """JSON string, kept as-is."""

    def decode(self, value: Any) -> str:
        if not isinstance(value, str):
            raise MalformedRecord(f"expected string, got {type(value).__name__}")
        return value

    def encode(self, value: str) -> str:
        return value


class Boolean:
    """Native JSON boolean. The quoted ``"true"`` form is rejected."""

    def decode(self, value: Any) -> bool:
        if not isinstance(value, bool):
            raise MalformedPrimitive(value, "JSON boolean")
        return value

    def encode(self, value: bool) -> bool:
        return value


class Quoted:
    """JSON string run through a primitive adapter.

    Native JSON numbers and booleans are rejected instead of coerced.
    """

    def __init__(self, adapter):
        self.adapter = adapter

    def decode(self, value: Any) -> Any:
        if not isinstance(value, str):
            raise MalformedPrimitive(value, f"quoted {self.adapter.name}")
        return self.adapter.decode(value)

    def encode(self, value: Any) -> str:
        return self.adapter.encode(value)


class ListOf:
    """JSON array decoded element-wise into a tuple."""

    def __init__(self, item):
        self.item = item

    def decode(self, value: Any) -> Tuple[Any, ...]:
        if not isinstance(value, list):
            raise MalformedRecord(f"expected array, got {type(value).__name__}")
        items = []
        for index, element in enumerate(value):
            try:
                items.append(self.item.decode(element))
            except MalformedRecord as e:
                raise e.prefixed(index)
        return tuple(items)

    def encode(self, value: Sequence[Any]) -> list:
        return [self.item.encode(element) for element in value]


class Indices(ListOf):
    """``["0", "12"]`` start/end offsets into the text."""

    def __init__(self, adapter):
        super().__init__(Quoted(adapter))

    def decode(self, value: Any) -> Tuple[int, int]:
        indices = super().decode(value)
        if len(indices) != 2:
            raise MalformedRecord(f"expected [start, end] pair, got {len(indices)} items")
        return indices


class Nested:
    """JSON object decoded into another record class."""

    def __init__(self, record: Type['Record']):
        self.record = record

    def decode(self, value: Any) -> 'Record':
        return self.record.from_raw_data(value)

    def encode(self, value: 'Record') -> Dict[str, Any]:
        return value.to_raw_data()


@dataclass(frozen=True)
class Field:
    """One row of a record's name-mapping table.

    ``flatten`` fields read and write a nested record whose keys live
    directly in the parent object. The nested record is absent unless at
    least one of its keys is present.
    """
    name: str
    key: str
    codec: Any
    optional: bool = False
    flatten: bool = False

    def wire_keys(self) -> FrozenSet[str]:
        if self.flatten:
            return self.codec.record.wire_keys()
        return frozenset((self.key,))

    def decode_from(self, data: Dict[str, Any]) -> Any:
        if self.flatten:
            present = {key: data[key] for key in self.wire_keys() if key in data}
            return self.codec.decode(present) if present else None
        if self.key not in data:
            if self.optional:
                return None
            raise MalformedRecord("missing required field", (self.key,))
        try:
            return self.codec.decode(data[self.key])
        except MalformedRecord as e:
            raise e.prefixed(self.key)

    def encode_into(self, value: Any, data: Dict[str, Any]) -> None:
        if value is None:
            return
        if self.flatten:
            data.update(self.codec.encode(value))
        else:
            data[self.key] = self.codec.encode(value)


class Record:
    """Base class for immutable typed archive records."""

    FIELDS: ClassVar[Tuple[Field, ...]] = ()

    @classmethod
    def wire_keys(cls) -> FrozenSet[str]:
        keys = frozenset()
        for field in cls.FIELDS:
            keys |= field.wire_keys()
        return keys

    @classmethod
    def from_raw_data(cls, data: Any, **attributes: Any) -> 'Record':
        """Create a record from the parsed JSON object of one entry.

        ``attributes`` supplies values that live outside the object itself,
        such as the key it was stored under.
        """
        if not isinstance(data, dict):
            raise MalformedRecord(
                f"expected object for {cls.__name__}, got {type(data).__name__}")
        known = cls.wire_keys()
        for key in data:
            if key not in known:
                raise MalformedRecord(f"unknown field for {cls.__name__}", (key,))
        for field in cls.FIELDS:
            attributes[field.name] = field.decode_from(data)
        return cls(**attributes)

    def to_raw_data(self) -> Dict[str, Any]:
        """Rebuild the JSON object in declared wire order, omitting absent fields."""
        data: Dict[str, Any] = {}
        for field in self.FIELDS:
            field.encode_into(getattr(self, field.name), data)
        return data


class Wrapper:
    """Single-key enclosing object such as ``{"tweet": {...}}``."""

    def __init__(self, key: str, record: Type[Record]):
        self.key = key
        self.record = record

    def unwrap(self, data: Any) -> Record:
        if not isinstance(data, dict) or len(data) != 1:
            raise MalformedRecord(f"expected single-key {self.key!r} wrapper object")
        if self.key not in data:
            key = next(iter(data))
            raise MalformedRecord(f"expected wrapper key {self.key!r}", (key,))
        try:
            return self.record.from_raw_data(data[self.key])
        except MalformedRecord as e:
            raise e.prefixed(self.key)

    def wrap(self, record: Record) -> Dict[str, Any]:
        return {self.key: record.to_raw_data()}

    # Wrappers double as codecs for wrapped objects nested inside records
    decode = unwrap
    encode = wrap


class Variant:
    """Polymorphic single-key object: the key selects the record class."""

    def __init__(self, *wrappers: Wrapper):
        self.by_key = {wrapper.key: wrapper for wrapper in wrappers}
        self.by_type = {wrapper.record: wrapper for wrapper in wrappers}

    def decode(self, value: Any) -> Record:
        if not isinstance(value, dict) or len(value) != 1:
            raise MalformedRecord(
                f"expected single-key object, one of {sorted(self.by_key)}")
        key = next(iter(value))
        if key not in self.by_key:
            raise MalformedRecord(f"unknown variant, expected one of {sorted(self.by_key)}", (key,))
        return self.by_key[key].unwrap(value)

    def encode(self, value: Record) -> Dict[str, Any]:
        wrapper = self.by_type.get(type(value))
        if wrapper is None:
            allowed = ', '.join(sorted(record.__name__ for record in self.by_type))
            raise TypeError(f"cannot encode {type(value).__name__}, expected one of {allowed}")
        return wrapper.wrap(value)


TEXT = Text()
BOOLEAN = Boolean()
