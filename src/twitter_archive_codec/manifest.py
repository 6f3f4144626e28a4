"""Typed model of ``data/manifest.js``, the index of every other archive file.

The manifest is a single JSON object behind ``window.__THAR_CONFIG = ``.
Its ``dataTypes`` table is keyed by camelCase category names and, unlike
every other record, is an open set: data types added by newer exports are
kept and reported through :meth:`Manifest.unsupported_categories` and
:meth:`Manifest.drift` instead of failing the decode.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from .catalog import CATEGORIES, GLOBAL_NAME_PATTERN, Category, get_category, parse_global_name
from .errors import MalformedPrimitive, MalformedRecord
from .primitives import COUNT, ID_STRING, ISO_8601
from .records.base import BOOLEAN, TEXT, Field, ListOf, Nested, Quoted, Record, Text
from .transcoding import dumps, loads, strip_prefix

MANIFEST_PREFIX = "window.__THAR_CONFIG = "


class GlobalName(Text):
    """``YTD.<category>.part<N>``, the variable name a file assigns to."""

    def decode(self, value: Any) -> str:
        value = super().decode(value)
        if not GLOBAL_NAME_PATTERN.fullmatch(value):
            raise MalformedPrimitive(value, "global name YTD.<category>.part<N>")
        return value


@dataclass(frozen=True)
class UserInfo(Record):
    account_id: int
    user_name: str
    display_name: str

    FIELDS = (
        Field('account_id', 'accountId', Quoted(ID_STRING)),
        Field('user_name', 'userName', TEXT),
        Field('display_name', 'displayName', TEXT),
    )


@dataclass(frozen=True)
class ArchiveInfo(Record):
    size_bytes: int
    generation_date: datetime
    is_partial_archive: bool
    max_part_size_bytes: int

    FIELDS = (
        Field('size_bytes', 'sizeBytes', Quoted(COUNT)),
        Field('generation_date', 'generationDate', Quoted(ISO_8601)),
        Field('is_partial_archive', 'isPartialArchive', BOOLEAN),
        Field('max_part_size_bytes', 'maxPartSizeBytes', Quoted(COUNT)),
    )


@dataclass(frozen=True)
class ReadmeInfo(Record):
    file_name: str
    directory: str
    name: str

    FIELDS = (
        Field('file_name', 'fileName', TEXT),
        Field('directory', 'directory', TEXT),
        Field('name', 'name', TEXT),
    )


@dataclass(frozen=True)
class ManifestFile(Record):
    file_name: str
    global_name: str
    count: int

    FIELDS = (
        Field('file_name', 'fileName', TEXT),
        Field('global_name', 'globalName', GlobalName()),
        Field('count', 'count', Quoted(COUNT)),
    )


@dataclass(frozen=True)
class DataType(Record):
    """One ``dataTypes`` entry. ``name`` is the key it is stored under."""
    name: str
    media_directory: Optional[str] = None
    files: Optional[Tuple[ManifestFile, ...]] = None

    FIELDS = (
        Field('media_directory', 'mediaDirectory', TEXT, optional=True),
        Field('files', 'files', ListOf(Nested(ManifestFile)), optional=True),
    )


class DataTypeTable:
    """Ordered ``{name: {...}}`` object decoded into a tuple of :class:`DataType`."""

    def decode(self, value: Any) -> Tuple[DataType, ...]:
        if not isinstance(value, dict):
            raise MalformedRecord(f"expected object, got {type(value).__name__}")
        data_types = []
        for name, body in value.items():
            try:
                data_types.append(DataType.from_raw_data(body, name=name))
            except MalformedRecord as e:
                raise e.prefixed(name)
        return tuple(data_types)

    def encode(self, value: Tuple[DataType, ...]) -> Dict[str, Any]:
        return {data_type.name: data_type.to_raw_data() for data_type in value}


@dataclass(frozen=True)
class ManifestEntry:
    """A single file listed in the manifest."""
    category: str
    data_type: str
    path: str
    global_name: str
    part: int
    count: int
    description: Optional[str]

    @property
    def supported(self) -> bool:
        return self.category in CATEGORIES

    @property
    def schema(self) -> Category:
        """Catalog category for this file; raises ``UnsupportedCategory``."""
        return get_category(self.category)


@dataclass(frozen=True)
class ManifestDrift:
    """Data types present in one export but not the other."""
    added: Tuple[str, ...]
    removed: Tuple[str, ...]

    def __bool__(self) -> bool:
        return bool(self.added or self.removed)


@dataclass(frozen=True)
class Manifest(Record):
    user_info: UserInfo
    archive_info: ArchiveInfo
    readme_info: ReadmeInfo
    data_types: Tuple[DataType, ...]

    FIELDS = (
        Field('user_info', 'userInfo', Nested(UserInfo)),
        Field('archive_info', 'archiveInfo', Nested(ArchiveInfo)),
        Field('readme_info', 'readmeInfo', Nested(ReadmeInfo)),
        Field('data_types', 'dataTypes', DataTypeTable()),
    )

    @property
    def generation_date(self) -> datetime:
        return self.archive_info.generation_date

    @property
    def user_handle(self) -> str:
        return self.user_info.user_name

    def category_entry(self, name: str) -> Optional[DataType]:
        """Return the ``dataTypes`` entry stored under ``name``, if any."""
        for data_type in self.data_types:
            if data_type.name == name:
                return data_type
        return None

    def entries(self) -> Tuple[ManifestEntry, ...]:
        """Every listed file, in manifest order."""
        entries = []
        for data_type in self.data_types:
            for file in data_type.files or ():
                category, part = parse_global_name(file.global_name)
                known = CATEGORIES.get(category)
                entries.append(ManifestEntry(
                    category=category,
                    data_type=data_type.name,
                    path=file.file_name,
                    global_name=file.global_name,
                    part=part,
                    count=file.count,
                    description=known.description if known else None,
                ))
        return tuple(entries)

    def files_for(self, category: str) -> Tuple[ManifestEntry, ...]:
        """Files holding ``category``, ordered by part index."""
        matching = [entry for entry in self.entries() if entry.category == category]
        return tuple(sorted(matching, key=lambda entry: entry.part))

    def unsupported_categories(self) -> Tuple[str, ...]:
        """Categories with files in this archive but no record schema."""
        seen = []
        for entry in self.entries():
            if not entry.supported and entry.category not in seen:
                seen.append(entry.category)
        return tuple(seen)

    def drift(self, other: 'Manifest') -> ManifestDrift:
        """Compare data types against ``other``, typically an older export."""
        ours = [data_type.name for data_type in self.data_types]
        theirs = [data_type.name for data_type in other.data_types]
        return ManifestDrift(
            added=tuple(name for name in ours if name not in theirs),
            removed=tuple(name for name in theirs if name not in ours),
        )


def decode_manifest(raw_text: str, prefix: str = MANIFEST_PREFIX) -> Manifest:
    """Decode the full text of ``data/manifest.js``."""
    return Manifest.from_raw_data(loads(strip_prefix(raw_text, prefix)))


def encode_manifest(manifest: Manifest, prefix: str = MANIFEST_PREFIX, indent: bool = False) -> str:
    return prefix + dumps(manifest.to_raw_data(), indent=indent)
