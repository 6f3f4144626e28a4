from .archive import Archive, DirectoryProvider, FileProvider
from .catalog import CATEGORIES, Category, decode_file, get_category, is_supported
from .config import Config, config
from .errors import (
    ArchiveError, MalformedPrimitive, MalformedRecord, PrefixMismatch, UnsupportedCategory,
)
from .manifest import Manifest, ManifestEntry, decode_manifest, encode_manifest
from .records import Record
from .transcoding import category_prefix, split_prefix, strip_prefix

__all__ = [
    'Archive',
    'DirectoryProvider',
    'FileProvider',
    'CATEGORIES',
    'Category',
    'decode_file',
    'get_category',
    'is_supported',
    'Config',
    'config',
    'ArchiveError',
    'MalformedPrimitive',
    'MalformedRecord',
    'PrefixMismatch',
    'UnsupportedCategory',
    'Manifest',
    'ManifestEntry',
    'decode_manifest',
    'encode_manifest',
    'Record',
    'category_prefix',
    'split_prefix',
    'strip_prefix',
]
