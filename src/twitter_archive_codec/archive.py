"""Caller-side helper that reads a whole archive through a file provider.

Opening the archive container is left to the caller: anything with a
``read_file(path) -> str`` method works. :class:`DirectoryProvider` covers
the common case of an archive that has already been extracted.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol, Tuple, Union

from .catalog import get_category
from .config import Config, config as default_config
from .errors import ArchiveError
from .manifest import Manifest, decode_manifest
from .records.base import Record

logger = logging.getLogger(__name__)


class FileProvider(Protocol):
    def read_file(self, path: str) -> str:
        """Return the text of the archive file at ``path``."""


class DirectoryProvider:
    """Reads files from an extracted archive directory."""

    def __init__(self, root: Union[str, Path], encoding: str = "utf-8"):
        self.root = Path(root)
        self.encoding = encoding

    def read_file(self, path: str) -> str:
        return (self.root / path).read_text(encoding=self.encoding)


class Archive:
    """Typed view over the files of one archive export."""

    def __init__(self, provider: FileProvider, config: Optional[Config] = None):
        self.provider = provider
        self.config = config or default_config
        self._manifest: Optional[Manifest] = None

    @classmethod
    def from_directory(cls, root: Union[str, Path], config: Optional[Config] = None) -> 'Archive':
        """Open an extracted archive, reading files in ``config.encoding``."""
        config = config or default_config
        return cls(DirectoryProvider(root, encoding=config.encoding), config)

    @property
    def manifest(self) -> Manifest:
        if self._manifest is None:
            path = self.config.manifest_path
            logger.debug(f"Loading manifest from {path}")
            try:
                self._manifest = decode_manifest(
                    self.provider.read_file(path), prefix=self.config.manifest_prefix)
            except ArchiveError as e:
                logger.error(f"Failed to decode manifest {path}: {e}")
                raise
            logger.info(f"Loaded manifest for @{self._manifest.user_handle} "
                        f"generated {self._manifest.generation_date.isoformat()}")
        return self._manifest

    @property
    def username(self) -> str:
        return self.manifest.user_handle

    def available_categories(self) -> Tuple[str, ...]:
        """Supported categories that have at least one file in this archive."""
        names = []
        for entry in self.manifest.entries():
            if entry.supported and entry.category not in names:
                names.append(entry.category)
        return tuple(names)

    def read(self, category: str, part: int = 0, path: Optional[str] = None) -> Tuple[Record, ...]:
        """Decode a single part file, by default at its conventional path."""
        schema = get_category(category)
        path = path or schema.file_name(part, self.config.data_dir)
        try:
            return schema.decode(self.provider.read_file(path), part)
        except ArchiveError as e:
            logger.error(f"Failed to decode {path}: {e}")
            raise

    def load(self, category: str) -> Tuple[Record, ...]:
        """Decode and concatenate every part the manifest lists for ``category``."""
        get_category(category)
        entries = self.manifest.files_for(category)
        if not entries:
            logger.warning(f"Manifest lists no files for {category}")
        records = []
        for entry in entries:
            logger.debug(f"Decoding {entry.path} ({entry.count} entries)")
            records.extend(self.read(category, entry.part, entry.path))
        logger.info(f"Loaded {len(records)} {category} records from {len(entries)} file(s)")
        return tuple(records)

    def encode(self, category: str, records: Iterable[Record], part: int = 0) -> str:
        """Encode records into file text using the configured formatting."""
        return get_category(category).encode(records, part, indent=self.config.indent_output)
