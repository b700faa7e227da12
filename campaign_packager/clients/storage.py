"""Archive storage - a directory-backed object store for packaged ZIPs."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

META_SUFFIX = ".meta.json"


@dataclass
class StoredArchive:
    """A stored archive and its custom metadata."""

    key: str
    data: bytes
    metadata: dict[str, str] = field(default_factory=dict)


class ArchiveStore:
    """Store ZIP buffers under keys like "campaigns/12_1700000000000.zip".

    Each object gets a "<key>.meta.json" sidecar holding its string metadata.
    """

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def _path(self, key: str) -> Path:
        path = (self.root / key).resolve()
        if not path.is_relative_to(self.root.resolve()) or path == self.root.resolve():
            raise ValueError(f"Invalid archive key: {key!r}")
        return path

    def put(self, key: str, data: bytes, metadata: dict[str, str] | None = None) -> Path:
        """Write an archive and its metadata. Overwrites an existing key."""
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        meta_path = path.with_name(path.name + META_SUFFIX)
        meta_path.write_text(json.dumps(metadata or {}, indent=2), encoding="utf-8")
        logger.info(f"Stored {key} ({len(data)} bytes)")
        return path

    def get(self, key: str) -> StoredArchive | None:
        """Read an archive, None if the key does not exist."""
        path = self._path(key)
        if not path.is_file():
            return None

        meta_path = path.with_name(path.name + META_SUFFIX)
        metadata = {}
        if meta_path.is_file():
            metadata = json.loads(meta_path.read_text(encoding="utf-8"))
        return StoredArchive(key=key, data=path.read_bytes(), metadata=metadata)

    def delete(self, key: str) -> None:
        """Remove an archive and its sidecar. Missing keys are ignored."""
        path = self._path(key)
        path.unlink(missing_ok=True)
        path.with_name(path.name + META_SUFFIX).unlink(missing_ok=True)
        logger.info(f"Deleted {key}")
