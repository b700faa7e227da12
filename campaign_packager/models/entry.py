"""Archive entry model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ArchiveEntry:
    """One file stored in the archive."""

    name: str       # Forward-slash path inside the archive, e.g. "01_Instagram_Posts/Foo_01.jpg"
    content: bytes
