"""In-memory ZIP writer - stored (method 0) entries, classic format only."""

from ..models.entry import ArchiveEntry
from .constants import (
    CENTRAL_DIR_HEADER,
    CENTRAL_DIR_HEADER_SIZE,
    CENTRAL_DIR_SIGNATURE,
    COMPRESSION_STORED,
    END_OF_CENTRAL_DIR,
    END_OF_CENTRAL_DIR_SIGNATURE,
    LOCAL_FILE_HEADER,
    LOCAL_FILE_HEADER_SIZE,
    LOCAL_FILE_HEADER_SIGNATURE,
    MAX_ENTRIES,
    MAX_FILE_SIZE,
    MAX_NAME_LENGTH,
    MAX_OFFSET,
    VERSION,
)
from .crc32 import crc32


class ZipBuildError(ValueError):
    """Entries cannot be written as a classic ZIP archive."""

    pass


class ZipBuilder:
    """Build a complete ZIP archive from an ordered list of entries.

    Layout: [local header + name + data] * N, [central record + name] * N, EOCD.
    Nothing is emitted until every entry passed validation, so a bad entry
    never yields a truncated archive.
    """

    def build(self, entries: list[ArchiveEntry]) -> bytes:
        """
        Serialize entries into one ZIP buffer.

        Args:
            entries: Entries in physical layout order. Names must be unique.

        Returns:
            The complete archive as bytes.

        Raises:
            ZipBuildError: If an entry violates classic ZIP limits.
        """
        prepared = self._prepare(entries)

        local_size = sum(LOCAL_FILE_HEADER_SIZE + len(name) + len(content) for name, content, _ in prepared)
        central_size = sum(CENTRAL_DIR_HEADER_SIZE + len(name) for name, _, _ in prepared)
        if local_size + central_size > MAX_OFFSET:
            raise ZipBuildError(f"Archive size {local_size + central_size} exceeds the 4 GiB classic ZIP limit")

        local_parts: list[bytes] = []
        central_parts: list[bytes] = []
        offset = 0

        for name, content, checksum in prepared:
            header = self._local_file_header(name, len(content), checksum)
            local_parts.extend((header, content))
            central_parts.append(self._central_dir_header(name, len(content), checksum, offset))
            offset += len(header) + len(content)

        end_record = self._end_of_central_dir(len(prepared), central_size, offset)
        return b"".join(local_parts + central_parts + [end_record])

    def _prepare(self, entries: list[ArchiveEntry]) -> list[tuple[bytes, bytes, int]]:
        """Validate entries and return (encoded name, content, crc) triples."""
        if len(entries) > MAX_ENTRIES:
            raise ZipBuildError(f"Too many entries: {len(entries)} (max {MAX_ENTRIES})")

        prepared = []
        seen: set[str] = set()
        for i, entry in enumerate(entries):
            if entry.content is None:
                raise ZipBuildError(f"Entry {i + 1} ({entry.name!r}) has no content")
            if not isinstance(entry.content, (bytes, bytearray, memoryview)):
                raise ZipBuildError(
                    f"Entry {i + 1} ({entry.name!r}) content must be bytes, got {type(entry.content).__name__}"
                )
            if entry.name in seen:
                raise ZipBuildError(f"Duplicate entry name: {entry.name!r}")
            seen.add(entry.name)

            name = entry.name.encode("utf-8")
            content = bytes(entry.content)
            if len(name) > MAX_NAME_LENGTH:
                raise ZipBuildError(f"Entry name too long ({len(name)} bytes): {entry.name[:40]!r}...")
            if len(content) > MAX_FILE_SIZE:
                raise ZipBuildError(f"Entry {entry.name!r} is {len(content)} bytes (max {MAX_FILE_SIZE})")

            prepared.append((name, content, crc32(content)))
        return prepared

    def _local_file_header(self, name: bytes, size: int, checksum: int) -> bytes:
        return LOCAL_FILE_HEADER.pack(
            LOCAL_FILE_HEADER_SIGNATURE,
            VERSION,              # version needed
            0,                    # flags
            COMPRESSION_STORED,
            0,                    # mod time
            0,                    # mod date
            checksum,
            size,                 # compressed
            size,                 # uncompressed
            len(name),
            0,                    # extra length
        ) + name

    def _central_dir_header(self, name: bytes, size: int, checksum: int, offset: int) -> bytes:
        return CENTRAL_DIR_HEADER.pack(
            CENTRAL_DIR_SIGNATURE,
            VERSION,              # made by
            VERSION,              # needed
            0,                    # flags
            COMPRESSION_STORED,
            0,                    # mod time
            0,                    # mod date
            checksum,
            size,
            size,
            len(name),
            0,                    # extra length
            0,                    # comment length
            0,                    # disk number start
            0,                    # internal attributes
            0,                    # external attributes
            offset,
        ) + name

    def _end_of_central_dir(self, count: int, central_size: int, central_offset: int) -> bytes:
        return END_OF_CENTRAL_DIR.pack(
            END_OF_CENTRAL_DIR_SIGNATURE,
            0,                    # this disk
            0,                    # disk with central directory
            count,                # entries on this disk
            count,                # total entries
            central_size,
            central_offset,
            0,                    # comment length
        )


def build_zip(entries: list[ArchiveEntry]) -> bytes:
    """Build a ZIP archive from entries (see ZipBuilder.build)."""
    return ZipBuilder().build(entries)
