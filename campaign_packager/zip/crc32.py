"""CRC-32 (IEEE 802.3 / PKZIP) checksum, table driven."""

POLYNOMIAL = 0xEDB88320  # reflected form of 0x04C11DB7
MASK = 0xFFFFFFFF


def _build_table() -> tuple[int, ...]:
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            c = (c >> 1) ^ POLYNOMIAL if c & 1 else c >> 1
        table.append(c)
    return tuple(table)


# Built once at import, read-only afterwards.
CRC_TABLE: tuple[int, ...] = _build_table()


def crc32(data: bytes | bytearray | memoryview) -> int:
    """Return the CRC-32 of ``data`` as an unsigned 32-bit int.

    Matches ``zlib.crc32`` / ``binascii.crc32`` bit for bit. Empty input gives 0.
    """
    table = CRC_TABLE
    crc = MASK
    for byte in bytes(data):
        crc = (crc >> 8) ^ table[(crc ^ byte) & 0xFF]
    return (crc ^ MASK) & MASK
