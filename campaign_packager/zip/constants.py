"""ZIP record signatures, layouts and classic-format limits."""

import struct

# Record signatures ("PK\x03\x04", "PK\x01\x02", "PK\x05\x06")
LOCAL_FILE_HEADER_SIGNATURE = 0x04034B50
CENTRAL_DIR_SIGNATURE = 0x02014B50
END_OF_CENTRAL_DIR_SIGNATURE = 0x06054B50

VERSION = 20  # 2.0, plain stored files
COMPRESSION_STORED = 0

# Little-endian layouts. Sizes are fixed parts only, names follow.
LOCAL_FILE_HEADER = struct.Struct("<IHHHHHIIIHH")
CENTRAL_DIR_HEADER = struct.Struct("<IHHHHHHIIIHHHHHII")
END_OF_CENTRAL_DIR = struct.Struct("<IHHHHIIH")

LOCAL_FILE_HEADER_SIZE = LOCAL_FILE_HEADER.size  # 30
CENTRAL_DIR_HEADER_SIZE = CENTRAL_DIR_HEADER.size  # 46
END_OF_CENTRAL_DIR_SIZE = END_OF_CENTRAL_DIR.size  # 22

# Classic (non ZIP64) field limits
MAX_ENTRIES = 0xFFFF
MAX_NAME_LENGTH = 0xFFFF
MAX_FILE_SIZE = 0xFFFFFFFF
MAX_OFFSET = 0xFFFFFFFF
