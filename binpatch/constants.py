from enum import IntEnum

# --- Tool Identity ---
TOOL_NAME = "binpatch"
VERSION = "0.1"
COPYRIGHT = "Copyright (c) 2019 Tom Hancocks"
BANNER = f"{TOOL_NAME} v{VERSION} -- {COPYRIGHT}"

# --- Exit Codes ---
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_OPEN_FAILED = 2
EXIT_WRITE_MISMATCH = 3

# --- Data Types ---
class DataType(IntEnum):
    """Payload kind. Numeric members carry their width in bytes."""
    STRING = 0
    BYTE = 1
    WORD = 2
    DWORD = 4
    QWORD = 8

# Anything not listed here falls back to a single byte.
TYPE_TAGS = {
    "dw": DataType.WORD,
    "dd": DataType.DWORD,
    "dq": DataType.QWORD,
    "str": DataType.STRING,
}

# --- Defaults ---
DEFAULT_OFFSET = 0
DEFAULT_TYPE_TAG = "db"
DEFAULT_LENGTH = 1
DEFAULT_PAD = 0

# --- Masks ---
UINT64_MASK = 0xFFFFFFFFFFFFFFFF
UINT8_MASK = 0xFF
