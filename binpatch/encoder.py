import os
import string

from binpatch.constants import UINT64_MASK, DataType
from binpatch.errors import PayloadSizeError
from binpatch.request import PatchRequest
from binpatch.utils import unescape

_DIGITS = string.digits + string.ascii_lowercase


def parse_integer(text: str, base: int = 10) -> int:
    """
    Parses the leading integer in text the way C's strtoll does: leading
    whitespace and an optional sign are accepted, parsing stops at the first
    character that is not a digit in base, and text without digits is 0.

    base=0 reads a '0x'-prefixed value as hex and anything else as
    decimal. A leading zero does not select octal.
    """
    s = text.lstrip()
    negative = False
    if s[:1] in ("+", "-"):
        negative = s[0] == "-"
        s = s[1:]

    has_hex_prefix = len(s) > 2 and s[:2].lower() == "0x" and s[2] in string.hexdigits
    if base == 0:
        base = 16 if has_hex_prefix else 10
    if base == 16 and has_hex_prefix:
        s = s[2:]

    valid = _DIGITS[:base]
    end = 0
    while end < len(s) and s[end].lower() in valid:
        end += 1

    value = int(s[:end], base) if end else 0
    return -value if negative else value


def encode_integer(value: int, width: int) -> bytes:
    # Values wider than the lane count are truncated to their low bytes.
    value &= UINT64_MASK
    return bytes((value >> (8 * lane)) & 0xFF for lane in range(width))


def encode_string(text: str, length: int, pad_value: int) -> bytes:
    data = os.fsencode(unescape(text))
    try:
        buffer = bytearray([pad_value]) * length
    except (OverflowError, MemoryError) as e:
        raise PayloadSizeError(length) from e
    count = min(len(data), length)
    buffer[:count] = data[:count]
    return bytes(buffer)


def encode_payload(request: PatchRequest) -> bytes:
    if request.data_type == DataType.STRING:
        return encode_string(request.raw_data, request.length, request.pad_value)

    value = parse_integer(unescape(request.raw_data))
    return encode_integer(value, int(request.data_type))
