from pathlib import Path
from typing import Union

from binpatch.errors import OpenError, WriteMismatchError


def patch_file(file_path: Union[str, Path], offset: int, payload: bytes) -> int:
    """
    Overwrites len(payload) bytes of an existing file starting at offset.

    The file is opened for update and never created or truncated. Seeking
    past the end is allowed; the gap is filled by the platform. The payload
    goes out in one unbuffered write and the returned count must match its
    length. Bytes already written are not rolled back on a mismatch.
    """
    target = Path(file_path)
    try:
        handle = target.open("r+b", buffering=0)
    except OSError as e:
        raise OpenError(target, e.strerror or str(e)) from e

    with handle:
        try:
            handle.seek(offset)
        except (OSError, OverflowError, ValueError) as e:
            raise OpenError(target, f"cannot seek to offset {offset}: {e}") from e

        try:
            written = handle.write(payload) or 0
        except OSError as e:
            raise WriteMismatchError(0, len(payload)) from e

        if written != len(payload):
            raise WriteMismatchError(written, len(payload))

    return written
