import glob
import os
import re
from pathlib import Path
from typing import Optional

from binpatch.constants import TYPE_TAGS, DataType
from binpatch.errors import PathExpansionError

_WILDCARD = re.compile(r"[*?[]")
_ESCAPE = re.compile(r"\\([rn])")
_ESCAPE_MAP = {"r": "\r", "n": "\n"}

# --- Path Expansion ---
def resolve_path(path: Optional[str]) -> Path:
    """
    Expands '~', '~user' and environment variables in path. A path containing
    wildcards resolves to its first match in sorted order; a pattern matching
    nothing is an error. Plain paths are returned whether they exist or not.
    """
    if not path:
        raise PathExpansionError(path)

    try:
        home_expanded = Path(path).expanduser()
    except RuntimeError as e:
        raise PathExpansionError(path) from e

    expanded = os.path.expandvars(str(home_expanded))
    if not _WILDCARD.search(expanded):
        return Path(expanded)

    matches = sorted(glob.glob(expanded))
    if not matches:
        raise PathExpansionError(path)
    return Path(matches[0])

# --- Escape Processing ---
def unescape(text: str) -> str:
    # Single left-to-right pass: a produced control character is never rescanned.
    return _ESCAPE.sub(lambda m: _ESCAPE_MAP[m.group(1)], text)

# --- Type Tags ---
def data_type_for(tag: Optional[str]) -> DataType:
    return TYPE_TAGS.get(tag, DataType.BYTE)
