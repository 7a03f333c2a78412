from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from binpatch.constants import (
    DEFAULT_LENGTH, DEFAULT_OFFSET, DEFAULT_PAD, UINT8_MASK, UINT64_MASK, DataType
)
from binpatch.errors import UsageError


@dataclass(frozen=True)
class PatchRequest:
    """
    A single patch operation, fully resolved before any file is touched.

    offset and length are held as unsigned 64-bit values and pad_value as a
    single byte; wider inputs are reduced to their low bits on construction.
    length only matters for DataType.STRING payloads.
    """
    file_path: Optional[Path] = None
    offset: int = DEFAULT_OFFSET
    data_type: DataType = DataType.BYTE
    length: int = DEFAULT_LENGTH
    pad_value: int = DEFAULT_PAD
    raw_data: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "offset", self.offset & UINT64_MASK)
        object.__setattr__(self, "length", self.length & UINT64_MASK)
        object.__setattr__(self, "pad_value", self.pad_value & UINT8_MASK)
        object.__setattr__(self, "data_type", DataType(self.data_type))

    def validate(self) -> None:
        if not self.file_path:
            raise UsageError("No binary file supplied.")
        if not self.raw_data:
            raise UsageError("No data supplied.")
