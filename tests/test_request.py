import dataclasses

import pytest

from binpatch.constants import DataType
from binpatch.errors import UsageError
from binpatch.request import PatchRequest


def test_defaults():
    request = PatchRequest(file_path="disk.img", raw_data="1")
    assert request.offset == 0
    assert request.data_type == DataType.BYTE
    assert request.length == 1
    assert request.pad_value == 0


def test_fields_are_masked():
    request = PatchRequest(file_path="disk.img", offset=-1, length=-1, pad_value=0x12E, raw_data="1")
    assert request.offset == 2 ** 64 - 1
    assert request.length == 2 ** 64 - 1
    assert request.pad_value == 0x2E


def test_request_is_immutable():
    request = PatchRequest(file_path="disk.img", raw_data="1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.offset = 5


@pytest.mark.parametrize("file_path, raw_data, message", [
    (None, "1", "No binary file supplied."),
    ("", "1", "No binary file supplied."),
    ("disk.img", None, "No data supplied."),
    ("disk.img", "", "No data supplied."),
])
def test_validate_rejects_missing_fields(file_path, raw_data, message):
    request = PatchRequest(file_path=file_path, raw_data=raw_data)
    with pytest.raises(UsageError, match=message):
        request.validate()


def test_validate_accepts_complete_request():
    PatchRequest(file_path="disk.img", raw_data="0").validate()
