from dataclasses import dataclass
from pathlib import Path

import pytest

from fontcraft.handle import Handle, MemoryHandle, NativeHandle, PathHandle


@dataclass
class _Native:
    name: str


class _FontWithNative:
    def __init__(self, name):
        self._native = _Native(name)

    def native_font(self):
        return self._native


class _RecordingLoader:
    @classmethod
    def from_handle(cls, handle):
        return ("loaded", handle)


def test_from_path_builds_path_handle():
    handle = Handle.from_path("fonts/a.ttf", 2)
    assert isinstance(handle, PathHandle)
    assert handle.path == Path("fonts/a.ttf")
    assert handle.font_index == 2


def test_from_memory_copies_bytes():
    data = bytearray(b"abc")
    handle = Handle.from_memory(data, 0)
    data[0] = 0
    assert isinstance(handle, MemoryHandle)
    assert handle.data == b"abc"
    assert handle.font_index == 0


def test_from_native_wraps_native_font():
    font = _FontWithNative("x")
    handle = Handle.from_native(font)
    assert isinstance(handle, NativeHandle)
    assert handle.native_as(_Native) is font.native_font()


def test_native_as_wrong_type_is_none():
    handle = NativeHandle(_Native("x"))
    assert handle.native_as(int) is None


def test_native_as_on_path_handle_is_none():
    assert Handle.from_path("a.ttf", 0).native_as(_Native) is None


def test_load_delegates_to_loader():
    handle = Handle.from_memory(b"data", 1)
    assert handle.load(_RecordingLoader) == ("loaded", handle)


@pytest.mark.parametrize("index", [-1, 0x100000000])
def test_font_index_out_of_range(index):
    with pytest.raises(ValueError):
        Handle.from_path("a.ttf", index)


def test_font_index_must_be_int():
    with pytest.raises(TypeError):
        Handle.from_memory(b"", 1.5)


def test_handles_compare_by_value():
    assert Handle.from_path("a.ttf", 0) == Handle.from_path(Path("a.ttf"), 0)
    assert Handle.from_memory(b"x", 0) != Handle.from_memory(b"x", 1)