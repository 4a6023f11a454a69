import pytest

from fontcraft.file_type import FileType


def test_single_is_not_a_collection():
    single = FileType.single()
    assert not single.is_collection()
    assert single.font_count is None
    assert single == FileType()


def test_collection_keeps_count():
    collection = FileType.collection(2)
    assert collection.is_collection()
    assert collection.font_count == 2


def test_collection_and_single_differ():
    assert FileType.collection(1) != FileType.single()
    assert FileType.collection(3) == FileType.collection(3)
    assert FileType.collection(3) != FileType.collection(4)


@pytest.mark.parametrize("count", [-1, 0x1_0000_0000])
def test_count_out_of_range(count):
    with pytest.raises(ValueError):
        FileType.collection(count)


@pytest.mark.parametrize("count", [1.5, "2", True])
def test_count_must_be_integer(count):
    with pytest.raises(TypeError):
        FileType.collection(count)