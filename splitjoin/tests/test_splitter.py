import os

import pytest

from splitjoin.core import (
    EmptyFileError,
    InvalidInputError,
    NotFoundError,
    part_path,
    plan_by_count,
    split_by_bytes,
    split_into_parts,
)


def sizes(paths):
    return [os.path.getsize(p) for p in paths]


def test_split_into_two_parts(source_file, out_dir):
    src = source_file(1000)
    prefix = str(out_dir / "part")
    parts = split_into_parts(src, 2, prefix)

    assert parts == [part_path(prefix, 0), part_path(prefix, 1)]
    assert parts == [prefix + "_0", prefix + "_1"]
    assert sizes(parts) == [500, 500]


def test_split_count_mode_sizes_with_remainder(source_file, out_dir):
    src = source_file(1000)
    parts = split_into_parts(src, 3, str(out_dir / "part"))

    assert sizes(parts) == [334, 334, 332]
    assert sizes(parts) == plan_by_count(1000, 3).part_sizes()


def test_parts_hold_contiguous_slices(source_file, out_dir):
    src = source_file(1000)
    with open(src, "rb") as f:
        data = f.read()

    parts = split_by_bytes(src, 300, str(out_dir / "part"))

    offset = 0
    for path in parts:
        with open(path, "rb") as f:
            piece = f.read()
        assert piece == data[offset:offset + len(piece)]
        offset += len(piece)
    assert offset == len(data)


def test_exact_boundary_has_no_empty_trailing_part(source_file, out_dir):
    src = source_file(1000)
    parts = split_by_bytes(src, 250, str(out_dir / "part"))

    assert sizes(parts) == [250, 250, 250, 250]
    assert not os.path.exists(str(out_dir / "part_4"))


def test_chunk_size_of_one_byte(source_file, out_dir):
    src = source_file(37)
    parts = split_by_bytes(src, 1, str(out_dir / "byte"))

    assert len(parts) == os.path.getsize(src)
    assert set(sizes(parts)) == {1}


def test_more_parts_than_bytes_gives_one_byte_parts(source_file, out_dir):
    src = source_file(5)
    parts = split_into_parts(src, 6, str(out_dir / "part"))

    assert len(parts) == 5
    assert set(sizes(parts)) == {1}


def test_ceil_rounding_can_give_fewer_parts(source_file, out_dir):
    src = source_file(10)
    parts = split_into_parts(src, 6, str(out_dir / "part"))

    assert len(parts) == 5
    assert sizes(parts) == [2, 2, 2, 2, 2]


def test_chunk_larger_than_file(source_file, out_dir):
    src = source_file(10)
    parts = split_by_bytes(src, 4096, str(out_dir / "part"))

    assert parts == [str(out_dir / "part_0")]
    assert sizes(parts) == [10]


@pytest.mark.parametrize("buffer_size", [1, 3, 7, 250, 4096])
def test_read_buffer_size_does_not_move_boundaries(source_file, out_dir, buffer_size):
    src = source_file(1000)
    parts = split_by_bytes(src, 249, str(out_dir / f"buf{buffer_size}"), buffer_size=buffer_size)

    assert sizes(parts) == [249, 249, 249, 249, 4]


def test_missing_source_raises_os_not_found(out_dir):
    with pytest.raises(FileNotFoundError) as exc_info:
        split_into_parts("missing.txt", 2, str(out_dir / "part"))

    assert not isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.filename == "missing.txt"


def test_directory_source_is_not_found(tmp_path, out_dir):
    with pytest.raises(NotFoundError, match="File does not exist"):
        split_into_parts(str(tmp_path), 2, str(out_dir / "part"))


def test_empty_source(tmp_path, out_dir):
    empty = tmp_path / "empty.bin"
    empty.write_bytes(b"")

    with pytest.raises(EmptyFileError, match="File is empty"):
        split_into_parts(str(empty), 2, str(out_dir / "part"))
    with pytest.raises(EmptyFileError):
        split_by_bytes(str(empty), 10, str(out_dir / "part"))
    assert os.listdir(out_dir) == []


@pytest.mark.parametrize("number_of_parts", [0, -3])
def test_non_positive_part_count(source_file, out_dir, number_of_parts):
    with pytest.raises(InvalidInputError):
        split_into_parts(source_file(), number_of_parts, str(out_dir / "part"))


@pytest.mark.parametrize("chunk_size", [0, -1])
def test_chunk_less_than_one_byte(source_file, out_dir, chunk_size):
    with pytest.raises(InvalidInputError, match="Chunk is less than 1 byte"):
        split_by_bytes(source_file(), chunk_size, str(out_dir / "part"))
    assert os.listdir(out_dir) == []


def test_write_failure_propagates(source_file, tmp_path):
    src = source_file(100)
    destination = str(tmp_path / "no_such_dir" / "part")

    with pytest.raises(FileNotFoundError):
        split_by_bytes(src, 10, destination)


def test_failure_mid_stream_keeps_finished_parts(source_file, out_dir):
    src = source_file(100)
    prefix = str(out_dir / "p")
    os.mkdir(part_path(prefix, 1))

    with pytest.raises(IsADirectoryError):
        split_by_bytes(src, 10, prefix, buffer_size=7)

    assert sorted(os.listdir(out_dir)) == ["p_0", "p_1"]
    assert os.path.getsize(part_path(prefix, 0)) == 10
    assert os.listdir(part_path(prefix, 1)) == []
