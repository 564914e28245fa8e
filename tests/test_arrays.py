import io
import struct

import pytest

from diffurch.arrays import (
    ArrayFormatError,
    flatten,
    load_arrays,
    read_arrays,
    save_arrays,
    shape_of,
    type_char,
    write_arrays,
)


def test_type_chars_follow_format():
    assert type_char(1.5) == "d"
    assert type_char(7) == "i"
    assert type_char(2**40) == "I"
    assert type_char(2**63) == "U"


def test_type_char_rejects_strings():
    with pytest.raises(ArrayFormatError):
        type_char("x")


def test_shape_of_nested():
    assert shape_of([[1, 2, 3], [4, 5, 6]]) == (2, 3)
    assert shape_of(5.0) == ()


def test_shape_of_empty_raises():
    with pytest.raises(ArrayFormatError):
        shape_of([])


def test_flatten_row_major():
    assert flatten([[1, 2], [3, 4]]) == [1, 2, 3, 4]


def test_saved_bytes_layout(tmp_path):
    path = tmp_path / "one.bin"
    save_arrays(path, [1.0])
    expected = (
        struct.pack("<Q", 1)
        + b"d"
        + struct.pack("<Q", 1)
        + struct.pack("<Q", 1)
        + struct.pack("<d", 1.0)
    )
    assert path.read_bytes() == expected


def test_round_trip_several_arrays(tmp_path):
    path = tmp_path / "many.bin"
    ts = [0.0, 0.25, 0.5]
    image = [[1, 2, 3], [4, -5, 6]]
    cube = [[[1.5, 2.5], [3.5, 4.5]], [[5.5, 6.5], [7.5, 8.5]]]
    save_arrays(path, ts, image, cube)
    assert load_arrays(path) == [ts, image, cube]


def test_round_trip_large_integers(tmp_path):
    path = tmp_path / "big.bin"
    values = [1, 2**40, -3]
    save_arrays(path, values)
    assert load_arrays(path) == [values]


def test_write_arrays_has_no_count():
    stream = io.BytesIO()
    write_arrays(stream, [1, 2])
    assert stream.getvalue()[:1] == b"i"


def test_scalar_cannot_be_saved():
    with pytest.raises(ArrayFormatError):
        write_arrays(io.BytesIO(), 3.0)


def test_ragged_array_rejected():
    with pytest.raises(ArrayFormatError):
        write_arrays(io.BytesIO(), [[1, 2], [3]])


def test_truncated_stream_rejected(tmp_path):
    path = tmp_path / "cut.bin"
    save_arrays(path, [1.0, 2.0])
    data = path.read_bytes()[:-4]
    with pytest.raises(ArrayFormatError):
        read_arrays(io.BytesIO(data))


def test_unknown_type_rejected():
    data = struct.pack("<Q", 1) + b"F" + struct.pack("<QQ", 1, 1) + bytes(16)
    with pytest.raises(ArrayFormatError):
        read_arrays(io.BytesIO(data))