"""Binary storage of several numeric n-dimensional arrays in one file.

File layout (little-endian):

* ``uint64``: number of arrays;
* for every array:

  * one byte: element type (``'d'`` double, ``'f'`` float, ``'c'``/``'b'``
    signed/unsigned byte, ``'i'``/``'u'`` 32-bit int, ``'I'``/``'U'`` 64-bit int);
  * ``uint64``: dimension;
  * ``uint64`` times dimension: shape;
  * the elements in row-major order.
"""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator
from itertools import islice
from os import PathLike
from typing import BinaryIO

_ELEMENT_FORMATS = {
    "c": "b",
    "b": "B",
    "i": "i",
    "u": "I",
    "I": "q",
    "U": "Q",
    "f": "f",
    "d": "d",
}

_INTEGER_RANKS = {"i": 0, "I": 1, "U": 2}
_INT32 = (-(2**31), 2**31 - 1)
_INT64 = (-(2**63), 2**63 - 1)
_UINT64_MAX = 2**64 - 1


class ArrayFormatError(ValueError):
    """Raised when an array cannot be written or a file cannot be read."""


def _is_array(value) -> bool:
    return isinstance(value, (list, tuple))


def type_char(value) -> str:
    """Return the type character under which a scalar ``value`` is stored."""
    if isinstance(value, bool):
        raise ArrayFormatError("boolean values have no storage type")
    if isinstance(value, float):
        return "d"
    if isinstance(value, int):
        if _INT32[0] <= value <= _INT32[1]:
            return "i"
        if _INT64[0] <= value <= _INT64[1]:
            return "I"
        if 0 <= value <= _UINT64_MAX:
            return "U"
        raise ArrayFormatError(f"integer {value} does not fit in 64 bits")
    raise ArrayFormatError(f"values of type {type(value).__name__} cannot be stored")


def shape_of(array) -> tuple[int, ...]:
    """Return the shape of a nested list; a scalar has the empty shape."""
    if not _is_array(array):
        return ()
    if not array:
        raise ArrayFormatError("Array must not be empty.")
    return (len(array), *shape_of(array[0]))


def _iter_flat(array) -> Iterator:
    for element in array:
        if _is_array(element):
            yield from _iter_flat(element)
        else:
            yield element


def flatten(array) -> list:
    """Return the scalars of a nested list in row-major order."""
    if not _is_array(array):
        return [array]
    return list(_iter_flat(array))


def _array_type_char(values: list) -> str:
    chars = {type_char(value) for value in values}
    if "d" in chars:
        return "d"
    widest = max(chars, key=_INTEGER_RANKS.__getitem__)
    if widest == "U" and min(values) < 0:
        raise ArrayFormatError("array mixes negative and unsigned 64-bit values")
    return widest


def _write_array(stream: BinaryIO, array) -> None:
    shape = shape_of(array)
    if not shape:
        raise ArrayFormatError("Dimension must be at least 1")
    data = flatten(array)
    if len(data) != math.prod(shape) or any(_is_array(v) for v in data):
        raise ArrayFormatError("array is ragged")
    char = _array_type_char(data)
    stream.write(struct.pack("<cQ", char.encode("ascii"), len(shape)))
    stream.write(struct.pack(f"<{len(shape)}Q", *shape))
    stream.write(struct.pack(f"<{len(data)}{_ELEMENT_FORMATS[char]}", *data))


def write_arrays(stream: BinaryIO, *args) -> None:
    """Write the given arrays one after another, without the leading count."""
    for array in args:
        _write_array(stream, array)


def save_arrays(filename: str | PathLike, *args) -> None:
    """Save the given arrays, preceded by their number, into ``filename``."""
    with open(filename, "wb") as stream:
        stream.write(struct.pack("<Q", len(args)))
        write_arrays(stream, *args)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise ArrayFormatError("unexpected end of data")
    return data


def _build(values: Iterator, shape: tuple[int, ...]) -> list:
    if len(shape) == 1:
        return list(islice(values, shape[0]))
    return [_build(values, shape[1:]) for _ in range(shape[0])]


def _read_array(stream: BinaryIO) -> list:
    char = _read_exact(stream, 1).decode("latin-1")
    element_format = _ELEMENT_FORMATS.get(char)
    if element_format is None:
        raise ArrayFormatError(f"unsupported element type {char!r}")
    (dimension,) = struct.unpack("<Q", _read_exact(stream, 8))
    if dimension == 0:
        raise ArrayFormatError("Dimension must be at least 1")
    shape = struct.unpack(f"<{dimension}Q", _read_exact(stream, 8 * dimension))
    count = math.prod(shape)
    layout = f"<{count}{element_format}"
    data = struct.unpack(layout, _read_exact(stream, struct.calcsize(layout)))
    return _build(iter(data), shape)


def read_arrays(stream: BinaryIO) -> list[list]:
    """Read every array of a stream written by :func:`save_arrays`."""
    (number,) = struct.unpack("<Q", _read_exact(stream, 8))
    return [_read_array(stream) for _ in range(number)]


def load_arrays(filename: str | PathLike) -> list[list]:
    """Load every array stored in ``filename``."""
    with open(filename, "rb") as stream:
        return read_arrays(stream)