"""Small vector helpers over plain sequences and scalars."""

from __future__ import annotations

import math
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import product
from numbers import Number


def _is_scalar(value) -> bool:
    return isinstance(value, Number)


def _check_same_length(lhs: Sequence, rhs: Sequence) -> None:
    if len(lhs) != len(rhs):
        raise ValueError(f"length mismatch: {len(lhs)} != {len(rhs)}")


def cartesian_product(*args: Sequence) -> list[tuple]:
    """Return all combinations of one element from each sequence.

    The first sequence varies fastest.
    """
    return [tuple(reversed(combo)) for combo in product(*reversed(args))]


def add(lhs, rhs):
    """Element-wise sum of two vectors (or of two scalars)."""
    if _is_scalar(lhs) and _is_scalar(rhs):
        return lhs + rhs
    _check_same_length(lhs, rhs)
    return [a + b for a, b in zip(lhs, rhs)]


def sub(lhs, rhs):
    """Element-wise difference of two vectors (or of two scalars)."""
    if _is_scalar(lhs) and _is_scalar(rhs):
        return lhs - rhs
    _check_same_length(lhs, rhs)
    return [a - b for a, b in zip(lhs, rhs)]


def scale(vec, factor):
    """Multiply a vector (or a scalar) by a scalar."""
    if _is_scalar(vec):
        return vec * factor
    return [a * factor for a in vec]


def divide(vec, divisor):
    """Divide a vector (or a scalar) by a scalar."""
    return scale(vec, 1 / divisor)


def dot(lhs, rhs):
    """Dot product of two vectors of equal length."""
    if _is_scalar(lhs) and _is_scalar(rhs):
        return lhs * rhs
    _check_same_length(lhs, rhs)
    return sum((a * b for a, b in zip(lhs, rhs)), 0)


def concatenate(first: Iterable, second: Iterable) -> list:
    """Join two vectors into one."""
    return [*first, *second]


def norm(vec) -> float:
    """Euclidean norm of a vector, or the absolute value of a scalar."""
    if _is_scalar(vec):
        return abs(vec)
    return math.sqrt(dot(vec, vec))


def copy_into(source, target: MutableSequence, offset: int = 0) -> None:
    """Write ``source`` (a scalar or a vector) into ``target`` starting at ``offset``."""
    values = [source] if _is_scalar(source) else list(source)
    if offset < 0 or offset + len(values) > len(target):
        raise IndexError("source does not fit into target at this offset")
    target[offset:offset + len(values)] = values


def append_row(columns: Sequence[MutableSequence], values: Sequence) -> None:
    """Append each of ``values`` to the column with the same position."""
    _check_same_length(columns, values)
    for column, value in zip(columns, values):
        column.append(value)


def filter_by_type(items: Iterable, base: type) -> tuple:
    """Return the items that are instances of ``base``, in their order."""
    return tuple(item for item in items if isinstance(item, base))