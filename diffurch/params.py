"""Reading named parameters from JSON and addressing parameters by name.

A class exposes its parameters either through a ``param_names`` tuple of
attribute names, accepted positionally by its constructor, or by being a
dataclass, whose fields are then taken in order.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable, Mapping, Sequence


class ParameterError(KeyError):
    """Raised when a parameter is missing, unknown or cannot be converted."""


def _as_mapping(params) -> Mapping:
    if isinstance(params, (str, bytes)):
        params = json.loads(params)
    if not isinstance(params, Mapping):
        raise ParameterError("parameters must be a JSON object")
    return params


def _convert(params: Mapping, name: str, cast: Callable):
    try:
        raw = params[name]
    except KeyError:
        raise ParameterError(f"missing parameter {name!r}") from None
    try:
        return cast(raw)
    except (TypeError, ValueError) as error:
        raise ParameterError(f"parameter {name!r} cannot be converted: {error}") from None


def json_unpack(params, *args: str, cast: Callable = float) -> tuple:
    """Return the named values of a JSON object, each converted by ``cast``."""
    mapping = _as_mapping(params)
    return tuple(_convert(mapping, name, cast) for name in args)


def json_unpack_typed(params, names: Sequence[str], casts: Sequence[Callable]) -> tuple:
    """Return the named values, each converted by the cast at the same position."""
    if len(names) != len(casts):
        raise ValueError("names and casts must have the same length")
    mapping = _as_mapping(params)
    return tuple(_convert(mapping, name, cast) for name, cast in zip(names, casts))


def has_param_names(cls) -> bool:
    """Tell whether a class declares its parameter names."""
    return hasattr(cls, "param_names") or dataclasses.is_dataclass(cls)


def param_names(cls) -> tuple[str, ...]:
    """Return the parameter names of a class (or of an instance's class)."""
    names = getattr(cls, "param_names", None)
    if names is not None:
        return tuple(names)
    if dataclasses.is_dataclass(cls):
        return tuple(field.name for field in dataclasses.fields(cls))
    raise ParameterError(f"{getattr(cls, '__name__', cls)!r} declares no parameter names")


def param_index(name: str, cls) -> int:
    """Return the position of a parameter, or -1 if the class has no such one."""
    names = param_names(cls)
    return names.index(name) if name in names else -1


def _require(obj, name: str) -> None:
    if param_index(name, obj) == -1:
        raise ParameterError(f"unknown parameter {name!r}")


def get_param(obj, name: str):
    """Return the value of the named parameter of ``obj``."""
    _require(obj, name)
    return getattr(obj, name)


def set_param(obj, name: str, value) -> None:
    """Set the named parameter of ``obj``."""
    _require(obj, name)
    setattr(obj, name, value)


def from_json(cls, params):
    """Build an instance of ``cls`` from the real-valued parameters in a JSON object."""
    return cls(*json_unpack(params, *param_names(cls)))