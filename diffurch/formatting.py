"""Readable text for nested values and traced function calls."""

from __future__ import annotations

from collections.abc import Callable


def format_value(value) -> str:
    """Format lists as ``[a, b]`` and tuples as ``(a, b)``, recursively."""
    if isinstance(value, list):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    if isinstance(value, tuple):
        return "(" + ", ".join(format_value(item) for item in value) + ")"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def describe_args(*args) -> str:
    """Describe each argument as ``type = value;`` followed by three spaces."""
    return "".join(f"{type(arg).__name__} = {format_value(arg)};   " for arg in args)


def describe_types(*args) -> str:
    """Describe each argument's type followed by ``;`` and three spaces."""
    return "".join(f"{type(arg).__name__};   " for arg in args)


def verbose(f: Callable, *args, **kwargs):
    """Print the call of ``f`` with its arguments, then return its result."""
    name = getattr(f, "__name__", type(f).__name__)
    described = describe_args(*args, *kwargs.values())
    print(f"call {name} with args {described}")
    return f(*args, **kwargs)