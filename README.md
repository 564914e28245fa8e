# diffurch

Supporting utilities for numerical work on ordinary and delay differential
equations: vector arithmetic on plain sequences, a compact binary format for
storing several n-dimensional arrays, a text progress bar, readable formatting
of nested values, and reading named parameters from JSON.

The package uses only the Python standard library.

## Modules

- `diffurch.vectors`: element-wise arithmetic on lists or scalars
  (`add`, `sub`, `scale`, `divide`, `dot`, `norm`, `concatenate`),
  `copy_into` for writing a value into a list at an offset, `append_row`
  for appending one value to each of several columns, `filter_by_type`,
  and `cartesian_product`, in which the first sequence varies fastest.
  Vectors of different lengths raise `ValueError`.
- `diffurch.arrays`: `save_arrays` / `load_arrays` (and the stream forms
  `write_arrays` / `read_arrays`) for a little-endian binary file holding
  several rectangular nested lists of numbers. Floats are stored as
  doubles, integers as 32- or 64-bit integers. Empty, ragged or unsupported
  arrays raise `ArrayFormatError`. `shape_of`, `flatten` and `type_char`
  are available on their own.
- `diffurch.progress`: `ProgressBar`, a one-line bar of at most 100
  characters with elapsed and estimated total time, and `format_hms`.
  The clock and output stream can be passed in; updates are thread-safe.
- `diffurch.formatting`: `format_value` renders lists as `[a, b]` and
  tuples as `(a, b)`; `describe_args`, `describe_types` and `verbose`
  (which prints a call with its arguments and returns its result).
- `diffurch.params`: `json_unpack` and `json_unpack_typed` read named
  values from a JSON string or mapping; `from_json` builds an object from
  its parameters; `get_param`, `set_param`, `param_index`, `param_names`
  and `has_param_names` address parameters by name. A class declares its
  parameters with a `param_names` tuple or by being a dataclass. Missing,
  unknown or unconvertible parameters raise `ParameterError`.

## Installation

```
pip install .
```

## Examples

Vector arithmetic and a Cartesian product:

```python
from diffurch.vectors import add, norm, cartesian_product

add([1.0, 2.0], [3.0, 4.0])          # [4.0, 6.0]
norm([3.0, 4.0])                      # 5.0
cartesian_product([1, 2], [3, 4])     # [(1, 3), (2, 3), (1, 4), (2, 4)]
```

Saving arrays and reading them back:

```python
from diffurch.arrays import save_arrays, load_arrays

save_arrays("run.bin", [0.0, 0.5, 1.0], [[1, 2], [3, 4]])
ts, grid = load_arrays("run.bin")     # [0.0, 0.5, 1.0], [[1, 2], [3, 4]]
```

Reading parameters from JSON:

```python
from dataclasses import dataclass
from diffurch.params import json_unpack, from_json, get_param, set_param

t_finish, h = json_unpack('{"t_finish": 10, "h": 0.01}', "t_finish", "h")

@dataclass
class Oscillator:
    k: float

osc = from_json(Oscillator, {"k": 3})  # Oscillator(k=3.0)
set_param(osc, "k", 2.0)
get_param(osc, "k")                    # 2.0
```

Showing progress:

```python
from diffurch.progress import ProgressBar

bar = ProgressBar(250)
for _ in range(250):
    bar.increment()
    bar.show()
```

## What the package does not do

It contains no integrators, no model equations and no root-finding or
grid-spacing routines; it provides the supporting pieces around such
computations. It has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```