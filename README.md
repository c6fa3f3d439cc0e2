# termsheet

Building blocks for a terminal spreadsheet: cell references, viewport
arithmetic, number and date recognition and formatting, RGB colours, and a
library of formula functions (trigonometry, arithmetic, statistics, text,
logic and dates). It needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Cell references and screen size (`termsheet.util`)

```python
from termsheet.util import column_name, column_number, parse_cell_ref, format_cell_ref, min_max

column_name(28)          # "AB"
column_number("AB")      # 28  (0 for anything that is not upper-case letters)
parse_cell_ref("b12")    # (12, 2)  -> (row, col)
format_cell_ref(12, 2)   # "B12"
min_max(7, 3)            # (3, 7)
```

`terminal_size()` returns the terminal's `(width, height)`, falling back to
`(80, 24)`; `viewport_size()` turns that into how many `(columns, rows)` of
cells fit. `pretty_path(full, mode)` shows a path relative to the home
directory with ` > ` between its parts, leaving off the file name when
`mode` is `"recentfiles"`.

The module also holds the application's defaults, such as `MAX_ROWS`,
`MAX_COLS`, `DEFAULT_CELL_DECIMAL_POINTS`, `TYPE_OPTIONS`, `ALIGN_OPTIONS`
and `DATETIME_FORMATS`.

## Viewport (`termsheet.viewport`)

```python
from termsheet.viewport import Viewport

vp = Viewport(top_row=10, left_col=5, view_rows=40, view_cols=10)
vp.to_absolute(1, 1)     # (10, 5)
vp.to_relative(10, 5)    # (1, 1)
vp.is_visible(12, 7)     # True
```

## Numbers and dates (`termsheet.parsing`)

```python
from termsheet.parsing import (
    format_with_commas, is_number, is_valid_datetime, parse_datetime, format_datetime,
)

format_with_commas(-1234567.891, ",", ".", 2, "$")      # "-1,234,567.89"
is_number("$42.5", "$")                                 # True
is_valid_datetime("14:30")                              # (True, "time")
format_datetime(parse_datetime("Jan 2, 2006"), "date")  # "2006-01-02"
```

`parse_datetime` accepts layouts such as `2006-01-02 15:04:05`,
`01/02/2006`, `2 Jan 2006`, `3:04 PM` and others; it returns a `datetime`,
or a `time` for a time of day alone, and raises `ValueError` otherwise.
The financial sign passed to `format_with_commas` is not part of its output.

## Colours (`termsheet.colour`)

```python
from termsheet.colour import ColorRGB, COLOR_OPTIONS, parse_hex_color

parse_hex_color("#ffa500").hex()     # "#FFA500"
ColorRGB(255, 0, 0).to_excel()       # "FF0000"
COLOR_OPTIONS["Gray"]                # ColorRGB(r=128, g=128, b=128)
```

`parse_hex_color` raises `ValueError` for anything but six hex digits.

## Formula functions (`termsheet.functions`)

Each category module returns a dictionary from formula name to a callable
that takes the formula arguments positionally:

- `trig.trig_functions()`: `SIN`, `COS`, `TAN`, `CTAN`, their inverses,
  hyperbolic functions, `RAD`, `DEG`, ...
- `arithmetic.arithmetic_functions()`: `EXP`, `LOG`, `SQRT`, `POW`,
  `ROUND`, `ROUNDTO`, `MIN`, `MAX`, `CLAMP`, `GAMMA`, `J0`, `YN`, bit
  operations, `GCD`, `LCM`, constants `PI`, `E`, `PHI`, `INF`, `NAN`, ...
- `statistical.statistical_functions()`: `AVG`, `COUNT`, `SUM`, `PRODUCT`,
  `CHOOSE`, `ISNUMBER`, `ISTEXT`, `ISBLANK`
- `text.string_functions()`: `LEFT`, `RIGHT`, `MID`, `UPPER`, `LOWER`,
  `PROPER`, `TRIM`, `FIND`, `SUBSTITUTE`, `LEN`, `CONCAT`
- `dates.datetime_functions()`: `NOW`, `TODAY`, `DATE`, `TIME`, `YEAR`,
  `MONTH`, `DAY`, `HOUR`, `MINUTE`, `SECOND`, `WEEKDAY`, `DATEDIFF`, `DATEADD`
- `logical.logical_functions()`: `IF`, `IFS`, `AND`, `OR`, `NOT`, `XOR`

`registry.all_functions()` merges them all into one fresh dictionary.
Wrong argument counts and unusable arguments raise
`termsheet.functions.helpers.FormulaError`, a subclass of `ValueError`.

```python
from termsheet.functions.registry import all_functions

funcs = all_functions()
funcs["SUM"](1.0, 2.0, 3.0)          # 6.0
funcs["LEFT"]("spreadsheet", 6.0)    # "spread"
funcs["DATEADD"]("2024-02-28", 2.0)  # "2024-03-01"
```

`termsheet.functions.helpers` also offers the conversions the functions use:
`to_string`, `to_float` and `validate_args`.

## What this package does not do

This is a library of parts, not a spreadsheet application. It has no
interactive screen or command to start one, does not read or write workbook
files, and does not parse or evaluate formula expressions: it supplies the
functions a formula evaluator would call.