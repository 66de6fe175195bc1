# taskbench

A collection of small, independent utilities. It uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

### `taskbench.calculator`

`Converter.to_rpn(infix)` turns infix arithmetic (`+ - * /`, parentheses,
decimal numbers, whitespace) into a list of reverse Polish tokens: numbers as
floats and operators as one-character strings. Any other symbol raises
`ValueError("Invalid param ...")` naming the unknown symbols.

`Calculator.calculate(infix_notation)` evaluates such an expression and returns
a float. A leading minus on a single value negates it. Division by zero gives
infinity or NaN and does not raise an error.

```python
from taskbench.calculator import Calculator

Calculator().calculate("2+3*5-2*(2+3)")   # 7.0
Calculator().calculate("2.5+3.5*2")       # 9.5
Calculator().calculate("1+3+abc")         # raises ValueError
```

### `taskbench.bits`

`BitReader` (`read_bit`, `read_byte`) and `BitWriter` (`write_bit`,
`write_byte`, `flush`) read and write single bits, most significant bit first,
over binary streams. `read_bit` raises `EOFError` at the end of the stream.
`flush` writes the pending byte with zero padding.

### `taskbench.huffman`

Huffman coding of files. The encoded file holds the code tree in pre-order,
padded to a whole byte. The code of each input byte follows as the ASCII
characters `0` and `1`, and the code of an end marker closes the data.

- `HuffmanCode.encode(file_in, file_out)` and `HuffmanCode.decode(file_in, file_out)`
  do the whole job. They delegate to `HuffmanEncoder` and `HuffmanDecoder`.
- The building blocks are also public: `Node`, `build_frequency_table`,
  `build_tree`, `code_table`, `iter_symbols`, `encode_tree` and `decode_tree`.

Because the data is written as one character per bit, an encoded file is
usually larger than its input.

### `taskbench.commander`

`Commander.read_stream(stream)` reads lines of the form `encode <input> <output>`
or `decode <input> <output>` and runs them with `HuffmanCode`. An unknown
command prints `wrong command` to standard error. Reading stops at the first
line with fewer than three space-separated words. `split_string(text, delim)`
splits on every occurrence of the delimiter and keeps empty fields.

### `taskbench.linked_list`

`LinkedList` is a doubly linked list of strings, made of `ListNode` items. Each
node has an extra `rand` link that can point to any node in the list.

- `add_tail`, `link_next_as_random` and `describe` build and show the list.
- `len()` and iteration are supported.
- `serialize(stream)` and `deserialize(stream)` use a little-endian binary form
  that keeps the `rand` links. `deserialize` requires an empty list.

### `taskbench.sequences`

This module holds small routines:

- `binary_digits` and `to_binary` render numbers in binary.
- `remove_duplicates` collapses runs of equal adjacent characters.
- `recursive_sum`, `recursive_count` and `recursive_max` work over iterables.
- `larger(a, b)` returns the larger value as a float.
- `lower_bound` and `upper_bound` search sorted sequences.

### `taskbench.expression`

`evaluate(expression)` evaluates expressions built from single digits, the
operators `+ - * /` and parenthesised operands. Spaces and unknown symbols
raise `ValueError`. `is_number(symbol)` tests whether a symbol is a single digit.

### `taskbench.traffic`

A crossroads simulation with these parts:

- `Rect` is an axis-aligned rectangle with `intersects`.
- `Direction` gives a car's heading.
- `Car` is the base class of `GasCar`, `ElectroCar` and `HybridCar`. Each move
  uses up fuel or charge.
- `spawn_car`, `spawn_car_from_side` and `safe_spawn` create cars from a
  `random.Random`.
- `step(cars)` runs one round, in which cars give way to each other.
- `run(cars, steps)` runs a fixed number of rounds.

### `taskbench.json_table`

`JsonTableModel` is a two-column table of city and latitude, taken from a JSON
array of user records.

- `set_json_data` adds the records.
- `row_count` and `column_count` give the table size.
- `data(row, column, role)` returns cell text or a colour name, chosen by
  `Role`. In the latitude column the colour is `"green"` for values of zero or
  more and `"red"` otherwise. The first column is always `"white"`.
- `role_names` returns the role names.

`extract_json_body(response)` parses the JSON body of a raw HTTP response.
`fetch_users(host, port)` requests `/users` over plain HTTP/1.0 and returns the
parsed body.

### `taskbench.enums`, `taskbench.errors`, `taskbench.format`

These modules hold the spreadsheet format primitives.

- `taskbench.enums` defines the cell value enumerations. `str(CellValueError.DIV0)`
  is `"#DIV/0!"`.
- `taskbench.errors` defines the exception types, all derived from `BooxError`.
- `taskbench.format` provides `Field`, `Border`, `Format` and `FormatChanges`.
  - A format holds optional field values with defaults.
  - It supports `get`, `get_or_default`, `intersect`, `unite`, `apply` and
    `as_changes`.
  - The factories `cell_format()`, `font_format()`, `fill_format()` and
    `border_format()` create formats with preset field sets.

## Command line

Evaluate an expression given as arguments:

```
taskbench-calc "2+3*5-2*(2+3)"
```

Without arguments it evaluates a built-in sample expression. That expression
contains unknown symbols, so the command prints the error message.

Encode or decode files with commands read from standard input:

```
taskbench-huffman
```

Then type, for example:

```
encode notes.txt notes.huf
decode notes.huf notes.out
```

## What it does not do

- The table model has no graphical view. Displaying it is up to the caller.
- The traffic simulation prints nothing and draws nothing. It only updates the
  car objects, and the caller decides how many rounds to run.
- The spreadsheet modules contain only enumerations, errors and cell formats.
  There are no workbooks, worksheets, cells, formulas or file reading and writing.