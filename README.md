# ftlib

Small, dependency-free helpers for ASCII character tests, byte buffers,
string handling, a singly linked list, a chunked line reader and a compact
printf-style formatter. Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `ftlib.chars`

ASCII character tests and case mapping. Single-character functions accept a
one-character string or an integer code point; a longer string raises
`ValueError`, another type raises `TypeError`.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` (0..127), `is_print`
  (32..126), `is_space` (space, `\t`, `\n`, `\r`, `\f`, `\v`).
- `is_number(s)` and `is_only_whitespace(s)`: true when every character
  qualifies; an empty string counts as true.
- `has_spaces_on_sides(s)`: true when `s` starts or ends with whitespace.
- `to_upper(c)`, `to_lower(c)`: change ASCII letters only and return the same
  kind (str or int) they were given. `to_lowercase(s)` lower-cases a string.

### `ftlib.memory`

Operations on `bytearray` (or writable `memoryview`) buffers. A negative
length, or one larger than a buffer, raises `ValueError`.

- `mem_set(buf, value, length)` fills with `value & 0xFF`; `bzero(buf, length)`
  fills with zeros. Both return the buffer.
- `calloc(count, size)` returns a zero-filled `bytearray` of `count * size`
  bytes.
- `mem_copy(dst, src, n)` and `mem_move(dst, src, n)` copy `n` bytes to the
  start of `dst`; `mem_move` is safe for overlapping views.
- `mem_find(buf, value, n)` returns the index of the first matching byte, or
  `None`.
- `mem_compare(a, b, n)` returns the difference of the first differing bytes,
  or 0.

### `ftlib.text`

- `atoi(s)`: skips leading whitespace, reads one optional sign and the digits
  that follow; no digits gives 0.
- `itoa(n)`: decimal text of an integer.
- `split(s, delimiters)`: splits on any delimiter character, dropping empty
  pieces.
- `trim(s, charset)`, and `trim_keep_space(s, charset)`, which also keeps a
  single space directly bordering the kept text.
- `substr(s, start, length)`.
- `find_bounded(haystack, needle, length)`: index of `needle` lying wholly
  within the first `length` characters, or `None`; an empty needle gives 0.
- `compare(a, b)` and `compare_n(a, b, n)`: the difference of the first
  differing characters, or 0.
- `find_char(s, c)` and `rfind_char(s, c)`: index of the first or last `c`, or
  `None`; `"\0"` is found at `len(s)`.

### `ftlib.strutil`

- `length(s)` and `duplicate(s)`: `None` is treated as the empty string.
- `copy_bounded(src, size)` returns `(copied_text, len(src))`, copying at most
  `size - 1` characters.
- `concat_bounded(dst, src, size)` returns `(text, would_be_length)`; when
  `dst` already fills the buffer nothing is appended and the length returned
  is `len(src) + size`.
- `join(a, b)`, and `concat(*args)`, which stops at the first `None` after
  the first argument.
- `map_indexed(s, func)` builds a string from `func(index, char)`;
  `for_each_indexed(s, func)` replaces a character wherever `func` returns a
  value other than `None`.

### `ftlib.line_reader`

`LineReader(stream, buffer_size=4)` reads a text or binary stream
`buffer_size` units at a time. `read_line()` returns the next line with its
newline (the last line may lack one), or `None` at the end; the reader is
also iterable. `read_lines(stream, buffer_size=4)` returns every remaining
line as a list.

### `ftlib.linked_list`

`LinkedList(items=None)` keeps values in insertion order and supports
`len()` and iteration, plus `push_front`, `push_back`, `last()` (or `None`),
`clear(delete=None)`, `for_each(func)`, `map(func, delete=None)` (returns a
new list; if `func` raises, the values made so far go to `delete` and the
error propagates) and `remove(key, delete=None)` (removes the first equal
value and returns whether one was removed).

### `ftlib.printf`

`format(fmt, *args)` returns the formatted text; `printf` writes it to
standard output and `printf_fd(stream, fmt, *args)` to a given stream, both
returning its length. Conversions:

| Conversion | Output |
|---|---|
| `%c` | a character (string or integer code) |
| `%s` | a string; `None` prints `(null)` |
| `%d`, `%i` | signed 32-bit decimal |
| `%u` | unsigned 32-bit decimal |
| `%x`, `%X` | unsigned 32-bit hex, lower or upper case |
| `%p` | `0x` and the 64-bit value in lower-case hex |
| `%%` | a percent sign |

Other characters after `%` print nothing and use no argument; a trailing `%`
ends the output. Too few arguments raise `TypeError`.

Also: `number_in_base(n, base)` and `base_length(n, base)` for non-negative
integers written with the digits of `base`, and `put_char`, `put_str`,
`put_endl`, `put_number`, which write to a stream (standard output by
default).

## Example

```python
import io

from ftlib.line_reader import read_lines
from ftlib.linked_list import LinkedList
from ftlib.printf import format
from ftlib.text import atoi, split

split("  NO ./north.xpm ", " ")       # ['NO', './north.xpm']
atoi("  -42abc")                      # -42
format("%d%% of %s", 50, "tiles")     # '50% of tiles'

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items)                           # [0, 1, 2, 3]

read_lines(io.BytesIO(b"a\nb"), 4)    # [b'a\n', b'b']
```

## What it does not do

This is a library only: it has no command-line program, and it does not read
or check any particular file format of its own.