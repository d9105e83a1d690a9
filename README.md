# ftkit

A compact library of low-level helpers. It covers ASCII character classification,
byte-buffer operations, C-style string routines, a singly linked list, a buffered
line reader for file descriptors and a minimal `printf`. It has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

The predicates are `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print`.
The case converters are `to_upper` and `to_lower`.

- Each function accepts a one-character string or an integer code.
- The predicates return a `bool`.
- The converters return a value of the same kind as their argument.
- Only ASCII letters are converted. Every other value comes back unchanged.

### `ftkit.memory`

The functions are `memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp` and
`calloc`. They work on `bytes`, `bytearray` and `memoryview` objects.

- Functions that write into a buffer need a mutable buffer. They return that buffer, except `bzero`, which returns nothing.
- A byte count that is negative raises `ValueError`.
- A byte count longer than a buffer it touches also raises `ValueError`.
- `memchr` returns an index, or `None` when the byte is not found.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`.

### `ftkit.strings`

The functions are `strlen`, `strlcpy`, `strlcat`, `strchr`, `strrchr`, `strncmp`,
`strnstr`, `atoi`, `strdup`, `strndup`, `substr`, `strjoin`, `strtrim`, `split`,
`itoa`, `strmapi` and `striteri`.

- The searches `strchr`, `strrchr` and `strnstr` return an index or `None`.
- `strlcpy` and `strlcat` return a `Bounded(text, length)` named tuple. It holds the text produced and the length the copy tried to create.
- `atoi` skips leading whitespace and accepts one optional sign. It stops at the first non-digit. The result wraps around like a 32-bit signed integer.
- `itoa` raises `OverflowError` when the value is outside the 32-bit signed range.
- `split(s, sep)` returns the non-empty pieces of `s` between occurrences of the character `sep`.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(s, f)` calls `f(index, char)` for each character and returns the resulting string. Where `f` returns a string, that string replaces the character. Where it returns `None`, the character is kept.

### `ftkit.output`

The functions are `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`.

- Each function writes UTF-8 text to a file descriptor with `os.write`.
- Each returns the number of bytes written.
- `putstr_fd(None, fd)` writes nothing.

### `ftkit.linked_list`

This module provides the `Node` and `LinkedList` classes.

- `LinkedList(items)` builds a list from an optional iterable.
- It supports `len()`, iteration and the methods `push_front`, `push_back`, `last`, `clear(delete)`, `iterate(f)` and `map(f, delete)`.
- If the mapping function returns `None`, `map` does three things:
  - it passes the contents built so far to `delete`;
  - it clears the partial result;
  - it raises `ValueError`.

### `ftkit.line_reader`

This module provides `LineReader` and `get_next_line`.

- `LineReader(buffer_size)` reads descriptors in chunks of the given size.
- It keeps leftover bytes separately for each descriptor, so several descriptors can be read in any interleaving.
- `read_line(fd)` returns the next line as `bytes`, newline included, or `None` at end of input. The last line comes back without a newline if the input has none.
- A descriptor outside `0..1023` raises `ValueError`.
- `get_next_line(fd)` uses a shared reader with a buffer size of 1000.

### `ftkit.printf`

This module provides `format_printf(fmt, *args)` and `printf(fmt, *args)`.

- `format_printf` returns the formatted text.
- `printf` writes the text to standard output and returns the number of bytes written.
- Only the conversions `%c %s %p %d %i %u %x %X %%` are supported. There are no flags, widths or precisions.
- An unknown conversion character produces nothing.
- Integers follow 32-bit `int` and `unsigned int` rules.
- `%s` of `None` gives `(null)`. `%p` of `None` or `0` gives `(nil)`.

## Examples

```python
from ftkit.strings import split, atoi, itoa, strlcpy
from ftkit.printf import format_printf
from ftkit.linked_list import LinkedList

split("  hello  world ", " ")        # ['hello', 'world']
atoi("   -42abc")                    # -42
itoa(-2147483648)                    # '-2147483648'
strlcpy("", "hello", 3)              # Bounded(text='he', length=5)

format_printf("%s has %d items (%x)", "box", 255, 255)
# 'box has 255 items (ff)'

lst = LinkedList([1, 2, 3])
doubled = lst.map(lambda x: x * 2, lambda x: None)
list(doubled)                        # [2, 4, 6]
```

This example reads a file line by line through its descriptor:

```python
import os
from ftkit.line_reader import get_next_line

fd = os.open("notes.txt", os.O_RDONLY)
while (line := get_next_line(fd)) is not None:
    print(line.decode(), end="")
os.close(fd)
```

## Scope

`ftkit` is a library only. It has no command-line program.