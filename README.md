# unitkit

A minimal unit-test runner that reports each test as `[OK]`, `[KO]` or a
crash. It comes with a small toolkit of C-style byte-buffer, string,
conversion and printf helpers. The bundled suites exercise that toolkit.

## Installing

    pip install .

To run the package's own tests:

    pip install ".[test]"
    pytest

## Running the bundled suites

    unitkit

This runs `unitkit.suites.main()`. It runs the suites for `strlen`, `atoi`,
`bzero`, `split` and `printf` in turn. Each suite prints a title line. Each
test then prints its name followed by its result. A score line such as
`4/5 tests checked` ends each suite.

Some of the bundled tests deliberately pass a missing value (`None`) where a
string or buffer is expected. These tests are reported as crashes
(`[SIGSEV]`), not as passes. The command always exits with status 0.

The launcher functions `strlen_launcher`, `atoi_launcher`, `bzero_launcher`,
`split_launcher` and `printf_launcher` can also be called on their own. Each
returns `True` when every test in its suite passed.

## Writing your own suite

    from unitkit.runner import TestSuite, Outcome

    def passes():
        return 0

    def fails():
        return 1

    suite = TestSuite()
    suite.load("Basic OK", passes)
    suite.load("Basic KO", fails)
    outcomes = suite.launch()
    assert outcomes == [Outcome.OK, Outcome.KO]

A test is a callable that takes no arguments.

- It passes when it returns `0`.
- It fails when it returns any other value.

`launch()` runs the tests in the order they were loaded. It writes
`name : ` and the result label to standard output for each test, then
prints the score with `display_score(success_count, total_count)`. It
returns the list of `Outcome` values and empties the suite.

`Outcome` has the members below. Each member's `label` is the text that is
printed, and its `passed` is true only for `OK`.

| Member | When it is reported |
| --- | --- |
| `OK` | the test returned `0` |
| `KO` | the test returned any other value |
| `SEGV` | the test raised an exception, or received `SIGSEGV` |
| `BUS` | the test received `SIGBUS` |
| `UNKNOWN_SIGNAL` | the test received another trapped signal (`SIGFPE`, `SIGILL`, `SIGABRT`) |

Signals are trapped only when the suite runs in the main thread.

## What it does not do

Tests run inside the calling process, one after another. They are not run in
separate processes. A test that really crashes the interpreter, for example
through a fault in native code, ends the whole run. Tests cannot be found
automatically: each one must be registered with `TestSuite.load`.

## Toolkit

Module `unitkit.chars`:

- `isalpha`, `isdigit`, `isalnum`, `isascii` and `isprint` classify an
  ASCII character code or a one-character string.
- `toupper` and `tolower` convert one. They return the same kind of value
  they were given.

Module `unitkit.memory` works on objects that support the buffer protocol,
such as `bytearray`:

- `memset`, `bzero`, `memcpy` and `memmove` fill or copy bytes in a buffer.
- `memchr` returns an offset or `None`.
- `memcmp` returns the byte difference at the first mismatch, or `0`.
- `calloc` returns a zeroed `bytearray`.

Module `unitkit.convert`:

- `atoi` parses leading whitespace, an optional sign and digits. The result
  wraps to 32 bits.
- `itoa` formats a 32-bit signed integer. It raises `OverflowError` for a
  value outside that range.

Module `unitkit.strings` works on NUL-terminated text given as `str` or
bytes:

- `strlen` and `strdup`
- `strlcpy` and `strlcat`, which write into a writable buffer
- `strchr`, `strrchr` and `strnstr`, which return offsets or `None`
- `strncmp`

Module `unitkit.transform`:

- `substr`, `strjoin` and `strtrim`
- `split`, which returns the non-empty words around a single-character
  separator
- `strmapi`, which builds a new string
- `striteri`, which changes a mutable sequence in place

Module `unitkit.output` writes to a stream:

- `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`
- They write nothing when the stream is `None`.

Module `unitkit.printf`:

- `render(fmt, *args)` returns the formatted text.
- `printf(fmt, *args)` writes the text to standard output and returns its
  length.
- The supported conversions are `%c %s %p %d %i %u %x %X %%`.
- An unknown conversion letter produces nothing.
- A trailing lone `%`, or too few arguments, raises `FormatError`.

Example:

    from unitkit.printf import printf

    printf("%s is %d\n", "answer", 42)   # returns 13