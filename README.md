# cbasics

Small helpers in the manner of the classic C library, with Python types and
exceptions:

- `cbasics.chars`: ASCII classification and case conversion (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`).
  Each accepts a one-character string or an integer code; `to_upper` and
  `to_lower` return the same kind they were given.
- `cbasics.memory`: operations on byte buffers (`memset`, `bzero`, `calloc`,
  `memcpy`, `memmove`, `memchr`, `memcmp`). `memmove` works within one
  `bytearray` by offsets. A size that is negative or runs past a buffer raises
  `ValueError`; `memchr` returns an index or `None`.
- `cbasics.strings`: `atoi`, `itoa`, `split`, `strchr`, `strrchr`, `strnstr`,
  `strncmp`, `strtrim`, `substr`, `strjoin`, `strlcpy`, `strlcat`, `strmapi`,
  `striteri`. Searches return an index or `None`; `strlcpy` and `strlcat`
  return a `(text, length)` pair.
- `cbasics.output`: write to any text stream (`putchar_fd`, `putstr_fd`,
  `putendl_fd`, `putnbr_fd`).
- `cbasics.linereader`: `LineReader` reads a text or binary stream in chunks
  of `buffer_size` (default 5) and returns one line per `readline()` call,
  newline included, and `None` at the end; it is also iterable.
  `read_lines(stream, buffer_size)` yields every line.
- `cbasics.printf`: `sprintf` and `printf` with the conversions
  `%c %s %d %i %u %x %X %p %%`. `%s` of `None` gives `(null)`, `%p` of 0 gives
  `(nil)`; integers are wrapped to 32 bits (64 for `%p`). An unknown
  conversion is dropped, a missing argument raises `TypeError`, and a
  trailing lone `%` raises `ValueError`. `printf` writes to standard output
  and returns the number of characters written.
- `cbasics.talk_protocol`: `encode_bits` yields the bits of an ASCII message,
  most significant first; `BitDecoder.feed` collects them back into
  characters; `validate_ascii` raises `ValueError` on non-ASCII text.
- `cbasics.talk_client` and `cbasics.talk_server`: send text between
  processes one bit per signal (`SIGUSR1` for 1, `SIGUSR2` for 0).

## Installation

```
pip install .
```

## Examples

```python
import io

from cbasics.strings import split, atoi, itoa
from cbasics.printf import sprintf
from cbasics.linereader import read_lines

split("  hello  world ", " ")       # ['hello', 'world']
atoi("   -42abc")                   # -42
itoa(-2147483648)                   # '-2147483648'
sprintf("%s has %d items", "box", 3)  # 'box has 3 items'

for line in read_lines(io.BytesIO(b"one\ntwo\n"), 5):
    print(line)                     # b'one\n', then b'two\n'
```

## Signal messaging

Start the server. It prints its process id, then writes every character it
receives, and runs until interrupted:

```
cbasics-talk-server
```

From another terminal, send an ASCII message to that process id:

```
cbasics-talk-client <pid> "hello"
```

The client takes exactly two arguments; otherwise it prints a usage message
(in Turkish, as is its other message). A message with a non-ASCII character
is refused and the client exits with status 1. The process id is read with
`atoi`. `send_message(pid, message, delay)` does the sending from Python, and
`SignalReceiver` can be installed as a handler in your own process.

There is no acknowledgement or error checking between client and server: a
lost or merged signal garbles the message. Signal messaging needs a platform
that has `SIGUSR1` and `SIGUSR2`.

## Tests

```
pip install .[test]
pytest
```