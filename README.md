# tcpbits

Small building blocks for working with TCP at the byte level. It uses only
the standard library.

## Modules

### `tcpbits.wrapping`

- `WrappingInt32(raw_value)` is a frozen 32-bit value. The value is reduced
  modulo 2**32 on construction.
  - `a + n` and `a - n` (with an `int`) step forward or back and wrap around.
  - `a - b` (two `WrappingInt32`) gives the signed offset from `b` to `a`, in
    the range -2**31 to 2**31 - 1.
  - `str(a)` gives the raw value.
- `wrap(n, isn)` turns an absolute 64-bit sequence number into a
  `WrappingInt32` relative to the initial sequence number `isn`.
- `unwrap(n, isn, checkpoint)` returns the absolute sequence number that wraps
  to `n` and lies closest to `checkpoint`.

### `tcpbits.parser`

- `NetParser(buffer)` reads big-endian integers from the front of a buffer
  with `u8()`, `u16()` and `u32()`, and drops bytes with `remove_prefix(n)`.
  The `buffer` property holds the bytes not yet consumed.
- When too few bytes remain, the parser sets its `error` attribute to
  `ParseResult.PacketTooShort` and raises `ParseError`. After that, every
  further read raises `ParseError` with the same result.
- `ParseResult` lists the outcomes: `NoError`, `BadChecksum`, `PacketTooShort`,
  `WrongIPVersion`, `HeaderTooShort`, `TruncatedPacket` and `Unsupported`.
  `as_string(result)` gives the name of a result.
- `unparse_u8`, `unparse_u16` and `unparse_u32` encode a value in network byte
  order. Values that are too large are truncated to the width.

### `tcpbits.util`

- `InternetChecksum(initial_sum=0)` computes the Internet checksum. Feed it
  data with `add(data)`, which may be called several times, and read the
  result with `value()`.
- `format_hexdump(data, indent=0)` returns a dump of the data. Each line shows
  the offset, the bytes in hex pairs, and the printable characters.
  `hexdump(data, indent=0, file=None)` writes the same text to `file`, or to
  standard output if `file` is not given.
- `timestamp_ms()` returns the milliseconds elapsed since its first call.
- `get_random_generator()` returns a `random.Random` seeded from
  `os.urandom`.
- `system_call(attempt, return_value, errno_mask=0)` returns `return_value`
  if it is non-negative. A negative value is taken as the negated error
  number. That value is raised as `UnixError`, unless it equals `errno_mask`.

### `tcpbits.errors`

- `TaggedError(attempt, error_code)` is an `OSError` whose message reads
  `"<attempt>: <strerror>"`. `UnixError` is its subclass for system calls.
- `check_system_call(attempt, return_value)` behaves like `system_call` but
  has no mask.
- `notnull(context, value)` returns `value`. If `value` is `None`, it raises
  `RuntimeError`.

## Installation

```
pip install .
```

## Examples

```python
from tcpbits.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(15)
seq = wrap(3 * 2**32 + 17, isn)        # WrappingInt32(raw_value=32)
unwrap(seq, isn, 3 * 2**32)            # 3 * 2**32 + 17

from tcpbits.parser import NetParser, ParseError, unparse_u16, unparse_u32

p = NetParser(unparse_u32(0xDEADBEEF) + unparse_u16(80))
p.u32()   # 0xDEADBEEF
p.u16()   # 80
try:
    p.u8()
except ParseError as exc:
    print(exc.result)  # ParseResult.PacketTooShort

from tcpbits.util import InternetChecksum, format_hexdump

cs = InternetChecksum()
cs.add(b"\x45\x00\x00\x1c")
print(hex(cs.value()))
print(format_hexdump(b"hello, world"), end="")
```

## What it does not do

This package is a set of helpers only. It has no TCP receiver, no stream
reassembler, no byte stream, and no sockets. It does not open any network
connections, and it has no command-line tool.

## Running the tests

```
pip install ".[test]"
pytest
```