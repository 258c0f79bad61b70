# sigtalk

A tiny messaging tool for POSIX systems. One process sends text to another
using only two signals: `SIGUSR1` stands for a 1 bit and `SIGUSR2` for a
0 bit. Text is encoded as UTF-8 and every byte goes out as eight bits, most
significant bit first. A NUL byte marks the end of a message.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process ID and then waits
for signals until it is interrupted with Ctrl-C:

```
sigtalk-server
Server PID: 12345
```

From another terminal, send it a message:

```
sigtalk-client 12345 "hello there"
```

The server writes each character as soon as its eight bits have arrived and
writes a newline once the terminating NUL byte has arrived.

The client expects exactly two arguments, the server PID and the message.
It prints a usage line and exits with status 1 if it gets a different number
of arguments, prints `Error: Invalid server PID` and exits with status 1 if
the PID is not a positive number, and prints `Error: Failed to send signal`
and exits with status 1 if a signal cannot be delivered. Between two signals
it pauses for 42 microseconds so the receiver can keep up.

## Library use

The wire format is in `sigtalk.protocol`:

```python
from sigtalk.protocol import encode_bits, MessageDecoder

decoder = MessageDecoder()
received = [decoder.feed(bit) for bit in encode_bits("hi")]
# the completed bytes: ord("h"), ord("i"), then 0 for the end of the message
```

- `encode_bits(message)` yields the bits of a `str` or `bytes` message,
  followed by the terminating zero byte. The message ends at its first NUL.
- `MessageDecoder.feed(bit)` returns the completed byte after every eighth
  bit and `None` otherwise; `reset()` drops a partly received byte.
- `bit_to_signal` and `signal_to_bit` convert between bits and signals;
  `signal_to_bit` raises `ValueError` for any other signal.

Other modules in the package:

- `sigtalk.client`: `send_bit(pid, bit)` and `send_message(pid, message)`,
  which raise `SignalSendError` when a signal cannot be delivered, and the
  `main` command entry point.
- `sigtalk.server`: the `Server` class. `Server(output)` writes decoded text
  to `output` (standard output by default), `handle_signal` processes one
  signal, and `install()` routes `SIGUSR1` and `SIGUSR2` to it and returns
  the previous handlers. Any other signal passed to `handle_signal` writes
  `Error: Unexpected signal received`.
- `sigtalk.format`: `render(fmt, *args)` and `printf(fmt, *args)`, a small
  printf-style formatter for `%c %s %p %d %i %u %x %X %%`, with no flags,
  widths or precisions. `printf` writes to standard output and returns the
  number of characters written.
- `sigtalk.linereader`: `LineReader(stream, buffer_size)` and
  `read_lines(stream, buffer_size)`, which read lines from a text or binary
  stream through a fixed-size buffer (101 by default). Lines keep their
  newline; the last one may lack it.
- `sigtalk.cstring`: helpers with C string semantics: `atoi`, `itoa`,
  `split`, `strtrim`, `substr`, `strnstr`, `strncmp` and `isspace`.

## Limitations

Messages are not acknowledged: the client cannot tell whether the server
received them, and signals sent faster than the server handles them may be
lost. The server keeps nothing; it only writes what it receives.

## Running the tests

```
pip install ".[test]"
pytest
```