# minitalk

A small message service that passes text from one process to another using
only the two user signals, `SIGUSR1` and `SIGUSR2`. Each byte of the message
is sent as eight signals, least significant bit first: `SIGUSR1` carries a 0
and `SIGUSR2` carries a 1. After every bit the server sends `SIGUSR1` back,
and the client does not send the next bit until an acknowledgement arrives.
A zero byte marks the end of a message; the server then writes the whole
message followed by a newline to its standard output.

## Requirements

Python 3.10 or later on a POSIX system. The server waits for signals with
`signal.sigwaitinfo`, which tells it which process sent each bit. Where
Python does not offer `sigwaitinfo` (macOS, for one), `minitalk-server`
stops with an `OSError` instead of starting.

## Installing

```
pip install .
```

## Running

Start the server in one terminal. It prints its process ID and waits:

```
$ minitalk-server
Server started. PID: 4242
```

From another terminal, send it a message:

```
$ minitalk-client 4242 "hello there"
```

The server prints:

```
hello there
```

Text is sent as UTF-8. Anything after an embedded zero byte is not sent.
A message holds at most 99,999 bytes; the server drops any bytes beyond that.
Stop the server with Ctrl-C.

### Confirmation mode

Both commands take `--bonus`. A server started with `--bonus` answers the
bit that completes a message with `SIGUSR2` instead of `SIGUSR1`. A client
given `--bonus` (as its first argument) treats that `SIGUSR2` as confirmation
and prints:

```
$ minitalk-server --bonus
$ minitalk-client --bonus 4242 "hello there"
✅ Server received and printed the whole message ✅
```

### Errors

The client checks the process ID before sending anything and exits with
status 1, printing one of these, when it fails:

- `Error: Process ID must be numeric` — the ID holds a non-digit;
- `Error: PID <n> is invalid.` — the ID is 0 or 1;
- `Error: Process <n> does not exist.` — no such process can be signalled.

Without exactly two arguments (after an optional `--bonus`) it prints
`Usage: minitalk-client <server_pid> <message>` and exits with status 1.

## Using it as a library

The bit encoding and the reassembly work without any signals:

```python
from minitalk.protocol import encode_message, Receiver

bits = list(encode_message(b"hi"))   # 24 bits: "h", "i", then the zero byte
receiver = Receiver()
for bit in bits:
    message = receiver.push(bit)
print(message)                        # b"hi"
```

`minitalk.protocol` also has `encode_byte`, `ByteAssembler` (bits to bytes)
and `MessageAssembler` (bytes to messages, with a `limit` on length).

`minitalk.server.Server` and `minitalk.client.Client` take a `kill` callable
(and the client a `wait` callable), so the exchange can be driven in-process:
`Server.handle(signum, sender_pid)` takes one bit signal and returns the
message it completes, and `Client.send(message)` returns True when the
server confirmed it. `parse_pid` and `validate_pid` raise `PidError` on a bad
process ID.

Smaller helper modules:

- `minitalk.ctype` — ASCII classification (`isalpha`, `isdigit`, ...),
  `toupper`/`tolower`, and C-style `atoi` and `itoa`;
- `minitalk.memory` — `memset`, `bzero`, `calloc`, `memcpy`, `memmove`,
  `memchr`, `memcmp` over byte buffers;
- `minitalk.strings` — C-string helpers such as `strlcpy`, `strlcat`,
  `strnstr`, `strncmp`, `substr`, `strtrim` and `split`, returning indices
  or `None` where C would return pointers;
- `minitalk.output` — `format_printf` and `Writer` for `%c %s %p %d %i %u
  %x %X %%`, plus `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`;
- `minitalk.lines` — `LineReader`, which yields lines from a file descriptor
  or binary stream, with `find_newline` and `extract_line`.

## Tests

```
pip install .[test]
pytest
```