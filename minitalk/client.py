"""Signal client: sends a message to the server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
from typing import Callable, List, Optional, Union

from minitalk.ctype import atoi, isdigit
from minitalk.output import Writer
from minitalk.protocol import TERMINATOR, encode_byte

ZERO_BIT = signal.SIGUSR1
ONE_BIT = signal.SIGUSR2
BIT_ACK = signal.SIGUSR1
MESSAGE_ACK = signal.SIGUSR2
LISTENED = (signal.SIGUSR1, signal.SIGUSR2)

CONFIRMATION = "\u2705 Server received and printed the whole message \u2705"


class PidError(ValueError):
    """Raised when a server process id is malformed or names no process."""


def parse_pid(text: str) -> int:
    """Parse a process id made of decimal digits only; it must exceed 1."""
    if not all(isdigit(char) for char in text):
        raise PidError("Process ID must be numeric")
    pid = atoi(text)
    if pid <= 1:
        raise PidError(f"PID {pid} is invalid.")
    return pid


def validate_pid(text: str) -> int:
    """Parse a process id and check that a process with that id exists."""
    pid = parse_pid(text)
    try:
        os.kill(pid, 0)
    except OSError as exc:
        raise PidError(f"Process {pid} does not exist.") from exc
    return pid


def _message_bytes(message: Union[str, bytes, bytearray]) -> bytes:
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    return data.split(b"\0", 1)[0]


class Client:
    """Sends bytes to a server as SIGUSR1 (bit 0) and SIGUSR2 (bit 1) signals.

    After every bit the client waits for an acknowledgement. With
    ``final_ack`` a SIGUSR2 reply means the server has printed the whole
    message, and sending stops there.
    """

    def __init__(
        self,
        server_pid: int,
        *,
        final_ack: bool = False,
        kill: Callable[[int, int], None] = os.kill,
        wait: Optional[Callable[[], int]] = None,
    ) -> None:
        self.server_pid = int(server_pid)
        self.final_ack = final_ack
        self._kill = kill
        self._wait = wait if wait is not None else self._sigwait
        self._blocked = False

    def _sigwait(self) -> int:
        return signal.sigwait(LISTENED)

    def _prepare(self) -> None:
        # Acknowledgements must be blocked before the first bit goes out so
        # that none is lost between sending and waiting.
        if self._wait == self._sigwait and not self._blocked:
            signal.pthread_sigmask(signal.SIG_BLOCK, LISTENED)
            self._blocked = True

    def send_byte(self, value: int) -> bool:
        """Send one byte, least significant bit first.

        Returns True when the server confirmed the whole message.
        """
        self._prepare()
        for bit in encode_byte(value):
            self._kill(self.server_pid, ONE_BIT if bit else ZERO_BIT)
            reply = self._wait()
            if self.final_ack and reply == MESSAGE_ACK:
                return True
        return False

    def send(self, message: Union[str, bytes, bytearray]) -> bool:
        """Send ``message`` and its NUL terminator.

        Returns True when the server confirmed the message.
        """
        for value in _message_bytes(message) + bytes([TERMINATOR]):
            if self.send_byte(value):
                return True
        return False


def main(argv: Optional[List[str]] = None) -> int:
    """Send one message: ``[--bonus] <server_pid> <message>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = bool(args) and args[0] == "--bonus"
    if bonus:
        args = args[1:]
    out = Writer(sys.stdout)
    if len(args) != 2:
        out.printf("Usage: %s <server_pid> <message>\n", "minitalk-client")
        return 1
    try:
        server_pid = validate_pid(args[0])
    except PidError as exc:
        out.printf("Error: %s\n", str(exc))
        return 1
    client = Client(server_pid, final_ack=bonus)
    if client.send(args[1]) and bonus:
        print(CONFIRMATION)
    return 0