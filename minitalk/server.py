"""Signal server: receives messages bit by bit and prints each one."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from typing import BinaryIO, Callable, List, Optional

from minitalk.output import Writer
from minitalk.protocol import BUFFER_SIZE, Receiver

BIT_ACK = signal.SIGUSR1
MESSAGE_ACK = signal.SIGUSR2
ONE_BIT = signal.SIGUSR2
LISTENED = (signal.SIGUSR1, signal.SIGUSR2)


class Server:
    """Rebuilds messages from SIGUSR1 (bit 0) and SIGUSR2 (bit 1) signals.

    Every bit is acknowledged to its sender with SIGUSR1. With ``final_ack``
    the bit that completes a message is answered with SIGUSR2 instead.
    Completed messages are written to ``output`` followed by a newline.
    """

    def __init__(
        self,
        output: Optional[BinaryIO] = None,
        *,
        final_ack: bool = False,
        limit: int = BUFFER_SIZE,
        kill: Callable[[int, int], None] = os.kill,
    ) -> None:
        self._output = output
        self._final_ack = final_ack
        self._receiver = Receiver(limit)
        self._kill = kill

    @property
    def output(self) -> BinaryIO:
        return self._output if self._output is not None else sys.stdout.buffer

    def _notify(self, sender_pid: int, signum: int) -> None:
        try:
            self._kill(sender_pid, signum)
        except ProcessLookupError:
            pass

    def handle(self, signum: int, sender_pid: int) -> Optional[bytes]:
        """Take one bit signal from ``sender_pid``; return a completed message."""
        message = self._receiver.push(signum == ONE_BIT)
        if message is not None:
            self.output.write(message + b"\n")
            self.output.flush()
            if self._final_ack:
                self._notify(sender_pid, MESSAGE_ACK)
                return message
        self._notify(sender_pid, BIT_ACK)
        return message

    def serve_forever(self) -> None:
        """Announce the process id, then handle incoming signals until stopped."""
        if not hasattr(signal, "sigwaitinfo"):
            raise OSError("waiting for signals with sender information is not supported here")
        signal.pthread_sigmask(signal.SIG_BLOCK, LISTENED)
        Writer(sys.stdout).printf("Server started. PID: %d\n", os.getpid())
        sys.stdout.flush()
        while True:
            info = signal.sigwaitinfo(LISTENED)
            self.handle(info.si_signo, info.si_pid)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the server until interrupted."""
    parser = argparse.ArgumentParser(
        prog="minitalk-server",
        description="Receive messages sent bit by bit with SIGUSR1 and SIGUSR2.",
    )
    parser.add_argument(
        "--bonus",
        action="store_true",
        help="confirm each complete message to its sender with SIGUSR2",
    )
    args = parser.parse_args(argv)
    try:
        Server(final_ack=args.bonus).serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0