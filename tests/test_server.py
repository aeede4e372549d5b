import io
import signal

import pytest

from minitalk.protocol import encode_message
from minitalk.server import Server, main


class _Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, pid, signum):
        self.calls.append((pid, signum))


def _bit_signal(bit):
    return signal.SIGUSR2 if bit else signal.SIGUSR1


def _send(server, message, pid=4242):
    return [server.handle(_bit_signal(bit), pid) for bit in encode_message(message)]


def test_server_prints_message_with_newline():
    output = io.BytesIO()
    kill = _Recorder()
    server = Server(output, kill=kill)
    results = _send(server, b"hi")
    assert output.getvalue() == b"hi\n"
    assert results[-1] == b"hi"


def test_server_acknowledges_every_bit():
    kill = _Recorder()
    server = Server(io.BytesIO(), kill=kill)
    _send(server, b"hi", pid=77)
    assert kill.calls == [(77, signal.SIGUSR1)] * 24


def test_final_ack_replaces_last_bit_ack():
    kill = _Recorder()
    server = Server(io.BytesIO(), final_ack=True, kill=kill)
    _send(server, b"hi", pid=77)
    assert kill.calls[:-1] == [(77, signal.SIGUSR1)] * 23
    assert kill.calls[-1] == (77, signal.SIGUSR2)


def test_server_handles_several_messages():
    output = io.BytesIO()
    server = Server(output, kill=_Recorder())
    _send(server, b"first")
    _send(server, b"second")
    assert output.getvalue() == b"first\nsecond\n"


def test_server_truncates_long_messages():
    output = io.BytesIO()
    server = Server(output, limit=3, kill=_Recorder())
    _send(server, b"abcdef")
    assert output.getvalue() == b"ab\n"


def test_server_ignores_vanished_sender():
    def kill(pid, signum):
        raise ProcessLookupError(pid)

    output = io.BytesIO()
    server = Server(output, kill=kill)
    _send(server, b"ok")
    assert output.getvalue() == b"ok\n"


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["unexpected"])
    assert excinfo.value.code == 2