"""Receive a message sent bit by bit as SIGUSR1 / SIGUSR2 signals and print it."""

from __future__ import annotations

import os
import signal
import sys
from typing import Optional, Sequence, TextIO

from cbasics.talk_protocol import BitDecoder


def _format_pid(pid: int) -> str:
    if pid < 0:
        return "Pid negatif olamaz"
    return str(pid)


class SignalReceiver:
    """Signal handler that turns SIGUSR1 into a 1 bit and any other signal into a 0 bit."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._decoder = BitDecoder()

    def handle(self, signum: int, frame: object = None) -> Optional[str]:
        """Take one signal; write and return the character it completes, if any."""
        char = self._decoder.feed(1 if signum == signal.SIGUSR1 else 0)
        if char is not None:
            stream = self._stream if self._stream is not None else sys.stdout
            stream.write(char)
            stream.flush()
        return char


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print this process id, then print every character received until interrupted."""
    stream = sys.stdout
    stream.write(_format_pid(os.getpid()) + "\n")
    stream.flush()
    receiver = SignalReceiver(stream)
    signal.signal(signal.SIGUSR1, receiver.handle)
    signal.signal(signal.SIGUSR2, receiver.handle)
    try:
        while True:
            signal.pause()
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())