"""Send a text message to a server process, one signal per bit."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import Optional, Sequence

from cbasics.strings import atoi
from cbasics.talk_protocol import encode_bits, validate_ascii

DELAY = 0.00015

_ASCII_ERROR = "Hata: Sadece ASCII karakterler desteklenir.\n"
_USAGE_ERROR = "Argüman sayisi hatali"


def send_message(pid: int, message: str, delay: float = DELAY) -> None:
    """Signal ``pid`` once per bit of ``message``: SIGUSR1 for 1, SIGUSR2 for 0."""
    for bit in encode_bits(message):
        os.kill(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        time.sleep(delay)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``<pid> <message>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        sys.stdout.write(_USAGE_ERROR)
        return 0
    pid_text, message = args
    try:
        validate_ascii(message)
    except ValueError:
        sys.stdout.write(_ASCII_ERROR)
        return 1
    send_message(atoi(pid_text), message)
    return 0


if __name__ == "__main__":
    sys.exit(main())