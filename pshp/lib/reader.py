# pshp/lib/reader.py
# Line Reader (no Core dependency).
#
# Pulls one character at a time off a text stream until newline or
# end-of-input. The newline is consumed but never returned.

from __future__ import annotations

import logging
from typing import TextIO, Tuple

from pshp.errors import AllocationError

log = logging.getLogger(__name__)


def read_raw(stream: TextIO) -> Tuple[str, bool]:
    """Read one line. Returns (text, at_eof).

    at_eof is True when the read stopped on end-of-input instead of a
    newline; text then holds whatever was typed before it (often "").
    """
    buf = []
    at_eof = False
    try:
        while True:
            c = stream.read(1)
            if c == "":
                at_eof = True
                break
            if c == "\n":
                break
            buf.append(c)
        line = "".join(buf)
    except MemoryError as e:
        raise AllocationError() from e

    log.debug("read %d chars (eof=%s)", len(line), at_eof)
    return line, at_eof


def read_line(stream: TextIO) -> str:
    return read_raw(stream)[0]
