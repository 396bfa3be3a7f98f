"""Read one command line at a time from a binary stream."""

import logging
from typing import BinaryIO

from labsh.constants import LINE_TERMINATOR, MAX_LINE_LENGTH
from labsh.models import END_OF_STREAM, CommandLine, EndOfStream

log = logging.getLogger(__name__)


def read_line(stream: BinaryIO, max_length: int = MAX_LINE_LENGTH) -> CommandLine | EndOfStream:
    """Read up to ``max_length - 1`` bytes or through the next line terminator.

    ``max_length`` counts the terminator. Bytes are read one at a time, so on
    an unbuffered stream nothing past the terminator is consumed and a child
    inheriting the same descriptor sees the rest of the input. Returns
    ``END_OF_STREAM`` when the stream is already exhausted. A line that fills
    the limit without a terminator comes back truncated; the rest of it is
    left for the next call.
    """
    if max_length < 2:
        raise ValueError(f"max_length must be at least 2, got {max_length}")

    data = bytearray()
    while len(data) < max_length - 1:
        byte = stream.read(1)
        if not byte:
            break
        data += byte
        if byte == LINE_TERMINATOR:
            break

    if not data:
        log.debug("end of stream")
        return END_OF_STREAM

    if data.endswith(LINE_TERMINATOR):
        return CommandLine(bytes(data[: -len(LINE_TERMINATOR)]))

    truncated = len(data) >= max_length - 1
    if truncated:
        log.warning("command line truncated to %d bytes", len(data))
    return CommandLine(bytes(data), truncated=truncated)
