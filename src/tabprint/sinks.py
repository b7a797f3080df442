"""
Output sinks.

A sink is anything that accepts raw bytes and can be flushed. The renderer
only talks to this protocol, which lets the same code path write to a file,
a pipe, standard output, or an in-memory string.
"""

from __future__ import annotations

import codecs
from typing import BinaryIO, Protocol

from .config import DEFAULT_ENCODING, validate_encoding
from .exceptions import OutputEncodingError, OutputWriteError


class OutputSink(Protocol):
    """Protocol for rendering destinations."""

    def write(self, data: bytes) -> None:
        """
        Accept a chunk of rendered bytes.

        Raises:
            OutputError: If the bytes cannot be accepted
        """
        ...

    def flush(self) -> None:
        """
        Push any buffered bytes to the destination.

        Raises:
            OutputError: If flushing fails
        """
        ...


class StreamSink:
    """Pass-through sink writing to a binary stream."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    def write(self, data: bytes) -> None:
        try:
            self._stream.write(data)
        except OSError as e:
            raise OutputWriteError(str(e)) from e

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as e:
            raise OutputWriteError(str(e)) from e


class BufferSink:
    """
    In-memory sink that decodes written bytes into a string.

    Bytes are decoded incrementally, so a multi-byte character split across
    two writes is accepted. Bytes that are not valid in ``encoding`` raise
    ``OutputEncodingError``.
    """

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = validate_encoding(encoding)
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="strict")
        self._parts: list[str] = []

    def write(self, data: bytes) -> None:
        try:
            self._parts.append(self._decoder.decode(data))
        except UnicodeDecodeError as e:
            raise OutputEncodingError(self.encoding, str(e)) from e

    def flush(self) -> None:
        # Nothing is buffered outside the decoder; an incomplete trailing
        # sequence is only an error once the caller says the output is done.
        try:
            self._parts.append(self._decoder.decode(b"", final=True))
        except UnicodeDecodeError as e:
            raise OutputEncodingError(self.encoding, str(e)) from e
        self._decoder.reset()

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)
