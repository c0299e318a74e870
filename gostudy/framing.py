"""Length-prefixed message framing for byte streams.

Each frame is a little-endian signed 16-bit payload length followed by the
UTF-8 payload.
"""

from __future__ import annotations

import struct

_HEADER = struct.Struct("<h")
_MAX_PAYLOAD = 2**15 - 1


def encode(message: str) -> bytes:
    """Frame ``message``; raises ValueError if it exceeds 32767 bytes."""
    payload = message.encode("utf-8")
    if len(payload) > _MAX_PAYLOAD:
        raise ValueError(f"message of {len(payload)} bytes is too long to frame")
    return _HEADER.pack(len(payload)) + payload


class FrameDecoder:
    """Reassemble framed messages from arbitrarily split chunks of a stream."""

    def __init__(self) -> None:
        self._buffer = bytearray()

    @property
    def pending(self) -> int:
        """Bytes received that do not yet form a complete frame."""
        return len(self._buffer)

    def feed(self, data: bytes) -> list[str]:
        """Add ``data`` and return every message completed by it.

        Raises ValueError on a frame announcing a negative length.
        """
        self._buffer += data
        messages = []
        while len(self._buffer) >= _HEADER.size:
            (length,) = _HEADER.unpack_from(self._buffer)
            if length < 0:
                raise ValueError(f"invalid frame length {length}")
            end = _HEADER.size + length
            if len(self._buffer) < end:
                break
            payload = bytes(self._buffer[_HEADER.size : end])
            messages.append(payload.decode("utf-8", errors="replace"))
            del self._buffer[:end]
        return messages