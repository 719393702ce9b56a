"""In-memory transport.

Records everything written and serves reads from bytes fed in advance.
Useful for dry runs without a typewriter attached.
"""
from __future__ import annotations

from ..errors import TransportError
from .base import Transport


class MemoryTransport(Transport):
    """Transport backed by two byte buffers."""

    def __init__(self, incoming: bytes = b""):
        super().__init__()
        self._open = False
        self._incoming = bytearray(incoming)
        self.written = bytearray()
        self.writes: list[bytes] = []

    def open(self) -> None:
        self._open = True

    def close(self) -> None:
        self._open = False

    def is_open(self) -> bool:
        return self._open

    def feed(self, data: bytes) -> None:
        """Queue bytes as if the typewriter had sent them."""
        self._incoming += data

    def write(self, data: bytes) -> int:
        if not self._open:
            raise TransportError("Memory transport is not open")
        self.writes.append(bytes(data))
        self.written += data
        return len(data)

    def _read_blocking(self, size: int) -> bytes:
        # Nothing will ever arrive, behave like a read timeout
        return self._read_available(size)

    def _read_available(self, size: int) -> bytes:
        if not self._open:
            raise TransportError("Memory transport is not open")
        data = bytes(self._incoming[:size])
        del self._incoming[:size]
        return data
