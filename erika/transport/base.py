"""Abstract base class for the typewriter link.

A Transport is a blocking, already configured byte channel to the
typewriter. It knows nothing about characters or control codes; the
protocol layer does all interpretation.

Key principles:
- Blocking reads and writes, no internal threads
- Errors surface as TransportError, never retried
- Bytes pushed back with unread() are served before new device bytes
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class Transport(ABC):
    """Abstract byte channel to the typewriter.

    Implementations provide the raw I/O primitives; this class adds the
    pushback buffer the protocol layer needs when a read returned more bytes
    than one character.
    """

    def __init__(self) -> None:
        self._pushback = bytearray()

    @abstractmethod
    def open(self) -> None:
        """Open the channel.

        Should be a no-op if already open.

        Raises:
            TransportError: If the channel cannot be opened
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the channel.

        Should be safe to call multiple times.
        """
        pass

    @abstractmethod
    def is_open(self) -> bool:
        """Check if the channel is open."""
        pass

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write all of ``data`` in one operation.

        Returns:
            Number of bytes written

        Raises:
            TransportError: On I/O failure
        """
        pass

    @abstractmethod
    def _read_blocking(self, size: int) -> bytes:
        """Block until at least one byte arrives, return up to ``size`` bytes.

        May return an empty result if the implementation has a read timeout.
        """
        pass

    @abstractmethod
    def _read_available(self, size: int) -> bytes:
        """Return up to ``size`` bytes that are already available, without blocking."""
        pass

    def read(self, size: int = 1) -> bytes:
        """Read up to ``size`` bytes.

        Pushed back bytes are returned first, topped up with whatever the
        device has already sent. Only blocks when nothing is pushed back.

        Raises:
            TransportError: On I/O failure
        """
        if size <= 0:
            return b""
        if not self._pushback:
            return self._read_blocking(size)

        data = bytes(self._pushback[:size])
        if len(data) < size:
            data += self._read_available(size - len(data))
        # Only drop pushed back bytes once the top-up succeeded
        del self._pushback[:size]
        return data

    def unread(self, data: bytes) -> None:
        """Push bytes back so the next read returns them first."""
        if data:
            self._pushback[:0] = data

    def __enter__(self) -> Transport:
        """Context manager support - open on enter."""
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager support - close on exit."""
        self.close()
