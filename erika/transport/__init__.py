"""Transport layer for the typewriter serial link."""

from .base import Transport
from .memory import MemoryTransport
from .serial import SerialTransport

__all__ = ["Transport", "MemoryTransport", "SerialTransport"]
