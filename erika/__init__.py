"""Erika typewriter SDK - GDR ASCII codec and serial command protocol."""

from .models import (
    BaudRate,
    CharacterEvent,
    ControlCodeEvent,
    DeviceMode,
    InputEvent,
)
from .errors import (
    EncodingError,
    ErikaError,
    InvalidBellDuration,
    InvalidInput,
    InvalidPaperStep,
    TransportError,
    UnknownCode,
    UnrepresentableCharacter,
)
from .codec import decode, decode_char, encode, encode_char, try_encode
from .protocol import ControlCode, TypewriterInterface
from .transport import MemoryTransport, SerialTransport, Transport

__all__ = [
    "BaudRate",
    "CharacterEvent",
    "ControlCodeEvent",
    "DeviceMode",
    "InputEvent",
    "EncodingError",
    "ErikaError",
    "InvalidBellDuration",
    "InvalidInput",
    "InvalidPaperStep",
    "TransportError",
    "UnknownCode",
    "UnrepresentableCharacter",
    "decode",
    "decode_char",
    "encode",
    "encode_char",
    "try_encode",
    "ControlCode",
    "TypewriterInterface",
    "MemoryTransport",
    "SerialTransport",
    "Transport",
]
