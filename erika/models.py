"""Immutable data models for typewriter input events and device settings.

All models are frozen dataclasses or enums so they can be shared between
threads and handed to collaborators (such as a keyboard emulator) without
copying. These models are the contract between the codec, protocol and
application layers.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .protocol.control_codes import ControlCode

# Bell durations are sent as a count of 20 ms steps in one byte
BELL_STEP_MS = 20
MAX_BELL_STEPS = 255

# The device refuses these paper step counts
FORBIDDEN_PAPER_STEPS = range(2, 7)


class DeviceMode(Enum):
    """Keyboard mode of the typewriter.

    The protocol layer does not track this; callers keep their own value and
    update it from the return value of the mode switching calls.
    """
    LOCAL = "local"    # keystrokes are printed directly
    REMOTE = "remote"  # keystrokes are only reported to the host


class BaudRate(IntEnum):
    """Line speed codes understood by the BAUD_RATE command."""
    RATE_1200 = 10
    RATE_2400 = 8
    RATE_4800 = 4
    RATE_9600 = 2
    RATE_19200 = 1

    @property
    def bits_per_second(self) -> int:
        """Line speed the host must switch to after sending this rate."""
        return _BITS_PER_SECOND[self]


_BITS_PER_SECOND = {
    BaudRate.RATE_1200: 1200,
    BaudRate.RATE_2400: 2400,
    BaudRate.RATE_4800: 4800,
    BaudRate.RATE_9600: 9600,
    BaudRate.RATE_19200: 19200,
}


@dataclass(frozen=True)
class CharacterEvent:
    """A printable (or whitespace) character typed on the device.

    Attributes:
        character: Single decoded Unicode character
    """
    character: str


@dataclass(frozen=True)
class ControlCodeEvent:
    """A control key pressed on the device.

    Attributes:
        code: Named control operation
    """
    code: ControlCode


# Result of one read step
InputEvent = Union[CharacterEvent, ControlCodeEvent]
