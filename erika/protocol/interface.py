"""High-level command and read interface to the typewriter.

Serializes text and commands into GDR ASCII and classifies incoming bytes
as characters or control codes. All calls block until the transport is done.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..codec import MAX_SEQUENCE_LENGTH, decode_prefix, encode
from ..errors import InvalidBellDuration, InvalidInput, InvalidPaperStep, UnknownCode
from ..models import (
    BELL_STEP_MS,
    FORBIDDEN_PAPER_STEPS,
    MAX_BELL_STEPS,
    BaudRate,
    CharacterEvent,
    ControlCodeEvent,
    DeviceMode,
    InputEvent,
)
from ..transport import Transport
from .control_codes import ControlCode, lookup, takes_parameter

logger = logging.getLogger(__name__)


class TypewriterInterface:
    """Protocol facade over one typewriter connection.

    The interface owns the transport for its lifetime and is not safe for
    use from several threads at once. It does not remember which keyboard
    mode the device is in; callers keep the DeviceMode returned by
    enable_remote_mode() and disable_remote_mode().

    Every parameter is validated before anything is written, so a call that
    raises has sent nothing.

    Example:
        >>> with TypewriterInterface(SerialTransport("/dev/ttyUSB0")) as erika:
        ...     erika.send_text("Hello World\\n")
        ...     erika.bell(1000)
    """

    def __init__(self, transport: Transport):
        """Initialize interface.

        Args:
            transport: Already configured transport, opened on demand
        """
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    def open(self) -> None:
        self._transport.open()

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> TypewriterInterface:
        self.open()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # --- Output ---

    def write(self, data: bytes) -> int:
        """Write raw, already encoded bytes."""
        return self._transport.write(data)

    def send_text(self, text: str) -> int:
        """Print text, replacing unrepresentable characters with '?'.

        Returns:
            Number of bytes written
        """
        return self._transport.write(encode(text))

    def send_control(self, code: ControlCode, *params: int) -> int:
        """Send a control code followed by its parameter bytes.

        The command goes out in a single write so no other output can end
        up between the code and its parameter.

        Raises:
            ValueError: If the parameter count does not match the code or a
                parameter does not fit in a byte
        """
        expected = 1 if takes_parameter(code) else 0
        if len(params) != expected:
            raise ValueError(f"{code.name} takes {expected} parameter(s), got {len(params)}")
        for param in params:
            if not 0 <= param <= 0xFF:
                raise ValueError(f"Parameter {param} for {code.name} does not fit in a byte")

        command = bytes([int(code), *params])
        logger.debug(f"Sending {code.name} {command.hex(' ')}")
        return self._transport.write(command)

    def bell(self, duration_ms: int) -> int:
        """Ring the bell for ``duration_ms`` milliseconds.

        The duration is rounded down to 20 ms steps.

        Raises:
            InvalidBellDuration: If the step count does not fit in one byte
        """
        steps = duration_ms // BELL_STEP_MS
        if not 0 <= steps <= MAX_BELL_STEPS:
            raise InvalidBellDuration(duration_ms)
        return self.send_control(ControlCode.BELL, steps)

    def set_tab_size(self, strength: int) -> int:
        """Set the tab step width."""
        return self.send_control(ControlCode.TAB_STEP, strength)

    def move_paper(self, step: int) -> int:
        """Feed the paper by ``step`` steps.

        Raises:
            InvalidPaperStep: For step counts 2 to 6, which the device refuses
        """
        if step in FORBIDDEN_PAPER_STEPS:
            raise InvalidPaperStep(step)
        return self.send_control(ControlCode.MOVE_PAPER, step)

    def set_baud_rate(self, rate: BaudRate) -> int:
        """Switch the typewriter to another line speed.

        The host side of the link must be reconfigured to
        ``rate.bits_per_second`` by the caller afterwards.
        """
        return self.send_control(ControlCode.BAUD_RATE, int(BaudRate(rate)))

    def enable_remote_mode(self) -> DeviceMode:
        """Stop printing keystrokes; they are only reported to the host."""
        self.send_control(ControlCode.KEYBOARD_OFF)
        return DeviceMode.REMOTE

    def disable_remote_mode(self) -> DeviceMode:
        """Print keystrokes directly again."""
        self.send_control(ControlCode.KEYBOARD_ON)
        return DeviceMode.LOCAL

    # --- Input ---

    def read_event(self) -> Optional[InputEvent]:
        """Read one character or control code from the typewriter.

        Up to three bytes are read. The longest character sequence at the
        start of them wins; otherwise the first byte is looked up as a
        control code. Unused bytes are pushed back to the transport for the
        next call.

        A dead key arrives as its first byte before the completing space
        is typed, so reading it on its own raises UnknownCode.

        Returns:
            The event, or None if the transport returned no data

        Raises:
            UnknownCode: If the first byte is neither a character nor a
                control code. The byte is consumed.
        """
        data = self._transport.read(MAX_SEQUENCE_LENGTH)
        if not data:
            return None

        try:
            character, size = decode_prefix(data)
        except InvalidInput:
            pass
        else:
            self._transport.unread(data[size:])
            return CharacterEvent(character)

        self._transport.unread(data[1:])
        code = lookup(data[0])
        if code is None:
            logger.warning(f"Unknown code 0x{data[0]:02X} from typewriter")
            raise UnknownCode(data[0])
        return ControlCodeEvent(code)
