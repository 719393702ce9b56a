"""Serial transport for the Erika typewriter.

The typewriter is attached through a USB serial adapter and talks 8N1 at
1200 baud by default. This module only moves bytes; it does not interpret
them.
"""
from __future__ import annotations

import logging
from typing import Optional

import serial

from ..errors import TransportError
from .base import Transport

logger = logging.getLogger(__name__)

DEFAULT_DEVICE = "/dev/ttyUSB0"
CONNECTION_BAUD = 1200
BYTESIZE = serial.EIGHTBITS
READ_TIMEOUT: Optional[float] = None  # block until data arrives


class SerialTransport(Transport):
    """Blocking pyserial connection to the typewriter.

    Example:
        >>> transport = SerialTransport("/dev/ttyUSB0")
        >>> transport.open()
        >>> transport.write(b"\\x12\\x5a")
        2
        >>> transport.close()
    """

    def __init__(self,
                 port: str = DEFAULT_DEVICE,
                 baudrate: int = CONNECTION_BAUD,
                 timeout: Optional[float] = READ_TIMEOUT,
                 rtscts: bool = False):
        """Initialize serial transport.

        Args:
            port: Serial port path (e.g., '/dev/ttyUSB0')
            baudrate: Serial baud rate (default 1200)
            timeout: Read timeout in seconds, None to block forever
            rtscts: Enable hardware flow control
        """
        super().__init__()
        self._port = port
        self._baudrate = baudrate
        self._timeout = timeout
        self._rtscts = rtscts
        self._serial: Optional[serial.Serial] = None

    @property
    def port(self) -> str:
        return self._port

    @property
    def baudrate(self) -> int:
        return self._baudrate

    @baudrate.setter
    def baudrate(self, value: int) -> None:
        """Change the host side line speed, e.g. after a BAUD_RATE command."""
        if self._serial is not None:
            try:
                self._serial.baudrate = value
            except (serial.SerialException, ValueError) as e:
                logger.error(f"Failed to set baud rate {value} on {self._port}: {e}")
                raise TransportError(f"Failed to set baud rate {value}: {e}") from e
            logger.info(f"Switched {self._port} to {value} baud")
        self._baudrate = value

    def open(self) -> None:
        """Open the serial port."""
        if self._serial is not None:
            logger.warning("Already open")
            return

        try:
            self._serial = serial.Serial(
                port=self._port,
                baudrate=self._baudrate,
                bytesize=BYTESIZE,
                timeout=self._timeout,
                rtscts=self._rtscts,
            )
        except serial.SerialException as e:
            logger.error(f"Failed to open {self._port}: {e}")
            raise TransportError(f"Failed to open {self._port}: {e}") from e

        logger.info(f"Connected to typewriter on {self._port} @ {self._baudrate} baud")

    def close(self) -> None:
        """Close the serial port."""
        if self._serial is None:
            return
        try:
            self._serial.close()
        except serial.SerialException as e:
            logger.error(f"Error closing serial port: {e}")
        finally:
            self._serial = None
            self._pushback.clear()
        logger.info("Disconnected from typewriter")

    def is_open(self) -> bool:
        return self._serial is not None

    def write(self, data: bytes) -> int:
        """Send raw bytes to the typewriter and wait until they are out."""
        port = self._require_open()
        try:
            written = port.write(data)
            port.flush()
        except serial.SerialException as e:
            logger.error(f"Send error: {e}")
            raise TransportError(f"Send error: {e}") from e
        logger.debug(f"Sent {len(data)} bytes: {data.hex(' ')}")
        return written if written is not None else len(data)

    def _read_blocking(self, size: int) -> bytes:
        port = self._require_open()
        try:
            first = port.read(1)
        except serial.SerialException as e:
            logger.error(f"Serial read error: {e}")
            raise TransportError(f"Serial read error: {e}") from e
        if not first:
            return b""
        return first + self._read_available(size - 1)

    def _read_available(self, size: int) -> bytes:
        port = self._require_open()
        try:
            count = min(size, port.in_waiting)
            return port.read(count) if count > 0 else b""
        except serial.SerialException as e:
            logger.error(f"Serial read error: {e}")
            raise TransportError(f"Serial read error: {e}") from e

    def _require_open(self) -> serial.Serial:
        if self._serial is None:
            raise TransportError(f"Serial port {self._port} is not open")
        return self._serial
