class ErikaError(Exception):
    """Base class for all errors raised by this package."""
    pass


class EncodingError(ErikaError):
    """Raised when text cannot be converted to or from GDR ASCII."""
    pass


class UnrepresentableCharacter(EncodingError):
    """Raised by strict encoding when a character has no GDR ASCII entry."""
    def __init__(self, character: str, position: int):
        super().__init__(
            f"Character {character!r} at position {position} is not representable in GDR ASCII"
        )
        self.character = character
        self.position = position


class InvalidInput(EncodingError):
    """Raised when bytes are not a valid GDR ASCII sequence."""
    def __init__(self, data: bytes, position: int = 0):
        super().__init__(f"Invalid GDR ASCII input {data.hex(' ') or '<empty>'} at offset {position}")
        self.data = data
        self.position = position


class UnknownCode(ErikaError):
    """Raised when a byte read from the device matches neither a character nor a control code."""
    def __init__(self, byte: int):
        super().__init__(f"Unknown code 0x{byte:02X} received from typewriter")
        self.byte = byte


class InvalidBellDuration(ErikaError, ValueError):
    """Raised when a bell duration does not fit the one byte step budget."""
    def __init__(self, duration_ms: int):
        super().__init__(f"Bell duration {duration_ms} ms is out of range (0-5100 ms)")
        self.duration_ms = duration_ms


class InvalidPaperStep(ErikaError, ValueError):
    """Raised when a paper step count is refused by the device."""
    def __init__(self, step: int):
        super().__init__(f"Paper step {step} is not allowed (2-6 are reserved)")
        self.step = step


class TransportError(ErikaError, IOError):
    """Raised when the serial link fails."""
    pass
