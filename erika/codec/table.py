"""Static GDR ASCII character table.

GDR ASCII is the encoding spoken by the Erika 3004 typewriter family. Most
characters are a single byte. Characters that the machine prints with a dead
key are followed by a space (0x71), and the euro sign is typed as an
overstrike of C, backspace and =.

Both directions are built once at import time from a single list of entries
and exposed as read-only mappings, so the table is bijective by construction.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping, Optional

MAX_SEQUENCE_LENGTH: Final = 3

# Substituted by lossy encoding
FALLBACK_CHARACTER: Final = "?"

_ENTRIES: Final[tuple[tuple[str, bytes], ...]] = (
    # control characters
    ("\x08", b"\x72"),  # backspace
    ("\t", b"\x79"),
    ("\n", b"\x77"),
    ("\r", b"\x78"),

    # punctuation
    (" ", b"\x71"),
    ("!", b"\x42"),
    ('"', b"\x43"),
    ("#", b"\x41"),
    ("$", b"\x48"),
    ("%", b"\x04"),
    ("&", b"\x02"),
    ("'", b"\x17"),
    ("(", b"\x1D"),
    (")", b"\x1F"),
    ("*", b"\x1B"),
    ("+", b"\x25"),
    (",", b"\x64"),
    ("-", b"\x62"),
    (".", b"\x63"),
    ("/", b"\x40"),
    (":", b"\x13"),
    (";", b"\x3B"),
    ("=", b"\x2E"),
    ("?", b"\x35"),
    ("_", b"\x01"),
    ("|", b"\x27"),

    # digits
    ("0", b"\x0D"),
    ("1", b"\x11"),
    ("2", b"\x10"),
    ("3", b"\x0F"),
    ("4", b"\x0E"),
    ("5", b"\x0C"),
    ("6", b"\x0B"),
    ("7", b"\x0A"),
    ("8", b"\x09"),
    ("9", b"\x08"),

    # upper case letters
    ("A", b"\x30"),
    ("B", b"\x18"),
    ("C", b"\x20"),
    ("D", b"\x14"),
    ("E", b"\x34"),
    ("F", b"\x3E"),
    ("G", b"\x1C"),
    ("H", b"\x12"),
    ("I", b"\x21"),
    ("J", b"\x32"),
    ("K", b"\x24"),
    ("L", b"\x2C"),
    ("M", b"\x16"),
    ("N", b"\x2A"),
    ("O", b"\x1E"),
    ("P", b"\x2F"),
    ("Q", b"\x1A"),
    ("R", b"\x36"),
    ("S", b"\x33"),
    ("T", b"\x37"),
    ("U", b"\x28"),
    ("V", b"\x22"),
    ("W", b"\x2D"),
    ("X", b"\x26"),
    ("Y", b"\x31"),
    ("Z", b"\x38"),

    # lower case letters
    ("a", b"\x61"),
    ("b", b"\x4E"),
    ("c", b"\x57"),
    ("d", b"\x53"),
    ("e", b"\x5A"),
    ("f", b"\x49"),
    ("g", b"\x60"),
    ("h", b"\x55"),
    ("i", b"\x05"),
    ("j", b"\x4B"),
    ("k", b"\x50"),
    ("l", b"\x4D"),
    ("m", b"\x4A"),
    ("n", b"\x5C"),
    ("o", b"\x5E"),
    ("p", b"\x5B"),
    ("q", b"\x52"),
    ("r", b"\x59"),
    ("s", b"\x58"),
    ("t", b"\x56"),
    ("u", b"\x5D"),
    ("v", b"\x4F"),
    ("w", b"\x4C"),
    ("x", b"\x5F"),
    ("y", b"\x51"),
    ("z", b"\x54"),

    # special characters
    ("£", b"\x06"),
    ("§", b"\x3D"),
    ("°", b"\x39"),
    ("²", b"\x15"),
    ("³", b"\x23"),
    ("μ", b"\x07"),

    # umlauts and accented letters
    ("Ä", b"\x3F"),
    ("Ö", b"\x3C"),
    ("Ü", b"\x3A"),
    ("ß", b"\x47"),
    ("ä", b"\x65"),
    ("ç", b"\x45"),
    ("è", b"\x46"),
    ("é", b"\x44"),
    ("ö", b"\x66"),
    ("ü", b"\x67"),

    # dead keys, completed with a space
    ("^", b"\x19\x71"),
    ("`", b"\x2B\x71"),
    ("¨", b"\x03\x71"),
    ("´", b"\x29\x71"),

    # overstrike: C, backspace, =
    ("€", b"\x20\x72\x2E"),
)


def _build_tables() -> tuple[Mapping[str, bytes], Mapping[bytes, str]]:
    encode_table: dict[str, bytes] = {}
    decode_table: dict[bytes, str] = {}
    for character, sequence in _ENTRIES:
        if not 1 <= len(sequence) <= MAX_SEQUENCE_LENGTH:
            raise ValueError(f"Bad sequence length for {character!r}: {sequence!r}")
        if character in encode_table:
            raise ValueError(f"Duplicate character {character!r}")
        if sequence in decode_table:
            raise ValueError(f"Sequence {sequence!r} already used by {decode_table[sequence]!r}")
        encode_table[character] = sequence
        decode_table[sequence] = character
    return MappingProxyType(encode_table), MappingProxyType(decode_table)


ENCODE_TABLE, DECODE_TABLE = _build_tables()


def lookup_character(character: str) -> Optional[bytes]:
    """Return the byte sequence for a character, or None."""
    return ENCODE_TABLE.get(character)


def lookup_sequence(sequence: bytes) -> Optional[str]:
    """Return the character for an exact byte sequence, or None."""
    return DECODE_TABLE.get(bytes(sequence))


# Proper prefixes of multi-byte sequences, e.g. C which starts the euro sign
PARTIAL_SEQUENCES: Final = frozenset(
    sequence[:size]
    for sequence in DECODE_TABLE
    for size in range(1, len(sequence))
)


def is_partial_sequence(data: bytes) -> bool:
    """Whether more bytes could turn ``data`` into a longer table entry."""
    return bytes(data) in PARTIAL_SEQUENCES
