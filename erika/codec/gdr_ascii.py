"""Encoding and decoding between Unicode text and GDR ASCII bytes.

Pure functions with no side effects. Encoding never touches the transport,
so a failed strict encode leaves nothing half written.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..errors import InvalidInput, UnrepresentableCharacter
from .table import FALLBACK_CHARACTER, MAX_SEQUENCE_LENGTH, lookup_character, lookup_sequence

logger = logging.getLogger(__name__)

_FALLBACK_SEQUENCE = lookup_character(FALLBACK_CHARACTER)
if _FALLBACK_SEQUENCE is None:
    raise ValueError(f"Fallback character {FALLBACK_CHARACTER!r} is not part of the table")


def encode_char(character: str) -> Optional[bytes]:
    """Encode a single character.

    Returns:
        The 1-3 byte sequence, or None if the character has no entry
    """
    return lookup_character(character)


def try_encode(text: str) -> bytes:
    """Encode text, failing on the first unrepresentable character.

    Args:
        text: Unicode text

    Returns:
        Encoded bytes

    Raises:
        UnrepresentableCharacter: If any character has no table entry

    Examples:
        >>> try_encode("Hello")
        b'\\x12ZMM^'
    """
    out = bytearray()
    for position, character in enumerate(text):
        sequence = lookup_character(character)
        if sequence is None:
            raise UnrepresentableCharacter(character, position)
        out += sequence
    return bytes(out)


def encode(text: str) -> bytes:
    """Encode text, replacing unrepresentable characters with '?'.

    This function always succeeds.
    """
    out = bytearray()
    for character in text:
        sequence = lookup_character(character)
        if sequence is None:
            logger.debug(f"Replacing unrepresentable character {character!r} with {FALLBACK_CHARACTER!r}")
            sequence = _FALLBACK_SEQUENCE
        out += sequence
    return bytes(out)


def decode_char(data: bytes) -> str:
    """Decode exactly one character from a 1-3 byte sequence.

    The whole of ``data`` must be one table entry; trailing bytes are not
    ignored.

    Raises:
        InvalidInput: If the sequence is empty, too long or not in the table
    """
    if not 1 <= len(data) <= MAX_SEQUENCE_LENGTH:
        raise InvalidInput(bytes(data))
    character = lookup_sequence(data)
    if character is None:
        raise InvalidInput(bytes(data))
    return character


def decode(data: bytes) -> str:
    """Decode a GDR ASCII byte stream into text.

    Uses greedy longest match: at each position a three byte sequence is
    tried first, then two bytes, then one. Several single bytes are prefixes
    of longer sequences (C starts the euro sign, the dead keys are completed
    by a space), so shorter matches must not be tried first.

    Raises:
        InvalidInput: At the first position where no sequence matches. The
            decoder does not skip bytes or resynchronise.

    Examples:
        >>> decode(b"\\x20\\x72\\x2e")
        '€'
    """
    out = []
    position = 0
    length = len(data)
    while position < length:
        match = _match_at(data, position)
        if match is None:
            raise InvalidInput(bytes(data[position:position + MAX_SEQUENCE_LENGTH]), position)
        character, size = match
        out.append(character)
        position += size
    return "".join(out)


def _match_at(data: bytes, position: int) -> Optional[tuple[str, int]]:
    """Find the longest table entry starting at ``position``."""
    longest = min(MAX_SEQUENCE_LENGTH, len(data) - position)
    for size in range(longest, 0, -1):
        character = lookup_sequence(data[position:position + size])
        if character is not None:
            return character, size
    return None


def decode_prefix(data: bytes) -> tuple[str, int]:
    """Decode the longest character at the start of ``data``.

    Returns:
        Tuple of (character, number of bytes consumed)

    Raises:
        InvalidInput: If no sequence matches at the start of ``data``
    """
    match = _match_at(data, 0) if data else None
    if match is None:
        raise InvalidInput(bytes(data[:MAX_SEQUENCE_LENGTH]))
    return match
