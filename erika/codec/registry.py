"""GDR ASCII as a standard library codec.

After :func:`register` has been called, ``"Hello".encode("gdr_ascii")`` and
``data.decode("gdr_ascii")`` work like any other encoding, including
``codecs.iterdecode()`` and ``io.TextIOWrapper``. Supported error handlers
are ``strict`` and ``replace``.
"""
from __future__ import annotations

import codecs
from typing import Optional, Tuple

from ..errors import InvalidInput
from .gdr_ascii import decode_prefix, encode, try_encode
from .table import MAX_SEQUENCE_LENGTH, is_partial_sequence

CODEC_NAME = "gdr_ascii"

_registered = False


def _check_errors(errors: str) -> None:
    if errors not in ("strict", "replace"):
        raise ValueError(f"Unsupported error handler for {CODEC_NAME}: {errors!r}")


def _encode(text: str, errors: str) -> bytes:
    _check_errors(errors)
    return try_encode(text) if errors == "strict" else encode(text)


def _decode(data: bytes, errors: str, final: bool) -> Tuple[str, int]:
    """Decode as much of ``data`` as possible.

    Unless ``final`` is set, a trailing incomplete sequence (C, or the first
    byte of a dead key) is left unconsumed so the next chunk can complete it.

    Returns:
        Tuple of (text, number of bytes consumed)
    """
    _check_errors(errors)
    out = []
    position = 0
    while position < len(data):
        rest = data[position:]
        if not final and len(rest) < MAX_SEQUENCE_LENGTH and is_partial_sequence(rest):
            break
        try:
            character, size = decode_prefix(rest)
        except InvalidInput as e:
            if errors == "strict":
                raise InvalidInput(e.data, position) from None
            out.append("\ufffd")
            position += 1
            continue
        out.append(character)
        position += size
    return "".join(out), position


class Codec(codecs.Codec):
    """GDR ASCII codec."""

    def encode(self, input: str, errors: str = "strict") -> Tuple[bytes, int]:
        return _encode(input, errors), len(input)

    def decode(self, input: bytes, errors: str = "strict") -> Tuple[str, int]:
        return _decode(bytes(input), errors, final=True)


class IncrementalEncoder(codecs.IncrementalEncoder):
    """Every character maps to a complete sequence, so nothing is buffered."""

    def encode(self, input: str, final: bool = False) -> bytes:
        return _encode(input, self.errors)


class IncrementalDecoder(codecs.BufferedIncrementalDecoder):
    """Holds back up to two trailing bytes that may start a longer sequence."""

    def _buffer_decode(self, input: bytes, errors: str, final: bool) -> Tuple[str, int]:
        return _decode(bytes(input), errors, final)


class StreamWriter(Codec, codecs.StreamWriter):
    """GDR ASCII stream writer."""


class StreamReader(Codec, codecs.StreamReader):
    """GDR ASCII stream reader."""


def getregentry() -> codecs.CodecInfo:
    """Return the codec registry entry."""
    return codecs.CodecInfo(
        name=CODEC_NAME,
        encode=Codec().encode,
        decode=Codec().decode,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamreader=StreamReader,
        streamwriter=StreamWriter,
    )


def _search(name: str) -> Optional[codecs.CodecInfo]:
    if name.replace("-", "_").lower() == CODEC_NAME:
        return getregentry()
    return None


def register() -> None:
    """Make ``gdr_ascii`` (and ``gdr-ascii``) known to :mod:`codecs`.

    Safe to call more than once.
    """
    global _registered
    if not _registered:
        codecs.register(_search)
        _registered = True
