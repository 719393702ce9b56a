"""GDR ASCII character codec for Erika typewriters."""

from .table import DECODE_TABLE, ENCODE_TABLE, FALLBACK_CHARACTER, MAX_SEQUENCE_LENGTH
from .gdr_ascii import decode, decode_char, decode_prefix, encode, encode_char, try_encode
from .registry import CODEC_NAME, register

__all__ = [
    "DECODE_TABLE",
    "ENCODE_TABLE",
    "FALLBACK_CHARACTER",
    "MAX_SEQUENCE_LENGTH",
    "decode",
    "decode_char",
    "decode_prefix",
    "encode",
    "encode_char",
    "try_encode",
    "CODEC_NAME",
    "register",
]
