"""Control codes of the Erika 3004 command set.

Bytes below 0x73 belong to the character codec. Every control code is a
single byte; the codes in PARAMETERIZED_CODES are followed by exactly one raw
parameter byte, which this module does not interpret.
"""
from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Optional


class ControlCode(IntEnum):
    """Named device operations and their command bytes."""
    HALFSTEP_RIGHT = 0x73
    HALFSTEP_LEFT = 0x74
    HALFSTEP_DOWN = 0x75
    HALFSTEP_UP = 0x76
    TAB_SET = 0x7A
    TAB_DEL = 0x7B
    TAB_ALL_DEL = 0x7C
    TAB_STANDARD = 0x7D
    MARGIN_SET = 0x7E
    MARGIN_DEL = 0x7F
    MARGIN_ALL_DEL = 0x80
    MARGIN_UNSET = 0x81
    ROW_SIZE_DOWN = 0x82
    ROW_SIZE_UP = 0x83
    GET_PAPER = 0x84
    ROW_1 = 0x85
    ROW_1_5 = 0x86
    ROW_2 = 0x87
    CHARS_10_PER_INCH = 0x88
    CHARS_12_PER_INCH = 0x89
    CHARS_15_PER_INCH = 0x8A
    DELETE_OFF = 0x8B
    DELETE_ON = 0x8C
    BACKWARDS_ON = 0x8D
    BACKWARDS_OFF = 0x8E
    RIGHT_MARGIN_ON = 0x8F
    MARGIN_SET_OFF_UNOFFICIAL = 0x90
    KEYBOARD_OFF = 0x91
    KEYBOARD_ON = 0x92
    RESET = 0x93
    PRINTER_READY = 0x94
    SECOND_CHARSET_OFF = 0x95
    SECOND_CHARSET_ON = 0x96
    AUTOREPEAT_ON = 0x9B
    AUTOREPEAT_OFF = 0x9C
    AUTOREPEAT_OFF_PILGRIM_NORMAL = 0x9D
    PILGRIM = 0x9E
    LINE_DOWN = 0x9F
    AUTOREPEAT_ALL_ON = 0xA0
    BAUD_RATE = 0xA1
    KEY_STRENGTH = 0xA2
    TAB_STEP = 0xA3
    MOVE_PAPER = 0xA4
    ROTATE_WHEEL = 0xA5
    MOVE_TAPE = 0xA6
    DOUBLE_PRINT = 0xA9
    BELL = 0xAA
    KEYBOARD_INPUT = 0xAB
    KEYBOARD_INPUT_2 = 0xAC
    DELETE_RELOCATE = 0xAD
    DELETE_LAST_CHAR = 0xAE
    RELOCATE = 0xAF


# Codes followed by one parameter byte
PARAMETERIZED_CODES = frozenset({
    ControlCode.BAUD_RATE,
    ControlCode.KEY_STRENGTH,
    ControlCode.TAB_STEP,
    ControlCode.MOVE_PAPER,
    ControlCode.BELL,
})

_BY_BYTE = MappingProxyType({int(code): code for code in ControlCode})


def lookup(byte: int) -> Optional[ControlCode]:
    """Return the control code for a raw byte, or None if it is not one."""
    return _BY_BYTE.get(byte)


def takes_parameter(code: ControlCode) -> bool:
    """Whether ``code`` must be followed by a parameter byte."""
    return code in PARAMETERIZED_CODES
