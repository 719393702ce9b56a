"""Unit tests for the control code registry."""
import unittest

from erika.codec import DECODE_TABLE
from erika.protocol.control_codes import (
    ControlCode,
    PARAMETERIZED_CODES,
    lookup,
    takes_parameter,
)


class TestControlCodeValues(unittest.TestCase):
    """Tests for the fixed command bytes."""

    def test_known_values(self):
        self.assertEqual(ControlCode.HALFSTEP_RIGHT, 0x73)
        self.assertEqual(ControlCode.TAB_SET, 0x7A)
        self.assertEqual(ControlCode.MARGIN_ALL_DEL, 0x80)
        self.assertEqual(ControlCode.KEYBOARD_OFF, 0x91)
        self.assertEqual(ControlCode.KEYBOARD_ON, 0x92)
        self.assertEqual(ControlCode.SECOND_CHARSET_ON, 0x96)
        self.assertEqual(ControlCode.AUTOREPEAT_ON, 0x9B)
        self.assertEqual(ControlCode.TAB_STEP, 0xA3)
        self.assertEqual(ControlCode.MOVE_PAPER, 0xA4)
        self.assertEqual(ControlCode.DOUBLE_PRINT, 0xA9)
        self.assertEqual(ControlCode.BELL, 0xAA)
        self.assertEqual(ControlCode.RELOCATE, 0xAF)

    def test_values_are_unique(self):
        values = [int(code) for code in ControlCode]
        self.assertEqual(len(values), len(set(values)))

    def test_disjoint_from_single_byte_characters(self):
        """Test that no control code byte is also a one-byte character."""
        single_bytes = {sequence[0] for sequence in DECODE_TABLE if len(sequence) == 1}
        for code in ControlCode:
            self.assertNotIn(int(code), single_bytes, code.name)


class TestLookup(unittest.TestCase):
    """Tests for reverse lookup by byte."""

    def test_lookup_hit(self):
        self.assertIs(lookup(0xAA), ControlCode.BELL)
        self.assertIs(lookup(0x76), ControlCode.HALFSTEP_UP)

    def test_lookup_miss(self):
        self.assertIsNone(lookup(0x00))
        self.assertIsNone(lookup(0x97))
        self.assertIsNone(lookup(0xFF))

    def test_lookup_is_pure(self):
        """Test that repeated lookups return the same result."""
        for byte in range(256):
            self.assertIs(lookup(byte), lookup(byte))

    def test_lookup_covers_every_code(self):
        for code in ControlCode:
            self.assertIs(lookup(int(code)), code)


class TestParameters(unittest.TestCase):

    def test_parameterized_codes(self):
        self.assertEqual(
            PARAMETERIZED_CODES,
            {
                ControlCode.BAUD_RATE,
                ControlCode.KEY_STRENGTH,
                ControlCode.TAB_STEP,
                ControlCode.MOVE_PAPER,
                ControlCode.BELL,
            },
        )

    def test_takes_parameter(self):
        self.assertTrue(takes_parameter(ControlCode.BELL))
        self.assertFalse(takes_parameter(ControlCode.KEYBOARD_OFF))


if __name__ == '__main__':
    unittest.main()
