"""Unit tests for the standard library codec registration."""
import codecs
import io
import unittest

from erika.codec import CODEC_NAME, register
from erika.errors import InvalidInput, UnrepresentableCharacter


class TestCodecRegistry(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        register()

    def test_register_twice(self):
        register()
        self.assertEqual(codecs.lookup("gdr_ascii").name, CODEC_NAME)

    def test_lookup_alias(self):
        self.assertEqual(codecs.lookup("gdr-ascii").name, CODEC_NAME)
        self.assertEqual(codecs.lookup("GDR_ASCII").name, CODEC_NAME)

    def test_str_encode(self):
        self.assertEqual("Hello".encode("gdr_ascii"), b"\x12\x5A\x4D\x4D\x5E")

    def test_bytes_decode(self):
        self.assertEqual(b"\x20\x72\x2E\x71\x0C".decode("gdr_ascii"), "€ 5")

    def test_encode_strict(self):
        with self.assertRaises(UnrepresentableCharacter):
            "@".encode("gdr_ascii")

    def test_encode_replace(self):
        self.assertEqual("a@".encode("gdr_ascii", errors="replace"), b"\x61\x35")

    def test_decode_strict(self):
        with self.assertRaises(InvalidInput) as ctx:
            b"\x61\x00".decode("gdr_ascii")
        self.assertEqual(ctx.exception.position, 1)

    def test_decode_replace(self):
        self.assertEqual(b"\x61\x00\x61".decode("gdr_ascii", errors="replace"), "a\ufffda")

    def test_unsupported_error_handler(self):
        with self.assertRaises(ValueError):
            "a".encode("gdr_ascii", errors="ignore")
        with self.assertRaises(ValueError):
            b"\x61".decode("gdr_ascii", errors="ignore")


class TestIncrementalCodec(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        register()

    def test_iterdecode_euro_split_after_c(self):
        chunks = [b"\x20", b"\x72\x2E"]
        self.assertEqual("".join(codecs.iterdecode(chunks, "gdr_ascii")), "\u20ac")

    def test_iterdecode_euro_split_after_backspace(self):
        chunks = [b"\x61\x20\x72", b"\x2E"]
        self.assertEqual("".join(codecs.iterdecode(chunks, "gdr_ascii")), "a\u20ac")

    def test_iterdecode_dead_key_split(self):
        chunks = [b"\x19", b"\x71\x61"]
        self.assertEqual("".join(codecs.iterdecode(chunks, "gdr_ascii")), "^a")

    def test_decoder_holds_back_partial_sequence(self):
        decoder = codecs.getincrementaldecoder("gdr_ascii")()
        self.assertEqual(decoder.decode(b"\x61\x20"), "a")
        self.assertEqual(decoder.decode(b"\x72"), "")
        self.assertEqual(decoder.decode(b"", final=True), "C\b")

    def test_decoder_final_flushes_lone_c(self):
        decoder = codecs.getincrementaldecoder("gdr_ascii")()
        self.assertEqual(decoder.decode(b"\x20", final=True), "C")

    def test_decoder_final_lone_dead_key_strict(self):
        decoder = codecs.getincrementaldecoder("gdr_ascii")()
        self.assertEqual(decoder.decode(b"\x19"), "")
        with self.assertRaises(InvalidInput):
            decoder.decode(b"", final=True)

    def test_decoder_replace(self):
        decoder = codecs.getincrementaldecoder("gdr_ascii")(errors="replace")
        self.assertEqual(decoder.decode(b"\x00\x19"), "\ufffd")
        self.assertEqual(decoder.decode(b"\x61", final=True), "\ufffda")

    def test_decoder_reset(self):
        decoder = codecs.getincrementaldecoder("gdr_ascii")()
        decoder.decode(b"\x20")
        decoder.reset()
        self.assertEqual(decoder.decode(b"\x61", final=True), "a")

    def test_iterencode(self):
        chunks = list(codecs.iterencode(["He", "\u20ac"], "gdr_ascii"))
        self.assertEqual(b"".join(chunks), b"\x12\x5A\x20\x72\x2E")

    def test_incremental_encoder_strict(self):
        encoder = codecs.getincrementalencoder("gdr_ascii")()
        with self.assertRaises(UnrepresentableCharacter):
            encoder.encode("@")

    def test_text_io_wrapper(self):
        stream = io.TextIOWrapper(io.BytesIO(b"\x20\x72\x2E\x71\x19\x71"), encoding="gdr_ascii")
        self.assertEqual(stream.read(), "\u20ac ^")


if __name__ == '__main__':
    unittest.main()
