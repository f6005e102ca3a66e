import logging
import unittest

from rtf2text.parsing.rtf.charsets import CharsetResolver, codec_name_for_codepage

logger = logging.getLogger(__name__)

tc = unittest.TestCase()


def test_codepage_names() -> None:
    tc.assertEqual("cp1252", codec_name_for_codepage("1252"))
    tc.assertEqual("cp437", codec_name_for_codepage("0437"))
    tc.assertEqual("mac_roman", codec_name_for_codepage("10000"))
    tc.assertEqual("iso8859_15", codec_name_for_codepage("28605"))


def test_no_charset_uses_byte_value_as_code_point() -> None:
    resolver = CharsetResolver()
    tc.assertIsNone(resolver.codec)
    tc.assertEqual("\xe9", resolver.translate(0xE9))
    tc.assertEqual("\x80", resolver.translate(0x80))


def test_named_charsets() -> None:
    resolver = CharsetResolver()

    tc.assertTrue(resolver.set_named("ansi"))
    tc.assertEqual("\xe9", resolver.translate(0xE9))

    tc.assertTrue(resolver.set_named("mac"))
    tc.assertEqual("\xe9", resolver.translate(0x8E))

    tc.assertTrue(resolver.set_named("pc"))
    tc.assertEqual("\xe9", resolver.translate(0x82))

    tc.assertTrue(resolver.set_named("pca"))
    tc.assertEqual("\xe9", resolver.translate(0x82))


def test_codepage_charsets() -> None:
    resolver = CharsetResolver()
    tc.assertTrue(resolver.set_from_codepage("1252"))
    tc.assertEqual("\N{EURO SIGN}", resolver.translate(0x80))

    tc.assertTrue(resolver.set_from_codepage("1251"))
    tc.assertEqual("\N{CYRILLIC CAPITAL LETTER A}", resolver.translate(0xC0))


def test_unknown_charset_keeps_previous_one() -> None:
    resolver = CharsetResolver()
    tc.assertTrue(resolver.set_from_codepage("1252"))
    codec = resolver.codec

    tc.assertFalse(resolver.set_from_codepage("99999"))
    tc.assertFalse(resolver.set_named("ebcdic"))
    tc.assertEqual(codec, resolver.codec)
    tc.assertEqual("\N{EURO SIGN}", resolver.translate(0x80))


def test_undefined_byte_is_replaced() -> None:
    resolver = CharsetResolver()
    resolver.set_from_codepage("1252")
    # 0x81 has no mapping in windows-1252
    tc.assertEqual("\N{REPLACEMENT CHARACTER}", resolver.translate(0x81))
