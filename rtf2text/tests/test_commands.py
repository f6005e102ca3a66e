import logging
import unittest

from rtf2text.parsing.rtf import commands
from rtf2text.parsing.rtf.commands import ActionKind

logger = logging.getLogger(__name__)

tc = unittest.TestCase()


def test_action_kinds() -> None:
    tc.assertEqual(ActionKind.INSERTION_CHAR, commands.lookup("par").kind)
    tc.assertEqual("\n", commands.lookup("par").char)
    tc.assertEqual("\t", commands.lookup("cell").char)
    tc.assertEqual(ActionKind.UNICODE_ESCAPE, commands.lookup("u").kind)
    tc.assertEqual(ActionKind.TEXT_DESTINATION, commands.lookup("fldrslt").kind)
    tc.assertEqual(ActionKind.NO_TEXT_DESTINATION, commands.lookup("fonttbl").kind)
    tc.assertEqual(ActionKind.CHARSET, commands.lookup("mac").kind)
    tc.assertEqual("mac", commands.lookup("mac").charset)
    tc.assertEqual(
        ActionKind.CHARSET_FROM_CODEPAGE, commands.lookup("ansicpg").kind
    )


def test_every_kind_is_used() -> None:
    used = {action.kind for action in commands.COMMANDS.values()}
    tc.assertSetEqual(set(ActionKind), used)


def test_formatting_words_are_unknown() -> None:
    for keyword in ["b", "i", "fs", "pard", "plain", "*", "uc"]:
        tc.assertIsNone(commands.lookup(keyword), keyword)


def test_lookup_is_case_sensitive() -> None:
    tc.assertIsNotNone(commands.lookup("par"))
    tc.assertIsNone(commands.lookup("Par"))
    tc.assertIsNone(commands.lookup("PAR"))


def test_table_is_read_only() -> None:
    with tc.assertRaises(TypeError):
        commands.COMMANDS["par"] = commands.lookup("tab")


def test_destination_groups_do_not_overlap() -> None:
    tc.assertFalse(set(commands.TEXT_DESTINATIONS) & commands.NO_TEXT_DESTINATIONS)
    tc.assertFalse(set(commands.INSERTION_CHARS) & commands.NO_TEXT_DESTINATIONS)


def test_unicode_keyword() -> None:
    tc.assertTrue(commands.is_unicode_escape("u"))
    tc.assertFalse(commands.is_unicode_escape("uc"))
