import logging
import unittest

import pytest

from rtf2text.parsing.exceptions import ExtractionFileFormatNotSupportedError
from rtf2text.parsing.extractors.rtf_extractor import read_rtf
from rtf2text.router import get_extractor, is_supported_file

logger = logging.getLogger(__name__)

tc = unittest.TestCase()


def test_is_supported():
    tc.assertTrue(is_supported_file("myfile.rtf"))
    tc.assertTrue(is_supported_file("MYFILE.RTF"))
    tc.assertTrue(is_supported_file("/some/folder/letter.rtf"))

    tc.assertFalse(is_supported_file("myfile.docx"))
    tc.assertFalse(is_supported_file("myfile.txt"))
    tc.assertFalse(is_supported_file("myfile"))


def test_router():
    func = get_extractor("myfile.rtf")
    tc.assertEqual(read_rtf, func)

    func = get_extractor("/does/not/exist/yet.RTF")
    tc.assertEqual(read_rtf, func)


def test_router_unsupported():
    with pytest.raises(ExtractionFileFormatNotSupportedError) as exc_info:
        get_extractor("myfile.pdf")
    tc.assertEqual("myfile.pdf", exc_info.value.file_path)
