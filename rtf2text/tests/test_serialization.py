import io
import json
import logging
import unittest

import pytest

from rtf2text import read_file
from rtf2text.parsing.extractors.data_types import (
    RtfContent,
    RtfMetadata,
    RtfParagraph,
)
from rtf2text.parsing.extractors.serialization import (
    deserialize_extraction,
    serialize_extraction,
)
from rtf2text.parsing.rtf.state import ReturnCode

logger = logging.getLogger(__name__)

tc = unittest.TestCase()
tc.maxDiff = None


def test_serialize_for_json() -> None:
    path = "rtf2text/tests/resources/rtf/sample.rtf"
    obj = next(read_file(path))
    tc.assertIsInstance(obj, RtfContent)

    payload = obj.to_json()
    tc.assertIsInstance(payload, dict)
    tc.assertEqual("RtfContent", payload["_type"])
    tc.assertEqual("RtfMetadata", payload["metadata"]["_type"])
    tc.assertEqual("RtfParagraph", payload["paragraphs"][0]["_type"])

    try:
        json.dumps(payload)
    except Exception as e:
        tc.fail("Unexpected exception: {}".format(e))


def test_round_trip_through_json() -> None:
    path = "rtf2text/tests/resources/rtf/corrupted.rtf"
    obj = next(read_file(path))

    restored = deserialize_extraction(json.loads(json.dumps(obj.to_json())))

    tc.assertIsInstance(restored, RtfContent)
    tc.assertIsInstance(restored.metadata, RtfMetadata)
    tc.assertIsInstance(restored.paragraphs[0], RtfParagraph)
    tc.assertEqual(obj, restored)
    tc.assertTrue(restored.metadata.is_corrupted)


def test_enum_is_serialized_by_value() -> None:
    tc.assertDictEqual(
        {"value": 1}, serialize_extraction(ReturnCode.CORRUPTED_RTF)
    )


def test_nested_containers() -> None:
    content = RtfContent(
        metadata=RtfMetadata(return_code=0, warnings=["a", "b"]),
        paragraphs=[RtfParagraph(text="one"), RtfParagraph(text="two")],
        full_text="one\ntwo",
    )
    payload = serialize_extraction(content)
    tc.assertListEqual(["a", "b"], payload["metadata"]["warnings"])
    tc.assertEqual(content, deserialize_extraction(payload))


def test_deserialize_rejects_invalid_input() -> None:
    with pytest.raises(ValueError):
        deserialize_extraction(["not", "a", "dict"])
    with pytest.raises(ValueError):
        deserialize_extraction({"full_text": "no type marker"})


def test_deserialize_unknown_type_returns_dict() -> None:
    data = {"_type": "SomethingElse", "value": 1}
    tc.assertDictEqual(data, deserialize_extraction(data))


def test_read_file_from_bytes_matches_path() -> None:
    path = "rtf2text/tests/resources/rtf/sample.rtf"
    from_path = next(read_file(path))
    with open(path, "rb") as f:
        from rtf2text import read_rtf

        from_bytes = next(read_rtf(io.BytesIO(f.read()), path))
    tc.assertEqual(from_path.to_json(), from_bytes.to_json())
