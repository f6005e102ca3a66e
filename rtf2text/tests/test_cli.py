import json
from pathlib import Path

import rtf2text
from rtf2text.cli import main
from rtf2text.parsing.extractors.serialization import serialize_extraction


def test_cli_outputs_full_text_by_default(capsys) -> None:
    path = Path("rtf2text/tests/resources/rtf/sample.rtf").resolve()
    expected = next(rtf2text.read_file(path)).get_full_text()

    exit_code = main([str(path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == f"{expected}\n"


def test_cli_outputs_json_with_flag(capsys) -> None:
    path = Path("rtf2text/tests/resources/rtf/sample.rtf").resolve()
    expected = serialize_extraction(next(rtf2text.read_file(path)))

    exit_code = main(["--json", str(path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out.strip())
    assert payload == expected
    assert payload["_type"] == "RtfContent"
    assert payload["metadata"]["return_code"] == 0


def test_cli_corrupted_document_succeeds(capsys) -> None:
    path = Path("rtf2text/tests/resources/rtf/corrupted.rtf").resolve()

    exit_code = main(["--json", str(path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out.strip())
    assert payload["metadata"]["return_code"] == 1
    assert len(payload["metadata"]["warnings"]) == 2


def test_cli_not_rtf_fails(capsys) -> None:
    path = Path("rtf2text/tests/resources/rtf/not_rtf.rtf").resolve()

    exit_code = main([str(path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert "Not an RTF document" in captured.err


def test_cli_not_rtf_copied(capsys) -> None:
    path = Path("rtf2text/tests/resources/rtf/not_rtf.rtf").resolve()

    exit_code = main(["--copy-if-not-rtf", str(path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "Just a plain text file.\n"


def test_cli_missing_file(capsys, tmp_path) -> None:
    exit_code = main([str(tmp_path / "missing.rtf")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.err.startswith("rtf2text: ")


def test_cli_reads_any_extension(capsys, tmp_path) -> None:
    path = tmp_path / "note.txt"
    path.write_text("{\\rtf1\\ansi Hello\\par}", encoding="ascii")

    exit_code = main([str(path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "Hello\n"


def test_cli_rejects_unknown_arguments(capsys) -> None:
    path = Path("rtf2text/tests/resources/rtf/sample.rtf").resolve()

    exit_code = main(["--unknown", str(path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert "unsupported arguments: --unknown" in captured.err


def test_cli_requires_a_path(capsys) -> None:
    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "usage: rtf2text" in captured.err


def test_cli_outputs_characters_outside_the_bmp(capsys, tmp_path) -> None:
    path = tmp_path / "emoji.rtf"
    path.write_text(
        "{\\rtf1\\ansi smile \\u55357?\\u56832?\\par}", encoding="ascii"
    )

    exit_code = main([str(path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.out == "smile \N{GRINNING FACE}\n"
