"""
RTF Content Extractor
=====================

Extracts the visible text of RTF (Rich Text Format) files.

File Format Background
----------------------
RTF is a plain-text format: a tree of brace-delimited groups carrying
backslash control words. Some groups are document text, others hold font and
colour tables, document info, field instructions, pictures or embedded
objects. Non-ASCII characters are written as ``\\'xx`` byte escapes in the
document's code page or as ``\\uN`` Unicode escapes.

Extraction
----------
The file bytes are decoded with charset_normalizer (RTF is normally 7-bit,
so this is almost always ASCII), then streamed through
:class:`~rtf2text.parsing.rtf.stripper.RtfStripper`. The stripper keeps only
text destinations, resolves the escapes, and reports problems through the
return code instead of raising.

Extracted Content
-----------------
    - full_text: the visible text, without the final newline
    - paragraphs: one RtfParagraph per non-empty line
    - metadata: RtfMetadata with file information, detected_encoding,
      return_code and the warnings raised while stripping

Known Limitations
-----------------
- No formatting, tables, images or document structure are reconstructed
- Corrupted documents are extracted best-effort (return_code 1)

Usage
-----
    >>> import io
    >>> from rtf2text.parsing.extractors.rtf_extractor import read_rtf
    >>>
    >>> with open("letter.rtf", "rb") as f:
    ...     for doc in read_rtf(io.BytesIO(f.read()), path="letter.rtf"):
    ...         print(doc.metadata.return_code)
    ...         print(doc.get_full_text())
"""

import io
import logging
from typing import Any, Generator

from charset_normalizer import from_bytes

from rtf2text.parsing.exceptions import (
    ExtractionError,
    ExtractionFailedError,
    ExtractionFileFormatNotSupportedError,
)
from rtf2text.parsing.extractors.data_types import (
    RtfContent,
    RtfMetadata,
    RtfParagraph,
)
from rtf2text.parsing.rtf.state import ReturnCode
from rtf2text.parsing.rtf.stripper import delete_final_eol, strip_text

logger = logging.getLogger(__name__)


def _detect_and_decode(content: bytes) -> tuple[str, str]:
    """
    Detect encoding and decode bytes to string.

    Falls back to UTF-8 with replacement if detection fails.

    Returns:
        Tuple of (decoded_text, detected_encoding).
    """
    if not content:
        return "", "utf-8"

    best_match = from_bytes(content).best()
    if best_match is not None:
        encoding = best_match.encoding
        logger.debug("Detected encoding: %s", encoding)
        try:
            return str(best_match), encoding
        except Exception as e:
            logger.warning(
                "Failed to decode with detected encoding %s: %s", encoding, e
            )

    logger.debug("Encoding detection failed, falling back to UTF-8")
    return content.decode("utf-8", errors="replace"), "utf-8"


def read_rtf(
    file_like: io.BytesIO, path: str | None = None, copy_if_not_rtf: bool = False
) -> Generator[RtfContent, Any, None]:
    """
    Extract the visible text of an RTF file.

    Uses a generator pattern for API consistency with other extractors. RTF
    files yield exactly one RtfContent object.

    Args:
        file_like: BytesIO object with the file data. Reset to the start
            before reading; a text stream is accepted as well.
        path: Optional file path to populate file metadata fields.
        copy_if_not_rtf: Pass input without the RTF prefix through as plain
            text instead of raising.

    Yields:
        RtfContent with the text, its paragraphs and the extraction metadata.

    Raises:
        ExtractionFileFormatNotSupportedError: The input does not start with
            ``{\\rtf`` and copy_if_not_rtf is false.
        ExtractionFailedError: Extraction failed for any other reason.
    """
    try:
        logger.debug("Reading RTF file")
        file_like.seek(0)
        content = file_like.read()

        if isinstance(content, bytes):
            text, detected_encoding = _detect_and_decode(content)
        else:
            text, detected_encoding = content, "utf-8"

        result = strip_text(text, copy_if_not_rtf=copy_if_not_rtf)
        if result.return_code == ReturnCode.NO_RTF and not copy_if_not_rtf:
            raise ExtractionFileFormatNotSupportedError(
                path, f"Not an RTF document (missing {{\\rtf prefix): {path}"
            )
        if result.return_code == ReturnCode.CORRUPTED_RTF:
            logger.warning(
                "RTF document %s looks corrupted (%d warnings)",
                path or "<stream>",
                len(result.warnings),
            )

        full_text = delete_final_eol(result.text)
        metadata = RtfMetadata(
            detected_encoding=detected_encoding,
            return_code=int(result.return_code),
            warnings=[diagnostic.message for diagnostic in result.warnings],
        )
        metadata.populate_from_path(path)

        yield RtfContent(
            metadata=metadata,
            paragraphs=[
                RtfParagraph(text=line)
                for line in full_text.split("\n")
                if line.strip()
            ],
            full_text=full_text,
        )
    except ExtractionError:
        raise
    except Exception as exc:
        raise ExtractionFailedError("Failed to extract RTF file", cause=exc) from exc
