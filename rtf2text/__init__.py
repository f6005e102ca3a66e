"""
rtf2text: Plain text extraction from RTF documents.

A small streaming RTF stripper: it keeps the visible text of a document,
resolves hex and Unicode escapes through the document's code page, and drops
everything held in non-text destinations (font tables, fields, pictures,
embedded objects, ...). Problems never raise; they are reported through the
return code (0 ok, 1 corrupted, 2 not RTF).
"""

import io
from pathlib import Path
from typing import Any, Generator

from rtf2text.parsing.extractors.data_types import ExtractionInterface, RtfContent
from rtf2text.parsing.rtf.state import ReturnCode
from rtf2text.parsing.rtf.stripper import (
    RtfStripper,
    StripResult,
    check_rtf,
    delete_final_eol,
    get_last_return_code,
    strip_limited_source,
    strip_text,
)
from rtf2text.router import get_extractor, is_supported_file

__version__ = "0.1.0"


def read_rtf(
    file_like: io.BytesIO, path: str | None = None, copy_if_not_rtf: bool = False
) -> Generator[RtfContent, Any, None]:
    """Extract content from an RTF file."""
    from rtf2text.parsing.extractors.rtf_extractor import read_rtf as _read_rtf

    return _read_rtf(file_like, path, copy_if_not_rtf)


def read_file(
    path: str | Path,
) -> Generator[ExtractionInterface, Any, None]:
    """
    Read and extract content from a file.

    Detects the file type based on extension and uses the appropriate
    extractor.

    Args:
        path: Path to the file to read.

    Yields:
        A dataclass containing extracted content and metadata
        (RtfContent for .rtf files).

    Raises:
        ExtractionFileFormatNotSupportedError: If the file type is not supported
            or the file is not RTF.
        FileNotFoundError: If the file does not exist.

    Example:
        >>> import rtf2text
        >>> for result in rtf2text.read_file("letter.rtf"):
        ...     print(result.get_full_text())
    """
    path = Path(path)
    extractor = get_extractor(str(path))
    with open(path, "rb") as f:
        yield from extractor(io.BytesIO(f.read()), str(path))


__all__ = [
    # Version
    "__version__",
    # Main functions
    "read_file",
    "read_rtf",
    "is_supported_file",
    "get_extractor",
    # Stripping core
    "RtfStripper",
    "StripResult",
    "ReturnCode",
    "strip_text",
    "check_rtf",
    "delete_final_eol",
    # Legacy convenience API
    "strip_limited_source",
    "get_last_return_code",
]
