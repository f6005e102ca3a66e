import io
import logging
import mimetypes
import os
from typing import Any, Callable, Generator

from rtf2text.mime_types import (
    EXTENSION_MAPPING,
    MIME_TYPE_MAPPING,
    is_supported_mime_type,
)
from rtf2text.parsing.exceptions import ExtractionFileFormatNotSupportedError
from rtf2text.parsing.extractors.data_types import ExtractionInterface

logger = logging.getLogger(__name__)


def _get_extractor(
    file_type: str,
) -> Callable[[io.BytesIO, str | None], Generator[ExtractionInterface, Any, None]]:
    """Return the extractor function for a file type (lazy import)."""
    if file_type == "rtf":
        from rtf2text.parsing.extractors.rtf_extractor import read_rtf

        return read_rtf
    raise ExtractionFileFormatNotSupportedError(
        None, f"No extractor for file type: {file_type}"
    )


def _detect_file_type(path: str) -> str | None:
    path = path.lower()
    mime_type, _ = mimetypes.guess_type(path)
    if is_supported_mime_type(mime_type):
        logger.debug(
            f"Detected file type: {MIME_TYPE_MAPPING[mime_type]} "
            f"(MIME: {mime_type}) for file: {path}"
        )
        return MIME_TYPE_MAPPING[mime_type]
    _, extension = os.path.splitext(path)
    if extension in EXTENSION_MAPPING:
        logger.debug(f"Detected file type from extension {extension}: {path}")
        return EXTENSION_MAPPING[extension]
    logger.debug(f"File [{path}] with mime type [{mime_type}] is not supported")
    return None


def is_supported_file(path: str) -> bool:
    """Checks if the path is a supported file"""
    return _detect_file_type(path) is not None


def get_extractor(
    path: str,
) -> Callable[[io.BytesIO, str | None], Generator[ExtractionInterface, Any, None]]:
    """Analyse the path of a file and return a suited extractor.
       The file does not need to exist (yet). The path or filename alone
       suffices to return an extractor.

    :returns a function of an extractor. All extractors take a file-like object as parameter
    :raises ExtractionFileFormatNotSupportedError: File is not covered by any extractor
    """
    file_type = _detect_file_type(path)
    if file_type is None:
        raise ExtractionFileFormatNotSupportedError(path)
    return _get_extractor(file_type)
