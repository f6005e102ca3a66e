"""
Active 8-bit charset tracking for ``\\'xx`` escapes.

RTF documents announce the code page used by hex escapes either through one
of four named charset control words (``\\ansi``, ``\\mac``, ``\\pc``,
``\\pca``) or through ``\\ansicpgN``. Without any announcement the escaped byte
value is used as the code point directly.
"""

import codecs
import logging

logger = logging.getLogger(__name__)

CHARSET_ANSI = "ansi"
CHARSET_MAC = "mac"
CHARSET_PC = "pc"
CHARSET_PCA = "pca"

NAMED_CHARSETS = {
    CHARSET_ANSI: "latin-1",
    CHARSET_MAC: "mac_roman",
    CHARSET_PC: "cp437",
    CHARSET_PCA: "cp850",
}

# Windows code page numbers whose Python codec is not spelled cp<number>
CODEPAGE_ALIASES = {
    "10000": "mac_roman",
    "10006": "mac_greek",
    "10007": "mac_cyrillic",
    "10029": "mac_latin2",
    "10079": "mac_iceland",
    "10081": "mac_turkish",
    "20127": "ascii",
    "28591": "iso8859_1",
    "28592": "iso8859_2",
    "28593": "iso8859_3",
    "28594": "iso8859_4",
    "28595": "iso8859_5",
    "28596": "iso8859_6",
    "28597": "iso8859_7",
    "28598": "iso8859_8",
    "28599": "iso8859_9",
    "28605": "iso8859_15",
}


def codec_name_for_codepage(number: str) -> str:
    """Map a Windows code page number to the Python codec name."""
    number = number.lstrip("0") or "0"
    return CODEPAGE_ALIASES.get(number, f"cp{number}")


def _resolve_codec(name: str) -> str | None:
    try:
        info = codecs.lookup(name)
    except LookupError:
        return None
    if not getattr(info, "_is_text_encoding", True):
        return None
    return info.name


class CharsetResolver:
    """Holds the charset used to translate escaped bytes into characters."""

    def __init__(self) -> None:
        self.codec: str | None = None

    def set_named(self, charset_id: str) -> bool:
        name = NAMED_CHARSETS.get(charset_id)
        if name is None:
            return False
        return self._install(name)

    def set_from_codepage(self, number: str) -> bool:
        return self._install(codec_name_for_codepage(number))

    def _install(self, name: str) -> bool:
        codec = _resolve_codec(name)
        if codec is None:
            # previous charset stays active
            return False
        logger.debug("Active charset %s (requested %s)", codec, name)
        self.codec = codec
        return True

    def translate(self, byte_value: int) -> str:
        if self.codec is None:
            return chr(byte_value)
        return bytes((byte_value,)).decode(self.codec, errors="replace")
