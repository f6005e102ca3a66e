"""
Control words the stripper reacts to.

Every keyword maps to one of six actions. Control words that only carry
formatting (fonts, sizes, paragraph layout, ...) are deliberately absent:
looking them up returns None and the stripper moves on.
"""

import enum
import types
from dataclasses import dataclass

from rtf2text.parsing.rtf.charsets import (
    CHARSET_ANSI,
    CHARSET_MAC,
    CHARSET_PC,
    CHARSET_PCA,
)

UNICODE_KEYWORD = "u"


class ActionKind(enum.Enum):
    INSERTION_CHAR = "insertion_char"
    UNICODE_ESCAPE = "unicode_escape"
    TEXT_DESTINATION = "text_destination"
    NO_TEXT_DESTINATION = "no_text_destination"
    CHARSET = "charset"
    CHARSET_FROM_CODEPAGE = "charset_from_codepage"


@dataclass(frozen=True)
class Action:
    kind: ActionKind
    # character emitted by INSERTION_CHAR
    char: str | None = None
    # named charset selected by CHARSET
    charset: str | None = None


INSERTION_CHARS = {
    "emdash": "\u2014",
    "emspace": "\u2003",
    "endash": "\u2013",
    "enspace": "\u2002",
    "qmspace": "\u2005",
    "lquote": "\u2018",
    "ldblquote": "\u201c",
    "rquote": "\u2019",
    "rdblquote": "\u201d",
    "bullet": "\u2022",
    "par": "\n",
    "line": "\n",
    "row": "\n",
    "tab": "\t",
    "cell": "\t",
    "\\": "\\",
    "{": "{",
    "}": "}",
    "~": "\u00a0",  # Non-breaking space
    "_": "\u2011",  # Non-breaking hyphen
    # an escaped line break is an implicit paragraph
    "\r": "\n",
    "\n": "\n",
}

CHARSET_KEYWORDS = (CHARSET_ANSI, CHARSET_MAC, CHARSET_PC, CHARSET_PCA)

CODEPAGE_KEYWORD = "ansicpg"

TEXT_DESTINATIONS = ("rtf", "fldrslt", "pntext")

NO_TEXT_DESTINATIONS = frozenset(
    (
        "aftncn", "aftnsep", "aftnsepc", "annotation", "atnauthor", "atndate",
        "atnicn", "atnid", "atnparent", "atnref", "atntime", "atrfend",
        "atrfstart", "author", "background", "bkmkend", "bkmkstart", "blipuid",
        "buptim", "category", "colorschememapping", "colortbl", "comment",
        "company", "creatim", "datafield", "datastore", "defchp", "defpap",
        "do", "doccomm", "docvar", "dptxbxtext", "ebcend", "ebcstart",
        "factoidname", "falt", "fchars", "ffdeftext", "ffentrymcr",
        "ffexitmcr", "ffformat", "ffhelptext", "ffl", "ffname", "ffstattext",
        "field", "file", "filetbl", "fldinst", "fldtype", "fname", "fontemb",
        "fontfile", "fonttbl", "footer", "footerf", "footerl", "footerr",
        "formfield", "footnote", "ftncn", "ftnsep", "ftnsepc", "g",
        "generator", "gridtbl", "header", "headerf", "headerl", "headerr",
        "hl", "hlfr", "hlinkbase", "hlloc", "hlsrc", "hsv", "htmltag", "info",
        "keycode", "keywords", "latentstyles", "lchars", "levelnumbers",
        "leveltext", "lfolevel", "linkval", "list", "listlevel", "listname",
        "listoverride", "listoverridetable", "listpicture", "liststylename",
        "listtable", "listtext", "lsdlockedexcept", "macc", "maccPr",
        "mailmerge", "maln", "malnScr", "manager", "margPr", "mbar", "mbarPr",
        "mbaseJc", "mbegChr", "mborderBox", "mborderBoxPr", "mbox", "mboxPr",
        "mchr", "mcount", "mctrlPr", "md", "mdeg", "mdegHide", "mden", "mdiff",
        "mdPr", "me", "mendChr", "meqArr", "meqArrPr", "mf", "mfName", "mfPr",
        "mfunc", "mfuncPr", "mgroupChr", "mgroupChrPr", "mgrow", "mhideBot",
        "mhideLeft", "mhideRight", "mhideTop", "mhtmltag", "mlim", "mlimloc",
        "mlimlow", "mlimlowPr", "mlimupp", "mlimuppPr", "mm", "mmaddfieldname",
        "mmath", "mmathPict", "mmathPr", "mmaxdist", "mmc", "mmcJc",
        "mmconnectstr", "mmconnectstrdata", "mmcPr", "mmcs", "mmdatasource",
        "mmheadersource", "mmmailsubject", "mmodso", "mmodsofilter",
        "mmodsofldmpdata", "mmodsomappedname", "mmodsoname", "mmodsorecipdata",
        "mmodsosort", "mmodsosrc", "mmodsotable", "mmodsoudldata",
        "mmodsouniquetag", "mmPr", "mmquery", "mmr", "mnary", "mnaryPr",
        "mnoBreak", "mnum", "mobjDist", "moMath", "moMathPara", "moMathParaPr",
        "mopEmu", "mphant", "mphantPr", "mplcHide", "mpos", "mr", "mrad",
        "mradPr", "mrPr", "msepChr", "mshow", "mshp", "msPre", "msPrePr",
        "msSub", "msSubPr", "msSubSup", "msSubSupPr", "msSup", "msSupPr",
        "mstrikeBLTR", "mstrikeH", "mstrikeTLBR", "mstrikeV", "msub",
        "msubHide", "msup", "msupHide", "mtransp", "mtype", "mvertJc", "mvfmf",
        "mvfml", "mvtof", "mvtol", "mzeroAsc", "mzeroDesc", "mzeroWid",
        "nesttableprops", "nextfile", "nonesttables", "objalias", "objclass",
        "objdata", "object", "objname", "objsect", "objtime", "oldcprops",
        "oldpprops", "oldsprops", "oldtprops", "oleclsid", "operator",
        "panose", "password", "passwordhash", "pgptbl", "pgdsctbl", "picprop",
        "pict", "pn", "pnseclvl", "pntxta", "pntxtb", "printim", "private",
        "propname", "protstart", "protusertbl", "pxe", "result", "revtbl",
        "revtim", "rsidtbl", "rxe", "shp", "shpgrp", "shpinst", "shppict",
        "shprslt", "shptxt", "sn", "sp", "staticval", "stylesheet", "subject",
        "sv", "svb", "tc", "template", "themedata", "title", "txe", "ud",
        "upr", "userprops", "wgrffmtfilter", "windowcaption",
        "writereservation", "writereservhash", "xe", "xform", "xmlattrname",
        "xmlattrvalue", "xmlclose", "xmlname", "xmlnstbl", "xmlopen",
    )
)


def _build_table() -> types.MappingProxyType:
    table: dict[str, Action] = {}
    for keyword, char in INSERTION_CHARS.items():
        table[keyword] = Action(ActionKind.INSERTION_CHAR, char=char)
    table[UNICODE_KEYWORD] = Action(ActionKind.UNICODE_ESCAPE)
    for keyword in CHARSET_KEYWORDS:
        table[keyword] = Action(ActionKind.CHARSET, charset=keyword)
    table[CODEPAGE_KEYWORD] = Action(ActionKind.CHARSET_FROM_CODEPAGE)
    for keyword in TEXT_DESTINATIONS:
        table[keyword] = Action(ActionKind.TEXT_DESTINATION)
    for keyword in NO_TEXT_DESTINATIONS:
        table[keyword] = Action(ActionKind.NO_TEXT_DESTINATION)
    return types.MappingProxyType(table)


COMMANDS = _build_table()


def lookup(keyword: str) -> Action | None:
    """Return the action for a keyword (case-sensitive), or None if unknown."""
    return COMMANDS.get(keyword)


def is_unicode_escape(keyword: str) -> bool:
    return keyword == UNICODE_KEYWORD
