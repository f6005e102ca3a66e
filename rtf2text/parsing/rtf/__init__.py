from rtf2text.parsing.rtf.state import (
    Diagnostic,
    DiagnosticReporter,
    LoggingReporter,
    NullReporter,
    ReturnCode,
)
from rtf2text.parsing.rtf.stripper import (
    RtfStripper,
    StripResult,
    check_rtf,
    delete_final_eol,
    get_last_return_code,
    strip_limited_source,
    strip_text,
)

__all__ = [
    "Diagnostic",
    "DiagnosticReporter",
    "LoggingReporter",
    "NullReporter",
    "ReturnCode",
    "RtfStripper",
    "StripResult",
    "check_rtf",
    "delete_final_eol",
    "get_last_return_code",
    "strip_limited_source",
    "strip_text",
]
