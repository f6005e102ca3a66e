MIME_TYPE_MAPPING = {
    "application/rtf": "rtf",
    "application/x-rtf": "rtf",
    "text/rtf": "rtf",
}

# some platforms' mime databases do not know the extension
EXTENSION_MAPPING = {
    ".rtf": "rtf",
}


def is_supported_mime_type(mime_type: str | None) -> bool:
    if not mime_type:
        return False
    return mime_type in MIME_TYPE_MAPPING
