class ExtractionError(Exception):
    """Base class for all errors raised while extracting text from a file."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        # Optional chaining for debugging
        self.__cause__ = cause


class ExtractionFailedError(ExtractionError):
    """Raised when an extractor fails for an unexpected reason."""


class ExtractionFileFormatNotSupportedError(ExtractionError):
    """Raised when the file format for extraction is not supported."""

    def __init__(
        self,
        file_path: str | None,
        message: str | None = None,
        *,
        cause: Exception | None = None,
    ):
        self.file_path = file_path
        if message is None:
            message = f"Extraction file format not supported: {file_path}"
        super().__init__(message, cause=cause)
