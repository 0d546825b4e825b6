class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class InvalidDocumentError(ProcessorError):
    """Raised when a submitted document payload cannot be decoded."""


class UnsupportedMediaTypeError(ProcessorError):
    """Raised when a file's media type is neither an image nor a PDF."""
