class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class UnsupportedTypeError(ProcessorError):
    """Raised when a file's content type cannot be determined or dispatched."""


class FileProcessingError(ProcessorError):
    """Raised when a format processor fails to produce an uploadable file."""
