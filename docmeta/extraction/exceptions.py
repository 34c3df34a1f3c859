class ExtractionError(Exception):
    """Raised when uploading a document or extracting its metadata fails."""


class RemoteProcessingFailedError(ExtractionError):
    """Raised when the remote service reports a terminal failure for an upload."""


class RemoteProcessingTimeoutError(ExtractionError):
    """Raised when an upload stays in processing longer than the configured wait."""


class TransientServiceError(ExtractionError):
    """Raised when the remote service is temporarily unavailable (HTTP 503)."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the remote call fails due to network/infrastructure issues."""


class SchemaValidationError(ExtractionError):
    """Raised when the generation response is not valid metadata JSON."""

    _MAX_RAW_CHARS = 500

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.raw_response = raw_response

    def __str__(self) -> str:
        if not self.raw_response:
            return self.message
        raw = self.raw_response[: self._MAX_RAW_CHARS]
        return f"{self.message} (raw response: {raw!r})"
