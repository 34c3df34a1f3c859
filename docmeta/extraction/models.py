from dataclasses import dataclass, field

# Remote processing states. Adapters map provider-native states onto these.
FILE_STATE_PROCESSING = "PROCESSING"
FILE_STATE_ACTIVE = "ACTIVE"
FILE_STATE_FAILED = "FAILED"
FILE_STATE_UNSPECIFIED = "STATE_UNSPECIFIED"


@dataclass(frozen=True)
class UploadedFile:
    """The remote service's handle for an uploaded artifact."""

    name: str
    uri: str = ""
    mime_type: str = ""
    state: str = FILE_STATE_UNSPECIFIED

    @property
    def is_processing(self) -> bool:
        return self.state == FILE_STATE_PROCESSING

    @property
    def is_failed(self) -> bool:
        return self.state == FILE_STATE_FAILED


@dataclass(frozen=True)
class Metadata:
    """Document metadata extracted by the remote model."""

    title: str
    agency: str | None = None
    year: int | float | None = None
    topics: list[str] = field(default_factory=list)
