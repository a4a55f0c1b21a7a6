"""Data models for rename execution results."""

from dataclasses import dataclass
from enum import Enum


class RenameStatus(Enum):
    """Outcome of a single rename on disk."""

    SUCCESS = "success"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class RenameResult:
    """Result of moving one path to a new location."""

    status: RenameStatus
    source: str
    destination: str
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        """Check whether the rename happened."""
        return self.status is RenameStatus.SUCCESS

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "status": self.status.value,
            "source": self.source,
            "destination": self.destination,
            "error": self.error,
        }
