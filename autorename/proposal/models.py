"""Data models for the rename proposal system."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from autorename.executor.models import RenameResult
from autorename.normalizer.paths import apply_visual_rules, resolve_view_path


class RowState(str, Enum):
    """State of a rename row."""

    READY = "ready"
    UNCHANGED = "unchanged"
    CONFLICT = "conflict"
    RENAMED = "renamed"
    ERROR = "error"


class RenameRow(BaseModel):
    """Model for a single proposed rename."""

    model_config = ConfigDict(validate_assignment=True)

    original_path: str = Field(..., description="Path of the existing file or directory")
    new_path: str = Field(..., description="Proposed destination path")
    show_extension: bool = Field(default=False, description="Whether view paths include the extension")
    show_full_path: bool = Field(default=False, description="Whether view paths include the directory")
    state: RowState = Field(default=RowState.READY, description="Current state of the row")
    error: str | None = Field(default=None, description="Error or conflict description")
    alternative: str | None = Field(default=None, description="Conflict-free destination suggestion")

    @property
    def original_view(self) -> str:
        """Get the displayed form of the original path."""
        return apply_visual_rules(self.original_path, self.show_extension, self.show_full_path) or ""

    @property
    def new_view(self) -> str:
        """Get the displayed form of the proposed path."""
        return apply_visual_rules(self.new_path, self.show_extension, self.show_full_path) or ""

    @property
    def alternative_view(self) -> str | None:
        """Get the displayed form of the conflict-free suggestion."""
        return apply_visual_rules(self.alternative, self.show_extension, self.show_full_path)

    @property
    def is_pending(self) -> bool:
        """Check whether the row still waits to be renamed."""
        return self.state in (RowState.READY, RowState.CONFLICT)

    def edit(self, view_path: str) -> None:
        """Re-target the row from an edited display string.

        Args:
            view_path: New display string as typed by the user
        """
        self.new_path = resolve_view_path(view_path, self.original_path, self.show_extension, self.show_full_path)
        self.error = None
        self.alternative = None
        self.state = RowState.UNCHANGED if self.new_path == self.original_path else RowState.READY

    def mark(self, state: RowState, error: str | None = None) -> None:
        """Set the row state and its error description."""
        self.state = state
        self.error = error


class BatchResult(BaseModel):
    """Summary of applying a batch of rename rows."""

    renamed: int = Field(default=0, ge=0, description="Rows renamed on disk")
    conflicts: int = Field(default=0, ge=0, description="Rows left because the destination exists")
    errors: int = Field(default=0, ge=0, description="Rows that failed")
    skipped: int = Field(default=0, ge=0, description="Rows not attempted")
    results: list[RenameResult] = Field(default_factory=list, description="Executor results in row order")
    pending: list[RenameRow] = Field(default_factory=list, description="Rows still waiting to be renamed")

    @property
    def ok(self) -> bool:
        """Check whether every attempted rename succeeded."""
        return self.conflicts == 0 and self.errors == 0
