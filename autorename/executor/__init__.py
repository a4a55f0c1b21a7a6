"""File Rename Executor module for performing actual file rename operations."""

from .executor import FileRenameExecutor, OverwriteConfirmation, is_same_entry
from .models import RenameResult, RenameStatus

__all__ = ["FileRenameExecutor", "OverwriteConfirmation", "RenameResult", "RenameStatus", "is_same_entry"]
