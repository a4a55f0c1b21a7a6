"""File Rename Executor for performing actual file rename operations."""

import os
import shutil
from collections.abc import Callable
from pathlib import Path

import structlog

from autorename.exceptions import InvalidRenameError

from .models import RenameResult, RenameStatus

logger = structlog.get_logger(__name__)

OverwriteConfirmation = Callable[[str], bool]


def is_same_entry(source: str, destination: str) -> bool:
    """Check whether both paths refer to the same file (case-only rename)."""
    try:
        return os.path.samefile(source, destination)
    except OSError:
        return False


class FileRenameExecutor:
    """Executes file and directory renames and reports typed results."""

    def __init__(self, confirm_overwrite: OverwriteConfirmation | None = None) -> None:
        """Initialize the FileRenameExecutor.

        Args:
            confirm_overwrite: Callback asked whether an existing destination
                may be overwritten when overwriting is not forced. Without it
                an existing destination is reported as a conflict.
        """
        self.confirm_overwrite = confirm_overwrite

    def rename(self, source: str, destination: str, force_overwrite: bool = False) -> RenameResult:
        """Move a file or directory to a new path.

        Args:
            source: Existing path
            destination: New path
            force_overwrite: Replace an existing destination file without asking

        Returns:
            RenameResult describing the outcome

        Raises:
            InvalidRenameError: If source and destination are the same path
        """
        if os.path.normpath(source) == os.path.normpath(destination):
            raise InvalidRenameError(source, destination)

        if not os.path.lexists(source):
            logger.warning("Rename source not found", source=source)
            return RenameResult(RenameStatus.NOT_FOUND, source, destination, f"File {source} does not exist")

        overwrite = False
        if os.path.lexists(destination) and not is_same_entry(source, destination):
            if os.path.isdir(destination):
                logger.warning("Rename destination is a directory", destination=destination)
                return RenameResult(
                    RenameStatus.CONFLICT, source, destination, f"Directory {destination} already exists"
                )

            if not force_overwrite and not self._confirm(destination):
                logger.warning("Rename destination exists", destination=destination)
                return RenameResult(RenameStatus.CONFLICT, source, destination, f"File {destination} already exists")

            overwrite = True

        try:
            # Ensure destination directory exists
            Path(destination).parent.mkdir(parents=True, exist_ok=True)

            if overwrite:
                os.replace(source, destination)
            else:
                shutil.move(source, destination)
        except FileNotFoundError as e:
            logger.error("Rename source disappeared", source=source, error=str(e))
            return RenameResult(RenameStatus.NOT_FOUND, source, destination, str(e))
        except OSError as e:
            logger.error("Failed to rename file", source=source, destination=destination, error=str(e))
            return RenameResult(RenameStatus.IO_ERROR, source, destination, str(e))

        logger.info("Renamed", source=source, destination=destination, overwrite=overwrite)
        return RenameResult(RenameStatus.SUCCESS, source, destination)

    def rollback(self, result: RenameResult) -> RenameResult:
        """Rollback a previously executed rename.

        Args:
            result: Successful result returned by ``rename``

        Returns:
            RenameResult of moving the destination back to the source
        """
        if not result.succeeded:
            return RenameResult(
                RenameStatus.NOT_FOUND,
                result.destination,
                result.source,
                "Nothing to roll back: rename did not succeed",
            )

        logger.info("Rolling back rename", source=result.destination, destination=result.source)
        return self.rename(result.destination, result.source, force_overwrite=False)

    def _confirm(self, destination: str) -> bool:
        """Ask the confirmation callback whether to overwrite."""
        if self.confirm_overwrite is None:
            return False
        return bool(self.confirm_overwrite(destination))
