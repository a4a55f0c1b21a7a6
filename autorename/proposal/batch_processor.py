"""Batch processing of approved rename rows."""

import structlog

from autorename.exceptions import InvalidRenameError
from autorename.executor import FileRenameExecutor, RenameStatus

from .models import BatchResult, RenameRow, RowState

logger = structlog.get_logger(__name__)


class BatchProcessor:
    """Executes rename rows one after another and tracks their state."""

    def __init__(self, executor: FileRenameExecutor, force_overwrite: bool = False) -> None:
        """Initialize batch processor.

        Args:
            executor: Executor performing the renames on disk
            force_overwrite: Overwrite existing destinations without asking
        """
        self.executor = executor
        self.force_overwrite = force_overwrite

    def should_attempt(self, row: RenameRow) -> bool:
        """Check whether a row is eligible for renaming.

        Conflicting rows are only attempted when overwriting is forced or the
        executor can ask for confirmation.
        """
        if row.state is RowState.READY:
            return True
        if row.state is RowState.CONFLICT:
            return self.force_overwrite or self.executor.confirm_overwrite is not None
        return False

    def apply(self, rows: list[RenameRow]) -> BatchResult:
        """Rename every eligible row, in order.

        Args:
            rows: Rows produced by the proposal generator

        Returns:
            BatchResult with counters, executor results and the rows still pending
        """
        result = BatchResult()

        for row in rows:
            if not self.should_attempt(row):
                result.skipped += 1
                continue

            try:
                outcome = self.executor.rename(row.original_path, row.new_path, self.force_overwrite)
            except InvalidRenameError as e:
                row.mark(RowState.UNCHANGED, str(e))
                result.skipped += 1
                continue

            result.results.append(outcome)
            logger.debug("Rename attempted", **outcome.to_dict())

            if outcome.status is RenameStatus.SUCCESS:
                row.mark(RowState.RENAMED)
                result.renamed += 1
            elif outcome.status is RenameStatus.CONFLICT:
                row.mark(RowState.CONFLICT, outcome.error)
                result.conflicts += 1
            else:
                row.mark(RowState.ERROR, outcome.error)
                result.errors += 1

        result.pending = [row for row in rows if row.is_pending]

        logger.info(
            "Batch rename complete",
            renamed=result.renamed,
            conflicts=result.conflicts,
            errors=result.errors,
            skipped=result.skipped,
        )
        return result
