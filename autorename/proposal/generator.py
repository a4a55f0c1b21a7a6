"""Rename proposal generation for batches of paths."""

import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

import structlog

from autorename.config import Settings
from autorename.normalizer import FilenameNormalizer, NormalizationOptions
from autorename.normalizer.paths import DirectoryPredicate

from .conflicts import ExistsPredicate, FilenameConflictResolver, SameEntryPredicate, path_key
from .models import RenameRow, RowState

logger = structlog.get_logger(__name__)


def unique_paths(paths: Iterable[str]) -> list[str]:
    """Drop repeated paths, keeping the first occurrence."""
    seen: set[str] = set()
    result = []
    for path in paths:
        key = os.path.normpath(path)
        if key in seen:
            logger.debug("Skip: path already loaded", path=path)
            continue
        seen.add(key)
        result.append(path)
    return result


class ProposalGenerator:
    """Builds rename rows for a list of paths."""

    def __init__(
        self,
        options: NormalizationOptions,
        show_extension: bool = False,
        show_full_path: bool = False,
        is_directory: DirectoryPredicate | None = None,
        exists: ExistsPredicate | None = None,
        same_entry: SameEntryPredicate | None = None,
        max_workers: int = 4,
    ) -> None:
        """Initialize the proposal generator.

        Args:
            options: Normalization options applied to every path
            show_extension: Whether row views include the extension
            show_full_path: Whether row views include the directory
            is_directory: Predicate telling directories from files
            exists: Predicate telling whether a path exists on disk
            same_entry: Predicate telling whether two paths are the same file
            max_workers: Maximum number of threads computing new names
        """
        self.options = options
        self.show_extension = show_extension
        self.show_full_path = show_full_path
        self.normalizer = FilenameNormalizer(is_directory)
        self.resolver = FilenameConflictResolver(exists, same_entry)
        self.max_workers = max_workers

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "ProposalGenerator":
        """Create a generator configured from application settings."""
        return cls(
            settings.to_options(),
            show_extension=settings.show_extension,
            show_full_path=settings.show_full_path,
            max_workers=settings.max_workers,
            **kwargs,
        )

    def propose(self, path: str) -> str:
        """Compute the proposed destination for one path."""
        return self.normalizer.normalize(path, self.options) or path

    def generate(self, paths: Iterable[str]) -> list[RenameRow]:
        """Generate rename rows for the given paths.

        Args:
            paths: Paths of existing files or directories

        Returns:
            One row per distinct path, in input order
        """
        paths = unique_paths(paths)
        if not paths:
            return []

        if self.max_workers > 1 and len(paths) > 1:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, len(paths))) as pool:
                proposed = list(pool.map(self.propose, paths))
        else:
            proposed = [self.propose(path) for path in paths]

        claimed: set[str] = set()
        rows = [self._build_row(path, new_path, claimed) for path, new_path in zip(paths, proposed, strict=True)]

        logger.debug(
            "Generated rename proposals",
            total=len(rows),
            ready=sum(1 for row in rows if row.state is RowState.READY),
            conflicts=sum(1 for row in rows if row.state is RowState.CONFLICT),
        )
        return rows

    def refresh(self, rows: list[RenameRow]) -> list[RenameRow]:
        """Recompute proposals for pending rows, e.g. after options changed.

        Renamed rows are kept as they are.
        """
        pending = [row.original_path for row in rows if row.state is not RowState.RENAMED]
        fresh = iter(self.generate(pending))
        return [row if row.state is RowState.RENAMED else next(fresh) for row in rows]

    def _build_row(self, path: str, new_path: str, claimed: set[str]) -> RenameRow:
        """Create one row and register its destination."""
        row = RenameRow(
            original_path=path,
            new_path=new_path,
            show_extension=self.show_extension,
            show_full_path=self.show_full_path,
        )

        if os.path.normpath(new_path) == os.path.normpath(path):
            row.mark(RowState.UNCHANGED)
            claimed.add(path_key(path))
            return row

        _, extension = os.path.splitext(os.path.basename(os.path.normpath(path)))
        new_name = os.path.basename(new_path)
        stem = new_name[: len(new_name) - len(extension)] if extension else new_name
        if not stem.strip():
            row.mark(RowState.ERROR, "Empty file name")
            return row

        conflict = self.resolver.detect_conflict(path, new_path, claimed)
        if conflict:
            row.mark(RowState.CONFLICT, conflict)
            row.alternative = self.resolver.generate_unique_path(new_path, claimed)
            return row

        claimed.add(path_key(new_path))
        return row
