"""Conflict detection for destinations proposed within a batch."""

import os
from collections.abc import Callable

import structlog

from autorename.executor import is_same_entry

logger = structlog.get_logger(__name__)

ExistsPredicate = Callable[[str], bool]
SameEntryPredicate = Callable[[str, str], bool]

MAX_SUFFIX_ATTEMPTS = 9999


def path_key(path: str) -> str:
    """Get the comparison key of a path (case-insensitive, normalized)."""
    return os.path.normcase(os.path.normpath(path)).lower()


class FilenameConflictResolver:
    """Detects destination conflicts and suggests conflict-free names."""

    def __init__(self, exists: ExistsPredicate | None = None, same_entry: SameEntryPredicate | None = None) -> None:
        """
        Initialize the conflict resolver.

        Args:
            exists: Predicate telling whether a path exists on disk.
                Defaults to ``os.path.lexists``.
            same_entry: Predicate telling whether two paths are the same file.
                Defaults to ``os.path.samefile``, false when either is missing.
        """
        self.exists = exists or os.path.lexists
        self.same_entry = same_entry or is_same_entry

    def detect_conflict(self, source: str, destination: str, claimed: set[str]) -> str | None:
        """
        Detect a conflict for one proposed destination.

        Args:
            source: Path being renamed
            destination: Proposed destination
            claimed: Keys of destinations already proposed by earlier rows

        Returns:
            Description of the conflict, or None if the destination is free
        """
        key = path_key(destination)
        if key in claimed:
            logger.info("Duplicate destination in batch", destination=destination)
            return f"Duplicate target: {destination}"

        if self.exists(destination) and not self.same_entry(source, destination):
            logger.info("Destination already exists", destination=destination)
            return f"Target exists: {destination}"

        return None

    def generate_unique_path(self, destination: str, claimed: set[str]) -> str:
        """
        Generate a free destination by appending a number to the stem.

        Args:
            destination: Conflicting destination
            claimed: Keys of destinations already proposed by earlier rows

        Returns:
            Destination of the form ``name (N).ext`` that is neither claimed
            nor present on disk

        Raises:
            ValueError: If no free name can be found
        """
        if not destination:
            raise ValueError("Destination cannot be empty")

        directory, name = os.path.split(destination)
        stem, extension = os.path.splitext(name)

        for counter in range(1, MAX_SUFFIX_ATTEMPTS + 1):
            candidate = os.path.join(directory, f"{stem} ({counter}){extension}")
            if path_key(candidate) not in claimed and not self.exists(candidate):
                logger.debug("Generated unique name", candidate=candidate)
                return candidate

        raise ValueError(f"Could not find a free name for {destination}")
