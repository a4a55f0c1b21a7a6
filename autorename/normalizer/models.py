"""
Data models for the filename normalizer.
"""

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_UPPER_CASE_EXCEPTIONS = ("HD", "HQ", "SD")


class Separator(Enum):
    """Word separator candidates recognised in a file stem."""

    SPACE = " "
    UNDERSCORE = "_"
    HYPHEN = "-"
    DOT = "."
    PERCENT = "%"

    @property
    def char(self) -> str:
        """Get the separator character."""
        return self.value


@dataclass(frozen=True)
class PathComponents:
    """A path split into the parts the normalizer works on."""

    directory: str
    stem: str
    extension: str
    is_directory: bool = False

    @property
    def name(self) -> str:
        """Get the file name (stem plus extension)."""
        return self.stem + self.extension


@dataclass(frozen=True)
class NormalizationOptions:
    """Options controlling a single normalization call."""

    start_with_upper_case: bool = False
    remove_brackets: bool = False
    remove_starting_number: bool = False
    upper_case_exceptions: frozenset[str] = field(default_factory=lambda: frozenset(DEFAULT_UPPER_CASE_EXCEPTIONS))

    def __post_init__(self) -> None:
        # Membership checks are case-insensitive, so store the folded form
        folded = frozenset(word.casefold() for word in self.upper_case_exceptions if word)
        object.__setattr__(self, "upper_case_exceptions", folded)

    def is_exception(self, word: str) -> bool:
        """Check whether a word is exempt from case normalization."""
        return word.casefold() in self.upper_case_exceptions


@dataclass
class SeparatorTally:
    """Occurrence counters collected while detecting the separator."""

    counts: dict[Separator, int] = field(
        default_factory=lambda: {
            Separator.UNDERSCORE: 0,
            Separator.DOT: 0,
            Separator.HYPHEN: 0,
            Separator.PERCENT: 0,
        }
    )

    def increment(self, separator: Separator) -> None:
        """Count one more occurrence of a separator."""
        self.counts[separator] += 1

    def winner(self) -> Separator:
        """Get the separator with the strict maximum count.

        Ties, including the case where nothing was counted, resolve to a space.
        """
        best = max(self.counts.values())
        if best == 0:
            return Separator.SPACE

        leaders = [sep for sep, count in self.counts.items() if count == best]
        if len(leaders) > 1:
            return Separator.SPACE
        return leaders[0]
