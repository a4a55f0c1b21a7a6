"""
Filename normalizer: derives a cleaned name for a single path.
"""

from dataclasses import dataclass, field

from .casing import capitalize_words, collapse_spaces
from .decorations import strip_decorations
from .models import NormalizationOptions, PathComponents, Separator
from .paths import DirectoryPredicate, join_path, split_path
from .separators import detect_separator, rewrite_separator


@dataclass
class NormalizationTrace:
    """Intermediate values of one normalization, stage by stage."""

    original_stem: str
    separator: Separator = Separator.SPACE
    stages: list[tuple[str, str]] = field(default_factory=list)

    @property
    def result(self) -> str:
        """Get the final stem."""
        return self.stages[-1][1] if self.stages else self.original_stem

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "original_stem": self.original_stem,
            "separator": self.separator.name.lower(),
            "stages": [{"stage": name, "value": value} for name, value in self.stages],
            "result": self.result,
        }


class FilenameNormalizer:
    """Stateless pipeline turning a path into its normalized form."""

    def __init__(self, is_directory: DirectoryPredicate | None = None) -> None:
        """
        Initialize the normalizer.

        Args:
            is_directory: Predicate used to tell directories from files.
                Defaults to ``os.path.isdir``.
        """
        self.is_directory = is_directory

    def normalize(self, path: str | None, options: NormalizationOptions) -> str | None:
        """
        Compute the normalized path for a file or directory.

        Args:
            path: Path to normalize
            options: Normalization options

        Returns:
            New path with the same directory and extension, or the input
            unchanged when it is None or empty
        """
        if not path:
            return path

        components = split_path(path, self.is_directory)
        new_stem = self.normalize_stem(components.stem, options, components.is_directory)
        return join_path(components, new_stem)

    def normalize_stem(self, stem: str, options: NormalizationOptions, is_directory: bool = False) -> str:
        """
        Run the four normalization stages on a stem.

        Args:
            stem: File name without directory and extension
            options: Normalization options
            is_directory: Whether the stem belongs to a directory

        Returns:
            Normalized stem
        """
        return self.trace(stem, options, is_directory).result

    def trace(self, stem: str, options: NormalizationOptions, is_directory: bool = False) -> NormalizationTrace:
        """
        Run the normalization stages and record every intermediate value.

        Args:
            stem: File name without directory and extension
            options: Normalization options
            is_directory: Whether the stem belongs to a directory

        Returns:
            Trace of the normalization
        """
        trace = NormalizationTrace(original_stem=stem)

        trace.separator = detect_separator(stem)
        text = rewrite_separator(stem, trace.separator, is_directory)
        trace.stages.append(("separator", text))

        text = strip_decorations(text, options.remove_starting_number, options.remove_brackets)
        trace.stages.append(("decorations", text))

        if options.start_with_upper_case:
            text = capitalize_words(text, options.is_exception)
            trace.stages.append(("case", text))

        text = collapse_spaces(text)
        trace.stages.append(("whitespace", text))

        return trace

    def components(self, path: str) -> PathComponents:
        """Split a path using this normalizer's directory predicate."""
        return split_path(path, self.is_directory)


def normalize(
    path: str | None,
    options: NormalizationOptions | None = None,
    is_directory: DirectoryPredicate | None = None,
) -> str | None:
    """
    Compute the normalized path for a file or directory.

    Args:
        path: Path to normalize
        options: Normalization options, defaults when omitted
        is_directory: Predicate used to tell directories from files

    Returns:
        New path, or the input unchanged when it is None or empty
    """
    return FilenameNormalizer(is_directory).normalize(path, options or NormalizationOptions())
