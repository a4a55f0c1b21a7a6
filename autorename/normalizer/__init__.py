"""
Normalizer module for deriving cleaned file names from paths.
"""

from .casing import capitalize_words, collapse_spaces
from .decorations import remove_brackets, remove_starting_number, strip_decorations
from .models import NormalizationOptions, PathComponents, Separator, SeparatorTally
from .normalizer import FilenameNormalizer, NormalizationTrace, normalize
from .paths import apply_visual_rules, join_path, resolve_view_path, split_path
from .separators import detect_separator, rewrite_separator

__all__ = [
    "FilenameNormalizer",
    "NormalizationOptions",
    "NormalizationTrace",
    "PathComponents",
    "Separator",
    "SeparatorTally",
    "apply_visual_rules",
    "capitalize_words",
    "collapse_spaces",
    "detect_separator",
    "join_path",
    "normalize",
    "remove_brackets",
    "remove_starting_number",
    "resolve_view_path",
    "rewrite_separator",
    "split_path",
    "strip_decorations",
]
