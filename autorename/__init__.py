"""
autorename: derive clean file and directory names and rename them on disk.
"""

from .normalizer import FilenameNormalizer, NormalizationOptions, apply_visual_rules, normalize

__version__ = "0.1.0"

__all__ = [
    "FilenameNormalizer",
    "NormalizationOptions",
    "__version__",
    "apply_visual_rules",
    "normalize",
]
