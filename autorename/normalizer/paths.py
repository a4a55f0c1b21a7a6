"""
Path splitting and display helpers shared by the normalizer and its callers.
"""

import os
from collections.abc import Callable

from .models import PathComponents

DirectoryPredicate = Callable[[str], bool]


def _strip_trailing_separators(path: str) -> str:
    """Remove trailing path separators, keeping a bare root intact."""
    separators = os.sep + (os.altsep or "")
    stripped = path.rstrip(separators)
    return stripped or path


def split_path(path: str, is_directory: DirectoryPredicate | None = None) -> PathComponents:
    """
    Split a path into directory, stem and extension.

    Args:
        path: Path to split
        is_directory: Predicate telling whether the path is an existing
            directory. Defaults to ``os.path.isdir``.

    Returns:
        PathComponents for the path
    """
    predicate = is_directory or os.path.isdir
    path = _strip_trailing_separators(path)

    directory, name = os.path.split(path)
    stem, extension = os.path.splitext(name)

    return PathComponents(
        directory=directory,
        stem=stem,
        extension=extension,
        is_directory=bool(predicate(path)),
    )


def join_path(components: PathComponents, stem: str) -> str:
    """
    Rebuild a path from its components with a replacement stem.

    Args:
        components: Components of the original path
        stem: New stem

    Returns:
        Reassembled path with the original directory and extension
    """
    name = stem + components.extension
    if not components.directory:
        return name
    return os.path.join(components.directory, name)


def apply_visual_rules(path: str | None, show_extension: bool, show_full_path: bool) -> str | None:
    """
    Pick the part of a path that is shown to (and edited by) the user.

    Args:
        path: Full path
        show_extension: Include the extension
        show_full_path: Include the directory

    Returns:
        The displayed form of the path, or None if no path was given
    """
    if path is None:
        return None

    if show_full_path and show_extension:
        return path

    directory, name = os.path.split(_strip_trailing_separators(path))
    stem, _ = os.path.splitext(name)

    if show_full_path:
        return os.path.join(directory, stem) if directory else stem

    if show_extension:
        return name

    return stem


def resolve_view_path(view_path: str, original_path: str, show_extension: bool, show_full_path: bool) -> str:
    """
    Turn an edited display string back into a full destination path.

    The parts hidden by ``apply_visual_rules`` (directory and/or extension)
    are taken from the original path.

    Args:
        view_path: Display string as edited by the user
        original_path: Full path the row was created from
        show_extension: Whether the display string contains the extension
        show_full_path: Whether the display string contains the directory

    Returns:
        Full destination path
    """
    directory, name = os.path.split(_strip_trailing_separators(original_path))
    _, extension = os.path.splitext(name)

    if show_full_path and show_extension:
        return view_path

    if show_full_path:
        return view_path + extension

    if show_extension:
        return os.path.join(directory, view_path) if directory else view_path

    return os.path.join(directory, view_path + extension) if directory else view_path + extension
