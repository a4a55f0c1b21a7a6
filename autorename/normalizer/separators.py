"""
Separator detection and rewriting for file stems.
"""

from .models import Separator, SeparatorTally

PERCENT_SPACE = "%20"

_COUNTED = {
    "_": Separator.UNDERSCORE,
    ".": Separator.DOT,
    "-": Separator.HYPHEN,
}


def detect_separator(stem: str) -> Separator:
    """
    Find the character most likely used as a word separator.

    A stem that already contains a space is treated as normalized. Otherwise
    underscores, dots, hyphens and ``%20`` sequences are tallied and the
    strict maximum wins; ties fall back to a space.

    Args:
        stem: File name without directory and extension

    Returns:
        Detected separator
    """
    if " " in stem:
        return Separator.SPACE

    tally = SeparatorTally()
    for i, char in enumerate(stem):
        if char in _COUNTED:
            tally.increment(_COUNTED[char])
        elif char == "0" and i >= 2 and stem[i - 1] == "2" and stem[i - 2] == "%":
            tally.increment(Separator.PERCENT)

    return tally.winner()


def rewrite_separator(stem: str, separator: Separator, is_directory: bool = False) -> str:
    """
    Convert occurrences of the detected separator into spaces.

    Args:
        stem: File name without directory and extension
        separator: Separator returned by ``detect_separator``
        is_directory: Whether the stem belongs to a directory

    Returns:
        Rewritten stem
    """
    if separator is Separator.SPACE:
        return stem
    if separator is Separator.HYPHEN:
        return _rewrite_hyphens(stem)
    if separator is Separator.DOT:
        return _rewrite_dots(stem, is_directory)
    if separator is Separator.PERCENT:
        return stem.replace(PERCENT_SPACE, " ")
    return _rewrite_default(stem, separator.char)


def _rewrite_hyphens(stem: str) -> str:
    """
    Rewrite a hyphen separated stem.

    Leading hyphens are dropped, a lone hyphen between two characters is kept
    and a run of two or more hyphens becomes a single space. Runs are measured
    in the input, so ``a--b`` gives ``a b`` (not ``a- b``) and
    ``foo--bar-baz`` gives ``foo bar-baz``.
    """
    text = stem.lstrip("-")
    result: list[str] = []

    i = 0
    while i < len(text):
        if text[i] != "-":
            result.append(text[i])
            i += 1
            continue

        run_end = i
        while run_end < len(text) and text[run_end] == "-":
            run_end += 1

        result.append("-" if run_end - i == 1 else " ")
        i = run_end

    return "".join(result)


def _rewrite_dots(stem: str, is_directory: bool) -> str:
    """
    Rewrite a dot separated stem.

    All dots become spaces; for files the last dot is put back in place.
    """
    last_dot = stem.rfind(".")
    rewritten = stem.replace(".", " ")

    if not is_directory and last_dot >= 0:
        rewritten = rewritten[:last_dot] + "." + rewritten[last_dot + 1 :]

    return rewritten


def _rewrite_default(stem: str, separator: str) -> str:
    """
    Replace the separator with spaces and pad inner hyphens.

    A hyphen left between two non-space characters is surrounded by spaces so
    that ``foo-bar`` inside an underscore separated name reads ``foo - bar``.
    """
    text = stem.replace(separator, " ")
    if "-" not in text:
        return text

    result: list[str] = []
    last = len(text) - 1
    for i, char in enumerate(text):
        if char == "-" and 0 < i < last and result[-1][-1] != " " and text[i + 1] != " ":
            result.append(" - ")
        else:
            result.append(char)

    return "".join(result)
