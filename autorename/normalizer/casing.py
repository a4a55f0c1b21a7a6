"""
Case and whitespace normalization.
"""

from collections.abc import Callable


def capitalize_words(text: str, is_exception: Callable[[str], bool] | None = None) -> str:
    """
    Start every word with an upper case letter and lower-case the rest.

    Words for which ``is_exception`` returns True are kept as they are.
    Inner capitals are not preserved, so ``McDonald`` becomes ``Mcdonald``.

    Args:
        text: Text to process
        is_exception: Predicate telling which words to leave untouched,
            usually ``NormalizationOptions.is_exception``

    Returns:
        Text with capitalized words
    """
    words = text.split(" ")
    result = []
    for word in words:
        if not word or (is_exception is not None and is_exception(word)):
            result.append(word)
        else:
            result.append(word[0].upper() + word[1:].lower())
    return " ".join(result)


def collapse_spaces(text: str) -> str:
    """Collapse runs of spaces into one and trim both ends."""
    result: list[str] = []
    for char in text:
        if char == " " and result and result[-1] == " ":
            continue
        result.append(char)
    return "".join(result).strip()
