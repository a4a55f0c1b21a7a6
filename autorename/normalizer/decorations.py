"""
Removal of decorations: leading track numbers and bracketed annotations.
"""

BRACKET_PAIRS: tuple[tuple[str, str], ...] = (
    ("(", ")"),
    ("[", "]"),
    ("{", "}"),
    ("<", ">"),
)


def remove_starting_number(text: str) -> str:
    """
    Remove a leading number such as ``01.`` or ``1.2.``.

    Digits are consumed from the start; a dot continues the run unless it is
    the very first character.

    Args:
        text: Stem to process

    Returns:
        Stem without the leading number
    """
    end = 0
    while end < len(text):
        char = text[end]
        if "0" <= char <= "9":
            end += 1
        elif char == "." and end > 0:
            end += 1
        else:
            break

    return text[end:]


def remove_bracketed(text: str, opening: str, closing: str) -> str:
    """
    Remove every ``opening ... closing`` span of one bracket style.

    An opening bracket with no closing bracket after it stops the scan and is
    left in place.

    Args:
        text: Stem to process
        opening: Opening bracket
        closing: Closing bracket

    Returns:
        Stem without the bracketed spans
    """
    while True:
        start = text.find(opening)
        if start == -1:
            return text

        end = text.find(closing, start)
        if end == -1:
            return text

        text = text[:start] + text[end + 1 :]


def remove_brackets(text: str) -> str:
    """Remove bracketed annotations for all supported bracket styles."""
    for opening, closing in BRACKET_PAIRS:
        text = remove_bracketed(text, opening, closing)
    return text


def strip_decorations(text: str, remove_number: bool, remove_bracket_spans: bool) -> str:
    """
    Apply the enabled decoration passes in their fixed order.

    Args:
        text: Stem to process
        remove_number: Remove a leading number
        remove_bracket_spans: Remove bracketed annotations

    Returns:
        Stem without the selected decorations
    """
    if remove_number:
        text = remove_starting_number(text)
    if remove_bracket_spans:
        text = remove_brackets(text)
    return text
