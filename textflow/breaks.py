"""Break-point detection for wrapped lines.

A break may fall at the end of a paragraph, at the start of a whitespace
run, just before an opening bracket or pipe, or just after closing
brackets and most punctuation. When no break point fits, the word is
split and a hyphen is appended.
"""

from .constants import LayoutConstants


def is_whitespace(ch: str) -> bool:
    return ch in LayoutConstants.WHITESPACE


def is_breakable_before(ch: str) -> bool:
    return ch in LayoutConstants.BREAKABLE_BEFORE


def is_breakable_after(ch: str) -> bool:
    return ch in LayoutConstants.BREAKABLE_AFTER


def is_boundary(paragraph: str, at: int) -> bool:
    """Return True if a line may end at offset `at` of `paragraph`.

    `at` must satisfy 0 < at <= len(paragraph).
    """
    assert 0 < at <= len(paragraph)
    if at == len(paragraph):
        return True
    return (
        (is_whitespace(paragraph[at]) and not is_whitespace(paragraph[at - 1]))
        or is_breakable_before(paragraph[at])
        or is_breakable_after(paragraph[at - 1])
    )


def measure_line(paragraph: str, pos: int, budget: int) -> tuple[int, bool]:
    """Measure the next line of `paragraph` starting at `pos`.

    Returns (length, needs_hyphen). The remainder is taken whole when it is
    shorter than `budget`; otherwise the line ends at the last boundary
    within `budget`, minus any trailing whitespace. If no boundary fits,
    `budget - 1` characters are taken and a hyphen is needed. A return of
    length 0 with a hyphen means the budget is too small to split the word.
    """
    if len(paragraph) - pos < budget:
        return (len(paragraph) - pos, False)

    length = budget
    while length > 0 and not is_boundary(paragraph, pos + length):
        length -= 1
    while length > 0 and is_whitespace(paragraph[pos + length - 1]):
        length -= 1

    if length > 0:
        return (length, False)
    return (budget - 1, True)
