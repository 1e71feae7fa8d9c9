"""Logic for computing the bracket nesting depth at every offset of a text."""

from member_sorter.find_statement_end import CLOSERS, OPENERS


def nesting_depths(text: str) -> list[int]:
    """Return the nesting depth before each character of text.

    Braces, parentheses and square brackets all count, so an offset inside a
    method body or a parameter list is never at depth zero.
    """
    depths = []
    depth = 0
    for ch in text:
        depths.append(depth)
        if ch in OPENERS:
            depth += 1
        elif ch in CLOSERS:
            depth = max(depth - 1, 0)
    return depths
