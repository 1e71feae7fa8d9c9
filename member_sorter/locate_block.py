"""Logic for finding the brace that closes an already opened block."""


def locate_block(text: str, start: int) -> int:
    """Return the offset of the ``}`` closing the block opened just before start.

    Braces inside string literals and comments are counted like any other
    brace. When the text ends before the block is closed, ``len(text)`` is
    returned and the caller treats the rest of the text as the block.
    """
    depth = 1
    for i in range(start, len(text)):
        ch = text[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
    return len(text)
