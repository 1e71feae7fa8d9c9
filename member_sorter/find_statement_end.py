"""Logic for finding where a ``;``-terminated declaration ends."""

OPENERS = "({["
CLOSERS = ")}]"


def find_statement_end(text: str, pos: int) -> int:
    """Return the offset just after the first top-level ``;`` at or after pos.

    Semicolons nested in parentheses, brackets or braces (lambda bodies,
    collection initializers) do not end the statement. Scanning stops before
    a closer that belongs to an enclosing block, and at the end of the text.
    """
    depth = 0
    for i in range(pos, len(text)):
        ch = text[i]
        if ch in OPENERS:
            depth += 1
        elif ch in CLOSERS:
            depth -= 1
            if depth < 0:
                return i
        elif ch == ";" and depth == 0:
            return i + 1
    return len(text)
