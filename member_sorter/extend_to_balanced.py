"""Logic for growing a partially matched block until its braces balance."""


def extend_to_balanced(text: str, start: int, end: int) -> int:
    """Extend ``text[start:end]`` to the right until it holds as many ``}`` as ``{``.

    Each step moves ``end`` past the next closing brace. Returns the new end
    offset, or ``len(text)`` if the text runs out first.
    """
    opened = text.count("{", start, end)
    closed = text.count("}", start, end)
    while opened > closed:
        next_close = text.find("}", end)
        if next_close == -1:
            return len(text)
        opened += text.count("{", end, next_close)
        closed += 1
        end = next_close + 1
    return end
