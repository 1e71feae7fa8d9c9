"""Logic for merging the candidates of several pattern passes."""

from member_sorter.member import Member


def _overlaps(a: Member, b: Member) -> bool:
    return a.start < b.end and b.start < a.end


def select_members(passes: list[list[Member]]) -> list[Member]:
    """Merge pattern passes into one list in order of appearance.

    Passes are applied in the given order. A candidate that overlaps text
    already claimed by an earlier candidate is dropped, so an earlier pass
    wins over a later one for the same stretch of text.
    """
    claimed: list[Member] = []
    for candidates in passes:
        for candidate in candidates:
            if not any(_overlaps(candidate, kept) for kept in claimed):
                claimed.append(candidate)
    return sorted(claimed, key=lambda m: m.start)
