"""Logic for dropping members whose name was already seen."""

from member_sorter.member import Member


def dedupe_by_name(members: list[Member]) -> list[Member]:
    """Keep the first member for each name, in the given order.

    A getter and a setter of the same name are a pair, not duplicates.
    """
    seen: set[tuple[str, str]] = set()
    unique = []
    for member in members:
        key = (member.name, member.accessor)
        if key in seen:
            continue
        seen.add(key)
        unique.append(member)
    return unique
