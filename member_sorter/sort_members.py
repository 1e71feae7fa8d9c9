"""Ordering of extracted members by kind, visibility and name."""

import logging
from collections.abc import Callable, Sequence

from member_sorter.member import KIND_RANK, Member
from member_sorter.sort_options import (
    ACCESS_MODIFIER,
    DEFAULT_VISIBILITY_ORDER,
)

logger = logging.getLogger(__name__)


def name_collation_key(name: str) -> tuple[str, str]:
    """Return a locale-style collation key for a member name.

    Names compare case-insensitively first; on a tie the lowercase spelling
    sorts before the uppercase one (``apply`` < ``Apply`` < ``banner``).
    """
    return (name.casefold(), name.swapcase())


def sort_by_access_modifier(
    members: Sequence[Member], visibility_order: Sequence[str]
) -> list[Member]:
    """Sort by kind, then by position in visibility_order, then by name.

    Visibilities missing from visibility_order sort after all listed ones.
    """
    rank = {visibility: i for i, visibility in enumerate(visibility_order)}
    unlisted = len(rank)
    return sorted(
        members,
        key=lambda m: (
            KIND_RANK[m.kind],
            rank.get(m.visibility, unlisted),
            name_collation_key(m.name),
        ),
    )


STRATEGIES: dict[str, Callable[[Sequence[Member], Sequence[str]], list[Member]]] = {
    ACCESS_MODIFIER: sort_by_access_modifier,
}


def sort_members(
    members: Sequence[Member],
    visibility_order: Sequence[str] | None = None,
    strategy: str = ACCESS_MODIFIER,
) -> list[Member]:
    """Return members in their final order; the input sequence is not modified."""
    order = DEFAULT_VISIBILITY_ORDER if visibility_order is None else visibility_order
    sorter = STRATEGIES.get(strategy)
    if sorter is None:
        logger.warning(
            "Unknown sorting strategy %r; using %r", strategy, ACCESS_MODIFIER
        )
        sorter = sort_by_access_modifier
    return sorter(members, order)
