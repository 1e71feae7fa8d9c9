"""Options controlling how extracted members are ordered."""

import logging
from dataclasses import dataclass, field
from typing import Any

from member_sorter.config_error import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_VISIBILITY_ORDER = ["public", "protected", "private"]
ACCESS_MODIFIER = "access_modifier"
SORTING_STRATEGIES = {ACCESS_MODIFIER}


@dataclass(frozen=True)
class SortOptions:
    """Explicit sort settings threaded into the sorter at call time."""

    visibility_order: list[str] = field(
        default_factory=lambda: list(DEFAULT_VISIBILITY_ORDER)
    )
    sorting_strategy: str = ACCESS_MODIFIER

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "SortOptions":
        """Build options from the ``member_sort`` section of a loaded config."""
        section = config.get("member_sort") or {}
        if not isinstance(section, dict):
            msg = "'member_sort' must be a mapping"
            raise ConfigError(msg)

        order = section.get("visibility_order", DEFAULT_VISIBILITY_ORDER)
        if not isinstance(order, list) or not all(isinstance(v, str) for v in order):
            msg = "'member_sort.visibility_order' must be a list of strings"
            raise ConfigError(msg)

        strategy = str(section.get("sorting_strategy", ACCESS_MODIFIER))
        if strategy not in SORTING_STRATEGIES:
            logger.warning(
                "Unknown sorting strategy %r; falling back to %r",
                strategy,
                ACCESS_MODIFIER,
            )
            strategy = ACCESS_MODIFIER

        return cls(
            visibility_order=[v.strip().lower() for v in order],
            sorting_strategy=strategy,
        )
