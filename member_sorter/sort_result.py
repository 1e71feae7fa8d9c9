"""Data model for the outcome of sorting one document."""

from dataclasses import dataclass, field
from enum import Enum

from member_sorter.member import Member


class SortStatus(str, Enum):
    """What a sort run did to a document."""

    SORTED = "sorted"
    UNCHANGED = "unchanged"
    NO_CLASS = "no_class"
    NO_MEMBERS = "no_members"
    UNSUPPORTED_LANGUAGE = "unsupported_language"


@dataclass
class SortResult:
    """Represents the computed edit (if any) for one document."""

    status: SortStatus
    text: str  # full document text after the edit
    message: str
    members: list[Member] = field(default_factory=list)
    start: int = 0  # replaced range, document offsets
    end: int = 0
    replacement: str = ""

    @property
    def changed(self) -> bool:
        """Whether applying this result modifies the document."""
        return self.status is SortStatus.SORTED
