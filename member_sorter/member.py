"""Data model for a single class member found by the extractors."""

from dataclasses import dataclass

FIELD = "field"
PROPERTY = "property"
METHOD = "method"

# Fields first, then properties, then methods.
KIND_ORDER = (FIELD, PROPERTY, METHOD)
KIND_RANK = {kind: rank for rank, kind in enumerate(KIND_ORDER)}

VISIBILITIES = ("public", "private", "protected", "internal")
DEFAULT_VISIBILITY = "public"


@dataclass(frozen=True)
class Member:
    """A field, property or method declaration inside one class body."""

    name: str
    kind: str  # field/property/method
    visibility: str
    source_text: str  # trimmed declaration text
    start: int  # document offset of the first character
    end: int  # document offset after the last character
    accessor: str = ""  # "get" or "set" for script accessors
