"""Lexical extraction of fields, properties and methods from a C# class body."""

import re
from collections.abc import Iterator

from member_sorter.dedupe_by_name import dedupe_by_name
from member_sorter.extend_to_balanced import extend_to_balanced
from member_sorter.find_statement_end import find_statement_end
from member_sorter.locate_block import locate_block
from member_sorter.member import (
    DEFAULT_VISIBILITY,
    FIELD,
    METHOD,
    PROPERTY,
    VISIBILITIES,
    Member,
)
from member_sorter.nesting_depths import nesting_depths
from member_sorter.select_members import select_members

VISIBILITY = r"(?P<visibility>" + "|".join(VISIBILITIES) + ")"
MODIFIERS = (
    r"(?:(?:static|readonly|const|volatile|new|virtual|override|abstract|sealed"
    r"|async|extern|unsafe|partial|required|event|internal|protected|private)\s+)*"
)
# Up to two levels of nested generic arguments, e.g. Dictionary<string, List<int>>
GENERIC_ARGS = r"<(?:[^<>;{}=]|<(?:[^<>;{}=]|<[^<>;{}=]*>)*>)*>"
TYPE = (
    r"(?:[\w.]+(?:\s*" + GENERIC_ARGS + r")?|\((?:[^()]|\([^()]*\))*\))"
    r"(?:\s*\[[\s,]*\])*\??"
)
PARAMS = r"\((?:[^()]|\((?:[^()]|\([^()]*\))*\))*\)"
START = r"(?<![\w.])"

FIELD_RE = re.compile(
    START
    + VISIBILITY
    + r"\s+"
    + MODIFIERS
    + TYPE
    + r"\s+(?P<name>\w+)\s*(?P<tail>;|=(?![>=]))"
)
PROPERTY_RE = re.compile(
    START
    + VISIBILITY
    + r"\s+"
    + MODIFIERS
    + r"(?:"
    + TYPE
    + r"\s+)?(?P<name>\w+)\s*"
    + r"(?P<body>\{\s*(?:\[[^\]]*\]\s*)?"
    + r"(?:(?:public|private|protected|internal|readonly)\s+)*"
    + r"(?:get|set|init|add|remove)\b|=>)"
)
METHOD_RE = re.compile(
    START
    + VISIBILITY
    + r"\s+"
    + MODIFIERS
    + TYPE
    + r"\s+(?P<name>\w+)\s*(?:"
    + GENERIC_ARGS
    + r")?\s*"
    + PARAMS
    + r"\s*(?:where\b[^{};]*?)?(?P<body>\{|=>|;)"
)
INITIALIZER_RE = re.compile(r"\s*=(?![>=])")


class CSharpMemberExtractor:
    """Extracts members from the text between a C# class's braces.

    Three patterns run in a fixed order: fields, then properties, then
    methods. Only matches starting at nesting depth zero are considered, so
    statements inside method bodies never become members. A constructor
    (a method named like the class) is skipped. When several members share
    a name, the first one in the text is kept.
    """

    def __init__(self, class_name: str = "") -> None:
        """Initialize the extractor with the enclosing class name."""
        self.class_name = class_name

    def extract(self, body: str, offset: int = 0) -> list[Member]:
        """Return the members of body in order of appearance.

        ``offset`` is the document offset of ``body[0]``; member spans are
        reported in document coordinates.
        """
        depths = nesting_depths(body)
        passes = [
            list(self._fields(body, depths, offset)),
            list(self._properties(body, depths, offset)),
            list(self._methods(body, depths, offset)),
        ]
        return dedupe_by_name(select_members(passes))

    def _fields(self, body: str, depths: list[int], offset: int) -> Iterator[Member]:
        for match in FIELD_RE.finditer(body):
            if depths[match.start()]:
                continue
            end = match.end()
            if match.group("tail") != ";":
                end = find_statement_end(body, end)
            yield _member(body, match, FIELD, end, offset)

    def _properties(
        self, body: str, depths: list[int], offset: int
    ) -> Iterator[Member]:
        for match in PROPERTY_RE.finditer(body):
            if depths[match.start()]:
                continue
            if match.group("body") == "=>":
                end = find_statement_end(body, match.end())
            else:
                close = locate_block(body, match.start("body") + 1)
                end = min(close + 1, len(body))
                # Auto-property initializer: { get; set; } = value;
                initializer = INITIALIZER_RE.match(body, end)
                if initializer:
                    end = find_statement_end(body, initializer.end())
            yield _member(body, match, PROPERTY, end, offset)

    def _methods(self, body: str, depths: list[int], offset: int) -> Iterator[Member]:
        for match in METHOD_RE.finditer(body):
            if depths[match.start()]:
                continue
            if match.group("name") == self.class_name:
                continue
            if match.group("body") == ";":
                # Abstract, partial or extern declaration without a body.
                end = match.end()
            elif match.group("body") == "=>":
                end = find_statement_end(body, match.end())
            else:
                # The first "}" may close a nested block; grow until balanced.
                first_close = body.find("}", match.end())
                end = len(body) if first_close == -1 else first_close + 1
                end = extend_to_balanced(body, match.start(), end)
            yield _member(body, match, METHOD, end, offset)


def _member(
    body: str, match: re.Match[str], kind: str, end: int, offset: int
) -> Member:
    start = match.start()
    return Member(
        name=match.group("name"),
        kind=kind,
        visibility=match.group("visibility") or DEFAULT_VISIBILITY,
        source_text=body[start:end].strip(),
        start=offset + start,
        end=offset + end,
    )
