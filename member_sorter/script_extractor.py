"""Lexical extraction of properties and methods from a TypeScript/JavaScript class."""

import re
from collections.abc import Iterator

from member_sorter.find_statement_end import find_statement_end
from member_sorter.member import DEFAULT_VISIBILITY, METHOD, PROPERTY, Member
from member_sorter.nesting_depths import nesting_depths
from member_sorter.select_members import select_members

VISIBILITY = r"(?:(?P<visibility>public|private|protected)\s+)?"
MODIFIERS = r"(?:(?:static|readonly|declare|abstract|override|async|accessor)\s+)*"
NAME = r"(?P<name>#?[A-Za-z_$][\w$]*)"
START = r"(?<![\w$#.])"

PROPERTY_RE = re.compile(
    START
    + VISIBILITY
    + MODIFIERS
    + NAME
    + r"[?!]?\s*(?::\s*[\w$.<>\[\]|&, ]+?\s*)?"
    + r"(?P<tail>=(?![>=])|;|\{\s*get;?\s*set;?\s*\})"
)
METHOD_RE = re.compile(
    START
    + VISIBILITY
    + MODIFIERS
    + r"(?:(?P<accessor>get|set)\s+)?(?:\*\s*)?"
    + NAME
    + r"\s*(?:<[^<>(){};]*>)?\s*\([^()]*\)"
    + r"\s*(?::\s*[^{};=]+?)?\s*\{[^{}]*\}"
)

CONSTRUCTOR = "constructor"


class ScriptMemberExtractor:
    """Extracts properties and methods from the text between a class's braces.

    Fields and properties are not told apart; both come out as properties.
    Getters and setters are methods tagged with their accessor. Method bodies
    are matched one level deep only: a method whose body holds nested braces
    is not recognized. Duplicate names are kept.
    """

    def extract(self, body: str, offset: int = 0) -> list[Member]:
        """Return the members of body in order of appearance."""
        depths = nesting_depths(body)
        passes = [
            list(self._properties(body, depths, offset)),
            list(self._methods(body, depths, offset)),
        ]
        return select_members(passes)

    def _properties(
        self, body: str, depths: list[int], offset: int
    ) -> Iterator[Member]:
        for match in PROPERTY_RE.finditer(body):
            if depths[match.start()]:
                continue
            end = match.end()
            if match.group("tail").startswith("="):
                end = find_statement_end(body, end)
            yield _member(body, match.start(), end, match, PROPERTY, offset)

    def _methods(self, body: str, depths: list[int], offset: int) -> Iterator[Member]:
        for match in METHOD_RE.finditer(body):
            if depths[match.start()] or match.group("name") == CONSTRUCTOR:
                continue
            yield _member(body, match.start(), match.end(), match, METHOD, offset)


def _member(
    body: str, start: int, end: int, match: re.Match[str], kind: str, offset: int
) -> Member:
    return Member(
        name=match.group("name"),
        kind=kind,
        visibility=match.group("visibility") or DEFAULT_VISIBILITY,
        source_text=body[start:end].strip(),
        start=offset + start,
        end=offset + end,
        accessor=match.groupdict().get("accessor") or "",
    )
