"""Dispatch of member extraction to the extractor for a language variant."""

from member_sorter.csharp_extractor import CSharpMemberExtractor
from member_sorter.language_variant import CSHARP, SCRIPT
from member_sorter.member import Member
from member_sorter.script_extractor import ScriptMemberExtractor


def extract_members(
    body: str, variant: str | None, class_name: str = "", offset: int = 0
) -> list[Member]:
    """Extract the members of a class body; unknown variants yield no members."""
    if variant == CSHARP:
        return CSharpMemberExtractor(class_name).extract(body, offset)
    if variant == SCRIPT:
        return ScriptMemberExtractor().extract(body, offset)
    return []
