"""Logic for locating the first class declaration and its body span."""

import logging
import re

from member_sorter.class_body import ClassBody
from member_sorter.language_variant import CSHARP
from member_sorter.locate_block import locate_block

logger = logging.getLogger(__name__)

CSHARP_CLASS_RE = re.compile(
    r"\b(?:public|private|protected|internal)\s+"
    r"(?:(?:static|sealed|abstract|partial|unsafe|new|internal|protected)\s+)*"
    r"class\s+(?P<name>\w+)"
    r"(?:\s*<[^<>{};]*>)?"  # generic parameters
    r"(?:\s*:\s*[^{};]+?)?"  # base types, and constraints after them
    r"(?:\s+where\b[^{};]+?)?"  # constraints without a base list
    r"\s*\{"
)

SCRIPT_CLASS_RE = re.compile(
    r"(?:\bexport\s+)?(?:\bdefault\s+)?(?:\babstract\s+)?"
    r"\bclass\s+(?P<name>[\w$]+)"
    r"(?:\s*<[^{};]*?>)?"
    r"(?:\s+extends\s+[^{};]+?)?"
    r"(?:\s+implements\s+[^{};]+?)?"
    r"\s*\{"
)


def find_class_body(text: str, variant: str = CSHARP) -> ClassBody | None:
    """Find the first class declaration in text and return its body span.

    Returns None when no class signature is present, which callers treat as
    "nothing to sort" rather than an error.
    """
    pattern = CSHARP_CLASS_RE if variant == CSHARP else SCRIPT_CLASS_RE
    match = pattern.search(text)
    if not match:
        return None

    brace = match.end() - 1
    line_start = text.rfind("\n", 0, brace) + 1
    indent_match = re.match(r"[ \t]*", text[line_start:brace])
    indent = indent_match.group(0) if indent_match else ""

    body_start = match.end()
    body_end = locate_block(text, body_start)
    terminated = body_end < len(text)
    if not terminated:
        logger.warning(
            "Class %s has no closing brace; using the rest of the text as its body",
            match.group("name"),
        )

    return ClassBody(
        name=match.group("name"),
        body_start=body_start,
        body_end=body_end,
        indent=indent,
        terminated=terminated,
    )
