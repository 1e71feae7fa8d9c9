"""Computation of the sorted class body for a document's text."""

import logging

from member_sorter.class_body import ClassBody
from member_sorter.dedupe_by_name import dedupe_by_name
from member_sorter.extract_members import extract_members
from member_sorter.find_class_body import find_class_body
from member_sorter.language_variant import variant_for_language
from member_sorter.render_body import INDENT_UNIT, render_body
from member_sorter.sort_members import sort_members
from member_sorter.sort_options import SortOptions
from member_sorter.sort_result import SortResult, SortStatus

logger = logging.getLogger(__name__)


def replacement_end(text: str, body: ClassBody) -> int:
    """Return where the replaced range ends for a class body.

    When the closing brace sits on its own line, the range stops at the start
    of that line so the brace keeps its indentation.
    """
    if not body.terminated:
        return body.body_end
    line_start = text.rfind("\n", body.body_start, body.body_end) + 1
    if line_start and not text[line_start : body.body_end].strip():
        return line_start
    return body.body_end


def plan_sort(
    text: str, language_id: str | None, options: SortOptions | None = None
) -> SortResult:
    """Work out the sorted text of the first class in text without mutating anything."""
    options = options or SortOptions()

    variant = variant_for_language(language_id)
    if variant is None:
        return SortResult(
            SortStatus.UNSUPPORTED_LANGUAGE,
            text,
            f"Unsupported language: {language_id}",
        )

    body = find_class_body(text, variant)
    if body is None:
        return SortResult(SortStatus.NO_CLASS, text, "No class found to sort")

    members = extract_members(
        text[body.body_start : body.body_end],
        variant,
        class_name=body.name,
        offset=body.body_start,
    )
    if not members:
        return SortResult(SortStatus.NO_MEMBERS, text, "No members found to sort")

    unique = dedupe_by_name(members)
    if len(unique) < len(members):
        logger.debug("Dropped %d duplicate member(s)", len(members) - len(unique))

    ordered = sort_members(unique, options.visibility_order, options.sorting_strategy)
    replacement = render_body(ordered, body.indent + INDENT_UNIT)
    start = body.body_start
    end = replacement_end(text, body)
    new_text = text[:start] + replacement + text[end:]

    if new_text == text:
        return SortResult(
            SortStatus.UNCHANGED,
            text,
            f"Members of {body.name} are already sorted",
            ordered,
            start,
            end,
            replacement,
        )
    return SortResult(
        SortStatus.SORTED,
        new_text,
        f"Sorted {len(ordered)} members of {body.name}",
        ordered,
        start,
        end,
        replacement,
    )
