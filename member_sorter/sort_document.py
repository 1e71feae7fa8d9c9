"""Sorting the first class of a document in place."""

import logging

from member_sorter.plan_sort import plan_sort
from member_sorter.sort_options import SortOptions
from member_sorter.sort_result import SortResult
from member_sorter.text_document import TextDocument, TextRange

logger = logging.getLogger(__name__)


def sort_document(
    document: TextDocument, options: SortOptions | None = None
) -> SortResult:
    """Sort the members of the document's first class.

    The document is replaced in a single step, and only when the sorted text
    differs from the original; otherwise it is left untouched.
    """
    result = plan_sort(document.get_text(), document.language_id, options)
    if result.changed:
        text_range = TextRange(
            document.position_at(result.start), document.position_at(result.end)
        )
        document.replace(text_range, result.replacement)
    logger.debug("%s: %s", document.path or "<buffer>", result.status.value)
    return result
