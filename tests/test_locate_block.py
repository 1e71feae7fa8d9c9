"""Tests for brace matching and the scanning helpers built on it."""

from member_sorter.extend_to_balanced import extend_to_balanced
from member_sorter.find_statement_end import find_statement_end
from member_sorter.locate_block import locate_block
from member_sorter.nesting_depths import nesting_depths


def test_locate_block_nested() -> None:
    """Verify that nested blocks are skipped when looking for the closing brace."""
    text = "{ a { b } c } d"
    assert locate_block(text, 1) == text.rindex("}")


def test_locate_block_unterminated() -> None:
    """Verify that an unclosed block runs to the end of the text."""
    text = "{ a { b }"
    assert locate_block(text, 1) == len(text)


def test_locate_block_counts_braces_in_strings() -> None:
    """Verify the known limitation: a brace inside a string literal is counted."""
    text = 'void M() { var s = "}"; }'
    assert locate_block(text, text.index("{") + 1) == text.index('"}"') + 1


def test_extend_to_balanced() -> None:
    """Verify that a span cut at the first closing brace grows until balanced."""
    text = "M() { if (x) { y(); } z(); } rest"
    first_close = text.index("}") + 1
    assert extend_to_balanced(text, 0, first_close) == text.index("} rest") + 1


def test_extend_to_balanced_already_balanced() -> None:
    """Verify that a balanced span is returned unchanged."""
    text = "M() { y(); } rest"
    end = text.index("}") + 1
    assert extend_to_balanced(text, 0, end) == end


def test_extend_to_balanced_unterminated() -> None:
    """Verify that a span that can never balance runs to the end of the text."""
    text = "M() { if (x) { y(); }"
    assert extend_to_balanced(text, 0, len(text)) == len(text)


def test_find_statement_end_skips_nested_semicolons() -> None:
    """Verify that semicolons inside a lambda body do not end the statement."""
    text = "= () => { a(); b(); }; next"
    assert find_statement_end(text, 0) == text.index("; next") + 1


def test_find_statement_end_stops_at_enclosing_closer() -> None:
    """Verify that scanning stops before a brace closing an outer block."""
    text = "= 5 } more;"
    assert find_statement_end(text, 0) == text.index("}")


def test_nesting_depths() -> None:
    """Verify depth tracking across braces and parentheses."""
    assert nesting_depths("a{b(c)}d") == [0, 0, 1, 1, 2, 2, 1, 0]
