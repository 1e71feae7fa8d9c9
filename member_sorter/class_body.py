"""Data model for the located body of a class declaration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ClassBody:
    """The text range between a class's opening brace and its matching close."""

    name: str
    body_start: int  # offset right after the opening brace
    body_end: int  # offset of the closing brace, or len(text) when unterminated
    indent: str  # leading whitespace of the line holding the opening brace
    terminated: bool = True
