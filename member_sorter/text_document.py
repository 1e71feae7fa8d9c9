"""In-memory text buffer standing in for an editor document."""

import bisect
from dataclasses import dataclass
from pathlib import Path

from member_sorter.language_variant import language_for_path


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based line and character position."""

    line: int
    character: int


@dataclass(frozen=True)
class TextRange:
    """A start/end pair of positions."""

    start: Position
    end: Position


class TextDocument:
    """A text buffer with a language id and a single-step replace operation."""

    def __init__(
        self, text: str, language_id: str, path: Path | None = None
    ) -> None:
        """Initialize the document with its text and declared language."""
        self.path = path
        self.language_id = language_id
        self.dirty = False
        self._set_text(text)

    @classmethod
    def from_path(
        cls,
        path: Path,
        language_id: str | None = None,
        languages: dict[str, str] | None = None,
    ) -> "TextDocument":
        """Load a document from disk, guessing the language from its extension."""
        text = path.read_text(encoding="utf-8")
        return cls(text, language_id or language_for_path(path, languages), path)

    def _set_text(self, text: str) -> None:
        self._text = text
        self._line_starts = [0]
        self._line_starts.extend(i + 1 for i, ch in enumerate(text) if ch == "\n")

    def get_text(self) -> str:
        """Return the whole document text."""
        return self._text

    @property
    def line_count(self) -> int:
        """Number of lines in the document."""
        return len(self._line_starts)

    def position_at(self, offset: int) -> Position:
        """Map an offset to a position, clamping to the document bounds."""
        offset = max(0, min(offset, len(self._text)))
        line = bisect.bisect_right(self._line_starts, offset) - 1
        return Position(line, offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        """Map a position back to an offset, clamping to the document bounds."""
        line = max(0, min(position.line, self.line_count - 1))
        start = self._line_starts[line]
        if line + 1 < self.line_count:
            line_end = self._line_starts[line + 1] - 1
        else:
            line_end = len(self._text)
        return min(start + max(position.character, 0), line_end)

    def replace(self, text_range: TextRange, new_text: str) -> None:
        """Replace a range with new_text in one step."""
        start = self.offset_at(text_range.start)
        end = self.offset_at(text_range.end)
        if end < start:
            msg = f"Invalid range: {text_range}"
            raise ValueError(msg)
        self._set_text(self._text[:start] + new_text + self._text[end:])
        self.dirty = True

    def save(self) -> None:
        """Write the document back to its file if it was modified."""
        if self.path is None or not self.dirty:
            return
        self.path.write_text(self._text, encoding="utf-8")
        self.dirty = False
