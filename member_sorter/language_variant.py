"""Mapping of language identifiers and file extensions to extraction variants."""

from pathlib import Path

# C#: brace-delimited member syntax with field/property/method patterns.
CSHARP = "csharp"
# TypeScript and JavaScript: property and method patterns only.
SCRIPT = "script"

LANGUAGE_VARIANTS = {
    "csharp": CSHARP,
    "typescript": SCRIPT,
    "javascript": SCRIPT,
}

DEFAULT_LANGUAGES = {
    ".cs": "csharp",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
}


def variant_for_language(language_id: str | None) -> str | None:
    """Return the extraction variant for a language id, or None if unsupported."""
    if not language_id:
        return None
    return LANGUAGE_VARIANTS.get(language_id.lower())


def language_for_path(path: Path, languages: dict[str, str] | None = None) -> str:
    """Guess the language id of a file from its extension.

    Unknown extensions yield the bare suffix (without the dot) so the caller
    can report it as an unsupported language.
    """
    table = DEFAULT_LANGUAGES if languages is None else languages
    suffix = path.suffix.lower()
    return table.get(suffix, suffix.lstrip(".") or "plaintext")
