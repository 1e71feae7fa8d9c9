"""Formatting of sorted members into replacement text for a class body."""

from collections.abc import Sequence

from member_sorter.member import KIND_ORDER, Member

INDENT_UNIT = "    "


def render_member(member: Member, base_indent: str) -> str:
    """Re-indent one member.

    The first line gets base_indent, every later line gets base_indent plus
    one indentation unit. Blank lines stay empty.
    """
    lines = []
    for i, line in enumerate(member.source_text.split("\n")):
        stripped = line.strip()
        if not stripped:
            lines.append("")
        elif i == 0:
            lines.append(base_indent + stripped)
        else:
            lines.append(base_indent + INDENT_UNIT + stripped)
    return "\n".join(lines)


def render_body(members: Sequence[Member], base_indent: str) -> str:
    """Render sorted members grouped as fields, properties and methods.

    Members are separated by one blank line, and so are non-empty groups.
    The result starts and ends with a newline so the class braces stay on
    their own lines.
    """
    groups = []
    for kind in KIND_ORDER:
        rendered = [render_member(m, base_indent) for m in members if m.kind == kind]
        if rendered:
            groups.append("\n\n".join(rendered))
    return "\n" + "\n\n".join(groups) + "\n"
