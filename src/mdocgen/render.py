from __future__ import annotations

from typing import TYPE_CHECKING

from mdocgen import text

if TYPE_CHECKING:
    from mdocgen.model import Flag, Manpage, TakesValue

__all__ = [
    "render_body",
    "render_header",
    "render_footer",
]

DEFAULT_PLACEHOLDER = "ARGUMENT"
REPEAT_MARKER = "..."

_FLAG_TABLE_BEGIN = ".Bl -tag -width flag -offset indent"
_SUBCOMMAND_LIST_BEGIN = ".Bl -tag -width Ds -compact -offset indent"
_LIST_END = ".El"

_HEADER_TEMPLATE = """\
.Dd $Mdocdate$
.Dt {uppercase_name} 1
.Os
.Sh NAME
.Nm {name}
.Nd {description}."""

_FOOTER_TEMPLATE = """\
.Sh AUTHORS
{author}"""


def _flag_label(flag: Flag) -> str | None:
    """Return the `Fl` arguments naming a flag, or None for a flag without names."""
    match flag.long, flag.short:
        case None, None:
            return None
        case str(long), str(short) if long == short:
            return f"-{long}"
        case str(long), str(short):
            return f"-{long} | -{short}"
        case str(name), None:
            return f"-{name}"
        case None, str(name):
            return f"-{name}"
    raise AssertionError("unreachable")  # pragma: no cover


def _arg_suffix(args: TakesValue | None, fallback: str) -> str:
    """Return the ` Ar PLACEHOLDER` suffix for an arity, empty when there is none."""
    if args is None:
        return ""
    placeholder = args.kind if args.kind is not None else fallback
    suffix = f" Ar {placeholder}"
    if args.multiple:
        suffix += f" {REPEAT_MARKER}"
    return suffix


def _flag_markup(flag: Flag) -> str | None:
    """Return `Fl <label><suffix>` for a flag, or None when the flag is skipped."""
    label = _flag_label(flag)
    if label is None:
        return None
    if flag.long is not None:
        fallback = flag.long
    elif flag.short is not None:
        fallback = flag.short
    else:
        fallback = DEFAULT_PLACEHOLDER
    return f"Fl {label}{_arg_suffix(flag.args, fallback)}"


def _render_flag_blocks(flags: list[Flag]) -> tuple[str, str]:
    """Render the synopsis and flag table blocks in one pass over the flags."""
    synopsis = [".Nm"]
    table = [_FLAG_TABLE_BEGIN]
    for flag in flags:
        markup = _flag_markup(flag)
        if markup is None:
            continue
        synopsis.append(f".Op {markup}")
        table.append(f".It {markup}")
        if flag.doc is not None:
            table.append(text.normalize_doc(flag.doc))
    table.append(_LIST_END)
    return "\n".join(synopsis), "\n".join(table)


def _render_subcommand_block(page: Manpage) -> str:
    lines = [_SUBCOMMAND_LIST_BEGIN]
    for cmd in page.subcommands:
        lines.append(f".It Ic {cmd.name}{_arg_suffix(cmd.args, DEFAULT_PLACEHOLDER)}")
        rendered_flags = False
        for flag in cmd.flags:
            markup = _flag_markup(flag)
            if markup is None:
                continue
            rendered_flags = True
            lines.append(f".{markup}")
            if flag.doc is not None:
                lines.append(text.normalize_doc(flag.doc))
        # Flag lines are separated from the subcommand's own doc by an empty line
        if rendered_flags:
            lines.append("")
        if cmd.doc is not None:
            lines.append(text.normalize_doc(cmd.doc))
    lines.append(_LIST_END)
    lines.append(".Pp")
    return "\n".join(lines)


def render_body(page: Manpage) -> str:
    """Render the page body as mdoc markup.

    The body holds up to three blocks, separated by blank lines: a synopsis
    (`.Nm` plus one `.Op` per flag), a flag table and a subcommand list. The
    synopsis and flag table are omitted when the page has no flags, the
    subcommand list when it has no subcommands. Output depends only on the
    page's fields and insertion order.

    Returns:
        The markup, terminated by a single newline.
    """
    blocks = list[str]()
    if page.flags:
        blocks.extend(_render_flag_blocks(page.flags))
    if page.subcommands:
        blocks.append(_render_subcommand_block(page))
    return "\n\n".join(blocks) + "\n"


def render_header(page: Manpage) -> str:
    """Render the header document (date, title, NAME section)."""
    description = text.strip_quotes(page.description or "").rstrip(".")
    return _HEADER_TEMPLATE.format(
        uppercase_name=text.strip_quotes(page.name.upper()),
        name=text.strip_quotes(page.name),
        description=description,
    )


def render_footer(page: Manpage) -> str:
    """Render the footer document (AUTHORS section)."""
    return _FOOTER_TEMPLATE.format(author=text.strip_quotes(page.author or ""))
