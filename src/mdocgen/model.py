"""Data model and fluent builder contract for man pages.

Pages are built incrementally and then finalized once:

    with Manpage() as page:
        page.set_name("prog").set_path("prog.1")
        page.push_flag(Flag().set_long("verbose").set_short("v"))

        build = Manpage().set_name("build").set_description("Build things")
        page.push_subcommand(build)
    # prog.1 is written on context exit
"""

from __future__ import annotations

import dataclasses
import logging
import os
import pathlib
from typing import TYPE_CHECKING, Self

from mdocgen import exceptions, render, text
from mdocgen import finalize as page_finalize

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

__all__ = [
    "TakesValue",
    "Flag",
    "Subcommand",
    "Manpage",
]

StrPath = str | os.PathLike[str]


def _strip_optional(val: str | None) -> str | None:
    return text.strip_quotes(val) if val is not None else None


@dataclasses.dataclass
class TakesValue:
    """Arity of a flag or subcommand argument.

    `kind` is the placeholder shown in markup (e.g. "FILE"). When absent the
    placeholder is derived from the owning flag's name, or falls back to
    "ARGUMENT". `multiple` marks a value that may be repeated.
    """

    kind: str | None = None
    multiple: bool = False


@dataclasses.dataclass
class Flag:
    """A single command-line flag. All fields are optional."""

    long: str | None = None
    short: str | None = None
    args: TakesValue | None = None
    doc: str | None = None

    def set_long(self, val: str) -> Self:
        self.long = text.strip_quotes(val)
        return self

    def set_short(self, val: str) -> Self:
        self.short = text.strip_quotes(val)
        return self

    def set_doc(self, val: str) -> Self:
        self.doc = text.strip_quotes(val)
        return self

    def set_args(self, val: TakesValue) -> Self:
        self.args = val
        return self


@dataclasses.dataclass
class Subcommand:
    """A named subcommand with its own flags.

    Usually produced by `Manpage.push_subcommand()` rather than built directly.
    """

    name: str
    args: TakesValue | None = None
    flags: list[Flag] = dataclasses.field(default_factory=list[Flag])
    doc: str | None = None

    def set_doc(self, val: str) -> Self:
        """Set the documentation. A later call replaces an earlier one."""
        self.doc = text.strip_quotes(val)
        return self

    def set_flags(self, val: list[Flag]) -> Self:
        self.flags = val
        return self

    def set_args(self, val: TakesValue) -> Self:
        self.args = val
        return self


@dataclasses.dataclass
class Manpage:
    """Aggregate root of a man page: metadata, output paths, flags and subcommands.

    A Manpage is finalized exactly once, either explicitly via `finalize()` or
    implicitly when leaving a `with` block. Finalizing writes the rendered body
    to `path`, and the header and footer documents to `header_path` and
    `footer_path`. Any of the three may be unset.

    `short_flags` and `long_flags` record auxiliary identifiers keyed by an
    owner token. Nothing in this package reads them; they exist for callers
    that need to carry that bookkeeping alongside the page.
    """

    name: str = ""
    description: str | None = None
    long_description: str | None = None
    author: str | None = None
    version: str | None = None
    args: TakesValue | None = None
    path: pathlib.Path | None = None
    header_path: pathlib.Path | None = None
    footer_path: pathlib.Path | None = None
    flags: list[Flag] = dataclasses.field(default_factory=list[Flag])
    subcommands: list[Subcommand] = dataclasses.field(default_factory=list[Subcommand])
    short_flags: dict[str | None, str] = dataclasses.field(default_factory=dict[str | None, str])
    long_flags: dict[str | None, str] = dataclasses.field(default_factory=dict[str | None, str])
    _closed: bool = dataclasses.field(default=False, init=False, repr=False, compare=False)

    @property
    def finalized(self) -> bool:
        """True once the page has been finalized or pushed as a subcommand."""
        return self._closed

    def _ensure_open(self) -> None:
        if self._closed:
            raise exceptions.PageFinalizedError(
                f"Manpage {self.name!r} has already been finalized or pushed as a subcommand"
            )

    # --- builder contract ---

    def set_name(self, val: str) -> Self:
        self._ensure_open()
        self.name = text.strip_quotes(val)
        return self

    def set_description(self, val: str | None) -> Self:
        self._ensure_open()
        self.description = _strip_optional(val)
        return self

    def set_long_description(self, val: str | None) -> Self:
        self._ensure_open()
        self.long_description = _strip_optional(val)
        return self

    def set_author(self, val: str | None) -> Self:
        self._ensure_open()
        self.author = _strip_optional(val)
        return self

    def set_version(self, val: str | None) -> Self:
        self._ensure_open()
        self.version = _strip_optional(val)
        return self

    def set_args(self, val: TakesValue | None) -> Self:
        """Set the argument arity shown when this page is pushed as a subcommand."""
        self._ensure_open()
        self.args = val
        return self

    def set_path(self, val: StrPath) -> Self:
        self._ensure_open()
        self.path = pathlib.Path(val)
        return self

    def set_header_path(self, val: StrPath) -> Self:
        self._ensure_open()
        self.header_path = pathlib.Path(val)
        return self

    def set_footer_path(self, val: StrPath) -> Self:
        self._ensure_open()
        self.footer_path = pathlib.Path(val)
        return self

    def push_flag(self, flag: Flag) -> Self:
        self._ensure_open()
        self.flags.append(flag)
        return self

    def push_short_flag(self, owner: str | None, ident: str) -> Self:
        self._ensure_open()
        self.short_flags[owner] = ident
        return self

    def push_long_flag(self, owner: str | None, ident: str) -> Self:
        self._ensure_open()
        self.long_flags[owner] = ident
        return self

    def push_subcommand(self, cmd: Manpage) -> Self:
        """Convert a transient page into a subcommand and append it.

        The page's output paths are discarded and its flags are taken. Its
        description and long description are assigned to the subcommand's doc
        in that order, so the long description wins when both are set. The
        transient page is consumed and cannot be finalized afterwards.
        """
        self._ensure_open()
        cmd._ensure_open()

        subcommand = Subcommand(name=cmd.name, args=cmd.args)
        if cmd.description is not None:
            subcommand.set_doc(cmd.description)
        if cmd.long_description is not None:
            subcommand.set_doc(cmd.long_description)
        subcommand.set_flags(cmd.flags)

        cmd.path = None
        cmd.header_path = None
        cmd.footer_path = None
        cmd.flags = []
        cmd._closed = True

        self.subcommands.append(subcommand)
        logger.debug(f"Pushed subcommand {subcommand.name!r} onto {self.name!r}")
        return self

    # --- rendering and finalization ---

    def render(self) -> str:
        """Render the page body as mdoc markup."""
        return render.render_body(self)

    def finalize(self, *, stop_on_error: bool = True) -> page_finalize.FinalizeResult:
        """Write the body, header and footer to their configured paths.

        Args:
            stop_on_error: If True (default), the first failed write abandons
                the remaining targets. If False, every target is attempted.

        Returns:
            FinalizeResult describing written, failed and skipped targets.

        Raises:
            PageFinalizedError: If the page was already finalized.
        """
        self._ensure_open()
        self._closed = True
        return page_finalize.finalize_page(self, stop_on_error=stop_on_error)

    def __str__(self) -> str:
        return self.render()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self._closed:
            self.finalize()
