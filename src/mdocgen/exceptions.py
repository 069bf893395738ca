from __future__ import annotations

import pathlib
from typing import override


class MdocgenError(Exception):
    """Base exception for mdocgen errors."""

    def format_user_message(self) -> str:
        """Format a user-friendly error message."""
        return str(self)

    def get_suggestion(self) -> str | None:
        """Return actionable suggestion for resolving the error."""
        return None


class DescriptionError(MdocgenError):
    """Raised when a page description file cannot be read or is invalid."""

    _path: pathlib.Path
    _reason: str

    def __init__(self, path: pathlib.Path, reason: str) -> None:
        self._path = path
        self._reason = reason
        super().__init__(f"Invalid page description {path}: {reason}")

    @property
    def path(self) -> pathlib.Path:
        return self._path

    @override
    def get_suggestion(self) -> str:
        return "Run 'mdocgen schema' to see the accepted description format"

    @override
    def __reduce__(self) -> tuple[type, tuple[pathlib.Path, str]]:
        return (self.__class__, (self._path, self._reason))


class PageFinalizedError(MdocgenError):
    """Raised when a page is modified or finalized after finalization.

    Pages pushed as subcommands count as finalized.
    """

    @override
    def get_suggestion(self) -> str:
        return "Build a new Manpage instead of reusing a finalized one"
