from __future__ import annotations

import dataclasses
import enum
import logging
import pathlib
from typing import TYPE_CHECKING, Literal

from mdocgen import render

if TYPE_CHECKING:
    from collections.abc import Callable

    from mdocgen.model import Manpage

logger = logging.getLogger(__name__)

__all__ = [
    "Target",
    "WriteFailure",
    "FinalizeResult",
    "finalize_page",
]

WriteStage = Literal["create", "write"]


class Target(enum.StrEnum):
    """Output artifacts produced by finalization, in write order."""

    BODY = "body"
    HEADER = "header"
    FOOTER = "footer"


@dataclasses.dataclass(frozen=True)
class WriteFailure:
    """A target whose file could not be created or written."""

    target: Target
    path: pathlib.Path
    stage: WriteStage
    error: OSError | UnicodeError

    def describe(self) -> str:
        verb = "create" if self.stage == "create" else "write to"
        return f"couldn't {verb} {self.path}: {self.error}"


@dataclasses.dataclass
class FinalizeResult:
    """Outcome of finalizing a page.

    Targets without a configured path appear in none of the lists.
    """

    written: list[pathlib.Path] = dataclasses.field(default_factory=list[pathlib.Path])
    failures: list[WriteFailure] = dataclasses.field(default_factory=list[WriteFailure])
    skipped: list[Target] = dataclasses.field(default_factory=list[Target])

    @property
    def ok(self) -> bool:
        return not self.failures and not self.skipped


def _write_text(target: Target, path: pathlib.Path, content: str) -> WriteFailure | None:
    """Create (or truncate) path and write content, reporting the failing step.

    Content that cannot be encoded is reported as a write failure before the
    file is touched.
    """
    try:
        data = content.encode("utf-8")
    except UnicodeError as e:
        failure = WriteFailure(target=target, path=path, stage="write", error=e)
        logger.error(failure.describe())
        return failure

    try:
        f = path.open("wb")
    except OSError as e:
        failure = WriteFailure(target=target, path=path, stage="create", error=e)
        logger.error(failure.describe())
        return failure

    try:
        with f:
            f.write(data)
    except OSError as e:
        failure = WriteFailure(target=target, path=path, stage="write", error=e)
        logger.error(failure.describe())
        return failure

    logger.info(f"Wrote {target} to {path}")
    return None


_PlannedTarget = tuple[Target, pathlib.Path, "Callable[[Manpage], str]"]


def _planned_targets(page: Manpage) -> list[_PlannedTarget]:
    planned: list[_PlannedTarget] = []
    if page.path is not None:
        planned.append((Target.BODY, page.path, render.render_body))
    if page.header_path is not None:
        planned.append((Target.HEADER, page.header_path, render.render_header))
    if page.footer_path is not None:
        planned.append((Target.FOOTER, page.footer_path, render.render_footer))
    return planned


def finalize_page(page: Manpage, *, stop_on_error: bool = True) -> FinalizeResult:
    """Write a page's body, header and footer to their configured paths.

    Targets are written in order body, header, footer; unset paths are
    skipped silently. Write failures are logged and collected, never raised.

    Args:
        page: The page to write.
        stop_on_error: If True, the first failure abandons all remaining
            targets, which are reported in `skipped`. If False, each target
            is attempted regardless of earlier failures.

    Returns:
        FinalizeResult with written paths, failures and skipped targets.

    Callers normally use `Manpage.finalize()`, which also guards against
    finalizing the same page twice.
    """
    result = FinalizeResult()
    planned = _planned_targets(page)

    for index, (target, path, renderer) in enumerate(planned):
        failure = _write_text(target, path, renderer(page))
        if failure is None:
            result.written.append(path)
            continue

        result.failures.append(failure)
        if stop_on_error:
            result.skipped.extend(t for t, _path, _renderer in planned[index + 1 :])
            break

    if result.skipped:
        skipped_str = ", ".join(result.skipped)
        logger.warning(f"Abandoned remaining targets after failure: {skipped_str}")

    return result
