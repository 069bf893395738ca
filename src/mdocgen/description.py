"""Page description files: YAML (or JSON) documents describing a CLI surface.

Example:

    name: prog
    description: Does things
    author: Jane Doe
    path: prog.1
    flags:
      - {long: verbose, short: v, doc: Enable verbose output.}
      - {long: output, args: {kind: FILE}}
    subcommands:
      - name: build
        description: Build things
        args: {kind: TARGET, multiple: true}
        flags:
          - {long: jobs, short: j, args: {kind: N}}
"""

from __future__ import annotations

import logging
import pathlib  # noqa: TC003 Pydantic needs at runtime
from typing import Any

import pydantic
import yaml

from mdocgen import exceptions
from mdocgen.model import Flag, Manpage, TakesValue

logger = logging.getLogger(__name__)

__all__ = [
    "ArgSpec",
    "FlagSpec",
    "SubcommandSpec",
    "PageSpec",
    "load_page_spec",
    "build_manpage",
    "load_manpage",
]


def _coerce_number(v: Any) -> Any:
    """Accept unquoted YAML numbers such as `version: 1.0` or `short: 0`."""
    if isinstance(v, int | float) and not isinstance(v, bool):
        return str(v)
    return v


class ArgSpec(pydantic.BaseModel):
    """Argument arity: placeholder label and whether the value repeats."""

    model_config = pydantic.ConfigDict(extra="forbid")  # pyright: ignore[reportUnannotatedClassAttribute]

    kind: str | None = None
    multiple: bool = False

    def to_takes_value(self) -> TakesValue:
        return TakesValue(kind=self.kind, multiple=self.multiple)


class FlagSpec(pydantic.BaseModel):
    """A single flag. A flag with neither name is accepted and renders as nothing."""

    model_config = pydantic.ConfigDict(extra="forbid")  # pyright: ignore[reportUnannotatedClassAttribute]

    long: str | None = None
    short: str | None = None
    args: ArgSpec | None = None
    doc: str | None = None

    @pydantic.field_validator("long", "short", mode="before")
    @classmethod
    def coerce_names(cls, v: Any) -> Any:
        return _coerce_number(v)

    def to_flag(self) -> Flag:
        flag = Flag()
        if self.long is not None:
            flag.set_long(self.long)
        if self.short is not None:
            flag.set_short(self.short)
        if self.args is not None:
            flag.set_args(self.args.to_takes_value())
        if self.doc is not None:
            flag.set_doc(self.doc)
        return flag


class SubcommandSpec(pydantic.BaseModel):
    """A subcommand. `long_description` takes precedence over `description`."""

    model_config = pydantic.ConfigDict(extra="forbid")  # pyright: ignore[reportUnannotatedClassAttribute]

    name: str
    description: str | None = None
    long_description: str | None = None
    args: ArgSpec | None = None
    flags: list[FlagSpec] = []

    @pydantic.field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v: Any) -> Any:
        return _coerce_number(v)


class PageSpec(pydantic.BaseModel):
    """Top-level page description."""

    model_config = pydantic.ConfigDict(extra="forbid")  # pyright: ignore[reportUnannotatedClassAttribute]

    name: str
    description: str | None = None
    long_description: str | None = None
    author: str | None = None
    version: str | None = None
    path: pathlib.Path | None = None
    header_path: pathlib.Path | None = None
    footer_path: pathlib.Path | None = None
    flags: list[FlagSpec] = []
    subcommands: list[SubcommandSpec] = []

    @pydantic.field_validator("name", "version", mode="before")
    @classmethod
    def coerce_scalars(cls, v: Any) -> Any:
        return _coerce_number(v)


def _format_validation_error(e: pydantic.ValidationError) -> str:
    parts = list[str]()
    for err in e.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def load_page_spec(path: pathlib.Path) -> PageSpec:
    """Load and validate a page description file.

    Raises:
        DescriptionError: If the file is missing, unreadable, not valid YAML,
            or does not match the description schema.
    """
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise exceptions.DescriptionError(path, "file not found") from None
    except PermissionError:
        raise exceptions.DescriptionError(path, "permission denied") from None
    except yaml.YAMLError as e:
        raise exceptions.DescriptionError(path, f"invalid YAML: {e}") from e
    except OSError as e:
        raise exceptions.DescriptionError(path, str(e)) from e

    if not isinstance(data, dict):
        raise exceptions.DescriptionError(path, "expected a mapping at the top level")

    try:
        spec = PageSpec.model_validate(data)
    except pydantic.ValidationError as e:
        raise exceptions.DescriptionError(path, _format_validation_error(e)) from e

    logger.debug(
        f"Loaded description of {spec.name!r} from {path}: "
        + f"{len(spec.flags)} flags, {len(spec.subcommands)} subcommands"
    )
    return spec


def _resolve(path: pathlib.Path | None, base_dir: pathlib.Path | None) -> pathlib.Path | None:
    if path is None or base_dir is None or path.is_absolute():
        return path
    return base_dir / path


def _build_subcommand_page(spec: SubcommandSpec) -> Manpage:
    page = (
        Manpage()
        .set_name(spec.name)
        .set_description(spec.description)
        .set_long_description(spec.long_description)
    )
    if spec.args is not None:
        page.set_args(spec.args.to_takes_value())
    for flag_spec in spec.flags:
        page.push_flag(flag_spec.to_flag())
    return page


def build_manpage(spec: PageSpec, base_dir: pathlib.Path | None = None) -> Manpage:
    """Build a Manpage from a validated description through the builder contract.

    Args:
        spec: Validated page description.
        base_dir: Directory that relative output paths are resolved against.
            Relative paths are kept as-is when None.
    """
    page = (
        Manpage()
        .set_name(spec.name)
        .set_description(spec.description)
        .set_long_description(spec.long_description)
        .set_author(spec.author)
        .set_version(spec.version)
    )
    if (path := _resolve(spec.path, base_dir)) is not None:
        page.set_path(path)
    if (header_path := _resolve(spec.header_path, base_dir)) is not None:
        page.set_header_path(header_path)
    if (footer_path := _resolve(spec.footer_path, base_dir)) is not None:
        page.set_footer_path(footer_path)

    for flag_spec in spec.flags:
        page.push_flag(flag_spec.to_flag())
    for sub_spec in spec.subcommands:
        page.push_subcommand(_build_subcommand_page(sub_spec))
    return page


def load_manpage(path: pathlib.Path) -> Manpage:
    """Load a description file and build its Manpage, resolving paths next to the file."""
    spec = load_page_spec(path)
    return build_manpage(spec, base_dir=path.parent)
