from __future__ import annotations

import logging
import pathlib

import click

from mdocgen import description
from mdocgen.cli import decorators as cli_decorators

logger = logging.getLogger(__name__)

_OUTPUT_PATH = click.Path(dir_okay=False, path_type=pathlib.Path)


@cli_decorators.mdocgen_command("render")
@click.argument(
    "description_file",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
)
@click.option(
    "--output",
    "-o",
    type=_OUTPUT_PATH,
    help="Write the page body here (overrides 'path' in the description)",
)
@click.option(
    "--header",
    type=_OUTPUT_PATH,
    help="Write the header document here (overrides 'header_path')",
)
@click.option(
    "--footer",
    type=_OUTPUT_PATH,
    help="Write the footer document here (overrides 'footer_path')",
)
@click.option(
    "--stdout",
    "to_stdout",
    is_flag=True,
    help="Print the page body to stdout instead of writing any files",
)
@click.option(
    "--keep-going",
    "-k",
    is_flag=True,
    help="Attempt every output even after a failed write",
)
def render(
    description_file: pathlib.Path,
    output: pathlib.Path | None,
    header: pathlib.Path | None,
    footer: pathlib.Path | None,
    to_stdout: bool,
    keep_going: bool,
) -> None:
    """Render a page description to mdoc files.

    DESCRIPTION_FILE is a YAML or JSON page description (see 'mdocgen schema').
    Relative output paths inside it are resolved against its directory; paths
    given on the command line are used as-is.
    """
    page = description.load_manpage(description_file)

    if to_stdout:
        click.echo(page.render(), nl=False)
        return

    if output is not None:
        page.set_path(output)
    if header is not None:
        page.set_header_path(header)
    if footer is not None:
        page.set_footer_path(footer)

    if page.path is None and page.header_path is None and page.footer_path is None:
        raise click.ClickException(
            "No output paths configured. Set 'path', 'header_path' or 'footer_path' "
            + "in the description, pass --output/--header/--footer, or use --stdout."
        )

    result = page.finalize(stop_on_error=not keep_going)
    if not result.ok:
        lines = [failure.describe() for failure in result.failures]
        if result.skipped:
            lines.append(f"skipped: {', '.join(result.skipped)}")
        raise click.ClickException("Failed to write man page:\n  " + "\n  ".join(lines))

    logger.debug(f"Rendered {page.name!r} from {description_file}")
