from __future__ import annotations

import importlib
import logging
from typing import override

import click

# Lazy command registry: command_name -> (module_path, attr_name, help_text)
_LAZY_COMMANDS: dict[str, tuple[str, str, str]] = {
    "render": ("mdocgen.cli.render", "render", "Render a page description to mdoc files."),
    "schema": ("mdocgen.cli.schema", "schema", "Output JSON Schema for page description files."),
}


class MdocgenGroup(click.Group):
    """Custom Group with lazy command loading."""

    @override
    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return all available command names."""
        return sorted(_LAZY_COMMANDS.keys())

    @override
    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Lazily load and return a command by name."""
        if cmd_name not in _LAZY_COMMANDS:
            return None

        module_path, attr_name, _help = _LAZY_COMMANDS[cmd_name]
        module = importlib.import_module(module_path)
        return getattr(module, attr_name)

    @override
    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands using cached help strings, without importing them."""
        commands = [(name, _LAZY_COMMANDS[name][2]) for name in self.list_commands(ctx)]
        if commands:
            with formatter.section("Commands"):
                formatter.write_dl(commands)


def _setup_logging(verbose: bool, quiet: bool) -> None:
    """Configure logging for CLI output."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s", force=True)


@click.group(cls=MdocgenGroup)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
def cli(verbose: bool, quiet: bool) -> None:
    """Generate mdoc(7) man pages from CLI descriptions.

    Reads a YAML or JSON description of a program's flags and subcommands
    and writes the rendered page body, header and footer.
    """
    if verbose and quiet:
        raise click.UsageError("--verbose and --quiet are mutually exclusive")
    _setup_logging(verbose, quiet)


def main() -> None:
    """Main CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
