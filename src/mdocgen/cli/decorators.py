from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any

import click

from mdocgen import exceptions

if TYPE_CHECKING:
    from collections.abc import Callable


def _handle_mdocgen_error(e: exceptions.MdocgenError) -> click.ClickException:
    """Convert MdocgenError to user-friendly ClickException."""
    message = e.format_user_message()
    if suggestion := e.get_suggestion():
        message = f"{message}\n\nTip: {suggestion}"
    return click.ClickException(message)


def with_error_handling[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Wrap function with mdocgen error handling."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except exceptions.MdocgenError as e:
            raise _handle_mdocgen_error(e) from e
        except Exception as e:
            raise click.ClickException(repr(e)) from e

    return wrapper


def mdocgen_command(
    name: str | None = None,
    **attrs: Any,
) -> Callable[[Callable[..., Any]], click.Command]:
    """Create a Click command with mdocgen error handling.

    Args:
        name: Optional command name (defaults to function name)
        **attrs: Additional arguments passed to click.command()

    Returns:
        Decorator that creates a click.Command with error handling
    """

    def decorator(func: Callable[..., Any]) -> click.Command:
        return click.command(name=name, **attrs)(with_error_handling(func))

    return decorator
