from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0-dev"

# Public API - the builder types and the finalization result.
# Renderers and description loading are accessible via their full paths
# (e.g., mdocgen.render.render_body, mdocgen.description.load_manpage)

if TYPE_CHECKING:
    from mdocgen.finalize import FinalizeResult as FinalizeResult
    from mdocgen.model import Flag as Flag
    from mdocgen.model import Manpage as Manpage
    from mdocgen.model import Subcommand as Subcommand
    from mdocgen.model import TakesValue as TakesValue

# Lazy import mapping for runtime
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "FinalizeResult": ("mdocgen.finalize", "FinalizeResult"),
    "Flag": ("mdocgen.model", "Flag"),
    "Manpage": ("mdocgen.model", "Manpage"),
    "Subcommand": ("mdocgen.model", "Subcommand"),
    "TakesValue": ("mdocgen.model", "TakesValue"),
}


def __getattr__(name: str) -> object:
    """Lazily import public API members on first access."""
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        import importlib

        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        # Cache in module globals for subsequent access
        globals()[name] = value
        return value
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)


def __dir__() -> list[str]:
    """List available attributes including lazy imports."""
    return list(globals().keys()) + list(_LAZY_IMPORTS.keys())
