"""Text helpers shared by the builder contract and the renderer."""

from __future__ import annotations

__all__ = [
    "strip_quotes",
    "normalize_doc",
]

_QUOTE = '"'
_PERIOD = "."


def strip_quotes(value: str) -> str:
    """Strip one layer of surrounding double quotes.

    Each side is handled independently, so `"foo` becomes `foo`.
    """
    return value.removeprefix(_QUOTE).removesuffix(_QUOTE)


def normalize_doc(doc: str) -> str:
    """Normalize a documentation string into a single sentence ending in a period.

    The boundary-stripping order is fixed: whitespace, periods, one layer of
    quotes, periods again. The result is stable for already-normalized input
    such as `Foo.`, but not for every input (`'" a"'` normalizes to ` a.`,
    which normalizes to `a.`).
    """
    doc = doc.strip()
    doc = doc.strip(_PERIOD)
    doc = strip_quotes(doc)
    doc = doc.strip(_PERIOD)
    return f"{doc}{_PERIOD}"
