from __future__ import annotations

import pytest

from mdocgen import text

# =============================================================================
# strip_quotes Tests
# =============================================================================


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        pytest.param('"quoted"', "quoted", id="both_sides"),
        pytest.param("plain", "plain", id="no_quotes"),
        pytest.param('"leading', "leading", id="leading_only"),
        pytest.param('trailing"', "trailing", id="trailing_only"),
        pytest.param('""double""', '"double"', id="one_layer_only"),
        pytest.param('say "hi" now', 'say "hi" now', id="inner_quotes_kept"),
        pytest.param("", "", id="empty"),
    ],
)
def test_strip_quotes(value: str, expected: str) -> None:
    assert text.strip_quotes(value) == expected


# =============================================================================
# normalize_doc Tests
# =============================================================================


@pytest.mark.parametrize(
    ("doc", "expected"),
    [
        pytest.param("Enable verbose output", "Enable verbose output.", id="adds_period"),
        pytest.param("Enable verbose output.", "Enable verbose output.", id="keeps_single_period"),
        pytest.param("Trailing dots...", "Trailing dots.", id="collapses_periods"),
        pytest.param("  padded  ", "padded.", id="trims_whitespace"),
        pytest.param('"Quoted doc."', "Quoted doc.", id="quoted_with_inner_period"),
        pytest.param('."Wrapped".', "Wrapped.", id="periods_around_quotes"),
        pytest.param("..leading", "leading.", id="leading_periods"),
        pytest.param("", ".", id="empty"),
    ],
)
def test_normalize_doc(doc: str, expected: str) -> None:
    assert text.normalize_doc(doc) == expected


@pytest.mark.parametrize(
    "doc",
    [
        "Foo.",
        "Write output to FILE.",
        "Uses e.g. abbreviations inside.",
        'Mentions "quotes" inside.',
    ],
)
def test_normalize_doc_idempotent_on_normalized_input(doc: str) -> None:
    """Normalizing an already-normalized string returns it unchanged."""
    assert text.normalize_doc(doc) == doc
    assert text.normalize_doc(text.normalize_doc(doc)) == doc


def test_normalize_doc_not_idempotent_on_inner_whitespace_after_quote() -> None:
    """Whitespace exposed by quote stripping survives one pass but not the next."""
    once = text.normalize_doc('" a"')
    assert once == " a."
    assert text.normalize_doc(once) == "a."
