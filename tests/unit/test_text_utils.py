"""Tests for text helpers (entity decoding, truncation)."""

from docsearch.shared.utils.text import cut_text, decode_entities


class TestDecodeEntities:
    def test_named_and_numeric_entities(self) -> None:
        assert decode_entities("A &amp; B &#39;c&#39; &lt;d&gt;") == "A & B 'c' <d>"

    def test_plain_text_unchanged(self) -> None:
        assert decode_entities("Gateway") == "Gateway"


class TestCutText:
    def test_short_text_unchanged(self) -> None:
        assert cut_text("Gateway > Sharding", 100) == "Gateway > Sharding"

    def test_exact_length_unchanged(self) -> None:
        text = "x" * 100
        assert cut_text(text, 100) == text

    def test_cuts_at_word_boundary_with_ellipsis(self) -> None:
        text = "word " * 30
        out = cut_text(text, 100)
        assert len(out) <= 100
        assert out.endswith("word...")

    def test_hard_cut_without_whitespace(self) -> None:
        out = cut_text("a" * 150, 100)
        assert out == "a" * 97 + "..."
        assert len(out) == 100
