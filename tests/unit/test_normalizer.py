"""Unit tests for text normalization."""

import pytest
from pdf_page_search.core.normalizer import TextNormalizer


class TestTextNormalizer:
    """Test cases for the TextNormalizer class."""

    @pytest.fixture
    def normalizer(self):
        """Create a normalizer instance for testing."""
        return TextNormalizer()

    def test_case_sensitive_is_identity(self, normalizer):
        """Test that case-sensitive normalization leaves text untouched."""
        text = "Hello WORLD"

        assert normalizer.normalize(text, case_sensitive=True) is text

    def test_lowercases_by_default(self, normalizer):
        """Test case-insensitive normalization."""
        assert normalizer.normalize("Hello WORLD") == "hello world"

    def test_non_ascii_lowercasing(self, normalizer):
        """Test lower-casing of accented characters."""
        assert normalizer.normalize("ÉCOLE Ñandú ÜBER") == "école ñandú über"

    def test_expanding_characters_are_left_alone(self, normalizer):
        """Test that characters whose lower case expands keep their form."""
        text = "İSTANBUL"

        result = normalizer.normalize(text)

        assert result == "İstanbul"
        assert len(result) == len(text)

    @pytest.mark.parametrize("text", [
        "plain ascii",
        "Straße ẞ",
        "İi ǅ ΣΑΣ",
        "日本語 テキスト",
        "emoji 👍 MIXED",
    ])
    def test_length_is_preserved(self, normalizer, text):
        """Test that normalization never changes the code point count."""
        assert len(normalizer.normalize(text)) == len(text)

    def test_empty_string(self, normalizer):
        """Test handling of empty text."""
        assert normalizer.normalize("") == ""
