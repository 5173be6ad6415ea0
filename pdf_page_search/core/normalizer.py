"""Text normalization that keeps character offsets aligned."""


class TextNormalizer:
    """Produces comparison-ready text without moving any character offsets."""

    def normalize(self, text: str, case_sensitive: bool = False) -> str:
        """
        Normalize text for matching.

        Lower-cases the text unless the search is case sensitive. The result
        always has the same number of code points as the input, so offsets
        found in normalized text index the original text directly. Characters
        whose lower-case form expands (for example ``"İ"``) are left as is;
        full Unicode case folding is not attempted.

        Args:
            text: Input text to normalize
            case_sensitive: Whether the search distinguishes case

        Returns:
            Normalized text of identical length
        """
        if case_sensitive or not text:
            return text

        lowered = text.lower()
        # lower() never shrinks a character, so equal lengths mean a 1:1 mapping
        if len(lowered) == len(text):
            return lowered

        return "".join(self._lower_char(char) for char in text)

    @staticmethod
    def _lower_char(char: str) -> str:
        lowered = char.lower()
        return lowered if len(lowered) == 1 else char
