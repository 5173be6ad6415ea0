"""Edit-distance based string similarity."""

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(source: str, target: str) -> int:
    """
    Compute the Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1.

    Args:
        source: First string
        target: Second string

    Returns:
        Minimum number of single-character edits
    """
    return Levenshtein.distance(source, target)


def similarity(source: str, target: str) -> float:
    """
    Normalized similarity between two strings.

    Args:
        source: First string
        target: Second string

    Returns:
        1 - distance / max length, in [0, 1]. Two empty strings are
        identical (1.0); an empty string against a non-empty one scores 0.0.
    """
    if not source and not target:
        return 1.0
    if not source or not target:
        return 0.0

    distance = levenshtein_distance(source, target)
    return 1.0 - distance / max(len(source), len(target))
