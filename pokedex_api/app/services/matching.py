"""Edit distance between two strings."""

from Levenshtein import distance as levenshtein_distance


def levenshtein(a: str, b: str) -> int:
    """Return the Levenshtein distance between ``a`` and ``b``.

    Counts the single-character insertions, deletions and substitutions
    needed to turn one string into the other.  Comparison is
    case-sensitive; callers fold case themselves.
    """
    return levenshtein_distance(a or "", b or "")
