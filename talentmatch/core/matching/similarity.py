"""
String similarity for fuzzy skill matching.

Similarity is the Levenshtein edit distance normalized by the length of the
longer string. Callers lowercase and trim tokens before comparing them.
"""


def edit_distance(a: str, b: str) -> int:
    """
    Compute the Levenshtein distance between two strings.

    Insertion, deletion and substitution each cost 1. The table has
    ``len(b) + 1`` rows and ``len(a) + 1`` columns.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning one into the other
    """
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]

    for i in range(len(b) + 1):
        matrix[i][0] = i
    for j in range(len(a) + 1):
        matrix[0][j] = j

    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = min(
                    matrix[i - 1][j - 1] + 1,  # substitution
                    matrix[i][j - 1] + 1,  # insertion
                    matrix[i - 1][j] + 1,  # deletion
                )

    return matrix[len(b)][len(a)]


def similarity(a: str, b: str) -> float:
    """
    Normalized similarity of two strings in [0, 1].

    Two empty strings are fully similar.

    Args:
        a: First string
        b: Second string

    Returns:
        ``(max_len - edit_distance) / max_len``
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0

    return (max_len - edit_distance(a, b)) / max_len


def is_fuzzy_match(required: str, candidate: str, threshold: float = 0.7) -> bool:
    """
    Check whether a candidate skill satisfies a required skill.

    A pair matches when either token contains the other, or when their
    similarity is strictly above the threshold. Both tokens must already be
    normalized.
    """
    if candidate in required or required in candidate:
        return True
    return similarity(required, candidate) > threshold
