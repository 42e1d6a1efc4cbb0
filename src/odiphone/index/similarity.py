"""Weighted Levenshtein over phonetic keys.

Letters carry the consonant and vowel sounds; digits only record modifiers,
so editing a digit costs half as much as editing a letter.
"""

from __future__ import annotations


def _cost(ch: str) -> float:
    return 0.5 if ch.isdigit() else 1.0


def _substitution_cost(a: str, b: str) -> float:
    if a == b:
        return 0.0
    if a.isdigit() and b.isdigit():
        return 0.5
    return 1.0


def weighted_levenshtein(s1: str, s2: str) -> float:
    """Edit distance between two keys with digit edits at half cost."""
    n, m = len(s1), len(s2)
    dp = [[0.0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        dp[i][0] = dp[i - 1][0] + _cost(s1[i - 1])
    for j in range(1, m + 1):
        dp[0][j] = dp[0][j - 1] + _cost(s2[j - 1])

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            dp[i][j] = min(
                dp[i - 1][j] + _cost(s1[i - 1]),  # deletion
                dp[i][j - 1] + _cost(s2[j - 1]),  # insertion
                dp[i - 1][j - 1] + _substitution_cost(s1[i - 1], s2[j - 1]),
            )
    return dp[n][m]


def normalised_similarity(s1: str, s2: str) -> float:
    """Similarity in [0, 1]; 1.0 means identical keys."""
    if not s1 and not s2:
        return 1.0
    max_len = max(len(s1), len(s2))
    return max(0.0, 1.0 - weighted_levenshtein(s1, s2) / max_len)
