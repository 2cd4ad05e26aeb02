"""Naive, Rabin-Karp and Knuth-Morris-Pratt string matching with step counts."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "MatchResult",
    "naive_match",
    "char_code",
    "rabin_karp_preprocess",
    "rabin_karp_match",
    "compute_prefix",
    "kmp_match",
]

_CHAR_CODES = {"A": 1, "B": 2, "C": 3, "G": 4, "T": 5, "X": 6}


@dataclass(frozen=True)
class MatchResult:
    """Valid shifts of the pattern, matching steps and preprocessing steps."""

    shifts: list[int] = field(default_factory=list)
    comparisons: int = 0
    preprocessing: int = 0


def _require_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def _require_modulus(modulus: int) -> None:
    if modulus <= 0:
        raise ValueError("modulus must be positive")


def naive_match(text: str, pattern: str) -> MatchResult:
    """Try every shift; one step per character compared."""
    _require_pattern(pattern)
    m = len(pattern)
    shifts: list[int] = []
    steps = 0
    for s in range(len(text) - m + 1):
        for expected, actual in zip(pattern, text[s : s + m]):
            steps += 1
            if expected != actual:
                break
        else:
            shifts.append(s)
    return MatchResult(shifts, steps)


def char_code(char: str) -> int:
    """Digit used for a character when hashing; 0 for unknown characters."""
    return _CHAR_CODES.get(char, 0)


def rabin_karp_preprocess(
    pattern: str, radix: int = 10, modulus: int = 13
) -> tuple[int, int]:
    """Hash of ``pattern`` modulo ``modulus``; returns (hash, steps)."""
    _require_modulus(modulus)
    value = 0
    steps = 0
    for char in pattern:
        steps += 1
        value = (radix * value + char_code(char)) % modulus
    return value, steps


def rabin_karp_match(
    text: str, pattern: str, radix: int = 10, modulus: int = 13
) -> MatchResult:
    """Rolling-hash matching; hash hits are confirmed character by character."""
    _require_pattern(pattern)
    _require_modulus(modulus)
    expected, preprocessing = rabin_karp_preprocess(pattern, radix, modulus)
    n, m = len(text), len(pattern)
    if n < m:
        return MatchResult([], 0, preprocessing)
    high = pow(radix, m - 1, modulus)
    rolling, steps = rabin_karp_preprocess(text[:m], radix, modulus)
    shifts: list[int] = []
    for s in range(n - m + 1):
        steps += 1
        if rolling == expected:
            for wanted, actual in zip(pattern, text[s : s + m]):
                steps += 1
                if wanted != actual:
                    break
            else:
                shifts.append(s)
        if s < n - m:
            rolling = (
                radix * (rolling - char_code(text[s]) * high) + char_code(text[s + m])
            ) % modulus
    return MatchResult(shifts, steps, preprocessing)


def compute_prefix(pattern: str) -> tuple[list[int], int]:
    """Prefix function of ``pattern``; returns (table, steps)."""
    _require_pattern(pattern)
    prefix = [0] * len(pattern)
    k = 0
    steps = 0
    for q in range(1, len(pattern)):
        steps += 1
        while k > 0 and pattern[k] != pattern[q]:
            k = prefix[k - 1]
            steps += 1
        if pattern[k] == pattern[q]:
            k += 1
        prefix[q] = k
    return prefix, steps


def kmp_match(text: str, pattern: str) -> MatchResult:
    """Knuth-Morris-Pratt matching driven by the prefix function."""
    prefix, preprocessing = compute_prefix(pattern)
    m = len(pattern)
    shifts: list[int] = []
    q = 0
    steps = 0
    for i, char in enumerate(text):
        steps += 1
        while q > 0 and pattern[q] != char:
            q = prefix[q - 1]
            steps += 1
        if pattern[q] == char:
            q += 1
        if q == m:
            shifts.append(i - m + 1)
            q = prefix[q - 1]
    return MatchResult(shifts, steps, preprocessing)