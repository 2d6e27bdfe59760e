"""
Strength scoring: a simple additive rubric over length and character variety.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_LOWER_RE = re.compile(r"[a-z]")
_UPPER_RE = re.compile(r"[A-Z]")
_DIGIT_RE = re.compile(r"[0-9]")
_OTHER_RE = re.compile(r"[^A-Za-z0-9]")

# (minimum score, label, feedback, color), checked top-down.
STRENGTH_LEVELS = [
    (80, "very-strong", "Very Strong", "#10b981"),
    (60, "strong", "Strong", "#3b82f6"),
    (40, "medium", "Medium", "#f59e0b"),
    (20, "weak", "Weak", "#ef4444"),
    (0, "very-weak", "Very Weak", "#dc2626"),
]

MAX_SCORE = 105


@dataclass(frozen=True)
class StrengthResult:
    score: int
    label: str
    feedback: str
    # Display hint for UIs; not used by the core.
    color: str


def _length_points(length: int) -> int:
    if length >= 12:
        return 25
    if length >= 8:
        return 15
    if length >= 6:
        return 10
    return 5


def score(password: str) -> StrengthResult:
    """
    Score a password and map the score to a strength label.

    Points:
    - length: 25 (>= 12), 15 (>= 8), 10 (>= 6), otherwise 5
    - +15 lowercase, +15 uppercase, +20 digit, +20 anything else
    - +10 bonus for length >= 16

    Never raises; the empty string scores 5 (very-weak).
    """
    total = _length_points(len(password))

    if _LOWER_RE.search(password):
        total += 15
    if _UPPER_RE.search(password):
        total += 15
    if _DIGIT_RE.search(password):
        total += 20
    if _OTHER_RE.search(password):
        total += 20

    if len(password) >= 16:
        total += 10

    for threshold, label, feedback, color in STRENGTH_LEVELS:
        if total >= threshold:
            break

    return StrengthResult(score=total, label=label, feedback=feedback, color=color)
