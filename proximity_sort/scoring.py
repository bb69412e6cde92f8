from __future__ import annotations

"""
Proximity scores between a candidate path and the reference path.

Two score domains exist:

* :func:`score` - the canonical signed score. Each leading component shared
  with the reference is worth +1; the first divergent component and every
  component after it cost -1, as does any depth beyond the reference.
* :func:`leading_matches` - the older unsigned variant, a plain count of
  leading components shared with the reference.

Never insert scores from both into one ranking structure.
"""

from typing import Callable, Dict, Sequence

from .config import ScoringMode

Scorer = Callable[[Sequence[bytes], Sequence[bytes]], int]


def score(candidate: Sequence[bytes], reference: Sequence[bytes]) -> int:
    """
    Signed proximity of ``candidate`` to ``reference`` (both component lists).

      reference  [a, b, c]
      [a, b, x]      -> +1 +1 -1        = 1
      [a, x, y, z]   -> +1 -1 -1 -1     = -2
      [a, b, c, d]   -> +1 +1 +1 -1     = 2
    """
    total = 0
    matched = True
    ref_len = len(reference)
    for i, comp in enumerate(candidate):
        if matched and i < ref_len:
            if comp == reference[i]:
                total += 1
                continue
            matched = False
        total -= 1
    return total


def leading_matches(candidate: Sequence[bytes], reference: Sequence[bytes]) -> int:
    """Number of leading components ``candidate`` shares with ``reference``."""
    n = 0
    for comp, ref in zip(candidate, reference):
        if comp != ref:
            break
        n += 1
    return n


SCORERS: Dict[ScoringMode, Scorer] = {
    ScoringMode.PROXIMITY: score,
    ScoringMode.PREFIX: leading_matches,
}


def get_scorer(mode: ScoringMode) -> Scorer:
    return SCORERS[ScoringMode(mode)]
