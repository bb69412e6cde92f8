"""Typed containers shared across ranking modules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Candidate:
    """One input path with its score and its position in the input."""

    path: bytes
    score: int
    index: int

    def sort_key(self):
        # heapq pops the smallest key first: best score, then earliest input
        return (-self.score, self.index)
