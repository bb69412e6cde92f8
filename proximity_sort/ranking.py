# proximity_sort/ranking.py
from __future__ import annotations

import heapq
from typing import Iterable, Iterator, List, Optional, Tuple

from loguru import logger

from .components import tokenize
from .config import ScoringMode, TieBreak
from .pipeline_types import Candidate
from .scoring import get_scorer
from .secondary import secondary_rank

# ---------------------------------------------------------------------------
# Ranking structure
# ---------------------------------------------------------------------------


class RankingHeap:
    """
    Priority structure over scored candidates.

    Highest score comes out first; equal scores come out in input order.
    ``insert`` and ``extract_max`` are both O(log N), so draining only the
    first K entries costs O(K log N) once the heap is built.
    """

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, Candidate]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def insert(self, candidate: Candidate) -> None:
        neg_score, index = candidate.sort_key()
        heapq.heappush(self._heap, (neg_score, index, candidate))

    def extract_max(self) -> Optional[Candidate]:
        """Remove and return the best remaining candidate, ``None`` once empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def __iter__(self) -> Iterator[Candidate]:
        # draining iterator: each step pops one candidate
        while True:
            cand = self.extract_max()
            if cand is None:
                return
            yield cand


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def rank(
    paths: Iterable[bytes],
    reference: bytes,
    scoring: ScoringMode = ScoringMode.PROXIMITY,
) -> RankingHeap:
    """
    Score every path against ``reference`` and load them all into a heap.

    The reference is split once; each candidate's components only live for
    the duration of its own scoring.
    """
    scorer = get_scorer(scoring)
    ref_components = tokenize(reference)

    heap = RankingHeap()
    for i, path in enumerate(paths):
        heap.insert(Candidate(path=path, score=scorer(tokenize(path), ref_components), index=i))

    logger.debug(
        "Ranked {} candidates against {!r} ({} components, scoring={})",
        len(heap), reference, len(ref_components), ScoringMode(scoring).value,
    )
    return heap


def reorder(
    paths: Iterable[bytes],
    reference: bytes,
    *,
    tie_break: TieBreak = TieBreak.INPUT_ORDER,
    scoring: ScoringMode = ScoringMode.PROXIMITY,
    collapse_duplicates: bool = False,
) -> Iterator[bytes]:
    """
    Return ``paths`` reordered closest-first relative to ``reference``.

    Scoring happens eagerly, here; the returned iterator extracts lazily.

    Parameters
    ----------
    tie_break :
        ``INPUT_ORDER`` keeps equal-score paths in input order (stable).
        ``LEXICOGRAPHIC`` sorts each equal-score group by raw bytes.
    scoring :
        Score domain, see :mod:`proximity_sort.scoring`.
    collapse_duplicates :
        Only with ``LEXICOGRAPHIC``: emit byte-identical paths within a
        score group once.
    """
    heap = rank(paths, reference, scoring=scoring)
    if TieBreak(tie_break) is TieBreak.LEXICOGRAPHIC:
        return secondary_rank(heap, collapse_duplicates=collapse_duplicates)
    if collapse_duplicates:
        logger.warning("collapse_duplicates ignored without the lexicographic tie-break")
    return (cand.path for cand in heap)
