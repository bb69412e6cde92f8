from __future__ import annotations

"""
Lexicographic ordering inside equal-score groups.

The ranking heap hands candidates over best score first. This module cuts
that stream into runs of equal score and emits each run sorted by its raw
bytes, so paths that are equally close come out alphabetically instead of
in input order. Group order (score descending) is untouched.

Byte-identical paths are kept by default. ``collapse_duplicates=True``
emits each distinct path once per group.
"""

from typing import Iterable, Iterator, List

from .pipeline_types import Candidate


def _emit_group(group: List[bytes], collapse_duplicates: bool) -> List[bytes]:
    if collapse_duplicates:
        return sorted(set(group))
    return sorted(group)


def secondary_rank(
    candidates: Iterable[Candidate],
    collapse_duplicates: bool = False,
) -> Iterator[bytes]:
    """
    candidates: score-ordered (descending) stream, e.g. a draining RankingHeap
    Yields raw paths; pulls from ``candidates`` one group at a time.
    """
    group: List[bytes] = []
    group_score = None
    for cand in candidates:
        if group and cand.score != group_score:
            yield from _emit_group(group, collapse_duplicates)
            group = []
        group_score = cand.score
        group.append(cand.path)
    if group:
        yield from _emit_group(group, collapse_duplicates)
