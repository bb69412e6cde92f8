"""Rank paths by proximity to a reference path."""

from .config import VERSION as __version__
from .config import ScoringMode, TieBreak
from .ranking import RankingHeap, rank, reorder

__all__ = ["RankingHeap", "ScoringMode", "TieBreak", "rank", "reorder", "__version__"]
