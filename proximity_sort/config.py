from __future__ import annotations

import os
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


VERSION = "0.1.0"


# ---------------------------
# Delimiters
# ---------------------------

NEWLINE = b"\n"
NUL = b"\0"


# ---------------------------
# Path conventions (platform)
# ---------------------------

CURDIR = os.fsencode(os.curdir)
PATH_SEP = os.fsencode(os.sep)
PATH_ALTSEP: Optional[bytes] = os.fsencode(os.altsep) if os.altsep else None


# ---------------------------
# Logging / observability
# ---------------------------

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL = os.getenv("PROXIMITY_SORT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

LOG_FORMAT = "<level>{level: <8}</level> | {name}:{function} - {message}"


# ---------------------------
# Ranking modes
# ---------------------------

class TieBreak(str, Enum):
    """How candidates with equal score are ordered."""

    INPUT_ORDER = "input-order"
    LEXICOGRAPHIC = "lexicographic"


class ScoringMode(str, Enum):
    """Score domain used to fill one ranking structure."""

    PROXIMITY = "proximity"  # signed, penalises depth past the divergence
    PREFIX = "prefix"        # unsigned count of leading matches


# ---------------------------
# Pydantic models shared around the app
# ---------------------------

class RankOptions(BaseModel):
    """
    Everything one run of the command line tool needs.
    Built once from parsed arguments and handed to the engine.
    """

    reference: bytes
    read0: bool = False
    print0: bool = False
    tie_break: TieBreak = TieBreak.INPUT_ORDER
    scoring: ScoringMode = ScoringMode.PROXIMITY
    collapse_duplicates: bool = False
    limit: Optional[int] = Field(default=None, ge=0)
    log_level: str = LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r}; expected one of {', '.join(LOG_LEVELS)}")
        return v

    @model_validator(mode="after")
    def _dedupe_needs_lexicographic(self) -> "RankOptions":
        if self.collapse_duplicates and self.tie_break is not TieBreak.LEXICOGRAPHIC:
            raise ValueError("collapsing duplicates requires the lexicographic tie-break")
        return self

    @property
    def input_delimiter(self) -> bytes:
        return NUL if self.read0 else NEWLINE

    @property
    def output_delimiter(self) -> bytes:
        return NUL if self.print0 else NEWLINE
