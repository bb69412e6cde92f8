from __future__ import annotations

"""
Path component splitting.

Paths are handled as raw bytes end to end: a component is whatever sits
between two separators, compared byte for byte. Nothing is decoded, so
paths that are not valid text still split structurally.
"""

from typing import List, Optional

from .config import CURDIR, PATH_ALTSEP, PATH_SEP


def tokenize(
    raw_path: bytes,
    sep: bytes = PATH_SEP,
    altsep: Optional[bytes] = PATH_ALTSEP,
) -> List[bytes]:
    """
    Split ``raw_path`` into its components.

    - ``altsep`` (if any) is treated as ``sep``
    - a leading separator becomes a root component (``sep`` itself)
    - empty segments from repeated / trailing separators are dropped
    - ``.`` segments are dropped, so leading current-directory
      components never reach the scorer
    - ``..`` is kept like any other component

    Examples:
      b"./src/main.rs"  -> [b"src", b"main.rs"]
      b"/usr//lib/"     -> [b"/", b"usr", b"lib"]
    """
    if not raw_path:
        return []
    if altsep and altsep != sep:
        raw_path = raw_path.replace(altsep, sep)

    parts: List[bytes] = []
    if raw_path.startswith(sep):
        parts.append(sep)
    for seg in raw_path.split(sep):
        if not seg or seg == CURDIR:
            continue
        parts.append(seg)
    return parts
