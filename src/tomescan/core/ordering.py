"""Chapter ordering for reading and navigation.

Ordering works on ChapterOrderingUnit keys only and never looks at parsed
chapter numbers, so an ordering stays stable across partial re-scans.

Tiers, each breaking ties of the previous one:
1. Chapters of regular volumes come first, then loose-leaf, then specials
2. Non-special chapters before special chapters
3. Volume minimum number, ascending
4. Persisted sort order, ascending
5. Input position (keeps the order total)
"""

import re
from collections.abc import Sequence

from tomescan.core.constants import DEFAULT_CHAPTER_NUMBER, SPECIAL_VOLUME_NUMBER
from tomescan.core.extractors import is_loose_leaf_volume, is_special_volume
from tomescan.models.schemas import ChapterOrderingUnit

__all__ = [
    "chapter_sort_key",
    "default_first_key",
    "default_last_key",
    "natural_sort_key",
    "next_chapter_index",
    "order",
    "order_by_range",
    "previous_chapter_index",
    "specials_last_key",
    "volume_tier",
]

_REGULAR_TIER = 0
_LOOSE_LEAF_TIER = 1
_SPECIAL_TIER = 2

_DIGITS = re.compile(r"(\d+(?:\.\d+)?)")


def volume_tier(volume_min_number: float) -> int:
    """Rank a volume number: regular (0), loose-leaf (1) or special (2)."""
    if is_loose_leaf_volume(volume_min_number):
        return _LOOSE_LEAF_TIER
    if is_special_volume(volume_min_number):
        return _SPECIAL_TIER
    return _REGULAR_TIER


def chapter_sort_key(
    unit: ChapterOrderingUnit, position: int = 0
) -> tuple[int, bool, float, int, int]:
    """Sort key implementing the five ordering tiers."""
    return (
        volume_tier(unit.volume_min_number),
        unit.is_special,
        unit.volume_min_number,
        unit.sort_order,
        position,
    )


def order(chapters: Sequence[ChapterOrderingUnit]) -> list[int]:
    """Return the indices of ``chapters`` in reading order.

    The result is a permutation of ``range(len(chapters))``. Applying it to
    an already-ordered sequence yields the identity permutation.
    """
    return sorted(
        range(len(chapters)),
        key=lambda index: chapter_sort_key(chapters[index], index),
    )


def next_chapter_index(ordering: Sequence[int], current: int) -> int | None:
    """Return the chapter index following ``current`` in an ordering, or None."""
    try:
        position = ordering.index(current)
    except ValueError:
        return None
    if position + 1 >= len(ordering):
        return None
    return ordering[position + 1]


def previous_chapter_index(ordering: Sequence[int], current: int) -> int | None:
    """Return the chapter index preceding ``current`` in an ordering, or None."""
    try:
        position = ordering.index(current)
    except ValueError:
        return None
    if position == 0:
        return None
    return ordering[position - 1]


# ============================================================================
# Number keys
# ============================================================================


def default_last_key(number: float) -> tuple[bool, float]:
    """Sort key placing the default-chapter sentinel after real numbers."""
    return (number == DEFAULT_CHAPTER_NUMBER, number)


def default_first_key(number: float) -> tuple[bool, float]:
    """Sort key placing the default-chapter sentinel before real numbers."""
    return (number != DEFAULT_CHAPTER_NUMBER, number)


def specials_last_key(number: float) -> tuple[bool, float]:
    """Sort key placing the special-volume sentinel after everything else."""
    return (number == SPECIAL_VOLUME_NUMBER, number)


def natural_sort_key(text: str) -> tuple[tuple[int, float | str], ...]:
    """Key ordering embedded numbers numerically ("SP2" before "SP10")."""
    parts: list[tuple[int, float | str]] = []
    for chunk in _DIGITS.split(text or ""):
        if not chunk:
            continue
        if _DIGITS.fullmatch(chunk):
            parts.append((0, float(chunk)))
        else:
            parts.append((1, chunk.lower()))
    return tuple(parts)


def order_by_range(chapters: Sequence[ChapterOrderingUnit]) -> list[int]:
    """Return indices ordered naturally by display range (used for specials)."""
    return sorted(
        range(len(chapters)),
        key=lambda index: (natural_sort_key(chapters[index].range), index),
    )
