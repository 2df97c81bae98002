"""Rank-indexed lookups shared by ability costs and affinity requirements.

Both are sequences indexed by a 0-based rank that may be out of range.
Negative ranks select the first slot. Ranks past the end select either the
last slot (costs cap at the top rank) or the first slot (requirements fall
back to rank 0), depending on ``overflow``.
"""

from collections.abc import Sequence
from typing import Literal, TypeVar

T = TypeVar("T")

Overflow = Literal["first", "last"]


def rank_index(length: int, rank: int, overflow: Overflow = "last") -> int | None:
    """Return the slot for ``rank`` in a sequence of ``length``, or None if empty."""
    if length <= 0:
        return None
    if rank < 0:
        return 0
    if rank >= length:
        return length - 1 if overflow == "last" else 0
    return rank


def pick_by_rank(
    items: Sequence[T],
    rank: int,
    overflow: Overflow = "last",
    default: T | None = None,
) -> T | None:
    """Item at the bounded slot for ``rank``; ``default`` for an empty sequence."""
    idx = rank_index(len(items), rank, overflow)
    if idx is None:
        return default
    return items[idx]
