"""
Stability checks for integer sorts.

Equal ints cannot be told apart, so stability is observed with `TaggedInt`:
an int subclass carrying a `tag` (its original index). It behaves as a plain
int in every comparison and arithmetic expression the sorts use, so a sort that
moves the original element objects keeps the tags, and the tag order among
equal values shows whether relative order survived.

A sort that writes back freshly computed values (non-stable counting sort)
drops the tags entirely; `first_stability_violation` reports that as a
violation at the first untagged position.

Public API (stable):
    TaggedInt
    tag_values(values) -> list[TaggedInt]
    first_stability_violation(out) -> int | None
    is_stable(out) -> bool
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

__all__ = ["TaggedInt", "tag_values", "first_stability_violation", "is_stable"]


class TaggedInt(int):
    """An int that remembers where it came from."""

    tag: int

    def __new__(cls, value: int, tag: int) -> "TaggedInt":
        obj = super().__new__(cls, value)
        obj.tag = tag
        return obj

    def __repr__(self) -> str:
        return f"TaggedInt({int(self)}, tag={self.tag})"


def tag_values(values: Iterable[int]) -> List[TaggedInt]:
    """Wrap each value with its index as tag."""
    return [TaggedInt(v, i) for i, v in enumerate(values)]


def first_stability_violation(out: Sequence[int]) -> Optional[int]:
    """
    Return the first output index whose element breaks stability, or None.

    An element breaks stability if it carries no tag, or if its tag is lower
    than the tag of an earlier element with the same value.
    """
    last_tag: Dict[int, int] = {}
    for i, v in enumerate(out):
        tag = getattr(v, "tag", None)
        if tag is None:
            return i
        key = int(v)
        if key in last_tag and last_tag[key] > tag:
            return i
        last_tag[key] = tag
    return None


def is_stable(out: Sequence[int]) -> bool:
    return first_stability_violation(out) is None
