"""Batching of word streams for bulk encoding."""

from __future__ import annotations

from collections.abc import Container, Hashable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def unique_batches(
    iterable: Iterable[T], n: int, skip: Container[T] = ()
) -> Iterator[list[T]]:
    """Yield batches of up to *n* distinct items, in first-seen order.

    An item is yielded at most once over the whole stream. Items found in
    *skip* are left out; *skip* is checked as each item is read.
    """
    if n < 1:
        raise ValueError(f"Batch size must be positive, got {n}")
    batch: list[T] = []
    seen: set[T] = set()
    for item in iterable:
        if item in seen or item in skip:
            continue
        seen.add(item)
        batch.append(item)
        if len(batch) == n:
            yield batch
            batch = []
    if batch:
        yield batch
