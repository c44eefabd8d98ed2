# src/mockgen/question_generator/planner.py
"""Batch planning: split a question total across topics."""

from collections import Counter
from collections.abc import Iterable

from mockgen.models import Batch


def plan_batches(
    topics: list[str],
    total: int,
    min_batch_size: int = 3,
    max_batch_size: int = 15,
) -> list[Batch]:
    """Split `total` questions across `topics` and merge undersized batches.

    Each topic gets floor(total / len(topics)); the first (total mod
    len(topics)) topics get one extra. Topics allotted zero are skipped and
    allotments above max_batch_size are split into near-equal same-topic
    batches of at most max_batch_size each.
    The result is then passed through merge_small_batches().

    Args:
        topics: Ordered topic list (non-empty).
        total: Number of questions to plan for.
        min_batch_size: Smallest batch worth sending on its own.
        max_batch_size: Largest batch sent in one request.

    Returns:
        Batches whose counts sum to `total`. Empty if total <= 0.
    """
    if total <= 0 or not topics:
        return []

    per_topic, remainder = divmod(total, len(topics))
    batches: list[Batch] = []
    for i, topic in enumerate(topics):
        allotted = per_topic + (1 if i < remainder else 0)
        if allotted <= 0:
            continue
        parts = -(-allotted // max_batch_size)
        size, extra = divmod(allotted, parts)
        for j in range(parts):
            batches.append(Batch(topics=[topic], count=size + (1 if j < extra else 0)))

    return merge_small_batches(batches, min_batch_size)


def _union(left: list[str], right: Iterable[str]) -> list[str]:
    merged = list(left)
    for topic in right:
        if topic not in merged:
            merged.append(topic)
    return merged


def merge_small_batches(batches: list[Batch], min_batch_size: int = 3) -> list[Batch]:
    """Merge batches below min_batch_size into their neighbours.

    Walks in order, growing an undersized accumulator with the following
    batches (count and topic set) until it reaches the minimum. A trailing
    accumulator that is still undersized is folded into the previous batch.
    Counts are preserved. With batches from plan_batches() a merged batch
    stays within max_batch_size as long as max_batch_size >= 3 * min_batch_size - 2.
    """
    merged: list[Batch] = []
    current: Batch | None = None

    for batch in batches:
        if current is None:
            current = batch.model_copy()
        elif current.count < min_batch_size:
            current = Batch(
                topics=_union(current.topics, batch.topics),
                count=current.count + batch.count,
            )
        else:
            merged.append(current)
            current = batch.model_copy()

    if current is not None:
        if current.count < min_batch_size and merged:
            last = merged.pop()
            current = Batch(
                topics=_union(last.topics, current.topics),
                count=last.count + current.count,
            )
        merged.append(current)

    return merged


def least_used_topic(topics: list[str], used: Iterable[str]) -> str:
    """Return the topic with the fewest occurrences in `used`.

    Ties go to the earliest topic in `topics`. Tags not in `topics` are
    ignored.
    """
    if not topics:
        raise ValueError("topics must not be empty")
    counts = Counter(used)
    return min(topics, key=lambda topic: (counts[topic], topics.index(topic)))
