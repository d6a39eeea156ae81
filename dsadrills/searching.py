"""Linear and two-pointer lookups, and binary search over answer ranges."""

from collections.abc import Callable, Iterable, Sequence
from typing import Any


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``, or ``None``."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def pair_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find two positions in ascending ``values`` whose elements add up to ``target``.

    Pointers close in from both ends. The first matching pair found is
    returned as ``(i, j)`` with ``i < j``; ``None`` means no pair exists.
    """
    low, high = 0, len(values) - 1
    while low < high:
        total = values[low] + values[high]
        if total > target:
            high -= 1
        elif total < target:
            low += 1
        else:
            return low, high
    return None


def _largest_true(low: int, high: int, accept: Callable[[int], bool]) -> int | None:
    """Return the largest ``x`` in ``[low, high]`` with ``accept(x)``, assuming monotonicity."""
    answer = None
    while low <= high:
        mid = low + (high - low) // 2
        if accept(mid):
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def _smallest_true(low: int, high: int, accept: Callable[[int], bool]) -> int | None:
    """Return the smallest ``x`` in ``[low, high]`` with ``accept(x)``, assuming monotonicity."""
    answer = None
    while low <= high:
        mid = low + (high - low) // 2
        if accept(mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def _within_limit(pages: Sequence[int], students: int, limit: int) -> bool:
    breaks = 0
    load = 0
    for count in pages:
        if count > limit:
            return False
        if load + count <= limit:
            load += count
        else:
            breaks += 1
            load = count
    return breaks <= students


def allocate_books(pages: Iterable[int], students: int) -> int:
    """Return the smallest page limit that the books, kept in order, can be split under.

    Books are handed out greedily: each group takes books until the next
    one would exceed the limit. A limit is accepted when no book exceeds
    it and the number of breaks between groups is at most ``students``.
    """
    books = list(pages)
    if students > len(books):
        raise ValueError("more students than books")
    if any(count < 0 for count in books):
        raise ValueError("page counts must not be negative")
    answer = _smallest_true(0, sum(books), lambda limit: _within_limit(books, students, limit))
    if answer is None:
        raise ValueError("no page limit fits")
    return answer


def _can_place(positions: Sequence[int], cows: int, gap: int) -> bool:
    placed = 1
    last = positions[0]
    if placed >= cows:
        return True
    for position in positions[1:]:
        if position - last >= gap:
            placed += 1
            last = position
            if placed >= cows:
                return True
    return False


def aggressive_cows(stalls: Iterable[int], cows: int) -> int:
    """Return the largest minimum distance at which ``cows`` can be placed in ``stalls``.

    Raises ``ValueError`` if there are fewer stalls than cows, or if no
    placement keeps every pair of cows at least one unit apart.
    """
    positions = sorted(stalls)
    if cows < 1:
        raise ValueError("at least one cow is needed")
    if cows > len(positions):
        raise ValueError("more cows than stalls")
    answer = _largest_true(
        1, positions[-1] - positions[0], lambda gap: _can_place(positions, cows, gap)
    )
    if answer is None:
        raise ValueError("no placement keeps the cows at least one unit apart")
    return answer