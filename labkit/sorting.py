"""Classic comparison sorts and a small command for timing them."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, Iterable, Sequence

_RAND_MAX = 2**31 - 1


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by top-down merge sort."""
    return _merge_sorted(list(values))


def _merge_sorted(items: list[int]) -> list[int]:
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    left = _merge_sorted(items[:middle])
    right = _merge_sorted(items[middle:])
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _partition(items: list[int], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low
    for j in range(low, high):
        if items[j] < pivot:
            items[boundary], items[j] = items[j], items[boundary]
            boundary += 1
    items[boundary], items[high] = items[high], items[boundary]
    return boundary


def _quick_sort(
    items: list[int], choose_pivot: Callable[[int, int], int] | None = None
) -> list[int]:
    # An explicit stack keeps degenerate inputs from exhausting the call stack.
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        if choose_pivot is not None:
            chosen = choose_pivot(low, high)
            items[chosen], items[high] = items[high], items[chosen]
        pivot_index = _partition(items, low, high)
        pending.append((pivot_index + 1, high))
        pending.append((low, pivot_index - 1))
    return items


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by quicksort with the last element as pivot."""
    return _quick_sort(list(values))


def randomized_quick_sort(values: Iterable[int], rng: random.Random | None = None) -> list[int]:
    """Return a new list sorted by quicksort with a randomly chosen pivot."""
    generator = rng if rng is not None else random.Random()
    return _quick_sort(list(values), lambda low, high: generator.randint(low, high))


def _sift_down(items: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by heapsort on a max-heap."""
    items = list(values)
    size = len(items)
    for root in reversed(range(size // 2)):
        _sift_down(items, size, root)
    for end in reversed(range(size)):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by bubble sort."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return a new list sorted by selection sort."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        if smallest != i:
            items[i], items[smallest] = items[smallest], items[i]
    return items


ALGORITHMS: dict[str, Callable[[Iterable[int]], list[int]]] = {
    "merge_sort": merge_sort,
    "quick_sort": quick_sort,
    "randomized_quick_sort": randomized_quick_sort,
    "heap_sort": heap_sort,
    "bubble_sort": bubble_sort,
    "selection_sort": selection_sort,
}


def get_algorithm(name: str) -> Callable[[Iterable[int]], list[int]]:
    """Look up a sort by name, e.g. ``MERGE_SORT`` or ``heap-sort``."""
    key = name.strip().lower().replace("-", "_")
    try:
        return ALGORITHMS[key]
    except KeyError:
        raise ValueError(f"unknown sorting algorithm: {name!r}") from None


def main(argv: Sequence[str] | None = None) -> int:
    """Sort an array of the given size with the chosen algorithm."""
    parser = argparse.ArgumentParser(prog="labkit-sort", description=main.__doc__)
    parser.add_argument("count", type=int, help="number of elements")
    parser.add_argument("-a", "--algorithm", type=str, help="sorting algorithm to run")
    parser.add_argument("--random", action="store_true", help="fill with random values instead of zeros")
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("number of elements must be non-negative")

    print(args.count)
    if args.algorithm is None:
        print("No sorting algorithm selected!", file=sys.stderr)
        return 2
    try:
        algorithm = get_algorithm(args.algorithm)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 2

    if args.random:
        generator = random.Random()
        values = [generator.randint(0, _RAND_MAX) for _ in range(args.count)]
    else:
        values = [0] * args.count
    algorithm(values)
    print("sorting done")
    return 0


if __name__ == "__main__":
    sys.exit(main())