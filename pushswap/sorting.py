"""Strategies that sort stack a using only the allowed stack operations."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise

from pushswap.stacks import Stacks

DEFAULT_BUCKETS = 10


def min_index(values: Sequence[int]) -> int:
    """Return the index of the first smallest value."""
    return values.index(min(values))


def max_index(values: Sequence[int]) -> int:
    """Return the index of the first largest value."""
    return values.index(max(values))


def push_min_to_b(stacks: Stacks) -> None:
    """Bring the smallest element of a near the top and push it onto b."""
    index = min_index(stacks.a)
    size = len(stacks.a)
    if index == size - 2:
        stacks.ra()
    elif index == size - 3:
        stacks.ra()
        stacks.ra()
    elif index == 0:
        stacks.rra()
    elif index == 1:
        stacks.rra()
        stacks.rra()
    stacks.pb()


def rotate_b_to_top(stacks: Stacks) -> None:
    """Rotate b the shorter way until its largest element is on top."""
    size = len(stacks.b)
    index = max_index(stacks.b)
    if index >= size // 2:
        for _ in range(size - 1 - index):
            stacks.rb()
    else:
        for _ in range(index + 1):
            stacks.rrb()


def to_top_a(stacks: Stacks, index: int) -> None:
    """Rotate a the shorter way until the element at index is on top."""
    size = len(stacks.a)
    if index >= size // 2:
        for _ in range(size - 1 - index):
            stacks.ra()
    else:
        for _ in range(index + 1):
            stacks.rra()


def find_in_bucket(values: Sequence[int], lower: int, upper: int) -> int | None:
    """Return the index nearest the top of a value in [lower, upper), or None."""
    for index in range(len(values) - 1, -1, -1):
        if lower <= values[index] < upper:
            return index
    return None


def fill_buckets(
    stacks: Stacks, num_buckets: int, minimum: int, bucket_range: int
) -> None:
    """Push the elements of a onto b bucket by bucket, lowest bucket first."""
    for bucket in range(num_buckets):
        lower = minimum + bucket * bucket_range
        upper = minimum + (bucket + 1) * bucket_range
        index = find_in_bucket(stacks.a, lower, upper)
        while index is not None:
            to_top_a(stacks, index)
            stacks.pb()
            index = find_in_bucket(stacks.a, lower, upper)


def empty_buckets(stacks: Stacks) -> None:
    """Move b back onto a, always taking b's largest element next."""
    while stacks.b:
        rotate_b_to_top(stacks)
        stacks.pa()


def is_sorted(stacks: Stacks) -> bool:
    """Return True if a is in ascending order from top to bottom."""
    return all(below > above for below, above in pairwise(stacks.a))


def sort_two(stacks: Stacks) -> None:
    """Sort a stack a of two elements."""
    if stacks.a[-1] > stacks.a[-2]:
        stacks.sa()


def sort_three(stacks: Stacks) -> None:
    """Sort a stack a of three elements with at most two operations."""
    bottom, middle, top = stacks.a
    if top > middle and middle < bottom and top < bottom:
        stacks.sa()
    elif top > middle and middle > bottom:
        stacks.sa()
        stacks.rra()
    elif top > middle and middle < bottom and top > bottom:
        stacks.ra()
    elif top < middle and middle > bottom and top < bottom:
        stacks.sa()
        stacks.ra()
    elif top < middle and middle > bottom and top > bottom:
        stacks.rra()


def sort_five(stacks: Stacks) -> None:
    """Sort a stack a of four or five elements."""
    while len(stacks.a) > 3:
        push_min_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        stacks.pa()


def sort_bucket(stacks: Stacks, num_buckets: int) -> None:
    """Sort a larger stack a by distributing it into value buckets on b."""
    minimum = min(stacks.a)
    maximum = max(stacks.a)
    value_range = maximum - minimum + 1
    bucket_range = value_range // num_buckets + 1
    fill_buckets(stacks, num_buckets, minimum, bucket_range)
    empty_buckets(stacks)


def sort(stacks: Stacks) -> None:
    """Sort stack a, choosing a strategy by its size; sorted input is left alone."""
    if is_sorted(stacks):
        return
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    else:
        sort_bucket(stacks, DEFAULT_BUCKETS)