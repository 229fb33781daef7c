#!/usr/bin/env python3
#
#   Classic sorting algorithms on lists of non-negative integers
#

class SortingInstanceError(ValueError):
    """
    The input does not satisfy the preconditions of the sorting algorithm
    """

def insertion_sort(a):
    """
    Sorts `a` in place.

    Invariant: after inserting a[j], the first j + 1 elements are sorted.
    """
    for j in range(1, len(a)):
        key = a[j]
        i = j - 1
        # move larger elements one slot to the right
        while i >= 0 and a[i] > key:
            a[i + 1] = a[i]
            i -= 1
        a[i + 1] = key

def merge_sort(a):
    """
    Divide and conquer: split in halves, sort each recursively, then merge the sorted halves.
    Returns a new list.
    """
    if len(a) <= 1:
        return list(a)
    m = len(a) // 2
    return _merge(merge_sort(a[:m]), merge_sort(a[m:]))

def _merge(left, right):
    # Assumes both inputs are sorted
    i = j = 0
    result = []
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result

def quicksort(a):
    """
    Partitions around the first element as pivot and sorts both parts recursively. Returns a new list.

    Already sorted (or reverse sorted) input makes every partition empty on one side, so the recursion depth equals
    len(a). Lists of roughly 1000 such elements exceed Python's default recursion limit and raise RecursionError,
    use merge_sort for those.
    """
    if len(a) <= 1:
        return list(a)
    pivot, rest = a[0], a[1:]
    left = [x for x in rest if x <= pivot]
    right = [x for x in rest if x > pivot]
    return quicksort(left) + [pivot] + quicksort(right)

def counting_sort(a, s : int):
    """
    Sorts `a` given an upper bound `s` on its elements by counting the occurrences of each value in {0, ..., s}.
    """
    for x in a:
        if x < 0 or x > s:
            raise SortingInstanceError(f"{x} is not in 0..{s}")

    counts = [0] * (s + 1)
    for x in a:
        counts[x] += 1

    result = []
    for x,count in enumerate(counts):
        result.extend([x] * count)
    return result
