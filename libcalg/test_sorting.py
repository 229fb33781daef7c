#!/usr/bin/env python3

import random
import unittest

from libcalg.sorting import SortingInstanceError, counting_sort, insertion_sort, merge_sort, quicksort

CASES = [
    [],
    [426],
    [2, 1],
    [5, 3, 8, 1, 9, 2],
    [4, 4, 1, 4, 0, 0],
    [0, 1, 2, 3, 4],
    [9, 8, 7, 6, 5, 4, 3, 2, 1],
]

class TestSorting(unittest.TestCase):

    def test_insertion_sort(self):
        for case in CASES:
            a = list(case)
            self.assertIsNone(insertion_sort(a))
            self.assertEqual(a, sorted(case))

    def test_merge_sort(self):
        for case in CASES:
            a = list(case)
            self.assertEqual(merge_sort(a), sorted(case))
            self.assertEqual(a, case)

    def test_quicksort(self):
        for case in CASES:
            a = list(case)
            self.assertEqual(quicksort(a), sorted(case))
            self.assertEqual(a, case)

    def test_quicksort_presorted(self):
        # recursion depth is linear here, keep well below the interpreter's limit
        a = list(range(500))
        self.assertEqual(quicksort(a), a)
        self.assertEqual(quicksort(a[::-1]), a)

    def test_counting_sort(self):
        for case in CASES:
            self.assertEqual(counting_sort(case, 426), sorted(case))
        self.assertEqual(counting_sort([3, 0, 3, 1], 3), [0, 1, 3, 3])

        with self.assertRaises(SortingInstanceError):
            counting_sort([1, 2, 5], 4)
        with self.assertRaises(SortingInstanceError):
            counting_sort([-1], 4)

    def test_random(self):
        random.seed(1402)
        for _ in range(100):
            a = [random.randint(0, 100) for _ in range(random.randint(0, 40))]
            expected = sorted(a)
            self.assertEqual(merge_sort(a), expected)
            self.assertEqual(quicksort(a), expected)
            self.assertEqual(counting_sort(a, 100), expected)
            insertion_sort(a)
            self.assertEqual(a, expected)
