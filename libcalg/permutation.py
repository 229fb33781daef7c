#!/usr/bin/env python3
#
#   Permutations of {1, ..., n}, i.e. elements of the symmetric group S_n
#

import itertools
from functools import reduce

from libcalg.basic_types import isiterable, lcm
from libcalg.vec_helper import all_unique_in_range

class PermutationError(ValueError):
    pass

class PermutationOutOfRange(PermutationError):
    """
    A value outside {1, ..., n} was used as an image or passed for evaluation
    """

class PermutationNotBijective(PermutationError):
    """
    Some value in {1, ..., n} is the image of more than one element
    """

class Permutation:
    def __init__(self, images):
        # one-line notation, images[i - 1] is the image of i
        self.images = tuple(int(e) for e in images)
        n = len(self.images)

        if not all_unique_in_range(self.images, n):
            if any(e < 1 or e > n for e in self.images):
                raise PermutationOutOfRange(f"Images of {self.images} must lie in 1..{n}")
            raise PermutationNotBijective(f"{self.images} maps two elements to the same image")

        # precalc sign
        self.sign = self.sgn()

    @staticmethod
    def from_cycles(n : int, cycles):
        """
        Builds a permutation of {1, ..., n} from disjoint cycles, either a single cycle (1, 2, 3) or a sequence of
        cycles ((1, 2), (3, 4)). Elements not mentioned are fixed.
        """
        if len(cycles) != 0 and not isiterable(cycles[0]): # single cycle
            cycles = (cycles,)

        images = list(range(1, n + 1))
        for cyc in cycles:
            for i,e in enumerate(cyc):
                if e < 1 or e > n:
                    raise PermutationOutOfRange(f"{e} is not in 1..{n}")
                images[e - 1] = cyc[(i + 1) % len(cyc)]
        return Permutation(images)

    @staticmethod
    def ident(n : int):
        return Permutation(range(1, n + 1))

    @property
    def n(self):
        return len(self.images)

    def __call__(self, i):
        if not isinstance(i, int):
            raise TypeError()
        if i < 1 or i > self.n:
            raise PermutationOutOfRange(f"{i} is not in 1..{self.n}")
        return self.images[i - 1]

    def __mul__(self, other):
        """
        Composition, (self * other)(i) = self(other(i))
        """
        if not isinstance(other, Permutation):
            return NotImplemented
        if self.n != other.n:
            raise ValueError(f"Cannot compose permutations of {self.n} and {other.n} elements")
        return Permutation(self(other(i)) for i in range(1, self.n + 1))

    def __invert__(self):
        inv = [0] * self.n
        for i,e in self:
            inv[e - 1] = i
        return Permutation(inv)

    def __eq__(self, other):
        if not isinstance(other, Permutation):
            return NotImplemented
        return self.images == other.images

    def __hash__(self):
        return hash(self.images)

    def __iter__(self):
        for i,e in enumerate(self.images, 1):
            yield i,e

    def cyc_for(self, n):
        """
        Get cycle for which element n is first
        """
        cyc = [n]
        k = self(n)
        while k != n:
            cyc.append(k)
            k = self(k)
        return cyc

    def cycles(self):
        """
        Get all cycles for this permutation, including fixed points. Every cycle starts with its smallest element
        and cycles are ordered by that element.
        """
        cycles = []
        seen = set()
        for k in range(1, self.n + 1):
            if k not in seen:
                cyc = self.cyc_for(k)
                seen.update(cyc)
                cycles.append(cyc)
        return cycles

    def is_even(self):
        """
        Determines if this permutation is even
        """
        acc = sum(len(cycle) - 1 for cycle in self.cycles())
        return acc % 2 == 0

    def sgn(self):
        return 1 if self.is_even() else -1

    def order(self):
        """
        Smallest k > 0 with self^k the identity
        """
        return reduce(lcm, (len(cycle) for cycle in self.cycles()), 1)

    def cyc_str(self):
        """
        Produces cycle notation for this permutation
        """
        nontrivial_cycles = [cyc for cyc in self.cycles() if len(cyc) > 1]
        if len(nontrivial_cycles) > 0:
            return "(" + ")(".join([",".join([f"{e}" for e in cyc]) for cyc in nontrivial_cycles]) + ")"
        return "(IDENT)"

    def __str__(self):
        return self.cyc_str()

    def __repr__(self):
        return f"Permutation({list(self.images)})"

def Sym(n):
    """
    Generate the Symmetric Group of order n
    """
    return tuple(Permutation(e) for e in itertools.permutations(range(1, n + 1)))
