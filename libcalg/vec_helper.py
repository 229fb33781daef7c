#!/usr/bin/env python3
#
#   Helpers operating on numeric vectors, shared by polynomials, permutations and matrices.
#   Anything numpy.asarray accepts can be passed, integer and floating point vectors go through the same code.
#

import numpy as np

from libcalg.basic_types import ZZ, Modulus

def scale(vec, factor):
    """
    Multiplies every element by factor, e.g. [3, 2, 1] scaled by 2 is [6, 4, 2]
    """
    return np.asarray(vec) * factor

def shift(vec, amount : int):
    """
    Prepends `amount` zeros, e.g. [1, 1, 426] shifted by 2 is [0, 0, 1, 1, 426].
    For coefficient vectors this is multiplication by X^amount.
    """
    if amount < 0:
        raise ValueError(f"Cannot shift by a negative amount {amount}")
    vec = np.asarray(vec)
    return np.concatenate((np.zeros(amount, dtype=vec.dtype), vec))

def trim_trailing(vec, modulus : Modulus = ZZ):
    """
    Removes trailing zeros, or trailing multiples of q for modulus Z/qZ,
    e.g. [2, 3, 0, 0] over Z becomes [2, 3] and [2, 4, 5, 5] over Z/5Z becomes [2, 4].
    Returns a view of the input.
    """
    vec = np.asarray(vec)
    n = len(vec)
    # an empty result models the zero polynomial
    while n > 0 and modulus.is_zero(vec[n - 1]):
        n -= 1
    return vec[:n]

def is_zero(vec):
    return not np.asarray(vec).any()

def all_unique_in_range(vec, n : int):
    """
    True iff every element lies in {1, ..., n} and no element occurs twice
    """
    seen = set()
    for x in vec:
        if x < 1 or x > n or x in seen:
            return False
        seen.add(x)
    return True
