#!/usr/bin/env python3
#
#   Basic types shared by the rest of the library: integer helpers, configuration constants and the modulus
#   selecting between Z and Z/qZ
#

import numpy as np

def isiterable(x):
    return isinstance(x, (tuple, list, np.ndarray))

########################################################################################################################
#   Configuration
########################################################################################################################

# Polynomial coefficients are fixed-width signed integers, arithmetic wraps on overflow
COEFF_DTYPE = np.int32

# Entries of magnitude below this are treated as 0 when looking for pivots in real matrices
EPSILON = 1e-9

# Largest prime modulus whose residues fit the coefficient width
LARGEST_s32_PRIME = 2147483647

########################################################################################################################
#   Integer Arithmetic
########################################################################################################################

def gcd(a : int, b : int) -> int:
    """
    Greatest common divisor via the Euclidean algorithm, always non-negative
    """
    while b != 0:
        a %= b
        a,b = b,a
    return abs(a)

def lcm(a : int, b : int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)

########################################################################################################################
#   Moduli
########################################################################################################################

class ModulusMismatch(ArithmeticError):
    """
    Raised when an operation combines polynomials over different rings
    """

    def __init__(self, modulus_a, modulus_b):
        super().__init__(f"Cannot combine polynomials over {modulus_a} and {modulus_b}")
        self.modulus_a = modulus_a
        self.modulus_b = modulus_b

    def __eq__(self, other):
        if not isinstance(other, ModulusMismatch):
            return NotImplemented
        return (self.modulus_a, self.modulus_b) == (other.modulus_a, other.modulus_b)

    def __hash__(self):
        return hash((self.modulus_a, self.modulus_b))

class Modulus:
    """
    Selects the coefficient ring of a polynomial. Modulus() is the integers Z, Modulus(q) is the remainder class
    ring Z/qZ. q is not required to be prime.
    """

    __slots__ = ('q',)

    def __init__(self, q : int = None):
        if q is not None:
            if isinstance(q, bool) or not isinstance(q, (int, np.integer)):
                raise ValueError(f"Modulus must be an integer, got {q!r}")
            if q <= 0:
                raise ValueError(f"Modulus must be positive, got {q}")
            q = int(q)
        self.q = q

    def __repr__(self):
        return f"Modulus({self.q})"

    def __str__(self):
        if self.q is None:
            return "Z"
        return f"Z/{self.q}Z"

    def __eq__(self, other):
        if isinstance(other, Modulus):
            return self.q == other.q
        return NotImplemented

    def __hash__(self):
        return hash(self.q)

    def is_integers(self):
        return self.q is None

    def is_zero(self, x):
        """
        Whether x is the zero element of this ring, i.e. x == 0 over Z or x a multiple of q over Z/qZ
        """
        if self.q is None:
            return x == 0
        return int(x) % self.q == 0

    def reduce(self, x : int) -> int:
        """
        Truncating remainder of x by q, so the result keeps the sign of x. Integers are returned unchanged.
        """
        x = int(x)
        if self.q is None:
            return x
        r = abs(x) % self.q
        return r if x >= 0 else -r

ZZ = Modulus()
