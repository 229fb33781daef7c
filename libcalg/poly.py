#!/usr/bin/env python3
#
#   Univariate polynomials with integer coefficients or coefficients from a remainder class ring Z/qZ
#

import logging
from functools import reduce

import numpy as np

from libcalg.basic_types import COEFF_DTYPE, ZZ, Modulus, ModulusMismatch
from libcalg.vec_helper import scale, shift, trim_trailing

_logger = logging.getLogger(__name__)

# coefficient arithmetic is modulo 2^bits of the coefficient dtype
_WRAP = 1 << np.iinfo(COEFF_DTYPE).bits

########################################################################################################################
#   Polynomial
########################################################################################################################

class Polynomial:
    """
    Models a_0 + a_1 X + ... + a_n X^n where coeffs[i] is the coefficient of X^i.

    The coefficient vector never ends in a zero (or in a multiple of q over Z/qZ), trailing terms are cut upon
    instantiation, so 1 + X + 0X^2 + 4X^3 + 0X^4 is stored as [1, 1, 0, 4]. The empty vector is the zero polynomial.
    Instances are immutable, all arithmetic returns new polynomials.
    """

    def __init__(self, coeffs=(), modulus : Modulus = ZZ):
        if not isinstance(modulus, Modulus):
            raise TypeError(f"Expected a Modulus, got {type(modulus)}")
        if not isinstance(coeffs, np.ndarray):
            coeffs = list(coeffs)
        # Copy, values outside the coefficient width wrap around
        coeffs = np.array(coeffs, dtype=np.int64).astype(COEFF_DTYPE)
        if coeffs.ndim != 1:
            raise ValueError("Coefficients must be given as a flat sequence")

        self.coeffs = trim_trailing(coeffs, modulus)
        self.coeffs.flags.writeable = False
        self.modulus = modulus

    def __len__(self):
        return len(self.coeffs)

    def __getitem__(self, exponent):
        return self.coefficient(exponent)

    def coefficient(self, exponent : int) -> int:
        """
        Coefficient of X^exponent, 0 beyond the degree. Over Z/qZ the stored value is reduced by truncating
        remainder, so a negative stored coefficient stays negative.
        """
        if exponent < 0:
            raise ValueError(f"Negative exponent {exponent}")
        if exponent >= len(self.coeffs):
            return 0
        return self.modulus.reduce(self.coeffs[exponent])

    def degree(self) -> int:
        """
        Degree of the polynomial, -1 for the zero polynomial
        """
        return len(self.coeffs) - 1

    def is_zero(self):
        return len(self.coeffs) == 0

    def scale(self, factor : int):
        # only the low bits of each product survive the coefficient width, so the factor may be reduced first
        factor = int(factor) % _WRAP
        return Polynomial(scale(self.coeffs.astype(np.int64), factor), self.modulus)

    def additive_inverse(self):
        return self.scale(-1)

    def residues(self):
        """
        Canonical representatives of the coefficients, in [0, q) over Z/qZ
        """
        if self.modulus.is_integers():
            return self.coeffs
        return self.coeffs.astype(np.int64) % self.modulus.q

    def to_display_string(self):
        # Zero coefficients below the degree are kept, i.e. 1 + X^2 is "1X^0 + 0X^1 + 1X^2"
        if self.is_zero():
            return "0"
        return " + ".join(f"{self.coefficient(i)}X^{i}" for i in range(len(self.coeffs)))

    def __str__(self):
        return self.to_display_string()

    def __repr__(self):
        return f"Polynomial({[int(c) for c in self.coeffs]}, {self.modulus!r})"

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        # Over Z/qZ, coefficients are compared as ring elements
        return self.modulus == other.modulus and np.array_equal(self.residues(), other.residues())

    def __hash__(self):
        return hash((self.modulus, self.residues().tobytes()))

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return subtract(self, other)

    def __neg__(self):
        return self.additive_inverse()

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return multiply(self, other)
        if isinstance(other, (int, np.integer)) and not isinstance(other, bool):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        # Scalars commute
        return self.__mul__(other)

    def __pow__(self, exponent):
        return power(self, exponent)

def zero_polynomial(modulus : Modulus = ZZ):
    return Polynomial([], modulus)

def one_polynomial(modulus : Modulus = ZZ):
    return Polynomial([1], modulus)

########################################################################################################################
#   Arithmetic
########################################################################################################################

def _check_moduli(p : Polynomial, q : Polynomial):
    if p.modulus != q.modulus:
        _logger.debug("Refusing to combine polynomials over %s and %s", p.modulus, q.modulus)
        raise ModulusMismatch(p.modulus, q.modulus)

def add(p : Polynomial, q : Polynomial) -> Polynomial:
    """
    Sum of two polynomials over the same ring. The degree may drop, e.g. (3X^2 + X) + (2X^2 + 2X) = 3X over Z/5Z.
    """
    _check_moduli(p, q)
    n = max(len(p), len(q))
    return Polynomial([p.coefficient(i) + q.coefficient(i) for i in range(n)], p.modulus)

def subtract(p : Polynomial, q : Polynomial) -> Polynomial:
    return add(p, q.additive_inverse())

def sum_of(polys) -> Polynomial:
    """
    Sum of all polynomials in the list. By convention the empty sum is the zero polynomial over Z.
    """
    polys = list(polys)
    if len(polys) == 0:
        return zero_polynomial()
    return reduce(add, polys, zero_polynomial(polys[0].modulus))

def multiply(p : Polynomial, q : Polynomial) -> Polynomial:
    """
    Product via the distributive law, p * q = sum_i p_i X^i q
    """
    _check_moduli(p, q)
    # X^i q is q's coefficient vector shifted by i, the zero polynomial has no terms
    partials = [Polynomial(scale(shift(q.coeffs, i), p.coefficient(i)), p.modulus) for i in range(p.degree() + 1)]
    return reduce(add, partials, zero_polynomial(p.modulus))

def product_of(polys) -> Polynomial:
    """
    Product of all polynomials in the list. By convention the empty product is the one polynomial over Z.
    """
    polys = list(polys)
    if len(polys) == 0:
        return one_polynomial()
    return reduce(multiply, polys, one_polynomial(polys[0].modulus))

def power(p : Polynomial, exponent : int) -> Polynomial:
    if isinstance(exponent, bool) or not isinstance(exponent, (int, np.integer)):
        raise ValueError(f"Exponent must be an integer, got {exponent!r}")
    if exponent < 0:
        raise ValueError(f"Negative exponent {exponent}")
    if exponent == 0:
        # p^0 lives in p's ring, the empty product would be over Z
        return one_polynomial(p.modulus)
    return product_of([p] * exponent)
