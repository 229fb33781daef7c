#!/usr/bin/env python3
#
#   Functions computed via power series expansion
#

# How many summands of a power series are computed, more summands trade speed for precision
NUM_ITERATIONS = 100

def exp(x : float, iterations : int = NUM_ITERATIONS) -> float:
    """
    e^x as the partial sum of x^k / k! for k < iterations
    """
    # numerator and denominator are updated incrementally, the k = 0 term is already accounted for
    x_pow_k = 1.0
    k_factorial = 1.0
    result = 1.0

    for k in range(1, iterations):
        x_pow_k *= x
        k_factorial *= k
        result += x_pow_k / k_factorial

    return result
