#!/usr/bin/env python3
#
#   Real matrices stored as rows of double precision floats, with elementary row operations and row reduction
#

import logging

import numpy as np

from libcalg.basic_types import EPSILON
from libcalg.vec_helper import is_zero, scale

_logger = logging.getLogger(__name__)

class MatrixError(ValueError):
    pass

class NonUniformRowLength(MatrixError):
    pass

class Matrix:

    def __init__(self, rows):
        rows = [list(row) for row in rows]
        if len(rows) == 0:
            raise NonUniformRowLength("A matrix needs at least one row")
        if any(len(row) != len(rows[0]) for row in rows):
            raise NonUniformRowLength("All rows of a matrix must have the same length")

        self.entries = np.array(rows, dtype=np.float64).reshape(len(rows), len(rows[0]))
        self.rows, self.cols = self.entries.shape

    @staticmethod
    def ident(n):
        """
        n x n identity matrix
        """
        return Matrix(np.eye(n))

    def copy(self):
        return Matrix(self.entries)

    def __str__(self):
        return str(self.entries.tolist())

    def __repr__(self):
        return f"Matrix({self.entries.tolist()})"

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return False
        return self.entries.shape == other.entries.shape and np.array_equal(self.entries, other.entries)

    def __setitem__(self, i, v):
        r,c = i
        if r >= self.rows: raise IndexError("Row too large")
        if c >= self.cols: raise IndexError("Column too large")
        self.entries[r,c] = v

    def __getitem__(self, i):
        r,c = i
        if r >= self.rows: raise IndexError("Row too large")
        if c >= self.cols: raise IndexError("Column too large")
        return float(self.entries[r,c])

    def row(self, i):
        # Get row i as a vector
        return self.entries[i].copy()

    def col(self, j):
        # Get column j as a vector
        return self.entries[:,j].copy()

    ####################################################################################################################
    #   Row operations
    ####################################################################################################################

    def scale_row(self, i, c):
        # rank-preserving iff c != 0
        self.entries[i] = scale(self.entries[i], c)

    def row_swap(self, i, j):
        self.entries[[i, j]] = self.entries[[j, i]]

    def add_scalar_multiple(self, i, a, j):
        # row i <- row i + a * row j
        self.entries[i] = self.entries[i] + scale(self.entries[j], a)

    ####################################################################################################################
    #   Row reduction
    ####################################################################################################################

    def is_zero_row(self, i):
        return is_zero(self.entries[i])

    def is_zero_column(self, j):
        return is_zero(self.entries[:,j])

    def next_row_with_nonzero_at(self, j, i=0):
        """
        Index of the first row k >= i whose entry in column j is not 0, or None
        """
        for k in range(i, self.rows):
            if abs(self.entries[k,j]) > EPSILON:
                return k
        return None

    def next_nonzero_row(self, i=0):
        """
        Index of the first row k >= i that is not a zero row, or None
        """
        for k in range(i, self.rows):
            if not self.is_zero_row(k):
                return k
        return None

    def reduced_row_echelon_form(self):
        """
        Returns the reduced row echelon form: each non-zero row starts with a pivot 1, pivots move strictly to the
        right going down, all other entries in a pivot column are 0 and zero rows come last.
        """
        M = self.copy()

        lead = 0
        for r in range(M.rows):
            # find the next column with a non-zero entry at or below row r
            while lead < M.cols:
                i = M.next_row_with_nonzero_at(lead, r)
                if i is not None:
                    break
                lead += 1
            else:
                break

            _logger.debug("Pivot for row %d in column %d (taken from row %d)", r, lead, i)

            if i != r:
                M.row_swap(i, r)

            M.scale_row(r, 1.0 / M[r, lead])

            for j in range(M.rows):
                if j != r:
                    M.add_scalar_multiple(j, -M[j, lead], r)

            lead += 1

        # flush rounding residue
        M.entries[np.abs(M.entries) <= EPSILON] = 0.0
        return M
