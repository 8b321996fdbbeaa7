# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Define the Interval class

import numpy as np

from geosets.common import GeoSet, is_interval, read_only_view, sanitize_vector
from geosets.common.constants import DEGENERACY_TOLERANCE
from geosets.common.errors import DimensionMismatchError, SetNotImplementedError
from geosets.common.numerics import vector_leq


class Interval(GeoSet):
    r"""Interval class for axis-aligned boxes :math:`\{x\ |\ lb \leq x \leq ub\}`.

    Every operation on an interval is in closed form, and no solver is called.

    Args:
        lb (array_like): Lower bounds. 1D array of length dim.
        ub (array_like): Upper bounds. 1D array of length dim.

    Raises:
        ValueError: When lb or ub is not convertible into a 1D float array free from NaNs and infs
        DimensionMismatchError: When lb and ub have different lengths
        ValueError: When some lower bound exceeds the corresponding upper bound
    """

    def __init__(self, lb, ub):
        """Constructor for Interval class"""
        super().__init__()
        lb = sanitize_vector(lb, name="lb")
        ub = sanitize_vector(ub, name="ub")
        if lb.size != ub.size:
            raise DimensionMismatchError(
                expected=lb.size,
                got=ub.size,
                message=f"Expected lb and ub to have the same length. Got lb: {lb.size:d} and ub: {ub.size:d}.",
            )
        elif np.any(lb > ub):
            raise ValueError(
                f"Expected lb <= ub elementwise. Got lb: {np.array2string(lb):s} and ub: {np.array2string(ub):s}"
            )
        self._lb, self._ub = lb, ub

    @classmethod
    def from_unit_box(cls, dim):
        """Interval [-1, 1]^dim"""
        return cls(-np.ones((dim,)), np.ones((dim,)))

    @classmethod
    def from_random(cls, dim, seed=None):
        """Random interval with lower bounds drawn uniformly from [-1, 0] and upper bounds drawn uniformly from [0, 1].

        Args:
            dim (int): Dimension of the interval
            seed (int | numpy.random.Generator, optional): Seed passed to numpy.random.default_rng. Defaults to None.

        Returns:
            Interval: Random interval that contains the origin
        """
        rng = np.random.default_rng(seed)
        return cls(rng.uniform(-1, 0, size=(dim,)), rng.uniform(0, 1, size=(dim,)))

    ############
    # Properties
    ############
    @property
    def dim(self):
        """Dimension of the interval"""
        return self._lb.size

    @property
    def lb(self):
        """Lower bounds of the interval (read-only)"""
        return read_only_view(self._lb)

    @property
    def ub(self):
        """Upper bounds of the interval (read-only)"""
        return read_only_view(self._ub)

    def copy(self):
        """Create a copy of the interval"""
        copy_of_self = self.__class__(self._lb, self._ub)
        copy_of_self.cvxpy_args_lp = dict(self.cvxpy_args_lp)
        return copy_of_self

    ##################
    # Unary operations
    ##################
    def empty(self):
        """Check if the interval is empty. Always False by construction."""
        return False

    def degenerate(self):
        """Check if some side of the interval is shorter than DEGENERACY_TOLERANCE."""
        return bool(np.any(self._ub - self._lb < DEGENERACY_TOLERANCE))

    def to_vertices(self):
        """Corners of the interval.

        Returns:
            numpy.ndarray: Matrix (2^dim times dim). Row i takes the upper bound in coordinate j when bit j of i is set,
            and the lower bound otherwise.

        Notes:
            The number of corners grows exponentially with dim, and repeated corners of a degenerate interval are
            retained.
        """
        bits = (np.arange(2**self.dim)[:, np.newaxis] >> np.arange(self.dim)) & 1
        return np.where(bits == 1, self._ub, self._lb)

    def center(self):
        """Midpoint (lb + ub) / 2 of the interval"""
        return (self._lb + self._ub) / 2

    def support_function(self, direction):
        """Evaluate the support function and a support vector of the interval along a direction.

        Args:
            direction (array_like): Direction of length self.dim

        Raises:
            DimensionMismatchError: When direction does not have self.dim entries

        Returns:
            tuple: A tuple with two items:
                #. support_vector (numpy.ndarray): Corner picking ub where the direction is positive, and lb otherwise
                #. support_function (float): direction @ support_vector

        Notes:
            A zero direction component picks the lower bound, so that the support vector is unique.
        """
        direction = self._sanitize_operand_vector(direction, name="direction")
        support_vector = np.where(direction > 0, self._ub, self._lb)
        return support_vector, float(direction @ support_vector)

    def volume(self):
        """Product of the side lengths. Zero for degenerate intervals."""
        if self.degenerate():
            return 0.0
        return float(np.prod(self._ub - self._lb))

    def contains_point(self, point):
        """Check lb <= point <= ub elementwise.

        Raises:
            DimensionMismatchError: When point does not have self.dim entries
        """
        point = self._sanitize_operand_vector(point, name="point")
        return vector_leq(self._lb, point) and vector_leq(point, self._ub)

    ###################
    # Binary operations
    ###################
    def minkowski_sum_(self, other):
        """Add the bounds of another interval to the bounds of this interval.

        Args:
            other (Interval): Interval to add

        Raises:
            SetNotImplementedError: When other is not an Interval
            DimensionMismatchError: When other.dim differs from self.dim
        """
        if not is_interval(other):
            raise SetNotImplementedError(f"Minkowski sum of an Interval with {type(other).__name__:s} is not supported")
        self._check_operand_dim(other.dim)
        self._lb, self._ub = self._lb + other.lb, self._ub + other.ub

    def matmul_(self, M):
        r"""Replace the interval with the tightest interval containing its image under M.

        Args:
            M (array_like): Matrix (self.dim times self.dim)

        Raises:
            DimensionMismatchError: When M is not self.dim times self.dim

        Notes:
            With :math:`M^+=\max(M, 0)` and :math:`M^-=\min(M, 0)` elementwise, interval arithmetic gives
            :math:`lb'=M^+ lb + M^- ub` and :math:`ub'=M^+ ub + M^- lb`. The result is exact for diagonal M and an
            outer approximation otherwise.
        """
        M = self._sanitize_linear_map(M)
        M_plus, M_minus = np.maximum(M, 0), np.minimum(M, 0)
        new_lb = M_plus @ self._lb + M_minus @ self._ub
        new_ub = M_plus @ self._ub + M_minus @ self._lb
        self._lb, self._ub = new_lb, new_ub

    def translate_(self, vector):
        """Shift both bounds by vector.

        Raises:
            DimensionMismatchError: When vector does not have self.dim entries
        """
        vector = self._sanitize_operand_vector(vector)
        self._lb, self._ub = self._lb + vector, self._ub + vector

    ##########################
    # Interval representation
    ##########################
    def __str__(self):
        return f"Interval in R^{self.dim:d}"

    def __repr__(self):
        return f"{str(self):s}\n\tlb: {np.array2string(self._lb):s}\n\tub: {np.array2string(self._ub):s}"
