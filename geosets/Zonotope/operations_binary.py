# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Define the methods involving another set or a point used with Zonotope class

import cvxpy as cp
import numpy as np

from geosets.common import is_interval, is_zonotope
from geosets.common.constants import GEOSETS_ZERO
from geosets.common.errors import InfeasibleOptimizationError, SetNotImplementedError
from geosets.common.linear_program import INFEASIBLE_STATUSES, solve_linear_program
from geosets.common.numerics import vector_isclose


def minkowski_sum_(self, other):
    """Replace the zonotope with its Minkowski sum with another zonotope or an interval.

    Args:
        other (Zonotope | Interval): Set to add. An interval is first converted with :meth:`from_interval`.

    Raises:
        SetNotImplementedError: When other is neither a Zonotope nor an Interval
        DimensionMismatchError: When other.dim differs from self.dim

    Notes:
        The generators are stacked and the centers are added. The result is exact.
    """
    if is_interval(other):
        other = self.from_interval(other)
    elif not is_zonotope(other):
        raise SetNotImplementedError(f"Minkowski sum of a Zonotope with {type(other).__name__:s} is not supported")
    self._check_operand_dim(other.dim)
    self._G, self._c = np.vstack((self._G, other.G)), self._c + other.c


def matmul_(self, M):
    """Replace the zonotope with its image under M, i.e., c <- M c and every generator g <- M g.

    Args:
        M (array_like): Matrix (self.dim times self.dim)

    Raises:
        DimensionMismatchError: When M is not self.dim times self.dim
    """
    M = self._sanitize_linear_map(M)
    self._G, self._c = self._G @ M.T, M @ self._c


def translate_(self, vector):
    """Shift the center by vector.

    Raises:
        DimensionMismatchError: When vector does not have self.dim entries
    """
    vector = self._sanitize_operand_vector(vector)
    self._c = self._c + vector


def zonotope_norm(self, point):
    r"""Compute the zonotope norm of a point, i.e., the smallest scaling of the zonotope about its center that contains
    the point.

    Args:
        point (array_like): Point of length self.dim

    Raises:
        DimensionMismatchError: When point does not have self.dim entries
        InfeasibleOptimizationError: When the solver fails

    Returns:
        float: Zonotope norm of point. np.inf when the point does not lie in c + span(G).

    Notes:
        We solve the LP

        .. math ::
            \text{minimize}     &\quad \lambda \\
            \text{subject to}   &\quad G^\top \alpha = p - c,\\
                                &\quad -\lambda \leq \alpha_i \leq \lambda,

        with decision variables :math:`\alpha\in\mathbb{R}^m` and :math:`\lambda\geq 0`. Without generators, the norm
        is zero at the center and infinite elsewhere.
    """
    point = self._sanitize_operand_vector(point, name="point")
    if self.n_generators == 0:
        return 0.0 if vector_isclose(point, self._c, GEOSETS_ZERO) else np.inf
    alpha = cp.Variable((self.n_generators,))
    scaling = cp.Variable()
    constraints = [scaling >= 0, self._G.T @ alpha == point - self._c, alpha <= scaling, -scaling <= alpha]
    try:
        return solve_linear_program(
            scaling, scaling, constraints, cvxpy_args=self.cvxpy_args_lp, task_str="Zonotope norm"
        )[1]
    except InfeasibleOptimizationError as err:
        if err.status in INFEASIBLE_STATUSES:
            return np.inf
        raise


def contains_point(self, point):
    """Check if the zonotope norm of a point is at most 1 (up to GEOSETS_ZERO).

    Raises:
        DimensionMismatchError: When point does not have self.dim entries
        InfeasibleOptimizationError: When the solver fails
    """
    return self.zonotope_norm(point) <= 1 + GEOSETS_ZERO
