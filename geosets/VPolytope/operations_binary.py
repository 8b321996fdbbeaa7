# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose:  Define the binary operations involving the VPolytope class

import cvxpy as cp
import numpy as np

from geosets.common import is_geoset, is_hpolytope
from geosets.common.errors import SetNotImplementedError
from geosets.common.linear_program import is_feasible
from geosets.VPolytope.operations_unary import minimal_vertices


def minkowski_sum_(self, other):
    r"""Replace the polytope with its Minkowski sum with another set.

    Args:
        other (GeoSet): Set to add. Its vertices are obtained with other.to_vertices().

    Raises:
        SetNotImplementedError: When other is not a set, or other is an unbounded HPolytope
        DimensionMismatchError: When other.dim differs from self.dim
        EmptySetError: When other is an empty HPolytope

    Notes:
        The Minkowski sum of two polytopes is the convex hull of all pairwise sums of their vertices. The pairwise
        sums are reduced to the vertices of their convex hull, so that the number of vertices does not grow
        multiplicatively over repeated sums. The result is exact, but the combinatorial cost is
        :math:`O(k_\mathcal{P} k_\mathcal{Q})`.
    """
    if not is_geoset(other):
        raise SetNotImplementedError(f"Minkowski sum of a VPolytope with {type(other).__name__:s} is not supported")
    self._check_operand_dim(other.dim)
    if is_hpolytope(other):
        other_V, n_rays = other._enumerate_vertices()
        if n_rays > 0:
            raise SetNotImplementedError("Minkowski sum of a VPolytope with an unbounded HPolytope is not supported")
    else:
        other_V = other.to_vertices()
    pairwise_sums = (self._V[:, np.newaxis, :] + other_V[np.newaxis, :, :]).reshape((-1, self.dim))
    self._V = minimal_vertices(pairwise_sums)


def matmul_(self, M):
    """Replace the polytope with its image under M, i.e., map every vertex v to M v.

    Args:
        M (array_like): Matrix (self.dim times self.dim)

    Raises:
        DimensionMismatchError: When M is not self.dim times self.dim
    """
    M = self._sanitize_linear_map(M)
    self._V = self._V @ M.T


def translate_(self, vector):
    """Add vector to every vertex.

    Raises:
        DimensionMismatchError: When vector does not have self.dim entries
    """
    vector = self._sanitize_operand_vector(vector)
    self._V = self._V + vector


def contains_point(self, point):
    r"""Check if a point is a convex combination of the vertices.

    Args:
        point (array_like): Point of length self.dim

    Raises:
        DimensionMismatchError: When point does not have self.dim entries
        InfeasibleOptimizationError: When the solver fails

    Returns:
        bool: True when the point lies in the polytope

    Notes:
        We check the feasibility of the linear constraints :math:`\lambda \geq 0`, :math:`V^\top \lambda = p`,
        :math:`1^\top \lambda = 1` in :math:`\lambda\in\mathbb{R}^{k}`.
    """
    point = self._sanitize_operand_vector(point, name="point")
    barycentric_coordinates = cp.Variable((self.n_vertices,))
    constraints = [
        barycentric_coordinates >= 0,
        self._V.T @ barycentric_coordinates == point,
        cp.sum(barycentric_coordinates) == 1,
    ]
    return is_feasible(constraints, cvxpy_args=self.cvxpy_args_lp, task_str="VPolytope containment")
