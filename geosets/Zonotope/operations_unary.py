# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Define the methods involving just the Zonotope class

import itertools

import numpy as np

from geosets.common.numerics import matrix_rank, sign_vector
from geosets.VPolytope import VPolytope


def degenerate(self):
    """Check if the zonotope is not full-dimensional, i.e., it has no generators or the generators have rank below
    dim."""
    return self.n_generators == 0 or matrix_rank(self._G) < self.dim


def to_vertices(self):
    r"""Vertices of the zonotope.

    Returns:
        numpy.ndarray: Vertices of the zonotope arranged row-wise

    Notes:
        The candidate points :math:`c + \sum_i \pm g_i` are built by doubling the candidate set for every generator
        :math:`g_i`, and then reduced to the vertices of their convex hull (see :meth:`VPolytope.compact_`). There are
        :math:`2^m` candidates for m generators, and no cap is imposed on m.
    """
    candidates = self._c[np.newaxis, :]
    for generator in self._G:
        candidates = np.vstack((candidates + generator, candidates - generator))
    return VPolytope(candidates).to_vertices()


def support_function(self, direction):
    r"""Evaluate the support function and a support vector of the zonotope along a direction.

    Args:
        direction (array_like): Direction of length self.dim

    Raises:
        DimensionMismatchError: When direction does not have self.dim entries

    Returns:
        tuple: A tuple with two items:
            #. support_vector (numpy.ndarray): :math:`c + \sum_i \text{sign}(g_i^\top \eta) g_i`
            #. support_function (float): :math:`c^\top \eta + \sum_i |g_i^\top \eta|`

    Notes:
        Generators orthogonal to the direction do not contribute to the support vector.
    """
    direction = self._sanitize_operand_vector(direction, name="direction")
    projections = self._G @ direction
    support_vector = self._c + sign_vector(projections) @ self._G
    return support_vector, float(self._c @ direction + np.sum(np.abs(projections)))


def volume(self):
    r"""Compute the volume of the zonotope.

    Returns:
        float: :math:`2^n \sum_S |\det(G_S)|`, where the sum is over every subset S of n generators. Zero for degenerate
        zonotopes.

    Notes:
        The number of subsets is the binomial coefficient m choose n, for m generators in n dimensions.
    """
    if self.degenerate():
        return 0.0
    total_volume = 0.0
    for subset in itertools.combinations(range(self.n_generators), self.dim):
        total_volume += np.abs(np.linalg.det(self._G[list(subset), :]))
    return float(2**self.dim * total_volume)
