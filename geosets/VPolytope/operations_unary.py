# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose:  Define the methods involving just the VPolytope class

import numpy as np

from geosets.common.convex_hull import convex_hull_vertices, convex_hull_volume
from geosets.common.numerics import index_of_maximum, matrix_rank
from geosets.common.vertex_enumeration import remove_redundant_vertices


def is_degenerate_point_cloud(V):
    """Check if the rank of the mean-centered point cloud is below the number of columns of V."""
    return matrix_rank(V - np.mean(V, axis=0)) < V.shape[1]


def minimal_vertices(V):
    """Vertices of the convex hull of the rows of V.

    Args:
        V (numpy.ndarray): Matrix (k times n) with one point per row

    Returns:
        numpy.ndarray: Vertices of the convex hull, one per row

    Notes:
        A single point is its own hull. For n = 1, the hull is described by the smallest and the largest point. Qhull
        requires a full-dimensional point cloud (which covers k <= n), so the redundancy removal of cdd is used for
        degenerate point clouds instead.
    """
    n_vertices, dim = V.shape
    if n_vertices == 1:
        return V.copy()
    elif dim == 1:
        return np.unique(np.array([[np.min(V)], [np.max(V)]]), axis=0)
    elif is_degenerate_point_cloud(V):
        return remove_redundant_vertices(V)
    else:
        return convex_hull_vertices(V)


def compact_(self):
    """Remove the stored vertices that are not vertices of the convex hull.

    Raises:
        ConvexHullError: Qhull failed
        InfeasibleOptimizationError: cdd failed to remove redundant vertices of a degenerate polytope
    """
    self._V = minimal_vertices(self._V)


def compact(self):
    """Copy of the polytope with the stored vertices reduced to the vertices of the convex hull (see
    :meth:`compact_`)."""
    copy_of_self = self.copy()
    copy_of_self.compact_()
    return copy_of_self


def to_vertices(self):
    """Vertices of the polytope after removing redundant points (see :meth:`compact_`). The stored vertices are left
    as they are."""
    return minimal_vertices(self._V)


def center(self):
    """Centroid (mean of the stored vertices) of the polytope.

    Notes:
        The centroid is cheap to compute and lies in the polytope, but it is only an approximation of the Chebyshev
        center. It depends on the stored vertices, and redundant points shift it.
    """
    return np.mean(self._V, axis=0)


def degenerate(self):
    """Check if the polytope is not full-dimensional, i.e., if the mean-centered vertices have a rank below dim."""
    return is_degenerate_point_cloud(self._V)


def support_function(self, direction):
    """Evaluate the support function and a support vector of the polytope along a direction.

    Args:
        direction (array_like): Direction of length self.dim

    Raises:
        DimensionMismatchError: When direction does not have self.dim entries

    Returns:
        tuple: A tuple with two items:
            #. support_vector (numpy.ndarray): Stored vertex maximizing direction @ v. The first vertex wins a tie.
            #. support_function (float): direction @ support_vector

    Notes:
        The maximum of a linear function over a polytope is attained at a vertex, so a search over the stored vertices
        is exact.
    """
    direction = self._sanitize_operand_vector(direction, name="direction")
    evaluations = self._V @ direction
    index = index_of_maximum(evaluations)
    return self._V[index, :].copy(), float(evaluations[index])


def volume(self):
    r"""Compute the volume of the polytope.

    Returns:
        float: Volume of the polytope. Zero for degenerate polytopes.

    Notes:
        Qhull triangulates the facets of the convex hull and every facet forms a pyramid with the centroid of the
        vertices. Each pyramid contributes :math:`|\det(E)| / n!` where the rows of E are its edges. In one dimension,
        the volume is the length max(V) - min(V).
    """
    if self.degenerate():
        return 0.0
    elif self.dim == 1:
        return float(np.max(self._V) - np.min(self._V))
    return convex_hull_volume(self._V)
