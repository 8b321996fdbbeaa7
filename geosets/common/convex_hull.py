# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Wrap Qhull (via scipy) to compute hull vertices and hull volumes of point clouds
# Coverage: QhullError is only raised for degenerate point clouds, which the set representations screen out.

import logging

import numpy as np
from scipy.spatial import ConvexHull, QhullError
from scipy.special import factorial

from geosets.common.errors import ConvexHullError, InsufficientPointsError

logger = logging.getLogger(__name__)


def convex_hull(points):
    """Compute the convex hull of a point cloud with Qhull.

    Args:
        points (array_like): Matrix (k times n) with one point per row

    Raises:
        InsufficientPointsError: k <= n, which is not enough points for a full-dimensional hull
        ConvexHullError: Qhull failed (typically, the points lie in a lower-dimensional affine subspace)

    Returns:
        scipy.spatial.ConvexHull: Qhull output. Its simplices are triangulated facets indexing into points.
    """
    points = np.atleast_2d(points).astype(float)
    n_points, dim = points.shape
    if n_points <= dim:
        raise InsufficientPointsError(f"Need at least {dim + 1:d} points in {dim:d} dimensions. Got {n_points:d}.")
    logger.debug("Computing the convex hull of %d points in %d dimensions", n_points, dim)
    try:
        return ConvexHull(points)
    except (QhullError, ValueError) as err:
        raise ConvexHullError(f"Qhull failed to compute the convex hull: {str(err)}", source=err) from err


def convex_hull_vertices(points):
    """Subset of the points that are vertices of their convex hull.

    Args:
        points (array_like): Matrix (k times n) with one point per row

    Raises:
        InsufficientPointsError: k <= n
        ConvexHullError: Qhull failed

    Returns:
        numpy.ndarray: Hull vertices, one per row, in the order reported by Qhull
    """
    points = np.atleast_2d(points).astype(float)
    hull = convex_hull(points)
    return points[hull.vertices, :]


def simplex_volume(vertices):
    r"""Volume of an n-dimensional simplex given its n + 1 vertices.

    Args:
        vertices (array_like): Matrix (n + 1 times n) of simplex vertices

    Returns:
        float: :math:`|\det(E)| / n!` where the rows of E are the edges from the first vertex
    """
    vertices = np.atleast_2d(vertices).astype(float)
    n_edges = vertices.shape[0] - 1
    if n_edges <= 0:
        return 0.0
    edges = vertices[1:, :] - vertices[0, :]
    return float(np.abs(np.linalg.det(edges)) / factorial(n_edges, exact=True))


def convex_hull_volume(points):
    """Volume of the convex hull of a point cloud by pyramid decomposition around the centroid.

    Args:
        points (array_like): Matrix (k times n) with one point per row

    Raises:
        InsufficientPointsError: k <= n
        ConvexHullError: Qhull failed

    Returns:
        float: Volume of the convex hull

    Notes:
        Qhull triangulates every facet into (n - 1)-simplices. Each triangulated facet forms an n-simplex (a pyramid)
        with the centroid of the points as apex, and the volumes of these pyramids add up to the hull volume.
    """
    points = np.atleast_2d(points).astype(float)
    hull = convex_hull(points)
    centroid = np.mean(points, axis=0)
    total_volume = 0.0
    for simplex in hull.simplices:
        total_volume += simplex_volume(np.vstack((centroid, points[simplex, :])))
    return total_volume
