# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose:  Wrap cdd (pycddlib) to enumerate vertices of a halfspace system and to remove redundant vertices

import logging

import cdd  # pycddlib -- for vertex enumeration from H-representation
import numpy as np

from geosets.common.errors import DataConversionError, DimensionMismatchError, InfeasibleOptimizationError

logger = logging.getLogger(__name__)


def get_cdd_polyhedron_from_Ab(A, b):
    r"""Get CDD polyhedron in inequality form from given (A, b)

    Args:
        A (numpy.ndarray): Inequality coefficient matrix A
        b (numpy.ndarray): Inequality coefficient vector b

    Raises:
        InfeasibleOptimizationError: cdd failed to run the double description method

    Returns:
        cdd.Polyhedron: CDD Polyhedron

    Notes:
        cdd uses the halfspace representation :math:`[b, -A]` where :math:`b - Ax \geq 0 \Leftrightarrow Ax \leq b`.
    """
    b_mA = np.hstack((np.array([b]).T, -A))
    try:
        H_cdd = cdd.matrix_from_array(b_mA.tolist(), rep_type=cdd.RepType.INEQUALITY)
        return cdd.polyhedron_from_matrix(H_cdd)
    except (RuntimeError, ValueError) as err:
        raise InfeasibleOptimizationError(
            f"cdd failed to enumerate the vertices of the halfspace system: {str(err)}", source=err
        ) from err


def compute_polytope_vertices(A, b):
    r"""Enumerate the vertices of :math:`\{x\ |\ Ax \leq b\}` with the double description method.

    Args:
        A (array_like): Inequality coefficient matrix (m times n)
        b (array_like): Inequality constants (m,)

    Raises:
        DimensionMismatchError: Number of rows of A differs from number of entries of b
        InfeasibleOptimizationError: cdd failed to run the double description method
        DataConversionError: Generators returned by cdd could not be reshaped into a vertex matrix

    Returns:
        tuple: A tuple with two items:
            #. V (numpy.ndarray): Vertices (k times n), one per row. np.empty((0, n)) when there are no vertices.
            #. n_rays (int): Number of ray and line generators that were discarded. A positive value indicates that the
               polyhedron is unbounded.

    Notes:
        For a polyhedron described as :math:`\text{conv}(v_1, ..., v_k) + \text{nonneg}(r_1, ..., r_s)`, the generator
        matrix in cdd is [t V] where t is 1 for vertex rows and 0 for ray rows. Rows in the linearity set are lines.
    """
    A = np.atleast_2d(A).astype(float)
    b = np.atleast_1d(np.squeeze(b)).astype(float)
    if A.shape[0] != b.shape[0]:
        raise DimensionMismatchError(
            expected=A.shape[0],
            got=b.shape[0],
            message=f"A and b have different number of rows! A: {A.shape[0]:d} and b: {b.shape[0]:d}.",
        )
    dim = A.shape[1]
    logger.debug("Enumerating vertices of %d halfspaces in %d dimensions", A.shape[0], dim)
    cdd_polyhedron = get_cdd_polyhedron_from_Ab(A, b)
    tV_cdd_matrix = cdd.copy_generators(cdd_polyhedron)
    try:
        tV = np.array(tV_cdd_matrix.array, dtype=float).reshape((-1, dim + 1))
    except ValueError as err:
        raise DataConversionError(
            f"Failed to convert the generators returned by cdd into a ({dim + 1:d})-column matrix", source=err
        ) from err
    is_line = np.zeros((tV.shape[0],), dtype=bool)
    is_line[list(tV_cdd_matrix.lin_set)] = True
    is_vertex = np.logical_and(np.abs(tV[:, 0] - 1) <= 1e-9, np.logical_not(is_line))
    n_rays = int(tV.shape[0] - np.count_nonzero(is_vertex))
    logger.debug("cdd returned %d vertices and %d rays/lines", np.count_nonzero(is_vertex), n_rays)
    return tV[is_vertex, 1:], n_rays


def remove_redundant_vertices(V):
    """Remove points that are convex combinations of the others using cdd.

    Args:
        V (array_like): Matrix (k times n) with one point per row

    Raises:
        InfeasibleOptimizationError: cdd failed to canonicalize the generator matrix
        DataConversionError: Output could not be reshaped into a vertex matrix

    Returns:
        numpy.ndarray: Vertices of the convex hull of V

    Notes:
        Unlike Qhull, cdd handles point clouds that are not full-dimensional.
    """
    V = np.atleast_2d(V).astype(float)
    n_vertices, dim = V.shape
    # t is 1 to indicate that all are vertices
    tV_list = np.hstack((np.ones((n_vertices, 1)), V)).tolist()
    logger.debug("Removing redundant vertices among %d points in %d dimensions", n_vertices, dim)
    try:
        tV_cdd = cdd.matrix_from_array(tV_list, rep_type=cdd.RepType.GENERATOR)
        cdd.matrix_canonicalize(tV_cdd)  # Minimize redundant vertices
    except (RuntimeError, ValueError) as err:
        raise InfeasibleOptimizationError(
            f"cdd failed to remove redundant vertices: {str(err)}", source=err
        ) from err
    try:
        tV = np.array(tV_cdd.array, dtype=float).reshape((-1, dim + 1))
    except ValueError as err:
        raise DataConversionError(
            f"Failed to convert the generators returned by cdd into a ({dim + 1:d})-column matrix", source=err
        ) from err
    return tV[:, 1:]
