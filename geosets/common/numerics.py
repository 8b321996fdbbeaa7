# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Numeric utilities shared by all set representations

import numpy as np

from geosets.common.constants import RANK_TOLERANCE


def matrix_rank(M, tol=RANK_TOLERANCE):
    """Compute the rank of a matrix by counting its singular values above a threshold.

    Args:
        M (array_like): 2D matrix
        tol (float, optional): Singular values at or below tol are treated as zero. Defaults to RANK_TOLERANCE from
            geosets.common.constants.

    Returns:
        int: Rank of M. An empty matrix has rank 0.
    """
    M = np.atleast_2d(M).astype(float)
    if M.size == 0:
        return 0
    singular_values = np.linalg.svd(M, compute_uv=False)
    return int(np.count_nonzero(np.abs(singular_values) > tol))


def sign_vector(v):
    """Elementwise sign of a vector with values in {-1, 0, 1}."""
    return np.sign(np.asarray(v, dtype=float))


def index_of_maximum(v):
    """Index of the largest entry of a vector. The first index wins a tie."""
    return int(np.argmax(np.asarray(v, dtype=float)))


def vector_leq(a, b, tol=0.0):
    """Check a <= b + tol elementwise for every entry.

    Args:
        a (array_like): Left-hand side vector
        b (array_like): Right-hand side vector
        tol (float, optional): Absolute slack. Defaults to 0.

    Returns:
        bool: True when every entry satisfies the inequality
    """
    return bool(np.all(np.asarray(a, dtype=float) <= np.asarray(b, dtype=float) + tol))


def vector_isclose(a, b, tol):
    """Check |a - b| <= tol elementwise for every entry."""
    return bool(np.all(np.abs(np.asarray(a, dtype=float) - np.asarray(b, dtype=float)) <= tol))
