# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose:  Define the methods involving another set or a point used with HPolytope class

import numpy as np

from geosets.common import is_geoset, is_hpolytope, sanitize_matrix
from geosets.common.constants import DEGENERACY_TOLERANCE
from geosets.common.errors import SetNotImplementedError
from geosets.common.numerics import matrix_rank, vector_leq


def template_directions(self, other):
    """Unit normals used as the template for the Minkowski sum.

    Args:
        other (GeoSet): Set to add to self

    Returns:
        numpy.ndarray: Distinct normalized non-zero rows of self.A and, when other is an HPolytope, of other.A
    """
    if is_hpolytope(other):
        directions = np.vstack((self._A, other.A))
    else:
        directions = self._A
    norms = np.linalg.norm(directions, axis=1)
    valid_rows = norms > DEGENERACY_TOLERANCE
    unit_directions = directions[valid_rows, :] / norms[valid_rows, np.newaxis]
    return np.unique(unit_directions, axis=0)


def minkowski_sum_(self, other):
    r"""Replace the polytope with an outer approximation of its Minkowski sum with another set.

    Args:
        other (GeoSet): Set to add

    Raises:
        SetNotImplementedError: When other is not a set
        DimensionMismatchError: When other.dim differs from self.dim
        InfeasibleOptimizationError: When a support function evaluation fails (empty or unbounded sets)

    Notes:
        For every unit direction :math:`u` in :meth:`template_directions`, the resulting polytope has the halfspace
        :math:`u^\top x \leq \rho_{\mathcal{P}}(u) + \rho_{\mathcal{Q}}(u)`. The result always contains the Minkowski
        sum. It is exact only when every facet normal of the Minkowski sum appears among the template directions, which
        holds for sums of polytopes with a common set of facet normals (for example, two axis-aligned boxes). Otherwise,
        it is an outer approximation.
    """
    if not is_geoset(other):
        raise SetNotImplementedError(f"Minkowski sum of an HPolytope with {type(other).__name__:s} is not supported")
    self._check_operand_dim(other.dim)
    directions = template_directions(self, other)
    if directions.shape[0] == 0:
        new_A, new_b = np.empty((0, self.dim)), np.empty((0,))
    else:
        new_A = directions
        new_b = self.support(directions)[0] + other.support(directions)[0]
    self._A, self._b = new_A, new_b


def matmul_(self, M):
    r"""Replace the polytope with its image under an invertible matrix M.

    Args:
        M (array_like): Invertible matrix (self.dim times self.dim)

    Raises:
        DimensionMismatchError: When M does not have self.dim columns
        SetNotImplementedError: When M is not square or M is singular

    Notes:
        The image :math:`\{Mx\ |\ Ax \leq b\}` is :math:`\{y\ |\ AM^{-1}y \leq b\}`. Images under a singular matrix are
        projections, which require a halfspace enumeration, and are not supported. Use :meth:`inverse_matmul_` for the
        update :math:`A \leftarrow AM`, i.e., the pre-image under M.
    """
    M = sanitize_matrix(M, name="M")
    self._check_operand_dim(M.shape[1])
    if M.shape[0] != M.shape[1]:
        raise SetNotImplementedError(
            f"Expected M to be a square matrix for the image of an HPolytope. Got M with shape {M.shape}."
        )
    elif matrix_rank(M) < self.dim:
        raise SetNotImplementedError("Image of an HPolytope under a singular matrix is not supported!")
    # A M^{-1} = (M^{-T} A^T)^T
    self._A = np.linalg.solve(M.T, self._A.T).T


def inverse_matmul_(self, M):
    r"""Replace the polytope with its pre-image :math:`\{x\ |\ Mx \in \mathcal{P}\} = \{x\ |\ AMx \leq b\}`.

    Args:
        M (array_like): Matrix (self.dim times self.dim)

    Raises:
        DimensionMismatchError: When M is not self.dim times self.dim

    Notes:
        Unlike :meth:`matmul_`, the pre-image is available for singular M as well.
    """
    M = self._sanitize_linear_map(M)
    self._A = self._A @ M


def inverse_matmul(self, M):
    """Copy of the polytope replaced by its pre-image under M (see :meth:`inverse_matmul_`)."""
    copy_of_self = self.copy()
    copy_of_self.inverse_matmul_(M)
    return copy_of_self


def translate_(self, vector):
    r"""Replace the polytope with its translation :math:`\{x + v\ |\ Ax \leq b\} = \{y\ |\ Ay \leq b + Av\}`.

    Raises:
        DimensionMismatchError: When vector does not have self.dim entries
    """
    vector = self._sanitize_operand_vector(vector)
    self._b = self._b + self._A @ vector


def contains_point(self, point):
    """Check if A @ point <= b holds elementwise, up to DEGENERACY_TOLERANCE.

    Raises:
        DimensionMismatchError: When point does not have self.dim entries
    """
    point = self._sanitize_operand_vector(point, name="point")
    return vector_leq(self._A @ point, self._b, tol=DEGENERACY_TOLERANCE)
