# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose:  Define the VPolytope class

import numpy as np

from geosets.common import GeoSet, read_only_view, sanitize_matrix
from geosets.Interval import Interval
from geosets.VPolytope.operations_binary import contains_point, matmul_, minkowski_sum_, translate_
from geosets.VPolytope.operations_unary import (
    center,
    compact,
    compact_,
    degenerate,
    support_function,
    to_vertices,
    volume,
)


class VPolytope(GeoSet):
    r"""Polytope in vertex representation, i.e., the convex hull :math:`\text{ConvexHull}(v_i)` where :math:`v_i` are
    rows of matrix V.

    Args:
        V (array_like): Points whose convex hull is the polytope, arranged row-wise. The polytope dimension is
            determined by the column count.

    Raises:
        ValueError: When V is not convertible into a 2D float array free from NaNs and infs
        ValueError: When V has no rows

    Notes:
        The stored points need not be the vertices of their convex hull. Use :meth:`compact_` to drop the redundant
        points, and :meth:`to_vertices` to obtain the vertices without modifying the polytope.
    """

    def __init__(self, V):
        """Constructor for VPolytope class"""
        super().__init__()
        V = sanitize_matrix(V, name="V")
        if V.shape[0] == 0 or V.size == 0:
            raise ValueError("Expected V to have at least one vertex! Got an empty vertex list.")
        self._V = V

    @classmethod
    def from_unit_box(cls, dim):
        """VPolytope given by the 2^dim corners of [-1, 1]^dim"""
        return cls(Interval.from_unit_box(dim).to_vertices())

    @classmethod
    def from_random(cls, dim, n_vertices, seed=None):
        """Convex hull of n_vertices points drawn uniformly from [-1, 1]^dim.

        Args:
            dim (int): Dimension of the polytope
            n_vertices (int): Number of points to draw
            seed (int | numpy.random.Generator, optional): Seed passed to numpy.random.default_rng. Defaults to None.

        Returns:
            VPolytope: Random polytope. Not all points need to be vertices of the convex hull.
        """
        rng = np.random.default_rng(seed)
        return cls(rng.uniform(-1, 1, size=(n_vertices, dim)))

    ############
    # Properties
    ############
    @property
    def dim(self):
        """Dimension of the polytope, i.e., the number of columns of V"""
        return self._V.shape[1]

    @property
    def V(self):
        """Stored points of the polytope (read-only), one per row"""
        return read_only_view(self._V)

    @property
    def n_vertices(self):
        """Number of stored points"""
        return self._V.shape[0]

    def copy(self):
        """Create a copy of the polytope"""
        copy_of_self = self.__class__(self._V)
        copy_of_self.cvxpy_args_lp = dict(self.cvxpy_args_lp)
        return copy_of_self

    def empty(self):
        """Check if the polytope is empty. Always False by construction."""
        return False

    ##################
    # Unary operations
    ##################
    center = center
    compact = compact
    compact_ = compact_
    degenerate = degenerate
    support_function = support_function
    to_vertices = to_vertices
    volume = volume

    ###################
    # Binary operations
    ###################
    contains_point = contains_point
    matmul_ = matmul_
    minkowski_sum_ = minkowski_sum_
    translate_ = translate_

    ##########################
    # Polytope representation
    ##########################
    def __str__(self):
        return f"VPolytope in R^{self.dim:d}"

    def __repr__(self):
        vertex_str = "vertices" if self.n_vertices > 1 else "vertex"
        return f"{str(self):s}\n\tIn V-rep: {self.n_vertices:d} {vertex_str:s}"
