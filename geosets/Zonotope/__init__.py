# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose:  Define the Zonotope class

import numpy as np

from geosets.common import GeoSet, is_interval, read_only_view, sanitize_matrix, sanitize_vector
from geosets.common.errors import DimensionMismatchError
from geosets.Zonotope.operations_binary import contains_point, matmul_, minkowski_sum_, translate_, zonotope_norm
from geosets.Zonotope.operations_unary import degenerate, support_function, to_vertices, volume


class Zonotope(GeoSet):
    r"""Zonotope class.

    A zonotope is an affine transformation of the unit hypercube,
    :math:`\mathcal{Z} = \{c + G^\top \alpha\ |\ \alpha\in[-1, 1]^m\}`, where the m rows of G are the generators.

    Args:
        G (array_like | None): Generators of the zonotope arranged row-wise (m times dim). None or an empty array
            describes a zonotope without generators, i.e., the singleton {c}.
        c (array_like): Center of the zonotope. Vector of length dim.

    Raises:
        ValueError: When G (or c) is not convertible into a 2D (or 1D) float array free from NaNs and infs
        DimensionMismatchError: When the number of columns of G differs from the length of c
    """

    def __init__(self, G, c):
        """Constructor for Zonotope class"""
        super().__init__()
        c = sanitize_vector(c, name="c")
        if G is None:
            G = np.empty((0, c.size))
        else:
            G = sanitize_matrix(G, name="G", n_columns=c.size)
        if G.shape[1] != c.size:
            raise DimensionMismatchError(
                expected=c.size,
                got=G.shape[1],
                message=f"Expected G to have {c.size:d} columns to match c. Got G with shape {G.shape}.",
            )
        self._G, self._c = G, c

    @classmethod
    def from_unit_box(cls, dim):
        """Zonotope with the unit vectors as generators and the origin as center, i.e., [-1, 1]^dim"""
        return cls(np.eye(dim), np.zeros((dim,)))

    @classmethod
    def from_interval(cls, interval):
        """Zonotope of an interval, with center (lb + ub) / 2 and half-widths along the unit vectors as generators

        Raises:
            TypeError: When interval is not an Interval
        """
        if not is_interval(interval):
            raise TypeError(f"Expected an Interval. Got {type(interval).__name__:s}.")
        return cls(np.diag((interval.ub - interval.lb) / 2), interval.center())

    @classmethod
    def from_random(cls, dim, n_generators, center_at_origin=False, seed=None):
        """Zonotope with generators drawn uniformly from [-1, 1]^dim.

        Args:
            dim (int): Dimension of the zonotope
            n_generators (int): Number of generators
            center_at_origin (bool, optional): When True, the center is the origin. Otherwise, the center is drawn
                uniformly from [-1, 1]^dim. Defaults to False.
            seed (int | numpy.random.Generator, optional): Seed passed to numpy.random.default_rng. Defaults to None.

        Returns:
            Zonotope: Random zonotope
        """
        rng = np.random.default_rng(seed)
        G = rng.uniform(-1, 1, size=(n_generators, dim))
        if center_at_origin:
            c = np.zeros((dim,))
        else:
            c = rng.uniform(-1, 1, size=(dim,))
        return cls(G, c)

    ############
    # Properties
    ############
    @property
    def dim(self):
        """Dimension of the zonotope"""
        return self._c.size

    @property
    def G(self):
        """Generators of the zonotope (read-only), one per row"""
        return read_only_view(self._G)

    @property
    def c(self):
        """Center of the zonotope (read-only)"""
        return read_only_view(self._c)

    @property
    def n_generators(self):
        """Number of generators"""
        return self._G.shape[0]

    def copy(self):
        """Create a copy of the zonotope"""
        copy_of_self = self.__class__(self._G, self._c)
        copy_of_self.cvxpy_args_lp = dict(self.cvxpy_args_lp)
        return copy_of_self

    def empty(self):
        """Check if the zonotope is empty. Always False by construction."""
        return False

    def center(self):
        """Center c of the zonotope"""
        return self._c.copy()

    ##################
    # Unary operations
    ##################
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
    zonotope_norm = zonotope_norm

    ##########################
    # Zonotope representation
    ##########################
    def __str__(self):
        return f"Zonotope in R^{self.dim:d}"

    def __repr__(self):
        generator_str = "generator" if self.n_generators == 1 else "generators"
        return f"{str(self):s}\n\twith {self.n_generators:d} {generator_str:s}"
