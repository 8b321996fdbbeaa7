# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose:  Define the HPolytope class

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from geosets.common import GeoSet, is_interval, read_only_view, sanitize_matrix, sanitize_vector
from geosets.common.constants import RANDOM_INTERIOR_POINT_BOUND, RANDOM_OFFSET_LB, RANDOM_OFFSET_UB
from geosets.common.errors import DimensionMismatchError
from geosets.HPolytope.operations_binary import (
    contains_point,
    inverse_matmul,
    inverse_matmul_,
    matmul_,
    minkowski_sum_,
    template_directions,
    translate_,
)
from geosets.HPolytope.operations_unary import (
    _enumerate_vertices,
    center,
    chebyshev_centering,
    degenerate,
    empty,
    support_function,
    to_vertices,
    volume,
)

if TYPE_CHECKING:
    from geosets.Interval import Interval


class HPolytope(GeoSet):
    r"""Polytope in halfspace representation :math:`\{x\ |\ Ax \leq b\}`.

    Args:
        A (Sequence[Sequence[float]] | np.ndarray): Inequality coefficient vectors. The vectors are stacked vertically
            with the polytope dimension determined by the column count. A with no rows describes the whole space.
        b (Sequence[float] | np.ndarray): Inequality constants. The constants are expected to be in a 1D numpy array.

    Raises:
        ValueError: When A (or b) is not convertible into a 2D (or 1D) float array free from NaNs and infs
        DimensionMismatchError: When the number of rows of A differs from the number of entries of b

    Notes:
        The constraints are stored as given. Emptiness, boundedness, and degeneracy are not checked at construction,
        and they are determined on demand with the help of a linear program solver (see :meth:`empty`,
        :meth:`degenerate`).
    """

    def __init__(self, A: Sequence[Sequence[float]] | np.ndarray, b: Sequence[float] | np.ndarray) -> None:
        """Constructor for HPolytope class"""
        super().__init__()
        sanitized_A = sanitize_matrix(A, name="A")
        sanitized_b = sanitize_vector(b, name="b")
        if sanitized_A.shape[0] != sanitized_b.shape[0]:
            raise DimensionMismatchError(
                expected=sanitized_A.shape[0],
                got=sanitized_b.shape[0],
                message=(
                    f"A and b have different number of rows! A: {sanitized_A.shape[0]:d} and b: "
                    f"{sanitized_b.shape[0]:d}."
                ),
            )
        self._A: np.ndarray = sanitized_A
        self._b: np.ndarray = sanitized_b

    @classmethod
    def from_unit_box(cls, dim: int) -> HPolytope:
        r"""HPolytope :math:`\{x\ |\ -1 \leq x_i \leq 1\}` with 2 dim constraints"""
        return cls(np.vstack((np.eye(dim), -np.eye(dim))), np.ones((2 * dim,)))

    @classmethod
    def from_interval(cls, interval: Interval) -> HPolytope:
        r"""HPolytope :math:`\{x\ |\ lb \leq x \leq ub\}` of an interval

        Args:
            interval (Interval): Interval to convert

        Raises:
            TypeError: When interval is not an Interval

        Returns:
            HPolytope: Polytope with 2 interval.dim constraints
        """
        if not is_interval(interval):
            raise TypeError(f"Expected an Interval. Got {type(interval).__name__:s}.")
        return cls(np.vstack((np.eye(interval.dim), -np.eye(interval.dim))), np.hstack((interval.ub, -interval.lb)))

    @classmethod
    def from_random(cls, dim: int, n_constraints: int, seed: Optional[int | np.random.Generator] = None) -> HPolytope:
        """Random polytope obtained by cutting the unit box with random halfspaces.

        Args:
            dim (int): Dimension of the polytope
            n_constraints (int): Number of random halfspaces in addition to the 2 dim halfspaces of the unit box
            seed (int | numpy.random.Generator, optional): Seed passed to numpy.random.default_rng. Defaults to None.

        Returns:
            HPolytope: Random polytope with 2 dim + n_constraints constraints

        Notes:
            The normals of the random halfspaces are normalized standard Gaussian vectors. Every random halfspace
            contains a random interior point drawn uniformly from [-0.8, 0.8]^dim with an offset drawn uniformly from
            [0.1, 1], so the resulting polytope is non-empty and bounded.
        """
        rng = np.random.default_rng(seed)
        box = cls.from_unit_box(dim)
        random_A = rng.standard_normal((n_constraints, dim))
        norms = np.linalg.norm(random_A, axis=1)
        random_A[norms > 0] /= norms[norms > 0, np.newaxis]
        interior_point = rng.uniform(-RANDOM_INTERIOR_POINT_BOUND, RANDOM_INTERIOR_POINT_BOUND, size=(dim,))
        offsets = rng.uniform(RANDOM_OFFSET_LB, RANDOM_OFFSET_UB, size=(n_constraints,))
        random_b = random_A @ interior_point + offsets
        return cls(np.vstack((box.A, random_A)), np.hstack((box.b, random_b)))

    ############
    # Properties
    ############
    @property
    def dim(self) -> int:
        """Dimension of the polytope, i.e., the number of columns of A"""
        return self._A.shape[1]

    @property
    def A(self) -> np.ndarray:
        r"""Inequality coefficient vectors `A` for the polytope :math:`\{Ax \leq b\}` (read-only)."""
        return read_only_view(self._A)

    @property
    def b(self) -> np.ndarray:
        r"""Inequality constants `b` for the polytope :math:`\{Ax \leq b\}` (read-only)."""
        return read_only_view(self._b)

    @property
    def H(self) -> np.ndarray:
        """Inequality constraints in halfspace representation `H=[A, b]`"""
        return np.hstack((self._A, np.array([self._b]).T))

    @property
    def n_constraints(self) -> int:
        """Number of halfspaces used to define the polytope"""
        return self._A.shape[0]

    def copy(self) -> HPolytope:
        """Create a copy of the polytope"""
        copy_of_self = self.__class__(A=self._A, b=self._b)
        copy_of_self.cvxpy_args_lp = dict(self.cvxpy_args_lp)
        return copy_of_self

    ##################
    # Unary operations
    ##################
    center = center
    chebyshev_centering = chebyshev_centering
    degenerate = degenerate
    empty = empty
    support_function = support_function
    to_vertices = to_vertices
    volume = volume
    _enumerate_vertices = _enumerate_vertices

    ###################
    # Binary operations
    ###################
    contains_point = contains_point
    inverse_matmul = inverse_matmul
    inverse_matmul_ = inverse_matmul_
    matmul_ = matmul_
    minkowski_sum_ = minkowski_sum_
    template_directions = template_directions
    translate_ = translate_

    ##########################
    # Polytope representation
    ##########################
    def __str__(self) -> str:
        return f"HPolytope in R^{self.dim:d}"

    def __repr__(self) -> str:
        constraint_str = "inequality" if self.n_constraints == 1 else "inequalities"
        return f"{str(self):s}\n\tIn H-rep: {self.n_constraints:d} {constraint_str:s}"
