# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose:  Define the methods involving just the HPolytope class

import warnings

import cvxpy as cp
import numpy as np

from geosets.common.constants import DEGENERACY_TOLERANCE
from geosets.common.errors import EmptySetError, InfeasibleOptimizationError
from geosets.common.linear_program import UNBOUNDED_STATUSES, is_feasible, solve_linear_program
from geosets.common.vertex_enumeration import compute_polytope_vertices
from geosets.VPolytope import VPolytope


def empty(self):
    r"""Check if the polytope is empty.

    Returns:
        bool: True when :math:`\{x\ |\ Ax \leq b\}` has no solution

    Notes:
        We check the feasibility of :math:`Ax\leq b` by solving a linear program with zero objective. A polytope
        without constraints is the whole space, and it is not empty.
    """
    if self.n_constraints == 0:
        return False
    x = cp.Variable((self.dim,))
    return not is_feasible([self._A @ x <= self._b], cvxpy_args=self.cvxpy_args_lp, task_str="HPolytope emptiness")


def chebyshev_centering(self):
    r"""Computes a ball with the largest radius that fits within the polytope. The ball's center is known as the
    Chebyshev center, and its radius is the Chebyshev radius.

    Raises:
        InfeasibleOptimizationError: The polytope is empty (infeasible LP), unbounded in a way that admits balls of
            arbitrary radius (unbounded LP), or the solver failed

    Returns:
        tuple: A tuple with two items
            #. center (numpy.ndarray): Chebyshev center of the polytope
            #. radius (float): Chebyshev radius of the polytope

    Notes:
        We solve the LP (see Section 8.5.1 in [BV04]_) for :math:`c` (for `center`) and :math:`R` (for `radius`),

        .. math ::
            \text{maximize}     &\quad R \\
            \text{subject to}   &\quad A c + R ||A||_\text{row} \leq b,\\
                                &\quad R \geq 0,

        where :math:`||A||_\text{row}` is a vector of dimension :attr:`n_constraints` with each element
        as :math:`||a_i||_2`. A zero Chebyshev radius indicates that the polytope is not full-dimensional.
    """
    if self.n_constraints == 0:
        raise InfeasibleOptimizationError(
            "Chebyshev centering of a polytope without constraints is unbounded!", status=cp.UNBOUNDED
        )
    chebyshev_center = cp.Variable((self.dim,))
    chebyshev_radius = cp.Variable()
    norm_A_row_wise = np.linalg.norm(self._A, axis=1)  # Gives a row vector of norms
    const = [
        chebyshev_radius >= 0,
        self._A @ chebyshev_center + (chebyshev_radius * norm_A_row_wise) <= self._b,
    ]
    # Center is read off its variable after the solve
    radius = solve_linear_program(
        chebyshev_radius,
        chebyshev_radius,
        const,
        cvxpy_args=self.cvxpy_args_lp,
        task_str="HPolytope Chebyshev centering",
        maximize=True,
    )[1]
    return np.array(chebyshev_center.value, dtype=float), max(radius, 0.0)


def center(self):
    """Chebyshev center of the polytope (see :meth:`chebyshev_centering`).

    Raises:
        InfeasibleOptimizationError: The polytope is empty or unbounded, or the solver failed
    """
    return self.chebyshev_centering()[0]


def degenerate(self):
    """Check if the polytope is not full-dimensional.

    Returns:
        bool: True when the polytope is empty, or when some constraint is active at the Chebyshev center (within
        DEGENERACY_TOLERANCE).

    Notes:
        A polytope whose Chebyshev centering is unbounded contains balls of arbitrary radius, and it is not
        degenerate. Rows of A with a norm below DEGENERACY_TOLERANCE are trivially satisfied (or make the polytope
        empty), so they are skipped in the check for active constraints.
    """
    try:
        chebyshev_center, _ = self.chebyshev_centering()
    except InfeasibleOptimizationError as err:
        return err.status not in UNBOUNDED_STATUSES
    valid_rows = np.linalg.norm(self._A, axis=1) > DEGENERACY_TOLERANCE
    residual = self._b[valid_rows] - self._A[valid_rows, :] @ chebyshev_center
    return bool(np.any(np.abs(residual) <= DEGENERACY_TOLERANCE))


def _enumerate_vertices(self):
    """Vertices and number of discarded ray/line generators of a non-empty polytope."""
    if self.empty():
        raise EmptySetError("Can not compute the vertices of an empty HPolytope!")
    if self.n_constraints == 0:
        # The whole space is generated by dim lines and no vertices
        return np.empty((0, self.dim)), self.dim
    return compute_polytope_vertices(self._A, self._b)


def to_vertices(self):
    """Vertices of the polytope, computed with the double description method of cdd.

    Raises:
        EmptySetError: When the polytope is empty
        InfeasibleOptimizationError: cdd failed
        UserWarning: When the polytope is unbounded, and ray generators were dropped

    Returns:
        numpy.ndarray: Vertices of the polytope arranged row-wise. For an unbounded polytope, only the points among
        the generators are returned.
    """
    V, n_rays = _enumerate_vertices(self)
    if n_rays > 0:
        warnings.warn(
            f"Dropped {n_rays:d} ray(s) when enumerating the vertices of an unbounded HPolytope!", UserWarning
        )
    return V


def support_function(self, direction):
    r"""Evaluate the support function and a support vector of the polytope along a direction.

    Args:
        direction (array_like): Direction of length self.dim

    Raises:
        DimensionMismatchError: When direction does not have self.dim entries
        InfeasibleOptimizationError: The polytope is empty, the polytope is unbounded along direction, or the solver
            failed

    Returns:
        tuple: A tuple with two items:
            #. support_vector (numpy.ndarray): Optimal solution of the linear program
            #. support_function (float): Optimal value of the linear program

    Notes:
        We solve the LP :math:`\max_x \eta^\top x` subject to :math:`Ax \leq b`.
    """
    direction = self._sanitize_operand_vector(direction, name="direction")
    x = cp.Variable((self.dim,))
    constraints = [self._A @ x <= self._b] if self.n_constraints > 0 else []
    return solve_linear_program(
        x,
        direction @ x,
        constraints,
        cvxpy_args=self.cvxpy_args_lp,
        task_str="HPolytope support function",
        maximize=True,
    )


def volume(self):
    """
    Compute the volume of the polytope using the vertices of the polytope

    Returns:
        float: Volume of the polytope

    Notes:
        - Performs a vertex enumeration and computes the volume of the VPolytope of the vertices
        - Returns 0 when the polytope is empty or degenerate
        - Returns np.inf when the polytope is unbounded and full-dimensional
    """
    try:
        V, n_rays = _enumerate_vertices(self)
    except EmptySetError:
        return 0.0
    if n_rays > 0:
        return 0.0 if self.degenerate() else np.inf
    return VPolytope(V).volume()
