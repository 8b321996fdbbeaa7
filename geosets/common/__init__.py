# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
# Copyright (c) 2019 Tor Aksel N. Heirung
#
# SPDX-License-Identifier: AGPL-3.0-or-later
# SPDX-License-Identifier: MIT

# Code purpose: Define the capability contract shared by all set representations, along with the sanitizers and
# helpers that are common to different set representations.

import abc

import numpy as np

from geosets.common.constants import DEFAULT_CVXPY_ARGS_LP
from geosets.common.errors import DimensionMismatchError
from geosets.common.plotting import order_vertices_clockwise, plot


def check_matrices_are_equal_ignoring_row_order(A, B):
    """Check matrices are equal while ignoring row order

    Args:
        A (array_like): Matrix 1
        B (array_like): Matrix 2

    Returns:
        bool: A == B

    Notes:
        isclose does element-wise comparison, all with axis=1, provides a row-wise test, and finally any checks for some
        row where row-wise match is true
    """
    A = np.array(A).astype(float)
    B = np.array(B).astype(float)
    return A.shape == B.shape and sum([np.any(np.all(np.isclose(row, B), axis=1)) for row in A]) == B.shape[0]


def check_vectors_are_equal_ignoring_row_order(A, B):
    """Check vectors are equal while ignoring row order

    Args:
        A (array_like): Vector 1
        B (array_like): Vector 2

    Returns:
        bool: A == B

    Notes:
        isclose does element-wise comparison and we sort
    """
    A = np.squeeze(A).astype(float)
    B = np.squeeze(B).astype(float)
    return A.ndim == 1 and A.shape == B.shape and np.all(np.isclose(np.sort(A), np.sort(B)))


def sanitize_vector(v, name="v"):
    """Sanitize a vector into a 1D float numpy array free from NaNs and infs.

    Args:
        v (array_like): Can be numpy arrays, list, or tuples
        name (str, optional): Name used in error messages. Defaults to "v".

    Raises:
        ValueError: v is not convertible into a 1D float array free from NaNs and infs

    Returns:
        numpy.ndarray: 1D numpy array
    """
    try:
        v = np.atleast_1d(np.squeeze(v)).astype(float)
    except (TypeError, ValueError) as err:
        raise ValueError(f"Can not convert {name} into a float array. Got {np.array2string(np.array(v)):s}") from err
    if v.ndim != 1:
        raise ValueError(f"Expected {name} to be a 1D array! Got {np.array2string(v):s}")
    elif np.any(np.isnan(v)) or np.any(np.isinf(v)):
        raise ValueError(f"Expected {name} to be free from NaNs and infs. Got {np.array2string(v):s}")
    return v


def sanitize_matrix(M, name="M", n_columns=None):
    """Sanitize a matrix into a 2D float numpy array free from NaNs and infs.

    Args:
        M (array_like): Can be numpy arrays, list, or tuples
        name (str, optional): Name used in error messages. Defaults to "M".
        n_columns (int, optional): Number of columns to use when M is empty. Defaults to None.

    Raises:
        ValueError: M is not convertible into a 2D float array free from NaNs and infs

    Returns:
        numpy.ndarray: 2D numpy array
    """
    try:
        M = np.atleast_2d(M).astype(float)
    except (TypeError, ValueError) as err:
        raise ValueError(f"Can not convert {name} into a float array. Got {np.array2string(np.array(M)):s}") from err
    if M.ndim != 2:
        raise ValueError(f"Expected {name} to be a 2D array! Got {M.ndim:d}D array.")
    elif np.any(np.isnan(M)) or np.any(np.isinf(M)):
        raise ValueError(f"Expected {name} to be free from NaNs and infs. Got {np.array2string(M):s}")
    if M.size == 0 and n_columns is not None:
        M = np.empty((0, n_columns))
    return M


def read_only_view(array):
    """View of a numpy array that raises ValueError on assignment, so that a getter never exposes the owned buffer."""
    view = array.view()
    view.flags.writeable = False
    return view


def is_geoset(Q):
    """Check if Q is one of the set representations

    Args:
        Q (object): Object to check

    Returns:
        bool: Returns True if Q implements the GeoSet contract, False otherwise
    """
    return isinstance(Q, GeoSet)


def is_interval(Q):
    """Check if the set is an interval"""
    return is_geoset(Q) and hasattr(Q, "lb")


def is_hpolytope(Q):
    """Check if the set is a polytope in halfspace representation"""
    return is_geoset(Q) and hasattr(Q, "n_constraints")


def is_vpolytope(Q):
    """Check if the set is a polytope in vertex representation"""
    return is_geoset(Q) and hasattr(Q, "n_vertices")


def is_zonotope(Q):
    """Check if the set is a zonotope"""
    return is_geoset(Q) and hasattr(Q, "n_generators")


class GeoSet(abc.ABC):
    r"""Capability contract shared by Interval, HPolytope, VPolytope, and Zonotope.

    Every representation lives in a fixed ambient dimension :attr:`dim` and implements the abstract operations below.
    The non-mutating operations :meth:`minkowski_sum`, :meth:`matmul`, and :meth:`translate` are derived here once:
    they copy the set, apply the mutating counterpart (suffixed with an underscore) on the copy, and return the copy.

    Every mutating operation checks the operand dimension with :meth:`_check_operand_dim` before touching the state,
    and either fully succeeds or leaves the set unchanged.
    """

    def __init__(self):
        self._cvxpy_args_lp = dict(DEFAULT_CVXPY_ARGS_LP)

    ############
    # Properties
    ############
    @property
    @abc.abstractmethod
    def dim(self):
        """Dimension of the ambient space of the set."""

    @property
    def cvxpy_args_lp(self):
        """CVXPY arguments in use when solving a linear program

        Returns:
            dict: CVXPY arguments in use when solving a linear program. Defaults to dictionary in
            `geosets.common.constants.DEFAULT_CVXPY_ARGS_LP`.
        """
        return self._cvxpy_args_lp

    @cvxpy_args_lp.setter
    def cvxpy_args_lp(self, value):
        """Update CVXPY arguments in use when solving a linear program

        Args:
            value: Dictionary with new CVXPY arguments in use when solving a linear program.
        """
        self._cvxpy_args_lp = value

    ##############################
    # Operations every set defines
    ##############################
    @classmethod
    @abc.abstractmethod
    def from_unit_box(cls, dim):
        """Construct the box [-1, 1]^dim."""

    @abc.abstractmethod
    def copy(self):
        """Create a copy of the set that shares no buffers with the set."""

    @abc.abstractmethod
    def empty(self):
        """Check if the set is empty."""

    @abc.abstractmethod
    def degenerate(self):
        """Check if the set is not full-dimensional in its ambient space."""

    @abc.abstractmethod
    def to_vertices(self):
        """Extreme points of the set, arranged row-wise."""

    @abc.abstractmethod
    def center(self):
        """A point representative of the center of the set."""

    @abc.abstractmethod
    def support_function(self, direction):
        """Extreme point maximizing direction @ x over the set, and the maximum value."""

    @abc.abstractmethod
    def volume(self):
        """Volume of the set."""

    @abc.abstractmethod
    def contains_point(self, point):
        """Check if a point lies in the set."""

    @abc.abstractmethod
    def minkowski_sum_(self, other):
        """Replace the set with its Minkowski sum with other."""

    @abc.abstractmethod
    def matmul_(self, M):
        """Replace the set with its image under the linear map M."""

    @abc.abstractmethod
    def translate_(self, vector):
        """Replace the set with its translation by vector."""

    ####################
    # Derived operations
    ####################
    def minkowski_sum(self, other):
        r"""Compute the Minkowski sum :math:`\{x + y\ |\ x\in\mathcal{P}, y\in\mathcal{Q}\}` without modifying self.

        Args:
            other (GeoSet): Set to add

        Returns:
            GeoSet: A new set of the same representation as self

        Notes:
            This function copies self and calls :meth:`minkowski_sum_` on the copy.
        """
        copy_of_self = self.copy()
        copy_of_self.minkowski_sum_(other)
        return copy_of_self

    def matmul(self, M):
        r"""Compute the image :math:`\{Mx\ |\ x\in\mathcal{P}\}` under a linear map without modifying self.

        Args:
            M (array_like): Matrix (self.dim times self.dim)

        Returns:
            GeoSet: A new set of the same representation as self

        Notes:
            This function copies self and calls :meth:`matmul_` on the copy.
        """
        copy_of_self = self.copy()
        copy_of_self.matmul_(M)
        return copy_of_self

    def translate(self, vector):
        r"""Compute the translation :math:`\{x + v\ |\ x\in\mathcal{P}\}` without modifying self.

        Args:
            vector (array_like): Translation vector of length self.dim

        Returns:
            GeoSet: A new set of the same representation as self

        Notes:
            This function copies self and calls :meth:`translate_` on the copy.
        """
        copy_of_self = self.copy()
        copy_of_self.translate_(vector)
        return copy_of_self

    def _check_operand_dim(self, got):
        """Raise DimensionMismatchError when an operand dimension differs from self.dim.

        Args:
            got (int): Dimension of the operand

        Raises:
            DimensionMismatchError: got != self.dim
        """
        if got != self.dim:
            raise DimensionMismatchError(expected=self.dim, got=got)

    def _sanitize_operand_vector(self, vector, name="vector"):
        """Sanitize a vector operand and check that it has self.dim entries."""
        vector = sanitize_vector(vector, name=name)
        self._check_operand_dim(vector.size)
        return vector

    def _sanitize_linear_map(self, M, allow_non_square=False):
        """Sanitize a linear map operand.

        Args:
            M (array_like): Matrix whose number of columns must be self.dim
            allow_non_square (bool, optional): When False, the number of rows must also be self.dim, since a set never
                changes its dimension. Defaults to False.

        Raises:
            DimensionMismatchError: M has a wrong number of columns (or rows)

        Returns:
            numpy.ndarray: 2D numpy array
        """
        M = sanitize_matrix(M, name="M")
        self._check_operand_dim(M.shape[1])
        if not allow_non_square and M.shape[0] != self.dim:
            raise DimensionMismatchError(
                expected=self.dim,
                got=M.shape[0],
                message=f"Expected M to have {self.dim:d} rows to preserve the set dimension. Got {M.shape[0]:d} rows.",
            )
        return M

    ##################
    # Batched queries
    ##################
    def support(self, eta):
        r"""Evaluates the support function and support vector of a set along several directions.

        The support function of a set :math:`\mathcal{P}` is defined as :math:`\rho_{\mathcal{P}}(\eta) =
        \max_{x\in\mathcal{P}} \eta^\top x`. The support vector of a set :math:`\mathcal{P}` is defined as
        :math:`\nu_{\mathcal{P}}(\eta) = \arg\max_{x\in\mathcal{P}} \eta^\top x`.

        Args:
            eta (array_like): Support directions. Matrix (N times self.dim), where each row is a support direction.

        Raises:
            ValueError: eta is not convertible into a 2D array
            DimensionMismatchError: Mismatch in eta dimension

        Returns:
            tuple: A tuple with two items:
                1. support_function_evaluations (numpy.ndarray): Support function evaluation(s) as a 1D numpy.ndarray.
                   Vector (N,) with as many rows as eta.
                2. support_vectors (numpy.ndarray): Support vectors as a 2D numpy.ndarray. Matrix N x self.dim with as
                   many rows as eta.
        """
        eta = sanitize_matrix(eta, name="eta")
        self._check_operand_dim(eta.shape[1])
        support_function_list = []
        support_vector_list = []
        for single_eta in eta:
            support_vector, support_function = self.support_function(single_eta)
            support_function_list.append(support_function)
            support_vector_list.append(support_vector)
        return np.array(support_function_list), np.array(support_vector_list)

    def contains(self, points):
        """Check containment of a point or a collection of points.

        Args:
            points (array_like): Points to check. Matrix (N times self.dim), where each row is a point.

        Raises:
            DimensionMismatchError: Number of columns in points is different from self.dim

        Returns:
            bool | numpy.ndarray[bool]: Containment flag for a single point, or a logical array for N > 1 points.
        """
        points = sanitize_matrix(points, name="points")
        self._check_operand_dim(points.shape[1])
        containment_flags = np.array([self.contains_point(point) for point in points], dtype=bool)
        if points.shape[0] == 1:
            return bool(containment_flags[0])
        return containment_flags

    def __contains__(self, point):
        """Overload `in` operator for containment of a point."""
        return self.contains_point(point)

    def minimum_volume_circumscribing_rectangle(self):
        r"""Compute the minimum volume circumscribing rectangle for a set.

        Returns:
            tuple: A tuple of two elements
                - lb (numpy.ndarray): Lower bound :math:`l` on the set.
                - ub (numpy.ndarray): Upper bound :math:`u` on the set.

        Notes:
            This function computes the lower/upper bound by an element-wise support computation (2n support function
            evaluations), where n is attr:`self.dim`. For the lower bound, we use

            .. math::
                \inf_{x\in\mathcal{P}} e_i^\top x=-\sup_{x\in\mathcal{P}} -e_i^\top x=-\rho_{\mathcal{P}}(-e_i).
        """
        lb = -self.support(-np.eye(self.dim))[0]
        ub = self.support(np.eye(self.dim))[0]
        return lb, ub

    def bounding_interval(self):
        """Smallest axis-aligned Interval containing the set (see :meth:`minimum_volume_circumscribing_rectangle`)."""
        from geosets.Interval import Interval

        lb, ub = self.minimum_volume_circumscribing_rectangle()
        # Support values from a solver may cross by a rounding error for degenerate sets
        return Interval(np.minimum(lb, ub), np.maximum(lb, ub))

    ###########
    # Operators
    ###########
    __array_ufunc__ = None  # Allows for numpy matrix times set

    def __add__(self, Q):
        """Overload + operator for Minkowski sum with a set or translation by a point."""
        if is_geoset(Q):
            return self.minkowski_sum(Q)
        try:
            Q = np.atleast_1d(np.squeeze(Q)).astype(float)
        except (TypeError, ValueError):
            return NotImplemented
        return self.translate(Q)

    __radd__ = __add__

    def __sub__(self, Q):
        """Overload - operator for translation by the negative of a point."""
        if is_geoset(Q):
            return NotImplemented
        try:
            Q = np.atleast_1d(np.squeeze(Q)).astype(float)
        except (TypeError, ValueError):
            return NotImplemented
        return self.translate(-Q)

    def __rmatmul__(self, M):
        """Overload @ operator for linear map (matrix times set)."""
        return self.matmul(M)

    ###########
    # Plotting
    ###########
    plot = plot


__all__ = [
    "GeoSet",
    "check_matrices_are_equal_ignoring_row_order",
    "check_vectors_are_equal_ignoring_row_order",
    "is_geoset",
    "is_hpolytope",
    "is_interval",
    "is_vpolytope",
    "is_zonotope",
    "order_vertices_clockwise",
    "read_only_view",
    "sanitize_matrix",
    "sanitize_vector",
]
