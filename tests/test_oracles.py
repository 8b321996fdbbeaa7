# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose: Test the convex hull, vertex enumeration, and linear programming wrappers as well as numeric utilities

import cvxpy as cp
import numpy as np
import pytest

from geosets import (
    ConvexHullError,
    DataConversionError,
    DimensionMismatchError,
    EmptySetError,
    InfeasibleOptimizationError,
    InsufficientPointsError,
    SetNotImplementedError,
    SetOperationError,
)
from geosets.common import check_matrices_are_equal_ignoring_row_order
from geosets.common.convex_hull import convex_hull, convex_hull_vertices, convex_hull_volume, simplex_volume
from geosets.common.linear_program import (
    INFEASIBLE_STATUSES,
    UNBOUNDED_STATUSES,
    is_feasible,
    solve_linear_program,
)
from geosets.common.numerics import index_of_maximum, matrix_rank, sign_vector, vector_isclose, vector_leq
from geosets.common.vertex_enumeration import compute_polytope_vertices, remove_redundant_vertices

BOX_2D_A = np.vstack((np.eye(2), -np.eye(2)))
BOX_2D_b = np.ones((4,))


def test_convex_hull():
    points = [[0, 0], [1, 0], [0, 1], [1, 1], [0.5, 0.5], [0.2, 0.7]]
    assert check_matrices_are_equal_ignoring_row_order(convex_hull_vertices(points), [[0, 0], [1, 0], [0, 1], [1, 1]])
    assert np.isclose(convex_hull_volume(points), 1)
    assert convex_hull(points).simplices.shape[1] == 2
    cube = np.array([[i, j, k] for i in [-1, 1] for j in [-1, 1] for k in [-1, 1]])
    assert np.isclose(convex_hull_volume(np.vstack((cube, np.zeros((1, 3))))), 8)
    with pytest.raises(InsufficientPointsError):
        convex_hull([[0, 0], [1, 0]])
    with pytest.raises(ConvexHullError):
        # InsufficientPointsError is a ConvexHullError
        convex_hull_vertices([[0, 0, 0], [1, 0, 0], [0, 1, 0]])
    with pytest.raises(ConvexHullError):
        convex_hull([[0, 0], [1, 1], [2, 2], [3, 3]])


def test_simplex_volume():
    assert np.isclose(simplex_volume([[0, 0], [1, 0], [0, 1]]), 0.5)
    assert np.isclose(simplex_volume([[0, 0], [0, 1], [1, 0]]), 0.5)
    assert np.isclose(simplex_volume(np.vstack((np.zeros((1, 3)), 2 * np.eye(3)))), 8 / 6)
    assert np.isclose(simplex_volume([[0, 0], [1, 1], [2, 2]]), 0)


def test_compute_polytope_vertices():
    V, n_rays = compute_polytope_vertices(BOX_2D_A, BOX_2D_b)
    assert n_rays == 0
    assert check_matrices_are_equal_ignoring_row_order(V, [[1, 1], [1, -1], [-1, 1], [-1, -1]])
    # Unbounded polyhedron has a vertex and two rays
    V, n_rays = compute_polytope_vertices(np.eye(2), np.ones((2,)))
    assert n_rays == 2
    assert check_matrices_are_equal_ignoring_row_order(V, [[1, 1]])
    with pytest.raises(DimensionMismatchError):
        compute_polytope_vertices(BOX_2D_A, np.ones((3,)))


def test_remove_redundant_vertices():
    V = [[1, 1], [-1, 1], [1, -1], [-1, -1], [0, 0], [0.5, 0.2]]
    assert check_matrices_are_equal_ignoring_row_order(remove_redundant_vertices(V), V[:4])
    # Works with point clouds that are not full-dimensional
    assert check_matrices_are_equal_ignoring_row_order(
        remove_redundant_vertices([[0, 0, 1], [1, 1, 1], [0.5, 0.5, 1]]), [[0, 0, 1], [1, 1, 1]]
    )


def test_solve_linear_program():
    x = cp.Variable((2,))
    constraints = [BOX_2D_A @ x <= BOX_2D_b]
    x_value, optimal_value = solve_linear_program(x, np.array([1, 2]) @ x, constraints, task_str="box")
    assert np.allclose(x_value, [-1, -1], atol=1e-6)
    assert np.isclose(optimal_value, -3, atol=1e-6)
    x_value, optimal_value = solve_linear_program(x, np.array([1, 2]) @ x, constraints, maximize=True)
    assert np.allclose(x_value, [1, 1], atol=1e-6)
    assert np.isclose(optimal_value, 3, atol=1e-6)
    with pytest.raises(InfeasibleOptimizationError) as excinfo:
        solve_linear_program(x, x[0], [x[0] <= -1, x[0] >= 1], task_str="infeasible")
    assert excinfo.value.status in INFEASIBLE_STATUSES
    assert "infeasible" in str(excinfo.value)
    with pytest.raises(InfeasibleOptimizationError) as excinfo:
        solve_linear_program(x, x[0], [x[0] <= 1], task_str="unbounded")
    assert excinfo.value.status in UNBOUNDED_STATUSES


def test_is_feasible():
    x = cp.Variable((2,))
    assert is_feasible([BOX_2D_A @ x <= BOX_2D_b])
    assert not is_feasible([BOX_2D_A @ x <= -BOX_2D_b])
    assert is_feasible([x[0] <= 1])


def test_numerics():
    assert matrix_rank(np.eye(3)) == 3
    assert matrix_rank([[1, 1], [2, 2]]) == 1
    assert matrix_rank(np.empty((0, 2))) == 0
    assert matrix_rank([[1, 0], [0, 1e-12]]) == 1
    assert np.array_equal(sign_vector([-2, 0, 3]), [-1, 0, 1])
    assert index_of_maximum([1, 3, 3, 2]) == 1
    assert vector_leq([1, 2], [1, 2])
    assert not vector_leq([1, 2 + 1e-6], [1, 2])
    assert vector_leq([1, 2 + 1e-6], [1, 2], tol=1e-5)
    assert vector_isclose([1, 2], [1, 2 + 1e-8], 1e-6)
    assert not vector_isclose([1, 2], [1, 2.1], 1e-6)


def test_error_hierarchy():
    for error_class in [
        DimensionMismatchError,
        EmptySetError,
        SetNotImplementedError,
        InfeasibleOptimizationError,
        DataConversionError,
        ConvexHullError,
        InsufficientPointsError,
    ]:
        assert issubclass(error_class, SetOperationError)
    assert issubclass(DimensionMismatchError, ValueError)
    assert issubclass(SetNotImplementedError, NotImplementedError)
    err = DimensionMismatchError(expected=2, got=3)
    assert err.expected == 2 and err.got == 3
    assert str(err) == "Mismatch in dimensions (expected: 2, got: 3)"
    assert str(DimensionMismatchError(2, 3, message="custom")) == "custom"
    source = RuntimeError("solver crashed")
    err = InfeasibleOptimizationError("failed", source=source, status="infeasible")
    assert err.source is source
    assert err.status == "infeasible"
