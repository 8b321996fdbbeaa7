# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose: Test the HPolytope class

import numpy as np
import pytest

from geosets import (
    DimensionMismatchError,
    EmptySetError,
    HPolytope,
    InfeasibleOptimizationError,
    Interval,
    SetNotImplementedError,
    VPolytope,
    Zonotope,
)
from geosets.common import check_matrices_are_equal_ignoring_row_order


def test_init():
    P = HPolytope([[1, 0], [0, 1], [-1, -1]], [1, 1, 0])
    assert P.dim == 2
    assert P.n_constraints == 3
    assert np.array_equal(P.H, [[1, 0, 1], [0, 1, 1], [-1, -1, 0]])
    with pytest.raises(DimensionMismatchError):
        HPolytope([[1, 0], [0, 1]], [1, 1, 1])
    with pytest.raises(ValueError):
        HPolytope([[1, np.nan]], [1])
    with pytest.raises(ValueError):
        P.A[0, 0] = 5
    # Whole space
    P_whole = HPolytope(np.empty((0, 2)), np.empty((0,)))
    assert P_whole.dim == 2
    assert not P_whole.empty()
    assert not P_whole.degenerate()
    assert P_whole.contains_point([1e3, -1e3])


def test_from_interval_and_random():
    P = HPolytope.from_interval(Interval([0, -1], [2, 1]))
    assert np.isclose(P.volume(), 4)
    assert check_matrices_are_equal_ignoring_row_order(P.to_vertices(), [[0, -1], [0, 1], [2, -1], [2, 1]])
    with pytest.raises(TypeError):
        HPolytope.from_interval(Zonotope.from_unit_box(2))
    P_random = HPolytope.from_random(2, 3, seed=0)
    assert P_random.n_constraints == 7
    assert not P_random.empty()
    assert not P_random.degenerate()
    assert 0 < P_random.volume() <= 4 + 1e-6
    assert P_random.contains_point(P_random.center())
    assert np.array_equal(HPolytope.from_random(2, 3, seed=0).b, P_random.b)


def test_empty():
    P = HPolytope([[1], [-1]], [0, -1])
    assert P.empty()
    assert P.degenerate()
    assert P.volume() == 0.0
    with pytest.raises(EmptySetError):
        P.to_vertices()
    with pytest.raises(ValueError):
        # EmptySetError is a ValueError
        P.to_vertices()
    with pytest.raises(InfeasibleOptimizationError):
        P.center()
    with pytest.raises(InfeasibleOptimizationError):
        P.support_function([1])


def test_to_vertices_and_volume():
    P = HPolytope([[-1, 0], [0, -1], [1, 1]], [0, 0, 1])
    assert check_matrices_are_equal_ignoring_row_order(P.to_vertices(), [[0, 0], [1, 0], [0, 1]])
    assert np.isclose(P.volume(), 0.5)
    # Redundant constraints do not change the vertices
    P_redundant = HPolytope([[-1, 0], [0, -1], [1, 1], [1, 0]], [0, 0, 1, 5])
    assert check_matrices_are_equal_ignoring_row_order(P_redundant.to_vertices(), P.to_vertices())


def test_unbounded():
    P = HPolytope([[1, 0], [0, 1]], [1, 1])
    with pytest.warns(UserWarning, match="ray"):
        V = P.to_vertices()
    assert check_matrices_are_equal_ignoring_row_order(V, [[1, 1]])
    assert not P.degenerate()
    assert P.volume() == np.inf
    with pytest.raises(InfeasibleOptimizationError):
        P.support_function([-1, 0])
    with pytest.raises(InfeasibleOptimizationError):
        P.center()
    support_vector, support_value = P.support_function([1, 1])
    assert np.allclose(support_vector, [1, 1], atol=1e-6)
    assert np.isclose(support_value, 2, atol=1e-6)


def test_chebyshev_centering_and_degeneracy():
    center, radius = HPolytope.from_unit_box(2).chebyshev_centering()
    assert np.allclose(center, [0, 0], atol=1e-6)
    assert np.isclose(radius, 1, atol=1e-6)
    P_segment = HPolytope([[1, 0], [-1, 0], [0, 1], [0, -1]], [1, 1, 0, 0])
    assert P_segment.degenerate()
    assert not P_segment.empty()
    assert P_segment.volume() == 0.0


def test_support_function():
    P = HPolytope([[-1, 0], [0, -1], [1, 1]], [0, 0, 1])
    support_vector, support_value = P.support_function([1, 0])
    assert np.allclose(support_vector, [1, 0], atol=1e-6)
    assert np.isclose(support_value, 1, atol=1e-6)
    support_vector, support_value = P.support_function([-1, -1])
    assert np.allclose(support_vector, [0, 0], atol=1e-6)
    assert np.isclose(support_value, 0, atol=1e-6)


def test_matmul():
    P = HPolytope.from_unit_box(2)
    P_scaled = P.matmul(np.diag([2, 1]))
    assert check_matrices_are_equal_ignoring_row_order(P_scaled.to_vertices(), [[2, 1], [2, -1], [-2, 1], [-2, -1]])
    M = np.array([[1, 1], [0, 1]])
    assert check_matrices_are_equal_ignoring_row_order(
        P.matmul(M).to_vertices(), VPolytope.from_unit_box(2).matmul(M).to_vertices()
    )
    with pytest.raises(DimensionMismatchError):
        P.matmul_(np.ones((2, 3)))
    with pytest.raises(SetNotImplementedError):
        P.matmul_(np.ones((3, 2)))
    with pytest.raises(SetNotImplementedError):
        P.matmul_([[1, 0], [0, 0]])
    with pytest.raises(NotImplementedError):
        P.matmul_([[1, 1], [1, 1]])
    assert np.array_equal(P.A, HPolytope.from_unit_box(2).A)


def test_inverse_matmul():
    P = HPolytope.from_unit_box(2)
    P_preimage = P.inverse_matmul(np.diag([2, 1]))
    assert check_matrices_are_equal_ignoring_row_order(
        P_preimage.to_vertices(), [[0.5, 1], [0.5, -1], [-0.5, 1], [-0.5, -1]]
    )
    # Pre-image under a singular matrix is unbounded
    P.inverse_matmul_([[1, 0], [0, 0]])
    assert not P.empty()
    with pytest.raises(DimensionMismatchError):
        P.inverse_matmul_(np.ones((3, 2)))


def test_translate_and_contains_point():
    P = HPolytope([[-1, 0], [0, -1], [1, 1]], [0, 0, 1])
    P.translate_([1, 2])
    assert check_matrices_are_equal_ignoring_row_order(P.to_vertices(), [[1, 2], [2, 2], [1, 3]])
    assert P.contains_point([1.2, 2.2])
    assert P.contains_point([1, 2])
    assert P.contains_point([1 - 1e-10, 2])
    assert not P.contains_point([0, 0])


def test_minkowski_sum():
    # Exact for sets with common facet normals
    P = HPolytope.from_unit_box(2)
    Q = HPolytope.from_interval(Interval([0, 0], [1, 2]))
    P_sum = P.minkowski_sum(Q)
    assert check_matrices_are_equal_ignoring_row_order(P_sum.to_vertices(), [[-1, -1], [2, -1], [-1, 3], [2, 3]])
    # Template directions come from self only for other representations, which gives an outer approximation
    triangle = VPolytope([[0, 0], [1, 0], [0, 1]])
    P_outer = P.minkowski_sum(triangle)
    assert P_outer.n_constraints == 4
    assert check_matrices_are_equal_ignoring_row_order(P_outer.to_vertices(), [[-1, -1], [2, -1], [-1, 2], [2, 2]])
    exact_sum = VPolytope.from_unit_box(2).minkowski_sum(triangle)
    assert np.all(P_outer.contains(exact_sum.to_vertices()))
    assert P_outer.volume() >= exact_sum.volume()
    with pytest.raises(SetNotImplementedError):
        P.minkowski_sum_(np.ones((2,)))
    with pytest.raises(DimensionMismatchError):
        P.minkowski_sum_(Zonotope.from_unit_box(3))


def test_template_directions():
    P = HPolytope([[2, 0], [0, 0], [1, 0], [0, -3]], [2, 1, 1, 3])
    # Zero rows are skipped, and parallel rows appear once
    directions = P.template_directions(Interval.from_unit_box(2))
    assert check_matrices_are_equal_ignoring_row_order(directions, [[1, 0], [0, -1]])
    directions = P.template_directions(HPolytope.from_unit_box(2))
    assert check_matrices_are_equal_ignoring_row_order(directions, [[1, 0], [0, -1], [-1, 0], [0, 1]])


def test_degenerate_thin_and_trivial_rows():
    # Thin but full-dimensional boxes agree with Interval
    thin_interval = Interval([0, 0], [1e-7, 1])
    assert HPolytope.from_interval(thin_interval).degenerate() == thin_interval.degenerate()
    assert not HPolytope.from_interval(thin_interval).degenerate()
    # A zero row with zero offset is trivially satisfied
    P = HPolytope(np.vstack((HPolytope.from_unit_box(2).A, np.zeros((1, 2)))), np.hstack((np.ones((4,)), [0])))
    assert not P.degenerate()
    assert np.isclose(P.volume(), 4)
    # Slanted segment
    P_slanted = HPolytope([[1, -1], [-1, 1], [1, 0], [-1, 0]], [0, 0, 1, 1])
    assert P_slanted.degenerate()


def test_matmul_is_inverse_matmul_under_inverse():
    P = HPolytope([[-1, 0], [0, -1], [1, 1]], [0, 0, 1])
    M = np.array([[2, 1], [0, 1]])
    P_image = P.matmul(M)
    assert np.allclose(P_image.A, P.A @ np.linalg.inv(M))
    assert check_matrices_are_equal_ignoring_row_order(P_image.to_vertices(), P.to_vertices() @ M.T)
    P_via_inverse = P.inverse_matmul(np.linalg.inv(M))
    assert check_matrices_are_equal_ignoring_row_order(P_via_inverse.to_vertices(), P_image.to_vertices())
    assert np.allclose(P.inverse_matmul(M).A, P.A @ M)
