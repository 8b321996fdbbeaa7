# Copyright (C) 2020-2025 Mitsubishi Electric Research Laboratories (MERL)
#
# SPDX-License-Identifier: AGPL-3.0-or-later

# Code purpose: Test the Zonotope class

import numpy as np
import pytest

from geosets import DimensionMismatchError, Interval, SetNotImplementedError, VPolytope, Zonotope
from geosets.common import check_matrices_are_equal_ignoring_row_order


def test_init():
    Z = Zonotope(np.ones((5, 2)), np.zeros((2,)))
    assert Z.dim == 2
    assert Z.n_generators == 5
    with pytest.raises(DimensionMismatchError):
        Zonotope(np.eye(3), np.zeros((2,)))
    with pytest.raises(ValueError):
        Zonotope(np.eye(2), [0, np.nan])
    with pytest.raises(ValueError):
        Z.G[0, 0] = 2
    with pytest.raises(ValueError):
        Z.c[0] = 2
    # No generators
    for G in [None, [], np.empty((0, 2))]:
        Z_point = Zonotope(G, [1, 2])
        assert Z_point.n_generators == 0
        assert Z_point.G.shape == (0, 2)
        assert Z_point.degenerate()
        assert Z_point.volume() == 0.0
        assert np.array_equal(Z_point.to_vertices(), [[1, 2]])


def test_from_interval_and_random():
    Z = Zonotope.from_interval(Interval([0, -1], [2, 3]))
    assert np.array_equal(Z.c, [1, 1])
    assert np.isclose(Z.volume(), 8)
    assert check_matrices_are_equal_ignoring_row_order(Z.to_vertices(), [[0, -1], [2, -1], [0, 3], [2, 3]])
    with pytest.raises(TypeError):
        Zonotope.from_interval(VPolytope.from_unit_box(2))
    Z_random = Zonotope.from_random(2, 4, center_at_origin=True, seed=0)
    assert Z_random.n_generators == 4
    assert np.array_equal(Z_random.c, [0, 0])
    assert Z_random.contains_point([0, 0])
    assert np.array_equal(Zonotope.from_random(2, 4, seed=3).G, Zonotope.from_random(2, 4, seed=3).G)


@pytest.mark.parametrize("dim", [1, 2, 3, 4])
def test_unit_generator_volume(dim):
    assert np.isclose(Zonotope.from_unit_box(dim).volume(), 2**dim)


def test_volume_matches_vertices():
    Z = Zonotope([[1, 0], [0, 1], [1, 1]], [0.5, -0.5])
    assert np.isclose(Z.volume(), 12)
    V = Z.to_vertices()
    assert V.shape == (6, 2)
    assert np.isclose(VPolytope(V).volume(), Z.volume())
    # Generators that are linearly dependent do not contribute
    assert np.isclose(Zonotope([[1, 0], [2, 0], [0, 1]], [0, 0]).volume(), 12)


def test_degenerate():
    Z_segment = Zonotope([[1, 1], [2, 2]], [0, 0])
    assert Z_segment.degenerate()
    assert Z_segment.volume() == 0.0
    assert check_matrices_are_equal_ignoring_row_order(Z_segment.to_vertices(), [[3, 3], [-3, -3]])
    assert not Zonotope.from_unit_box(2).degenerate()
    assert not Zonotope.from_unit_box(2).empty()


def test_support_function():
    Z = Zonotope([[1, 0], [0, 1]], [0, 0])
    support_vector, support_value = Z.support_function([1, 0])
    assert np.isclose(support_value, 1)
    assert np.array_equal(support_vector, [1, 0])
    Z = Zonotope([[1, 0], [1, 1]], [1, 2])
    support_vector, support_value = Z.support_function([0, -1])
    assert np.isclose(support_value, -2 + 1)
    assert np.array_equal(support_vector, [0, 1])


def test_zonotope_norm_and_contains_point():
    Z = Zonotope.from_unit_box(2)
    assert np.isclose(Z.zonotope_norm([0.5, 0]), 0.5, atol=1e-6)
    assert np.isclose(Z.zonotope_norm([2, -1]), 2, atol=1e-6)
    assert Z.contains_point([1, -1])
    assert not Z.contains_point([1.01, 0])
    # Points outside c + span(G)
    Z_segment = Zonotope([[1, 0]], [0, 0])
    assert Z_segment.zonotope_norm([0, 1]) == np.inf
    assert not Z_segment.contains_point([0, 1])
    assert Z_segment.contains_point([-1, 0])
    # No generators
    Z_point = Zonotope(None, [1, 2])
    assert Z_point.zonotope_norm([1, 2]) == 0.0
    assert Z_point.zonotope_norm([1, 3]) == np.inf
    assert Z_point.contains_point([1, 2])
    with pytest.raises(DimensionMismatchError):
        Z.zonotope_norm([1, 2, 3])


def test_minkowski_sum():
    Z = Zonotope([[1, 1]], [1, 0])
    Z.minkowski_sum_(Zonotope([[1, -1], [0, 2]], [0, 1]))
    assert Z.n_generators == 3
    assert np.array_equal(Z.c, [1, 1])
    assert np.array_equal(Z.G, [[1, 1], [1, -1], [0, 2]])
    Z_with_interval = Zonotope.from_unit_box(2) + Interval([0, 0], [2, 2])
    assert np.array_equal(Z_with_interval.c, [1, 1])
    expected_V = [[-1, -1], [3, -1], [-1, 3], [3, 3]]
    assert check_matrices_are_equal_ignoring_row_order(Z_with_interval.to_vertices(), expected_V)
    with pytest.raises(SetNotImplementedError):
        Z.minkowski_sum_(VPolytope.from_unit_box(2))
    with pytest.raises(DimensionMismatchError):
        Z.minkowski_sum_(Interval.from_unit_box(3))
    assert Z.n_generators == 3


def test_matmul_and_translate():
    Z = Zonotope([[1, 0], [1, 1]], [1, 2])
    M = np.array([[0, -1], [2, 0]])
    Z_mapped = Z.matmul(M)
    assert np.array_equal(Z_mapped.c, M @ Z.c)
    assert np.array_equal(Z_mapped.G, [M @ g for g in Z.G])
    assert check_matrices_are_equal_ignoring_row_order(Z_mapped.to_vertices(), Z.to_vertices() @ M.T)
    Z.translate_([-1, -2])
    assert np.array_equal(Z.center(), [0, 0])
    with pytest.raises(DimensionMismatchError):
        Z.matmul_(np.eye(3))
