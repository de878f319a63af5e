"""Tests of functions in hp.geometry.half_space."""

import numpy as np
import pytest

import hpolytope as hp
from hpolytope.applications import polytopes
from hpolytope.geometry import half_space


def test_normalize_half_spaces():
    h = np.array([[2, 0, 0, -4], [0, 3, 4, 5]])
    known = np.array([[1, 0, 0, -2], [0, 0.6, 0.8, 1]])
    assert np.allclose(half_space.normalize_half_spaces(h), known)


def test_normalize_zero_normal_raises():
    h = np.array([[1, 0, 0, -1], [0, 0, 0, 1]])
    with pytest.raises(ValueError):
        half_space.normalize_half_spaces(h)


@pytest.mark.parametrize("h", [np.zeros((3, 3)), np.zeros(4), np.zeros((2, 5))])
def test_wrong_shape_raises(h):
    with pytest.raises(ValueError):
        half_space.find_interior(h)


def test_points_inside_unit_cube():
    pts = np.array(
        [[0.5, 1.5, 0, 0.5, -1e-3], [0.5, 0.5, 0, 0.5, 0], [0.5, 0.5, 0, 1, 0]]
    )
    h = polytopes.unit_cube()
    inside = half_space.points_inside_half_space_intersection(h, pts)
    # Points on the boundary are inside; the last point is just outside.
    assert np.all(inside == np.array([True, False, True, True, False]))


def test_points_inside_with_tolerance():
    pt = np.array([1 + 1e-8, 0.5, 0.5])
    h = polytopes.unit_cube()
    assert not half_space.points_inside_half_space_intersection(h, pt)[0]
    assert half_space.points_inside_half_space_intersection(h, pt, tol=1e-6)[0]


class TestFindInterior:
    def test_unit_cube(self):
        # The point that maximizes the minimum distance to the faces is the center.
        success, pt = half_space.find_interior(polytopes.unit_cube())
        assert success
        assert np.allclose(pt, [0.5, 0.5, 0.5])

    def test_box(self):
        h = polytopes.box(
            {"xmin": -2, "xmax": 2, "ymin": 1, "ymax": 3, "zmin": 4, "zmax": 10}
        )
        success, pt = half_space.find_interior(h)
        assert success
        # The y-direction is the narrowest, thus the y-coordinate is unique.
        assert np.isclose(pt[1], 2)
        assert half_space.points_inside_half_space_intersection(h, pt, tol=-0.5)[0]

    def test_scaled_rows(self):
        # Scaling of the rows does not change the region, nor the interior point.
        h = polytopes.unit_cube() * np.array([1, 10, 0.1, 3, 7, 2]).reshape((-1, 1))
        success, pt = half_space.find_interior(h)
        assert success
        assert np.allclose(pt, [0.5, 0.5, 0.5])

    def test_simplex(self):
        success, pt = half_space.find_interior(polytopes.simplex())
        assert success
        # The center of the inscribed sphere, with radius r = 1 / (3 + sqrt(3)).
        r = 1 / (3 + np.sqrt(3))
        assert np.allclose(pt, [r, r, r])

    def test_empty(self):
        # x <= 0 and x >= 1
        h = np.vstack(
            (
                polytopes.unit_cube(),
                np.array([[1, 0, 0, 0], [-1, 0, 0, 1]]),
            )
        )
        success, pt = half_space.find_interior(h)
        assert not success
        assert np.all(np.isnan(pt))

    def test_flat(self):
        # Box with zero thickness in z has no interior.
        h = np.array(
            [
                [1, 0, 0, -1],
                [-1, 0, 0, 0],
                [0, 1, 0, -1],
                [0, -1, 0, 0],
                [0, 0, 1, 0],
                [0, 0, -1, 0],
            ]
        )
        success, _ = half_space.find_interior(h)
        assert not success

    def test_slab_is_unbounded(self):
        success, pt = half_space.find_interior(polytopes.slab())
        assert not success
        assert np.all(np.isnan(pt))

    def test_single_half_space(self):
        success, _ = half_space.find_interior(np.array([[0, 0, 1, -1]]))
        assert not success

    def test_open_box(self):
        # The unit cube without its top face is unbounded in z.
        success, _ = half_space.find_interior(polytopes.unit_cube()[[0, 1, 2, 3, 5]])
        assert not success

    def test_no_half_spaces(self):
        success, _ = half_space.find_interior(np.zeros((0, 4)))
        assert not success

    def test_input_unchanged(self):
        h = polytopes.unit_cube()
        h_copy = h.copy()
        half_space.find_interior(h)
        assert np.all(h == h_copy)


class TestIsBounded:
    @pytest.mark.parametrize(
        "h",
        [polytopes.unit_cube(), polytopes.simplex(), polytopes.octahedron(2)],
    )
    def test_bounded(self, h):
        assert half_space.is_bounded(h)

    @pytest.mark.parametrize(
        "h",
        [
            polytopes.slab(),
            polytopes.slab(axis=2),
            polytopes.unit_cube()[:5],
            # Cone x, y, z >= 0 with one additional cut that does not close it.
            np.array(
                [[-1, 0, 0, 0], [0, -1, 0, 0], [0, 0, -1, 0], [1, -1, 0, -1]]
            ),
        ],
    )
    def test_unbounded(self, h):
        assert not half_space.is_bounded(h)


def _cube(lower, upper):
    return polytopes.box(
        {
            "xmin": lower,
            "xmax": upper,
            "ymin": lower,
            "ymax": upper,
            "zmin": lower,
            "zmax": upper,
        }
    )


class TestOverlap:
    def test_disjoint(self):
        assert not half_space.overlap(_cube(0, 1), _cube(2, 3))

    def test_overlapping(self):
        assert half_space.overlap(_cube(0, 1), _cube(0.5, 1.5))

    def test_touching(self):
        # Shared face, the intersection has zero volume.
        assert not half_space.overlap(_cube(0, 1), _cube(1, 2))

    def test_contained(self):
        assert half_space.overlap(_cube(0, 1), _cube(0.25, 0.75))

    def test_symmetric(self):
        a = polytopes.octahedron(1)
        b = _cube(0.2, 1.2)
        assert half_space.overlap(a, b) == half_space.overlap(b, a)

    def test_margin(self):
        # The cubes overlap by 0.1, thus the maximum inward shift is 0.05.
        a = _cube(0, 1)
        b = _cube(0.9, 2)
        assert half_space.overlap(a, b)
        assert half_space.overlap(a, b, eps=0.04)
        assert not half_space.overlap(a, b, eps=0.06)

    def test_unbounded_regions(self):
        # Two crossing slabs overlap in an unbounded prism, thus the inward shift is
        # bounded and the overlap is found.
        assert half_space.overlap(polytopes.slab(axis=0), polytopes.slab(axis=1))

    def test_disjoint_slabs(self):
        a = polytopes.slab(axis=0, lower=0, upper=1)
        b = polytopes.slab(axis=0, lower=2, upper=3)
        assert not half_space.overlap(a, b)

    def test_default_tolerance(self):
        # An overlap well below the default margin is not detected.
        a = _cube(0, 1)
        b = _cube(1 - hp.DEFAULT_EPSILON / 10, 2)
        assert not half_space.overlap(a, b)
