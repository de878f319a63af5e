"""This module contains functions for computations relating to half spaces.

Throughout, an intersection of half spaces (an H-representation) is an array of
``shape=(num_planes, 4)``, where row ``i`` holds the coefficients ``(a, b, c, d)`` of
the constraint

    ``a*x + b*y + c*z + d <= 0``.

The normal vector ``(a, b, c)`` thus points out of the half space.

"""

from __future__ import annotations

import logging

import numpy as np

import hpolytope as hp

__all__ = [
    "normalize_half_spaces",
    "points_inside_half_space_intersection",
    "is_bounded",
    "find_interior",
    "overlap",
]

module_sections = ["geometry"]
logger = logging.getLogger(__name__)


def _as_half_spaces(h_poly: hp.HalfSpaceLike) -> np.ndarray:
    """Convert an H-representation to a float array and check its shape."""
    h = np.asarray(h_poly, dtype=float)
    if h.ndim != 2 or h.shape[1] != hp.DIM + 1:
        raise ValueError(
            f"Half spaces must be given as an array of shape (num_planes, 4), "
            f"got shape {h.shape}"
        )
    return h


def normalize_half_spaces(h_poly: hp.HalfSpaceLike) -> np.ndarray:
    """Scale the half spaces so that all normal vectors have unit length.

    The full row, including the offset, is divided by the norm of the normal vector.
    After scaling, the value ``a*x + b*y + c*z + d`` of a row is the signed distance
    from the point ``(x, y, z)`` to the bounding plane.

    Parameters:
        h_poly: ``shape=(num_planes, 4)``

            Half spaces, see module documentation.

    Raises:
        ValueError: If a normal vector is zero.

    Returns:
        Scaled half spaces, ``shape=(num_planes, 4)``.

    """
    h = _as_half_spaces(h_poly)
    norms = np.linalg.norm(h[:, : hp.DIM], axis=1)
    if np.any(norms == 0):
        raise ValueError(
            f"Half spaces {np.where(norms == 0)[0]} have a zero normal vector"
        )
    return h / norms.reshape((-1, 1))


def points_inside_half_space_intersection(
    h_poly: hp.HalfSpaceLike, pts: np.ndarray, tol: float = 0
) -> np.ndarray:
    """Find the points that lie in the intersection of half spaces.

    Examples:

        >>> h = np.array([[-1, 0, 0, 0], [1, 0, 0, -1]])
        >>> pts = np.array([[0.5, 2, -1], [0, 0, 0], [0, 0, 0]])
        >>> points_inside_half_space_intersection(h, pts)
        array([ True, False, False])

    Parameters:
        h_poly: ``shape=(num_planes, 4)``

            Half spaces, see module documentation.
        pts: ``shape=(3, np)`` or ``shape=(3,)``

            The points to be tested.
        tol: ``default=0``

            A point is accepted if no constraint is violated by more than ``tol``.
            Note that the violation is measured in the scaling of ``h_poly``; it is a
            distance only if the half spaces are normalized.

    Returns:
        A logical array with ``shape=(np, )``. ``out[i]`` is True if ``pts[:, i]``
        is in all half spaces.

    """
    h = _as_half_spaces(h_poly)
    pts = np.asarray(pts, dtype=float).reshape((hp.DIM, -1))
    values = h[:, : hp.DIM] @ pts + h[:, hp.DIM :]
    return np.all(values <= tol, axis=0)


@hp.time_logger(sections=module_sections)
def is_bounded(h_poly: hp.HalfSpaceLike, tol: float = hp.DEFAULT_EPSILON) -> bool:
    """Check if an intersection of half spaces is bounded.

    The intersection, if non-empty, is bounded if and only if its recession cone
    ``{x : A x <= 0}`` contains only the origin, where the rows of ``A`` are the
    normal vectors. For each coordinate direction, a linear program seeks a point in
    the cone with a non-zero component in that direction, within the unit box.

    Note:
        The test is independent of the offsets, thus an empty intersection is
        reported as bounded if its normal vectors would bound any translation of the
        half spaces.

    Parameters:
        h_poly: ``shape=(num_planes, 4)``

            Half spaces, see module documentation.
        tol: ``default=DEFAULT_EPSILON``

            Components of a recession direction smaller than this are considered
            round-off errors.

    Returns:
        True if the recession cone is trivial.

    """
    h = normalize_half_spaces(h_poly)
    if h.shape[0] <= hp.DIM:
        # Fewer than four normal vectors cannot positively span the space.
        return False

    A = h[:, : hp.DIM]
    b = np.zeros(A.shape[0])
    for direction in np.vstack((np.eye(hp.DIM), -np.eye(hp.DIM))):
        value, _ = hp.linear_programming.linprog(-direction, A, b, bounds=(-1, 1))
        if -value > tol:
            logger.debug(f"Half spaces are unbounded in direction {direction}")
            return False
    return True


@hp.time_logger(sections=module_sections)
def find_interior(h_poly: hp.HalfSpaceLike) -> tuple[bool, np.ndarray]:
    """Find a point in the interior of a bounded intersection of half spaces.

    Note:
        The rows are first normalized so that the offsets measure distances. With
        a slack variable ``w`` (the inward shift of all half spaces), the linear
        program

            ``max w  subject to  n_i * x + w <= -d_i  for all rows i``

        is solved. Its solution is the point that maximizes the minimum distance to
        the bounding planes, thus a point well inside the region. The region has
        an interior if the optimal shift is positive and finite, that is, if the
        minimized objective ``-w`` is negative.

        A finite optimum does not rule out unbounded regions, e.g. a slab between
        two parallel planes, thus boundedness is checked separately by
        :func:`is_bounded`. Empty and unbounded regions both count as failure.

    Examples:

        >>> success, x = find_interior(hp.applications.polytopes.unit_cube())
        >>> success, x
        (True, array([0.5, 0.5, 0.5]))

    Parameters:
        h_poly: ``shape=(num_planes, 4)``

            Half spaces, see module documentation.

    Raises:
        ValueError: If a normal vector is zero.

    Returns:
        A tuple of two elements.

        :obj:`bool`:
            True if an interior point was found.

        :obj:`~numpy.ndarray`: ``shape=(3,)``

            The interior point. Filled with ``nan`` if no point was found.

    """
    h = normalize_half_spaces(h_poly)
    num_planes = h.shape[0]
    if num_planes == 0:
        logger.debug("No half spaces given, the region is all of space")
        return False, np.full(hp.DIM, np.nan)

    A = np.hstack((h[:, : hp.DIM], np.ones((num_planes, 1))))
    b = -h[:, hp.DIM]
    c = np.zeros(hp.DIM + 1)
    c[hp.DIM] = -1.0

    min_max_dist, x = hp.linear_programming.linprog(c, A, b)

    if not (min_max_dist < 0 and not np.isinf(min_max_dist)):
        logger.debug(
            f"No interior point of {num_planes} half spaces, optimal value "
            f"{min_max_dist}"
        )
        return False, np.full(hp.DIM, np.nan)

    if not is_bounded(h):
        logger.debug(f"Intersection of {num_planes} half spaces is unbounded")
        return False, np.full(hp.DIM, np.nan)

    return True, x[: hp.DIM]


@hp.time_logger(sections=module_sections)
def overlap(
    h_poly_0: hp.HalfSpaceLike,
    h_poly_1: hp.HalfSpaceLike,
    eps: float = hp.DEFAULT_EPSILON,
) -> bool:
    """Check if two intersections of half spaces overlap.

    The half spaces of both regions are stacked, and the same maximum inward shift
    problem as in :func:`find_interior` is solved, without normalization of the
    rows. The regions overlap if the minimized objective is below ``-eps``, thus
    regions that merely touch are not considered overlapping.

    Examples:

        >>> cube = hp.applications.polytopes.unit_cube()
        >>> shifted = hp.applications.polytopes.box(
        ...     {"xmin": 0.5, "xmax": 1.5, "ymax": 1, "zmax": 1}
        ... )
        >>> overlap(cube, shifted)
        True

    Parameters:
        h_poly_0: ``shape=(m, 4)``

            Half spaces of the first region.
        h_poly_1: ``shape=(n, 4)``

            Half spaces of the second region.
        eps: ``default=DEFAULT_EPSILON``

            Margin by which the intersection must be more than empty.

    Returns:
        True if the intersection of the two regions has an interior beyond the
        margin.

    """
    h = np.vstack((_as_half_spaces(h_poly_0), _as_half_spaces(h_poly_1)))
    num_planes = h.shape[0]
    if num_planes == 0:
        return False

    A = np.hstack((h[:, : hp.DIM], np.ones((num_planes, 1))))
    b = -h[:, hp.DIM]
    c = np.zeros(hp.DIM + 1)
    c[hp.DIM] = -1.0

    min_max_dist, _ = hp.linear_programming.linprog(c, A, b)

    return bool(min_max_dist < -eps and not np.isinf(min_max_dist))
