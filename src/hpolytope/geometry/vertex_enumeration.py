"""Conversion of bounded intersections of half spaces to their vertices.

The vertices are found by polar duality. Given a point strictly inside the region,
the half spaces are translated so that the point becomes the origin, and every half
space ``n_i * x <= b_i`` (with ``b_i > 0``) is mapped to the dual point ``n_i / b_i``.
The facets of the convex hull of the dual points then correspond one to one to the
vertices of the region: a dual facet lying in the plane ``{y : v * y = 1}`` gives the
vertex ``v``.

Dual facets that are coplanar are triangulated by the hull builder into several
triangles, each of which produces a copy of the same vertex. The copies are removed
by :func:`filter_vertices`.

"""

from __future__ import annotations

import logging

import numpy as np
from scipy.spatial import QhullError

import hpolytope as hp

__all__ = [
    "filter_vertices",
    "enumerate_vertices_from_interior",
    "enumerate_vertices",
]

module_sections = ["geometry"]
logger = logging.getLogger(__name__)


def filter_vertices(vertices: np.ndarray, epsilon: float) -> np.ndarray:
    """Remove vertices that coincide up to a quantization tolerance.

    The coordinates are divided by the resolution

        ``res = mag * max(|epsilon| / mag, machine_epsilon)``

    where ``mag`` is the largest absolute coordinate in the point set, and rounded to
    the nearest integer, with ties rounded away from zero. A vertex is kept only if no earlier vertex was rounded to the same
    integer triple, thus the order of first occurrence is preserved. Vertices that
    are merged are not averaged; the first one represents the group.

    Note:
        Two points that are closer than ``res`` may still end up in neighboring
        cells of the quantization grid, and thus both be kept.

    Parameters:
        vertices: ``shape=(3, num_pts)``

            Vertices to be filtered.
        epsilon: Quantization tolerance.

    Returns:
        The kept vertices, ``shape=(3, num_kept)``.

    """
    vertices = np.asarray(vertices, dtype=float)
    if vertices.ndim != 2 or vertices.shape[0] != hp.DIM:
        raise ValueError("Vertices must be of shape (3, num_pts)")
    if vertices.shape[1] == 0:
        return vertices.copy()

    mag = max(abs(vertices.max()), abs(vertices.min()))
    if mag == 0:
        # All vertices are the origin.
        return vertices[:, :1].copy()
    res = mag * max(abs(epsilon) / mag, hp.MACHINE_EPSILON)

    # Round half away from zero. Adding zero turns -0.0 into 0.0, so that both map
    # to the same key.
    scaled = vertices / res
    quantized = np.sign(scaled) * np.floor(np.abs(scaled) + 0.5) + 0.0
    _, first = np.unique(quantized, axis=1, return_index=True)

    return vertices[:, np.sort(first)]


@hp.time_logger(sections=module_sections)
def enumerate_vertices_from_interior(
    h_poly: hp.HalfSpaceLike,
    interior: np.ndarray,
    epsilon: float = hp.DEFAULT_EPSILON,
) -> np.ndarray:
    """Find the vertices of a bounded intersection of half spaces.

    Parameters:
        h_poly: ``shape=(num_planes, 4)``

            Half spaces, each row ``(a, b, c, d)`` representing
            ``a*x + b*y + c*z + d <= 0``.
        interior: ``shape=(3,)``

            A point strictly inside all half spaces, see
            :func:`~hpolytope.geometry.half_space.find_interior`.
        epsilon: ``default=DEFAULT_EPSILON``

            Tolerance for merging vertices, also used to tighten the tolerance of the
            hull builder.

    Raises:
        ValueError: If ``interior`` is not strictly inside all half spaces.
        ValueError: If the intersection is unbounded.
        QhullError: If the convex hull of the dual points cannot be built, typically
            because there are too few half spaces to bound a region.

    Returns:
        The vertices, ``shape=(3, num_vertices)``.

    """
    h = hp.half_space.normalize_half_spaces(h_poly)
    interior = np.asarray(interior, dtype=float).ravel()
    if interior.size != hp.DIM:
        raise ValueError("The interior point must have three coordinates")

    # Offsets of the half spaces translated so that the interior point is the origin.
    b = -h[:, hp.DIM] - h[:, : hp.DIM] @ interior
    if np.any(b <= 0):
        raise ValueError(
            f"Point {interior} is not strictly inside half spaces {np.where(b <= 0)[0]}"
        )
    dual_pts = (h[:, : hp.DIM] / b.reshape((-1, 1))).T

    hull_tol = min(epsilon, hp.DEFAULT_HULL_TOLERANCE)
    # Clockwise winding, so that the facet normals point towards the dual origin.
    triangles = hp.convex_hull.triangulated_hull(
        dual_pts, ccw=False, coplanar=True, tol=hull_tol
    )

    p0 = dual_pts[:, triangles[:, 0]]
    p1 = dual_pts[:, triangles[:, 1]]
    p2 = dual_pts[:, triangles[:, 2]]
    normals = np.cross(p1 - p0, p2 - p1, axis=0)

    # Triangulation of merged facets may produce triangles of zero area.
    scale = np.max(np.abs(dual_pts)) ** 2
    non_degenerate = np.linalg.norm(normals, axis=0) > 1e2 * hp.MACHINE_EPSILON * scale
    normals = normals[:, non_degenerate]
    p1 = p1[:, non_degenerate]

    projections = np.sum(normals * p1, axis=0)
    if not np.all(projections < 0):
        # The dual origin is not strictly inside the hull.
        raise ValueError("The intersection of half spaces is unbounded")

    raw_vertices = normals / projections
    vertices = filter_vertices(raw_vertices, epsilon)
    logger.debug(
        f"Found {vertices.shape[1]} vertices from {raw_vertices.shape[1]} dual facets"
    )

    return vertices + interior.reshape((-1, 1))


@hp.time_logger(sections=module_sections)
def enumerate_vertices(
    h_poly: hp.HalfSpaceLike, epsilon: float = hp.DEFAULT_EPSILON
) -> tuple[bool, np.ndarray]:
    """Find the vertices of a bounded intersection of half spaces.

    An interior point is first found by
    :func:`~hpolytope.geometry.half_space.find_interior`, then the vertices are
    computed by :func:`enumerate_vertices_from_interior`.

    Examples:

        >>> success, v = enumerate_vertices(hp.applications.polytopes.unit_cube())
        >>> success, v.shape
        (True, (3, 8))

    Parameters:
        h_poly: ``shape=(num_planes, 4)``

            Half spaces, each row ``(a, b, c, d)`` representing
            ``a*x + b*y + c*z + d <= 0``.
        epsilon: ``default=DEFAULT_EPSILON``

            Tolerance for merging vertices.

    Returns:
        A tuple of two elements.

        :obj:`bool`:
            True if the region is non-empty and bounded, and its vertices were found.

        :obj:`~numpy.ndarray`: ``shape=(3, num_vertices)``

            The vertices. Empty if the enumeration failed.

    """
    success, interior = hp.half_space.find_interior(h_poly)
    if not success:
        logger.debug("Vertex enumeration failed: no interior point")
        return False, np.zeros((hp.DIM, 0))

    try:
        vertices = enumerate_vertices_from_interior(h_poly, interior, epsilon)
    except (QhullError, ValueError) as err:
        logger.debug(f"Vertex enumeration failed: {err}")
        return False, np.zeros((hp.DIM, 0))

    return True, vertices
