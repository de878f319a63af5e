"""Triangulated convex hulls of 3d point clouds.

The hull is computed by Qhull through :class:`scipy.spatial.ConvexHull`. Qhull does
not guarantee a consistent winding of the triangles it reports, thus the triangles
are reoriented here using the facet equations, so that callers can rely on the
orientation of the cross product of the triangle edges.

"""

from __future__ import annotations

import logging

import numpy as np
from scipy.spatial import ConvexHull

import hpolytope as hp

__all__ = ["triangulated_hull"]

module_sections = ["utils"]
logger = logging.getLogger(__name__)


@hp.time_logger(sections=module_sections)
def triangulated_hull(
    points: np.ndarray,
    ccw: bool = True,
    coplanar: bool = True,
    tol: float = hp.DEFAULT_HULL_TOLERANCE,
) -> np.ndarray:
    """Compute the triangulated boundary of the convex hull of a point cloud.

    Examples:

        >>> p = np.array([[0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])
        >>> triangulated_hull(p).shape
        (4, 3)

    Parameters:
        points: ``shape=(3, num_pts)``

            Point cloud, one point per column.
        ccw: ``default=True``

            Winding of the returned triangles. If True, the vertices of each
            triangle are ordered counterclockwise when seen from outside the hull,
            thus the right-hand normal ``(p1 - p0) x (p2 - p1)`` points outwards.
            If False, the order is clockwise and the right-hand normal points
            towards the interior of the hull.
        coplanar: ``default=True``

            If True, points that are coplanar with a facet are kept by Qhull (option
            ``Qc``) rather than being discarded as interior points.
        tol: ``default=DEFAULT_HULL_TOLERANCE``

            Relative pre-merge centrum radius. It is scaled by the largest absolute
            coordinate of the point cloud and passed to Qhull (option ``C-n``).
            Facets that are closer to coplanar than this are merged, which makes
            near-coincident points harmless.

    Raises:
        ValueError: If ``points`` is not three dimensional.
        QhullError: If Qhull cannot construct the hull, e.g. for fewer than four
            points, or for a point cloud with no volume.

    Returns:
        Array of ``shape=(num_triangles, 3)``, each row holding the column indices in
        ``points`` of the vertices of one boundary triangle.

    """
    points = np.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[0] != hp.DIM:
        raise ValueError("Point cloud must be of shape (3, num_pts)")

    if points.shape[1] == 0:
        raise ValueError("Cannot compute the convex hull of an empty point cloud")

    centrum_radius = abs(tol) * np.max(np.abs(points))
    options = [f"C-{np.format_float_positional(centrum_radius, trim='-')}"]
    if coplanar:
        options.append("Qc")

    # Qhull may modify a contiguous input array in place, thus pass a copy.
    hull = ConvexHull(points.T.copy(), qhull_options=" ".join(options))

    simplices = hull.simplices.copy()
    p = points.T
    normals = np.cross(
        p[simplices[:, 1]] - p[simplices[:, 0]], p[simplices[:, 2]] - p[simplices[:, 1]]
    )
    # Qhull reports outward pointing normals in the facet equations. Flip the
    # triangles that disagree.
    flip = np.sum(normals * hull.equations[:, :3], axis=1) < 0
    simplices[flip] = simplices[flip][:, [0, 2, 1]]

    if not ccw:
        simplices = simplices[:, [0, 2, 1]]

    logger.debug(
        f"Convex hull of {points.shape[1]} points has {simplices.shape[0]} triangles"
    )
    return simplices
