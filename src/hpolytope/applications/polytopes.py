"""
Module for creating half space representations of standard polyhedra.

All functions return arrays of ``shape=(num_planes, 4)``, where each row
``(a, b, c, d)`` represents the half space ``a*x + b*y + c*z + d <= 0``, with unit
normal vectors.
"""

from __future__ import annotations

import numpy as np
from scipy.spatial import ConvexHull

import hpolytope as hp


def box(bounding_box: dict[str, hp.number]) -> np.ndarray:
    """Half spaces of an axis-aligned box.

    Parameters:
        bounding_box: Dictionary with keywords ``xmin``, ``xmax``, ``ymin``,
            ``ymax``, ``zmin`` and ``zmax``. Minimum values that are not given
            default to 0; all maximum values must be given.

    Raises:
        ValueError: If a maximum value is missing, or if a maximum is not larger
            than the corresponding minimum.

    Returns:
        Six half spaces, ordered as ``xmax, xmin, ymax, ymin, zmax, zmin``.

    """
    rows = []
    for axis, name in enumerate("xyz"):
        if f"{name}max" not in bounding_box:
            raise ValueError(f"Bounding box is missing {name}max")
        lower = bounding_box.get(f"{name}min", 0)
        upper = bounding_box[f"{name}max"]
        if upper <= lower:
            msg = "{}max={} is not larger than {}min={}".format(
                name, upper, name, lower
            )
            raise ValueError(msg)
        normal = np.zeros(hp.DIM)
        normal[axis] = 1
        rows.append(np.append(normal, -upper))
        rows.append(np.append(-normal, lower))
    return np.array(rows, dtype=float)


def unit_cube() -> np.ndarray:
    """Half spaces of the unit cube ``[0, 1]^3``."""
    return box({"xmax": 1, "ymax": 1, "zmax": 1})


def simplex() -> np.ndarray:
    """Half spaces of the tetrahedron with vertices in the origin and the unit
    vectors."""
    h = np.array(
        [
            [-1, 0, 0, 0],
            [0, -1, 0, 0],
            [0, 0, -1, 0],
            [1, 1, 1, -1],
        ],
        dtype=float,
    )
    return hp.half_space.normalize_half_spaces(h)


def octahedron(radius: float = 1) -> np.ndarray:
    """Half spaces of the octahedron ``|x| + |y| + |z| <= radius``.

    Each vertex of the octahedron is shared by four facets, which makes it a useful
    test of degenerate vertices.

    """
    if radius <= 0:
        raise ValueError("The radius of the octahedron must be positive")
    signs = np.array(np.meshgrid([-1, 1], [-1, 1], [-1, 1], indexing="ij"))
    normals = signs.reshape((hp.DIM, -1)).T
    h = np.hstack((normals, -radius * np.ones((normals.shape[0], 1))))
    return hp.half_space.normalize_half_spaces(h)


def slab(axis: int = 0, lower: float = -1, upper: float = 1) -> np.ndarray:
    """Half spaces of the (unbounded) region between two parallel planes.

    Parameters:
        axis: ``default=0``

            The coordinate direction normal to the planes.
        lower: ``default=-1``

            Lower bound of the coordinate.
        upper: ``default=1``

            Upper bound of the coordinate.

    """
    normal = np.zeros(hp.DIM)
    normal[axis] = 1
    return np.array([np.append(normal, -upper), np.append(-normal, lower)])


def half_spaces_from_vertices(vertices: np.ndarray) -> np.ndarray:
    """Half spaces of the convex hull of a point cloud.

    Parameters:
        vertices: ``shape=(3, num_pts)``

            Point cloud, at least four points not in a common plane.

    Raises:
        QhullError: If the point cloud has no volume.

    Returns:
        One half space per facet of the convex hull. Coplanar triangles of the hull
        are represented once.

    """
    hull = ConvexHull(np.asarray(vertices, dtype=float).T)
    # Triangles of the same (merged) facet share their equation.
    _, ind = np.unique(hull.equations.round(decimals=12), axis=0, return_index=True)
    return hull.equations[np.sort(ind)]
