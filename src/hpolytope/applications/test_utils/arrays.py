"""Test helpers for point arrays."""

import numpy as np
from scipy.spatial.distance import cdist


def compare_point_sets(a: np.ndarray, b: np.ndarray, tol: float = 1e-6) -> bool:
    """Compare two point sets and check that they are equal up to a column
    permutation.

    Parameters:
        a: ``shape=(nd, n)``

            First point set.
        b: ``shape=(nd, n)``

            Second point set.
        tol: Maximum distance between matching points.

    Returns:
        True if every point in ``a`` has a point in ``b`` within a distance ``tol``
        and vice versa, and the sets have the same number of points.

    """
    a = np.atleast_2d(a)
    b = np.atleast_2d(b)

    if a.shape != b.shape:
        return False
    if a.shape[1] == 0:
        return True

    dist = cdist(a.T, b.T)
    return bool(np.all(dist.min(axis=0) <= tol) and np.all(dist.min(axis=1) <= tol))
