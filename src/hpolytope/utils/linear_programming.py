"""Small dense linear programs, as needed for the half-space computations.

The geometric routines in :mod:`~hpolytope.geometry` only need to solve tiny LPs
(three spatial coordinates plus a slack variable) to global optimality, and to learn
whether the problem was infeasible or unbounded. This module wraps
:func:`scipy.optimize.linprog` behind a minimal contract that reports the two failure
modes with sentinel values rather than with a result object.

"""

from __future__ import annotations

import logging

import numpy as np
from scipy.optimize import linprog as _scipy_linprog

import hpolytope as hp

__all__ = ["linprog"]

module_sections = ["utils"]
logger = logging.getLogger(__name__)

# Status codes of scipy.optimize.linprog.
_STATUS_SUCCESS = 0
_STATUS_INFEASIBLE = 2
_STATUS_UNBOUNDED = 3


@hp.time_logger(sections=module_sections)
def linprog(
    c: np.ndarray,
    A_ub: np.ndarray,
    b_ub: np.ndarray,
    bounds: tuple | list | None = None,
) -> tuple[float, np.ndarray]:
    """Minimize a linear objective subject to linear inequality constraints.

    The problem solved is

        ``min c @ x  subject to  A_ub @ x <= b_ub``

    where, unless ``bounds`` is given, all variables are free. The HiGHS solver is
    used, so the result is deterministic for identical inputs.

    Examples:

        >>> value, x = linprog(np.array([1.0]), np.array([[-1.0]]), np.array([-2.0]))
        >>> value, x
        (2.0, array([2.]))

    Parameters:
        c: ``shape=(n,)``

            Coefficients of the objective function.
        A_ub: ``shape=(m, n)``

            Inequality constraint matrix.
        b_ub: ``shape=(m,)``

            Right hand side of the inequality constraints.
        bounds: ``default=None``

            Bounds on the variables, in the format accepted by
            :func:`scipy.optimize.linprog`. ``None`` means all variables are free.

    Returns:
        A tuple of two elements.

        :obj:`float`:
            Optimal objective value. ``np.inf`` if the problem is infeasible,
            ``-np.inf`` if it is unbounded.

        :obj:`~numpy.ndarray`: ``shape=(n,)``

            Optimal point. Filled with ``nan`` if no optimum exists.

    """
    c = np.asarray(c, dtype=float)
    A_ub = np.atleast_2d(np.asarray(A_ub, dtype=float))
    b_ub = np.asarray(b_ub, dtype=float).ravel()

    if A_ub.shape != (b_ub.size, c.size):
        raise ValueError(
            f"Constraint matrix of shape {A_ub.shape} does not match objective of "
            f"size {c.size} and right hand side of size {b_ub.size}"
        )

    if bounds is None:
        bounds = (None, None)

    res = _scipy_linprog(c, A_ub=A_ub, b_ub=b_ub, bounds=bounds, method="highs")

    if res.status == _STATUS_SUCCESS:
        return float(res.fun), np.asarray(res.x, dtype=float)

    x = np.full(c.size, np.nan)
    if res.status == _STATUS_UNBOUNDED:
        logger.debug("Linear program is unbounded")
        return -np.inf, x
    if res.status == _STATUS_INFEASIBLE:
        logger.debug("Linear program is infeasible")
    else:
        # Iteration limits and numerical trouble. Both mean that no certified
        # optimum is available, which is treated as infeasibility.
        logger.warning(f"Linear program terminated without optimum: {res.message}")
    return np.inf, x
