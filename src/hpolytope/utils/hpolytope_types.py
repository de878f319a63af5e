"""
Defines types commonly used in hpolytope.
"""

from typing import Sequence, Union

import numpy.typing as npt

__all__ = [
    "number",
    "HalfSpaceLike",
]

number = Union[float, int]
"""Type for numbers."""

HalfSpaceLike = Union[npt.ArrayLike, Sequence[Sequence[number]]]
"""Type for an H-representation before conversion to an array.

After conversion, the array has ``shape=(num_planes, 4)``, where row ``i`` holds the
coefficients ``(a, b, c, d)`` of the constraint ``a*x + b*y + c*z + d <= 0``.

"""
