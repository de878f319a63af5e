"""
The module is intended to give access to a set of unified tolerances and keywords.

To access the quantities, invoke hp.KEY.

"""

import numpy as np

""" Tolerances """
# Default tolerance for geometric comparisons: overlap margin and the quantization
# used when vertices are deduplicated.
DEFAULT_EPSILON = 1e-6

# Precision used by the convex hull builder when nothing stricter is requested.
DEFAULT_HULL_TOLERANCE = 1e-7

# Machine precision for double precision floats.
MACHINE_EPSILON = float(np.finfo(float).eps)

""" Dimensions """
# Number of spatial dimensions. Half-spaces thus have DIM + 1 coefficients.
DIM = 3
