"""   hpolytope.

Root directory for the hpolytope package, which converts between and tests convex
polyhedra given as intersections of half spaces. Contains the following sub-packages:

geometry: Interior points, overlap tests and vertex enumeration of intersections of
    half spaces.

utils: Linear programming and convex hull backends, constants, types and logging.

applications: Standard polyhedra, and helpers for testing.


isort:skip_file

"""

import os
from pathlib import Path
import configparser


__version__ = "0.1.0"

# Try to read the config file from the directory where python process was launched
try:
    cwd = Path(os.getcwd())
    pth = cwd / Path("hpolytope.cfg")
    cfg = configparser.ConfigParser()
    cfg.read(pth)
    config = dict(cfg)
except (OSError, configparser.Error):
    # the assumption is that no configurations are given
    config = {}

# ------------------------------------
# Simplified namespaces. The rule of thumb is that functions and modules that a
# user can be exposed to should have a shortcut here.

from hpolytope.utils.common_constants import *
from hpolytope.utils.hpolytope_types import *

# The default tolerance can be set in the geometry section of the config file.
if "geometry" in config:
    DEFAULT_EPSILON = float(config["geometry"].get("tolerance", DEFAULT_EPSILON))

from hpolytope.utils.logging import time_logger

# Backends
from hpolytope.utils import linear_programming, convex_hull

# Geometry
from hpolytope.geometry import half_space, vertex_enumeration
from hpolytope.geometry.half_space import (
    find_interior,
    overlap,
    is_bounded,
    points_inside_half_space_intersection,
)
from hpolytope.geometry.vertex_enumeration import (
    enumerate_vertices,
    enumerate_vertices_from_interior,
    filter_vertices,
)

from hpolytope import applications
