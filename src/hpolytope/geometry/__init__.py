"""
This package contains functionality for convex polyhedra given as intersections of
half spaces.

The functions have been written as building blocks for safe corridors in trajectory
planning, where regions of free space must be validated, intersected and converted to
polytopes that can be consumed by geometric or optimization routines. All functions
are fixed to three spatial dimensions.

Note:
    Many of the functions have a parameter ``epsilon`` (or ``eps``), which is used to
    determine the tolerance of the geometric operations. For the overlap test, it is
    the margin by which two regions must overlap; for vertex enumeration, it is the
    distance below which two vertices are considered equal. The default value is
    :data:`~hpolytope.utils.common_constants.DEFAULT_EPSILON`, and can be changed in
    the ``geometry`` section of the configuration file ``hpolytope.cfg``.

The content of this package is organized as follows:

    :mod:`~hpolytope.geometry.half_space` contains functions for finding an interior
    point of an intersection of half spaces, for testing whether two such
    intersections overlap, and for inquiries on points and boundedness.

    :mod:`~hpolytope.geometry.vertex_enumeration` contains functions for computing the
    vertices of a bounded intersection of half spaces, and for removing duplicate
    vertices.

"""
