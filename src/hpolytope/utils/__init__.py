"""Utility functions: linear programming and convex hull backends, constants, types
and logging."""
