"""Standard polyhedra, and helpers for testing."""

from . import polytopes
