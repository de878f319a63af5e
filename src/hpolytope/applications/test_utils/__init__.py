"""Helper functions for the test suite."""
