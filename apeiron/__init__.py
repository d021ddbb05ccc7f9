"""Vectors, parametric curves, explicit functions, polytope categories, file helpers and sorting."""

__version__ = "0.1.0"

__all__ = ["categories", "curve", "explicit", "file", "filesystem", "sorting", "vector"]