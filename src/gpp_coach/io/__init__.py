"""Boundary validation and serialization."""
