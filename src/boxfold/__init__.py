"""Coordinate transformations for box-constrained evolution strategies."""
