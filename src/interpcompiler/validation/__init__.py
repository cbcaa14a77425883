"""Validation utilities for interpcompiler."""

from .point_validator import ValidatedPoints, is_non_decreasing, parse_number, validate_points

__all__ = [
    "ValidatedPoints",
    "is_non_decreasing",
    "parse_number",
    "validate_points"
]
