"""
Parsing and configuration modules for interpcompiler.

This package provides the one-call compile API and the YAML curve definition loader.
"""

from .api import (
    compile_interpolation, create_interpolation_from_yaml, validate_yaml_file,
    get_supported_algorithms, get_supported_edge_policies
)
from .config.curve_yaml_parser import CurveYAMLParser

__all__ = [
    'compile_interpolation',
    'create_interpolation_from_yaml',
    'validate_yaml_file',
    'get_supported_algorithms',
    'get_supported_edge_policies',
    'CurveYAMLParser'
]
