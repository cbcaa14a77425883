"""
interpcompiler - Compile sampled curves into fast piecewise evaluators.

This library turns a finite set of sorted (x, y) sample points into a reusable
evaluator for a piecewise-linear function. All slope and intercept arithmetic is
done once at compile time and the segments are arranged in a balanced decision
tree, so evaluation costs log2(N) comparisons plus one multiply and one add.

Key Features:
- Linear interpolation with zero-width discontinuities (right-hand value wins)
- Domain-edge behaviour: clamp, extrapolate, undef or die
- Input sanitizing against a numeral pattern
- Immutable compiled curves, safe to share between threads
- Symbolic rendition of compiled curves with SymPy
- YAML curve definitions

Main Components:
- Core: Segments, decision trees, the compiler and the compiled evaluator
- Validation: Point checking and normalization
- Algorithms: Segment building, edge policies, tree compilation and evaluation
- Parsing: One-call API and YAML configuration
- Data: Processing constants and error message templates
"""

try:
    from ._version import version as __version__
except ImportError:
    from importlib.metadata import version, PackageNotFoundError
    try:
        __version__ = version("interpcompiler")
    except PackageNotFoundError:
        __version__ = "0.1.0+unknown"  # Fallback version

# Core definitions
from .core.typedefs import Algorithm, EdgePolicy, Side
from .core.exceptions import (
    InterpolationError, ValidationError, LengthMismatchError, InsufficientPointsError,
    NotANumberError, UnsortedDomainError, UnknownAlgorithmError, UnsupportedEdgePolicyError,
    DomainError
)
from .core.compiled_interpolation import CompiledInterpolation
from .core.interpolation_compiler import InterpolationCompiler

# Main API functions
from .parsing.api import (
    compile_interpolation,
    create_interpolation_from_yaml,
    validate_yaml_file,
    get_supported_algorithms,
    get_supported_edge_policies
)

# Validation
from .validation.point_validator import validate_points

__all__ = [
    # Version
    '__version__',

    # Enums
    'Algorithm',
    'EdgePolicy',
    'Side',

    # Core classes
    'CompiledInterpolation',
    'InterpolationCompiler',

    # Errors
    'InterpolationError',
    'ValidationError',
    'LengthMismatchError',
    'InsufficientPointsError',
    'NotANumberError',
    'UnsortedDomainError',
    'UnknownAlgorithmError',
    'UnsupportedEdgePolicyError',
    'DomainError',

    # Main API
    'compile_interpolation',
    'create_interpolation_from_yaml',
    'validate_yaml_file',
    'get_supported_algorithms',
    'get_supported_edge_policies',
    'validate_points'
]
