"""
Core data structures for compiled interpolations.

This module contains the segment and decision-tree types, the immutable compiled
evaluator, the compiler that produces it, and the exceptions used throughout
interpcompiler.
"""

from .typedefs import Algorithm, EdgePolicy, Side
from .exceptions import (
    InterpolationError, ValidationError, LengthMismatchError, InsufficientPointsError,
    NotANumberError, UnsortedDomainError, UnknownAlgorithmError, UnsupportedEdgePolicyError,
    DomainError
)
from .segments import Segment, Linear, Constant, Undefined, OutOfBounds
from .decision_tree import DecisionNode, Leaf, Interior
from .compiled_interpolation import CompiledInterpolation
from .interpolation_compiler import InterpolationCompiler

__all__ = [
    "Algorithm",
    "EdgePolicy",
    "Side",
    "InterpolationError",
    "ValidationError",
    "LengthMismatchError",
    "InsufficientPointsError",
    "NotANumberError",
    "UnsortedDomainError",
    "UnknownAlgorithmError",
    "UnsupportedEdgePolicyError",
    "DomainError",
    "Segment",
    "Linear",
    "Constant",
    "Undefined",
    "OutOfBounds",
    "DecisionNode",
    "Leaf",
    "Interior",
    "CompiledInterpolation",
    "InterpolationCompiler"
]
