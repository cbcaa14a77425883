"""
Core algorithms for compiling piecewise interpolations.

This module provides the segment builder, the edge policy applier, the decision tree
compiler and the evaluator that walks a compiled tree.
"""

from .segment_builder import build_linear_segments
from .edge_policy import apply_edge_policy
from .tree_compiler import compile_tree
from .evaluator import evaluate
from .strategies import ALGORITHM_STRATEGIES, AlgorithmStrategy, resolve_algorithm, resolve_edge_policy

__all__ = [
    "build_linear_segments",
    "apply_edge_policy",
    "compile_tree",
    "evaluate",
    "ALGORITHM_STRATEGIES",
    "AlgorithmStrategy",
    "resolve_algorithm",
    "resolve_edge_policy"
]
