"""
Algorithm strategies.

Each supported Algorithm maps to an AlgorithmStrategy pairing a segment builder with
the edge policies it can honour. New algorithms (quadratic, spline, ...) plug in by
adding an Algorithm member and an entry in ALGORITHM_STRATEGIES.
"""
import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Union

from interpcompiler.algorithms.segment_builder import build_linear_segments
from interpcompiler.core.exceptions import UnknownAlgorithmError, UnsupportedEdgePolicyError
from interpcompiler.core.segments import Segment
from interpcompiler.core.typedefs import Algorithm, EdgePolicy
from interpcompiler.validation.point_validator import ValidatedPoints

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlgorithmStrategy:
    algorithm: Algorithm
    build_segments: Callable[[ValidatedPoints], List[Segment]]
    edge_policies: FrozenSet[EdgePolicy]


ALGORITHM_STRATEGIES = {
    Algorithm.LINEAR: AlgorithmStrategy(
        algorithm=Algorithm.LINEAR,
        build_segments=build_linear_segments,
        edge_policies=frozenset(EdgePolicy),
    ),
}


def resolve_algorithm(algorithm: Union[str, Algorithm]) -> AlgorithmStrategy:
    """Look up the strategy for an Algorithm member or its name."""
    try:
        key = algorithm if isinstance(algorithm, Algorithm) else Algorithm(algorithm)
        return ALGORITHM_STRATEGIES[key]
    except (ValueError, KeyError) as e:
        raise UnknownAlgorithmError(getattr(algorithm, "value", algorithm)) from e


def resolve_edge_policy(strategy: AlgorithmStrategy, edge: Union[str, EdgePolicy]) -> EdgePolicy:
    """Look up an EdgePolicy member by name and check the strategy supports it."""
    try:
        policy = edge if isinstance(edge, EdgePolicy) else EdgePolicy(edge)
    except ValueError as e:
        raise UnsupportedEdgePolicyError(strategy.algorithm.value, edge) from e
    if policy not in strategy.edge_policies:
        raise UnsupportedEdgePolicyError(strategy.algorithm.value, policy.value)
    logger.debug("Resolved algorithm '%s' with domain-edge '%s'", strategy.algorithm.value, policy.value)
    return policy
