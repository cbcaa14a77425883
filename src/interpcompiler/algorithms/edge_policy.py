import logging
from dataclasses import replace
from typing import List, Sequence

from interpcompiler.core.exceptions import UnsupportedEdgePolicyError
from interpcompiler.core.segments import Constant, OutOfBounds, Segment, Undefined
from interpcompiler.core.typedefs import EdgePolicy, Side
from interpcompiler.validation.point_validator import ValidatedPoints

logger = logging.getLogger(__name__)


def apply_edge_policy(segments: Sequence[Segment], points: ValidatedPoints,
                      policy: EdgePolicy, algorithm: str = "linear") -> List[Segment]:
    """
    Wrap a segment list with the behaviour for inputs outside the domain.
    Args:
        segments: Segments built from the interior of the domain, ordered by threshold
        points: The validated points the segments were built from
        policy: Edge policy to apply
        algorithm: Name of the algorithm, for error messages
    Returns:
        New list of segments; the first one has no threshold
    Raises:
        UnsupportedEdgePolicyError: If the policy is not an EdgePolicy member
    """
    domain, range_ = points.domain, points.range
    lo, hi = domain[0], domain[-1]
    segments = list(segments)
    if policy is EdgePolicy.CLAMP:
        segments.insert(0, Constant(value=range_[0]))
        segments.append(Constant(threshold_x=hi, value=range_[-1]))
    elif policy is EdgePolicy.EXTRAPOLATE:
        # The outer linear segments extend without bound; an edge discontinuity has
        # no slope to extend, so it is held constant at the edge value instead.
        if domain[1] == domain[0]:
            logger.debug("Discontinuity at lower edge x=%s, extrapolating as constant", lo)
            segments.insert(0, Constant(value=range_[0]))
        if domain[-1] == domain[-2]:
            logger.debug("Discontinuity at upper edge x=%s, extrapolating as constant", hi)
            segments.append(Constant(threshold_x=hi, value=range_[-1]))
        if segments[0].threshold_x is not None:
            segments[0] = replace(segments[0], threshold_x=None)
    elif policy is EdgePolicy.UNDEF:
        segments.insert(0, Undefined())
        segments.append(Undefined(threshold_x=hi, pinned=range_[-1]))
    elif policy is EdgePolicy.DIE:
        segments.insert(0, OutOfBounds(side=Side.LOW, bound=lo))
        segments.append(OutOfBounds(threshold_x=hi, side=Side.HIGH, bound=hi, pinned=range_[-1]))
    else:
        raise UnsupportedEdgePolicyError(algorithm, policy)
    logger.debug("Applied '%s' edge policy: %d segments", policy.value, len(segments))
    return segments
