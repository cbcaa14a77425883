import logging
from typing import List

from interpcompiler.core.segments import Linear
from interpcompiler.validation.point_validator import ValidatedPoints

logger = logging.getLogger(__name__)


def build_linear_segments(points: ValidatedPoints) -> List[Linear]:
    """
    Create one linear segment per non-empty interval of the domain.

    Zero-width intervals (discontinuities) are skipped. The segment that starts at
    a repeated x therefore wins for inputs equal to that x, and inputs just below it
    fall to the segment on the left.
    Args:
        points: Validated, sorted domain and range
    Returns:
        List of Linear segments ordered by threshold
    """
    domain, range_ = points.domain, points.range
    segments = []
    for i in range(1, len(domain)):
        if domain[i] == domain[i - 1]:
            logger.debug("Skipping zero-width interval at x=%s (discontinuity)", domain[i])
            continue
        slope = (range_[i] - range_[i - 1]) / (domain[i] - domain[i - 1])
        intercept = range_[i - 1] - domain[i - 1] * slope
        segments.append(Linear(threshold_x=domain[i - 1], slope=slope, intercept=intercept))
    logger.debug("Built %d linear segments from %d points", len(segments), len(domain))
    return segments
