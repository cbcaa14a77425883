"""Validation and normalization of interpolation points."""

import logging
import re
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from interpcompiler.core.exceptions import (
    InsufficientPointsError, LengthMismatchError, NotANumberError, UnsortedDomainError
)
from interpcompiler.core.typedefs import ArrayTypes, NumberLike
from interpcompiler.data.constants import ProcessingConstants

logger = logging.getLogger(__name__)

_NUMBER_PATTERN = re.compile(ProcessingConstants.NUMBER_REGEX)


@dataclass(frozen=True)
class ValidatedPoints:
    """Normalized copies of a curve's domain and range."""
    domain: Tuple[float, ...]
    range: Tuple[float, ...]

    def __len__(self) -> int:
        return len(self.domain)


def parse_number(value: NumberLike, sanitize: bool = True) -> float:
    """
    Convert one domain or range element to a float.

    With ``sanitize`` off the numeral pattern is skipped and ``float()`` decides, so
    "5.", " 3 " and "inf" are accepted. Elements that ``float()`` rejects still raise
    NotANumberError; unlike a textual pipeline, a non-numeric value cannot be
    silently read as zero here.
    Args:
        value: The element to convert
        sanitize: Check the textual form of the element against the numeral pattern first
    Returns:
        The element as a Python float
    Raises:
        NotANumberError: If sanitizing and the element is not a signed decimal/exponential
                         numeral, or if the element cannot be converted at all
    """
    if sanitize:
        text = str(value)
        if not _NUMBER_PATTERN.match(text):
            raise NotANumberError(text)
        return float(text)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise NotANumberError(value) from e


def is_non_decreasing(arr: np.ndarray, name: str = "Domain") -> bool:
    """Raise UnsortedDomainError at the first strictly decreasing adjacent pair."""
    diffs = np.diff(arr)
    violations = np.flatnonzero(diffs < 0)
    if violations.size:
        i = int(violations[0]) + 1
        start_idx = max(0, i - 2)
        end_idx = min(len(arr), i + 3)
        logger.error("%s is not sorted at index %d, surrounding values: %s",
                     name, i, arr[start_idx:end_idx].tolist())
        raise UnsortedDomainError(i, float(arr[i - 1]), float(arr[i]))
    logger.debug("%s is non decreasing", name)
    return True


def validate_points(domain: ArrayTypes, range_: ArrayTypes,
                    sanitize: bool = ProcessingConstants.DEFAULT_SANITIZE) -> ValidatedPoints:
    """
    Check and normalize the sample points of a curve.

    Length checks come first. Each domain element is then parsed and compared with its
    predecessor before the next one is read, and only then are range elements parsed.
    Args:
        domain: Input values ('x'), non-decreasing; repeats mark discontinuities
        range_: Output values ('y'), parallel to domain
        sanitize: Check every element against the numeral pattern
    Returns:
        ValidatedPoints holding new tuples of floats
    Raises:
        LengthMismatchError, InsufficientPointsError, NotANumberError, UnsortedDomainError
    """
    logger.debug("Validating %d domain and %d range values (sanitize=%s)",
                 len(domain), len(range_), sanitize)
    if len(domain) != len(range_):
        raise LengthMismatchError(len(domain), len(range_))
    if len(domain) < ProcessingConstants.MIN_DATA_POINTS:
        raise InsufficientPointsError(len(domain))
    domain_values = []
    for value in domain:
        domain_values.append(parse_number(value, sanitize))
        if len(domain_values) > 1 and domain_values[-1] < domain_values[-2]:
            is_non_decreasing(np.asarray(domain_values, dtype=float))
    range_values = [parse_number(v, sanitize) for v in range_]
    points = ValidatedPoints(domain=tuple(domain_values), range=tuple(range_values))
    if len(points) <= ProcessingConstants.MAX_LOGGED_POINTS:
        logger.debug("Validated domain: %s", list(points.domain))
    else:
        logger.debug("Validated domain: [%s, ..., %s] (length=%d)",
                     points.domain[0], points.domain[-1], len(points))
    return points
