"""Custom exceptions for interpcompiler."""
import logging
from typing import Any

from interpcompiler.core.typedefs import Side
from interpcompiler.data.constants import ErrorMessages

logger = logging.getLogger(__name__)


def format_bound(value: float) -> str:
    """Render a domain bound for messages, dropping the '.0' of integral values."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class InterpolationError(Exception):
    """Base exception for all interpolation-related errors."""
    pass


class ValidationError(InterpolationError, ValueError):
    """Exception raised when points or compiler settings fail validation."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("%s raised: %s", type(self).__name__, message)


class LengthMismatchError(ValidationError):
    """Exception raised when domain and range have different lengths."""

    def __init__(self, domain_len: int, range_len: int):
        self.domain_len = domain_len
        self.range_len = range_len
        super().__init__(ErrorMessages.LENGTH_MISMATCH.format(domain_len=domain_len, range_len=range_len))


class InsufficientPointsError(ValidationError):
    """Exception raised when fewer than two points are supplied."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"{ErrorMessages.INSUFFICIENT_POINTS} ({count} point(s) given)")


class NotANumberError(ValidationError):
    """Exception raised when a domain or range element is not a numeral."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(ErrorMessages.NOT_A_NUMBER.format(value=value))


class UnsortedDomainError(ValidationError):
    """Exception raised when the domain decreases somewhere."""

    def __init__(self, index: int, previous: float, current: float):
        self.index = index
        self.previous = previous
        self.current = current
        super().__init__(ErrorMessages.UNSORTED_DOMAIN.format(
            index=index, prev_index=index - 1, previous=previous, current=current))


class UnknownAlgorithmError(ValidationError):
    """Exception raised when the requested algorithm has no builder."""

    def __init__(self, algorithm: Any):
        self.algorithm = algorithm
        super().__init__(ErrorMessages.UNKNOWN_ALGORITHM.format(algorithm=algorithm))


class UnsupportedEdgePolicyError(ValidationError):
    """Exception raised when an algorithm cannot honour the requested domain edge."""

    def __init__(self, algorithm: str, edge: Any):
        self.algorithm = algorithm
        self.edge = edge
        super().__init__(ErrorMessages.UNSUPPORTED_EDGE.format(algorithm=algorithm, edge=edge))


class DomainError(InterpolationError, ValueError):
    """Exception raised when a curve compiled with the 'die' edge is evaluated outside its domain."""

    def __init__(self, side: Side, bound: float):
        self.side = side
        self.bound = bound
        template = ErrorMessages.OUT_OF_BOUNDS_LOW if side is Side.LOW else ErrorMessages.OUT_OF_BOUNDS_HIGH
        super().__init__(template.format(bound=format_bound(bound)))
