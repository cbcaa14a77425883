from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class ProcessingConstants:
    """Processing constants used throughout the interpolation compiler."""
    # Data validation
    MIN_DATA_POINTS: Final[int] = 2
    # Signed decimal/exponential numeral accepted when sanitizing input
    NUMBER_REGEX: Final[str] = r'^[-+]?[0-9]*\.?[0-9]+([eE][-+]?[0-9]+)?$'
    # Defaults
    DEFAULT_ALGORITHM: Final[str] = "linear"
    DEFAULT_DOMAIN_EDGE: Final[str] = "clamp"
    DEFAULT_SANITIZE: Final[bool] = True
    # Logging: arrays longer than this are abbreviated
    MAX_LOGGED_POINTS: Final[int] = 10


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    NOT_A_NUMBER: Final[str] = "{value} is not a number"
    LENGTH_MISMATCH: Final[str] = "Domain and range differ in length ({domain_len} != {range_len})"
    INSUFFICIENT_POINTS: Final[str] = "Domain does not contain any intervals"
    UNSORTED_DOMAIN: Final[str] = ("Domain is not sorted in non-decreasing order: "
                                   "domain[{index}]={current} is less than domain[{prev_index}]={previous}")
    UNKNOWN_ALGORITHM: Final[str] = "Unknown algorithm {algorithm}"
    UNSUPPORTED_EDGE: Final[str] = "Algorithm '{algorithm}' does not support domain-edge '{edge}'"
    OUT_OF_BOUNDS_LOW: Final[str] = "argument out of bounds (<{bound})"
    OUT_OF_BOUNDS_HIGH: Final[str] = "argument out of bounds (>{bound})"
