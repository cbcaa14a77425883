"""
typedefs.py

This module defines the enumerations and type aliases shared across interpcompiler.

Enums:
    Algorithm: The interpolation algorithms the compiler knows how to build.
    EdgePolicy: How a compiled curve behaves for inputs outside [min(domain), max(domain)].
    Side: Which end of the domain an out-of-bounds input fell off.

Type Aliases:
    ArrayTypes: Sequences accepted as domain or range input (numpy arrays, lists or tuples).
    NumberLike: A single domain or range element before validation. Strings are accepted
                and parsed, as are Python and numpy numbers.
"""

from enum import Enum
from typing import List, Tuple, Union

import numpy as np


class Algorithm(Enum):
    LINEAR = "linear"


class EdgePolicy(Enum):
    CLAMP = "clamp"
    EXTRAPOLATE = "extrapolate"
    UNDEF = "undef"
    DIE = "die"


class Side(Enum):
    LOW = "low"
    HIGH = "high"


NumberLike = Union[int, float, str, np.number]
ArrayTypes = Union[np.ndarray, List, Tuple]
