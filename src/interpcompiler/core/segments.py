"""
Segment types for compiled piecewise functions.

A segment covers inputs from its ``threshold_x`` (inclusive) up to the threshold of
the next segment (exclusive). The leftmost segment of a curve has ``threshold_x=None``
and catches everything below the second threshold.

Undefined and OutOfBounds segments may carry a ``pinned`` value. Such a segment sits
on the last domain value and returns ``pinned`` when the input equals its threshold
exactly, so the right end of the domain stays defined under the 'undef' and 'die'
edges.
"""
from dataclasses import dataclass
from typing import Optional

import sympy as sp

from interpcompiler.core.exceptions import DomainError
from interpcompiler.core.typedefs import Side


@dataclass(frozen=True)
class Segment:
    """Base class for one interval of a piecewise function."""
    threshold_x: Optional[float] = None

    def evaluate(self, x: float) -> Optional[float]:
        raise NotImplementedError("Subclasses must implement evaluate method")

    def to_expr(self, symbol: sp.Symbol) -> sp.Expr:
        raise NotImplementedError("Subclasses must implement to_expr method")


@dataclass(frozen=True)
class Linear(Segment):
    """y = x * slope + intercept."""
    slope: float = 0.0
    intercept: float = 0.0

    def evaluate(self, x: float) -> float:
        return x * self.slope + self.intercept

    def to_expr(self, symbol: sp.Symbol) -> sp.Expr:
        return symbol * sp.Float(self.slope) + sp.Float(self.intercept)


@dataclass(frozen=True)
class Constant(Segment):
    """A fixed value, used for clamped edges and edge discontinuities."""
    value: float = 0.0

    def evaluate(self, x: float) -> float:
        return self.value

    def to_expr(self, symbol: sp.Symbol) -> sp.Expr:
        return sp.Float(self.value)


@dataclass(frozen=True)
class Undefined(Segment):
    """No result outside the domain."""
    pinned: Optional[float] = None

    def evaluate(self, x: float) -> Optional[float]:
        if self.pinned is not None and x == self.threshold_x:
            return self.pinned
        return None

    def to_expr(self, symbol: sp.Symbol) -> sp.Expr:
        if self.pinned is None:
            return sp.nan
        return sp.Piecewise((sp.Float(self.pinned), sp.Eq(symbol, self.threshold_x)), (sp.nan, True))


@dataclass(frozen=True)
class OutOfBounds(Segment):
    """Raises DomainError for inputs beyond ``bound`` on ``side``."""
    side: Side = Side.LOW
    bound: float = 0.0
    pinned: Optional[float] = None

    def evaluate(self, x: float) -> float:
        if self.pinned is not None and x == self.threshold_x:
            return self.pinned
        raise DomainError(self.side, self.bound)

    def to_expr(self, symbol: sp.Symbol) -> sp.Expr:
        # A symbolic expression cannot raise, so the violation renders as nan
        if self.pinned is None:
            return sp.nan
        return sp.Piecewise((sp.Float(self.pinned), sp.Eq(symbol, self.threshold_x)), (sp.nan, True))
