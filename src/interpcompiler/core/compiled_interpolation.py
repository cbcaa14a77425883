import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import sympy as sp

from interpcompiler.algorithms.evaluator import evaluate
from interpcompiler.core.decision_tree import DecisionNode, Interior
from interpcompiler.core.segments import Segment
from interpcompiler.core.typedefs import Algorithm, EdgePolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledInterpolation:
    """
    An immutable, callable piecewise function.

    Holds the validated points it was compiled from (for diagnostics) and the root
    of its decision tree. Evaluation only reads the tree, so one instance can be
    shared between threads without locking.

    Attributes:
        domain: Validated input values
        range: Validated output values
        algorithm: Algorithm the segments were built with
        edge_policy: Behaviour outside the domain
        root: Root of the decision tree

    Examples:
        >>> fn = InterpolationCompiler(points=[(0, 0), (1, 1)]).fn
        >>> fn(0.5)
        0.5
        >>> fn(2)
        1.0
    """
    domain: Tuple[float, ...]
    range: Tuple[float, ...]
    algorithm: Algorithm
    edge_policy: EdgePolicy
    root: DecisionNode

    def evaluate(self, x: float) -> Optional[float]:
        """
        Evaluate the curve at ``x``.
        Returns:
            The interpolated value, or None where the curve is undefined ('undef' edge)
        Raises:
            DomainError: If compiled with the 'die' edge and ``x`` is outside the domain
        """
        return evaluate(self.root, x)

    def __call__(self, x: float) -> Optional[float]:
        return evaluate(self.root, x)

    @property
    def segments(self) -> Tuple[Segment, ...]:
        """Leaf segments in threshold order."""
        return tuple(leaf.segment for leaf in self.root.leaves())

    @property
    def depth(self) -> int:
        return self.root.depth

    def to_piecewise(self, symbol: Optional[sp.Symbol] = None) -> sp.Expr:
        """
        Render the decision tree as nested SymPy Piecewise expressions.

        Undefined and out-of-bounds regions render as ``nan``.
        Args:
            symbol: Input symbol (default: real symbol 'x')
        Returns:
            SymPy expression equivalent to the compiled curve
        """
        if symbol is None:
            symbol = sp.Symbol('x', real=True)
        logger.debug("Rendering %d segments as a symbolic piecewise in %s", len(self.segments), symbol)
        return self._node_to_expr(self.root, symbol)

    @classmethod
    def _node_to_expr(cls, node: DecisionNode, symbol: sp.Symbol) -> sp.Expr:
        if isinstance(node, Interior):
            return sp.Piecewise(
                (cls._node_to_expr(node.low, symbol), symbol < node.split_x),
                (cls._node_to_expr(node.high, symbol), True)
            )
        return node.segment.to_expr(symbol)

    def __repr__(self) -> str:
        return (f"CompiledInterpolation(points={len(self.domain)}, algorithm='{self.algorithm.value}', "
                f"edge_policy='{self.edge_policy.value}', segments={len(self.segments)}, depth={self.depth})")
