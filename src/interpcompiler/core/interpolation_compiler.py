import logging
from typing import Optional, Sequence, Tuple, Union

from interpcompiler.algorithms.edge_policy import apply_edge_policy
from interpcompiler.algorithms.strategies import resolve_algorithm, resolve_edge_policy
from interpcompiler.algorithms.tree_compiler import compile_tree
from interpcompiler.core.compiled_interpolation import CompiledInterpolation
from interpcompiler.core.exceptions import ValidationError
from interpcompiler.core.typedefs import Algorithm, ArrayTypes, EdgePolicy, NumberLike
from interpcompiler.data.constants import ProcessingConstants
from interpcompiler.validation.point_validator import validate_points

logger = logging.getLogger(__name__)


def split_points(points: Sequence[Sequence[NumberLike]]) -> Tuple[list, list]:
    """Split (x, y) pairs into domain and range lists, preserving order."""
    domain, range_ = [], []
    for i, point in enumerate(points):
        if len(point) != 2:
            raise ValidationError(f"Point {i} must be an (x, y) pair, got {point!r}")
        domain.append(point[0])
        range_.append(point[1])
    return domain, range_


class InterpolationCompiler:
    """
    Compiles sorted (x, y) samples into a fast piecewise evaluator.

    All slope and intercept arithmetic is done once, and the segments are arranged
    in a balanced decision tree, so each evaluation costs log2(N) comparisons plus
    one multiply and one add.

    Every check runs in the constructor; ``compile()`` cannot fail afterwards and
    builds the evaluator only once.

    Examples:
        >>> fn = InterpolationCompiler(domain=[0, 10], range_=[0, 100], domain_edge="die").fn
        >>> fn(2.5)
        25.0
    """

    def __init__(self, domain: Optional[ArrayTypes] = None,
                 range_: Optional[ArrayTypes] = None,
                 points: Optional[Sequence[Sequence[NumberLike]]] = None,
                 algorithm: Union[str, Algorithm] = ProcessingConstants.DEFAULT_ALGORITHM,
                 domain_edge: Union[str, EdgePolicy] = ProcessingConstants.DEFAULT_DOMAIN_EDGE,
                 sanitize: bool = ProcessingConstants.DEFAULT_SANITIZE) -> None:
        """
        Args:
            domain: Input values ('x'), sorted in non-decreasing order
            range_: Output values ('y'), parallel to domain
            points: Alternative to domain/range_: a sequence of (x, y) pairs
            algorithm: Interpolation algorithm (default: 'linear')
            domain_edge: Behaviour outside the domain: 'clamp', 'extrapolate', 'undef' or 'die'
            sanitize: Check every value against the numeral pattern (default: True)
        Raises:
            ValidationError: If the points or the settings are invalid
        """
        if points is not None:
            if domain is not None or range_ is not None:
                raise ValidationError("Give either points or domain and range, not both")
            domain, range_ = split_points(points)
        if domain is None or range_ is None:
            raise ValidationError("Both domain and range are required")
        logger.info("Initializing InterpolationCompiler: %d points, algorithm=%s, domain_edge=%s",
                    len(domain), getattr(algorithm, "value", algorithm), getattr(domain_edge, "value", domain_edge))
        self.sanitize = sanitize
        self.points = validate_points(domain, range_, sanitize=sanitize)
        self.strategy = resolve_algorithm(algorithm)
        self.domain_edge = resolve_edge_policy(self.strategy, domain_edge)
        self._compiled = None

    @property
    def domain(self) -> Tuple[float, ...]:
        return self.points.domain

    @property
    def range(self) -> Tuple[float, ...]:
        return self.points.range

    @property
    def algorithm(self) -> Algorithm:
        return self.strategy.algorithm

    @property
    def fn(self) -> CompiledInterpolation:
        """The compiled evaluator, built on first access."""
        return self.compile()

    def compile(self) -> CompiledInterpolation:
        """Build (once) and return the compiled evaluator."""
        if self._compiled is None:
            segments = self.strategy.build_segments(self.points)
            segments = apply_edge_policy(segments, self.points, self.domain_edge, self.algorithm.value)
            root = compile_tree(segments)
            self._compiled = CompiledInterpolation(
                domain=self.points.domain,
                range=self.points.range,
                algorithm=self.algorithm,
                edge_policy=self.domain_edge,
                root=root,
            )
            logger.info("Compiled %r", self._compiled)
        return self._compiled
