import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from interpcompiler.algorithms.strategies import ALGORITHM_STRATEGIES, resolve_algorithm
from interpcompiler.core.compiled_interpolation import CompiledInterpolation
from interpcompiler.core.interpolation_compiler import InterpolationCompiler
from interpcompiler.core.typedefs import Algorithm, ArrayTypes, EdgePolicy, NumberLike
from interpcompiler.data.constants import ProcessingConstants
from interpcompiler.parsing.config.curve_yaml_parser import CurveYAMLParser

logger = logging.getLogger(__name__)


def compile_interpolation(domain: Optional[ArrayTypes] = None,
                          range_: Optional[ArrayTypes] = None,
                          points: Optional[Sequence[Sequence[NumberLike]]] = None,
                          algorithm: Union[str, Algorithm] = ProcessingConstants.DEFAULT_ALGORITHM,
                          domain_edge: Union[str, EdgePolicy] = ProcessingConstants.DEFAULT_DOMAIN_EDGE,
                          sanitize: bool = ProcessingConstants.DEFAULT_SANITIZE) -> CompiledInterpolation:
    """
    Compile sample points into a piecewise evaluator in one call.

    This is the main entry point for in-memory curves. It validates the points,
    builds the segments, applies the domain-edge behaviour and folds everything
    into a decision tree.
    Args:
        domain: Input values ('x'), sorted in non-decreasing order
        range_: Output values ('y'), parallel to domain
        points: Alternative to domain/range_: a sequence of (x, y) pairs
        algorithm: Interpolation algorithm (default: 'linear')
        domain_edge: 'clamp' (default), 'extrapolate', 'undef' or 'die'
        sanitize: Check every value against the numeral pattern (default: True)
    Returns:
        The compiled, callable interpolation
    Raises:
        ValidationError: If the points or the settings are invalid
    Examples:
        # Gain curve that holds its end values outside [0, 10]
        gain = compile_interpolation(points=[(0, 0.0), (5, 0.8), (10, 1.0)])
        gain(2.5)   # 0.4
        gain(20)    # 1.0

        # Lookup table that refuses inputs outside its domain
        table = compile_interpolation(domain=[1, 2, 3], range_=[10, 20, 15], domain_edge='die')
        table(4)    # raises DomainError
    """
    compiler = InterpolationCompiler(domain=domain, range_=range_, points=points, algorithm=algorithm,
                                     domain_edge=domain_edge, sanitize=sanitize)
    return compiler.compile()


def create_interpolation_from_yaml(yaml_path: Union[str, Path]) -> CompiledInterpolation:
    """
    Compile the curve defined in a YAML file.
    Args:
        yaml_path: Path to the YAML curve definition
    Returns:
        The compiled, callable interpolation
    """
    logger.info("Creating interpolation from: %s", yaml_path)
    try:
        parser = CurveYAMLParser(yaml_path=yaml_path)
        fn = parser.create_interpolation()
        logger.info("Successfully created interpolation '%s': %r", parser.name, fn)
        return fn
    except Exception as e:
        logger.error("Failed to create interpolation from %s: %s", yaml_path, e, exc_info=True)
        raise


def validate_yaml_file(yaml_path: Union[str, Path]) -> bool:
    """
    Validate a YAML curve definition, including its points, without compiling it.
    Args:
        yaml_path: Path to the YAML curve definition
    Returns:
        True if the file is valid
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML content is invalid
    """
    logger.info("Validating YAML file: %s", yaml_path)
    try:
        CurveYAMLParser(yaml_path).create_compiler()
        logger.info("YAML validation successful for: %s", yaml_path)
        return True
    except FileNotFoundError as e:
        logger.error("YAML file not found: %s", yaml_path)
        raise FileNotFoundError(f"YAML file not found: {yaml_path}") from e
    except ValueError as e:
        logger.error("YAML validation failed for %s: %s", yaml_path, e)
        raise ValueError(f"YAML validation failed: {str(e)}") from e


def get_supported_algorithms() -> List[str]:
    """Names of the algorithms the compiler can build."""
    return [algorithm.value for algorithm in ALGORITHM_STRATEGIES]


def get_supported_edge_policies(algorithm: Union[str, Algorithm] = ProcessingConstants.DEFAULT_ALGORITHM) -> List[str]:
    """Names of the domain-edge policies ``algorithm`` supports, in declaration order."""
    strategy = resolve_algorithm(algorithm)
    return [policy.value for policy in EdgePolicy if policy in strategy.edge_policies]
