"""Demonstration script for compiled interpolation curves."""
import logging
from pathlib import Path

from interpcompiler import DomainError, compile_interpolation, create_interpolation_from_yaml


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )


def demonstrate_curves():
    """Compile a few curves and evaluate them inside and outside their domains."""
    setup_logging()
    curves_dir = Path(__file__).parent / "curves"
    curves = {
        "gain_curve": create_interpolation_from_yaml(curves_dir / "gain_curve.yaml"),
        "step_table": create_interpolation_from_yaml(curves_dir / "step_table.yaml"),
        "extrapolated": compile_interpolation(points=[(1, 1), (2, 1), (3, 0)], domain_edge="extrapolate"),
    }
    for name, fn in curves.items():
        print(f"\n{'=' * 80}")
        print(f"CURVE: {name}  {fn!r}")
        print(f"{'=' * 80}")
        print(f"Domain: {list(fn.domain)}")
        print(f"Range:  {list(fn.range)}")
        print(f"Symbolic form: {fn.to_piecewise()}")
        low, high = fn.domain[0], fn.domain[-1]
        for x in (low - 1, low, (low + high) / 2, high, high + 1):
            try:
                print(f"  f({x:<6}) = {fn(x)}")
            except DomainError as e:
                print(f"  f({x:<6}) ! {e}")


if __name__ == "__main__":
    demonstrate_curves()
