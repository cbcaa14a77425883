"""Shared pytest fixtures for interpcompiler tests."""
import pytest
import numpy as np
import sympy as sp
from pathlib import Path

from interpcompiler.validation.point_validator import validate_points


@pytest.fixture
def examples_dir():
    """Path to the example curve definitions."""
    return Path(__file__).parent.parent / "examples" / "curves"

@pytest.fixture
def x_symbol():
    """Input symbol for symbolic renditions."""
    return sp.Symbol('x', real=True)

@pytest.fixture
def unit_ramp_points():
    """Points of y = x on [0, 1]."""
    return [(0, 0), (1, 1)]

@pytest.fixture
def discontinuous_points():
    """Points with a jump at x=1."""
    return [(0, 0), (1, 0.5), (1, 1.5), (2, 2)]

@pytest.fixture
def edge_discontinuity_points():
    """Points with discontinuities exactly at both domain edges."""
    return [(5, 1), (5, 2), (6, 2), (6, 1)]

@pytest.fixture
def validated_ramp():
    """Validated points of a three-point curve."""
    return validate_points([0, 1, 3], [0, 2, 3])

@pytest.fixture
def random_points():
    """Reproducible random curve with strictly increasing domain."""
    rng = np.random.default_rng(13579)
    domain = np.unique(rng.uniform(-100.0, 100.0, 25))
    range_ = rng.uniform(-50.0, 50.0, len(domain))
    return domain, range_

@pytest.fixture
def write_yaml(tmp_path):
    """Write YAML content to a temporary file and return its path."""
    def _write(content: str, name: str = "curve.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write
