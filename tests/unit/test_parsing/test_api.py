"""Tests for the main API module."""

import pytest
import tempfile
from pathlib import Path
from interpcompiler.core.compiled_interpolation import CompiledInterpolation
from interpcompiler.core.exceptions import UnknownAlgorithmError, ValidationError
from interpcompiler.parsing.api import (
    compile_interpolation, create_interpolation_from_yaml, get_supported_algorithms,
    get_supported_edge_policies, validate_yaml_file
)


class TestCompileInterpolation:
    """Test the compile_interpolation function."""

    def test_from_points(self, unit_ramp_points):
        fn = compile_interpolation(points=unit_ramp_points)
        assert isinstance(fn, CompiledInterpolation)
        assert fn(0.25) == pytest.approx(0.25)

    def test_from_arrays(self):
        fn = compile_interpolation(domain=[0, 10], range_=[0, 100], domain_edge="extrapolate")
        assert fn(-1) == pytest.approx(-10.0)

    def test_invalid_points(self):
        with pytest.raises(ValidationError):
            compile_interpolation(points=[(0, 0)])


class TestCreateInterpolationFromYaml:
    """Test the create_interpolation_from_yaml function."""

    def test_from_points_yaml(self):
        yaml_content = """
name: gain
domain_edge: clamp
points:
  - [0, 0]
  - [1, 1]
"""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            f.write(yaml_content)
            yaml_path = Path(f.name)
        try:
            fn = create_interpolation_from_yaml(yaml_path)
            assert fn(-1) == 0.0
            assert fn(0.5) == pytest.approx(0.5)
            assert fn(2) == 1.0
        finally:
            yaml_path.unlink()

    def test_example_files(self, examples_dir):
        gain = create_interpolation_from_yaml(examples_dir / "gain_curve.yaml")
        assert gain(1) == pytest.approx(0.125)
        assert gain(20) == 1.0
        table = create_interpolation_from_yaml(examples_dir / "step_table.yaml")
        assert table(5) == 2.0
        assert table(6) == 1.0

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            create_interpolation_from_yaml("does_not_exist.yaml")


class TestValidateYamlFile:
    """Test the validate_yaml_file function."""

    def test_valid_file(self, write_yaml):
        path = write_yaml("domain: [0, 1, 2]\nrange: [5, 4, 3]\n")
        assert validate_yaml_file(path) is True

    def test_unsorted_domain(self, write_yaml):
        path = write_yaml("domain: [0, 2, 1]\nrange: [5, 4, 3]\n")
        with pytest.raises(ValueError, match="YAML validation failed.*sorted"):
            validate_yaml_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="YAML file not found"):
            validate_yaml_file(tmp_path / "missing.yaml")


class TestSupportedSettings:
    """Test the supported algorithm and edge policy listings."""

    def test_algorithms(self):
        assert get_supported_algorithms() == ["linear"]

    def test_edge_policies(self):
        assert get_supported_edge_policies() == ["clamp", "extrapolate", "undef", "die"]
        assert get_supported_edge_policies("linear") == get_supported_edge_policies()

    def test_edge_policies_unknown_algorithm(self):
        with pytest.raises(UnknownAlgorithmError):
            get_supported_edge_policies("quadratic")
