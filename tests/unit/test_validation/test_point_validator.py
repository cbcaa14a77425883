"""Unit tests for point validation."""

import pytest
import numpy as np
from interpcompiler.core.exceptions import (
    InsufficientPointsError, LengthMismatchError, NotANumberError, UnsortedDomainError, ValidationError
)
from interpcompiler.validation.point_validator import (
    ValidatedPoints, is_non_decreasing, parse_number, validate_points
)


class TestParseNumber:
    """Test cases for parsing single elements."""
    @pytest.mark.parametrize("value, expected", [
        ("1", 1.0), ("-2.5", -2.5), ("+3", 3.0), (".5", 0.5), ("1e3", 1000.0),
        ("-1.5E-2", -0.015), (4, 4.0), (0.25, 0.25), (np.float64(1.5), 1.5), (1e-05, 1e-05),
    ])
    def test_valid_numerals(self, value, expected):
        assert parse_number(value) == expected

    @pytest.mark.parametrize("value", ["abc", "1.", "", "1,5", "0x10", " 1", "inf", "nan", "1e", True, None])
    def test_invalid_numerals_when_sanitizing(self, value):
        with pytest.raises(NotANumberError, match="(?i)not a number"):
            parse_number(value)

    def test_without_sanitize_accepts_float_convertible(self):
        assert parse_number("1.", sanitize=False) == 1.0
        assert parse_number(" 2 ", sanitize=False) == 2.0
        assert parse_number("inf", sanitize=False) == float("inf")

    def test_without_sanitize_rejects_unconvertible(self):
        with pytest.raises(NotANumberError):
            parse_number("abc", sanitize=False)

    def test_without_sanitize_unconvertible_fails_compilation(self):
        with pytest.raises(NotANumberError, match="abc"):
            validate_points([0, "abc"], [0, 1], sanitize=False)

    def test_error_carries_value(self):
        with pytest.raises(NotANumberError) as exc_info:
            parse_number("x1")
        assert exc_info.value.value == "x1"
        assert str(exc_info.value) == "x1 is not a number"


class TestIsNonDecreasing:
    """Test cases for the sortedness check."""
    def test_sorted_with_repeats(self):
        assert is_non_decreasing(np.array([1.0, 2.0, 2.0, 3.0])) is True

    def test_single_element(self):
        assert is_non_decreasing(np.array([42.0])) is True

    def test_reports_first_violation(self):
        with pytest.raises(UnsortedDomainError) as exc_info:
            is_non_decreasing(np.array([0.0, 2.0, 1.0, 0.5]))
        assert exc_info.value.index == 2
        assert exc_info.value.previous == 2.0
        assert exc_info.value.current == 1.0


class TestValidatePoints:
    """Test cases for validate_points."""
    def test_returns_float_tuples(self):
        points = validate_points(["0", 1, 2.5], [3, "4.5", np.int64(5)])
        assert isinstance(points, ValidatedPoints)
        assert points.domain == (0.0, 1.0, 2.5)
        assert points.range == (3.0, 4.5, 5.0)
        assert all(type(v) is float for v in points.domain + points.range)
        assert len(points) == 3

    def test_does_not_alias_input(self):
        domain, range_ = [0, 1], [0, 1]
        points = validate_points(domain, range_)
        domain[0] = 99
        assert points.domain == (0.0, 1.0)

    def test_accepts_numpy_arrays(self):
        points = validate_points(np.array([0.0, 1.0]), np.array([2.0, 3.0]))
        assert points.range == (2.0, 3.0)

    def test_length_mismatch(self):
        with pytest.raises(LengthMismatchError, match=r"3 != 2"):
            validate_points([0, 1, 2], [0, 1])

    @pytest.mark.parametrize("domain, range_", [([], []), ([1], [1])])
    def test_insufficient_points(self, domain, range_):
        with pytest.raises(InsufficientPointsError, match="does not contain any intervals"):
            validate_points(domain, range_)

    def test_non_numeric_domain(self):
        with pytest.raises(NotANumberError, match="(?i)not a number"):
            validate_points([0, "one", 2], [0, 1, 2])

    def test_non_numeric_range(self):
        with pytest.raises(NotANumberError, match="(?i)not a number"):
            validate_points([0, 1, 2], [0, 1, "two"])

    def test_non_numeric_accepted_without_sanitize(self):
        points = validate_points(["0", "1."], ["0", " 2"], sanitize=False)
        assert points.domain == (0.0, 1.0)
        assert points.range == (0.0, 2.0)

    def test_unsorted_domain(self):
        with pytest.raises(UnsortedDomainError) as exc_info:
            validate_points([0, 2, 1], [0, 1, 2])
        message = str(exc_info.value)
        assert "domain" in message and "sorted" in message

    def test_unsorted_prefix_reported_before_later_bad_numeral(self):
        with pytest.raises(UnsortedDomainError) as exc_info:
            validate_points(["1", "0", "x"], [0, 1, 2])
        assert exc_info.value.index == 1

    def test_bad_numeral_reported_before_later_unsorted_pair(self):
        with pytest.raises(NotANumberError):
            validate_points(["0", "x", "2", "1"], [0, 1, 2, 3])

    def test_unsorted_domain_wins_over_bad_range(self):
        with pytest.raises(UnsortedDomainError):
            validate_points([3, 1], ["not", "numbers"])

    def test_unsorted_domain_without_sanitize(self):
        with pytest.raises(UnsortedDomainError):
            validate_points([0, 1, 0.5], [0, 1, 2], sanitize=False)

    def test_duplicates_allowed(self):
        points = validate_points([1, 1, 2, 2], [0, 1, 2, 3])
        assert points.domain == (1.0, 1.0, 2.0, 2.0)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            validate_points([1], [1])
        assert issubclass(UnsortedDomainError, ValidationError)
