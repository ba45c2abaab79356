"""Unit tests for numeric_tolerance, numbers_equivalent and literals_equivalent.

Tests verify:
- Exact equality short-circuits (including 0.0 vs -0.0)
- Tolerance scales with the larger magnitude
- Boundary: just above the tolerance differs, just below is equal, and a
  difference exactly equal to the tolerance is equal (inclusive <=)
- The fixed floor applies only at magnitude exactly zero
- Round-off such as 0.1 + 0.2 vs 0.3 is absorbed
- Custom tolerances are honoured
- Literals beyond double range compare by exact decimal value
"""

from __future__ import annotations

import math

import pytest

from json_equivalence.algorithm.tolerance import (
    literals_equivalent,
    numbers_equivalent,
    numeric_tolerance,
)


class TestNumericTolerance:
    def test_scales_with_larger_magnitude(self) -> None:
        assert numeric_tolerance(2.0, -4.0) == pytest.approx(4e-10)

    def test_symmetric_in_arguments(self) -> None:
        assert numeric_tolerance(3.0, 7.0) == numeric_tolerance(7.0, 3.0)

    def test_floor_at_zero_magnitude(self) -> None:
        assert numeric_tolerance(0.0, 0.0) == 1e-15

    def test_floor_not_used_near_zero(self) -> None:
        """Magnitude 1e-20 is not zero, so the scaled tolerance applies."""
        assert numeric_tolerance(0.0, 1e-20) == pytest.approx(1e-30)

    def test_custom_parameters(self) -> None:
        assert numeric_tolerance(10.0, 0.0, relative_tolerance=0.01) == pytest.approx(
            0.1
        )
        assert numeric_tolerance(0.0, -0.0, zero_tolerance=0.5) == 0.5


class TestNumbersEquivalent:
    # ------------------------------------------------------------------
    # Exact equality
    # ------------------------------------------------------------------

    def test_identical(self) -> None:
        assert numbers_equivalent(42.0, 42.0)

    def test_integer_and_float(self) -> None:
        assert numbers_equivalent(42, 42.0)

    def test_signed_zeros(self) -> None:
        assert numbers_equivalent(0.0, -0.0)

    # ------------------------------------------------------------------
    # Tolerance boundary
    # ------------------------------------------------------------------

    def test_difference_above_tolerance_differs(self) -> None:
        # magnitude ~1.0, tolerance ~1e-10, difference 2e-10
        assert not numbers_equivalent(1.0, 1.0 + 2e-10)

    def test_difference_below_tolerance_is_equal(self) -> None:
        assert numbers_equivalent(1.0, 1.0 + 5e-11)

    def test_boundary_scales_with_magnitude(self) -> None:
        assert numbers_equivalent(1e6, 1e6 + 5e-5)
        assert not numbers_equivalent(1e6, 1e6 + 2e-4)

    def test_small_values_compare_relatively(self) -> None:
        assert not numbers_equivalent(0.0, 1e-16)
        assert not numbers_equivalent(1e-20, 2e-20)

    def test_round_off_is_absorbed(self) -> None:
        assert numbers_equivalent(0.1 + 0.2, 0.3)

    def test_clear_difference(self) -> None:
        assert not numbers_equivalent(2.0, 9.0)

    def test_opposite_signs(self) -> None:
        assert not numbers_equivalent(1.0, -1.0)

    # ------------------------------------------------------------------
    # Custom tolerances
    # ------------------------------------------------------------------

    def test_loose_relative_tolerance(self) -> None:
        assert numbers_equivalent(100.0, 100.5, relative_tolerance=0.01)

    def test_zero_relative_tolerance_requires_exact(self) -> None:
        assert not numbers_equivalent(1.0, 1.0 + 1e-15, relative_tolerance=0.0)

    # ------------------------------------------------------------------
    # Exact boundary
    # ------------------------------------------------------------------

    def test_difference_equal_to_tolerance_is_equal(self) -> None:
        # magnitude 2.0 * 0.5 == 1.0 == |1.0 - 2.0|, all exact in binary
        assert numbers_equivalent(1.0, 2.0, relative_tolerance=0.5)
        assert numbers_equivalent(4.0, 3.0, relative_tolerance=0.25)

    def test_tolerance_one_ulp_short_differs(self) -> None:
        assert not numbers_equivalent(
            1.0, 2.0, relative_tolerance=math.nextafter(0.5, 0.0)
        )

    def test_tolerance_one_ulp_over_is_equal(self) -> None:
        assert numbers_equivalent(1.0, 2.0, relative_tolerance=math.nextafter(0.5, 1.0))

    @pytest.mark.parametrize("magnitude", [1.0, 1e6, 1e-6])
    def test_default_tolerance_boundary(self, magnitude: float) -> None:
        # |a - m| <= a * 1e-10  <=>  a <= m / (1 - 1e-10)
        boundary = magnitude / (1.0 - 1e-10)
        assert numbers_equivalent(magnitude, _ulps(boundary, -4))
        assert not numbers_equivalent(magnitude, _ulps(boundary, 4))

    def test_default_tolerance_boundary_is_symmetric(self) -> None:
        boundary = 1.0 / (1.0 - 1e-10)
        below, above = _ulps(boundary, -4), _ulps(boundary, 4)
        assert numbers_equivalent(below, 1.0)
        assert not numbers_equivalent(above, 1.0)
        assert numbers_equivalent(-1.0, -below)
        assert not numbers_equivalent(-1.0, -above)


def _ulps(x: float, n: int) -> float:
    """Step ``x`` by ``n`` units in the last place (negative steps go down)."""
    toward = math.inf if n > 0 else -math.inf
    for _ in range(abs(n)):
        x = math.nextafter(x, toward)
    return x


class TestLiteralsEquivalent:
    def test_finite_literals_compare_as_doubles(self) -> None:
        assert literals_equivalent("42", "42.0")
        assert literals_equivalent("0.3", "0.30000000000000004")
        assert not literals_equivalent("1", "2")

    def test_underflow_compares_as_zero(self) -> None:
        assert literals_equivalent("1e-400", "0")

    def test_overflowing_literal_is_reflexive(self) -> None:
        assert literals_equivalent("1e400", "1e400")
        assert literals_equivalent("-1e400", "-1e400")

    def test_overflowing_literals_compare_by_value(self) -> None:
        assert literals_equivalent("1e400", "10e399")
        assert not literals_equivalent("1e400", "2e400")
        assert not literals_equivalent("1e400", "-1e400")

    def test_overflowing_vs_finite(self) -> None:
        assert not literals_equivalent("1e400", "1.7976931348623157e308")
        assert not literals_equivalent("5", "-1e400")

    def test_tolerance_beyond_double_range(self) -> None:
        assert literals_equivalent("1e400", "1.00000000005e400")
        assert not literals_equivalent("1e400", "1.0000000002e400")

    def test_custom_tolerance_beyond_double_range(self) -> None:
        assert literals_equivalent("1e400", "1.5e400", relative_tolerance=0.5)
        assert not literals_equivalent("1e400", "1.5e400", relative_tolerance=0.1)

    def test_extreme_exponents(self) -> None:
        assert literals_equivalent("1e999999999", "1e999999999")
        assert not literals_equivalent("1e999999999", "2e999999999")
