"""Magnitude-scaled tolerance rule for comparing two JSON numbers.

Formula::

    equal  if e == a
    else   magnitude = max(|e|, |a|)
           tolerance = magnitude * relative_tolerance   (magnitude != 0)
                     = zero_tolerance                   (magnitude == 0)
           equal  iff |e - a| <= tolerance

With the defaults (1e-10, 1e-15) this treats ``42`` and ``42.0`` as equal,
and absorbs floating-point round-off such as ``0.1 + 0.2`` versus ``0.3``.

``literals_equivalent`` applies the same rule to two number literals.  When
either literal overflows a double (``1e400``) the rule is evaluated in
``decimal`` arithmetic instead, so no infinity ever reaches the formula.
"""

from __future__ import annotations

import math
from decimal import MAX_EMAX, MIN_EMIN, Decimal, localcontext

__all__ = ["literals_equivalent", "numbers_equivalent", "numeric_tolerance"]


def numeric_tolerance(
    expected: float,
    actual: float,
    relative_tolerance: float = 1e-10,
    zero_tolerance: float = 1e-15,
) -> float:
    """Return the allowed absolute difference between two numbers.

    Args:
        expected: The expected value.
        actual:   The actual value.
        relative_tolerance: Multiplier applied to the larger magnitude.
        zero_tolerance: Floor used only when both magnitudes are exactly 0.

    Returns:
        ``max(|expected|, |actual|) * relative_tolerance``, or
        ``zero_tolerance`` when that magnitude is 0.
    """
    magnitude = max(abs(expected), abs(actual))
    if magnitude == 0:
        return zero_tolerance
    return magnitude * relative_tolerance


def numbers_equivalent(
    expected: float,
    actual: float,
    relative_tolerance: float = 1e-10,
    zero_tolerance: float = 1e-15,
) -> bool:
    """Return True if the two numbers are equal within tolerance.

    The comparison is inclusive: a difference exactly equal to the tolerance
    is still equal.
    """
    if expected == actual:
        return True
    tolerance = numeric_tolerance(expected, actual, relative_tolerance, zero_tolerance)
    return abs(expected - actual) <= tolerance


def literals_equivalent(
    expected: str,
    actual: str,
    relative_tolerance: float = 1e-10,
    zero_tolerance: float = 1e-15,
) -> bool:
    """Return True if two JSON number literals are equal within tolerance.

    Literals that fit in a double are compared as doubles.  Otherwise both
    are compared as exact decimals, with the tolerances converted exactly.
    """
    e, a = float(expected), float(actual)
    if math.isfinite(e) and math.isfinite(a):
        return numbers_equivalent(e, a, relative_tolerance, zero_tolerance)

    with localcontext() as ctx:
        ctx.prec = 34
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return numbers_equivalent(
            Decimal(expected),
            Decimal(actual),
            Decimal(relative_tolerance),
            Decimal(zero_tolerance),
        )
