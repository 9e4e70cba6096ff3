"""Conversion between integer minor units and decimal major units.

Two precision tiers are provided:

- Approximate: native float division/multiplication. Good enough for rough
  display, never for values that must round-trip.
- Exact: ``decimal.Decimal`` arithmetic with a local context whose precision
  grows with the operand, so no binary floating-point error is introduced
  regardless of magnitude.

Major units carry exactly 8 fractional digits (1 major = 100_000_000 minor).
"""

import math
from decimal import (
    ROUND_DOWN,
    ROUND_HALF_UP,
    Decimal,
    DecimalException,
    InvalidOperation,
    localcontext,
)
from typing import Final

import structlog

from walletkit.core.exceptions import ArithmeticParseError

log = structlog.get_logger(__name__)

MAJOR_UNIT_DECIMALS: Final[int] = 8
MINOR_UNITS_PER_MAJOR: Final[int] = 10**MAJOR_UNIT_DECIMALS

_MAJOR_QUANTUM: Final[Decimal] = Decimal(1).scaleb(-MAJOR_UNIT_DECIMALS)
_MINOR_QUANTUM: Final[Decimal] = Decimal(1)


# =============================================================================
# Approximate (float) tier
# =============================================================================


def minor_to_major_approx(amount: int | float) -> float:
    """Convert minor units to major units with float division.

    Args:
        amount: Amount in minor units.

    Returns:
        Amount in major units, or NaN when the input is not numeric.

    Example:
        >>> minor_to_major_approx(150_000_000)
        1.5
    """
    try:
        return float(amount) / MINOR_UNITS_PER_MAJOR
    except (TypeError, ValueError):
        return math.nan


def major_to_minor_approx(amount: int | float) -> int | float:
    """Convert major units to minor units, truncating toward zero.

    The fractional remainder is dropped, not rounded: 0.000000019 major
    becomes 1 minor unit, and -1.5e-8 becomes -1.

    Args:
        amount: Amount in major units.

    Returns:
        Integer minor units. NaN for non-numeric input; infinities pass
        through unchanged.

    Example:
        >>> major_to_minor_approx(0.5)
        50000000
    """
    try:
        scaled = float(amount) * MINOR_UNITS_PER_MAJOR
    except (TypeError, ValueError):
        return math.nan

    if not math.isfinite(scaled):
        return scaled
    return math.trunc(scaled)


# =============================================================================
# Exact (Decimal) tier
# =============================================================================


def _parse_decimal(value: object) -> Decimal:
    """Parse value into a finite Decimal or raise ArithmeticParseError."""
    if isinstance(value, bool):
        raise ArithmeticParseError(value, "Booleans are not amounts")

    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, int):
        parsed = Decimal(value)
    elif isinstance(value, float | str):
        # str() gives the shortest repr for floats, e.g. 0.1 -> "0.1"
        try:
            parsed = Decimal(str(value).strip())
        except InvalidOperation:
            raise ArithmeticParseError(value) from None
    else:
        raise ArithmeticParseError(value)

    if not parsed.is_finite():
        raise ArithmeticParseError(value, f"Amount must be finite, got {value!r}")
    return parsed


def _required_precision(value: Decimal) -> int:
    """Digits of precision needed to scale value by 10**±8 without rounding."""
    digits = len(value.as_tuple().digits)
    return max(28, digits + abs(value.adjusted()) + 2 * MAJOR_UNIT_DECIMALS)


def minor_to_major_exact(amount: int | str | Decimal) -> str:
    """Convert minor units to a major-unit string with 8 fractional digits.

    Args:
        amount: Amount in minor units (int, numeric string or Decimal).

    Returns:
        Fixed-point string, e.g. "1.50000000". Never uses exponent notation.

    Raises:
        ArithmeticParseError: If amount is not a finite number, or its
            scaled value exceeds the decimal exponent range.

    Example:
        >>> minor_to_major_exact(1)
        '0.00000001'
    """
    value = _parse_decimal(amount)

    with localcontext() as ctx:
        ctx.prec = _required_precision(value)
        try:
            major = value.scaleb(-MAJOR_UNIT_DECIMALS).quantize(
                _MAJOR_QUANTUM, rounding=ROUND_HALF_UP
            )
        except DecimalException:
            raise ArithmeticParseError(amount, f"Amount out of range: {amount!r}") from None

    if major.is_zero():
        major = major.copy_abs()
    return f"{major:f}"


def major_to_minor_exact(amount: int | float | str | Decimal) -> int:
    """Convert a major-unit amount to integer minor units.

    The result is a Python int, so magnitudes beyond 2**53 keep every digit.
    Fractions of a minor unit are truncated toward zero.

    Args:
        amount: Amount in major units (numeric string preferred over float).

    Returns:
        Amount in minor units.

    Raises:
        ArithmeticParseError: If amount is not a finite number, or its
            scaled value exceeds the decimal exponent range.

    Example:
        >>> major_to_minor_exact("1.23456789")
        123456789
    """
    value = _parse_decimal(amount)

    with localcontext() as ctx:
        ctx.prec = _required_precision(value)
        try:
            scaled = value.scaleb(MAJOR_UNIT_DECIMALS)
            minor = scaled.quantize(_MINOR_QUANTUM, rounding=ROUND_DOWN)
        except DecimalException:
            raise ArithmeticParseError(amount, f"Amount out of range: {amount!r}") from None

    if minor != scaled:
        log.debug(
            "sub_minor_precision_truncated",
            amount=str(value),
            dropped=str(scaled - minor),
        )
    return int(minor)


class AmountConverter:
    """Injectable facade over the conversion functions.

    Presentation code that receives a converter instead of importing the
    functions can be handed a stub in tests.

    Example:
        converter = AmountConverter()
        label = converter.minor_to_major_exact(balance) + " BTC"
    """

    decimals: Final[int] = MAJOR_UNIT_DECIMALS

    def minor_to_major_approx(self, amount: int | float) -> float:
        return minor_to_major_approx(amount)

    def major_to_minor_approx(self, amount: int | float) -> int | float:
        return major_to_minor_approx(amount)

    def minor_to_major_exact(self, amount: int | str | Decimal) -> str:
        return minor_to_major_exact(amount)

    def major_to_minor_exact(self, amount: int | float | str | Decimal) -> int:
        return major_to_minor_exact(amount)
