"""Minor/major unit amount conversion."""

from walletkit.core.amount.converter import (
    MAJOR_UNIT_DECIMALS,
    MINOR_UNITS_PER_MAJOR,
    AmountConverter,
    major_to_minor_approx,
    major_to_minor_exact,
    minor_to_major_approx,
    minor_to_major_exact,
)

__all__ = [
    "MAJOR_UNIT_DECIMALS",
    "MINOR_UNITS_PER_MAJOR",
    "AmountConverter",
    "major_to_minor_approx",
    "major_to_minor_exact",
    "minor_to_major_approx",
    "minor_to_major_exact",
]
