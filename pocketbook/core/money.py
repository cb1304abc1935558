"""Minor-unit arithmetic for currency conversion."""
from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal

from .errors import ValidationError

_INTEGRAL = Decimal(1)


def scale_factor(minor_unit: int) -> Decimal:
    """Return ``10 ** minor_unit`` as an exact decimal."""

    if minor_unit < 0:
        raise ValidationError("minor unit must not be negative")
    return Decimal(10) ** minor_unit


def convert_to_base_minor(
    amount_minor: int,
    source_minor_unit: int,
    base_minor_unit: int,
    rate: Decimal,
) -> int:
    """Convert an amount in source minor units into base minor units.

    ``rate`` follows the "1 base = rate quote" convention, so the major source
    amount is divided by it. The result is rounded half-to-even.
    """

    if rate <= 0:
        raise ValidationError("invalid fx rate")
    major = Decimal(amount_minor) / scale_factor(source_minor_unit)
    base_major = major / rate
    scaled = base_major * scale_factor(base_minor_unit)
    return int(scaled.quantize(_INTEGRAL, rounding=ROUND_HALF_EVEN))


__all__ = ["convert_to_base_minor", "scale_factor"]
