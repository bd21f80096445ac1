"""Money Conversion — decimal currency amounts to integer minor units.

Invariants:
    - to_minor_units(x) == round(x * 100), half-up, for any finite non-negative Decimal
    - Result is always an int (never float), whatever the magnitude
    - Range checks belong to the datastore, not here
"""

from decimal import Decimal, ROUND_HALF_UP, localcontext

from invoicing.core.domain_types import AmountInCents

_CENTS_PER_UNIT = Decimal(100)


def to_minor_units(amount: Decimal) -> AmountInCents:
    """Convert a validated amount (dollars) to cents."""
    with localcontext() as ctx:
        # exact for any exponent: digits before the point plus cents plus slack
        ctx.prec = max(ctx.prec, amount.adjusted() + 4)
        cents = (amount * _CENTS_PER_UNIT).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return AmountInCents(int(cents))
