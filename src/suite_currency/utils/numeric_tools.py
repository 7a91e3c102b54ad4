from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is not a supported scalar type.
    """
    if isinstance(value, Decimal):
        return value

    # Raise: bool is an int subclass, but never a monetary amount
    if isinstance(value, bool) or not isinstance(value, (int, str, float)):
        raise TypeError(f"$value must be Decimal, int, str or float, but provided value is: {value!r}")

    return Decimal(str(value))


def quantum_for_scale(scale: int) -> Decimal:
    """Returns the smallest step representable with $scale fractional digits.

    Args:
        scale: Number of fractional digits.

    Returns:
        `Decimal` equal to 10 ** -scale, e.g. `Decimal("0.01")` for scale 2.
    """
    return Decimal(1).scaleb(-scale)
