from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, DivisionByZero, Inexact, InvalidOperation, Overflow, Underflow

from suite_currency.utils.numeric_tools import quantum_for_scale

# Significant digits of contexts created from a policy, unless requested otherwise
DEFAULT_PRECISION = 28


@dataclass(frozen=True)
class RoundingPolicy:
    """How arithmetic on amounts of one currency must round and what it must signal.

    The policy is consumed by the decimal arithmetic primitive; nothing here performs
    arithmetic. `create_context` turns it into a `decimal.Context`.

    Attributes:
        scale: Fractional digits results are rounded to.
        rounding: Rounding mode; always round-half-to-even for currencies.
        raise_on_exactness: Signal results that lose precision.
        raise_on_overflow: Signal results too large to represent.
        raise_on_underflow: Signal results too small to represent.
        raise_on_divide_by_zero: Signal division by zero.
    """

    scale: int
    rounding: str = ROUND_HALF_EVEN
    raise_on_exactness: bool = True
    raise_on_overflow: bool = True
    raise_on_underflow: bool = True
    raise_on_divide_by_zero: bool = True

    def __post_init__(self) -> None:
        # Raise: scale must be a non-negative integer
        if isinstance(self.scale, bool) or not isinstance(self.scale, int) or self.scale < 0:
            raise ValueError(f"$scale must be a non-negative integer, but provided value is: {self.scale!r}")

    @property
    def quantum(self) -> Decimal:
        """Smallest step at `scale`, e.g. `Decimal("0.01")` for scale 2."""
        return quantum_for_scale(self.scale)

    def create_context(self, precision: int = DEFAULT_PRECISION) -> Context:
        """Create a `decimal.Context` that applies this policy.

        Enabled flags become traps, so the arithmetic primitive raises `Inexact`,
        `Overflow`, `Underflow` or `DivisionByZero` instead of returning a silently
        altered result. `InvalidOperation` stays trapped as in Python's default context.

        Args:
            precision: Significant digits of the context.

        Returns:
            A new, independent context.
        """
        traps = [InvalidOperation]
        if self.raise_on_exactness:
            traps.append(Inexact)
        if self.raise_on_overflow:
            traps.append(Overflow)
        if self.raise_on_underflow:
            traps.append(Underflow)
        if self.raise_on_divide_by_zero:
            traps.append(DivisionByZero)

        return Context(prec=precision, rounding=self.rounding, traps=traps)


def build_rounding_policy(scale: int) -> RoundingPolicy:
    """Build the rounding policy for a currency with $scale fractional digits.

    Round-half-to-even at $scale, with all four traps enabled.
    """
    return RoundingPolicy(scale=scale)
