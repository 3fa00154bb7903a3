"""Monetary amounts held as whole cents."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _round_half_away(x: float) -> int:
    whole = math.trunc(x)
    fraction = x - whole
    if fraction >= 0.5:
        return whole + 1
    if fraction <= -0.5:
        return whole - 1
    return whole


@dataclass(frozen=True, order=True)
class Money:
    """A non-negative amount of money in cents."""

    cents: int = 0

    def __post_init__(self) -> None:
        if self.cents < 0:
            raise ValueError(f"money amount cannot be negative: {self.cents}")

    @classmethod
    def from_float(cls, amount: float) -> Money:
        """Build from a dollar amount, rounding to the nearest cent."""
        if amount < 0:
            raise ValueError(f"money amount cannot be negative: {amount:.2f}")
        return cls(_round_half_away(amount * 100))

    @classmethod
    def from_dollars(cls, dollars: int) -> Money:
        """Build from a whole number of dollars."""
        if dollars < 0:
            raise ValueError(f"money amount cannot be negative: {dollars}")
        return cls(dollars * 100)

    @property
    def dollars(self) -> float:
        return self.cents / 100.0

    def __str__(self) -> str:
        return f"${self.dollars:.2f}"

    def is_zero(self) -> bool:
        return self.cents == 0

    def is_positive(self) -> bool:
        return self.cents > 0

    def add(self, other: Money) -> Money:
        return Money(self.cents + other.cents)

    __add__ = add

    def subtract(self, other: Money) -> Money:
        """Difference of two amounts; raise ValueError if it would be negative."""
        result = self.cents - other.cents
        if result < 0:
            raise ValueError("subtraction would result in negative amount")
        return Money(result)

    __sub__ = subtract

    def multiply(self, factor: float) -> Money:
        """Scale by a non-negative factor, rounding to the nearest cent."""
        if factor < 0:
            raise ValueError(f"multiplication factor cannot be negative: {factor:.2f}")
        return Money(_round_half_away(self.cents * factor))