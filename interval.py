from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Tuple
from endpoint import (
    Bound,
    Closed,
    Endpoint,
    Number,
    Open,
    Unbound,
    CLOSED,
    NEG_INFINITY,
    POS_INFINITY,
    NEG_INF_SYMBOL,
    POS_INF_SYMBOL,
    check_value,
    format_number,
)

EMPTY_SYMBOL = "∅"

# Interval variants
EMPTY_KIND = "EMPTY"
EVERYTHING_KIND = "EVERYTHING"
BOUNDED_KIND = "BOUNDED"


@dataclass(frozen=True)
class Interval:
    """A set of reals between two endpoints, kept in canonical form.

    An interval is exactly one of ``EMPTY``, ``EVERYTHING`` or a bounded
    pair of endpoints. Inverted and zero-width open ranges collapse to
    ``EMPTY`` and the range unbounded on both sides to ``EVERYTHING``, so
    two intervals hold the same points iff they compare equal.

    Use the static constructors; ``Interval(...)`` only accepts shapes that
    are already canonical.
    """

    kind: str
    lower: Optional[Endpoint] = None
    upper: Optional[Endpoint] = None

    def __post_init__(self) -> None:
        if self.kind == EMPTY_KIND:
            if self.lower is not None or self.upper is not None:
                raise ValueError("empty interval carries no endpoints")
        elif self.kind == EVERYTHING_KIND:
            if self.lower != NEG_INFINITY or self.upper != POS_INFINITY:
                raise ValueError("everything interval must be unbounded on both sides")
        elif self.kind == BOUNDED_KIND:
            if not isinstance(self.lower, Endpoint) or not self.lower.is_lower_side():
                raise ValueError(f"{self.lower!r} is not a lower endpoint")
            if not isinstance(self.upper, Endpoint) or not self.upper.is_upper_side():
                raise ValueError(f"{self.upper!r} is not an upper endpoint")
            if self.upper < self.lower:
                raise ValueError("bounded interval must not be inverted")
            if self.lower == NEG_INFINITY and self.upper == POS_INFINITY:
                raise ValueError("use Interval.everything() for the whole line")
        else:
            raise ValueError(f"Unknown interval kind {self.kind}")

    # -----------------
    # Construction
    # -----------------
    @staticmethod
    def build(lower: Bound, upper: Bound) -> Interval:
        b1 = Endpoint.lower(lower)
        b2 = Endpoint.upper(upper)
        if b2 < b1:
            return EMPTY
        if b1 == NEG_INFINITY and b2 == POS_INFINITY:
            return EVERYTHING
        return Interval(BOUNDED_KIND, b1, b2)

    @staticmethod
    def empty() -> Interval:
        return EMPTY

    @staticmethod
    def everything() -> Interval:
        return EVERYTHING

    @staticmethod
    def reals() -> Interval:
        return EVERYTHING

    @staticmethod
    def singleton(k: Number) -> Interval:
        p = Endpoint(CLOSED, k)
        return Interval(BOUNDED_KIND, p, p)

    @staticmethod
    def closed(l: Number, r: Number) -> Interval:
        return Interval.build(Closed(l), Closed(r))

    @staticmethod
    def open(l: Number, r: Number) -> Interval:
        return Interval.build(Open(l), Open(r))

    @staticmethod
    def left_open(l: Number, r: Number) -> Interval:
        return Interval.build(Open(l), Closed(r))

    @staticmethod
    def right_open(l: Number, r: Number) -> Interval:
        return Interval.build(Closed(l), Open(r))

    @staticmethod
    def at_least(l: Number) -> Interval:
        return Interval.build(Closed(l), Unbound)

    @staticmethod
    def greater_than(l: Number) -> Interval:
        return Interval.build(Open(l), Unbound)

    @staticmethod
    def at_most(r: Number) -> Interval:
        return Interval.build(Unbound, Closed(r))

    @staticmethod
    def less_than(r: Number) -> Interval:
        return Interval.build(Unbound, Open(r))

    # -----------------
    # Queries
    # -----------------
    def is_empty(self) -> bool:
        return self.kind == EMPTY_KIND

    def is_everything(self) -> bool:
        return self.kind == EVERYTHING_KIND

    def is_bounded(self) -> bool:
        return self.kind == BOUNDED_KIND

    def is_singleton(self) -> bool:
        return (
            self.is_bounded()
            and self.lower.is_closed()
            and self.upper.is_closed()
            and self.lower.k == self.upper.k
        )

    def left(self) -> Optional[float]:
        return None if self.lower is None else self.lower.value

    def right(self) -> Optional[float]:
        return None if self.upper is None else self.upper.value

    def bounds(self) -> Optional[Tuple[Bound, Bound]]:
        if self.is_empty():
            return None
        return (self.lower.to_bound(), self.upper.to_bound())

    def contains(self, x: Number) -> bool:
        p = Endpoint(CLOSED, check_value(x))
        if self.is_empty():
            return False
        return self.lower <= p <= self.upper

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)

    # -----------------
    # Set relations
    # -----------------
    def overlaps(self, other: Interval) -> bool:
        """True when both intervals share at least one point."""
        if self.is_empty() or other.is_empty():
            return False
        if self.is_everything() or other.is_everything():
            return True
        return other.upper >= self.lower and self.upper >= other.lower

    def adheres_to(self, other: Interval) -> bool:
        """True when the intervals meet at a point that one of them holds.

        ``(2, 3)`` and ``[3, 5]`` adhere, ``(2, 3)`` and ``(3, 5]`` don't.
        """
        if not (self.is_bounded() and other.is_bounded()):
            return False
        return _touch(self.upper, other.lower) or _touch(other.upper, self.lower)

    def union(self, other: Interval) -> Tuple[Interval, ...]:
        """Union of two intervals.

        Returns ``(merged,)`` when the result is one interval, otherwise the
        two disjoint operands ordered left to right.
        """
        if other.is_empty():
            return (self,)
        if self.is_empty():
            return (other,)
        if self.is_everything() or other.is_everything():
            return (EVERYTHING,)
        if self.overlaps(other) or self.adheres_to(other):
            lower = min(self.lower, other.lower)
            upper = max(self.upper, other.upper)
            return (Interval.build(lower.to_bound(), upper.to_bound()),)
        if other.lower > self.upper:
            return (self, other)
        return (other, self)

    def __or__(self, other: Interval) -> Tuple[Interval, ...]:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.union(other)

    # -----------------
    # Rendering
    # -----------------
    def to_string(self) -> str:
        if self.is_empty():
            return EMPTY_SYMBOL
        if self.is_everything():
            return f"({NEG_INF_SYMBOL}, {POS_INF_SYMBOL})"
        if self.is_singleton():
            return "{" + format_number(self.lower.k) + "}"
        return f"{self.lower.lower_string()}, {self.upper.upper_string()}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self.is_empty():
            return "Interval.empty()"
        if self.is_everything():
            return "Interval.everything()"
        b1, b2 = self.bounds()
        return f"Interval.build({b1!r}, {b2!r})"


def _touch(upper: Endpoint, lower: Endpoint) -> bool:
    # closure of one side must land exactly on the other
    return upper.closure() == lower or upper == lower.closure()


EMPTY = Interval(EMPTY_KIND)
EVERYTHING = Interval(EVERYTHING_KIND, NEG_INFINITY, POS_INFINITY)
