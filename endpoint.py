from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union
from math import inf
import numbers
import numpy as np

Number = Union[int, float]

# shortest text that reads back as the same float
NUMBER_FORMAT = "%r"
NEG_INF_SYMBOL = "-∞"
POS_INF_SYMBOL = "+∞"

# Directed endpoint kinds. CLOSED is shared by both sides.
NEG_INF = "NEG_INF"
LOWER_OPEN = "LOWER_OPEN"
CLOSED = "CLOSED"
UPPER_OPEN = "UPPER_OPEN"
POS_INF = "POS_INF"

LOWER_KINDS = (NEG_INF, LOWER_OPEN, CLOSED)
UPPER_KINDS = (CLOSED, UPPER_OPEN, POS_INF)

# open bounds sit just inside their interval
_NUDGE = {LOWER_OPEN: 1, CLOSED: 0, UPPER_OPEN: -1}


class InvalidEndpointValue(ValueError):
    """Raised when an endpoint value is not a finite real number."""


def check_value(k: Any) -> float:
    if isinstance(k, (bool, np.bool_)) or not isinstance(k, numbers.Real):
        raise InvalidEndpointValue(f"endpoint value must be a real number, got {k!r}")
    try:
        v = float(k)
    except OverflowError as e:
        raise InvalidEndpointValue(
            f"endpoint value of type {type(k).__name__} is too large for a float"
        ) from e
    if not np.isfinite(v):
        raise InvalidEndpointValue(f"endpoint value must be finite, got {k!r}")
    return v


def format_number(k: float) -> str:
    s = NUMBER_FORMAT % k
    return s[:-2] if s.endswith(".0") else s


# -----------------
# Raw bounds
# -----------------
class Bound:
    """Boundary value of an interval side, without the side."""

    def is_unbound(self) -> bool:
        return False


@dataclass(frozen=True)
class Closed(Bound):
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", check_value(self.value))

    def __repr__(self) -> str:
        return f"Closed({self.value!r})"


@dataclass(frozen=True)
class Open(Bound):
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", check_value(self.value))

    def __repr__(self) -> str:
        return f"Open({self.value!r})"


class _Unbound(Bound):
    _instance: Optional[_Unbound] = None

    def __new__(cls) -> _Unbound:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_unbound(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "Unbound"


Unbound = _Unbound()


# -----------------
# Directed endpoints
# -----------------
@dataclass(frozen=True)
class Endpoint:
    """An interval boundary that knows which side it sits on.

    All five kinds share one total order, given by ``position()``: an
    endpoint is placed at its value and an open endpoint is nudged one
    step toward the inside of its interval. This gives both the same-side
    order (``[k`` before ``(k``, ``k)`` before ``k]``) and the cross-side
    test used to detect inverted ranges (``(k`` after ``k]``).
    """

    kind: str
    k: Optional[float] = None

    def __post_init__(self) -> None:
        if self.kind in (NEG_INF, POS_INF):
            if self.k is not None:
                raise ValueError(f"{self.kind} endpoint carries no value")
        elif self.kind in _NUDGE:
            object.__setattr__(self, "k", check_value(self.k))
        else:
            raise ValueError(f"Unknown endpoint kind {self.kind}")

    @staticmethod
    def lower(bound: Bound) -> Endpoint:
        if isinstance(bound, Closed):
            return Endpoint(CLOSED, bound.value)
        if isinstance(bound, Open):
            return Endpoint(LOWER_OPEN, bound.value)
        if isinstance(bound, _Unbound):
            return NEG_INFINITY
        raise TypeError(f"Cannot use {bound!r} as a bound")

    @staticmethod
    def upper(bound: Bound) -> Endpoint:
        if isinstance(bound, Closed):
            return Endpoint(CLOSED, bound.value)
        if isinstance(bound, Open):
            return Endpoint(UPPER_OPEN, bound.value)
        if isinstance(bound, _Unbound):
            return POS_INFINITY
        raise TypeError(f"Cannot use {bound!r} as a bound")

    @property
    def value(self) -> float:
        if self.kind == NEG_INF:
            return -inf
        if self.kind == POS_INF:
            return inf
        return self.k

    def position(self) -> Tuple[float, int]:
        return (self.value, _NUDGE.get(self.kind, 0))

    def is_closed(self) -> bool:
        return self.kind == CLOSED

    def is_open(self) -> bool:
        return self.kind in (LOWER_OPEN, UPPER_OPEN)

    def is_infinite(self) -> bool:
        return self.kind in (NEG_INF, POS_INF)

    def is_lower_side(self) -> bool:
        return self.kind in LOWER_KINDS

    def is_upper_side(self) -> bool:
        return self.kind in UPPER_KINDS

    def closure(self) -> Endpoint:
        if self.is_open():
            return Endpoint(CLOSED, self.k)
        return self

    def to_bound(self) -> Bound:
        if self.is_infinite():
            return Unbound
        if self.is_closed():
            return Closed(self.k)
        return Open(self.k)

    def __lt__(self, other: Endpoint) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.position() < other.position()

    def __le__(self, other: Endpoint) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.position() <= other.position()

    def __gt__(self, other: Endpoint) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.position() > other.position()

    def __ge__(self, other: Endpoint) -> bool:
        if not isinstance(other, Endpoint):
            return NotImplemented
        return self.position() >= other.position()

    def lower_string(self) -> str:
        if self.kind == NEG_INF:
            return "(" + NEG_INF_SYMBOL
        s = "[" if self.is_closed() else "("
        return s + format_number(self.k)

    def upper_string(self) -> str:
        if self.kind == POS_INF:
            return POS_INF_SYMBOL + ")"
        s = "]" if self.is_closed() else ")"
        return format_number(self.k) + s


NEG_INFINITY = Endpoint(NEG_INF)
POS_INFINITY = Endpoint(POS_INF)
