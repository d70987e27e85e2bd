import math
from enum import IntEnum
from typing import Callable


class SlopeKind(IntEnum):
    """
    Kinds of slope, declared in sort order:
      DEGENERATE < FINITE < POSITIVE_INFINITY
    """
    DEGENERATE = 0
    FINITE = 1
    POSITIVE_INFINITY = 2


class Slope:
    """
    Tagged slope value between two points.

    Replaces the floating-point sentinels of the classic version
    (-inf for "same point", +inf for "vertical") with an explicit kind,
    so equality never depends on float aliasing:

      • DEGENERATE        point compared with itself
      • FINITE(value)     regular slope, horizontal is +0.0
      • POSITIVE_INFINITY vertical line
    """

    __slots__ = ("kind", "value")

    def __init__(self, kind: SlopeKind, value: float = 0.0):
        if kind == SlopeKind.FINITE:
            if math.isnan(value) or math.isinf(value):
                raise ValueError(f"finite slope expected, got {value}")
            # normalize -0.0 so two horizontal slopes always compare equal
            value = float(value) + 0.0
        else:
            value = 0.0
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Slope is immutable")

    def __reduce__(self):
        return (Slope, (self.kind, self.value))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def degenerate(cls) -> "Slope":
        return cls(SlopeKind.DEGENERATE)

    @classmethod
    def finite(cls, value: float) -> "Slope":
        return cls(SlopeKind.FINITE, value)

    @classmethod
    def positive_infinity(cls) -> "Slope":
        return cls(SlopeKind.POSITIVE_INFINITY)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_degenerate(self) -> bool:
        return self.kind == SlopeKind.DEGENERATE

    @property
    def is_vertical(self) -> bool:
        return self.kind == SlopeKind.POSITIVE_INFINITY

    def as_float(self) -> float:
        """
        Float view of the slope, matching the classic numeric convention:
        degenerate → -inf, vertical → +inf.
        """
        if self.kind == SlopeKind.DEGENERATE:
            return -math.inf
        if self.kind == SlopeKind.POSITIVE_INFINITY:
            return math.inf
        return self.value

    # ------------------------------------------------------------------
    # Equality & ordering
    # ------------------------------------------------------------------

    def _key(self):
        return (int(self.kind), self.value)

    def __eq__(self, other):
        if not isinstance(other, Slope):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __lt__(self, other):
        if not isinstance(other, Slope):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other):
        if not isinstance(other, Slope):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other):
        if not isinstance(other, Slope):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other):
        if not isinstance(other, Slope):
            return NotImplemented
        return self._key() >= other._key()

    def __repr__(self):
        if self.kind == SlopeKind.FINITE:
            return f"Slope({self.value!r})"
        return f"Slope({self.kind.name})"


class Point:
    """
    Immutable point in the plane with integer coordinates.

    Supports:
      - total ordering by y-coordinate, ties broken by x-coordinate
      - slope to another point (see Slope for the edge cases)
      - a slope_order() sort key relative to this point
    """

    __slots__ = ("x", "y")

    def __init__(self, x: int, y: int):
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def __setattr__(self, name, value):
        raise AttributeError("Point is immutable")

    def __reduce__(self):
        return (Point, (self.x, self.y))

    # ------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------
    def compare(self, other: "Point") -> int:
        """
        Returns a negative number, zero, or a positive number as this point
        is less than, equal to, or greater than `other`, comparing y first
        and x second.
        """
        if self.y != other.y:
            return -1 if self.y < other.y else 1
        if self.x != other.x:
            return -1 if self.x < other.x else 1
        return 0

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __lt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare(other) >= 0

    # ------------------------------------------------------------
    # Slopes
    # ------------------------------------------------------------
    def slope_to(self, other: "Point") -> Slope:
        """
        Slope between this point and `other`:

          same point  → Slope.degenerate()
          vertical    → Slope.positive_infinity()
          horizontal  → Slope.finite(+0.0)
          otherwise   → Slope.finite(dy / dx)
        """
        dx = other.x - self.x
        dy = other.y - self.y

        if dx == 0 and dy == 0:
            return Slope.degenerate()
        if dx == 0:
            return Slope.positive_infinity()
        if dy == 0:
            return Slope.finite(0.0)
        return Slope.finite(dy / dx)

    def slope_order(self) -> Callable[["Point"], Slope]:
        """
        Key function ordering points by the slope they make with this point,
        e.g. sorted(points, key=origin.slope_order()).
        """
        return self.slope_to

    def __repr__(self):
        return f"({self.x}, {self.y})"

    __str__ = __repr__
