"""Core shape data structures."""

import math
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Iterable, List, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidGeometry, UnknownShapeTag
from .tokens import ShapeTag


def _real(value: Any, name: str) -> float:
    """Coerce a field value to a finite float."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(
        value, (int, float, np.integer, np.floating)
    ):
        raise InvalidGeometry(f"{name} must be a real number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidGeometry(f"{name} must be finite, got {value}")
    return value


@dataclass(frozen=True)
class Point:
    """A 2D point in path coordinates."""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, "x", _real(self.x, "x"))
        object.__setattr__(self, "y", _real(self.y, "y"))

    @classmethod
    def from_pair(cls, pair: Union["Point", Sequence[float]]) -> "Point":
        """Build a point from an (x, y) pair."""
        if isinstance(pair, Point):
            return pair
        if len(pair) != 2:
            raise InvalidGeometry(f"a point needs exactly 2 coordinates, got {len(pair)}")
        return cls(pair[0], pair[1])

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Shape:
    """Base class for the five shape variants."""

    kind: ClassVar[ShapeTag]

    def __post_init__(self):
        problems = self.issues()
        if problems:
            raise InvalidGeometry(problems[0])

    def issues(self) -> List[str]:
        """List the invariants this shape violates."""
        return []

    def coordinates(self) -> List[Point]:
        """Get the literal points stored in this shape."""
        return [f for f in (getattr(self, fd.name) for fd in fields(self)) if isinstance(f, Point)]

    def to_array(self) -> np.ndarray:
        """Get the stored points as an (N, 2) float array."""
        return np.array([p.to_tuple() for p in self.coordinates()], dtype=np.float64).reshape(-1, 2)

    @classmethod
    def from_code(cls, code: Any) -> "Shape":
        """Parse a shape from its code."""
        from .parser import ShapeCodeParser
        shape = ShapeCodeParser.parse(code)
        if cls is not Shape and not isinstance(shape, cls):
            raise UnknownShapeTag(
                f"expected a {cls.__name__} code, got {type(shape).__name__}",
                0 if shape.kind.leads else 2,
            )
        return shape

    def to_code(self) -> str:
        """Encode this shape to its canonical code."""
        from .encoder import ShapeCodeEncoder
        return ShapeCodeEncoder.encode_text(self)

    def __str__(self) -> str:
        return self.to_code()


@dataclass(frozen=True)
class Polygon(Shape):
    """A start point followed by line-to vertices."""
    points: Tuple[Point, ...]

    kind: ClassVar[ShapeTag] = ShapeTag.LINE

    def __post_init__(self):
        object.__setattr__(self, "points", tuple(Point.from_pair(p) for p in self.points))
        super().__post_init__()

    @classmethod
    def from_points(cls, points: Iterable[Union[Point, Sequence[float]]]) -> "Polygon":
        return cls(tuple(points))

    @property
    def start(self) -> Point:
        return self.points[0]

    @property
    def vertices(self) -> Tuple[Point, ...]:
        """The line-to vertices after the start point."""
        return self.points[1:]

    def issues(self) -> List[str]:
        if not self.points:
            return ["polygon needs at least a start point"]
        return []

    def coordinates(self) -> List[Point]:
        return list(self.points)


@dataclass(frozen=True)
class Rectangle(Shape):
    """An optionally rotated, optionally rounded rectangle."""
    origin: Point
    width: float
    height: float
    rotation: float = 0.0
    corner_radius: float = 0.0

    kind: ClassVar[ShapeTag] = ShapeTag.RECTANGLE

    def __post_init__(self):
        object.__setattr__(self, "origin", Point.from_pair(self.origin))
        # Negative width/height mean reflection and are kept as is
        for name in ("width", "height", "rotation", "corner_radius"):
            object.__setattr__(self, name, _real(getattr(self, name), name))
        super().__post_init__()

    def issues(self) -> List[str]:
        if self.corner_radius < 0:
            return [f"corner radius must be >= 0, got {self.corner_radius}"]
        return []


@dataclass(frozen=True)
class Circle(Shape):
    """A full circle."""
    center: Point
    radius: float

    kind: ClassVar[ShapeTag] = ShapeTag.CIRCLE

    def __post_init__(self):
        object.__setattr__(self, "center", Point.from_pair(self.center))
        object.__setattr__(self, "radius", _real(self.radius, "radius"))
        super().__post_init__()

    def issues(self) -> List[str]:
        if self.radius <= 0:
            return [f"circle radius must be > 0, got {self.radius}"]
        return []


@dataclass(frozen=True)
class Arc(Shape):
    """An arc from start to end; the sign of rotation gives the sweep direction."""
    start: Point
    end: Point
    rotation: float

    kind: ClassVar[ShapeTag] = ShapeTag.ARC

    def __post_init__(self):
        object.__setattr__(self, "start", Point.from_pair(self.start))
        object.__setattr__(self, "end", Point.from_pair(self.end))
        object.__setattr__(self, "rotation", _real(self.rotation, "rotation"))
        super().__post_init__()


@dataclass(frozen=True)
class CenterArc(Shape):
    """A center-arc; stored in the field order of its code."""
    start: Point
    rotation: float
    end: Point

    kind: ClassVar[ShapeTag] = ShapeTag.CENTER_ARC

    def __post_init__(self):
        object.__setattr__(self, "start", Point.from_pair(self.start))
        object.__setattr__(self, "rotation", _real(self.rotation, "rotation"))
        object.__setattr__(self, "end", Point.from_pair(self.end))
        super().__post_init__()
