"""Shape representation and parsing module."""

from .errors import ShapeCodeError, MalformedToken, ArityError, UnknownShapeTag, InvalidGeometry
from .tokens import ShapeTag, TokenReader, tokenize
from .shape import Shape, Point, Polygon, Rectangle, Circle, Arc, CenterArc
from .parser import ShapeCodeParser
from .encoder import ShapeCodeEncoder
from .validator import ShapeValidator

__all__ = [
    "ShapeCodeError",
    "MalformedToken",
    "ArityError",
    "UnknownShapeTag",
    "InvalidGeometry",
    "ShapeTag",
    "TokenReader",
    "tokenize",
    "Shape",
    "Point",
    "Polygon",
    "Rectangle",
    "Circle",
    "Arc",
    "CenterArc",
    "ShapeCodeParser",
    "ShapeCodeEncoder",
    "ShapeValidator",
]
