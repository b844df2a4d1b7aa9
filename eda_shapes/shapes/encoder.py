"""Shape code encoding utilities."""

import json
from typing import Iterable, List, Union

from .shape import Arc, CenterArc, Circle, Point, Polygon, Rectangle, Shape
from .tokens import ShapeTag
from .validator import ShapeValidator

Element = Union[float, str]


class ShapeCodeEncoder:
    """Encoder for flat shape code arrays."""

    @staticmethod
    def encode(shape: Shape) -> List[Element]:
        """
        Encode a Shape object into its canonical token array.

        Args:
            shape: The Shape object to encode

        Returns:
            Numbers and tag strings in code order

        Raises:
            InvalidGeometry: If the shape no longer satisfies its invariants
        """
        ShapeValidator.check(shape)

        if isinstance(shape, Polygon):
            tokens = [shape.start.x, shape.start.y, ShapeTag.LINE.value]
            for vertex in shape.vertices:
                tokens.extend(vertex.to_tuple())
            return tokens
        if isinstance(shape, Rectangle):
            return [
                ShapeTag.RECTANGLE.value,
                shape.origin.x, shape.origin.y,
                shape.width, shape.height,
                shape.rotation, shape.corner_radius,
            ]
        if isinstance(shape, Circle):
            return [ShapeTag.CIRCLE.value, shape.center.x, shape.center.y, shape.radius]
        if isinstance(shape, Arc):
            return [
                shape.start.x, shape.start.y, ShapeTag.ARC.value,
                shape.end.x, shape.end.y, shape.rotation,
            ]
        if isinstance(shape, CenterArc):
            return [
                shape.start.x, shape.start.y, ShapeTag.CENTER_ARC.value,
                shape.rotation, shape.end.x, shape.end.y,
            ]
        # Unreachable: the validator rejects anything that is not a variant
        raise TypeError(f"Cannot encode {type(shape).__name__}")

    @staticmethod
    def encode_text(shape: Shape) -> str:
        """Encode a shape as compact JSON array text."""
        return ShapeCodeEncoder._dumps(ShapeCodeEncoder._compact(ShapeCodeEncoder.encode(shape)))

    @staticmethod
    def encode_paths(shapes: Iterable[Shape]) -> str:
        """Encode several shapes as one nested array."""
        shapes = list(shapes)
        ShapeValidator.check_all(shapes)
        return ShapeCodeEncoder._dumps(
            [ShapeCodeEncoder._compact(ShapeCodeEncoder.encode(s)) for s in shapes]
        )

    @staticmethod
    def format_for_display(shape: Shape, multiline: bool = False) -> str:
        """
        Format a shape for human-readable display.

        Args:
            shape: The shape to format
            multiline: If True, show each field on a separate line

        Returns:
            Formatted string representation
        """
        code = ShapeCodeEncoder.encode_text(shape)

        if not multiline:
            return code

        lines = [f"{type(shape).__name__} ({shape.kind.value})"]
        if isinstance(shape, Polygon):
            lines.append(f"  start: {_fmt_point(shape.start)}")
            for i, vertex in enumerate(shape.vertices):
                lines.append(f"  line {i + 1}: {_fmt_point(vertex)}")
        elif isinstance(shape, Rectangle):
            lines.append(f"  origin: {_fmt_point(shape.origin)}")
            lines.append(f"  size: {_fmt(shape.width)} x {_fmt(shape.height)}")
            lines.append(f"  rotation: {_fmt(shape.rotation)} deg")
            lines.append(f"  corner radius: {_fmt(shape.corner_radius)}")
        elif isinstance(shape, Circle):
            lines.append(f"  center: {_fmt_point(shape.center)}")
            lines.append(f"  radius: {_fmt(shape.radius)}")
        else:
            lines.append(f"  start: {_fmt_point(shape.start)}")
            lines.append(f"  end: {_fmt_point(shape.end)}")
            lines.append(f"  rotation: {_fmt(shape.rotation)} deg")

        return "\n".join(lines)

    @staticmethod
    def _compact(tokens: List[Element]) -> List[Union[int, float, str]]:
        """Write integral values without a trailing .0."""
        return [
            int(t) if isinstance(t, float) and t.is_integer() else t
            for t in tokens
        ]

    @staticmethod
    def _dumps(value) -> str:
        return json.dumps(value, separators=(",", ":"))


def _fmt(value: float) -> str:
    return f"{value:g}"


def _fmt_point(point: Point) -> str:
    return f"({_fmt(point.x)}, {_fmt(point.y)})"
