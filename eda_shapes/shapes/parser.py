"""Shape code parsing utilities."""

from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import numpy as np

from .errors import ArityError, InvalidGeometry, ShapeCodeError, UnknownShapeTag
from .shape import Arc, CenterArc, Circle, Point, Polygon, Rectangle, Shape
from .tokens import ShapeTag, TokenReader, classify, load_elements

Source = Union[str, Sequence[Any]]


class ShapeCodeParser:
    """Parser for flat shape code arrays."""

    @staticmethod
    def parse(source: Source) -> Shape:
        """
        Parse a shape code into a Shape object.

        Format: a flat array of numbers and tags, e.g.
            [0, 0, "L", 10, 0, 10, 10]     polygon
            ["R", 5, 5, 20, 10, 0, 2]      rectangle
            ["CIRCLE", 0, 0, 5]            circle
            [0, 0, "ARC", 10, 10, 90]      arc
            [0, 0, "CARC", 45, 10, 10]     center-arc

        Args:
            source: JSON array text or an already decoded sequence

        Returns:
            The parsed Shape object

        Raises:
            ShapeCodeError: If the code is invalid (a ValueError subclass)
        """
        return ShapeCodeParser.decode(load_elements(source))

    @staticmethod
    def decode(tokens: Sequence[Any]) -> Shape:
        """
        Decode a token sequence into exactly one shape.

        Raw elements (numbers, tag strings) are classified on the way in, so
        the output of ShapeCodeEncoder.encode decodes directly. The
        discriminator positions are checked before anything else, so a bad
        tag reports UnknownShapeTag rather than MalformedToken.
        """
        elements = list(tokens)
        ShapeCodeParser._check_discriminator(elements)
        reader = TokenReader([classify(e, i) for i, e in enumerate(elements)])
        head = reader.peek()

        if head is ShapeTag.RECTANGLE:
            return ShapeCodeParser._decode_rectangle(reader)
        if head is ShapeTag.CIRCLE:
            return ShapeCodeParser._decode_circle(reader)

        decoder = _PATH_DECODERS[reader.peek(2)]
        start = Point(*reader.read_pair())
        reader.read_tag()
        return decoder(reader, start)

    @staticmethod
    def parse_paths(source: Source) -> List[Shape]:
        """
        Parse a code that may nest several paths in one array.

        A flat array gives a single shape; an array of arrays is decoded
        element by element, to any depth. Empty arrays are not paths and
        fail like any stream too short to hold a tag.
        """
        elements = load_elements(source)
        if not ShapeCodeParser.is_path_list(elements):
            return [ShapeCodeParser.parse(elements)]

        shapes = []
        for sub_path in elements:
            shapes.extend(ShapeCodeParser.parse_paths(sub_path))
        return shapes

    @staticmethod
    def is_path_list(elements: Sequence[Any]) -> bool:
        """Check if there are elements and every one is itself a path array."""
        return len(elements) > 0 and all(
            isinstance(e, (list, tuple, np.ndarray)) for e in elements
        )

    @staticmethod
    def validate(source: Source) -> tuple[bool, Optional[str]]:
        """
        Validate a shape code without keeping the result.

        Returns:
            A tuple of (is_valid, error_message)
        """
        try:
            ShapeCodeParser.parse_paths(source)
            return True, None
        except ShapeCodeError as e:
            return False, str(e)

    @staticmethod
    def normalize(source: Source) -> str:
        """
        Normalize a shape code (parse and re-encode).

        This ensures consistent formatting.
        """
        from .encoder import ShapeCodeEncoder

        elements = load_elements(source)
        if ShapeCodeParser.is_path_list(elements):
            return ShapeCodeEncoder.encode_paths(ShapeCodeParser.parse_paths(elements))
        return ShapeCodeEncoder.encode_text(ShapeCodeParser.parse(elements))

    @staticmethod
    def _check_discriminator(elements: List[Any]) -> None:
        """Report unknown tags before the rest of the stream is classified."""
        if elements:
            head = elements[0]
            tag = ShapeTag.lookup(head)
            if tag is not None:
                if tag.leads:
                    return
                raise UnknownShapeTag(f"{tag.value!r} cannot start a shape code", 0)
            if isinstance(head, str) and not _is_numeric(head):
                raise UnknownShapeTag(f"unrecognized leading tag {head!r}", 0)
        if len(elements) < 3:
            raise UnknownShapeTag(
                f"expected at least 3 tokens, got {len(elements)}", len(elements)
            )
        tag = ShapeTag.lookup(elements[2])
        if tag is None or tag.leads:
            raise UnknownShapeTag(f"no path tag at position 2: {_describe(elements[2])}", 2)

    @staticmethod
    def _decode_rectangle(reader: TokenReader) -> Rectangle:
        reader.read_tag()
        origin = Point(*reader.read_pair())
        width = reader.read_number()
        height = reader.read_number()
        rotation = reader.read_number()
        corner_offset = reader.offset
        corner_radius = reader.read_number()
        reader.expect_end()
        if corner_radius < 0:
            raise InvalidGeometry(f"corner radius must be >= 0, got {corner_radius}", corner_offset)
        return Rectangle(origin, width, height, rotation, corner_radius)

    @staticmethod
    def _decode_circle(reader: TokenReader) -> Circle:
        reader.read_tag()
        center = Point(*reader.read_pair())
        radius_offset = reader.offset
        radius = reader.read_number()
        reader.expect_end()
        if radius <= 0:
            raise InvalidGeometry(f"circle radius must be > 0, got {radius}", radius_offset)
        return Circle(center, radius)

    @staticmethod
    def _decode_polygon(reader: TokenReader, start: Point) -> Polygon:
        if reader.remaining() % 2 != 0:
            raise ArityError(
                f"line-to coordinates must come in pairs, got {reader.remaining()}",
                len(reader.tokens) - 1,
            )
        points = [start]
        while reader.can_read():
            points.append(Point(*reader.read_pair()))
        return Polygon(tuple(points))

    @staticmethod
    def _decode_arc(reader: TokenReader, start: Point) -> Arc:
        end = Point(*reader.read_pair())
        rotation = reader.read_number()
        reader.expect_end()
        return Arc(start, end, rotation)

    @staticmethod
    def _decode_center_arc(reader: TokenReader, start: Point) -> CenterArc:
        rotation = reader.read_number()
        end = Point(*reader.read_pair())
        reader.expect_end()
        return CenterArc(start, rotation, end)


def _is_numeric(text: str) -> bool:
    try:
        float(text)
    except ValueError:
        return False
    return True


def _describe(token: Any) -> str:
    if isinstance(token, ShapeTag):
        return repr(token.value)
    return repr(token)


_PATH_DECODERS: Dict[ShapeTag, Callable[[TokenReader, Point], Shape]] = {
    ShapeTag.LINE: ShapeCodeParser._decode_polygon,
    ShapeTag.ARC: ShapeCodeParser._decode_arc,
    ShapeTag.CENTER_ARC: ShapeCodeParser._decode_center_arc,
}
