"""Errors raised while reading, decoding and encoding shape codes."""

from typing import Optional


class ShapeCodeError(ValueError):
    """Base class for all shape code failures."""

    rule = "shape code"

    def __init__(self, message: str, offset: Optional[int] = None):
        self.message = message
        self.offset = offset
        if offset is None:
            super().__init__(f"{self.rule}: {message}")
        else:
            super().__init__(f"{self.rule} at token {offset}: {message}")


class MalformedToken(ShapeCodeError):
    """An element is neither a known tag nor a real number."""

    rule = "malformed token"


class ArityError(ShapeCodeError):
    """The matched variant got the wrong number of numeric tokens."""

    rule = "wrong arity"


class UnknownShapeTag(ShapeCodeError):
    """The discriminator position holds no recognized tag."""

    rule = "unknown shape tag"


class InvalidGeometry(ShapeCodeError):
    """A shape violates one of the model invariants."""

    rule = "invalid geometry"
