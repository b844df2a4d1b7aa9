"""Token stream reading for flat shape code arrays."""

import json
import math
from enum import Enum
from typing import Any, List, Optional, Sequence, Union

import numpy as np

from .errors import ArityError, MalformedToken


class ShapeTag(Enum):
    """Literal tags that may appear in a shape code array."""
    LINE = "L"
    RECTANGLE = "R"
    CIRCLE = "CIRCLE"
    ARC = "ARC"
    CENTER_ARC = "CARC"

    @classmethod
    def from_code(cls, code: str) -> "ShapeTag":
        """Parse a tag from its literal string."""
        for tag in cls:
            if tag.value == code:
                return tag
        raise ValueError(f"Unknown shape tag: {code}")

    @classmethod
    def lookup(cls, code: Any) -> Optional["ShapeTag"]:
        """Return the tag for a raw element, or None if it is not one."""
        if isinstance(code, ShapeTag):
            return code
        if not isinstance(code, str):
            return None
        try:
            return cls.from_code(code)
        except ValueError:
            return None

    @property
    def leads(self) -> bool:
        """Check if this tag discriminates at position 0."""
        return self in (ShapeTag.RECTANGLE, ShapeTag.CIRCLE)


Token = Union[float, ShapeTag]


def load_elements(source: Union[str, Sequence[Any]]) -> List[Any]:
    """
    Turn a shape code into its list of raw elements.

    Args:
        source: JSON array text, or an already decoded sequence

    Returns:
        The raw elements in source order

    Raises:
        MalformedToken: If the source is not an array, or its text is not JSON
    """
    if isinstance(source, str):
        try:
            source = json.loads(source)
        except json.JSONDecodeError as e:
            raise MalformedToken(f"not valid JSON ({e.msg})", 0) from e
    if isinstance(source, np.ndarray):
        source = source.tolist()
    if not isinstance(source, (list, tuple)):
        raise MalformedToken(
            f"shape code must be an array, got {type(source).__name__}", 0
        )
    return list(source)


def classify(element: Any, offset: int) -> Token:
    """Classify one raw element as a number or a tag."""
    if isinstance(element, ShapeTag):
        return element
    if isinstance(element, (bool, np.bool_)):
        raise MalformedToken(f"boolean {element!r} is not a token", offset)

    if isinstance(element, (int, float, np.integer, np.floating)):
        value = float(element)
    elif isinstance(element, str):
        tag = ShapeTag.lookup(element)
        if tag is not None:
            return tag
        try:
            value = float(element)
        except ValueError:
            raise MalformedToken(f"unrecognized element {element!r}", offset)
    else:
        raise MalformedToken(f"unsupported element {element!r}", offset)

    if not math.isfinite(value):
        raise MalformedToken(f"non-finite number {element!r}", offset)
    return value


def tokenize(source: Union[str, Sequence[Any]]) -> List[Token]:
    """Classify every element of a shape code, in order."""
    return [classify(element, i) for i, element in enumerate(load_elements(source))]


class TokenReader:
    """Cursor over a token list."""

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = list(tokens)
        self.offset = 0

    def can_read(self) -> bool:
        return self.offset < len(self.tokens)

    def remaining(self) -> int:
        return len(self.tokens) - self.offset

    def peek(self, ahead: int = 0) -> Optional[Token]:
        """Look at a token without consuming it."""
        index = self.offset + ahead
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return None

    def read_tag(self) -> ShapeTag:
        token = self._next("a tag")
        if not isinstance(token, ShapeTag):
            raise ArityError(f"expected a tag, got {token!r}", self.offset - 1)
        return token

    def read_number(self) -> float:
        token = self._next("a number")
        if isinstance(token, ShapeTag):
            raise ArityError(f"expected a number, got tag {token.value!r}", self.offset - 1)
        return token

    def read_pair(self) -> tuple[float, float]:
        return self.read_number(), self.read_number()

    def expect_end(self) -> None:
        """Fail if tokens are left over."""
        if self.can_read():
            raise ArityError(
                f"{self.remaining()} unexpected trailing token(s)", self.offset
            )

    def _next(self, wanted: str) -> Token:
        if not self.can_read():
            raise ArityError(f"expected {wanted}, stream ended", self.offset)
        self.offset += 1
        return self.tokens[self.offset - 1]
