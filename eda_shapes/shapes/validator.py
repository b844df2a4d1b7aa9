"""Shape validation utilities for the model invariants."""

import math
from dataclasses import fields
from typing import Iterable, List, Tuple

from .errors import InvalidGeometry
from .shape import Point, Shape


class ShapeValidator:
    """Validator for shape geometry invariants."""

    @classmethod
    def validate_shape(cls, shape: Shape) -> Tuple[bool, List[str]]:
        """
        Validate a shape against all model invariants.

        Shapes are checked at construction, so this only finds problems in
        instances that were altered afterwards.

        Returns:
            A tuple of (is_valid, list_of_issues)
        """
        if not isinstance(shape, Shape) or type(shape) is Shape:
            return False, [f"Not a shape variant: {type(shape).__name__}"]

        issues = []
        for fd in fields(shape):
            value = getattr(shape, fd.name)
            if isinstance(value, Point):
                issues.extend(cls._point_issues(fd.name, value))
            elif isinstance(value, tuple):
                for i, item in enumerate(value):
                    if isinstance(item, Point):
                        issues.extend(cls._point_issues(f"{fd.name}[{i}]", item))
                    else:
                        issues.append(f"{fd.name}[{i}]: not a point")
            elif not cls._is_finite(value):
                issues.append(f"{fd.name}: not a finite number ({value!r})")

        if not issues:
            issues.extend(shape.issues())
        return len(issues) == 0, issues

    @classmethod
    def check(cls, shape: Shape) -> None:
        """Raise InvalidGeometry on the first violated invariant."""
        valid, issues = cls.validate_shape(shape)
        if not valid:
            raise InvalidGeometry(issues[0])

    @classmethod
    def is_valid(cls, shape: Shape) -> bool:
        """Quick check if a shape is valid."""
        valid, _ = cls.validate_shape(shape)
        return valid

    @classmethod
    def check_all(cls, shapes: Iterable[Shape]) -> None:
        """Check every shape of a path list, reporting the failing index."""
        for i, shape in enumerate(shapes):
            valid, issues = cls.validate_shape(shape)
            if not valid:
                raise InvalidGeometry(f"path {i}: {issues[0]}")

    @classmethod
    def _point_issues(cls, name: str, point: Point) -> List[str]:
        if cls._is_finite(point.x) and cls._is_finite(point.y):
            return []
        return [f"{name}: coordinates must be finite ({point.x!r}, {point.y!r})"]

    @staticmethod
    def _is_finite(value) -> bool:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return math.isfinite(value)
