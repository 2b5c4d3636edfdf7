"""
Shared primitive data types for the game.

This module provides the geometric and color types used by the entities,
the collision resolver and the skins.
"""

import math
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Point2D(BaseModel):
    """Immutable 2D point for positions and coordinates.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> pos.x
        100.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


class Vector2D(BaseModel):
    """Mutable 2D vector, used for ball directions.

    Unlike Point2D the components can be changed in place, so a collision
    can flip one axis of a ball's direction without rebuilding the ball.

    Examples:
        >>> v = Vector2D(x=3.0, y=4.0)
        >>> v.length
        5.0
        >>> v.normalized().x
        0.6
    """
    x: float
    y: float

    @property
    def length(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> 'Vector2D':
        """Return a unit-length copy pointing the same way.

        A zero vector stays a zero vector.
        """
        length = self.length
        if length == 0:
            return Vector2D(x=0.0, y=0.0)
        return Vector2D(x=self.x / length, y=self.y / length)

    def signum(self) -> 'Vector2D':
        """Return the per-component sign (-1, 0 or +1)."""
        return Vector2D(x=sign(self.x), y=sign(self.y))

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Vector2D(x={self.x:.3f}, y={self.y:.3f})"


def sign(value: float) -> float:
    """Sign of a number, mapping zero to zero."""
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


class Color(BaseModel):
    """Opaque RGB color used by the skins.

    Components outside [0, 255] are rejected at construction.

    Examples:
        >>> Color(r=0, g=121, b=241).as_rgb_tuple
        (0, 121, 241)
        >>> Color.parse('255, 161, 0').g
        161
    """
    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, text: str) -> 'Color':
        """Build a color from an ``"r, g, b"`` string."""
        parts = [p.strip() for p in text.split(',')]
        if len(parts) != 3:
            raise ValueError(f'Expected "r, g, b", got {text!r}')
        r, g, b = (int(p) for p in parts)
        return cls(r=r, g=g, b=b)

    @property
    def as_rgb_tuple(self) -> Tuple[int, int, int]:
        """(r, g, b) as pygame drawing calls expect."""
        return (self.r, self.g, self.b)


class Rectangle(BaseModel):
    """Mutable axis-aligned rectangle defined by position and dimensions.

    Every entity owns exactly one Rectangle and moves it in place.
    Position is at top-left corner (pygame convention).

    Attributes:
        x: X coordinate of top-left corner
        y: Y coordinate of top-left corner
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> a = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
        >>> b = Rectangle(x=50.0, y=80.0, width=100.0, height=100.0)
        >>> a.intersect(b)
        Rectangle(x=50.0, y=80.0, width=50.0, height=20.0)
    """
    x: float
    y: float
    width: float
    height: float

    model_config = ConfigDict(validate_assignment=True)

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @property
    def left(self) -> float:
        """Get left edge x coordinate."""
        return self.x

    @property
    def right(self) -> float:
        """Get right edge x coordinate."""
        return self.x + self.width

    @property
    def top(self) -> float:
        """Get top edge y coordinate."""
        return self.y

    @property
    def bottom(self) -> float:
        """Get bottom edge y coordinate."""
        return self.y + self.height

    @property
    def point(self) -> Point2D:
        """Top-left corner."""
        return Point2D(x=self.x, y=self.y)

    @property
    def center(self) -> Point2D:
        """Calculate the center point of the rectangle."""
        return Point2D(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2
        )

    def intersect(self, other: 'Rectangle') -> Optional['Rectangle']:
        """Compute the overlapping region of two rectangles.

        Rectangles that only share an edge do not overlap.

        Args:
            other: Another rectangle

        Returns:
            The overlap as a new Rectangle, or None if there is none
        """
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right <= left or bottom <= top:
            return None
        return Rectangle(x=left, y=top, width=right - left, height=bottom - top)

    def __repr__(self) -> str:
        return (f"Rectangle(x={self.x}, y={self.y}, "
                f"width={self.width}, height={self.height})")

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
