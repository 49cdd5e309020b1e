"""Transform data structures for coordinate and state representation."""
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Vec2:
    """2D vector for coordinate pairs.

    Used for any x/y coordinate pair across different spaces:
    - Pointer positions in global screen pixels
    - Canvas-local pixels (center-origin)
    - Normalized landmark coordinates (0-1)
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __sub__(self, other: 'Vec2') -> 'Vec2':
        return Vec2(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class LayerTransform:
    """Transform state of a placed layer: position and rotation.

    Position is in canvas pixels relative to the canvas center,
    rotation is in degrees. Always fully specified and replaced whole.
    """
    x: float = 0.0
    y: float = 0.0
    rotation: float = 0.0

    @property
    def pos(self) -> Vec2:
        return Vec2(self.x, self.y)

    def with_position(self, x: float, y: float) -> 'LayerTransform':
        """Copy with a new position, rotation unchanged"""
        return replace(self, x=x, y=y)

    def with_rotation(self, rotation: float) -> 'LayerTransform':
        """Copy with a new rotation, position unchanged"""
        return replace(self, rotation=rotation)
