"""Core geometry value objects in real (meter) units."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Point3:
    """3D point. X runs along the container length, Y is vertical, Z along width.

    Unlike the container and item sizes, points may hold any finite value:
    scene-space centers are negative on the horizontal axes.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))


ORIGIN = Point3(0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Size3:
    """Box extents: length (X), width (Z) and height (Y)."""

    length: float
    width: float
    height: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.length, self.width, self.height))

    @property
    def volume(self) -> float:
        """Volume in cubic units."""
        return self.length * self.width * self.height

    def scaled(self, factor: float) -> Size3:
        """Return a copy with every extent multiplied by ``factor``."""
        return Size3(self.length * factor, self.width * factor, self.height * factor)


@dataclass(frozen=True)
class ContainerSpec:
    """Container bounding dimensions in meters.

    Instances are built by ``parse_container``, which substitutes the
    defaults below for any missing or non-positive value, so every field is
    positive for the whole layout pass.
    """

    length: float
    width: float
    height: float

    DEFAULT_LENGTH = 2.0
    DEFAULT_WIDTH = 1.5
    DEFAULT_HEIGHT = 1.5

    @property
    def size(self) -> Size3:
        """Container extents as a Size3."""
        return Size3(self.length, self.width, self.height)

    @property
    def max_dimension(self) -> float:
        """Longest container edge in meters."""
        return max(self.length, self.width, self.height)

    @property
    def volume(self) -> float:
        """Container volume in cubic meters."""
        return self.length * self.width * self.height

    @classmethod
    def default(cls) -> ContainerSpec:
        """The container used when no usable dimensions are given."""
        return cls(cls.DEFAULT_LENGTH, cls.DEFAULT_WIDTH, cls.DEFAULT_HEIGHT)


@dataclass(frozen=True)
class ItemSpec:
    """A single item to lay out.

    Attributes:
        name: Display name; the renderer uses it as the item reference.
        dimensions: Real size in meters, every extent positive.
        position: Min-corner position in meters, or None when the source
            carries no pre-computed placement.
        quantity: Number of identical instances requested (at least 1).
            Only the shelf packer expands quantities.
    """

    name: str
    dimensions: Size3
    position: Point3 | None = None
    quantity: int = 1

    @property
    def has_position(self) -> bool:
        """True when a pre-computed placement is attached."""
        return self.position is not None
