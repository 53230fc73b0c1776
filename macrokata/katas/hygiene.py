"""Coordinates in two, three and four dimensions built by one helper."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A point in two dimensions."""

    x: int
    y: int


@dataclass(frozen=True)
class Coordinate3D:
    """A point in three dimensions."""

    x: int
    y: int
    z: int

    def as_2d(self) -> Coordinate:
        """Drop the third dimension."""
        return coord(self.x, self.y)


@dataclass(frozen=True)
class Coordinate4D:
    """A point in three dimensions and time."""

    x: int
    y: int
    z: int
    t: int

    def as_3d(self) -> Coordinate3D:
        """Drop the time dimension."""
        return coord(self.x, self.y, self.z)


_BY_DIMENSION = {2: Coordinate, 3: Coordinate3D, 4: Coordinate4D}


def coord(*args: int) -> Coordinate | Coordinate3D | Coordinate4D:
    """Build the coordinate whose dimension matches the number of arguments."""
    try:
        kind = _BY_DIMENSION[len(args)]
    except KeyError:
        raise ValueError(f"no rule matches {len(args)} arguments") from None
    return kind(*args)


def demo() -> None:
    """Run exercise twelve, printing the flattened coordinate."""
    four_dim = coord(1, 2, 3, 1000)
    two_dim = four_dim.as_3d().as_2d()
    print(f"Coordinate {{ x: {two_dim.x}, y: {two_dim.y} }}")