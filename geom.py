"""Polygon geometry and point-containment queries."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Iterator, Sequence, Tuple, Union

from vector import Vector

logger = logging.getLogger(__name__)

VERTICAL_EPSILON: Final[float] = 1.0e-6
"""Edges whose x extent is below this are treated as vertical."""


@dataclass(frozen=True)
class Point:
    """Represents a 2D point."""

    x: float
    y: float


PointLike = Union[Point, Vector, Tuple[float, float]]


def as_point(value: PointLike) -> Point:
    """Coerce a Point, Vector or ``(x, y)`` pair into a Point with float coordinates."""

    if isinstance(value, (Point, Vector)):
        return Point(float(value.x), float(value.y))
    try:
        x, y = value
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Expected an (x, y) pair, got {value!r}.") from exc
    return Point(float(x), float(y))


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle stored by its minimum and maximum corners.

    Width and height are derived from the corners, so the stored extremes
    are always exact vertex coordinates.
    """

    x: float
    y: float
    max_x: float
    max_y: float

    @classmethod
    def at(cls, point: Point) -> BoundingBox:
        """Zero-area box located at a single point."""

        return cls(point.x, point.y, point.x, point.y)

    @classmethod
    def around(cls, points: Sequence[Point]) -> BoundingBox:
        """Smallest box holding every point."""

        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def origin(self) -> Point:
        return Point(self.x, self.y)

    @property
    def width(self) -> float:
        return self.max_x - self.x

    @property
    def height(self) -> float:
        return self.max_y - self.y

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    def union(self, other: BoundingBox) -> BoundingBox:
        """Smallest box holding both boxes."""

        return BoundingBox(
            min(self.x, other.x),
            min(self.y, other.y),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
        )

    def contains(self, point: Point) -> bool:
        """Return True when the point lies inside or on the edge of the box."""

        return self.x <= point.x <= self.max_x and self.y <= point.y <= self.max_y


@dataclass(frozen=True)
class Segment:
    """Directed polygon edge running from ``p0`` to ``pf``."""

    p0: Point
    pf: Point

    def crosses_upward(self, y: float) -> bool:
        # Includes the start height, excludes the end height.
        return self.p0.y < self.pf.y and self.p0.y <= y < self.pf.y

    def crosses_downward(self, y: float) -> bool:
        # Excludes the start height, includes the end height.
        return self.p0.y > self.pf.y and self.pf.y <= y < self.p0.y

    def x_intersect(self, ray_origin: Point) -> float:
        """Return the x coordinate where the edge's line meets ``y = ray_origin.y``.

        Must not be called for horizontal edges.
        """

        dx = self.pf.x - self.p0.x
        dy = self.pf.y - self.p0.y
        if abs(dx) < VERTICAL_EPSILON:
            y_min, y_max = sorted((self.p0.y, self.pf.y))
            if ray_origin.y < y_min or ray_origin.y > y_max:
                # Report an intersection left of the ray so it is never counted.
                return ray_origin.x - 1.0
            return self.p0.x
        fraction = (ray_origin.y - self.p0.y) / dy
        return self.p0.x + fraction * dx

    def as_vector(self) -> Vector:
        """Return the displacement from ``p0`` to ``pf``."""

        return Vector(self.pf.x - self.p0.x, self.pf.y - self.p0.y)


@dataclass(frozen=True)
class Polygon:
    """Represents a polygon defined by a sequence of vertices.

    Vertices may be given as Points, Vectors or ``(x, y)`` pairs, and the
    polygon is closed implicitly: do not repeat the first vertex at the end.
    Edges, edge normals, the bounding box and the center are computed once
    here and never change.

    Caveat: containment has only been verified for convex polygons whose
    vertices are ordered clockwise. Other shapes are accepted without
    validation and classified on a best-effort basis.
    """

    vertices: Sequence[Point]
    vertex_vectors: Tuple[Vector, ...] = field(init=False, repr=False)
    edges: Tuple[Segment, ...] = field(init=False, repr=False)
    edge_normals: Tuple[Vector, ...] = field(init=False, repr=False)
    bbox: BoundingBox = field(init=False, repr=False)
    center: Point = field(init=False, repr=False)

    def __post_init__(self) -> None:
        vertices = tuple(as_point(v) for v in self.vertices)
        if not vertices:
            raise ValueError("A polygon requires at least one vertex.")

        bbox = BoundingBox.around(vertices)
        count = len(vertices)
        center = Point(
            sum(v.x for v in vertices) / count,
            sum(v.y for v in vertices) / count,
        )
        edges = _edges(vertices)

        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "vertex_vectors", tuple(Vector.from_point(v) for v in vertices))
        object.__setattr__(self, "edges", edges)
        object.__setattr__(self, "edge_normals", tuple(e.as_vector().normal().unit() for e in edges))
        object.__setattr__(self, "bbox", bbox)
        object.__setattr__(self, "center", center)
        logger.debug("Built polygon with %d vertices, bbox=%s", count, bbox)

    @classmethod
    def from_pairs(cls, pairs: Sequence[Tuple[float, float]]) -> Polygon:
        """Construct a polygon from plain ``(x, y)`` coordinate pairs."""

        return cls(list(pairs))

    def __iter__(self) -> Iterator[Point]:
        """Iterate over points that belong to the polygon."""

        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def contains(self, point: PointLike) -> bool:
        """Return True when the point lies on or within the polygon boundary.

        Counts the edges crossed by a ray cast from the point towards +x
        (the crossing-number test). An upward edge includes its starting
        vertex and excludes its final one, a downward edge does the
        reverse, and horizontal edges are skipped, so a shared vertex is
        counted once. An intersection only counts when it lies strictly to
        the right of the point. The point is inside when the count is odd.

        Points lying exactly on a horizontal edge are not reliably
        classified.
        """

        point = as_point(point)
        if not self.bbox.contains(point):
            return False

        x0, y0 = point.x, point.y
        crossings = 0
        for edge in self.edges:
            if edge.crosses_upward(y0) or edge.crosses_downward(y0):
                if x0 < edge.x_intersect(point):
                    crossings += 1
        return crossings % 2 == 1

    def contains_xy(self, x: float, y: float) -> bool:
        """Same as :meth:`contains` for a point given as separate coordinates."""

        return self.contains(Point(float(x), float(y)))

    def nearest_vertex(self, to: Vector) -> Vector:
        """Return the position of the vertex closest to ``to``.

        Ties go to the vertex that comes first.
        """

        result = self.vertex_vectors[0]
        min_dist = result.dist_sqr(to)
        for vertex in self.vertex_vectors[1:]:
            dist = vertex.dist_sqr(to)
            if dist < min_dist:
                result = vertex
                min_dist = dist
        return result


def _edges(vertices: Sequence[Point]) -> Tuple[Segment, ...]:
    # The last edge wraps around to the first vertex.
    count = len(vertices)
    return tuple(Segment(vertices[i], vertices[(i + 1) % count]) for i in range(count))
