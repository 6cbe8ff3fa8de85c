from typing import Iterable, Sequence, Tuple
from ..config import WGS84, CoordinateReferenceSystem
from ..table import BoundingBox, GeometryColumn, NormalizedTable, Point

def to_points(coordinates: Iterable[Tuple[float, float]]) -> Tuple[Point, ...]:
    # (longitude, latitude)
    return tuple(Point(float(x), float(y)) for x, y in coordinates)

def bounding_box(points: Iterable[Point], crs: CoordinateReferenceSystem = WGS84) -> BoundingBox:
    """Running min/max envelope. No points gives ``BoundingBox.empty``."""
    bbox = BoundingBox.empty(crs)
    for p in points:
        bbox = bbox.extend(p)
    return bbox

def add_geometry(
    table: NormalizedTable,
    coordinates: Sequence[Tuple[float, float]],
    crs: CoordinateReferenceSystem = WGS84,
) -> NormalizedTable:
    points = to_points(coordinates)
    if len(points) != table.n_rows:
        raise ValueError(f"Got {len(points)} coordinate pairs for a table with {table.n_rows} rows")

    geometry = GeometryColumn(points=points, crs=crs, bbox=bounding_box(points, crs))
    return table.with_geometry(geometry)
