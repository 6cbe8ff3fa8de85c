"""In-memory columnar table produced by every AWDB transform.

A ``NormalizedTable`` is an ordered set of named, equal-length columns.
Scalar columns hold ``None`` for missing values. ``TABLE`` columns are
list-columns: each cell is a complete child ``NormalizedTable`` or ``None``
when the source record had nothing to nest. Tables are immutable.
"""

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .config import CoordinateReferenceSystem


class ColumnType(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    TABLE = "table"


@dataclass(frozen=True)
class Column:
    name: str
    dtype: ColumnType
    values: Tuple[Any, ...]

    def __post_init__(self):
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))

    @property
    def is_nested(self) -> bool:
        return self.dtype is ColumnType.TABLE

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    xmin: float
    ymin: float
    xmax: float
    ymax: float
    crs: CoordinateReferenceSystem

    @classmethod
    def empty(cls, crs: CoordinateReferenceSystem) -> "BoundingBox":
        return cls(math.inf, math.inf, -math.inf, -math.inf, crs)

    @property
    def is_empty(self) -> bool:
        return self.xmin > self.xmax or self.ymin > self.ymax

    def extend(self, point: Point) -> "BoundingBox":
        return BoundingBox(
            min(self.xmin, point.x),
            min(self.ymin, point.y),
            max(self.xmax, point.x),
            max(self.ymax, point.y),
            self.crs,
        )

    def as_dict(self) -> Dict[str, float]:
        return {"xmin": self.xmin, "ymin": self.ymin, "xmax": self.xmax, "ymax": self.ymax}


@dataclass(frozen=True)
class GeometryColumn:
    points: Tuple[Point, ...]
    crs: CoordinateReferenceSystem
    bbox: BoundingBox
    name: str = "geometry"

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class NormalizedTable:
    columns: Tuple[Column, ...]
    n_rows: int
    geometry: Optional[GeometryColumn] = None

    def __post_init__(self):
        if not isinstance(self.columns, tuple):
            object.__setattr__(self, "columns", tuple(self.columns))
        if self.n_rows < 0:
            raise ValueError(f"n_rows must be >= 0, got {self.n_rows}")

        seen = set()
        for col in self.columns:
            if col.name in seen:
                raise ValueError(f"Duplicate column name: {col.name}")
            seen.add(col.name)
            if len(col) != self.n_rows:
                raise ValueError(f"Column {col.name!r} has {len(col)} values, table has {self.n_rows} rows")

        if self.geometry is not None:
            if len(self.geometry) != self.n_rows:
                raise ValueError(f"Geometry has {len(self.geometry)} points, table has {self.n_rows} rows")
            if self.geometry.name in seen:
                raise ValueError(f"Duplicate column name: {self.geometry.name}")

    @classmethod
    def empty(cls, n_rows: int = 0) -> "NormalizedTable":
        return cls(columns=(), n_rows=n_rows)

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    @property
    def n_columns(self) -> int:
        return len(self.columns)

    def __len__(self) -> int:
        return self.n_rows

    def __contains__(self, name: object) -> bool:
        return any(c.name == name for c in self.columns)

    def __getitem__(self, name: str) -> Column:
        for col in self.columns:
            if col.name == name:
                return col
        raise KeyError(name)

    def rows(self) -> Iterator[Dict[str, Any]]:
        for i in range(self.n_rows):
            yield {c.name: c.values[i] for c in self.columns}

    def with_columns(self, columns: Sequence[Column]) -> "NormalizedTable":
        return replace(self, columns=tuple(columns))

    def with_geometry(self, geometry: GeometryColumn) -> "NormalizedTable":
        return replace(self, geometry=geometry)
