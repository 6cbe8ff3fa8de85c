"""pandas adapter for ``NormalizedTable``.

List-columns become object columns holding one DataFrame per cell (``None``
where the cell is absent). The geometry column holds ``(x, y)`` tuples and
its bounding box and CRS are stored in ``DataFrame.attrs``.
"""

from typing import Any, Dict, Sequence

import numpy as np
import pandas as pd

from ..table import ColumnType, NormalizedTable

_DTYPES: Dict[ColumnType, str] = {
    ColumnType.STRING: "string",
    ColumnType.INTEGER: "Int64",
    ColumnType.FLOAT: "Float64",
    ColumnType.BOOLEAN: "boolean",
}

def _object_column(cells: Sequence[Any]) -> pd.Series:
    # element-wise assignment keeps nested frames and tuples as single cells
    arr = np.empty(len(cells), dtype=object)
    for i, cell in enumerate(cells):
        arr[i] = cell
    return pd.Series(arr, dtype=object)

def to_dataframe(table: NormalizedTable) -> pd.DataFrame:
    data: Dict[str, pd.Series] = {}
    for col in table.columns:
        if col.is_nested:
            data[col.name] = _object_column([None if c is None else to_dataframe(c) for c in col.values])
        else:
            data[col.name] = pd.Series(list(col.values), dtype=_DTYPES[col.dtype])

    geometry = table.geometry
    if geometry is not None:
        data[geometry.name] = _object_column([(p.x, p.y) for p in geometry.points])

    df = pd.DataFrame(data, index=pd.RangeIndex(table.n_rows))

    if geometry is not None:
        df.attrs["geometry_column"] = geometry.name
        df.attrs["crs"] = geometry.crs.input
        df.attrs["bbox"] = geometry.bbox.as_dict()
    return df
