import math
from typing import Any
from ..table import Column, NormalizedTable
from ..utils.logging import get_logger

logger = get_logger(__name__)

def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, NormalizedTable):
        # a child pruned down to no columns carries nothing even if it has rows
        return value.n_rows == 0 or value.n_columns == 0
    return False

def has_information(column: Column) -> bool:
    return any(not is_missing(v) for v in column.values)

def prune(table: NormalizedTable) -> NormalizedTable:
    """Drop columns that are missing in every row. Row count and geometry are kept."""
    kept = [c for c in table.columns if has_information(c)]
    if len(kept) == len(table.columns):
        return table

    dropped = [c.name for c in table.columns if not has_information(c)]
    logger.debug(f"Pruned {len(dropped)} empty column(s): {', '.join(dropped)}")
    return table.with_columns(kept)
