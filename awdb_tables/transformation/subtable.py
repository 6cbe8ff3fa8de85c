"""Generic record sequence -> table routine.

Column order and types come from a field-order descriptor derived from the
pydantic record model, so every endpoint goes through the same builder.
Nested fields become list-columns:

* unset optional field -> absent cell (``None``)
* list of records      -> child table, one row per record (zero rows if empty)
* single record        -> one-row child table
* list of scalars      -> one-column child table named ``value``

Child tables are pruned before they are embedded.
"""

import types
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Type, Union, get_args, get_origin

from pydantic import BaseModel

from .pruning import prune
from ..table import Column, ColumnType, NormalizedTable

_SCALAR_TYPES: Dict[type, ColumnType] = {
    str: ColumnType.STRING,
    int: ColumnType.INTEGER,
    float: ColumnType.FLOAT,
    bool: ColumnType.BOOLEAN,
}

@dataclass(frozen=True)
class FieldSpec:
    name: str
    dtype: ColumnType
    model: Optional[Type[BaseModel]] = None
    many: bool = False
    item_dtype: Optional[ColumnType] = None

def _strip_optional(annotation: Any) -> Any:
    origin = get_origin(annotation)
    if origin is Union or origin is getattr(types, "UnionType", None):
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation

def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)

def _field_spec(model: Type[BaseModel], name: str, annotation: Any) -> FieldSpec:
    annotation = _strip_optional(annotation)

    if annotation in _SCALAR_TYPES:
        return FieldSpec(name, _SCALAR_TYPES[annotation])
    if _is_model(annotation):
        return FieldSpec(name, ColumnType.TABLE, model=annotation)
    if get_origin(annotation) is list:
        (item,) = get_args(annotation)
        if _is_model(item):
            return FieldSpec(name, ColumnType.TABLE, model=item, many=True)
        if item in _SCALAR_TYPES:
            return FieldSpec(name, ColumnType.TABLE, many=True, item_dtype=_SCALAR_TYPES[item])

    raise TypeError(f"Unsupported field type for {model.__name__}.{name}: {annotation!r}")

@lru_cache(maxsize=None)
def describe(model: Type[BaseModel], exclude: Tuple[str, ...] = ()) -> Tuple[FieldSpec, ...]:
    """Field-order descriptor of ``model``: declared fields, in declared order."""
    return tuple(
        _field_spec(model, name, info.annotation)
        for name, info in model.model_fields.items()
        if name not in exclude
    )

def record_fields(record: BaseModel, exclude: Tuple[str, ...] = ()) -> Dict[str, Any]:
    return {name: getattr(record, name) for name in type(record).model_fields if name not in exclude}

def _nested_cell(spec: FieldSpec, value: Any) -> Optional[NormalizedTable]:
    if value is None:
        return None
    if spec.item_dtype is not None:
        items = list(value)
        return prune(NormalizedTable((Column("value", spec.item_dtype, items),), n_rows=len(items)))
    if spec.many:
        return build_subtable(spec.model, value)
    return build_subtable(spec.model, [value])

def build_table(fields: Sequence[FieldSpec], rows: Iterable[Mapping[str, Any]]) -> NormalizedTable:
    rows = list(rows)
    columns: List[Column] = []
    for spec in fields:
        if spec.dtype is ColumnType.TABLE:
            values = [_nested_cell(spec, row.get(spec.name)) for row in rows]
        else:
            values = [row.get(spec.name) for row in rows]
        columns.append(Column(spec.name, spec.dtype, values))
    return NormalizedTable(columns, n_rows=len(rows))

def build_subtable(model: Type[BaseModel], records: Iterable[BaseModel]) -> NormalizedTable:
    table = build_table(describe(model), (record_fields(r) for r in records))
    return prune(table)
