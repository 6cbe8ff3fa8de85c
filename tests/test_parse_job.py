import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from awdb_tables.config import WGS84
from awdb_tables.errors import MalformedInput
from awdb_tables.table import NormalizedTable
from awdb_tables.transformation.parse_job import (
    parse_reference_data,
    parse_station_dataset,
    parse_station_forecasts,
    parse_station_metadata,
)


def assert_row_counts(table: NormalizedTable) -> None:
    for col in table.columns:
        assert len(col.values) == table.n_rows
        if col.is_nested:
            for cell in col.values:
                if cell is not None:
                    assert_row_counts(cell)
    if table.geometry is not None:
        assert len(table.geometry.points) == table.n_rows


def test_dataset_flatten_property(dataset_json):
    table = parse_station_dataset(dataset_json)
    assert table.n_rows == 2
    assert all(t == "ABC:1:SNOW" for t in table["station_triplet"].values)
    assert [cell.n_rows for cell in table["values"].values] == [3, 3]
    assert_row_counts(table)


def test_dataset_prunes_top_level(dataset_records):
    for element in dataset_records[0]["data"]:
        element["stationElement"].pop("heightDepth", None)
    table = parse_station_dataset(json.dumps(dataset_records))
    assert "height_depth" not in table
    assert "derived_data" in table


def test_forecasts(forecast_json):
    table = parse_station_forecasts(forecast_json)
    assert table.n_rows == 2
    assert table["period_normal"].values == (2680.0, None)
    assert_row_counts(table)


def test_metadata_geometry_and_bbox(metadata_json):
    table = parse_station_metadata(metadata_json)
    assert table.n_rows == 3
    assert "pedon_code" not in table
    assert table.geometry.crs == WGS84
    assert [(p.x, p.y) for p in table.geometry.points] == [(-120.5, 45.0), (-119.0, 46.2), (-121.3, 44.8)]
    assert table.geometry.bbox.as_dict() == {"xmin": -121.3, "ymin": 44.8, "xmax": -119.0, "ymax": 46.2}
    assert_row_counts(table)


def test_metadata_all_null_nested_record_is_pruned(metadata_records):
    for station in metadata_records:
        station["reservoirMetadata"] = {"capacity": None, "elevationAtCapacity": None, "usableCapacity": None}
    table = parse_station_metadata(json.dumps(metadata_records))
    assert "reservoir_metadata" not in table
    assert "station_elements" in table
    assert_row_counts(table)


def test_metadata_batches_merge_in_order(metadata_records):
    docs = [json.dumps(metadata_records[:1]), json.dumps(metadata_records[1:])]
    table = parse_station_metadata(docs)
    assert table["station_triplet"].values == ("301:OR:SNTL", "302:OR:SNTL", "303:OR:BOR")
    assert table.geometry.points[2].x == -121.3


@pytest.mark.parametrize(
    "parse",
    [parse_station_dataset, parse_station_forecasts, parse_station_metadata],
)
@pytest.mark.parametrize("documents", [[], ["[]"]])
def test_empty_batch_gives_zero_rows_and_columns(parse, documents):
    table = parse(documents)
    assert table.n_rows == 0
    assert table.n_columns == 0


def test_empty_metadata_batch_has_empty_bbox():
    table = parse_station_metadata([])
    assert table.geometry.points == ()
    assert table.geometry.bbox.is_empty


def test_empty_reference_batch():
    table = parse_reference_data([], "networks")
    assert table.n_rows == 0
    assert table.n_columns == 0


def test_unknown_reference_type(reference_json):
    assert parse_reference_data(reference_json, "bogus") == NormalizedTable.empty()


@pytest.mark.parametrize("parse", [parse_station_dataset, parse_station_forecasts, parse_station_metadata])
def test_decode_failure_is_not_an_empty_table(parse):
    with pytest.raises(MalformedInput):
        parse("{}")


def test_parse_is_reentrant_across_threads(dataset_json, metadata_json):
    expected_data = parse_station_dataset(dataset_json)
    expected_meta = parse_station_metadata(metadata_json)

    with ThreadPoolExecutor(max_workers=4) as pool:
        data = list(pool.map(parse_station_dataset, [dataset_json] * 8))
        meta = list(pool.map(parse_station_metadata, [metadata_json] * 8))

    assert all(t == expected_data for t in data)
    assert all(t == expected_meta for t in meta)
