from typing import Any, Dict, Iterable, Iterator, List, Tuple
from .schema import ElementData, ForecastSeries, StationData, StationElement, StationForecasts, StationMetadata
from ..table import NormalizedTable
from ..transformation.subtable import build_table, describe, record_fields

# Station fields are broadcast onto every (station, element) row; the element
# descriptor is spread into columns and the observations stay nested.
DATASET_FIELDS = (
    describe(StationData, ("data",))
    + describe(StationElement)
    + describe(ElementData, ("station_element",))
)

FORECAST_FIELDS = describe(StationForecasts, ("data",)) + describe(ForecastSeries)

# longitude/latitude are carried by the geometry column
METADATA_COORDINATES = ("longitude", "latitude")
METADATA_FIELDS = describe(StationMetadata, METADATA_COORDINATES)

def dataset_rows(stations: Iterable[StationData]) -> Iterator[Dict[str, Any]]:
    for station in stations:
        parent = record_fields(station, ("data",))
        for element in station.data:
            yield {
                **parent,
                **record_fields(element.station_element),
                **record_fields(element, ("station_element",)),
            }

def forecast_rows(stations: Iterable[StationForecasts]) -> Iterator[Dict[str, Any]]:
    for station in stations:
        parent = record_fields(station, ("data",))
        for series in station.data:
            yield {**parent, **record_fields(series)}

def metadata_rows(stations: Iterable[StationMetadata]) -> Iterator[Dict[str, Any]]:
    for station in stations:
        yield record_fields(station, METADATA_COORDINATES)

def metadata_coordinates(stations: Iterable[StationMetadata]) -> List[Tuple[float, float]]:
    return [(s.longitude, s.latitude) for s in stations]

def flatten_dataset(stations: Iterable[StationData]) -> NormalizedTable:
    return build_table(DATASET_FIELDS, dataset_rows(stations))

def flatten_forecasts(stations: Iterable[StationForecasts]) -> NormalizedTable:
    return build_table(FORECAST_FIELDS, forecast_rows(stations))

def flatten_metadata(stations: Iterable[StationMetadata]) -> NormalizedTable:
    return build_table(METADATA_FIELDS, metadata_rows(stations))
