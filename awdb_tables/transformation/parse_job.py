"""Entry points: raw AWDB JSON text in, one ``NormalizedTable`` out.

Each call decodes, flattens and prunes independently of any other call.
A batch with no documents (or no records) gives a zero-row table, and
since pruning always runs that table has no columns.
"""

from ..config import WGS84, CoordinateReferenceSystem
from ..ingestion.decoder import Documents, decode_dataset, decode_forecasts, decode_metadata
from ..ingestion.normalizer import flatten_dataset, flatten_forecasts, flatten_metadata, metadata_coordinates
from ..table import NormalizedTable
from .geometry import add_geometry
from .pruning import prune
from .reference import load_reference

def parse_station_dataset(documents: Documents) -> NormalizedTable:
    return prune(flatten_dataset(decode_dataset(documents)))

def parse_station_forecasts(documents: Documents) -> NormalizedTable:
    return prune(flatten_forecasts(decode_forecasts(documents)))

def parse_station_metadata(documents: Documents, crs: CoordinateReferenceSystem = WGS84) -> NormalizedTable:
    stations = decode_metadata(documents)
    table = prune(flatten_metadata(stations))
    return add_geometry(table, metadata_coordinates(stations), crs)

def parse_reference_data(documents: Documents, reference_type: str) -> NormalizedTable:
    return load_reference(documents, reference_type)
