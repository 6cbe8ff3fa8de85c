"""Flat reference vocabularies from the AWDB ``/reference-data`` endpoint.

Unlike the station endpoints, an unknown reference tag is not an error: the
loader logs a warning and returns an empty table. Malformed documents for a
known tag still raise ``MalformedInput``.
"""

from typing import Dict, Tuple, Type
from ..errors import UnknownReferenceType
from ..ingestion.decoder import Documents, decode_reference
from ..ingestion.schema import (
    AWDBRecord,
    Dco,
    Duration,
    ElementReference,
    ForecastPeriod,
    Function,
    Instrument,
    Network,
    PhysicalElement,
    State,
    Unit,
)
from ..table import NormalizedTable
from ..utils.logging import get_logger
from .subtable import build_subtable

logger = get_logger(__name__)

# tag -> (ReferenceDocument attribute, entry model)
REFERENCE_TYPES: Dict[str, Tuple[str, Type[AWDBRecord]]] = {
    "dcos": ("dcos", Dco),
    "durations": ("durations", Duration),
    "elements": ("elements", ElementReference),
    "forecastPeriods": ("forecast_periods", ForecastPeriod),
    "functions": ("functions", Function),
    "instruments": ("instruments", Instrument),
    "networks": ("networks", Network),
    "physicalElements": ("physical_elements", PhysicalElement),
    "states": ("states", State),
    "units": ("units", Unit),
}

def reference_schema(reference_type: str) -> Tuple[str, Type[AWDBRecord]]:
    try:
        return REFERENCE_TYPES[reference_type]
    except KeyError:
        raise UnknownReferenceType(reference_type) from None

def load_reference(documents: Documents, reference_type: str) -> NormalizedTable:
    try:
        attr, model = reference_schema(reference_type)
    except UnknownReferenceType as e:
        logger.warning(f"{e}, returning an empty table")
        return NormalizedTable.empty()

    entries = [entry for doc in decode_reference(documents) for entry in getattr(doc, attr)]
    return build_subtable(model, entries)
