from typing import Any, Dict, Iterable, List, Union
from pydantic import TypeAdapter, ValidationError
from .schema import ReferenceDocument, StationData, StationForecasts, StationMetadata
from ..errors import MalformedInput
from ..utils.logging import get_logger

logger = get_logger(__name__)

Document = Union[str, bytes, bytearray]
Documents = Union[Document, Iterable[Document]]

DATASET = "dataset"
FORECAST = "forecast"
METADATA = "metadata"
REFERENCE = "reference"

_ADAPTERS: Dict[str, TypeAdapter] = {
    DATASET: TypeAdapter(List[StationData]),
    FORECAST: TypeAdapter(List[StationForecasts]),
    METADATA: TypeAdapter(List[StationMetadata]),
    REFERENCE: TypeAdapter(ReferenceDocument),
}

def as_documents(documents: Documents) -> List[Document]:
    if isinstance(documents, (str, bytes, bytearray)):
        return [documents]
    return list(documents)

def decode_documents(documents: Documents, endpoint: str) -> List[Any]:
    adapter = _ADAPTERS[endpoint]
    docs = as_documents(documents)

    records: List[Any] = []
    for i, doc in enumerate(docs):
        try:
            parsed = adapter.validate_json(doc)
        except ValidationError as e:
            raise MalformedInput(endpoint, i, e.errors(include_url=False, include_input=False)) from e

        if isinstance(parsed, list):
            records.extend(parsed)
        else:
            records.append(parsed)

    logger.debug(f"Decoded {len(records)} {endpoint} records from {len(docs)} document(s)")
    return records

def decode_dataset(documents: Documents) -> List[StationData]:
    return decode_documents(documents, DATASET)

def decode_forecasts(documents: Documents) -> List[StationForecasts]:
    return decode_documents(documents, FORECAST)

def decode_metadata(documents: Documents) -> List[StationMetadata]:
    return decode_documents(documents, METADATA)

def decode_reference(documents: Documents) -> List[ReferenceDocument]:
    return decode_documents(documents, REFERENCE)
