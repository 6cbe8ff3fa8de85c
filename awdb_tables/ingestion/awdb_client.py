import requests
from typing import Any, Dict, Optional, Sequence, Union
from ..utils.logging import get_logger

logger = get_logger(__name__)

ListParam = Union[str, Sequence[str]]

def _csv(values: Optional[ListParam]) -> Optional[str]:
    if values is None or isinstance(values, str):
        return values
    return ",".join(values)

def _flag(value: bool) -> str:
    return "true" if value else "false"

class AWDBClient:
    """Fetches raw JSON text from the AWDB REST API. One request per call."""

    def __init__(self, base_url: str, timeout_s: int = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s

    def _get(self, path: str, params: Dict[str, Any]) -> str:
        params = {k: v for k, v in params.items() if v is not None}
        r = requests.get(f"{self.base_url}/{path}", params=params, timeout=self.timeout_s)
        r.raise_for_status()
        logger.info(f"GET /{path}: {len(r.content):,} bytes")
        return r.text

    def fetch_data(
        self,
        station_triplets: ListParam,
        elements: ListParam,
        begin_date: Optional[str] = None,
        end_date: Optional[str] = None,
        duration: str = "DAILY",
        central_tendency_type: Optional[str] = None,
        return_flags: bool = False,
        return_original_values: bool = False,
    ) -> str:
        return self._get("data", {
            "stationTriplets": _csv(station_triplets),
            "elements": _csv(elements),
            "duration": duration,
            "beginDate": begin_date,
            "endDate": end_date,
            "centralTendencyType": central_tendency_type,
            "returnFlags": _flag(return_flags),
            "returnOriginalValues": _flag(return_original_values),
        })

    def fetch_forecasts(
        self,
        station_triplets: ListParam,
        element_codes: Optional[ListParam] = None,
        begin_publication_date: Optional[str] = None,
        end_publication_date: Optional[str] = None,
    ) -> str:
        return self._get("forecasts", {
            "stationTriplets": _csv(station_triplets),
            "elementCodes": _csv(element_codes),
            "beginPublicationDate": begin_publication_date,
            "endPublicationDate": end_publication_date,
        })

    def fetch_stations(
        self,
        station_triplets: ListParam,
        return_forecast_point_metadata: bool = False,
        return_reservoir_metadata: bool = False,
        return_station_elements: bool = False,
        active_only: bool = True,
    ) -> str:
        return self._get("stations", {
            "stationTriplets": _csv(station_triplets),
            "returnForecastPointMetadata": _flag(return_forecast_point_metadata),
            "returnReservoirMetadata": _flag(return_reservoir_metadata),
            "returnStationElements": _flag(return_station_elements),
            "activeOnly": _flag(active_only),
        })

    def fetch_reference_data(self, reference_lists: ListParam) -> str:
        return self._get("reference-data", {"referenceLists": _csv(reference_lists)})
