from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional

# https://wcc.sc.egov.usda.gov/awdbRestApi/swagger-ui/index.html

class AWDBRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore", frozen=True)


# STATION DATA ----------------------------------------------------------------

class StationElement(AWDBRecord):
    element_code: str = Field(min_length=1)
    ordinal: int
    height_depth: Optional[int] = None
    duration_name: str
    data_precision: int
    stored_unit_code: str
    original_unit_code: str
    begin_date: str
    end_date: str
    derived_data: bool

class ValueObservation(AWDBRecord):
    date: Optional[str] = None
    month: Optional[int] = None
    month_part: Optional[str] = None
    year: Optional[int] = None
    collection_date: Optional[str] = None
    value: Optional[float] = None
    qc_flag: Optional[str] = None
    qa_flag: Optional[str] = None
    orig_value: Optional[float] = None
    orig_qc_flag: Optional[str] = None
    average: Optional[float] = None
    median: Optional[float] = None

class ElementData(AWDBRecord):
    station_element: StationElement
    values: List[ValueObservation]

class StationData(AWDBRecord):
    station_triplet: str = Field(min_length=1)
    data: List[ElementData]


# STATION METADATA ------------------------------------------------------------

class ForecastPointInfo(AWDBRecord):
    name: Optional[str] = None
    forecaster: Optional[str] = None
    exceedence_probabilities: Optional[List[int]] = None

class ReservoirInfo(AWDBRecord):
    capacity: Optional[float] = None
    elevation_at_capacity: Optional[float] = None
    usable_capacity: Optional[float] = None

class StationMetadata(AWDBRecord):
    station_triplet: str = Field(min_length=1)
    station_id: str
    state_code: str
    network_code: str
    name: str
    dco_code: Optional[str] = None
    county_name: Optional[str] = None
    huc: Optional[str] = None
    elevation: Optional[float] = None
    latitude: float = Field(allow_inf_nan=False)
    longitude: float = Field(allow_inf_nan=False)
    data_time_zone: Optional[float] = None
    pedon_code: Optional[str] = None
    shef_id: Optional[str] = None
    operator: Optional[str] = None
    begin_date: Optional[str] = None
    end_date: Optional[str] = None
    forecast_point: Optional[ForecastPointInfo] = None
    reservoir_metadata: Optional[ReservoirInfo] = None
    station_elements: Optional[List[StationElement]] = None


# FORECASTS -------------------------------------------------------------------

class ForecastValue(AWDBRecord):
    probability: str
    value: Optional[float] = None

class ForecastSeries(AWDBRecord):
    element_code: str = Field(min_length=1)
    forecast_period_begin: Optional[str] = None
    forecast_period_end: Optional[str] = None
    forecast_status: Optional[str] = None
    issue_date: Optional[str] = None
    period_normal: Optional[float] = None
    publication_date: Optional[str] = None
    unit_code: Optional[str] = None
    forecast_values: List[ForecastValue] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _split_forecast_period(cls, data: Any) -> Any:
        # forecastPeriod arrives as ["MM-DD", "MM-DD"]
        if not isinstance(data, dict):
            return data
        key = "forecastPeriod" if "forecastPeriod" in data else "forecast_period"
        if key not in data:
            return data
        period = data[key]
        data = {k: v for k, v in data.items() if k != key}
        if period is None:
            return data
        if not isinstance(period, list) or len(period) != 2:
            raise ValueError("forecastPeriod must be a [begin, end] pair")
        data["forecastPeriodBegin"], data["forecastPeriodEnd"] = period
        return data

    @field_validator("forecast_values", mode="before")
    @classmethod
    def _probability_map_to_rows(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, dict):
            return [{"probability": str(k), "value": val} for k, val in v.items()]
        return v

class StationForecasts(AWDBRecord):
    station_triplet: str = Field(min_length=1)
    forecast_point_name: Optional[str] = None
    data: List[ForecastSeries]


# REFERENCE DATA --------------------------------------------------------------

class Dco(AWDBRecord):
    code: str
    name: Optional[str] = None

class Duration(AWDBRecord):
    code: str
    name: Optional[str] = None
    duration_minutes: Optional[int] = None

class ElementReference(AWDBRecord):
    code: str
    name: Optional[str] = None
    physical_element_name: Optional[str] = None
    function_code: Optional[str] = None
    data_precision: Optional[int] = None
    description: Optional[str] = None
    stored_unit_code: Optional[str] = None
    english_unit_code: Optional[str] = None
    metric_unit_code: Optional[str] = None

class ForecastPeriod(AWDBRecord):
    code: str
    name: Optional[str] = None
    description: Optional[str] = None
    begin_month_day: Optional[str] = None
    end_month_day: Optional[str] = None

class Function(AWDBRecord):
    code: str
    abbreviation: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None

class Instrument(AWDBRecord):
    name: str
    transducer_length: Optional[float] = None
    data_precision: Optional[int] = None
    description: Optional[str] = None
    manufacturer: Optional[str] = None
    model: Optional[str] = None

class Network(AWDBRecord):
    code: str
    name: Optional[str] = None
    description: Optional[str] = None

class PhysicalElement(AWDBRecord):
    name: str
    shef_physical_element_code: Optional[str] = None

class State(AWDBRecord):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    code: str
    fips_number: Optional[str] = None
    name: Optional[str] = None
    country_code: Optional[str] = None

class Unit(AWDBRecord):
    code: str
    singular_name: Optional[str] = None
    plural_name: Optional[str] = None
    description: Optional[str] = None

class ReferenceDocument(AWDBRecord):
    dcos: List[Dco] = Field(default_factory=list)
    durations: List[Duration] = Field(default_factory=list)
    elements: List[ElementReference] = Field(default_factory=list)
    forecast_periods: List[ForecastPeriod] = Field(default_factory=list)
    functions: List[Function] = Field(default_factory=list)
    instruments: List[Instrument] = Field(default_factory=list)
    networks: List[Network] = Field(default_factory=list)
    physical_elements: List[PhysicalElement] = Field(default_factory=list)
    states: List[State] = Field(default_factory=list)
    units: List[Unit] = Field(default_factory=list)
