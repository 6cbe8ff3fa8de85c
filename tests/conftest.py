"""Pytest configuration and fixtures."""

import json

import pytest


def _element(code, ordinal=1, **overrides):
    element = {
        "elementCode": code,
        "ordinal": ordinal,
        "durationName": "DAILY",
        "dataPrecision": 1,
        "storedUnitCode": "in",
        "originalUnitCode": "in",
        "beginDate": "1980-10-01 00:00",
        "endDate": "2100-01-01 00:00",
        "derivedData": False,
    }
    element.update(overrides)
    return element


@pytest.fixture
def make_element():
    return _element


@pytest.fixture
def dataset_records():
    """One station, two elements, three observations each."""
    return [
        {
            "stationTriplet": "ABC:1:SNOW",
            "data": [
                {
                    "stationElement": _element("WTEQ"),
                    "values": [
                        {"date": "2024-01-01", "value": 10.1},
                        {"date": "2024-01-02", "value": 10.4},
                        {"date": "2024-01-03", "value": None},
                    ],
                },
                {
                    "stationElement": _element("SNWD", heightDepth=-2),
                    "values": [
                        {"date": "2024-01-01", "value": 40, "qcFlag": "V"},
                        {"date": "2024-01-02", "value": 41, "qcFlag": "V"},
                        {"date": "2024-01-03", "value": 43, "qcFlag": "E"},
                    ],
                },
            ],
        }
    ]


@pytest.fixture
def dataset_json(dataset_records):
    return json.dumps(dataset_records)


@pytest.fixture
def forecast_records():
    return [
        {
            "stationTriplet": "13340600:ID:USGS",
            "forecastPointName": "Clearwater R at Orofino",
            "data": [
                {
                    "elementCode": "SRVO",
                    "forecastPeriod": ["04-01", "07-31"],
                    "forecastStatus": "final",
                    "issueDate": "2024-03-05 13:00:00",
                    "periodNormal": 2680,
                    "publicationDate": "2024-03-01",
                    "unitCode": "kaf",
                    "forecastValues": {"10": 3170, "30": 2770, "50": 2500, "70": 2230, "90": 1830},
                },
                {
                    "elementCode": "SRVO",
                    "forecastPeriod": ["04-01", "09-30"],
                    "forecastStatus": "final",
                    "issueDate": "2024-03-05 13:00:00",
                    "publicationDate": "2024-03-01",
                    "unitCode": "kaf",
                    "forecastValues": {"10": 3500, "50": 2750, "90": 2040},
                },
            ],
        }
    ]


@pytest.fixture
def forecast_json(forecast_records):
    return json.dumps(forecast_records)


def _station(triplet, lon, lat, **extra):
    station_id, state, network = triplet.split(":")
    station = {
        "stationTriplet": triplet,
        "stationId": station_id,
        "stateCode": state,
        "networkCode": network,
        "name": f"Station {station_id}",
        "dcoCode": "OR",
        "countyName": "Grant",
        "huc": "170701040101",
        "elevation": 5200.0,
        "latitude": lat,
        "longitude": lon,
        "dataTimeZone": -8.0,
        "beginDate": "1980-10-01 00:00",
        "endDate": "2100-01-01 00:00",
    }
    station.update(extra)
    return station


@pytest.fixture
def metadata_records():
    return [
        _station("301:OR:SNTL", -120.5, 45.0, stationElements=[_element("WTEQ"), _element("PREC")]),
        _station(
            "302:OR:SNTL",
            -119.0,
            46.2,
            forecastPoint={"name": "Burnt R", "forecaster": "jdoe", "exceedenceProbabilities": [10, 50, 90]},
        ),
        _station(
            "303:OR:BOR",
            -121.3,
            44.8,
            reservoirMetadata={"capacity": 715.0, "elevationAtCapacity": 2100.0, "usableCapacity": 700.0},
        ),
    ]


@pytest.fixture
def metadata_json(metadata_records):
    return json.dumps(metadata_records)


@pytest.fixture
def reference_document():
    return {
        "networks": [
            {"code": "SNTL", "name": "SNOTEL", "description": "SNOwpack TELemetry"},
            {"code": "SCAN", "name": "SCAN", "description": None},
        ],
        "units": [
            {"code": "in", "singularName": "inch", "pluralName": "inches", "description": None},
        ],
        "states": [
            {"code": "OR", "fipsNumber": 41, "name": "Oregon", "countryCode": "US"},
        ],
    }


@pytest.fixture
def reference_json(reference_document):
    return json.dumps(reference_document)
