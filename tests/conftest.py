"""Shared fixtures with sample DataPoint JSON payloads."""

from __future__ import annotations

import json
from typing import Callable, Dict, List

import httpx
import pytest

from datapoint_client.client import DataPointClient

BASE_URL = "http://datapoint.test/public/data/"
API_KEY = "test-key"


@pytest.fixture
def sample_params() -> List[Dict[str, str]]:
    return [
        {"name": "F", "units": "C", "$": "Feels Like Temperature"},
        {"name": "G", "units": "mph", "$": "Wind Gust"},
        {"name": "H", "units": "%", "$": "Screen Relative Humidity"},
        {"name": "T", "units": "C", "$": "Temperature"},
        {"name": "V", "units": "", "$": "Visibility"},
        {"name": "D", "units": "compass", "$": "Wind Direction"},
        {"name": "S", "units": "mph", "$": "Wind Speed"},
        {"name": "U", "units": "", "$": "Max UV Index"},
        {"name": "W", "units": "", "$": "Weather Type"},
        {"name": "Pp", "units": "%", "$": "Precipitation Probability"},
    ]


@pytest.fixture
def sample_location() -> Dict:
    return {
        "i": "310069",
        "lat": "50.7179",
        "lon": "-3.5327",
        "name": "EXETER",
        "country": "ENGLAND",
        "continent": "EUROPE",
        "elevation": "27.0",
        "Period": [
            {
                "type": "Day",
                "value": "2024-03-01Z",
                "Rep": [
                    {
                        "D": "SW", "F": "6", "G": "25", "H": "87", "Pp": "41", "S": "13",
                        "T": "9", "V": "GO", "W": "12", "U": "1", "$": "180",
                    },
                    {
                        "D": "WSW", "F": "7", "G": "29", "H": "80", "Pp": "8", "S": "16",
                        "T": "10", "V": "VG", "W": "7", "U": "2", "$": "360",
                    },
                ],
            },
            {
                "type": "Day",
                "value": "2024-03-02Z",
                "Rep": {
                    "D": "W", "F": "4", "G": "18", "H": "91", "Pp": "5", "S": "9",
                    "T": "6", "V": "MO", "W": "2", "U": "0", "$": "0",
                },
            },
        ],
    }


@pytest.fixture
def sample_site_rep(sample_params, sample_location) -> Dict:
    return {
        "SiteRep": {
            "Wx": {"Param": sample_params},
            "DV": {
                "dataDate": "2024-03-01T09:00:00Z",
                "type": "Forecast",
                "Location": sample_location,
            },
        }
    }


@pytest.fixture
def sample_site_list() -> Dict:
    return {
        "Locations": {
            "Location": [
                {
                    "id": "310069",
                    "latitude": "50.7179",
                    "longitude": "-3.5327",
                    "name": "Exeter",
                    "elevation": "",
                    "region": "sw",
                    "unitaryAuthArea": "Devon",
                },
                {
                    "id": "3772",
                    "latitude": "51.479",
                    "longitude": "-0.449",
                    "name": "Heathrow",
                    "elevation": "25.0",
                    "region": "se",
                    "unitaryAuthArea": "Greater London",
                },
            ]
        }
    }


@pytest.fixture
def sample_latest_extremes() -> Dict:
    return {
        "UkExtremes": {
            "extremeDate": "2024-02-29",
            "issuedAt": "2024-03-01T00:00:00Z",
            "Regions": {
                "Region": [
                    {
                        "id": "nw",
                        "name": "North West England",
                        "Extremes": {
                            "Extreme": [
                                {"locId": "3318", "locationName": "Blackpool", "type": "HMAXT", "uom": "degC", "$": "11.2"},
                                {"locId": "3321", "locationName": "Shap", "type": "LMINT", "uom": "degC", "$": "-1.5"},
                            ]
                        },
                    },
                    {
                        "id": "sw",
                        "name": "South West England",
                        "Extremes": {
                            "Extreme": {"locId": "3839", "locationName": "Exeter", "type": "HRAIN", "uom": "mm", "$": "12.4"}
                        },
                    },
                ]
            },
        }
    }


@pytest.fixture
def sample_regional_forecast() -> Dict:
    return {
        "RegionalFcst": {
            "createdOn": "2024-03-01T04:12:00Z",
            "issuedAt": "2024-03-01T04:00:00Z",
            "regionId": "sw",
            "FcstPeriods": {
                "Period": [
                    {
                        "id": "day1to2",
                        "Paragraph": [
                            {"title": "Headline:", "$": "Rain clearing east."},
                            {"title": "Today:", "$": "Rain at first, brighter later."},
                        ],
                    },
                    {
                        "id": "day3to5",
                        "Paragraph": {"title": "Outlook for Sunday to Tuesday:", "$": "Unsettled."},
                    },
                ]
            },
        }
    }


Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def make_client() -> Callable[[Handler], DataPointClient]:
    """Build a client whose requests are answered by ``handler``."""

    def factory(handler: Handler, **kwargs) -> DataPointClient:
        kwargs.setdefault("api_key", API_KEY)
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        return DataPointClient(base_url=BASE_URL, http_client=http_client, **kwargs)

    return factory


@pytest.fixture
def json_response() -> Callable[..., httpx.Response]:
    def build(payload: Dict, status_code: int = 200) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload).encode())

    return build
