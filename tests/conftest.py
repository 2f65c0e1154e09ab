import copy
import json
import os
import sys

import pytest

# Ensure project root is on sys.path so tests can import `weatherapi` when pytest
# is invoked from the repository root or other working directories.
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


CURRENT_LONDON = {
    "location": {
        "name": "London",
        "region": "City of London, Greater London",
        "country": "United Kingdom",
        "lat": 51.52,
        "lon": -0.11,
        "tz_id": "Europe/London",
        "localtime_epoch": 1729330200,
        "localtime": "2024-10-19 10:30",
    },
    "current": {
        "last_updated": "2024-10-19 10:30",
        "temp_c": 14.2,
        "temp_f": 57.6,
        "is_day": 1,
        "condition": {
            "text": "Partly cloudy",
            "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png",
            "code": 1003,
        },
        "wind_mph": 9.4,
        "wind_kph": 15.1,
        "wind_degree": 210,
        "wind_dir": "SSW",
        "pressure_mb": 1012.0,
        "pressure_in": 29.88,
        "humidity": 77,
        "feelslike_c": 12.9,
        "feelslike_f": 55.2,
    },
}


@pytest.fixture
def current_payload():
    """A trimmed real `current.json` answer for London."""
    return copy.deepcopy(CURRENT_LONDON)


@pytest.fixture
def as_body():
    def _encode(payload) -> bytes:
        return json.dumps(payload).encode("utf-8")

    return _encode
