from datetime import UTC, datetime

import pytest

from ndfdpoint.errors import InvalidInputError
from ndfdpoint.ingest.query import build_query
from ndfdpoint.models import Coordinates
from ndfdpoint.util.time import forecast_window

COORDS = Coordinates(latitude="40.0", longitude="-75.0")
WINDOW = forecast_window(datetime(2024, 5, 1, 12, 0, tzinfo=UTC))


def test_build_query_time_series():
    params = build_query(COORDS, ["maxt", "wwa"], WINDOW)
    assert params == {
        "maxt": "maxt",
        "wwa": "wwa",
        "lat": "40.0",
        "lon": "-75.0",
        "product": "time-series",
        "begin": "2024-05-01T12:00:00+00:00",
        "end": "2024-05-01T13:00:00+00:00",
    }
    assert list(params)[:2] == ["maxt", "wwa"]


def test_build_query_is_deterministic():
    assert build_query(COORDS, ["temp"], WINDOW) == build_query(COORDS, ["temp"], WINDOW)


def test_build_query_unit_and_product():
    params = build_query(COORDS, ["temp"], WINDOW, product="glance", unit="m")
    assert params["product"] == "glance"
    assert params["Unit"] == "m"


def test_build_query_rejects_unknown_element():
    with pytest.raises(InvalidInputError, match="bogus"):
        build_query(COORDS, ["maxt", "bogus"], WINDOW)


def test_build_query_rejects_unknown_unit():
    with pytest.raises(InvalidInputError):
        build_query(COORDS, ["maxt"], WINDOW, unit="k")
