import logging
from datetime import UTC, datetime, timedelta, timezone

import pytest

from ndfdpoint.errors import InvalidInputError
from ndfdpoint.util.http import TimeoutHTTPAdapter, create_session
from ndfdpoint.util.logging import setup_logging
from ndfdpoint.util.time import forecast_window, format_iso, to_utc


def test_to_utc_accepts_timestamps_datetimes_and_strings():
    expected = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
    assert to_utc(1714564800) == expected
    assert to_utc(1714564800.0) == expected
    assert to_utc(datetime(2024, 5, 1, 12, 0)) == expected
    assert to_utc(datetime(2024, 5, 1, 8, 0, tzinfo=timezone(timedelta(hours=-4)))) == expected
    assert to_utc("2024-05-01T08:00:00-04:00") == expected


@pytest.mark.parametrize("value", ["not a time", True, None, [1]])
def test_to_utc_rejects_garbage(value):
    with pytest.raises(InvalidInputError):
        to_utc(value)


def test_forecast_window_is_one_hour():
    window = forecast_window(datetime(2024, 5, 1, 23, 30, tzinfo=UTC))
    assert window.end - window.start == timedelta(hours=1)
    assert format_iso(window.end) == "2024-05-02T00:30:00+00:00"


def test_create_session_defaults_to_no_retries():
    session = create_session("ndfd-tests", timeout=7)
    assert session.headers["User-Agent"] == "ndfd-tests"
    adapter = session.get_adapter("https://graphical.weather.gov/")
    assert isinstance(adapter, TimeoutHTTPAdapter)
    assert adapter.timeout == 7
    assert adapter.max_retries.total == 0


def test_setup_logging_writes_file(tmp_path):
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    try:
        setup_logging(tmp_path / "logs", level=logging.DEBUG)
        logging.getLogger("ndfdpoint.test").info("hello")
        for handler in root.handlers:
            handler.flush()
        assert "| INFO | ndfdpoint.test | hello" in (tmp_path / "logs" / "ndfdpoint.log").read_text()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
