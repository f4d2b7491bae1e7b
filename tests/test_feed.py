from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from ndfdpoint.errors import UpstreamError
from ndfdpoint.ingest.transport import NDFD_URL, FeedTransport
from ndfdpoint.ingest.tree import parse_document

FIXTURES = Path(__file__).parent / "fixtures"


def make_session(content: bytes | None = None, exc: Exception | None = None) -> MagicMock:
    session = MagicMock(spec=requests.Session)
    if exc is not None:
        session.get.side_effect = exc
    else:
        resp = MagicMock()
        resp.content = content
        resp.raise_for_status.return_value = None
        session.get.return_value = resp
    return session


def test_feed_node_accessors():
    node = parse_document(
        '<hazards units="percent"><name> WWA </name><hazard-conditions/><hazard-conditions><hazard/></hazard-conditions></hazards>'
    )
    assert node.name == "hazards"
    assert len(node) == 3
    assert node.attribute("units") == "percent"
    assert node.attribute("missing") == ""
    assert node.has_attribute("units") and not node.has_attribute("type")
    assert node.child_text("name") == "WWA"
    assert node.child_text("absent") == ""
    assert node.child("absent") is None
    assert [len(c) for c in node.children_by_name("hazard-conditions")] == [0, 1]
    assert node.first_child().name == "name"
    assert [child.name for child in node] == ["name", "hazard-conditions", "hazard-conditions"]


def test_parse_document_rejects_garbage():
    with pytest.raises(UpstreamError):
        parse_document(b"<html><body>Service Unavailable")


def test_fetch_passes_params_and_parses():
    session = make_session((FIXTURES / "zip_lookup.xml").read_bytes())
    transport = FeedTransport(session, timeout=12)
    document = transport.fetch({"listZipCodeList": "19103"})
    assert document.child_text("latLonList") == "40.0,-75.0"
    session.get.assert_called_once_with(NDFD_URL, params={"listZipCodeList": "19103"}, timeout=12)


def test_fetch_wraps_connection_errors():
    session = make_session(exc=requests.ConnectionError("down"))
    with pytest.raises(UpstreamError) as excinfo:
        FeedTransport(session).fetch({"listZipCodeList": "19103"})
    assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
    assert session.get.call_count == 1


def test_fetch_wraps_http_status_errors():
    session = make_session(b"")
    session.get.return_value.raise_for_status.side_effect = requests.HTTPError("503 Server Error")
    with pytest.raises(UpstreamError):
        FeedTransport(session).fetch({})


def test_fetch_rejects_feed_error_document():
    session = make_session((FIXTURES / "error.xml").read_bytes())
    with pytest.raises(UpstreamError, match="ERROR"):
        FeedTransport(session).fetch({"product": "time-series"})
