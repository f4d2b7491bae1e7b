from __future__ import annotations

import logging
from typing import Mapping

import requests

from ..errors import UpstreamError
from ..util.http import DEFAULT_TIMEOUT
from .tree import FeedNode, parse_document

LOGGER = logging.getLogger(__name__)

NDFD_URL = "https://graphical.weather.gov/xml/sample_products/browser_interface/ndfdXMLclient.php"


class FeedTransport:
    """Single-shot GET against the NDFD browser interface."""

    def __init__(self, session: requests.Session, base_url: str = NDFD_URL, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.session = session
        self.base_url = base_url
        self.timeout = timeout

    def _download(self, params: Mapping[str, str]) -> bytes:
        try:
            resp = self.session.get(self.base_url, params=dict(params), timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise UpstreamError(f"NDFD request failed: {exc}") from exc
        return resp.content

    def fetch(self, params: Mapping[str, str]) -> FeedNode:
        LOGGER.debug("Requesting %s with %d parameters", self.base_url, len(params))
        document = parse_document(self._download(params))
        if document.name == "error":
            message = " ".join(filter(None, (node.text() for node in document.children()))) or document.text()
            raise UpstreamError(f"NDFD returned an error document: {message or 'no details'}")
        return document
