from __future__ import annotations

import logging

from ..errors import UpstreamError
from ..models import Coordinates, validate_postal_code
from .transport import FeedTransport

LOGGER = logging.getLogger(__name__)


def parse_lat_lon(raw: str) -> Coordinates:
    """Split the feed's ``"lat,lon"`` string.

    Components are trimmed and kept verbatim; the feed is trusted to send
    numbers, so nothing here converts or range-checks them.
    """
    pairs = raw.split()
    if not pairs:
        raise UpstreamError("NDFD returned an empty coordinate list")
    # multi-point lists separate pairs with whitespace; keep the first
    points = [part.strip() for part in pairs[0].split(",")]
    if len(points) != 2 or not points[0] or not points[1]:
        raise UpstreamError(f"NDFD returned a malformed coordinate pair: {pairs[0]!r}")
    return Coordinates(latitude=points[0], longitude=points[1])


class CoordinateResolver:
    def __init__(self, transport: FeedTransport) -> None:
        self.transport = transport

    def resolve(self, postal_code: str) -> Coordinates:
        postal_code = validate_postal_code(postal_code)
        document = self.transport.fetch({"listZipCodeList": postal_code})
        node = document.child("latLonList")
        if node is None:
            raise UpstreamError(f"NDFD response for {postal_code} has no latLonList")
        coords = parse_lat_lon(node.text())
        LOGGER.info("Resolved %s to %s", postal_code, coords.lat_lon)
        return coords
