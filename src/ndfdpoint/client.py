from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

import requests

from .catalog import SelectionPolicy, select_elements
from .config import ClientSettings
from .errors import InvalidInputError
from .ingest.location import CoordinateResolver
from .ingest.query import UNIT_SYSTEMS, build_query
from .ingest.transport import FeedTransport
from .models import Coordinates, ForecastRequest, NormalizedForecast, OutputFormat, validate_postal_code
from .processing.elements import transform
from .report.serialize import serialize
from .util.http import create_session
from .util.time import to_utc

LOGGER = logging.getLogger(__name__)


class NdfdClient:
    """Point forecast for one postal code over a one-hour window.

    Coordinates are looked up once, when the client is created; each
    :meth:`get_single_point` call then performs one forecast request.

    ``options`` accepts ``format`` (``"JSON"`` or ``"XML"``), ``elements``
    (element codes to request instead of the configured policy) and ``unit``
    (``"e"`` or ``"m"``).
    """

    def __init__(
        self,
        postal_code: str,
        reference_time: int | float | str | datetime,
        options: Optional[Mapping[str, Any]] = None,
        *,
        settings: Optional[ClientSettings] = None,
        session: Optional[requests.Session] = None,
        transport: Optional[FeedTransport] = None,
    ) -> None:
        postal_code = validate_postal_code(postal_code)
        options = dict(options or {})
        self.settings = settings or ClientSettings()

        requested = options.get("elements")
        if requested:
            elements = select_elements(SelectionPolicy.CUSTOM, requested)
        else:
            elements = self.settings.selected_elements()
        output_format = OutputFormat.parse(options.get("format") or self.settings.output_format)
        self.unit = options.get("unit") or self.settings.unit
        if self.unit is not None and self.unit not in UNIT_SYSTEMS:
            raise InvalidInputError(f"Unknown unit system: {self.unit!r}")

        self.request = ForecastRequest(
            postal_code=postal_code,
            reference_time=to_utc(reference_time),
            selected_elements=elements,
            output_format=output_format,
        )

        self._owns_session = session is None and transport is None
        if transport is None:
            if session is None:
                session = create_session(self.settings.user_agent, self.settings.retries, self.settings.timeout)
            transport = FeedTransport(session, self.settings.base_url, self.settings.timeout)
        self.transport = transport
        try:
            self.coordinates: Coordinates = CoordinateResolver(transport).resolve(postal_code)
        except Exception:
            self.close()
            raise

    def __enter__(self) -> "NdfdClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.transport.session.close()

    def forecast(self) -> NormalizedForecast:
        params = build_query(
            self.coordinates,
            self.request.selected_elements,
            self.request.window,
            unit=self.unit,
        )
        LOGGER.info(
            "Fetching %d elements for %s (%s)",
            len(self.request.selected_elements),
            self.request.postal_code,
            self.coordinates.lat_lon,
        )
        document = self.transport.fetch(params)
        return transform(document, self.coordinates)

    def get_single_point(self) -> str:
        return serialize(self.forecast(), self.request.output_format)
