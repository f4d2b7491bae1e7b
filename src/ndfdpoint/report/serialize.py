from __future__ import annotations

import json
from typing import Callable, Dict

from ..models import NormalizedForecast, OutputFormat


def render_json(forecast: NormalizedForecast) -> str:
    return json.dumps(forecast)


def render_xml(forecast: NormalizedForecast) -> str:
    raise NotImplementedError("XML output is not available; request JSON instead")


RENDERERS: Dict[OutputFormat, Callable[[NormalizedForecast], str]] = {
    OutputFormat.JSON: render_json,
    OutputFormat.XML: render_xml,
}


def serialize(forecast: NormalizedForecast, fmt: OutputFormat | str | None = OutputFormat.JSON) -> str:
    return RENDERERS[OutputFormat.parse(fmt)](forecast)
