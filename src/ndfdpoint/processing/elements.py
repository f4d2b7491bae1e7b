"""Flatten a DWML ``parameters`` group into a JSON-ready mapping.

Most elements are a ``name``/``value`` pair with an optional ``units``
attribute. A few shapes in the parameters schema
(https://graphical.weather.gov/xml/DWMLgen/schema/parameters.xsd) are nested
or list-valued and get their own handler.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from ..ingest.tree import FeedNode
from ..models import Coordinates, NormalizedForecast

LOGGER = logging.getLogger(__name__)

CONVECTIVE_HAZARD = "convective-hazard"
CLIMATE_ANOMALY = "climate-anomaly"
HAZARDS = "hazards"
CONDITIONS_ICON = "conditions-icon"

HAZARD_ATTRIBUTES = ("hazardCode", "phenomena", "significance", "hazardType")
HAZARD_CHILDREN = ("hazardTextURL", "hazardIcon")


def first_parameter_group(document: FeedNode) -> Optional[FeedNode]:
    if document.name == "parameters":
        return document
    data = document.child("data")
    if data is None:
        return None
    return data.child("parameters")


def _measurement(node: FeedNode) -> Dict[str, str]:
    return {
        "name": node.child_text("name"),
        "value": node.child_text("value"),
        "units": node.attribute("units"),
    }


def _hazard_record(condition: FeedNode) -> Dict[str, str]:
    hazard = condition.child("hazard")
    if hazard is None:
        return {key: "" for key in HAZARD_ATTRIBUTES + HAZARD_CHILDREN}
    record = {key: hazard.attribute(key) for key in HAZARD_ATTRIBUTES}
    record.update({key: hazard.child_text(key) for key in HAZARD_CHILDREN})
    return record


def _convective_hazard(element: FeedNode, out: NormalizedForecast) -> None:
    component = element.child("severe-component")
    if component is None or not component.child_text("name"):
        return
    out.setdefault(CONVECTIVE_HAZARD, {})[component.attribute("type")] = _measurement(component)


def _climate_anomaly(element: FeedNode, out: NormalizedForecast) -> None:
    period = element.first_child()
    if period is None:
        return
    periods = out.setdefault(CLIMATE_ANOMALY, {})
    periods.setdefault(period.name, {})[period.attribute("type")] = _measurement(period)


def _hazards(element: FeedNode, out: NormalizedForecast) -> None:
    entry: Dict[str, Any] = {"name": element.child_text("name")}
    # live DWML only nests hazard-conditions here; other condition tags key by their own name
    for condition in element.children():
        if condition.name == "name" or len(condition) == 0:
            continue
        key = condition.attribute("type") or condition.name
        records: List[Dict[str, str]] = entry.setdefault(key, [])
        records.append(_hazard_record(condition))
    out[HAZARDS] = entry


def _conditions_icon(element: FeedNode, out: NormalizedForecast) -> None:
    out[CONDITIONS_ICON] = {
        "name": element.child_text("name"),
        "icon-link": element.child_text("icon-link"),
    }


def _generic(element: FeedNode, out: NormalizedForecast) -> None:
    entry = {
        "name": element.child_text("name"),
        "value": element.child_text("value"),
    }
    if element.has_attribute("units"):
        entry["units"] = element.attribute("units")
    out[element.name] = entry


HANDLERS: Dict[str, Callable[[FeedNode, NormalizedForecast], None]] = {
    CONVECTIVE_HAZARD: _convective_hazard,
    CLIMATE_ANOMALY: _climate_anomaly,
    HAZARDS: _hazards,
    CONDITIONS_ICON: _conditions_icon,
}


def transform(document: FeedNode, coordinates: Coordinates) -> NormalizedForecast:
    out: NormalizedForecast = {"lat-lon": coordinates.lat_lon}
    # only the first location's parameter group is read
    parameters = first_parameter_group(document)
    if parameters is None:
        LOGGER.warning("Forecast document has no parameters group; returning location only")
        return out
    for element in parameters.children():
        HANDLERS.get(element.name, _generic)(element, out)
    return out
