from __future__ import annotations

from typing import Dict, Iterable, Optional

from ..catalog import validate_elements
from ..errors import InvalidInputError
from ..models import Coordinates, ForecastWindow
from ..util.time import format_iso

TIME_SERIES = "time-series"
UNIT_SYSTEMS = {"e", "m"}


def build_query(
    coordinates: Coordinates,
    elements: Iterable[str],
    window: ForecastWindow,
    product: str = TIME_SERIES,
    unit: Optional[str] = None,
) -> Dict[str, str]:
    # the feed expects each requested element as code=code
    params: Dict[str, str] = {code: code for code in validate_elements(elements)}
    params.update(
        {
            "lat": coordinates.latitude,
            "lon": coordinates.longitude,
            "product": product,
            "begin": format_iso(window.start),
            "end": format_iso(window.end),
        }
    )
    if unit is not None:
        if unit not in UNIT_SYSTEMS:
            raise InvalidInputError(f"Unknown unit system: {unit!r}")
        params["Unit"] = unit
    return params
