from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, Tuple

from .errors import InvalidInputError

POSTAL_CODE_RE = re.compile(r"\d{5}")
WINDOW_LENGTH = timedelta(seconds=3600)

NormalizedForecast = Dict[str, Any]


class OutputFormat(str, Enum):
    JSON = "JSON"
    XML = "XML"

    @classmethod
    def parse(cls, value: "OutputFormat | str | None") -> "OutputFormat":
        if isinstance(value, OutputFormat):
            return value
        if not value:
            return cls.JSON
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return cls.JSON


def validate_postal_code(postal_code: str) -> str:
    candidate = str(postal_code).strip() if postal_code is not None else ""
    if not POSTAL_CODE_RE.fullmatch(candidate):
        raise InvalidInputError(f"Invalid zipcode: {postal_code!r}")
    return candidate


@dataclass(frozen=True, slots=True)
class Coordinates:
    latitude: str
    longitude: str

    @property
    def lat_lon(self) -> str:
        return f"{self.latitude},{self.longitude}"


@dataclass(frozen=True, slots=True)
class ForecastWindow:
    start: datetime
    end: datetime


@dataclass(frozen=True, slots=True)
class ForecastRequest:
    postal_code: str
    reference_time: datetime
    selected_elements: Tuple[str, ...] = field(default_factory=tuple)
    output_format: OutputFormat = OutputFormat.JSON

    def __post_init__(self) -> None:
        validate_postal_code(self.postal_code)

    @property
    def window(self) -> ForecastWindow:
        return ForecastWindow(start=self.reference_time, end=self.reference_time + WINDOW_LENGTH)
