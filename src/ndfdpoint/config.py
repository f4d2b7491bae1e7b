from __future__ import annotations

import os
from typing import Any, List, Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .catalog import SelectionPolicy, select_elements
from .errors import InvalidInputError
from .ingest.transport import NDFD_URL
from .models import OutputFormat
from .util.http import DEFAULT_TIMEOUT

DEFAULT_USER_AGENT = "ndfd-point/0.1 (contact: you@example.com)"


class ClientSettings(BaseModel):
    base_url: str = Field(default=NDFD_URL)
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    retries: int = Field(default=0, ge=0)
    output_format: OutputFormat = Field(default=OutputFormat.JSON)
    element_policy: SelectionPolicy = Field(default=SelectionPolicy.ENABLED)
    elements: List[str] = Field(default_factory=list)
    unit: Optional[Literal["e", "m"]] = None

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="before")
    @classmethod
    def _elements_imply_custom(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("elements") and data.get("element_policy") is None:
            data = {**data, "element_policy": SelectionPolicy.CUSTOM}
        return data

    @field_validator("output_format", mode="before")
    @classmethod
    def _parse_format(cls, value: Any) -> OutputFormat:
        return OutputFormat.parse(value)

    @field_validator("element_policy", mode="before")
    @classmethod
    def _parse_policy(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    @field_validator("elements", mode="before")
    @classmethod
    def _split_elements(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    def selected_elements(self) -> tuple[str, ...]:
        return select_elements(self.element_policy, self.elements)


def _env(key: str) -> Optional[str]:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return None
    return value.strip()


ENV_KEYS = {
    "base_url": "NDFD_BASE_URL",
    "user_agent": "NDFD_USER_AGENT",
    "timeout": "NDFD_TIMEOUT",
    "retries": "NDFD_RETRIES",
    "output_format": "NDFD_FORMAT",
    "element_policy": "NDFD_ELEMENT_POLICY",
    "elements": "NDFD_ELEMENTS",
    "unit": "NDFD_UNIT",
}


def load_settings(overrides: dict[str, Any] | None = None) -> ClientSettings:
    load_dotenv()
    overrides = overrides or {}

    data: dict[str, Any] = {}
    for field, env_key in ENV_KEYS.items():
        value = overrides.get(field)
        if value is None:
            value = _env(env_key)
        if value is not None:
            data[field] = value

    try:
        return ClientSettings(**data)
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid configuration: {exc}") from exc
