"""Requestable NDFD forecast elements.

Element input names follow
https://graphical.weather.gov/xml/docs/elementInputNames.php
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, NamedTuple, Optional, Tuple

from .errors import InvalidInputError


class ElementSpec(NamedTuple):
    code: str
    label: str
    enabled: bool


class SelectionPolicy(str, Enum):
    ALL = "all"
    ENABLED = "enabled"
    CUSTOM = "custom"


_ELEMENTS = [
    ElementSpec("maxt", "Maximum Temperature", True),
    ElementSpec("mint", "Minimum Temperature", True),
    ElementSpec("temp", "3 Hourly Temperature", True),
    ElementSpec("dew", "Dewpoint Temperature", False),
    ElementSpec("pop12", "12 Hour Probability of Precipitation", True),
    ElementSpec("qpf", "Liquid Precipitation Amount", True),
    ElementSpec("sky", "Cloud Cover Amount", True),
    ElementSpec("snow", "Snowfall Amount", False),
    ElementSpec("wspd", "Wind Speed", True),
    ElementSpec("wdir", "Wind Direction", True),
    ElementSpec("wx", "Weather", True),
    ElementSpec("waveh", "Wave Height", False),
    ElementSpec("icons", "Weather Icons", True),
    ElementSpec("rh", "Relative Humidity", True),
    ElementSpec("appt", "Apparent Temperature", True),
    ElementSpec("incw34", "Probabilistic Tropical Cyclone Wind Speed >34 Knots (Incremental)", False),
    ElementSpec("incw50", "Probabilistic Tropical Cyclone Wind Speed >50 Knots (Incremental)", False),
    ElementSpec("incw64", "Probabilistic Tropical Cyclone Wind Speed >64 Knots (Incremental)", False),
    ElementSpec("cumw34", "Probabilistic Tropical Cyclone Wind Speed >34 Knots (Cumulative)", False),
    ElementSpec("cumw50", "Probabilistic Tropical Cyclone Wind Speed >50 Knots (Cumulative)", False),
    ElementSpec("cumw64", "Probabilistic Tropical Cyclone Wind Speed >64 Knots (Cumulative)", False),
    ElementSpec("critfireo", "Fire Weather from Wind and Relative Humidity", False),
    ElementSpec("dryfireo", "Fire Weather from Dry Thunderstorms", False),
    ElementSpec("conhazo", "Convective Hazard Outlook", True),
    ElementSpec("ptornado", "Probability of Tornadoes", True),
    ElementSpec("phail", "Probability of Hail", True),
    ElementSpec("ptstmwinds", "Probability of Damaging Thunderstorm Winds", True),
    ElementSpec("pxtornado", "Probability of Extreme Tornadoes", True),
    ElementSpec("pxhail", "Probability of Extreme Hail", True),
    ElementSpec("pxtstmwinds", "Probability of Extreme Thunderstorm Winds", True),
    ElementSpec("ptotsvrtstm", "Probability of Severe Thunderstorms", True),
    ElementSpec("pxtotsvrtstm", "Probability of Extreme Severe Thunderstorms", True),
    ElementSpec("tmpabv14d", "Probability of 8- To 14-Day Average Temperature Above Normal", False),
    ElementSpec("tmpblw14d", "Probability of 8- To 14-Day Average Temperature Below Normal", False),
    ElementSpec("tmpabv30d", "Probability of One-Month Average Temperature Above Normal", False),
    ElementSpec("tmpblw30d", "Probability of One-Month Average Temperature Below Normal", False),
    ElementSpec("tmpabv90d", "Probability of Three-Month Average Temperature Above Normal", False),
    ElementSpec("tmpblw90d", "Probability of Three-Month Average Temperature Below Normal", False),
    ElementSpec("prcpabv14d", "Probability of 8- To 14-Day Total Precipitation Above Median", False),
    ElementSpec("prcpblw14d", "Probability of 8- To 14-Day Total Precipitation Below Median", False),
    ElementSpec("prcpabv30d", "Probability of One-Month Total Precipitation Above Median", False),
    ElementSpec("prcpblw30d", "Probability of One-Month Total Precipitation Below Median", False),
    ElementSpec("prcpabv90d", "Probability of Three-Month Total Precipitation Above Median", False),
    ElementSpec("prcpblw90d", "Probability of Three-Month Total Precipitation Below Median", False),
    ElementSpec("precipa_r", "Real-time Mesoscale Analysis Precipitation", False),
    ElementSpec("sky_r", "Real-time Mesoscale Analysis GOES Effective Cloud Amount", False),
    ElementSpec("td_r", "Real-time Mesoscale Analysis Dewpoint Temperature", False),
    ElementSpec("temp_r", "Real-time Mesoscale Analysis Temperature", False),
    ElementSpec("wdir_r", "Real-time Mesoscale Analysis Wind Direction", False),
    ElementSpec("wspd_r", "Real-time Mesoscale Analysis Wind Speed", False),
    ElementSpec("wwa", "Watches, Warnings, and Advisories", True),
    ElementSpec("tstmprb", "Probability of a Thunderstorm", False),
    ElementSpec("tstmcat", "Thunderstorm Categorical Outlook", False),
    ElementSpec("wgust", "Wind Gust", True),
    ElementSpec("iceaccum", "Ice Accumulation", False),
]

ELEMENT_CATALOG: Mapping[str, ElementSpec] = MappingProxyType({spec.code: spec for spec in _ELEMENTS})


def all_elements() -> Tuple[str, ...]:
    return tuple(ELEMENT_CATALOG)


def enabled_elements() -> Tuple[str, ...]:
    return tuple(code for code, spec in ELEMENT_CATALOG.items() if spec.enabled)


def validate_elements(codes: Iterable[str]) -> Tuple[str, ...]:
    ordered = tuple(dict.fromkeys(codes))
    unknown = [code for code in ordered if code not in ELEMENT_CATALOG]
    if unknown:
        raise InvalidInputError(f"Unknown forecast element(s): {', '.join(unknown)}")
    return ordered


def select_elements(
    policy: SelectionPolicy | str = SelectionPolicy.ENABLED,
    requested: Optional[Iterable[str]] = None,
) -> Tuple[str, ...]:
    if isinstance(policy, str) and not isinstance(policy, SelectionPolicy):
        policy = policy.lower()
    try:
        policy = SelectionPolicy(policy)
    except ValueError:
        raise InvalidInputError(f"Unknown element selection policy: {policy!r}") from None
    if policy is SelectionPolicy.ALL:
        return all_elements()
    if policy is SelectionPolicy.ENABLED:
        return enabled_elements()
    codes = validate_elements(requested or ())
    if not codes:
        raise InvalidInputError("Custom element selection requires at least one element code")
    return codes
