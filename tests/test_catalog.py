import pytest

from ndfdpoint.catalog import (
    ELEMENT_CATALOG,
    SelectionPolicy,
    all_elements,
    enabled_elements,
    select_elements,
    validate_elements,
)
from ndfdpoint.errors import InvalidInputError


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        ELEMENT_CATALOG["maxt"] = None  # type: ignore[index]


def test_catalog_flags():
    assert ELEMENT_CATALOG["maxt"].enabled
    assert ELEMENT_CATALOG["conhazo"].label == "Convective Hazard Outlook"
    assert not ELEMENT_CATALOG["dew"].enabled
    assert "dew" in all_elements()
    assert "dew" not in enabled_elements()
    assert enabled_elements()[:3] == ("maxt", "mint", "temp")


def test_select_elements_policies():
    assert select_elements(SelectionPolicy.ALL) == all_elements()
    assert select_elements("enabled") == enabled_elements()
    assert select_elements("ALL") == all_elements()
    assert select_elements(SelectionPolicy.CUSTOM, ["wgust", "maxt", "wgust"]) == ("wgust", "maxt")


def test_custom_selection_requires_codes():
    with pytest.raises(InvalidInputError):
        select_elements(SelectionPolicy.CUSTOM, [])


def test_unknown_policy_and_codes():
    with pytest.raises(InvalidInputError):
        select_elements("some")
    with pytest.raises(InvalidInputError):
        validate_elements(["maxt", "nope"])
