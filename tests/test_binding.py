"""Tests for wren.html.binding — the dataclass metadata provider."""

from dataclasses import dataclass, field

import pytest

from wren.config import WrenConfig
from wren.errors import InvalidArgumentError
from wren.html.binding import (
    DataclassMetadataProvider,
    MetadataProvider,
    html_id,
    validation_attributes,
)


@dataclass
class Address:
    city: str = field(default="", metadata={"display": "City", "max_length": 40})
    zip_code: str = field(default="", metadata={"pattern": r"^\d{5}$"})


@dataclass
class Customer:
    name: str = field(
        default="",
        metadata={"display": "Full name", "required": True, "min_length": 2, "max_length": 50},
    )
    rating: int = field(default=3, metadata={"range": (1, 5)})
    address: Address | None = None
    nickname: str = ""


class PlainModel:
    def __init__(self) -> None:
        self.title = "Hello"


class TestProvider:
    def test_is_metadata_provider(self) -> None:
        assert isinstance(DataclassMetadataProvider(), MetadataProvider)

    def test_simple_field(self) -> None:
        binding = DataclassMetadataProvider().bind(Customer(nickname="Bo"), "nickname")
        assert binding.name == "nickname"
        assert binding.id == "nickname"
        assert binding.value == "Bo"
        assert binding.display_name == "nickname"
        assert binding.validation_attributes == {}

    def test_display_name_and_rules(self) -> None:
        binding = DataclassMetadataProvider().bind(Customer(name="Ann"), "name")
        assert binding.display_name == "Full name"
        assert binding.validation_attributes == {
            "data-val": "true",
            "data-val-required": "The Full name field is required.",
            "data-val-length": (
                "The field Full name must be a string with a minimum length of 2 "
                "and a maximum length of 50."
            ),
            "data-val-length-max": "50",
            "data-val-length-min": "2",
        }

    def test_range_on_numeric_field(self) -> None:
        attrs = DataclassMetadataProvider().bind(Customer(), "rating").validation_attributes
        assert attrs["data-val-range"] == "The field rating must be between 1 and 5."
        assert attrs["data-val-range-min"] == "1"
        assert attrs["data-val-range-max"] == "5"
        assert attrs["data-val-number"] == "The field rating must be a number."

    def test_nested_path(self) -> None:
        customer = Customer(address=Address(city="Oslo"))
        binding = DataclassMetadataProvider().bind(customer, "address.city")
        assert binding.name == "address.city"
        assert binding.id == "address_city"
        assert binding.value == "Oslo"
        assert binding.display_name == "City"
        assert binding.validation_attributes["data-val-length-max"] == "40"

    def test_none_intermediate_still_finds_metadata(self) -> None:
        binding = DataclassMetadataProvider().bind(Customer(address=None), "address.zip_code")
        assert binding.value is None
        assert binding.validation_attributes["data-val-regex-pattern"] == r"^\d{5}$"

    def test_plain_object(self) -> None:
        binding = DataclassMetadataProvider().bind(PlainModel(), "title")
        assert binding.value == "Hello"
        assert binding.display_name == "title"
        assert binding.validation_attributes == {}

    def test_validation_attributes_can_be_disabled(self) -> None:
        provider = DataclassMetadataProvider(WrenConfig(validation_attributes=False))
        assert provider.bind(Customer(), "name").validation_attributes == {}

    def test_missing_property(self) -> None:
        with pytest.raises(InvalidArgumentError, match="no property 'nope'"):
            DataclassMetadataProvider().bind(Customer(), "nope")

    @pytest.mark.parametrize("accessor", ["", None])
    def test_empty_accessor(self, accessor: str) -> None:
        with pytest.raises(InvalidArgumentError):
            DataclassMetadataProvider().bind(Customer(), accessor)


class TestHelpers:
    def test_html_id(self) -> None:
        assert html_id("items[0].name") == "items_0__name"

    def test_no_rules_no_attributes(self) -> None:
        assert validation_attributes("Name", {}) == {}

    def test_max_length_only(self) -> None:
        attrs = validation_attributes("Code", {"max_length": 3})
        assert attrs["data-val-length"] == "The field Code must be a string with a maximum length of 3."
        assert "data-val-length-min" not in attrs
