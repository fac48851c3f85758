"""
Tests for grouping options.
"""
import logging

import pytest
from classgroups.options import (
    DEFAULT_MAX_VARIANT_DEPTH,
    DEFAULT_WRAPPER_NAME,
    GroupingOptions,
    OptionsError,
)


class TestFromMapping:
    """Test building options from user mappings."""

    def test_defaults(self):
        assert GroupingOptions.from_mapping(None) == GroupingOptions()
        assert GroupingOptions.from_mapping({}) == GroupingOptions()

    def test_valid_values(self):
        options = GroupingOptions.from_mapping({
            "wrapper_name": "  clsx ",
            "base_field": "root",
            "variants_field": "styles",
            "max_variant_depth": 5,
        })
        assert options == GroupingOptions(
            wrapper_name="clsx",
            base_field="root",
            variants_field="styles",
            max_variant_depth=5,
        )

    @pytest.mark.parametrize("value", ["", "   ", None, 42])
    def test_invalid_name_falls_back(self, value, caplog):
        with caplog.at_level(logging.WARNING):
            options = GroupingOptions.from_mapping({"wrapper_name": value})
        assert options.wrapper_name == DEFAULT_WRAPPER_NAME
        assert "Invalid wrapper_name" in caplog.text

    @pytest.mark.parametrize("value", [0, -3, True, "8", 2.5])
    def test_invalid_depth_falls_back(self, value, caplog):
        with caplog.at_level(logging.WARNING):
            options = GroupingOptions.from_mapping({"max_variant_depth": value})
        assert options.max_variant_depth == DEFAULT_MAX_VARIANT_DEPTH
        assert "Invalid max_variant_depth" in caplog.text

    def test_unknown_keys(self):
        with pytest.raises(OptionsError, match="colour, wrapper"):
            GroupingOptions.from_mapping({"wrapper": "cn", "colour": "red"})

    def test_options_error_is_value_error(self):
        assert issubclass(OptionsError, ValueError)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            GroupingOptions().wrapper_name = "clsx"
