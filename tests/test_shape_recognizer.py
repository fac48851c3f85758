"""
Tests for call shape recognition.
"""
from classgroups.models import Location, ShapeForm, ShapeKind
from classgroups.options import GroupingOptions
from classgroups.services.shape_recognizer import (
    FLAT,
    get_field,
    has_field,
    recognize_shape,
    resolve_location,
)


class TestExternalShape:
    """fn(base, {variants: {...}})"""

    def test_string_base(self):
        shape = recognize_shape(["px-2", {"variants": {"size": {}}}])
        assert shape.kind == ShapeKind.BASE_AND_VARIANTS
        assert shape.form == ShapeForm.EXTERNAL
        assert shape.base_location == Location(0)
        assert shape.variants_location == Location(1, "variants")

    def test_form_is_enum_member(self):
        shape = recognize_shape(["px-2", {"variants": {}}])
        assert isinstance(shape.form, ShapeForm)
        assert shape.form.value == "external"
        assert FLAT.form is None

    def test_array_base(self):
        shape = recognize_shape([["px-2", "py-1"], {"variants": {}}])
        assert shape.form == ShapeForm.EXTERNAL

    def test_opaque_base(self, opaque_value):
        shape = recognize_shape([opaque_value, {"variants": {}}])
        assert shape.form == ShapeForm.EXTERNAL

    def test_variants_must_be_object_like(self):
        assert recognize_shape(["a", {"variants": "x"}]) == FLAT


class TestEmbeddedShape:
    """fn({base: ..., variants: ...})"""

    def test_embedded(self):
        shape = recognize_shape([{"base": "x", "variants": {}}])
        assert shape.form == ShapeForm.EMBEDDED
        assert shape.base_location == Location(0, "base")
        assert shape.variants_location == Location(0, "variants")

    def test_only_field_presence_matters(self):
        assert recognize_shape([{"base": "x", "variants": "y"}]).form == ShapeForm.EMBEDDED

    def test_missing_base_field(self):
        assert recognize_shape([{"variants": {}}]).is_flat

    def test_object_first_argument_is_never_external(self):
        shape = recognize_shape([{"base": "x", "variants": {}}, {"variants": {}}])
        assert shape.form == ShapeForm.EMBEDDED

    def test_custom_field_names(self):
        options = GroupingOptions(base_field="root", variants_field="styles")
        shape = recognize_shape([{"root": "x", "styles": {}}], options)
        assert shape.form == ShapeForm.EMBEDDED
        assert shape.base_location == Location(0, "root")
        assert recognize_shape([{"base": "x", "variants": {}}], options).is_flat


class TestFlatShape:
    """Everything else is flat."""

    def test_strings(self):
        assert recognize_shape(["a", "b", "c"]) == FLAT

    def test_no_arguments(self):
        assert recognize_shape([]).is_flat

    def test_plain_object(self):
        assert recognize_shape([{"a": "b"}]).is_flat


class TestLocations:
    """Test field access and location resolution."""

    def test_field_helpers(self):
        assert has_field({"base": None}, "base") is True
        assert has_field("base", "base") is False
        assert get_field({"base": "x"}, "base") == "x"
        assert get_field(["x"], "base", "fallback") == "fallback"

    def test_resolve_location(self):
        arguments = ["px-2", {"variants": {"size": {}}}]
        assert resolve_location(arguments, Location(0)) == "px-2"
        assert resolve_location(arguments, Location(1, "variants")) == {"size": {}}

    def test_resolve_missing_location(self):
        assert resolve_location(["px-2"], Location(3)) is None
        assert resolve_location(["px-2"], None) is None
        assert resolve_location([{}], Location(0, "base")) is None
