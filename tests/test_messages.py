"""
Tests for diagnostic messages.
"""
import pytest
from classgroups.messages import MESSAGES, format_message, violation_message
from classgroups.models import MixedBaseAndModifier, MultipleGroups, SplitModifier


class TestFormatMessage:
    """Test template rendering and fallbacks."""

    def test_split(self):
        message = format_message("split_modifier", modifier="hover:")
        assert message.endswith("Move all 'hover:' classes into a single argument.")

    def test_split_fallback(self):
        assert "'same modifier'" in format_message("split_modifier")

    def test_mixed_fallback(self):
        assert "'modifier classes'" in format_message("mixed_base_and_modifiers", modifier=None)

    def test_multiple_fallback(self):
        message = format_message("multiple_modifier_groups")
        assert "'different modifiers' and 'in same argument'" in message

    def test_wrapper_fallback(self):
        assert "'cn()'" in format_message("complex_attribute")

    def test_unknown_message_id(self):
        with pytest.raises(KeyError):
            format_message("no_such_message")

    def test_every_template_renders(self):
        for message_id in MESSAGES:
            assert "{" not in format_message(message_id)


class TestViolationMessage:
    """Test messages built from violations."""

    def test_split(self):
        assert "'focus:'" in violation_message(SplitModifier("focus:", (0, 2)))

    def test_mixed(self):
        assert "'md:'" in violation_message(MixedBaseAndModifier(0, "md:"))

    def test_multiple(self):
        message = violation_message(MultipleGroups(0, "hover:", "focus:"))
        assert "Split 'hover:' and 'focus:' into separate arguments." in message
