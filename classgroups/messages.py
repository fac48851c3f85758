"""Diagnostic message templates."""

MESSAGES = {
    'split_modifier': (
        "Classes with the same modifier should be grouped together. "
        "Move all '{modifier}' classes into a single argument."
    ),
    'multiple_modifier_groups': (
        "Classes with different modifiers should be in separate arguments. "
        "Split '{modifier1}' and '{modifier2}' into separate arguments."
    ),
    'mixed_base_and_modifiers': (
        "Base classes and modifier classes must be separated. "
        "Move base classes and '{modifier}' classes into separate arguments."
    ),
    'complex_variant_value': (
        "Variant value contains multiple modifier groups or mixes base and modifiers. "
        "Wrap with '{function}()' to enable proper grouping."
    ),
    'complex_attribute': (
        "Attribute value contains multiple modifier groups or mixes base and modifiers. "
        "Wrap with '{function}()' to enable proper grouping."
    ),
}

# Used when a modifier cannot be attributed
FALLBACKS = {
    'modifier': 'modifier classes',
    'modifier1': 'different modifiers',
    'modifier2': 'in same argument',
    'function': 'cn',
}

SPLIT_FALLBACK = 'same modifier'


def format_message(message_id: str, **data) -> str:
    """
    Render a message template.

    Missing or None values are replaced by generic wording.

    Raises:
        KeyError: for an unknown message id.
    """
    template = MESSAGES[message_id]
    values = dict(FALLBACKS)
    if message_id == 'split_modifier':
        values['modifier'] = SPLIT_FALLBACK
    values.update({key: value for key, value in data.items() if value is not None})
    return template.format(**values)


def violation_message(violation) -> str:
    """Message for a SplitModifier / MixedBaseAndModifier / MultipleGroups."""
    if violation.message_id == 'multiple_modifier_groups':
        return format_message(
            violation.message_id,
            modifier1=violation.modifier1,
            modifier2=violation.modifier2,
        )
    return format_message(violation.message_id, modifier=violation.modifier)
