"""
Shape Recognizer

Decides from structure alone (never from a function name) where the class
strings of one call live.

Recognized shapes, tried in this order:
1. External base and variants: fn(base, {variants: {...}})
   base is a string, an array or any opaque value; the second argument is
   object-like with an object-like "variants" field.
2. Embedded base and variants: fn({base: ..., variants: ...})
   the first argument is object-like and has both fields.
3. Flat: fn(...slots), every argument independent.

Examples:
    >>> recognize_shape(["px-2", {"variants": {"size": {"sm": "text-sm"}}}]).form
    <ShapeForm.EXTERNAL: 'external'>

    >>> recognize_shape([{"base": "px-2", "variants": {}}]).form
    <ShapeForm.EMBEDDED: 'embedded'>

    >>> recognize_shape(["a", "b", "c"]).kind
    <ShapeKind.FLAT: 'flat'>
"""
from collections.abc import Mapping
from typing import Any, Sequence

from classgroups.models import Location, ShapeDescriptor, ShapeForm, ShapeKind
from classgroups.options import DEFAULT_OPTIONS, GroupingOptions

FLAT = ShapeDescriptor(kind=ShapeKind.FLAT)


def is_object_like(value: Any) -> bool:
    return isinstance(value, Mapping)


def has_field(value: Any, name: str) -> bool:
    """True if value is object-like and has a field with this exact name."""
    return is_object_like(value) and name in value


def get_field(value: Any, name: str, default: Any = None) -> Any:
    if not is_object_like(value):
        return default
    return value.get(name, default)


def recognize_shape(
    arguments: Sequence[Any],
    options: GroupingOptions = DEFAULT_OPTIONS,
) -> ShapeDescriptor:
    """
    Detect the call shape of an argument list.

    Args:
        arguments: Argument values; mappings are object-like, everything
            else (strings, arrays, opaque values) is not.
        options: Supplies the "base" / "variants" field names.

    Returns:
        ShapeDescriptor with base and variants locations, or FLAT.
    """
    base_field = options.base_field
    variants_field = options.variants_field

    if len(arguments) >= 2:
        first, second = arguments[0], arguments[1]
        if (
            not is_object_like(first)
            and has_field(second, variants_field)
            and is_object_like(get_field(second, variants_field))
        ):
            return ShapeDescriptor(
                kind=ShapeKind.BASE_AND_VARIANTS,
                form=ShapeForm.EXTERNAL,
                base_location=Location(argument_index=0),
                variants_location=Location(argument_index=1, field=variants_field),
            )

    if len(arguments) >= 1:
        first = arguments[0]
        if has_field(first, base_field) and has_field(first, variants_field):
            return ShapeDescriptor(
                kind=ShapeKind.BASE_AND_VARIANTS,
                form=ShapeForm.EMBEDDED,
                base_location=Location(argument_index=0, field=base_field),
                variants_location=Location(argument_index=0, field=variants_field),
            )

    return FLAT


def resolve_location(arguments: Sequence[Any], location: Location | None) -> Any:
    """
    Value stored at a location, or None when it does not exist.
    """
    if location is None or location.argument_index >= len(arguments):
        return None
    argument = arguments[location.argument_index]
    if location.field is None:
        return argument
    return get_field(argument, location.field)
