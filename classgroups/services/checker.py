"""
Grouping checks for calls and single class strings.

Ties the services together:

    argument values -> slots -> analyze_slots() -> plan_rewrite()

and, for base/variants calls, checks the base location and every variant
leaf on its own.

Examples:
    >>> check_call(["hover:bg-red", "hover:text-white"]).diagnostics[0].message_id
    'split_modifier'

    >>> check_leaf("px-2 hover:bg-blue").plan.expression
    'cn("px-2", "hover:bg-blue")'

Violation priority inside one argument list:
1. Split modifier across slots (checked on the whole list, stops there)
2. Mixed base and modifier classes in one slot
3. Multiple modifier groups in one slot
"""
import logging
from typing import Any, Callable, Optional, Sequence

from classgroups.messages import format_message, violation_message
from classgroups.models import (
    CallReport,
    Diagnostic,
    Location,
    MixedBaseAndModifier,
    MultipleGroups,
    NoRewriteNeeded,
    Slot,
    SlotKind,
    SplitModifier,
    Verdict,
    WrapPlan,
)
from classgroups.options import DEFAULT_OPTIONS, GroupingOptions
from classgroups.services.classifier import (
    first_modifier,
    first_two_distinct_modifiers,
    has_multiple_groups,
    mixes_base_and_modifiers,
    split_modifiers,
)
from classgroups.services.rewrite_planner import plan_rewrite, plan_wrap
from classgroups.services.shape_recognizer import recognize_shape, resolve_location
from classgroups.services.variant_tree import (
    VariantPath,
    assign_variants,
    default_literal_text,
    flatten_variants,
    format_path,
)

logger = logging.getLogger(__name__)

LiteralText = Callable[[Any], Optional[str]]


def build_slots(values: Sequence[Any], literal_text: LiteralText = default_literal_text) -> list[Slot]:
    """
    Turn argument values into slots.

    Values with literal text become literal slots; everything else is kept
    as an opaque slot holding the original value.
    """
    slots = []
    for index, value in enumerate(values):
        text = literal_text(value)
        if text is None:
            slots.append(Slot.opaque(index, value))
        else:
            slots.append(Slot(index=index, kind=SlotKind.LITERAL, content=text, value=value))
    return slots


def analyze_slots(slots: Sequence[Slot]) -> Verdict:
    """
    Find the grouping violation of a slot sequence.

    Args:
        slots: Literal and opaque slots; empty literals are ignored.

    Returns:
        Verdict with at most one violation. Slot indices in the violation
        are the slots' own ``index`` values.
    """
    literals = [slot for slot in slots if slot.is_literal and slot.content]
    if not literals:
        return Verdict()

    split = split_modifiers([slot.content for slot in literals])
    if split:
        modifier, positions = next(iter(split.items()))
        return Verdict(SplitModifier(
            modifier=modifier,
            slot_indices=tuple(literals[p].index for p in positions),
        ))

    for slot in literals:
        text = slot.content
        # Mixed takes priority over multiple groups
        if mixes_base_and_modifiers(text):
            return Verdict(MixedBaseAndModifier(
                slot_index=slot.index,
                modifier=first_modifier(text),
            ))
        if has_multiple_groups(text):
            pair = first_two_distinct_modifiers(text) or (None, None)
            return Verdict(MultipleGroups(
                slot_index=slot.index,
                modifier1=pair[0],
                modifier2=pair[1],
            ))

    return Verdict()


def analyze_text(text: str) -> Verdict:
    """Verdict for a single class string."""
    return analyze_slots([Slot.literal(0, text)])


def _plan_or_none(plan):
    return None if isinstance(plan, NoRewriteNeeded) else plan


def check_slots(
    slots: Sequence[Slot],
    location: Optional[Location] = None,
) -> Optional[Diagnostic]:
    """Analyze slots and attach the rewrite plan to the diagnostic."""
    verdict = analyze_slots(slots)
    violation = verdict.violation
    if violation is None:
        return None

    plan = plan_rewrite(slots, violation)
    slot_index = None if isinstance(violation, SplitModifier) else violation.slot_index
    logger.debug(f"{violation.message_id} at {location} (slot {slot_index})")

    return Diagnostic(
        message_id=violation.message_id,
        message=violation_message(violation),
        location=location,
        slot_index=slot_index,
        violation=violation,
        plan=_plan_or_none(plan),
    )


def _check_wrapped(
    text: str,
    message_id: str,
    wrapper_name: str,
    location: Optional[Location] = None,
    path: VariantPath = (),
) -> Optional[Diagnostic]:
    verdict = analyze_text(text)
    if verdict.ok:
        return None

    plan = plan_wrap(text, wrapper_name)
    if path:
        logger.debug(f"{message_id} at variant '{format_path(path)}'")

    return Diagnostic(
        message_id=message_id,
        message=format_message(message_id, function=wrapper_name),
        location=location,
        path=path,
        violation=verdict.violation,
        plan=_plan_or_none(plan),
    )


def check_leaf(text: str, options: GroupingOptions = DEFAULT_OPTIONS) -> Optional[Diagnostic]:
    """
    Check one unstructured class string, e.g. an attribute value.

    Returns:
        A 'complex_attribute' diagnostic with a wrap plan, or None.
    """
    return _check_wrapped(text, 'complex_attribute', options.wrapper_name)


def _check_base(
    value: Any,
    location: Location,
    options: GroupingOptions,
    literal_text: LiteralText,
) -> Optional[Diagnostic]:
    text = literal_text(value)
    if text is not None:
        verdict = analyze_text(text)
        if verdict.ok:
            return None
        plan = plan_wrap(text, options.wrapper_name)
        return Diagnostic(
            message_id=verdict.violation.message_id,
            message=violation_message(verdict.violation),
            location=location,
            slot_index=0,
            violation=verdict.violation,
            plan=_plan_or_none(plan),
        )

    if isinstance(value, (list, tuple)):
        return check_slots(build_slots(value, literal_text), location)

    # Opaque base, nothing to check
    return None


def check_variants(
    tree: Any,
    options: GroupingOptions = DEFAULT_OPTIONS,
    literal_text: LiteralText = default_literal_text,
    location: Optional[Location] = None,
) -> list[Diagnostic]:
    """
    Check every leaf of a variant tree on its own.

    Returns:
        One 'complex_variant_value' diagnostic per violating leaf, in
        source order.
    """
    diagnostics = []
    for path, text in flatten_variants(tree, options.max_variant_depth, literal_text).items():
        diagnostic = _check_wrapped(
            text,
            'complex_variant_value',
            options.wrapper_name,
            location=location,
            path=path,
        )
        if diagnostic:
            diagnostics.append(diagnostic)
    return diagnostics


def rewrite_variants(tree: Any, diagnostics: Sequence[Diagnostic]) -> Any:
    """
    Write the wrap plans of variant diagnostics back into a copy of the tree.

    Fixed leaves hold their WrapPlan, which is not literal text, so checking
    the result again reports nothing for them.
    """
    updates = {
        d.path: d.plan
        for d in diagnostics
        if d.path and isinstance(d.plan, WrapPlan)
    }
    if not updates:
        return tree
    return assign_variants(tree, updates)


def check_call(
    arguments: Sequence[Any],
    options: GroupingOptions = DEFAULT_OPTIONS,
    literal_text: LiteralText = default_literal_text,
) -> CallReport:
    """
    Check the argument list of one call.

    Args:
        arguments: Argument values. Mappings are object-like, lists and
            tuples are arrays, and ``literal_text`` decides which of the
            remaining values are literal class strings.
        options: Field names, wrapper name and depth cap.
        literal_text: Returns the literal text of a value, or None.

    Returns:
        CallReport with the recognized shape and its diagnostics.
    """
    shape = recognize_shape(arguments, options)

    if shape.is_flat:
        diagnostic = check_slots(build_slots(arguments, literal_text))
        return CallReport(shape=shape, diagnostics=(diagnostic,) if diagnostic else ())

    diagnostics = []
    base = resolve_location(arguments, shape.base_location)
    base_diagnostic = _check_base(base, shape.base_location, options, literal_text)
    if base_diagnostic:
        diagnostics.append(base_diagnostic)

    variants = resolve_location(arguments, shape.variants_location)
    diagnostics.extend(check_variants(
        variants,
        options,
        literal_text,
        location=shape.variants_location,
    ))

    return CallReport(shape=shape, diagnostics=tuple(diagnostics))
