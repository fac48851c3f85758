"""
Rewrite Planner

Turns a violating slot sequence into its canonical form without adding,
dropping or duplicating a class:

    cn("hover:bg-red", value, "bg-blue hover:text-white")
      -> cn("bg-blue", "hover:bg-red hover:text-white", value)

All literal slots are replaced by one literal per canonical group, placed
where the first literal slot was. Opaque slots keep their relative order
and their original values.

A single text leaf (an attribute value, a variant value) cannot be split
into several slots in place, so it is wrapped instead:

    "px-2 hover:bg-blue" -> cn("px-2", "hover:bg-blue")
"""
import logging
from collections import Counter
from dataclasses import replace
from typing import Optional, Sequence

from classgroups.models import (
    NoRewriteNeeded,
    RewriteInvariantError,
    RewritePlan,
    Slot,
    SlotEdit,
    WrapPlan,
)
from classgroups.services.classifier import has_multiple_groups, mixes_base_and_modifiers
from classgroups.services.sorter import canonicalize
from classgroups.services.token_parser import token_strings

logger = logging.getLogger(__name__)


def literal_tokens(texts: Sequence[Optional[str]]) -> list[str]:
    """All class names of a list of literal strings, in order."""
    tokens = []
    for text in texts:
        if text:
            tokens.extend(token_strings(text))
    return tokens


def verify_non_destructive(before: Sequence[Optional[str]], after: Sequence[Optional[str]]) -> bool:
    """
    Check that two lists of class strings hold the same multiset of classes.

    Args:
        before: Literal strings before rewriting.
        after: Literal strings after rewriting.

    Returns:
        True if no class was added, dropped or duplicated.
    """
    return Counter(literal_tokens(before)) == Counter(literal_tokens(after))


def quote_literal(text: str) -> str:
    """Double-quoted literal with backslashes and quotes escaped."""
    escaped = text.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'


def _same_slots(a: Sequence[Slot], b: Sequence[Slot]) -> bool:
    if len(a) != len(b):
        return False
    for left, right in zip(a, b):
        if left.kind != right.kind:
            return False
        if left.is_literal and left.content != right.content:
            return False
        if not left.is_literal and left.value is not right.value:
            return False
    return True


def plan_rewrite(slots: Sequence[Slot], violation) -> RewritePlan | NoRewriteNeeded:
    """
    Plan the canonical regrouping of a slot sequence.

    Args:
        slots: The slots in call order.
        violation: The violation reported for these slots, or None.

    Returns:
        RewritePlan with one edit spanning the first through the last
        literal slot, or NoRewriteNeeded when nothing would change.

    Raises:
        RewriteInvariantError: if the plan would lose or invent a class.
    """
    if violation is None:
        return NoRewriteNeeded('no violation')

    literal_positions = [i for i, slot in enumerate(slots) if slot.is_literal]
    if not literal_positions:
        return NoRewriteNeeded('no literal slots')

    before = [slots[i].content for i in literal_positions]
    groups = canonicalize(literal_tokens(before))
    if not groups:
        return NoRewriteNeeded('no classes in literal slots')

    first, last = literal_positions[0], literal_positions[-1]
    new_literals = [Slot.literal(0, group.to_text()) for group in groups]
    # Opaque slots between the literals follow the regrouped content
    carried = [slots[i] for i in range(first, last + 1) if not slots[i].is_literal]

    sequence = list(slots[:first]) + new_literals + carried + list(slots[last + 1:])
    result = tuple(replace(slot, index=position) for position, slot in enumerate(sequence))

    if _same_slots(slots, result):
        return NoRewriteNeeded('already canonical')

    after = [slot.content for slot in result if slot.is_literal]
    if not verify_non_destructive(before, after):
        raise RewriteInvariantError(f"Rewrite changed the classes: {before!r} -> {after!r}")

    replacement = result[first:first + len(new_literals) + len(carried)]
    edit = SlotEdit(start=first, end=last + 1, replacement=replacement)
    logger.debug(f"Planned rewrite of slots {first}..{last}: {len(groups)} group(s)")

    return RewritePlan(edits=(edit,), slots=result, groups=tuple(groups))


def apply_plan(slots: Sequence[Slot], plan: RewritePlan) -> list[Slot]:
    """
    Apply the edits of a plan to the slots it was built for.

    Raises:
        RewriteInvariantError: if an edit range falls outside the slots or
            edits overlap.
    """
    result = list(slots)
    limit = len(slots)
    for edit in sorted(plan.edits, key=lambda e: e.start, reverse=True):
        if not 0 <= edit.start <= edit.end <= limit:
            raise RewriteInvariantError(
                f"Edit {edit.start}..{edit.end} outside of {len(slots)} slot(s)"
            )
        result[edit.start:edit.end] = edit.replacement
        limit = edit.start
    return [replace(slot, index=position) for position, slot in enumerate(result)]


def needs_wrapping(text: str) -> bool:
    """True if one text leaf mixes base and modifiers or several modifiers."""
    return mixes_base_and_modifiers(text) or has_multiple_groups(text)


def plan_wrap(text: str, wrapper_name: str) -> WrapPlan | NoRewriteNeeded:
    """
    Plan the wrap form for a single text leaf.

    Args:
        text: The class string of the leaf.
        wrapper_name: Function name of the composite expression.

    Returns:
        WrapPlan with one quoted argument per canonical group, or
        NoRewriteNeeded if the leaf is fine as it is.
    """
    if not text or not text.strip():
        return NoRewriteNeeded('empty class string')

    if not needs_wrapping(text):
        return NoRewriteNeeded('single modifier group')

    groups = canonicalize(text)
    arguments = tuple(quote_literal(group.to_text()) for group in groups)

    if not verify_non_destructive([text], [group.to_text() for group in groups]):
        raise RewriteInvariantError(f"Wrapping changed the classes of {text!r}")

    return WrapPlan(wrapper_name=wrapper_name, arguments=arguments, groups=tuple(groups))
