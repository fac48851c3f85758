"""
Canonical ordering of modifier groups.

Groups sort by tier, then by rank within the tier, then by the modifier
text itself. The last step makes the order total, so the output never
depends on input order.
"""
from functools import cmp_to_key
from typing import Optional

from classgroups.models import ModifierGroup
from classgroups.services.classifier import group_by_modifier
from classgroups.services.priority import rank_within_tier, tier


def modifier_sort_key(modifier: Optional[str]) -> tuple[int, int, str]:
    """Sort key equivalent to compare_modifiers."""
    return (int(tier(modifier)), rank_within_tier(modifier), modifier or '')


def compare_modifiers(a: Optional[str], b: Optional[str]) -> int:
    """
    Compare two modifiers.

    Returns:
        -1, 0 or 1.
    """
    key_a = modifier_sort_key(a)
    key_b = modifier_sort_key(b)
    if key_a < key_b:
        return -1
    if key_a > key_b:
        return 1
    return 0


def sort_groups(groups: list[ModifierGroup]) -> list[ModifierGroup]:
    """Return groups sorted by compare_modifiers."""
    return sorted(groups, key=cmp_to_key(lambda x, y: compare_modifiers(x.modifier, y.modifier)))


def sort_tokens_in_group(tokens: list[str]) -> list[str]:
    """Lexicographic order of the full class names."""
    return sorted(tokens)


def canonicalize(tokens) -> list[ModifierGroup]:
    """
    Turn an unordered bag of tokens into canonical modifier groups.

    Args:
        tokens: A class string, or an iterable of Token / class names.

    Returns:
        Sorted ModifierGroup list; empty input gives [].

    Example:
        >>> [g.modifier for g in canonicalize("md:p-4 hover:bg-blue bg-red focus:ring-2")]
        [None, 'focus:', 'hover:', 'md:']
    """
    groups = [
        ModifierGroup(
            modifier=modifier,
            tokens=tuple(sort_tokens_in_group([t.full for t in members])),
        )
        for modifier, members in group_by_modifier(tokens).items()
    ]
    return sort_groups(groups)


def flatten_groups(groups: list[ModifierGroup]) -> list[str]:
    """All class names of the groups, in group order."""
    return [token for group in groups for token in group.tokens]
