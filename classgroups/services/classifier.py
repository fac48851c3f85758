"""Grouping of tokens by modifier and the violation predicates."""
from typing import Iterable, Optional

from classgroups.models import ModifierGroup, Token
from classgroups.services.token_parser import parse_token, parse_tokens


def _as_tokens(tokens: Iterable[Token | str] | str) -> list[Token]:
    """Accept a class string, Token objects or plain class names."""
    if isinstance(tokens, str):
        return parse_tokens(tokens)
    return [t if isinstance(t, Token) else parse_token(t) for t in tokens]


def group_by_modifier(tokens) -> dict[Optional[str], list[Token]]:
    """
    Partition tokens by modifier.

    Keys keep first-seen order and each group keeps the relative order of
    its tokens.

    Args:
        tokens: A class string, or an iterable of Token / class names.

    Returns:
        dict mapping modifier (None for base classes) to its tokens.
    """
    groups: dict[Optional[str], list[Token]] = {}
    for token in _as_tokens(tokens):
        groups.setdefault(token.modifier, []).append(token)
    return groups


def create_modifier_groups(tokens) -> list[ModifierGroup]:
    """Unsorted ModifierGroup list in first-seen order."""
    return [
        ModifierGroup(modifier=modifier, tokens=tuple(t.full for t in members))
        for modifier, members in group_by_modifier(tokens).items()
    ]


def has_multiple_groups(tokens) -> bool:
    """True if the tokens carry more than one distinct modifier key."""
    return len(group_by_modifier(tokens)) > 1


def mixes_base_and_modifiers(tokens) -> bool:
    """True if base classes sit next to at least one modifier class."""
    groups = group_by_modifier(tokens)
    has_base = None in groups
    has_modifiers = any(modifier is not None for modifier in groups)
    return has_base and has_modifiers


def first_modifier(tokens) -> Optional[str]:
    """First non-null modifier, in encounter order."""
    for modifier in group_by_modifier(tokens):
        if modifier is not None:
            return modifier
    return None


def first_two_distinct_modifiers(tokens) -> Optional[tuple[str, str]]:
    """First two non-null modifiers of one slot, or None if fewer exist."""
    modifiers = [m for m in group_by_modifier(tokens) if m is not None][:2]
    if len(modifiers) < 2:
        return None
    return modifiers[0], modifiers[1]


# =============================================================================
# Cross-slot detection
# =============================================================================

def modifier_sources(slot_strings: list[str]) -> dict[Optional[str], list[int]]:
    """
    Map each modifier to the positions of the strings it occurs in.

    Computed in one pass and shared by the split predicates. Keys keep
    first-seen order; positions are ascending and unique.
    """
    sources: dict[Optional[str], list[int]] = {}
    for position, text in enumerate(slot_strings):
        for modifier in group_by_modifier(text):
            sources.setdefault(modifier, []).append(position)
    return sources


def split_modifiers(slot_strings: list[str]) -> dict[str, list[int]]:
    """Non-null modifiers found in two or more strings, with their positions."""
    return {
        modifier: positions
        for modifier, positions in modifier_sources(slot_strings).items()
        if modifier is not None and len(positions) > 1
    }


def has_split_modifiers(slot_strings: list[str]) -> bool:
    """True if some modifier is scattered across more than one string."""
    return bool(split_modifiers(slot_strings))


def first_split_modifier(slot_strings: list[str]) -> Optional[str]:
    """The first modifier (in encounter order) that is split, or None."""
    for modifier in split_modifiers(slot_strings):
        return modifier
    return None
