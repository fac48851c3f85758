"""
Modifier priority.

Maps a modifier to its tier and to its rank inside that tier, using the
static tables in classgroups.constants.
"""
from typing import Optional

from classgroups.constants import (
    CHAINED_RANK_OFFSET,
    KNOWN_VARIANT_RANK,
    MODIFIER_PATTERNS,
    RELATIONAL_PATTERN_KEYS,
    SEPARATOR,
    UNKNOWN_RANK_OFFSET,
    ModifierTier,
)
from classgroups.services.token_parser import modifier_segments


def _matches(key: str, text: str) -> bool:
    return MODIFIER_PATTERNS[key].match(text) is not None


def is_chained(modifier: str) -> bool:
    """
    Check for a responsive + pseudo-class chain such as "md:hover:".

    Needs more than one separator, one segment naming a breakpoint and one
    naming a pseudo-class. Any further segments are not inspected.
    """
    if modifier.count(SEPARATOR) <= 1:
        return False

    has_responsive = False
    has_pseudo_class = False
    for part in modifier_segments(modifier):
        candidate = part + SEPARATOR
        if _matches('responsive', candidate):
            has_responsive = True
        if _matches('pseudo_class', candidate):
            has_pseudo_class = True

    return has_responsive and has_pseudo_class


def tier(modifier: Optional[str]) -> ModifierTier:
    """
    Get the priority tier of a modifier.

    Args:
        modifier: e.g. "hover:", "md:hover:", or None for base classes.

    Returns:
        The ModifierTier; patterns are tested in a fixed precedence, the
        first match wins.
    """
    if modifier is None:
        return ModifierTier.BASE

    # Arbitrary variants first, they can contain the separator
    if _matches('arbitrary', modifier):
        return ModifierTier.ARBITRARY

    if is_chained(modifier):
        return ModifierTier.CHAINED

    if _matches('dark', modifier):
        return ModifierTier.DARK

    if _matches('aria', modifier) or _matches('data', modifier):
        return ModifierTier.ARIA_DATA

    if _matches('responsive', modifier):
        return ModifierTier.RESPONSIVE

    if any(_matches(key, modifier) for key in RELATIONAL_PATTERN_KEYS):
        return ModifierTier.PSEUDO_CLASS

    if _matches('pseudo_class', modifier):
        return ModifierTier.PSEUDO_CLASS

    return ModifierTier.UNKNOWN


def rank_within_tier(modifier: Optional[str]) -> int:
    """
    Sort order of a modifier inside its tier (lower sorts first).

    Known names use their position in the canonical variant order; the
    lookup is exact, so "data-open" is not the generic "data-" entry. Chains
    starting with a known name rank after all known names, and everything
    else ranks after those by its first character.
    """
    if not modifier:
        return 0

    name = modifier[:-1] if modifier.endswith(SEPARATOR) else modifier
    if not name:
        return 0

    rank = KNOWN_VARIANT_RANK.get(name)
    if rank is not None:
        return rank

    segments = modifier_segments(modifier)
    if segments:
        first_rank = KNOWN_VARIANT_RANK.get(segments[0])
        if first_rank is not None:
            return CHAINED_RANK_OFFSET + first_rank

    return UNKNOWN_RANK_OFFSET + ord(name[0])
