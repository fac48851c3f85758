"""Modifier priority table.

Static ranking data for modifier groups. Everything here is built once at
import time and never mutated afterwards.
"""
import re
from enum import IntEnum


class ModifierTier(IntEnum):
    """Coarse priority buckets (lower value sorts first)."""
    BASE = 0
    PSEUDO_CLASS = 1
    RESPONSIVE = 2
    CHAINED = 3
    DARK = 4
    ARIA_DATA = 5
    ARBITRARY = 6
    UNKNOWN = 7


SEPARATOR = ':'

RESPONSIVE_BREAKPOINTS = (
    'sm',
    'md',
    'lg',
    'xl',
    '2xl',
)

# Order matters: focus comes before hover
PSEUDO_CLASS_VARIANTS = (
    'focus',
    'focus-within',
    'focus-visible',
    'hover',
    'active',
    'visited',
    'target',
    'disabled',
    'enabled',
    'checked',
    'indeterminate',
    'default',
    'required',
    'optional',
    'placeholder-shown',
    'autofill',
    'read-only',
    'read-write',
    'empty',
    'only',
    'first',
    'last',
    'odd',
    'even',
)

GROUP_PEER_VARIANTS = ('group', 'peer')
HAS_VARIANTS = ('has',)
SUPPORTS_VARIANTS = ('supports',)

ARIA_VARIANTS = (
    'aria-checked',
    'aria-disabled',
    'aria-expanded',
    'aria-hidden',
    'aria-invalid',
    'aria-pressed',
    'aria-readonly',
    'aria-required',
    'aria-selected',
)

DATA_BUCKET = 'data-'

KNOWN_VARIANT_ORDER = (
    # base classes (no modifier)
    '',
    *PSEUDO_CLASS_VARIANTS,
    *GROUP_PEER_VARIANTS,
    *HAS_VARIANTS,
    *SUPPORTS_VARIANTS,
    *RESPONSIVE_BREAKPOINTS,
    'dark',
    *ARIA_VARIANTS,
    DATA_BUCKET,
)

KNOWN_VARIANT_RANK = {name: i for i, name in enumerate(KNOWN_VARIANT_ORDER)}

# Offsets keep unknown names after every known one
CHAINED_RANK_OFFSET = 1000
UNKNOWN_RANK_OFFSET = 10000


def _alternation(names):
    return '|'.join(re.escape(name) for name in names)


MODIFIER_PATTERNS = {
    # [&_svg]: -- may contain the separator itself
    'arbitrary': re.compile(r'^\[.+\]:'),
    'aria': re.compile(r'^aria-[a-z-]+:'),
    'data': re.compile(r'^data-[a-z-]+:'),
    'dark': re.compile(r'^dark:'),
    'responsive': re.compile(rf'^({_alternation(RESPONSIVE_BREAKPOINTS)}):'),
    'pseudo_class': re.compile(rf'^({_alternation(PSEUDO_CLASS_VARIANTS)}):'),
    'group_peer': re.compile(rf'^({_alternation(GROUP_PEER_VARIANTS)})(-[a-z-]+)?:'),
    'has': re.compile(r'^has-([a-z-]+)?:'),
    'supports': re.compile(r'^supports-([a-z-]+)?:'),
}

# Relational prefixes folded into the pseudo-class tier
RELATIONAL_PATTERN_KEYS = ('group_peer', 'has', 'supports')
