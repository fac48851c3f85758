"""
Token Parser

Splits class strings into tokens and each token into (modifier, base).

The modifier is everything up to and including the *rightmost* separator,
so chained variants stay together:

    >>> parse_token("md:hover:bg-red")
    Token(full='md:hover:bg-red', modifier='md:hover:', base='bg-red')

    >>> parse_token("bg-red")
    Token(full='bg-red', modifier=None, base='bg-red')

Modifiers are further split into variant segments with a small pyparsing
grammar that keeps bracketed arbitrary segments whole:

    >>> modifier_segments("md:[&:hover]:")
    ['md', '[&:hover]']
"""
from typing import Optional
from pyparsing import (
    Combine,
    Literal,
    OneOrMore,
    Regex,
    Suppress,
    ZeroOrMore,
)

from classgroups.constants import SEPARATOR
from classgroups.models import Token


def _build_segment_parser():
    """Build the grammar for the variant segments of a modifier."""

    # [&_svg] or data-[state=open]; brackets may contain the separator
    bracketed = Regex(r'\[[^\]]*\]')
    plain = Regex(r'[^:\[]+')
    # An unclosed bracket is kept as ordinary text
    stray_bracket = Literal('[')

    segment = Combine(OneOrMore(bracketed | plain | stray_bracket))
    separator = Suppress(Literal(SEPARATOR))

    # Every character is matched by one of the alternatives, so parsing
    # never fails
    return ZeroOrMore(segment | separator)


# Build parser once at module load
_segment_parser = _build_segment_parser()


def parse_token(raw: str) -> Token:
    """
    Split a single class name at its rightmost separator.

    Args:
        raw: The class name (e.g. "hover:bg-red", "md:hover:text-white").

    Returns:
        Token with modifier None when no separator is present.
    """
    if not raw:
        return Token(full='', modifier=None, base='')

    head, sep, base = raw.rpartition(SEPARATOR)
    if not sep:
        return Token(full=raw, modifier=None, base=raw)

    return Token(full=raw, modifier=head + sep, base=base)


def parse_tokens(raw: str) -> list[Token]:
    """Split a class string on whitespace runs and parse every fragment."""
    if not raw:
        return []
    return [parse_token(fragment) for fragment in raw.split()]


def token_strings(raw: str) -> list[str]:
    """Whitespace-split fragments of a class string."""
    return [token.full for token in parse_tokens(raw)]


def extract_modifier(raw: str) -> Optional[str]:
    """Modifier of a single class name, or None for base classes."""
    return parse_token(raw).modifier


def modifier_segments(modifier: Optional[str]) -> list[str]:
    """
    Split a modifier into its variant names.

    Empty segments are dropped, so "md:hover:" gives ['md', 'hover'] and a
    None modifier gives [].
    """
    if not modifier:
        return []
    return list(_segment_parser.parse_string(modifier))
