"""Value objects shared by the grouping services.

All models are immutable and built fresh for every analysis call.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class RewriteInvariantError(AssertionError):
    """Raised when a rewrite plan does not fit the slots it is applied to."""
    pass


@dataclass(frozen=True)
class Token:
    """One whitespace-delimited class name split into modifier and base."""
    full: str
    modifier: Optional[str]
    base: str


@dataclass(frozen=True)
class ModifierGroup:
    """Tokens sharing one modifier (None for base classes)."""
    modifier: Optional[str]
    tokens: tuple[str, ...]

    def to_text(self) -> str:
        return ' '.join(self.tokens)


class SlotKind(str, Enum):
    LITERAL = 'literal'
    OPAQUE = 'opaque'


@dataclass(frozen=True)
class Slot:
    """A rewritable literal or an opaque value kept verbatim.

    ``value`` is the caller's original object for opaque slots, carried
    through plans untouched.
    """
    index: int
    kind: SlotKind
    content: Optional[str] = None
    value: Any = None

    @property
    def is_literal(self) -> bool:
        return self.kind == SlotKind.LITERAL

    @classmethod
    def literal(cls, index: int, content: str) -> 'Slot':
        return cls(index=index, kind=SlotKind.LITERAL, content=content, value=content)

    @classmethod
    def opaque(cls, index: int, value: Any = None) -> 'Slot':
        return cls(index=index, kind=SlotKind.OPAQUE, content=None, value=value)


# =============================================================================
# Shapes
# =============================================================================


class ShapeKind(str, Enum):
    FLAT = 'flat'
    BASE_AND_VARIANTS = 'base_and_variants'


class ShapeForm(str, Enum):
    """Where the variants of a base and variants call live."""
    EXTERNAL = 'external'  # fn(base, {variants})
    EMBEDDED = 'embedded'  # fn({base, variants})


@dataclass(frozen=True)
class Location:
    """An argument, or a named field of an object-like argument."""
    argument_index: int
    field: Optional[str] = None


@dataclass(frozen=True)
class ShapeDescriptor:
    kind: ShapeKind
    form: Optional[ShapeForm] = None
    base_location: Optional[Location] = None
    variants_location: Optional[Location] = None

    @property
    def is_flat(self) -> bool:
        return self.kind == ShapeKind.FLAT


# =============================================================================
# Violations
# =============================================================================


@dataclass(frozen=True)
class SplitModifier:
    """The same modifier appears in more than one literal slot."""
    modifier: Optional[str]
    slot_indices: tuple[int, ...] = ()
    message_id = 'split_modifier'


@dataclass(frozen=True)
class MixedBaseAndModifier:
    """One slot holds base classes next to modifier classes."""
    slot_index: int
    modifier: Optional[str]
    message_id = 'mixed_base_and_modifiers'


@dataclass(frozen=True)
class MultipleGroups:
    """One slot holds classes of two or more modifiers."""
    slot_index: int
    modifier1: Optional[str]
    modifier2: Optional[str]
    message_id = 'multiple_modifier_groups'


@dataclass(frozen=True)
class Verdict:
    violation: Optional[SplitModifier | MixedBaseAndModifier | MultipleGroups] = None

    @property
    def ok(self) -> bool:
        return self.violation is None


# =============================================================================
# Plans
# =============================================================================


@dataclass(frozen=True)
class NoRewriteNeeded:
    """Normal outcome: rewriting would not change anything."""
    reason: str = ''


@dataclass(frozen=True)
class SlotEdit:
    """Replace ``slots[start:end]`` of the original sequence."""
    start: int
    end: int
    replacement: tuple[Slot, ...]

    @property
    def texts(self) -> tuple[Optional[str], ...]:
        return tuple(slot.content for slot in self.replacement)


@dataclass(frozen=True)
class RewritePlan:
    """Slot-index based edits plus the resulting slot sequence."""
    edits: tuple[SlotEdit, ...]
    slots: tuple[Slot, ...]
    groups: tuple[ModifierGroup, ...] = ()

    @property
    def literal_texts(self) -> list[str]:
        return [slot.content for slot in self.slots if slot.is_literal]


@dataclass(frozen=True)
class WrapPlan:
    """Replace one text leaf with ``wrapper_name("...", "...")``."""
    wrapper_name: str
    arguments: tuple[str, ...]
    groups: tuple[ModifierGroup, ...] = ()

    @property
    def expression(self) -> str:
        return f"{self.wrapper_name}({', '.join(self.arguments)})"


# =============================================================================
# Reports
# =============================================================================


@dataclass(frozen=True)
class Diagnostic:
    """A reported violation with its location and optional fix."""
    message_id: str
    message: str
    location: Optional[Location] = None
    path: tuple[str, ...] = ()
    slot_index: Optional[int] = None
    violation: Any = None
    plan: Optional[RewritePlan | WrapPlan] = None


@dataclass(frozen=True)
class CallReport:
    shape: ShapeDescriptor
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.diagnostics
