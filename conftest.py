"""
Pytest configuration and shared fixtures for testing.
"""
import pytest

from classgroups.models import Slot


@pytest.fixture
def mixed_classes():
    """Unordered class names across four modifiers."""
    return ["md:p-4", "hover:bg-blue", "bg-red", "hover:text-white", "focus:ring-2"]


@pytest.fixture
def sample_modifiers():
    """Modifiers covering every tier."""
    return [
        None,
        'hover:',
        'focus:',
        'group-hover:',
        'has-checked:',
        'supports-grid:',
        'md:',
        'sm:',
        '2xl:',
        'md:hover:',
        'lg:focus:',
        'dark:',
        'dark:hover:',
        'aria-checked:',
        'aria-busy:',
        'data-open:',
        '[&_svg]:',
        '[&:hover]:',
        'print:',
        'foo:bar:',
        'motion-safe:',
    ]


@pytest.fixture
def opaque_value():
    """Stand-in for a non-literal argument such as a variable."""
    class ClassNameVariable:
        def __repr__(self):
            return 'className'
    return ClassNameVariable()


@pytest.fixture
def mixed_slots(opaque_value):
    """Literal slots with an opaque slot in between."""
    return [
        Slot.literal(0, 'hover:bg-red'),
        Slot.opaque(1, opaque_value),
        Slot.literal(2, 'bg-blue hover:text-white'),
    ]


@pytest.fixture
def variant_tree():
    """Two-level variants with one clean and two violating leaves."""
    return {
        'size': {
            'sm': 'text-sm',
            'md': 'px-2 hover:bg-blue focus:ring-2',
        },
        'intent': {
            'primary': 'bg-blue',
            'danger': 'hover:bg-red focus:ring-red',
        },
    }
