"""Configuration accepted by the grouping services."""
import logging
import os
from dataclasses import dataclass, fields, replace

logger = logging.getLogger(__name__)

DEFAULT_WRAPPER_NAME = os.environ.get('CLASSGROUPS_WRAPPER', 'cn')
DEFAULT_BASE_FIELD = os.environ.get('CLASSGROUPS_BASE_FIELD', 'base')
DEFAULT_VARIANTS_FIELD = os.environ.get('CLASSGROUPS_VARIANTS_FIELD', 'variants')


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, '')
    try:
        value = int(raw)
    except ValueError:
        if raw:
            logger.warning(f"Ignoring {name}={raw!r}: not an integer")
        return default
    return value if value > 0 else default


DEFAULT_MAX_VARIANT_DEPTH = _env_int('CLASSGROUPS_MAX_VARIANT_DEPTH', 32)


class OptionsError(ValueError):
    """Raised when an options mapping contains unknown keys."""
    pass


@dataclass(frozen=True)
class GroupingOptions:
    """Parameters of the shape recognizer and the rewrite planner.

    - wrapper_name: function used by the wrap form, e.g. cn("a", "hover:b")
    - base_field / variants_field: structural field names of variant calls
    - max_variant_depth: nesting cap for variant tree walks
    """
    wrapper_name: str = DEFAULT_WRAPPER_NAME
    base_field: str = DEFAULT_BASE_FIELD
    variants_field: str = DEFAULT_VARIANTS_FIELD
    max_variant_depth: int = DEFAULT_MAX_VARIANT_DEPTH

    @classmethod
    def from_mapping(cls, raw: dict | None) -> 'GroupingOptions':
        """
        Build options from a user mapping, falling back to defaults.

        Blank or non-string names and non-positive depths are replaced by
        the default value. Unknown keys raise OptionsError.
        """
        options = cls()
        if not raw:
            return options

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise OptionsError(f"Unknown option(s): {', '.join(unknown)}")

        changes = {}
        for name in ('wrapper_name', 'base_field', 'variants_field'):
            if name not in raw:
                continue
            value = raw[name]
            if isinstance(value, str) and value.strip():
                changes[name] = value.strip()
            else:
                logger.warning(f"Invalid {name} {value!r}, using {getattr(options, name)!r}")

        if 'max_variant_depth' in raw:
            depth = raw['max_variant_depth']
            if isinstance(depth, int) and not isinstance(depth, bool) and depth > 0:
                changes['max_variant_depth'] = depth
            else:
                logger.warning(
                    f"Invalid max_variant_depth {depth!r}, using {options.max_variant_depth}"
                )

        return replace(options, **changes)


DEFAULT_OPTIONS = GroupingOptions()
