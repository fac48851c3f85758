"""
Variant tree walkers.

A variant tree maps names to class strings or to further trees:

    {"size": {"sm": "px-2 text-sm", "lg": "px-4 hover:bg-blue"}}

flatten_variants() turns it into {path: text} and assign_variants() writes
values back by the same paths. Both walk with an explicit stack and stop
at a configurable depth.
"""
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from classgroups.models import RewriteInvariantError
from classgroups.options import DEFAULT_MAX_VARIANT_DEPTH

logger = logging.getLogger(__name__)

VariantPath = tuple[str, ...]


def default_literal_text(value: Any) -> Optional[str]:
    """Literal text of a value: strings are literal, nothing else is."""
    return value if isinstance(value, str) else None


def format_path(path: VariantPath) -> str:
    """Dotted form of a path, e.g. ('size', 'sm') -> 'size.sm'."""
    return '.'.join(path)


def flatten_variants(
    tree: Any,
    max_depth: int = DEFAULT_MAX_VARIANT_DEPTH,
    literal_text: Callable[[Any], Optional[str]] = default_literal_text,
) -> dict[VariantPath, str]:
    """
    Collect every literal leaf of a variant tree.

    Args:
        tree: The variants mapping. Anything else yields {}.
        max_depth: Subtrees nested deeper than this are skipped.
        literal_text: Returns a leaf's text, or None for non-literal values.

    Returns:
        dict of path -> class string, in depth-first source order.
    """
    leaves: dict[VariantPath, str] = {}
    if not isinstance(tree, Mapping):
        return leaves

    stack = _children((), tree)
    while stack:
        path, value = stack.pop()
        if isinstance(value, Mapping):
            if len(path) >= max_depth:
                logger.warning(
                    f"Skipping variants below '{format_path(path)}': "
                    f"deeper than {max_depth} levels"
                )
                continue
            stack.extend(_children(path, value))
            continue
        text = literal_text(value)
        if text is not None:
            leaves[path] = text

    return leaves


def _children(path: VariantPath, node: Mapping) -> list[tuple[VariantPath, Any]]:
    """Child entries reversed, so popping visits them in source order."""
    items = [(path + (key,), value) for key, value in node.items() if isinstance(key, str)]
    items.reverse()
    return items


def get_variant(tree: Any, path: VariantPath) -> Any:
    """Value at a path, or None if the path does not exist."""
    node = tree
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            return None
        node = node[key]
    return node


def assign_variants(tree: Mapping, updates: dict[VariantPath, Any]) -> dict:
    """
    Return a copy of the tree with the given leaves replaced.

    The input tree is not modified. Paths that do not exist in the tree
    raise RewriteInvariantError.
    """
    result = _copy_tree(tree)
    for path, value in updates.items():
        if not path:
            raise RewriteInvariantError('empty variant path')
        node = result
        for key in path[:-1]:
            child = node.get(key) if isinstance(node, dict) else None
            if not isinstance(child, dict):
                raise RewriteInvariantError(f"No variant at '{format_path(path)}'")
            node = child
        if path[-1] not in node:
            raise RewriteInvariantError(f"No variant at '{format_path(path)}'")
        node[path[-1]] = value
    return result


def _copy_tree(tree: Mapping) -> dict:
    """
    Copy nested mappings into plain dicts; leaves are shared.

    Each distinct mapping is copied once, so shared subtrees stay shared
    and a mapping that contains itself becomes a cycle in the copy.
    """
    root: dict = {}
    copies: dict[int, dict] = {id(tree): root}
    stack: list[tuple[dict, Mapping]] = [(root, tree)]
    while stack:
        target, source = stack.pop()
        for key, value in source.items():
            if not isinstance(value, Mapping):
                target[key] = value
            elif id(value) in copies:
                target[key] = copies[id(value)]
            else:
                target[key] = copies[id(value)] = {}
                stack.append((target[key], value))
    return root
