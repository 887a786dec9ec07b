"""Accessors and builders for Pandoc JSON AST nodes.

Nodes are the plain values produced by ``json.load``: ``dict`` for objects,
``list`` for arrays and scalars for everything else. ``None`` is the absence
marker; a JSON ``null`` counts as absent.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

TYPE_KEY = "t"
CONTENT_KEY = "c"

RAW_BLOCK = "RawBlock"
META_INLINES = "MetaInlines"
STR = "Str"
SPACE = "Space"


def is_object(node: Any) -> bool:
    return isinstance(node, dict)


def is_array(node: Any) -> bool:
    return isinstance(node, list)


def is_scalar_string(node: Any) -> bool:
    return isinstance(node, str)


def get_key(node: Any, key: str) -> Any:
    if not is_object(node):
        return None
    return node.get(key)


def get_index(node: Any, index: int) -> Any:
    if not is_array(node) or index < 0 or index >= len(node):
        return None
    return node[index]


def set_index(node: Any, index: int, value: Any) -> bool:
    if not is_array(node) or index < 0 or index >= len(node):
        return False
    node[index] = value
    return True


def remove_index(node: Any, index: int) -> Any:
    if not is_array(node) or index < 0 or index >= len(node):
        return None
    return node.pop(index)


def node_type(node: Any) -> Optional[str]:
    """Return the ``t`` discriminator of an object node, if it is a string."""
    value = get_key(node, TYPE_KEY)
    return value if is_scalar_string(value) else None


def is_raw_block(node: Any) -> bool:
    return node_type(node) == RAW_BLOCK


def str_node(text: str) -> Dict[str, Any]:
    return {TYPE_KEY: STR, CONTENT_KEY: text}


def space_node() -> Dict[str, Any]:
    return {TYPE_KEY: SPACE}


def meta_inlines(inlines: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {TYPE_KEY: META_INLINES, CONTENT_KEY: inlines}
