"""Synthesis of MetaInlines values for the document ``meta`` object."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .errors import StructuralViolation
from .tree import is_object, meta_inlines, space_node, str_node

LOG = logging.getLogger("pandoc_jekyll")


def split_value(value: str) -> List[str]:
    # Literal single-space split; trailing empty tokens are dropped.
    tokens = value.split(" ")
    while tokens and not tokens[-1]:
        tokens.pop()
    return tokens


def build_meta_inlines(value: str) -> Dict[str, Any]:
    inlines: List[Dict[str, Any]] = []
    for token in split_value(value):
        if inlines:
            inlines.append(space_node())
        inlines.append(str_node(token))
    return meta_inlines(inlines)


def inject(meta: Any, key: Optional[str], value: Optional[str]) -> bool:
    """Insert ``value`` under ``key`` in ``meta`` as a MetaInlines node.

    Existing keys are never overwritten. Returns ``True`` when a node was
    inserted. Raises ``StructuralViolation`` for an empty key or when ``meta``
    is not an object.
    """
    if not key:
        LOG.error("Name for new meta key is empty")
        raise StructuralViolation("Name for new meta key is empty")
    if not value:
        LOG.info("No value found for %s meta key - skipping it", key)
        return False
    if meta is None:
        LOG.error('There is no "meta" node in AST')
        raise StructuralViolation('No "meta" node')
    if not is_object(meta):
        LOG.error('"meta" node type is not object')
        raise StructuralViolation('"meta" node type is not object')

    if key in meta:
        LOG.info("Meta key %s already set by the document - keeping it", key)
        return False
    meta[key] = build_meta_inlines(value)
    return True
