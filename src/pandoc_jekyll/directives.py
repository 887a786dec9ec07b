"""Lookup and removal of raw blocks inside a Pandoc document tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .tree import CONTENT_KEY, get_index, get_key, is_array, is_raw_block, is_scalar_string, remove_index

LOG = logging.getLogger("pandoc_jekyll")

BLOCKS_KEY = "blocks"
ORG_FORMAT = "org"

Predicate = Callable[[Any], Optional[str]]


@dataclass(frozen=True)
class Directive:
    prefix: str
    key: str


TAGS = Directive("#+TAGS: ", "tags")
COVER = Directive("#+COVER: ", "cover")
SUMMARY = Directive("#+SUMMARY: ", "summary")
LANG = Directive("#+LANG: ", "lang")

# Extraction order is part of the output contract.
DIRECTIVES = (TAGS, COVER, SUMMARY, LANG)


def directive_by_key(key: str) -> Optional[Directive]:
    for directive in DIRECTIVES:
        if directive.key == key:
            return directive
    return None


def prefix_matcher(prefix: str) -> Predicate:
    def _match(node: Any) -> Optional[str]:
        if is_scalar_string(node) and node.startswith(prefix):
            return node[len(prefix):]
        return None

    return _match


def pop_first_match(node: Any, predicate: Optional[Predicate]) -> Optional[str]:
    """Find the first org raw block accepted by ``predicate`` and remove it.

    The search is depth-first and left-to-right from ``node``. The document
    root is unwrapped through its ``blocks`` field, RawBlock objects through
    their ``c`` payload, and ``["org", text]`` payloads through their text,
    which is finally handed to ``predicate``. The matching RawBlock is removed
    from the array that holds it and the predicate result is returned. An
    empty string is a match.
    """
    if node is None or predicate is None:
        return None

    blocks = get_key(node, BLOCKS_KEY)
    if blocks is not None:
        return pop_first_match(blocks, predicate)

    if is_array(node):
        for index, element in enumerate(node):
            if not is_raw_block(element):
                continue
            result = pop_first_match(element, predicate)
            if result is not None:
                remove_index(node, index)
                return result

    content = get_key(node, CONTENT_KEY)
    if is_array(content):
        return pop_first_match(content, predicate)

    text = get_index(node, 1)
    if get_index(node, 0) == ORG_FORMAT and is_scalar_string(text):
        return pop_first_match(text, predicate)

    return predicate(node)


def pop_directive(root: Any, directive: Directive) -> Optional[str]:
    value = pop_first_match(root, prefix_matcher(directive.prefix))
    if value is None:
        LOG.debug("No %s directive found", directive.prefix.strip())
    else:
        LOG.debug("Extracted %s directive: %r", directive.prefix.strip(), value)
    return value


def list_all(node: Any, format_tag: Optional[str]) -> List[List[Any]]:
    """Return the ``[format, payload]`` lists of top-level RawBlocks in ``format_tag``.

    The returned lists are the live payloads of the blocks, in document order,
    so callers can rewrite them in place. Nothing is removed.
    """
    if node is None or format_tag is None:
        return []

    blocks = get_key(node, BLOCKS_KEY)
    if blocks is not None:
        return list_all(blocks, format_tag)

    if not is_array(node):
        return []

    result: List[List[Any]] = []
    for element in node:
        if not is_raw_block(element):
            continue
        content = get_key(element, CONTENT_KEY)
        if is_array(content) and len(content) == 2 and content[0] == format_tag:
            result.append(content)
    return result
