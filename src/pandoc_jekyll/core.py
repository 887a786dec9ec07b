"""Core pipeline for pandoc-jekyll."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import IO, Any, Dict, Optional, Tuple

from .directives import DIRECTIVES, Directive, list_all, pop_directive
from .errors import GalleryRenderError, StructuralViolation
from .gallery import GALLERY_FORMAT, transform_gallery_blocks
from .metadata import inject

__all__ = [
    "FilterConfig",
    "GalleryRenderError",
    "StructuralViolation",
    "dump_document",
    "load_document",
    "run_filter",
    "setup_logging",
    "validate_document",
]

LOG = logging.getLogger("pandoc_jekyll")

EXIT_INVALID_ARGS = 6
EXIT_INVALID_INPUT = 7
EXIT_STRUCTURE = 8
EXIT_OUTPUT = 9

DEBUG_ENV = "PANDOC_JEKYLL_DEBUG"

PANDOC_API_VERSION = "pandoc-api-version"
META = "meta"
BLOCKS = "blocks"
REQUIRED_FIELDS = (PANDOC_API_VERSION, META, BLOCKS)


@dataclass
class FilterConfig:
    verbose: bool = False
    debug: bool = False
    enable_gallery: bool = True
    directives: Tuple[Directive, ...] = DIRECTIVES
    indent: Optional[int] = None


def _env_flag_enabled(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() not in {"", "0", "false", "off", "no"}


def is_debug_env() -> bool:
    return _env_flag_enabled(os.environ.get(DEBUG_ENV))


def _resolve_log_level(verbose: bool, debug: bool) -> int:
    return logging.DEBUG if debug else (logging.INFO if verbose else logging.WARNING)


def _configure_logger(level: int) -> None:
    # stdout carries the document, so every log line goes to stderr.
    LOG.setLevel(level)
    LOG.propagate = False
    if not LOG.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        handler.setLevel(level)
        LOG.addHandler(handler)
    else:
        for handler in LOG.handlers:
            handler.setLevel(level)
            if handler.formatter is None:
                handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))


def setup_logging(verbose: bool, debug: bool) -> None:
    _configure_logger(_resolve_log_level(verbose, debug))


def validate_document(document: Any) -> None:
    if not isinstance(document, dict) or any(document.get(field) is None for field in REQUIRED_FIELDS):
        LOG.error("There is not a pandoc-generated AST")
        raise StructuralViolation("There is not a pandoc-generated AST")


def load_document(stream: IO[str]) -> Any:
    try:
        return json.load(stream)
    except (ValueError, RecursionError) as exc:
        raise ValueError(f"Unable to parse JSON AST: {exc}") from exc


def dump_document(document: Dict[str, Any], stream: IO[str], indent: Optional[int] = None) -> None:
    separators = None if indent is not None else (",", ":")
    json.dump(document, stream, ensure_ascii=False, indent=indent, separators=separators)
    stream.write("\n")


def run_filter(document: Any, config: Optional[FilterConfig] = None) -> Dict[str, Any]:
    """Promote org directives to metadata and render gallery blocks.

    ``document`` is mutated in place; the returned mapping holds its three
    top-level fields in Pandoc order. Raises ``StructuralViolation`` when the
    document is not a Pandoc AST.
    """
    config = config or FilterConfig()
    validate_document(document)

    for directive in config.directives:
        value = pop_directive(document, directive)
        if inject(document.get(META), directive.key, value):
            LOG.info("Meta key %s set from %s", directive.key, directive.prefix.strip())

    if config.enable_gallery:
        gallery_blocks = list_all(document, GALLERY_FORMAT)
        if gallery_blocks:
            transformed = transform_gallery_blocks(gallery_blocks)
            LOG.info("Transformed %d of %d gallery block(s)", transformed, len(gallery_blocks))
    elif config.verbose:
        LOG.info("Gallery transformation disabled via --disable-gallery flag.")

    return {
        PANDOC_API_VERSION: document[PANDOC_API_VERSION],
        META: document[META],
        BLOCKS: document[BLOCKS],
    }
