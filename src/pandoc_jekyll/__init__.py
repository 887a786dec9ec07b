"""Pandoc JSON filter promoting org directives to metadata and rendering galleries."""

from .core import FilterConfig, GalleryRenderError, StructuralViolation, run_filter
from .version import __version__

__all__ = ["FilterConfig", "GalleryRenderError", "StructuralViolation", "__version__", "run_filter"]
