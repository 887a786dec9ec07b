"""Exceptions raised by the pandoc-jekyll filter."""


class StructuralViolation(RuntimeError):
    """The input is not a usable Pandoc AST; the run must be aborted."""


class GalleryRenderError(ValueError):
    """A gallery payload could not be turned into markup."""
