"""Errors raised by the generator collaborators.

The preprocessing and postprocessing stages never raise; missing data
degrades to neutral defaults there.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for generator failures."""


class SpecLoadError(ScaffoldError):
    """The API document could not be read or parsed."""


class UnknownFlavorError(ScaffoldError):
    """No server flavor is registered under the requested name."""


class TemplateRenderError(ScaffoldError):
    """A template failed to load or render."""
