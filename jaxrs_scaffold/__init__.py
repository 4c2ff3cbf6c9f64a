"""Normalization pass and scaffold renderer for JAX-RS server stubs."""

__version__ = "0.1.0"
