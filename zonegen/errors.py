from __future__ import annotations


class GenerationError(Exception):
    """Base error for all generation-related failures."""


class LoadError(GenerationError):
    """Errors raised while loading zone records from JSON input files."""


class ValidationError(GenerationError):
    """Errors raised while validating the loaded zone index."""
