# errors.py
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a machine, wheel or key-sheet is built from bad settings."""
