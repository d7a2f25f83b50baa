# src/lawgens/core/__init__.py
"""Core infrastructure: settings loading and structured logging."""

from lawgens.core.config import GeneratorSettings, get_settings, load_settings, reset_settings
from lawgens.core.logging import configure_logging, get_logger

__all__ = [
    "GeneratorSettings",
    "configure_logging",
    "get_logger",
    "get_settings",
    "load_settings",
    "reset_settings",
]
