"""Core module - configuration, logging, errors, and shared models."""

from integraum.core.config import Settings, get_settings
from integraum.core.exceptions import (
    IntegraumError,
    InvalidColumnError,
    ProfilingCancelled,
    StructuralMismatchError,
)
from integraum.core.models import Result, Table

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "IntegraumError",
    "InvalidColumnError",
    "ProfilingCancelled",
    "StructuralMismatchError",
    # Models
    "Result",
    "Table",
]
