"""Exceptions for contract violations.

Expected failures at the outer surfaces (missing files, unreadable CSV) are
reported through ``Result``. The exceptions below signal programming errors in
table construction or candidate generation and are never turned into results.
"""


class IntegraumError(Exception):
    """Base class for all integraum errors."""


class InvalidColumnError(IntegraumError, IndexError):
    """A column reference lies outside the table's attribute range."""

    def __init__(self, index: int, num_attributes: int):
        self.index = index
        self.num_attributes = num_attributes
        super().__init__(
            f"Column index {index} out of range for table with {num_attributes} attributes"
        )


class StructuralMismatchError(IntegraumError, ValueError):
    """Table or input shapes are inconsistent."""


class ProfilingCancelled(IntegraumError):
    """The cancellation hook stopped a profiling run between lattice levels."""

    def __init__(self, level: int):
        self.level = level
        super().__init__(f"Profiling cancelled before level {level}")
