from __future__ import annotations


class JCardError(Exception):
    """Base class for everything this package raises."""

    def __init__(self, message: str):
        super().__init__(f"jCard error: {message}")
        self.message = message


class DecodeError(JCardError):
    """The input is not a structurally valid jCard. No card is produced."""


class ValidationError(JCardError):
    """A property or card violates a rule of the vCard 4.0 standard."""
