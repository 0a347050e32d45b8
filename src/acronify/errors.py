"""
Error types for Acronify.

Generation raises ValidationError, the record store raises NotFoundError.
"""

from typing import Any


class AcronifyError(Exception):
    """Base class for all Acronify errors."""


class ValidationError(AcronifyError, ValueError):
    """Input text or record payload is not usable."""


class NotFoundError(AcronifyError, LookupError):
    """No record exists with the requested identifier."""

    def __init__(self, identifier: Any):
        self.identifier = identifier
        super().__init__(f"Record with Id {identifier} not found")


class ConfigError(AcronifyError):
    """Config or lexicon file could not be read."""
