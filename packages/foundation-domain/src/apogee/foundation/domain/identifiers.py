"""Identifier value objects for flight configurations.

This module provides the strongly-typed identifier used to key per-configuration
parameter values. Two reserved identifiers exist alongside generated ones: the
default sentinel, which addresses the default slot of a parameter set, and the
error identifier, which marks an unusable key.

Example:
    >>> from apogee.foundation.domain import FlightConfigurationId
    >>> fcid = FlightConfigurationId.from_string("550e8400-e29b-41d4-a716-446655440000")
    >>> fcid.to_short_key()
    '550e8400'
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

_ERROR_UUID = UUID(int=(6708 << 64) | 1729)
_DEFAULT_VALUE_UUID = UUID(int=(0xF4F2F1F0 << 64) | 5676)


@dataclass(frozen=True, order=True)
class FlightConfigurationId:
    """Flight configuration identifier wrapping a UUID.

    Identifiers are hashable and totally ordered by their UUID, so they can key
    dictionaries and be sorted for stable presentation.

    Attributes:
        value: The wrapped UUID instance.

    Example:
        >>> a = FlightConfigurationId(UUID(int=1))
        >>> b = FlightConfigurationId(UUID(int=2))
        >>> sorted([b, a]) == [a, b]
        True
    """

    value: UUID

    ERROR_KEY_NAME: ClassVar[str] = "ErrorKey"
    DEFAULT_KEY_NAME: ClassVar[str] = "DEFAULT"

    @classmethod
    def generate(cls) -> FlightConfigurationId:
        """Return a new identifier backed by a random UUID."""
        return cls(uuid.uuid4())

    @classmethod
    def from_string(cls, text: str | None) -> FlightConfigurationId:
        """Parse an identifier from its UUID string form.

        Args:
            text: UUID string. Empty or ``None`` yields the error identifier.

        Returns:
            The parsed identifier.

        Raises:
            ValueError: If text is non-empty but not a valid UUID.
        """
        if not text:
            return ERROR_FCID
        return cls(UUID(text))

    def has_error(self) -> bool:
        """Return True if this is the error identifier."""
        return self.value == _ERROR_UUID

    def is_valid(self) -> bool:
        """Return True if this identifier may be used to address a value."""
        return not self.has_error()

    def is_default(self) -> bool:
        """Return True if this is the default-value sentinel."""
        return self.value == _DEFAULT_VALUE_UUID

    def to_short_key(self) -> str:
        """Return a compact label for diagnostics."""
        if self.has_error():
            return self.ERROR_KEY_NAME
        if self.is_default():
            return self.DEFAULT_KEY_NAME
        return self.value.hex[:8]

    def __str__(self) -> str:
        """Return UUID string for serialization."""
        if self.has_error():
            return self.ERROR_KEY_NAME
        return str(self.value)


ERROR_FCID = FlightConfigurationId(_ERROR_UUID)
"""Identifier carrying the error marker. Never valid for lookups."""

DEFAULT_VALUE_FCID = FlightConfigurationId(_DEFAULT_VALUE_UUID)
"""Sentinel addressing the default slot of a parameter set."""
