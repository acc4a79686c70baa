"""Port interface for flight-configurable parameter values.

This module defines the FlightConfigurableParameter protocol: the three
capabilities a parameter set needs from the values it stores. Any class with
a deep ``clone()``, value equality and an ``update()`` refresh hook qualifies,
without inheriting from a framework base.

Example:
    >>> from apogee.foundation.domain.ports import FlightConfigurableParameter
    >>> def duplicate(value: FlightConfigurableParameter) -> FlightConfigurableParameter:
    ...     return value.clone()
"""

from __future__ import annotations

from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class FlightConfigurableParameter(Protocol):
    """Port for values that can vary per flight configuration.

    The protocol is runtime_checkable to enable isinstance() verification
    in tests. Value equality comes from ``__eq__``, which every object has,
    so it is part of the contract but not of the structural check.

    Example:
        >>> class Delay:
        ...     def __init__(self, seconds: float) -> None:
        ...         self.seconds = seconds
        ...
        ...     def clone(self) -> "Delay":
        ...         return Delay(self.seconds)
        ...
        ...     def update(self) -> None:
        ...         pass
        >>> isinstance(Delay(3.0), FlightConfigurableParameter)
        True
    """

    def clone(self) -> Self:
        """Return an independent deep copy of this value.

        Returns:
            A new instance, equal to this one, sharing no mutable state.
        """
        ...

    def update(self) -> None:
        """Recompute any state derived from upstream components."""
        ...
