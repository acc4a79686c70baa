"""Pydantic base class for flight-configurable parameter values.

ConfigurableParameterModel satisfies the FlightConfigurableParameter port
with pydantic semantics: deep copies via ``model_copy(deep=True)`` and value
equality over the serialized fields. Applications subclass it with their own
fields.

Example:
    Defining a parameter value::

        from apogee.foundation.domain import ConfigurableParameterModel

        class DeploymentConfiguration(ConfigurableParameterModel):
            event: str = "apogee"
            delay: float = 0.0
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict


class ConfigurableParameterModel(BaseModel):
    """Base model for values stored in a FlightConfigurableParameterSet.

    Models are mutable so owners can adjust a value in place and then call
    ``update()`` on the containing set. Assignments are validated.

    Equality compares ``model_dump()`` of two models of the same class.
    Derived fields declared with ``Field(exclude=True)`` and private
    attributes (runtime bindings to an owner) do not take part.
    """

    model_config = ConfigDict(validate_assignment=True)

    def clone(self) -> Self:
        """Return a deep copy sharing no mutable state with this model."""
        return self.model_copy(deep=True)

    def update(self) -> None:
        """Recompute derived fields. No-op unless a subclass overrides it."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseModel):
            return NotImplemented
        return type(self) is type(other) and self.model_dump() == other.model_dump()
