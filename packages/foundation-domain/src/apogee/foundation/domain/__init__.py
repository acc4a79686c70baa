"""Apogee Foundation Domain -- flight-configurable parameter primitives.

This package provides the domain building blocks for values that vary per
flight configuration: configuration identifiers, exceptions, the parameter
port, a pydantic base model for parameter values, and the parameter set.
"""

from apogee.foundation.domain.exceptions import (
    ConfigurationIndexError,
    DomainError,
    InvalidConfigurationIdError,
    ValidationError,
)
from apogee.foundation.domain.identifiers import (
    DEFAULT_VALUE_FCID,
    ERROR_FCID,
    FlightConfigurationId,
)
from apogee.foundation.domain.parameter_models import ConfigurableParameterModel
from apogee.foundation.domain.parameter_set import FlightConfigurableParameterSet
from apogee.foundation.domain.ports import FlightConfigurableParameter

__all__ = [
    "DEFAULT_VALUE_FCID",
    "ERROR_FCID",
    "ConfigurableParameterModel",
    "ConfigurationIndexError",
    "DomainError",
    "FlightConfigurableParameter",
    "FlightConfigurableParameterSet",
    "FlightConfigurationId",
    "InvalidConfigurationIdError",
    "ValidationError",
]
