"""Domain port interfaces.

Ports define the contracts the domain layer expects from the values and
collaborators it works with. Implementations live with their owners.
"""

from apogee.foundation.domain.ports.configurable_parameter import (
    FlightConfigurableParameter,
)

__all__ = ["FlightConfigurableParameter"]
