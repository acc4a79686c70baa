"""Motor Mount domain model -- per-configuration motor selection.

Demonstrates an owner of a FlightConfigurableParameterSet: the mount edits
its motor set in response to user actions and refreshes it when its own
state changes, so each MotorConfiguration recomputes derived fields.
"""

from __future__ import annotations

import logging
import weakref
from typing import Any

from pydantic import Field, PrivateAttr

from apogee.foundation.domain import (
    ConfigurableParameterModel,
    FlightConfigurableParameterSet,
    FlightConfigurationId,
    ValidationError,
)

logger = logging.getLogger(__name__)


class MotorConfiguration(ConfigurableParameterModel):
    """Motor choice for one flight configuration.

    ``total_delay`` is derived: the motor's own ignition delay plus the
    ignition offset of the mount it is attached to. ``update()`` recomputes
    it. It is excluded from equality.

    Example:
        >>> motor = MotorConfiguration(designation="F52-8T", ignition_delay=0.5)
        >>> motor.total_delay
        0.5
    """

    designation: str = Field(default="", description="Motor designation, empty for none.")
    ignition_delay: float = Field(default=0.0, ge=0.0)
    total_delay: float = Field(default=0.0, exclude=True)

    # weakref.ref deep-copies as itself, so clones stay attached to the same mount
    _mount: Any = PrivateAttr(default=None)

    def model_post_init(self, context: Any, /) -> None:
        self.total_delay = self.ignition_delay

    def is_empty(self) -> bool:
        """Return True if no motor is selected."""
        return not self.designation

    def attach(self, mount: MotorMount) -> None:
        """Bind this configuration to the mount whose offset it follows."""
        self._mount = weakref.ref(mount)

    def update(self) -> None:
        mount = self._mount() if self._mount is not None else None
        offset = mount.ignition_offset if mount is not None else 0.0
        self.total_delay = self.ignition_delay + offset

    def __str__(self) -> str:
        return self.designation or "[no motor]"


class MotorMount:
    """A component that can carry a different motor in each flight configuration.

    Example:
        >>> mount = MotorMount(name="Inner tube")
        >>> fcid = FlightConfigurationId.generate()
        >>> mount.select_motor(fcid, MotorConfiguration(designation="D12-5"))
        >>> mount.motor_for(fcid).designation
        'D12-5'
    """

    def __init__(self, *, name: str, ignition_offset: float = 0.0) -> None:
        self.name = name
        self._ignition_offset = ignition_offset
        empty = MotorConfiguration()
        empty.attach(self)
        self.motors: FlightConfigurableParameterSet[MotorConfiguration] = (
            FlightConfigurableParameterSet(empty)
        )
        self.motors.update()

    @property
    def ignition_offset(self) -> float:
        return self._ignition_offset

    def set_ignition_offset(self, offset: float) -> None:
        """Change the mount offset and refresh every motor's derived delay.

        Raises:
            ValidationError: If offset is negative.
        """
        if offset < 0:
            raise ValidationError("ignition_offset", "Offset must not be negative")
        if offset == self._ignition_offset:
            return
        self._ignition_offset = offset
        self.motors.update()

    def select_motor(
        self, fcid: FlightConfigurationId, motor: MotorConfiguration | None
    ) -> None:
        """Use motor for fcid, or fall back to the default motor if None."""
        if motor is not None:
            motor.attach(self)
        self.motors.set(fcid, motor)
        logger.info(
            "motor_selected",
            extra={"mount": self.name, "fcid": fcid.to_short_key(), "motor": str(motor)},
        )

    def select_motors(
        self, selections: dict[FlightConfigurationId, MotorConfiguration | None]
    ) -> None:
        """Apply several selections with a single refresh pass."""
        with self.motors.batch_updates():
            for fcid, motor in selections.items():
                self.select_motor(fcid, motor)

    def motor_for(self, fcid: FlightConfigurationId) -> MotorConfiguration:
        return self.motors.get(fcid)

    def copy_configuration(
        self, source: FlightConfigurationId, target: FlightConfigurationId
    ) -> None:
        """Give target an independent copy of the motor used by source."""
        self.motors.clone_configuration(source, target)

    def has_motor(self, fcid: FlightConfigurationId) -> bool:
        return not self.motor_for(fcid).is_empty()
