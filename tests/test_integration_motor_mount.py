"""Integration tests -- Motor Mount owner driving a parameter set."""

from __future__ import annotations

import logging

import pytest
from examples.motor_mount.domain import MotorConfiguration

from apogee.foundation.domain import (
    DEFAULT_VALUE_FCID,
    FlightConfigurableParameterSet,
    ValidationError,
)


@pytest.mark.integration
class TestMotorMountDomain:
    """Per-configuration motor selection through the owning component."""

    def test_unselected_configuration_uses_empty_default(self, mount, fcids) -> None:
        assert not mount.has_motor(fcids[0])
        assert mount.motor_for(fcids[0]) is mount.motors.get_default()

    def test_select_motor(self, mount, fcids, f52) -> None:
        mount.select_motor(fcids[0], f52)
        assert mount.has_motor(fcids[0])
        assert mount.motor_for(fcids[0]).designation == "F52-8T"
        assert not mount.has_motor(fcids[1])

    def test_selection_computes_total_delay(self, mount, fcids, f52) -> None:
        mount.select_motor(fcids[0], f52)
        assert mount.motor_for(fcids[0]).total_delay == pytest.approx(1.5)

    def test_offset_change_refreshes_every_motor(self, mount, fcids, f52) -> None:
        mount.select_motor(fcids[0], f52)
        mount.select_motor(
            fcids[1], MotorConfiguration(designation="G80-7T", ignition_delay=2.0)
        )
        mount.set_ignition_offset(3.0)
        assert mount.motor_for(fcids[0]).total_delay == pytest.approx(4.0)
        assert mount.motor_for(fcids[1]).total_delay == pytest.approx(5.0)
        assert mount.motors.get_default().total_delay == pytest.approx(3.0)

    def test_negative_offset_rejected(self, mount) -> None:
        with pytest.raises(ValidationError, match="must not be negative"):
            mount.set_ignition_offset(-1.0)
        assert mount.ignition_offset == pytest.approx(0.5)

    def test_deselect_falls_back_to_default(self, mount, fcids, f52) -> None:
        mount.select_motor(fcids[0], f52)
        mount.select_motor(fcids[0], None)
        assert not mount.has_motor(fcids[0])
        assert mount.motors.size() == 0

    def test_copy_configuration_is_independent(self, mount, fcids, f52) -> None:
        mount.select_motor(fcids[0], f52)
        mount.copy_configuration(fcids[0], fcids[1])
        copied = mount.motor_for(fcids[1])
        assert copied == f52
        assert copied is not f52

        copied.designation = "F39-6T"
        assert mount.motor_for(fcids[0]).designation == "F52-8T"

    def test_copied_motor_follows_mount_offset(self, mount, fcids, f52) -> None:
        mount.select_motor(fcids[0], f52)
        mount.copy_configuration(fcids[0], fcids[1])
        mount.set_ignition_offset(2.0)
        assert mount.motor_for(fcids[1]).total_delay == pytest.approx(3.0)

    def test_select_motors_in_one_batch(self, mount, fcids) -> None:
        mount.select_motors(
            {
                fcids[0]: MotorConfiguration(designation="C6-5", ignition_delay=0.25),
                fcids[2]: MotorConfiguration(designation="D12-7"),
            }
        )
        assert mount.motors.ids() == [fcids[0], fcids[2]]
        assert mount.motor_for(fcids[0]).total_delay == pytest.approx(0.75)

    def test_find_configuration_by_motor(self, mount, fcids, f52) -> None:
        mount.select_motor(fcids[1], f52)
        assert mount.motors.find_id(
            MotorConfiguration(designation="F52-8T", ignition_delay=1.0)
        ) == fcids[1]
        assert mount.motors.find_id(MotorConfiguration()) == DEFAULT_VALUE_FCID

    def test_describe_lists_designations(self, mount, fcids, f52) -> None:
        mount.select_motor(fcids[0], f52)
        text = mount.motors.describe()
        assert "MotorConfiguration" in text
        assert "F52-8T" in text

    def test_copy_of_mount_motors(self, mount, fcids, f52) -> None:
        mount.select_motor(fcids[0], f52)
        snapshot = FlightConfigurableParameterSet.copy_of(mount.motors)
        mount.motor_for(fcids[0]).designation = "F39-6T"
        assert snapshot.get(fcids[0]).designation == "F52-8T"


@pytest.mark.integration
class TestMotorMountLogging:
    """Library and owner events reach standard logging."""

    def test_selection_emits_event(self, mount, fcids, f52, caplog) -> None:
        caplog.set_level(logging.INFO, logger="examples")
        caplog.set_level(logging.DEBUG, logger="apogee")
        mount.select_motor(fcids[0], f52)
        assert "parameter_override_set" in caplog.messages
        assert "motor_selected" in caplog.messages
