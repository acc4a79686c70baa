"""Shared fixtures for integration tests."""

from __future__ import annotations

import pytest
from examples.motor_mount.domain import MotorConfiguration, MotorMount

from apogee.foundation.domain import FlightConfigurationId


@pytest.fixture()
def mount() -> MotorMount:
    """A fresh motor mount with no motors selected."""
    return MotorMount(name="Inner tube", ignition_offset=0.5)


@pytest.fixture()
def fcids() -> list[FlightConfigurationId]:
    """Three flight configuration ids in ascending order."""
    return sorted(FlightConfigurationId.generate() for _ in range(3))


@pytest.fixture()
def f52() -> MotorConfiguration:
    return MotorConfiguration(designation="F52-8T", ignition_delay=1.0)
