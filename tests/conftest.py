import logging
from uuid import UUID

import pytest
import structlog

from clinicbook.models.appointments import Appointment


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore default structlog and package logger configuration after each test."""
    package_logger = logging.getLogger("clinicbook")
    level = package_logger.level
    yield
    structlog.reset_defaults()
    package_logger.setLevel(level)


@pytest.fixture
def sample_appointment_data():
    """Sample appointment data for testing."""
    return {
        "doctor_id": "D1",
        "patient_id": "P1",
        "remark": "Initial visit",
    }


@pytest.fixture
def appointment(sample_appointment_data):
    """Appointment with a text remark."""
    return Appointment(**sample_appointment_data)


@pytest.fixture
def blank_appointment():
    """Appointment without a remark."""
    return Appointment("D1", "P1", None)


@pytest.fixture
def uuid_ids():
    """Doctor and patient identifiers as UUIDs."""
    return (
        UUID("8a1f2c3e-0000-4000-8000-000000000001"),
        UUID("8a1f2c3e-0000-4000-8000-000000000002"),
    )
