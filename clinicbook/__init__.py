"""Appointment records for clinic applications."""

from clinicbook.models.appointments import Appointment
from clinicbook.schemas.appointments import AppointmentSnapshot

__version__ = "0.1.0"

__all__ = ["Appointment", "AppointmentSnapshot"]
