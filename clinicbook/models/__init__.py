"""Domain models."""

from clinicbook.models.appointments import NO_REMARKS, Appointment

__all__ = [
    "NO_REMARKS",
    "Appointment",
]
