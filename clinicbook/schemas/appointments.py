"""Appointment schemas for display and logging collaborators."""

from pydantic import BaseModel, ConfigDict, Field


class AppointmentSnapshot(BaseModel):
    """Point-in-time view of an appointment as plain text fields."""

    doctor_id: str = Field(..., description="Doctor identifier as text")
    patient_id: str = Field(..., description="Patient identifier as text")
    remark: str | None = Field(None, description="Remark as text, None when absent")
    display: str = Field(..., description="Human-readable rendering of the appointment")

    model_config = ConfigDict(frozen=True)
