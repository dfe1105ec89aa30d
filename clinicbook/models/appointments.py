"""Appointment record binding a doctor, a patient and a remark."""

import logging
from typing import Generic, TypeVar, final

import structlog

from clinicbook.core.types import Identifier, NoteT, RemarkJoiner, join_text_remarks
from clinicbook.schemas.appointments import AppointmentSnapshot

IdT = TypeVar("IdT", bound=Identifier)

# Rendered in place of an absent remark
NO_REMARKS = "No remarks"

# Events go through stdlib logging and follow its levels
logger = structlog.wrap_logger(
    logging.getLogger(__name__),
    wrapper_class=structlog.stdlib.BoundLogger,
)


@final
class Appointment(Generic[IdT, NoteT]):
    """
    Appointment between a doctor and a patient, with an optional remark.

    Identifiers are fixed at construction. The remark can be appended to or
    replaced any number of times, and ``None`` stands for "no remark".

    Equality compares both identifiers and the remark, so instances are
    unhashable.
    """

    __slots__ = ("_doctor_id", "_patient_id", "_remark")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, doctor_id: IdT, patient_id: IdT, remark: NoteT | None = None):
        """
        Initialize appointment.

        Args:
            doctor_id: Identifier of the doctor
            patient_id: Identifier of the patient
            remark: Remark about the appointment (treatment details, condition, etc.)
        """
        self._doctor_id = doctor_id
        self._patient_id = patient_id
        self._remark = remark

    @property
    def doctor_id(self) -> IdT:
        """Doctor identifier."""
        return self._doctor_id

    @property
    def patient_id(self) -> IdT:
        """Patient identifier."""
        return self._patient_id

    @property
    def remark(self) -> NoteT | None:
        """Current remark, or None when there is none."""
        return self._remark

    def get_doctor_id(self) -> IdT:
        """Return the doctor identifier."""
        return self._doctor_id

    def get_patient_id(self) -> IdT:
        """Return the patient identifier."""
        return self._patient_id

    def get_remark(self) -> NoteT | None:
        """Return the current remark."""
        return self._remark

    def append_remark(self: "Appointment[IdT, str]", new_remark: str | None) -> None:
        """
        Append a text remark below the existing one.

        A blank line separates the previous remark from the new one. When
        there is no remark yet, the new remark is simply set. An absent new
        remark on top of an existing one is appended as its text form.

        Args:
            new_remark: Remark to append
        """
        self.append_remark_with(new_remark, join_text_remarks)

    def append_remark_with(self, new_remark: NoteT | None, joiner: RemarkJoiner[NoteT]) -> None:
        """
        Append a remark using a caller-supplied join function.

        The joiner is called whenever a remark is already present, including
        when ``new_remark`` is None.

        Args:
            new_remark: Remark to append
            joiner: Combines the existing remark with the new one
        """
        if self._remark is None:
            self._remark = new_remark
        else:
            self._remark = joiner(self._remark, new_remark)

        logger.debug(
            "appointment_remark_appended",
            doctor_id=str(self._doctor_id),
            patient_id=str(self._patient_id),
            has_remark=self._remark is not None,
        )

    def replace_remark(self, new_remark: NoteT | None) -> None:
        """
        Replace the current remark, discarding any previous remarks.

        Args:
            new_remark: Remark to set, or None to clear it
        """
        self._remark = new_remark

        logger.debug(
            "appointment_remark_replaced",
            doctor_id=str(self._doctor_id),
            patient_id=str(self._patient_id),
            has_remark=new_remark is not None,
        )

    def equals(self, other: object) -> bool:
        """Check if this appointment is equal to another object."""
        return bool(self == other)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True

        if not isinstance(other, Appointment) or type(other) is not type(self):
            return NotImplemented

        return (
            self._doctor_id == other._doctor_id
            and self._patient_id == other._patient_id
            and (
                other._remark is None
                if self._remark is None
                else other._remark is not None and self._remark == other._remark
            )
        )

    def display(self) -> str:
        """Return the human-readable form of the appointment."""
        remark = self._remark if self._remark is not None else NO_REMARKS
        return (
            f"Appointment[Doctor ID: {self._doctor_id!s}, "
            f"Patient ID: {self._patient_id!s}] : {remark!s}"
        )

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return (
            f"Appointment(doctor_id={self._doctor_id!r}, "
            f"patient_id={self._patient_id!r}, remark={self._remark!r})"
        )

    def to_snapshot(self) -> AppointmentSnapshot:
        """
        Capture the current state as plain data.

        Returns:
            Immutable snapshot with text identifiers and the rendered display
        """
        return AppointmentSnapshot(
            doctor_id=str(self._doctor_id),
            patient_id=str(self._patient_id),
            remark=str(self._remark) if self._remark is not None else None,
            display=self.display(),
        )
