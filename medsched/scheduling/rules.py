import datetime as dt
from collections.abc import Sequence

from medsched.domain.exceptions import InvalidAppointmentError
from medsched.domain.models import Appointment, Doctor, Patient, Person


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _same_person(a: Person, b: Person) -> bool:
    return a.name.strip() == b.name.strip() and a.contact_number == b.contact_number


def _normalized_date(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


class RequiredFieldsRule:
    """Doctor name, patient name and date must all be non-blank."""

    name = "required_fields"

    def check(self, appointment: Appointment, scheduled: Sequence[Appointment]) -> None:
        if _is_blank(appointment.doctor.name):
            raise InvalidAppointmentError("doctor name cannot be empty", field="doctor.name")
        if _is_blank(appointment.patient.name):
            raise InvalidAppointmentError("patient name cannot be empty", field="patient.name")
        if _is_blank(appointment.date):
            raise InvalidAppointmentError("date cannot be empty", field="date")


class RoleRule:
    """The doctor slot must hold a Doctor and the patient slot a Patient."""

    name = "roles"

    def check(self, appointment: Appointment, scheduled: Sequence[Appointment]) -> None:
        if not isinstance(appointment.doctor, Doctor):
            raise InvalidAppointmentError("doctor slot does not hold a doctor", field="doctor")
        if not isinstance(appointment.patient, Patient):
            raise InvalidAppointmentError(
                "patient slot does not hold a patient", field="patient"
            )


class IsoDateRule:
    """The date must be an ISO 8601 calendar date (YYYY-MM-DD)."""

    name = "iso_date"

    def check(self, appointment: Appointment, scheduled: Sequence[Appointment]) -> None:
        date = _normalized_date(appointment.date)
        # Blank dates are RequiredFieldsRule's concern.
        if date is None:
            return
        try:
            dt.date.fromisoformat(date)
        except ValueError:
            raise InvalidAppointmentError(
                f"date '{appointment.date}' is not in YYYY-MM-DD format", field="date"
            ) from None


class DoctorConflictRule:
    """A doctor may have at most one appointment per date."""

    name = "doctor_conflict"

    def check(self, appointment: Appointment, scheduled: Sequence[Appointment]) -> None:
        date = _normalized_date(appointment.date)
        if date is None:
            return
        for existing in scheduled:
            if _normalized_date(existing.date) == date and _same_person(
                existing.doctor, appointment.doctor
            ):
                raise InvalidAppointmentError(
                    f"doctor is already booked on {date}",
                    field="doctor",
                )


class PatientConflictRule:
    """A patient may have at most one appointment per date."""

    name = "patient_conflict"

    def check(self, appointment: Appointment, scheduled: Sequence[Appointment]) -> None:
        date = _normalized_date(appointment.date)
        if date is None:
            return
        for existing in scheduled:
            if _normalized_date(existing.date) == date and _same_person(
                existing.patient, appointment.patient
            ):
                raise InvalidAppointmentError(
                    f"patient already has an appointment on {date}",
                    field="patient",
                )


BASELINE_RULES = (RequiredFieldsRule(),)
