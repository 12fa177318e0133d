import pytest

from medsched.domain.exceptions import InvalidAppointmentError
from medsched.domain.models import Appointment, Doctor, Patient
from medsched.scheduling.rules import (
    DoctorConflictRule,
    IsoDateRule,
    PatientConflictRule,
    RequiredFieldsRule,
    RoleRule,
)


def _doctor(name: str = "Dr. Lee", contact_number: str = "555-0100") -> Doctor:
    return Doctor(name=name, contact_number=contact_number, specialization="General")


def _patient(name: str = "Jo", contact_number: str = "555-0199") -> Patient:
    return Patient(name=name, contact_number=contact_number, health_condition="flu")


class TestRequiredFieldsRule:
    def test_accepts_complete_appointment(self, appointment: Appointment) -> None:
        RequiredFieldsRule().check(appointment, [])

    @pytest.mark.parametrize(
        ("doctor_name", "patient_name", "date", "field"),
        [
            ("", "Jo", "2024-01-10", "doctor.name"),
            ("Dr. Lee", " ", "2024-01-10", "patient.name"),
            ("Dr. Lee", "Jo", None, "date"),
            ("", "", "", "doctor.name"),
        ],
        ids=["doctor", "patient", "date", "all-blank-reports-doctor-first"],
    )
    def test_reports_first_blank_field(
        self, doctor_name: str, patient_name: str, date: str | None, field: str
    ) -> None:
        appointment = Appointment(
            date=date, doctor=_doctor(doctor_name), patient=_patient(patient_name)
        )

        with pytest.raises(InvalidAppointmentError) as exc_info:
            RequiredFieldsRule().check(appointment, [])

        assert exc_info.value.field == field


class TestRoleRule:
    def test_accepts_matching_roles(self, appointment: Appointment) -> None:
        RoleRule().check(appointment, [])

    def test_rejects_patient_in_doctor_slot(self) -> None:
        appointment = Appointment(date="2024-01-10", doctor=_patient("Sam"), patient=_patient())

        with pytest.raises(
            InvalidAppointmentError, match="doctor slot does not hold a doctor"
        ) as exc_info:
            RoleRule().check(appointment, [])

        assert "Sam" not in exc_info.value.reason

    def test_rejects_doctor_in_patient_slot(self) -> None:
        appointment = Appointment(
            date="2024-01-10", doctor=_doctor(), patient=_doctor("Dr. Kim")
        )

        with pytest.raises(InvalidAppointmentError, match="patient slot does not hold a patient"):
            RoleRule().check(appointment, [])


class TestIsoDateRule:
    @pytest.mark.parametrize(
        "date",
        ["2024-01-10", " 2024-02-29 ", "", None],
        ids=["standard", "padded-leap-day", "blank-is-skipped", "missing-is-skipped"],
    )
    def test_accepts(self, date: str | None) -> None:
        IsoDateRule().check(Appointment(date=date, doctor=_doctor(), patient=_patient()), [])

    @pytest.mark.parametrize(
        "date",
        ["next tuesday", "10/01/2024", "2023-02-29", "2024-13-01"],
        ids=["natural-language", "us-format", "not-a-leap-year", "bad-month"],
    )
    def test_rejects(self, date: str) -> None:
        appointment = Appointment(date=date, doctor=_doctor(), patient=_patient())

        with pytest.raises(InvalidAppointmentError, match="YYYY-MM-DD"):
            IsoDateRule().check(appointment, [])


class TestDoctorConflictRule:
    def test_rejects_same_doctor_same_date(self) -> None:
        existing = Appointment(date="2024-01-10", doctor=_doctor(), patient=_patient("Jo"))
        candidate = Appointment(date="2024-01-10", doctor=_doctor(), patient=_patient("Sam"))

        with pytest.raises(InvalidAppointmentError, match="already booked on 2024-01-10"):
            DoctorConflictRule().check(candidate, [existing])

    @pytest.mark.parametrize(
        ("existing_date", "candidate_date"),
        [
            ("2024-01-10", " 2024-01-10"),
            (" 2024-01-10 ", "2024-01-10"),
            ("2024-01-10\t", "2024-01-10 "),
        ],
        ids=["padded-candidate", "padded-existing", "trailing-whitespace"],
    )
    def test_rejects_same_date_with_surrounding_whitespace(
        self, existing_date: str, candidate_date: str
    ) -> None:
        existing = Appointment(date=existing_date, doctor=_doctor(), patient=_patient("Jo"))
        candidate = Appointment(date=candidate_date, doctor=_doctor(), patient=_patient("Sam"))

        with pytest.raises(InvalidAppointmentError, match="already booked on 2024-01-10$"):
            DoctorConflictRule().check(candidate, [existing])

    def test_blank_dates_never_conflict(self) -> None:
        existing = Appointment(date=" ", doctor=_doctor(), patient=_patient())
        candidate = Appointment(date=None, doctor=_doctor(), patient=_patient())

        DoctorConflictRule().check(candidate, [existing])

    def test_allows_other_date(self) -> None:
        existing = Appointment(date="2024-01-10", doctor=_doctor(), patient=_patient())
        candidate = Appointment(date="2024-01-11", doctor=_doctor(), patient=_patient())

        DoctorConflictRule().check(candidate, [existing])

    def test_allows_other_doctor(self) -> None:
        existing = Appointment(date="2024-01-10", doctor=_doctor(), patient=_patient())
        candidate = Appointment(
            date="2024-01-10", doctor=_doctor("Dr. Kim", "555-0200"), patient=_patient()
        )

        DoctorConflictRule().check(candidate, [existing])


class TestPatientConflictRule:
    def test_rejects_same_patient_same_date(self) -> None:
        existing = Appointment(date="2024-01-10", doctor=_doctor(), patient=_patient())
        candidate = Appointment(
            date="2024-01-10", doctor=_doctor("Dr. Kim", "555-0200"), patient=_patient()
        )

        with pytest.raises(InvalidAppointmentError, match="patient already has an appointment"):
            PatientConflictRule().check(candidate, [existing])

    def test_rejects_same_patient_padded_date(self) -> None:
        existing = Appointment(date="2024-01-10", doctor=_doctor(), patient=_patient())
        candidate = Appointment(
            date="2024-01-10  ", doctor=_doctor("Dr. Kim", "555-0200"), patient=_patient()
        )

        with pytest.raises(InvalidAppointmentError, match="appointment on 2024-01-10$"):
            PatientConflictRule().check(candidate, [existing])

    def test_same_name_different_contact_is_another_patient(self) -> None:
        existing = Appointment(date="2024-01-10", doctor=_doctor(), patient=_patient())
        candidate = Appointment(
            date="2024-01-10", doctor=_doctor(), patient=_patient(contact_number="555-0999")
        )

        PatientConflictRule().check(candidate, [existing])
