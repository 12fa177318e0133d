import pytest

from medsched.domain.models import Appointment, Doctor, Patient
from medsched.scheduling.adapters.memory import InMemoryAppointmentStore
from medsched.scheduling.service import Scheduler


@pytest.fixture
def store() -> InMemoryAppointmentStore:
    return InMemoryAppointmentStore()


@pytest.fixture
def scheduler(store: InMemoryAppointmentStore) -> Scheduler:
    return Scheduler(store=store)


@pytest.fixture
def doctor() -> Doctor:
    return Doctor(name="Dr. Lee", contact_number="555-0100", specialization="General")


@pytest.fixture
def patient() -> Patient:
    return Patient(name="Jo", contact_number="555-0199", health_condition="flu")


@pytest.fixture
def appointment(doctor: Doctor, patient: Patient) -> Appointment:
    return Appointment(date="2024-01-10", doctor=doctor, patient=patient)
