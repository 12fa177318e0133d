from abc import ABC, abstractmethod
from enum import Enum

from pydantic import BaseModel, ConfigDict


class PersonRole(str, Enum):
    DOCTOR = "doctor"
    PATIENT = "patient"


class ScheduleStatus(str, Enum):
    """Outcome of submitting an appointment to the scheduler."""

    SCHEDULED = "scheduled"
    REJECTED = "rejected"


class CancellationStatus(str, Enum):
    """Outcome of a cancellation request."""

    CANCELLED = "cancelled"
    NOT_FOUND = "not_found"


class ContactInformation(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str


class Person(BaseModel, ABC):
    """A named, contactable individual. Only Doctor and Patient are instantiable."""

    model_config = ConfigDict(frozen=True)

    name: str
    contact_number: str
    contact_information: ContactInformation | None = None

    @property
    @abstractmethod
    def role(self) -> PersonRole: ...


class Doctor(Person):
    specialization: str

    @property
    def role(self) -> PersonRole:
        return PersonRole.DOCTOR


class Patient(Person):
    health_condition: str

    @property
    def role(self) -> PersonRole:
        return PersonRole.PATIENT


class Appointment(BaseModel):
    """A date bound to a doctor and a patient.

    Two appointments are equal only when they are the same object: booking the
    same people on the same date twice yields two distinct appointments.
    """

    model_config = ConfigDict(frozen=True)

    date: str | None
    doctor: Person
    patient: Person

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)


class ScheduleResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: ScheduleStatus
    appointment_id: str | None = None
    reason: str | None = None

    @property
    def scheduled(self) -> bool:
        return self.status == ScheduleStatus.SCHEDULED


class CancellationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: CancellationStatus
    appointment_id: str | None = None
    reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self.status == CancellationStatus.CANCELLED
