from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol

from medsched.domain.models import Appointment, CancellationResult, ScheduleResult


class AbstractAppointmentScheduler(ABC):
    """Abstract base class for appointment scheduling operations."""

    @abstractmethod
    def schedule_appointment(self, appointment: Appointment | None) -> ScheduleResult:
        """Validate an appointment and add it to the schedule.

        Args:
            appointment: The appointment to schedule. ``None`` is rejected.

        Returns:
            A SCHEDULED result with the assigned ID, or a REJECTED result with
            the reason. Rejection leaves the schedule unchanged.
        """

    @abstractmethod
    def cancel_appointment(self, appointment: Appointment) -> CancellationResult:
        """Remove a previously scheduled appointment.

        Args:
            appointment: The exact appointment object that was scheduled.
                An equal-looking but distinct appointment does not match.

        Returns:
            A CANCELLED result with the removed ID, or NOT_FOUND.
        """

    @abstractmethod
    def view_appointments(self) -> list[Appointment]:
        """Return a copy of the scheduled appointments in insertion order."""


class AppointmentStoreProtocol(Protocol):
    """Low-level storage for scheduled appointments."""

    def add(self, appointment: Appointment) -> str:
        """Append an appointment and return its assigned ID."""
        ...

    def remove(self, appointment_id: str) -> Appointment:
        """Remove and return the appointment with this ID.

        Raises:
            AppointmentNotFoundError: If no appointment has this ID.
        """
        ...

    def find_id(self, appointment: Appointment) -> str | None:
        """Return the ID of the first entry holding this exact object."""
        ...

    def snapshot(self) -> list[Appointment]:
        """Return a copy of all appointments in insertion order."""
        ...


class AppointmentRule(Protocol):
    """A single validity check run before an appointment is accepted."""

    name: str

    def check(self, appointment: Appointment, scheduled: Sequence[Appointment]) -> None:
        """Raise InvalidAppointmentError if the appointment may not be scheduled.

        ``scheduled`` is the current schedule, for rules that look for conflicts.
        """
        ...
