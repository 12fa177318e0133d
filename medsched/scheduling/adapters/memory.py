import itertools

from medsched.domain.exceptions import AppointmentNotFoundError
from medsched.domain.models import Appointment


class InMemoryAppointmentStore:
    """Insertion-ordered appointment storage for a single process.

    IDs are ``<prefix>-1``, ``<prefix>-2``, ... and are never reused, even
    after cancellation. Not thread-safe on its own; the scheduler serialises
    access.
    """

    def __init__(self, id_prefix: str = "apt") -> None:
        self._id_prefix = id_prefix
        self._counter = itertools.count(1)
        self._entries: dict[str, Appointment] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def add(self, appointment: Appointment) -> str:
        appointment_id = f"{self._id_prefix}-{next(self._counter)}"
        self._entries[appointment_id] = appointment
        return appointment_id

    def remove(self, appointment_id: str) -> Appointment:
        try:
            return self._entries.pop(appointment_id)
        except KeyError:
            raise AppointmentNotFoundError(appointment_id) from None

    def find_id(self, appointment: Appointment) -> str | None:
        for appointment_id, stored in self._entries.items():
            if stored is appointment:
                return appointment_id
        return None

    def snapshot(self) -> list[Appointment]:
        return list(self._entries.values())
