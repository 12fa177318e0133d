import threading
from collections.abc import Sequence

from loguru import logger

from medsched.domain.exceptions import AppointmentNotFoundError, InvalidAppointmentError
from medsched.domain.models import (
    Appointment,
    CancellationResult,
    CancellationStatus,
    ScheduleResult,
    ScheduleStatus,
)
from medsched.scheduling.adapters.memory import InMemoryAppointmentStore
from medsched.scheduling.ports import (
    AbstractAppointmentScheduler,
    AppointmentRule,
    AppointmentStoreProtocol,
)
from medsched.scheduling.rules import BASELINE_RULES


class Scheduler(AbstractAppointmentScheduler):
    """Scheduler that validates appointments against a rule set before storing them.

    Validation and mutation happen under one lock, so conflict rules always
    see the schedule they are about to extend.
    """

    def __init__(
        self,
        store: AppointmentStoreProtocol | None = None,
        rules: Sequence[AppointmentRule] = BASELINE_RULES,
    ) -> None:
        self._store = store if store is not None else InMemoryAppointmentStore()
        self._rules = tuple(rules)
        self._lock = threading.RLock()

    @property
    def rules(self) -> tuple[AppointmentRule, ...]:
        return self._rules

    def schedule_appointment(self, appointment: Appointment | None) -> ScheduleResult:
        with self._lock:
            try:
                accepted = self._validate(appointment)
            except InvalidAppointmentError as exc:
                logger.info("Appointment rejected: {}", exc.reason)
                return ScheduleResult(status=ScheduleStatus.REJECTED, reason=exc.reason)

            appointment_id = self._store.add(accepted)

        logger.info("Appointment scheduled: id={}, date={}", appointment_id, accepted.date)
        return ScheduleResult(status=ScheduleStatus.SCHEDULED, appointment_id=appointment_id)

    def cancel_appointment(self, appointment: Appointment) -> CancellationResult:
        with self._lock:
            appointment_id = self._store.find_id(appointment)
            if appointment_id is None:
                logger.info("Cancellation target is not scheduled")
                return CancellationResult(
                    status=CancellationStatus.NOT_FOUND,
                    reason=str(AppointmentNotFoundError()),
                )
            return self._remove(appointment_id)

    def cancel_appointment_by_id(self, appointment_id: str) -> CancellationResult:
        """Cancel the appointment that was assigned ``appointment_id`` when scheduled."""
        with self._lock:
            return self._remove(appointment_id)

    def view_appointments(self) -> list[Appointment]:
        with self._lock:
            return self._store.snapshot()

    def _validate(self, appointment: Appointment | None) -> Appointment:
        if appointment is None:
            raise InvalidAppointmentError("appointment is required")

        scheduled = self._store.snapshot()
        for rule in self._rules:
            rule.check(appointment, scheduled)
        return appointment

    def _remove(self, appointment_id: str) -> CancellationResult:
        try:
            self._store.remove(appointment_id)
        except AppointmentNotFoundError as exc:
            logger.info("No appointment with id={}", appointment_id)
            return CancellationResult(
                status=CancellationStatus.NOT_FOUND,
                appointment_id=appointment_id,
                reason=str(exc),
            )

        logger.info("Appointment cancelled: id={}", appointment_id)
        return CancellationResult(
            status=CancellationStatus.CANCELLED, appointment_id=appointment_id
        )
