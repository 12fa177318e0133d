class SchedulingError(Exception):
    """Base exception for all scheduling errors."""


class InvalidAppointmentError(SchedulingError):
    """Raised when an appointment fails a validity rule."""

    def __init__(self, reason: str, field: str | None = None) -> None:
        self.reason = reason
        self.field = field
        super().__init__(f"Invalid appointment: {reason}")


class AppointmentNotFoundError(SchedulingError):
    """Raised when a cancellation target is not in the schedule."""

    def __init__(self, appointment_id: str | None = None) -> None:
        self.appointment_id = appointment_id
        target = appointment_id or "given appointment"
        super().__init__(f"Appointment not found: {target}")
