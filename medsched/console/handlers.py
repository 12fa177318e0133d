from typing import Any

from loguru import logger

from medsched.console.formatting import describe_appointment
from medsched.domain.exceptions import SchedulingError
from medsched.domain.models import Appointment, Doctor, Patient
from medsched.scheduling.ports import AbstractAppointmentScheduler


def _parse_position(value: object, count: int) -> tuple[int | None, str | None]:
    """Parse a 1-based list position. Returns ``(index, None)`` or ``(None, error_msg)``."""
    if not isinstance(value, str) or not value.strip().isdecimal():
        return None, f"Invalid appointment number: '{value}'. Expected a whole number."
    position = int(value.strip())
    if not 1 <= position <= count:
        return None, f"There is no appointment number {position}."
    return position - 1, None


class SchedulingHandlers:
    """Turns free-text fields into scheduler calls and plain result dicts."""

    def __init__(self, scheduler: AbstractAppointmentScheduler) -> None:
        self._scheduler = scheduler

    def handle_schedule(self, arguments: dict[str, str]) -> dict[str, Any]:
        logger.debug("Handler call: schedule")

        doctor = Doctor(
            name=arguments.get("doctor_name", ""),
            contact_number=arguments.get("doctor_contact_number", ""),
            specialization=arguments.get("doctor_specialization", ""),
        )
        patient = Patient(
            name=arguments.get("patient_name", ""),
            contact_number=arguments.get("patient_contact_number", ""),
            health_condition=arguments.get("patient_health_condition", ""),
        )
        appointment = Appointment(date=arguments.get("date"), doctor=doctor, patient=patient)

        try:
            result = self._scheduler.schedule_appointment(appointment)
        except SchedulingError as exc:
            return {"success": False, "error": True, "message": str(exc)}
        except Exception:
            logger.exception("Unexpected error while scheduling")
            return {
                "success": False,
                "error": True,
                "message": "An unexpected error occurred while scheduling the appointment.",
            }

        if not result.scheduled:
            return {
                "success": False,
                "error": False,
                "message": (
                    "Appointment could not be scheduled: "
                    f"{result.reason}. Check for conflicts or invalid entries."
                ),
            }

        return {
            "success": True,
            "appointment_id": result.appointment_id,
            "details": describe_appointment(appointment),
            "message": "Appointment successfully scheduled.",
        }

    def handle_cancel(self, arguments: dict[str, str]) -> dict[str, Any]:
        logger.debug("Handler call: cancel")

        appointments = self._scheduler.view_appointments()
        index, err = _parse_position(arguments.get("position", ""), len(appointments))
        if err or index is None:
            return {"success": False, "error": True, "message": err or "Invalid number."}

        try:
            result = self._scheduler.cancel_appointment(appointments[index])
        except SchedulingError as exc:
            return {"success": False, "error": True, "message": str(exc)}

        if not result.cancelled:
            return {"success": False, "error": False, "message": result.reason}

        return {
            "success": True,
            "appointment_id": result.appointment_id,
            "message": "Appointment cancelled successfully.",
        }

    def handle_list(self) -> list[dict[str, str]]:
        rows = []
        for position, appointment in enumerate(self._scheduler.view_appointments(), start=1):
            rows.append(
                {
                    "position": str(position),
                    "date": appointment.date or "",
                    "doctor": appointment.doctor.name,
                    "specialization": getattr(appointment.doctor, "specialization", ""),
                    "patient": appointment.patient.name,
                    "health_condition": getattr(appointment.patient, "health_condition", ""),
                }
            )
        return rows
