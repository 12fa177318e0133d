"""Field prompts for collecting an appointment interactively."""

DOCTOR_FIELDS: list[tuple[str, str]] = [
    ("doctor_name", "Doctor's Name"),
    ("doctor_contact_number", "Doctor's Contact Number"),
    ("doctor_specialization", "Doctor's Specialization"),
]

PATIENT_FIELDS: list[tuple[str, str]] = [
    ("patient_name", "Patient's Name"),
    ("patient_contact_number", "Patient's Contact Number"),
    ("patient_health_condition", "Patient's Health Condition"),
]

DATE_FIELDS: list[tuple[str, str]] = [
    ("date", "Appointment Date (YYYY-MM-DD)"),
]

APPOINTMENT_FIELDS: list[tuple[str, str]] = DOCTOR_FIELDS + PATIENT_FIELDS + DATE_FIELDS

SCHEDULE_ANOTHER = "Would you like to schedule another appointment?"
CANCEL_PROMPT = "Number of an appointment to cancel (leave blank to skip)"
