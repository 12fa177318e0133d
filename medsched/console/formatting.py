from rich.table import Table

from medsched.domain.models import Appointment, Person


def describe_person(
    person: Person,
    additional_message: str | None = None,
    age: int | None = None,
) -> list[str]:
    """Render a person's basic details as display lines.

    ``additional_message`` and ``age`` are prepended when given.
    """
    lines = []
    if additional_message:
        lines.append(additional_message)
    if age is not None:
        lines.append(labelled("Age", str(age)))
    lines.append(labelled("Name", person.name))
    lines.append(labelled("Contact Number", person.contact_number))
    if person.contact_information:
        lines.append(labelled("Email", person.contact_information.email))
    return lines


def labelled(label: str, value: str) -> str:
    return f"{label}: {value}"


def describe_appointment(appointment: Appointment) -> list[str]:
    """Display lines for an appointment, with role details where the slot holds the right role."""
    lines = [labelled("Date", appointment.date or "")]
    lines += describe_person(appointment.doctor, additional_message="Doctor")
    if specialization := getattr(appointment.doctor, "specialization", None):
        lines.append(labelled("Specialization", specialization))
    lines += describe_person(appointment.patient, additional_message="Patient")
    if condition := getattr(appointment.patient, "health_condition", None):
        lines.append(labelled("Health Condition", condition))
    return lines


def build_appointments_table(rows: list[dict[str, str]]) -> Table:
    table = Table(title="All Appointments")
    table.add_column("#", justify="right")
    table.add_column("Date")
    table.add_column("Doctor")
    table.add_column("Specialization")
    table.add_column("Patient")
    table.add_column("Health Condition")
    for row in rows:
        table.add_row(
            row["position"],
            row["date"],
            row["doctor"],
            row["specialization"],
            row["patient"],
            row["health_condition"],
        )
    return table
