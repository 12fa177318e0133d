import sys
from typing import Callable

from loguru import logger
from rich.console import Console
from rich.prompt import Confirm, Prompt

from medsched.config import AppConfig
from medsched.console.formatting import build_appointments_table
from medsched.console.handlers import SchedulingHandlers
from medsched.console.prompts import APPOINTMENT_FIELDS, CANCEL_PROMPT, SCHEDULE_ANOTHER
from medsched.scheduling.factory import build_scheduler
from medsched.scheduling.ports import AbstractAppointmentScheduler


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def run_session(
    scheduler: AbstractAppointmentScheduler,
    console: Console,
    ask: Callable[[str], str],
    confirm: Callable[[str], bool],
) -> None:
    """Collect appointments until the user stops, then list them and offer cancellations."""
    handlers = SchedulingHandlers(scheduler)

    while True:
        arguments = {key: ask(label) for key, label in APPOINTMENT_FIELDS}
        result = handlers.handle_schedule(arguments)
        style = "green" if result["success"] else "red"
        console.print(result["message"], style=style)
        for line in result.get("details", []):
            console.print(f"  {line}")

        if not confirm(SCHEDULE_ANOTHER):
            break

    rows = handlers.handle_list()
    while rows:
        console.print(build_appointments_table(rows))
        position = ask(CANCEL_PROMPT).strip()
        if not position:
            break
        result = handlers.handle_cancel({"position": position})
        console.print(result["message"], style="green" if result["success"] else "red")
        rows = handlers.handle_list()

    if not rows:
        console.print("No appointments scheduled.")


def main() -> None:
    config = AppConfig()
    configure_logging(config.logging.level)
    logger.info("Starting appointment scheduler session")

    console = Console()
    scheduler = build_scheduler(config.scheduler)

    try:
        run_session(
            scheduler,
            console,
            ask=lambda label: Prompt.ask(label, console=console, default="", show_default=False),
            confirm=lambda question: Confirm.ask(question, console=console, default=False),
        )
    except (KeyboardInterrupt, EOFError):
        console.print()
        logger.info("Session interrupted")


if __name__ == "__main__":
    main()
