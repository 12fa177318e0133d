from typing import Callable

from loguru import logger

from medsched.config import SchedulerConfig
from medsched.scheduling.adapters.memory import InMemoryAppointmentStore
from medsched.scheduling.ports import AppointmentRule
from medsched.scheduling.rules import (
    BASELINE_RULES,
    DoctorConflictRule,
    IsoDateRule,
    PatientConflictRule,
    RoleRule,
)
from medsched.scheduling.service import Scheduler

# Applied in this order after the baseline rules.
_OPTIONAL_RULES: list[tuple[str, Callable[[], AppointmentRule]]] = [
    ("enforce_roles", RoleRule),
    ("require_iso_date", IsoDateRule),
    ("detect_doctor_conflicts", DoctorConflictRule),
    ("detect_patient_conflicts", PatientConflictRule),
]


def build_rules(config: SchedulerConfig) -> list[AppointmentRule]:
    rules: list[AppointmentRule] = list(BASELINE_RULES)
    for flag, rule_factory in _OPTIONAL_RULES:
        if getattr(config, flag):
            rules.append(rule_factory())
    return rules


def build_scheduler(config: SchedulerConfig) -> Scheduler:
    """Build a scheduler with the rule set enabled in config."""
    rules = build_rules(config)
    logger.info("Building scheduler with rules: {}", ", ".join(rule.name for rule in rules))
    return Scheduler(store=InMemoryAppointmentStore(id_prefix=config.id_prefix), rules=rules)
