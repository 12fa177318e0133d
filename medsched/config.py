from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SchedulerConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SCHEDULER_", env_file=".env", extra="ignore")

    enforce_roles: bool = False
    require_iso_date: bool = False
    detect_doctor_conflicts: bool = False
    detect_patient_conflicts: bool = False
    id_prefix: str = "apt"


class LoggingConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LOG_", env_file=".env", extra="ignore")

    level: str = "INFO"


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    scheduler: SchedulerConfig = Field(default_factory=lambda: SchedulerConfig())
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
