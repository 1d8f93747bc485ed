import logging
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


class RegistrySettings(BaseSettings):
    expected_state_count: int = 37
    """
    number of records the embedded dataset must contain, checked when the
    default registry is loaded
    """
    log_level: str = "WARNING"
    """
    level applied to the naija_states logger by configure_logging()
    """

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v

    # Host applications share the .env file; keys without our prefix are theirs
    model_config = SettingsConfigDict(
        env_prefix="NAIJA_STATES_", env_file=".env", extra="ignore"
    )


@lru_cache
def get_settings():
    return RegistrySettings()


def configure_logging(settings: RegistrySettings | None = None) -> logging.Logger:
    """
    Set the level of the package logger. Handlers are left to the host
    application.
    """
    settings = settings or get_settings()
    logger = logging.getLogger("naija_states")
    level = getattr(logging, settings.log_level, None)
    if not isinstance(level, int):
        logger.warning(
            f"Unknown log level '{settings.log_level}', keeping {logging.getLevelName(logger.level)}"
        )
        return logger
    logger.setLevel(level)
    return logger
