from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class MonitorSettings(BaseSettings):
    capture_timestamps: bool = Field(True, validation_alias="PWMONITOR_CAPTURE_TIMESTAMPS")
    log_ring_size: int = Field(200, validation_alias="PWMONITOR_LOG_RING_SIZE")
    logger_name: str = Field("pwmonitor", validation_alias="PWMONITOR_LOGGER_NAME")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")


@lru_cache
def get_settings() -> MonitorSettings:
    return MonitorSettings()
