# nunit_report/config.py
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="NUNIT_REPORT_", env_file=".env", extra="ignore"
    )

    # None lets ThreadPoolExecutor pick its default
    MAX_WORKERS: Optional[int] = Field(default=None, ge=1)
    # Inconclusive/skipped root counts must be present when True
    STRICT_COUNTS: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")


settings = Settings()
