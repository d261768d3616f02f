from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_nested_delimiter="__", extra="ignore")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8000
    root_path: str = ""

    debug: bool = False
    reload: bool = False

    emailjs_service_id: str | None = None
    emailjs_template_id: str | None = None
    emailjs_public_key: str | None = None
    emailjs_api_url: str = "https://api.emailjs.com/api/v1.0/email/send"

    # status returned when the provider rejects a message or cannot be reached (502 marks it as retryable)
    upstream_error_status: int = Field(500, ge=500, le=599)

    contact_relay_url: str = "/contact"
    contact_feedback_delay: float = Field(5.0, ge=0)

    sentry_dsn: str | None = None
    sentry_environment: str = "test"


settings = Settings()
