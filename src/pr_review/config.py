# src/pr_review/config.py
import logging
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Z.AI
    z_ai_api_key: str | None = None
    z_ai_api_url: str = "https://api.z.ai/api/paas/v4/chat/completions"
    z_ai_model: str = "glm-4.7-flash"

    # GitHub Actions
    github_token: str | None = None
    github_repository: str | None = None
    github_sha: str | None = None
    github_event_path: str | None = None
    github_api_url: str = "https://api.github.com"

    # Defaults
    reviewer_name: str = "Codex Review"
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value}")
        return value
