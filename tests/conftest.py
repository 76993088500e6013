# tests/conftest.py
import pytest


ENV_VARS = (
    "Z_AI_API_KEY",
    "Z_AI_API_URL",
    "Z_AI_MODEL",
    "GITHUB_TOKEN",
    "GITHUB_REPOSITORY",
    "GITHUB_SHA",
    "GITHUB_EVENT_PATH",
    "GITHUB_API_URL",
    "REVIEWER_NAME",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep CI-provided GitHub/Z.AI variables and any .env file out of tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
