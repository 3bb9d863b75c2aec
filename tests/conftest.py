from __future__ import annotations

import pytest
from loguru import logger

ENV_VARS = (
    "S3_BUCKET",
    "AWS_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "DOCKIT_CONFIG",
    "LOG_FILE",
    "JSON_LOGGING",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the real home directory, .env and AWS settings."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture()
def log_messages():
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["level"].name + ":" + message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
