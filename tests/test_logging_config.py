import json

from loguru import logger

from dockit.logging_config import setup_logging


def test_json_log_file(tmp_path):
    log_file = tmp_path / "logs" / "dockit.log"
    setup_logging(level="debug", json_format=True, log_file=log_file)
    logger.bind(key="documents/{year}.pdf").info("uploaded {}", "a.pdf")
    try:
        raise ValueError("boom")
    except ValueError:
        logger.exception("failed")
    logger.remove()

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert lines[0]["message"] == "uploaded a.pdf"
    assert lines[0]["level"] == "INFO"
    assert lines[0]["key"] == "documents/{year}.pdf"
    assert lines[1]["exception"] == {"type": "ValueError", "value": "boom"}


def test_text_log_file(tmp_path):
    log_file = tmp_path / "dockit.log"
    setup_logging(level="WARNING", log_file=log_file)
    logger.info("hidden")
    logger.warning("shown")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "| WARNING  | tests.test_logging_config:test_text_log_file:" in content
    assert "shown" in content
    assert "hidden" not in content
