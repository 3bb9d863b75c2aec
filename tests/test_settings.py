import json

import pydantic
import pytest

from dockit.exceptions import ConfigurationError
from dockit.settings import CONFIG_FILENAME, Settings, create_config_file, default_config_path


def test_defaults_without_config_file(tmp_path):
    settings = Settings.load(tmp_path / "missing.json", environ={})
    assert settings.default_bucket == "your-default-bucket"
    assert settings.region == "us-west-2"
    assert settings.dry_run_default is True
    assert settings.enable_nlp_tagging is True
    assert settings.has_credentials is False


def test_file_values_are_read(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(
        json.dumps(
            {
                "defaultBucket": "scans",
                "region": "eu-central-1",
                "dryRunDefault": False,
                "enableNlpTagging": False,
                "awsAccessKeyId": "AKIA",
                "awsSecretAccessKey": "secret",
                "unknown": 1,
            }
        )
    )
    settings = Settings.load(path, environ={})
    assert settings.default_bucket == "scans"
    assert settings.region == "eu-central-1"
    assert settings.dry_run_default is False
    assert settings.enable_nlp_tagging is False
    assert settings.has_credentials


def test_environment_takes_precedence(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"defaultBucket": "file-bucket", "awsAccessKeyId": "file-key", "dryRunDefault": False}))
    env = {"S3_BUCKET": "env-bucket", "AWS_REGION": "ap-south-1", "AWS_ACCESS_KEY_ID": "env-key"}
    settings = Settings.load(path, environ=env)
    assert settings.default_bucket == "env-bucket"
    assert settings.region == "ap-south-1"
    assert settings.aws_access_key_id == "env-key"
    assert settings.dry_run_default is False


def test_blank_environment_values_are_ignored(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"defaultBucket": "file-bucket"}))
    assert Settings.load(path, environ={"S3_BUCKET": ""}).default_bucket == "file-bucket"


def test_malformed_json_falls_back_with_warning(tmp_path, log_messages):
    path = tmp_path / "cfg.json"
    path.write_text("{not json")
    settings = Settings.load(path, environ={})
    assert settings == Settings()
    assert any(m.startswith("WARNING:Failed to parse") for m in log_messages)


def test_non_object_json_falls_back(tmp_path, log_messages):
    path = tmp_path / "cfg.json"
    path.write_text("[1, 2]")
    assert Settings.load(path, environ={}) == Settings()
    assert any(m.startswith("WARNING:") for m in log_messages)


def test_invalid_values_fall_back(tmp_path, log_messages):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"dryRunDefault": "sometimes"}))
    assert Settings.load(path, environ={}).dry_run_default is True
    assert any("Invalid values" in m for m in log_messages)


def test_blank_bucket_uses_default(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"defaultBucket": "  ", "region": None}))
    settings = Settings.load(path, environ={})
    assert settings.default_bucket == "your-default-bucket"
    assert settings.region == "us-west-2"


def test_settings_are_immutable():
    settings = Settings()
    with pytest.raises(pydantic.ValidationError):
        settings.default_bucket = "other"


def test_default_path_uses_home_and_override(isolated_env, monkeypatch, tmp_path):
    assert default_config_path() == isolated_env / CONFIG_FILENAME
    monkeypatch.setenv("DOCKIT_CONFIG", str(tmp_path / "elsewhere.json"))
    assert default_config_path() == tmp_path / "elsewhere.json"


def test_load_reads_default_path(isolated_env):
    (isolated_env / CONFIG_FILENAME).write_text(json.dumps({"defaultBucket": "home-bucket"}))
    assert Settings.load(environ={}).default_bucket == "home-bucket"


def test_create_config_file_writes_defaults(tmp_path):
    path = tmp_path / "nested" / "cfg.json"
    assert create_config_file(path, environ={"AWS_ACCESS_KEY_ID": "AKIA"}) is True
    payload = json.loads(path.read_text())
    assert payload == {
        "defaultBucket": "your-default-bucket",
        "region": "us-west-2",
        "dryRunDefault": True,
        "enableNlpTagging": True,
        "awsAccessKeyId": "AKIA",
        "awsSecretAccessKey": "",
    }


def test_create_config_file_keeps_existing(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text('{"defaultBucket": "mine"}')
    assert create_config_file(path, environ={}) is False
    assert json.loads(path.read_text()) == {"defaultBucket": "mine"}
    assert create_config_file(path, force=True, environ={}) is True
    assert json.loads(path.read_text())["defaultBucket"] == "your-default-bucket"


def test_create_config_file_reports_write_errors(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    with pytest.raises(ConfigurationError):
        create_config_file(blocker / "cfg.json", environ={})


def test_validators_use_field_validator_api():
    decorators = Settings.__pydantic_decorators__
    assert not decorators.validators
    assert set(decorators.field_validators) == {"_default_bucket", "_default_region", "_none_to_empty"}
