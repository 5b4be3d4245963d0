"""
Unit tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from huissier.config.settings import Settings, load_config

SECRET = "settings-test-secret-key"


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    (tmp_path / "default.yaml").write_text(
        "APP_NAME: FromDefault\nJWT_EXPIRATION_HOURS: 24\nLOG_LEVEL: INFO\n"
    )
    (tmp_path / "test.yaml").write_text("JWT_EXPIRATION_HOURS: 12\n")
    monkeypatch.setenv("HUISSIER_CONFIG_DIR", str(tmp_path))
    monkeypatch.setenv("JWT_SECRET_KEY", SECRET)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("JWT_EXPIRATION_HOURS", raising=False)
    monkeypatch.delenv("APP_NAME", raising=False)
    return tmp_path


class TestLoadConfig:
    def test_environment_yaml_overrides_default(self, config_dir):
        settings = load_config(env="test")

        assert settings.APP_NAME == "FromDefault"
        assert settings.JWT_EXPIRATION_HOURS == 12
        assert settings.ENV == "test"
        assert settings.JWT_SECRET_KEY == SECRET

    def test_environment_variables_override_yaml(self, config_dir, monkeypatch):
        monkeypatch.setenv("JWT_EXPIRATION_HOURS", "6")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = load_config(env="test")

        assert settings.JWT_EXPIRATION_HOURS == 6
        assert settings.LOG_LEVEL == "DEBUG"


class TestSettingsValidation:
    def test_defaults(self):
        settings = Settings(JWT_SECRET_KEY=SECRET)

        assert settings.JWT_EXPIRATION_HOURS == 72
        assert settings.NONCE_UPPER_BOUND == 1_000_000
        assert settings.NONCE_ROTATE_ON_VERIFY is False
        assert settings.API_PREFIX == "/api/user"

    def test_short_secret_rejected(self):
        with pytest.raises(ValidationError):
            Settings(JWT_SECRET_KEY="short")

    def test_bad_log_level(self):
        with pytest.raises(ValidationError):
            Settings(JWT_SECRET_KEY=SECRET, LOG_LEVEL="LOUD")

    def test_asymmetric_algorithm_rejected(self):
        with pytest.raises(ValidationError):
            Settings(JWT_SECRET_KEY=SECRET, JWT_ALGORITHM="RS256")

    @pytest.mark.parametrize(
        "raw, expected",
        [("api/user/", "/api/user"), ("/v1", "/v1"), ("/", "")],
    )
    def test_api_prefix_normalized(self, raw, expected):
        assert Settings(JWT_SECRET_KEY=SECRET, API_PREFIX=raw).API_PREFIX == expected
