"""Settings — environment overrides and prefix normalization."""

import pytest

from student_api.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.log_level == "INFO"
    assert settings.cors_origins == ["http://localhost:5173"]


@pytest.mark.parametrize(
    "raw, expected",
    [("/api/v1", "/api/v1"), ("api/v2/", "/api/v2"), ("/", ""), ("", "")],
)
def test_api_prefix_normalized(raw, expected):
    assert Settings(_env_file=None, api_prefix=raw).api_prefix == expected


def test_env_override(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    assert Settings(_env_file=None).log_level == "DEBUG"


def test_server_defaults():
    settings = Settings(_env_file=None)
    assert (settings.host, settings.port) == ("0.0.0.0", 8000)
