import os

import pytest

from savings_bonds.config import DEFAULT_CALCULATOR_URL, load_settings

ENV_NAMES = ("EE_CALCULATOR_URL", "EE_USER_AGENT", "EE_REQUEST_DELAY", "EE_REQUEST_TIMEOUT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for name in ENV_NAMES:
        os.environ.pop(name, None)


def test_defaults(tmp_path):
    settings = load_settings(str(tmp_path / "absent.env"))
    assert settings.calculator_url == DEFAULT_CALCULATOR_URL
    assert settings.request_delay == 0.0
    assert settings.request_timeout is None


def test_env_file_values(tmp_path):
    env_file = tmp_path / ".env.local"
    env_file.write_text(
        "EE_CALCULATOR_URL=http://localhost:8080/BC/SBCPrice\n"
        "EE_REQUEST_DELAY=1.5\n"
        "EE_REQUEST_TIMEOUT=20\n"
    )
    settings = load_settings(str(env_file))
    assert settings.calculator_url == "http://localhost:8080/BC/SBCPrice"
    assert settings.request_delay == 1.5
    assert settings.request_timeout == 20.0


def test_environment_wins_over_env_file(monkeypatch, tmp_path):
    env_file = tmp_path / ".env.local"
    env_file.write_text("EE_USER_AGENT=from-file\n")
    monkeypatch.setenv("EE_USER_AGENT", "from-env")
    assert load_settings(str(env_file)).user_agent == "from-env"
