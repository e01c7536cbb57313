import pytest
from pydantic import SecretStr

from okxapi.config import ClientConfig, USER_AGENT
from okxapi.environment import load_config, BASE_URL_ENV_KEYS


ENV_KEYS = ["OKX_API_KEY", "OKX_SECRET_KEY", "OKX_PASSPHRASE", *BASE_URL_ENV_KEYS.values()]


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch also removes whatever load_dotenv adds
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


def test_credentials_from_environment(clean_env):
    clean_env.setenv("OKX_API_KEY", "api-key-foo")
    clean_env.setenv("OKX_SECRET_KEY", "secret-foo")
    clean_env.setenv("OKX_PASSPHRASE", "passphrase-foo")

    config = load_config()

    assert isinstance(config, ClientConfig)
    assert isinstance(config.credentials.secret_key, SecretStr)
    assert config.credentials.api_key.get_secret_value() == "api-key-foo"
    assert config.credentials.secret_key.get_secret_value() == "secret-foo"
    assert config.credentials.passphrase.get_secret_value() == "passphrase-foo"
    assert config.credentials.is_complete
    assert config.user_agent == USER_AGENT
    assert "secret-foo" not in repr(config)


def test_missing_values_are_empty(clean_env):
    config = load_config("v3")

    assert not config.credentials.is_complete
    assert config.base_url is None


@pytest.mark.parametrize("version, other", [("v3", "v5"), ("v5", "v3")])
def test_base_url_per_version(clean_env, version, other):
    clean_env.setenv(BASE_URL_ENV_KEYS[version], "https://aws.okx.com")
    clean_env.setenv(BASE_URL_ENV_KEYS[other], "https://other.okx.com")

    assert load_config(version).base_url == "https://aws.okx.com"


def test_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "OKX_API_KEY=api-key-bar\n"
        "OKX_SECRET_KEY=secret-bar\n"
        "OKX_PASSPHRASE=passphrase-bar\n"
        "OKX_BASE_V5_URL=https://www.okx.com\n"
    )

    config = load_config("v5", env_file=str(env_file))

    assert config.credentials.secret_key.get_secret_value() == "secret-bar"
    assert config.base_url == "https://www.okx.com"


def test_environment_wins_over_env_file(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("OKX_API_KEY=api-key-bar\n")
    clean_env.setenv("OKX_API_KEY", "api-key-foo")

    config = load_config(env_file=str(env_file))

    assert config.credentials.api_key.get_secret_value() == "api-key-foo"
