from pathlib import Path

import pytest
from pytest import MonkeyPatch

from backoffice_auth.config.loader import CONFIG_ENV_VAR, load_auth_config

CONFIG_YAML = """
providers:
  - type: google
    client_id: google-client
    client_secret: google-secret
    style: btn-google
    icon: fa-google
    auto_link:
      auto_link_external_account: true
      default_user_groups: writer
  - type: oidc
    authentication_type: AzureADB2C
    caption: Company login
    authority: https://login.example.com/tenant/v2.0
    client_id: b2c-client
    client_secret: b2c-secret
    callback_path: /signin-b2c
    deny_local_login: true
    auto_login_redirect: true
logging:
  level: INFO
"""


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


def test_load_explicit_path(tmp_path: Path) -> None:
    config_file = tmp_path / "auth.yml"
    config_file.write_text(CONFIG_YAML)

    config = load_auth_config(config_file)

    assert [p.type for p in config.providers] == ["google", "oidc"]
    google, b2c = config.providers
    assert google.auto_link is not None
    assert google.auto_link.default_user_groups == ["writer"]
    assert b2c.callback_path == "/signin-b2c"
    assert b2c.deny_local_login is True
    assert config.logging.level == "INFO"


def test_load_from_env_var(tmp_path: Path, monkeypatch: MonkeyPatch) -> None:
    config_file = tmp_path / "from-env.yml"
    config_file.write_text(CONFIG_YAML)
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

    assert len(load_auth_config().providers) == 2


def test_load_from_working_directory(tmp_path: Path) -> None:
    (tmp_path / "backoffice-auth.yml").write_text(CONFIG_YAML)

    assert len(load_auth_config().providers) == 2


def test_no_config_file_gives_empty_config() -> None:
    config = load_auth_config()

    assert config.providers == []


def test_missing_explicit_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_auth_config(tmp_path / "missing.yml")


def test_empty_file_gives_empty_config(tmp_path: Path) -> None:
    config_file = tmp_path / "empty.yml"
    config_file.write_text("")

    assert load_auth_config(config_file).providers == []


def test_invalid_yaml_raises_value_error(tmp_path: Path) -> None:
    config_file = tmp_path / "broken.yml"
    config_file.write_text("providers: [unclosed")

    with pytest.raises(ValueError, match="Failed to parse YAML"):
        load_auth_config(config_file)


@pytest.mark.parametrize(
    "body",
    [
        "providers:\n  - type: myspace\n    client_id: a\n    client_secret: b\n",
        "providers:\n  - type: keycloak\n    client_id: a\n    client_secret: b\n",
        "providers:\n  - type: oidc\n    client_id: a\n    client_secret: b\n",
        "providers:\n  - type: google\n    client_id: a\n    client_secret: b\n"
        "    callback_path: no-slash\n",
        "unknown_section: true\n",
        "- just\n- a list\n",
    ],
)
def test_invalid_config_raises_value_error(body: str, tmp_path: Path) -> None:
    config_file = tmp_path / "invalid.yml"
    config_file.write_text(body)

    with pytest.raises(ValueError):
        load_auth_config(config_file)
