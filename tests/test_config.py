import pytest

from vots_core.config import load_settings
from vots_core.logging_setup import token_hint


def test_defaults():
    settings = load_settings({})
    assert settings.vault_addr == "http://127.0.0.1:8200"
    assert settings.max_upload_kb == 768
    assert settings.max_upload_bytes == 768 * 1024
    assert settings.workers == 10
    assert settings.proxy_headers is True
    assert settings.log_file is None


def test_values_from_env():
    settings = load_settings(
        {
            "VAULT_ADDR": "https://vault.example.com:8200/",
            "VAULT_TOKEN": "s.admin",
            "VAULT_TIMEOUT": "2.5",
            "LISTEN_IP": "0.0.0.0",
            "LISTEN_PORT": "3000",
            "WORKERS": "4",
            "PROXY_HEADERS": "false",
            "MAX_UPLOAD_KB": "100",
            "LOG_LEVEL": "debug",
            "LOG_FILE": "/var/log/vots.log",
        }
    )
    assert settings.vault_addr == "https://vault.example.com:8200"
    assert settings.vault_token == "s.admin"
    assert settings.vault_timeout == 2.5
    assert settings.listen_port == 3000
    assert settings.workers == 4
    assert settings.proxy_headers is False
    assert settings.max_upload_bytes == 100 * 1024
    assert settings.log_level == "DEBUG"
    assert settings.log_file == "/var/log/vots.log"


def test_malformed_number_fails_at_startup():
    with pytest.raises(ValueError):
        load_settings({"LISTEN_PORT": "http"})


def test_settings_are_immutable():
    settings = load_settings({})
    with pytest.raises(Exception):
        settings.vault_token = "other"


def test_token_hint_never_shows_full_token():
    assert token_hint("hvs.CAESIJabcdefghijkl") == "hvs.CAES…"
    assert token_hint("") == "<vacío>"


@pytest.mark.parametrize(
    "raw,expected",
    [("warn", "WARNING"), ("WARNING", "WARNING"), ("fatal", "CRITICAL"), (" debug ", "DEBUG"), ("", "INFO")],
)
def test_log_level_is_normalized(raw, expected):
    assert load_settings({"LOG_LEVEL": raw}).log_level == expected


@pytest.mark.parametrize("raw", ["VERBOSE", "trace", "10"])
def test_unknown_log_level_fails_at_startup(raw):
    with pytest.raises(ValueError):
        load_settings({"LOG_LEVEL": raw})
