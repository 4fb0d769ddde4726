import logging

from carnavalito.app.config import Settings
from carnavalito.utils.logging_config import LOG_LEVEL_ENV, configure_logging


def test_settings_defaults_without_environment():
    settings = Settings.from_env({})

    assert settings == Settings()
    assert settings.server_port == 7860
    assert settings.share is False
    assert settings.log_level is None


def test_settings_read_environment_values():
    settings = Settings.from_env(
        {
            "CARNAVALITO_MAX_TEXT_LENGTH": "800",
            "CARNAVALITO_SERVER_NAME": "127.0.0.1",
            "CARNAVALITO_SERVER_PORT": "9000",
            "CARNAVALITO_SHARE": "yes",
            "CARNAVALITO_LOG_LEVEL": "debug",
        }
    )

    assert settings.max_text_length == 800
    assert settings.server_name == "127.0.0.1"
    assert settings.server_port == 9000
    assert settings.share is True
    assert settings.log_level == "debug"


def test_invalid_numbers_fall_back_to_defaults():
    settings = Settings.from_env(
        {"CARNAVALITO_MAX_VERSE_LENGTH": "lots", "CARNAVALITO_SERVER_PORT": "-1"}
    )

    assert settings.max_verse_length == 200
    assert settings.server_port == 7860


def test_from_env_reads_os_environ(monkeypatch):
    monkeypatch.setenv("CARNAVALITO_MAX_WORD_LENGTH", "20")

    assert Settings.from_env().max_word_length == 20


def test_configure_logging_explicit_level_wins(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    try:
        assert configure_logging("DEBUG", force=True) == logging.DEBUG
        assert logging.getLogger("carnavalito").level == logging.DEBUG
    finally:
        configure_logging(logging.INFO, force=True)


def test_configure_logging_reads_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
    try:
        assert configure_logging(force=True) == logging.WARNING
    finally:
        configure_logging(logging.INFO, force=True)


def test_unknown_level_name_falls_back_to_info():
    try:
        assert configure_logging("chatty", force=True) == logging.INFO
    finally:
        configure_logging(logging.INFO, force=True)


def test_configure_logging_is_idempotent_without_force():
    configure_logging(logging.INFO, force=True)

    assert configure_logging("DEBUG") == logging.INFO
