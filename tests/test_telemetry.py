import pytest

from delta_engine.runtime import telemetry
from delta_engine.runtime.telemetry import PRESETS, LogSettings, settings_from_env


def test_settings_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LOG_LEVEL",
        "DISABLE_CONSOLE",
        "NO_COLOR",
        "LOG_JSON",
        "LOG_FILE",
        "LOG_BUFFERED",
    ):
        monkeypatch.delenv(f"DELTA_ENGINE_{name}", raising=False)

    assert settings_from_env() == LogSettings()


def test_settings_from_env_reads_prefixed_variables(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("DELTA_ENGINE_LOG_LEVEL", "debug")
    monkeypatch.setenv("DELTA_ENGINE_DISABLE_CONSOLE", "yes")
    monkeypatch.setenv("DELTA_ENGINE_LOG_FILE", "history.log")
    monkeypatch.setenv("DELTA_ENGINE_LOG_BUFFERED", "1")
    monkeypatch.setenv("DELTA_ENGINE_LOG_BUFFER_SIZE", "512")

    settings = settings_from_env()

    assert settings.level == "debug"
    assert settings.console is False
    assert settings.log_file == "history.log"
    assert settings.buffer_size == 512


def test_presets_cover_inspector_choices() -> None:
    assert set(PRESETS) == {"development", "production", "performance"}
    assert PRESETS["performance"].json is True
    assert PRESETS["production"].console is False


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")
