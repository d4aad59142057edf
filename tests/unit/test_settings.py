import pytest
from pydantic import ValidationError

from playground.config.settings import Settings


@pytest.mark.usefixtures("clear_playground_env")
class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_result_delay(self) -> None:
        s = Settings()
        assert s.result_delay_ms == 50

    def test_default_output_format(self) -> None:
        s = Settings()
        assert s.output_format == "table"


class TestSettingsFromEnv:
    def test_loads_app_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ENV", "production")
        s = Settings()
        assert s.app_env == "production"

    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_result_delay(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESULT_DELAY_MS", "0")
        s = Settings()
        assert s.result_delay_ms == 0

    def test_loads_output_format(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OUTPUT_FORMAT", "json")
        s = Settings()
        assert s.output_format == "json"


class TestSettingsValidation:
    def test_invalid_delay_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESULT_DELAY_MS", "soon")
        with pytest.raises(ValidationError):
            Settings()

    def test_negative_delay_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESULT_DELAY_MS", "-5")
        with pytest.raises(ValidationError):
            Settings()

    def test_unknown_output_format_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OUTPUT_FORMAT", "xml")
        with pytest.raises(ValidationError):
            Settings()
