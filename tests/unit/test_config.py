"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from heidelberg.config import Settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.MAX_PAGE == 52
        assert settings.HYSTERESIS_PAGES == 1
        assert settings.slider_debounce_seconds == 0.3
        assert settings.READER_PATH == "/heidelberg"

    def test_reader_path_is_normalized(self) -> None:
        assert Settings(_env_file=None, READER_PATH="reader/").READER_PATH == "/reader"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_PAGE", "31")
        assert Settings(_env_file=None).MAX_PAGE == 31

    @pytest.mark.parametrize(
        "overrides",
        [
            {"MAX_PAGE": 0},
            {"HYSTERESIS_PAGES": -1},
            {"SLIDER_DEBOUNCE_MS": -5},
            {"INTERSECTION_THRESHOLD": 0},
            {"INTERSECTION_THRESHOLD": 1.5},
        ],
    )
    def test_rejects_invalid_values(self, overrides: dict[str, float]) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, **overrides)
