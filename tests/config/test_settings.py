"""Tests for IsOlderThanSettings."""

import pytest
from pydantic import ValidationError

from isolderthan.config.settings import IsOlderThanSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("JSON_OUTPUT", "QUIET", "VERBOSE", "LOG_JSON"):
        monkeypatch.delenv(f"ISOLDERTHAN_{name}", raising=False)


class TestIsOlderThanSettings:
    def test_defaults(self) -> None:
        settings = IsOlderThanSettings.from_cli()
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False

    def test_cli_flags(self) -> None:
        settings = IsOlderThanSettings.from_cli(json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ISOLDERTHAN_QUIET", "1")
        assert IsOlderThanSettings.from_cli().quiet is True

    def test_unset_flag_does_not_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ISOLDERTHAN_VERBOSE", "true")
        assert IsOlderThanSettings.from_cli(verbose=False).verbose is True

    def test_frozen(self) -> None:
        settings = IsOlderThanSettings.from_cli()
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]
