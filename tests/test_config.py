"""Tests for the config module."""

from columndiff.config import Settings, _env_flag, _env_float


class TestEnvHelpers:
    """Test environment parsing helpers."""

    def test_env_flag_true_values(self, monkeypatch):
        for value in ("1", "true", "TRUE", "yes"):
            monkeypatch.setenv("COLUMNDIFF_TEST_FLAG", value)
            assert _env_flag("COLUMNDIFF_TEST_FLAG") is True

    def test_env_flag_unset(self, monkeypatch):
        monkeypatch.delenv("COLUMNDIFF_TEST_FLAG", raising=False)
        assert _env_flag("COLUMNDIFF_TEST_FLAG") is False

    def test_env_float_parses(self, monkeypatch):
        monkeypatch.setenv("COLUMNDIFF_TEST_FLOAT", "0.75")
        assert _env_float("COLUMNDIFF_TEST_FLOAT", 0.1) == 0.75

    def test_env_float_falls_back_on_garbage(self, monkeypatch):
        monkeypatch.setenv("COLUMNDIFF_TEST_FLOAT", "lots")
        assert _env_float("COLUMNDIFF_TEST_FLOAT", 0.1) == 0.1


class TestSettings:
    """Test Settings configuration."""

    def test_explicit_values(self):
        settings = Settings(
            header_confidence=0.9,
            fallback_confidence=0.4,
            high_confidence_threshold=0.8,
            ignore_case=True,
            log_level="debug",
            debug=True,
        )

        assert settings.header_confidence == 0.9
        assert settings.fallback_confidence == 0.4
        assert settings.high_confidence_threshold == 0.8
        assert settings.ignore_case is True
        assert settings.log_level == "DEBUG"
        assert settings.debug is True

    def test_confidences_are_clamped(self):
        settings = Settings(header_confidence=1.7, fallback_confidence=-0.2)

        assert settings.header_confidence == 1.0
        assert settings.fallback_confidence == 0.0

    def test_unknown_log_level_falls_back(self):
        assert Settings(log_level="chatty").log_level == "WARNING"
