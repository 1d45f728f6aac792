"""
Tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from deepthought.config import BotConfig, load_config


class TestBotConfig:
    """Tests for the configuration model."""

    def test_defaults(self):
        """Test the default settings."""
        config = BotConfig()
        assert config.name == "Deep_Thought"
        assert config.dealer_bonus == 5.0
        assert config.raise_threshold == 60.0
        assert config.call_thresholds == ((15.0, 100), (22.0, 300), (30.0, 1000))
        assert config.strict is False

    def test_thresholds_from_string(self):
        """Test parsing thresholds from a string."""
        config = BotConfig(call_thresholds="10:50, 20:200")
        assert config.call_thresholds == ((10.0, 50), (20.0, 200))

    def test_thresholds_are_immutable(self):
        """Test that thresholds given as lists are stored as tuples."""
        config = BotConfig(call_thresholds=[[10, 50], [20, 200]])
        assert config.call_thresholds == ((10.0, 50), (20.0, 200))
        assert isinstance(config.call_thresholds, tuple)
        assert all(isinstance(pair, tuple) for pair in config.call_thresholds)

    def test_log_level_uppercased(self):
        """Test that log levels are uppercased."""
        assert BotConfig(log_level="debug").log_level == "DEBUG"

    def test_frozen(self):
        """Test that settings cannot be reassigned."""
        config = BotConfig()
        with pytest.raises(ValidationError):
            config.strict = True

    def test_invalid_port(self):
        """Test that port 0 is rejected."""
        with pytest.raises(ValidationError):
            BotConfig(port=0)


class TestLoadConfig:
    """Tests for building configuration from the environment."""

    def test_environment(self, monkeypatch):
        """Test values read from DEEPTHOUGHT_ variables."""
        monkeypatch.setenv("DEEPTHOUGHT_NAME", "Marvin")
        monkeypatch.setenv("DEEPTHOUGHT_STRICT", "true")
        monkeypatch.setenv("DEEPTHOUGHT_PORT", "9001")
        config = load_config()
        assert config.name == "Marvin"
        assert config.strict is True
        assert config.port == 9001

    def test_overrides_win(self, monkeypatch):
        """Test that keyword overrides beat the environment."""
        monkeypatch.setenv("DEEPTHOUGHT_NAME", "Marvin")
        config = load_config(name="Eddie", stats_dir=None)
        assert config.name == "Eddie"
        assert config.stats_dir is None

    def test_invalid_environment_value(self, monkeypatch):
        """Test that a bad environment value fails validation."""
        monkeypatch.setenv("DEEPTHOUGHT_DEALER_BONUS", "lots")
        with pytest.raises(ValidationError):
            load_config()
