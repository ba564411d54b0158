"""Tests for configuration management."""

import os
import random
from unittest.mock import patch

from phrasedeck.config import Config
from phrasedeck.constants import REVIEW_LOG_LIMIT


class TestConfigDefaults:
    """Tests for Config dataclass defaults."""

    def test_config_default_values(self):
        """Config should have sensible defaults."""
        config = Config()
        assert config.timezone == "Europe/Dublin"
        assert config.review_log_limit == REVIEW_LOG_LIMIT
        assert config.random_seed is None
        assert config.log_level == "INFO"


class TestConfigFromEnv:
    """Tests for Config.from_env() loading."""

    def test_from_env_loads_all_vars(self):
        """from_env should load all environment variables."""
        env_vars = {
            "TIMEZONE": "Europe/Berlin",
            "REVIEW_LOG_LIMIT": "100",
            "RANDOM_SEED": "42",
            "LOG_LEVEL": "debug",
        }
        with patch.dict(os.environ, env_vars, clear=False):
            config = Config.from_env()

        assert config.timezone == "Europe/Berlin"
        assert config.review_log_limit == 100
        assert config.random_seed == 42
        assert config.log_level == "DEBUG"

    def test_from_env_uses_defaults_for_missing(self):
        """from_env should use defaults when vars are missing."""
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env(env_file="/nonexistent/.env")

        assert config.timezone == "Europe/Dublin"
        assert config.review_log_limit == REVIEW_LOG_LIMIT
        assert config.random_seed is None

    def test_from_env_invalid_numbers_fall_back(self):
        env_vars = {"REVIEW_LOG_LIMIT": "lots", "RANDOM_SEED": "abc"}
        with patch.dict(os.environ, env_vars, clear=True):
            config = Config.from_env(env_file="/nonexistent/.env")

        assert config.review_log_limit == REVIEW_LOG_LIMIT
        assert config.random_seed is None

    def test_from_env_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("TIMEZONE=America/Mexico_City\nRANDOM_SEED=7\n")
        with patch.dict(os.environ, {}, clear=True):
            config = Config.from_env(env_file=str(env_file))

        assert config.timezone == "America/Mexico_City"
        assert config.random_seed == 7


class TestMakeRng:
    """Tests for Config.make_rng()."""

    def test_seeded_rng_is_reproducible(self):
        config = Config(random_seed=3)
        assert config.make_rng().random() == random.Random(3).random()

    def test_returns_random_instance(self):
        assert isinstance(Config().make_rng(), random.Random)


class TestSafeInt:
    """Tests for Config._safe_int helper."""

    def test_safe_int_valid_integer(self):
        assert Config._safe_int("123") == 123
        assert Config._safe_int("-5") == -5

    def test_safe_int_invalid_returns_default(self):
        assert Config._safe_int("not_a_number") == 0
        assert Config._safe_int("12.5") == 0
        assert Config._safe_int("") == 0

    def test_safe_int_none_default(self):
        assert Config._safe_int(None, None) is None
        assert Config._safe_int("bad", default=42) == 42
