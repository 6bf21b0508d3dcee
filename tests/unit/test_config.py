"""
Unit tests for configuration loading.
"""

from pathlib import Path

import pytest

from walkpwd.config import (
    ClipboardConfig,
    Config,
    ConfigurationError,
    GeneratorConfig,
    clear_config_cache,
    get_config,
    load_config,
    load_yaml_file,
)
from walkpwd.config.loader import _parse_env_value, apply_env_overrides, deep_merge


class TestConfigSchema:
    """Test configuration defaults and validation."""

    def test_defaults(self) -> None:
        config = Config()

        assert config.generator.default_length == 12
        assert config.generator.use_symbols is False
        assert config.clipboard.settle_delay == 0.1
        assert config.clipboard.wait_for_exit is False
        assert config.clipboard.library_fallback is True

    def test_length_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            GeneratorConfig(default_length=0)

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValueError):
            ClipboardConfig(settle_delay=-1)


class TestYamlLoading:
    """Test YAML file loading."""

    def test_missing_file(self, temp_dir: Path) -> None:
        assert load_yaml_file(temp_dir / "nope.yaml") == {}

    def test_empty_file(self, temp_dir: Path) -> None:
        path = temp_dir / "config.yaml"
        path.write_text("")

        assert load_yaml_file(path) == {}

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        path = temp_dir / "config.yaml"
        path.write_text("generator: [unclosed")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml_file(path)

    def test_non_mapping(self, temp_dir: Path) -> None:
        path = temp_dir / "config.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_yaml_file(path)


class TestEnvOverrides:
    """Test WALKPWD_* environment overrides."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("true", True),
            ("off", False),
            ("16", 16),
            ("0.25", 0.25),
            ("abc", "abc"),
        ],
    )
    def test_parse_env_value(self, raw: str, expected: object) -> None:
        assert _parse_env_value(raw) == expected

    def test_section_and_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WALKPWD_GENERATOR_DEFAULT_LENGTH", "20")
        monkeypatch.setenv("WALKPWD_CLIPBOARD_WAIT_FOR_EXIT", "yes")

        config = apply_env_overrides({"generator": {"default_length": 12}})

        assert config["generator"]["default_length"] == 20
        assert config["clipboard"]["wait_for_exit"] is True

    def test_home_is_not_a_setting(self, walkpwd_home: Path) -> None:
        config = apply_env_overrides({})

        assert "home" not in config

    def test_deep_merge(self) -> None:
        base = {"generator": {"default_length": 12, "use_symbols": False}}
        override = {"generator": {"use_symbols": True}}

        assert deep_merge(base, override) == {
            "generator": {"default_length": 12, "use_symbols": True}
        }


class TestLoadConfig:
    """Test full configuration loading."""

    def test_defaults_without_file(self, walkpwd_home: Path) -> None:
        assert load_config() == Config()

    def test_file_values(self, walkpwd_home: Path) -> None:
        walkpwd_home.mkdir()
        (walkpwd_home / "config.yaml").write_text(
            "generator:\n  default_length: 24\n  use_symbols: true\n"
        )

        config = load_config()

        assert config.generator.default_length == 24
        assert config.generator.use_symbols is True
        assert config.clipboard == ClipboardConfig()

    def test_env_beats_file(self, walkpwd_home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        walkpwd_home.mkdir()
        (walkpwd_home / "config.yaml").write_text("generator:\n  default_length: 24\n")
        monkeypatch.setenv("WALKPWD_GENERATOR_DEFAULT_LENGTH", "30")

        assert load_config().generator.default_length == 30
        assert load_config(skip_env=True).generator.default_length == 24

    def test_invalid_values(self, walkpwd_home: Path) -> None:
        walkpwd_home.mkdir()
        (walkpwd_home / "config.yaml").write_text("generator:\n  default_length: 0\n")

        with pytest.raises(ConfigurationError, match="validation failed"):
            load_config()

    def test_get_config_is_cached(self, walkpwd_home: Path) -> None:
        first = get_config()

        assert get_config() is first
        assert get_config(reload=True) is not first

        clear_config_cache()
        assert get_config() is not first
