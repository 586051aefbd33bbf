"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from vgx.config.defaults import DEFAULT_TOML
from vgx.config.loader import ConfigError, load_config
from vgx.config.schema import DEFAULT_EXTENSIONS, DEFAULT_SKIP_DIRS, threshold_from_percent


class TestThresholdConversion:
    def test_percent_to_fraction(self):
        assert threshold_from_percent(70) == pytest.approx(0.70)
        assert threshold_from_percent(0) == 0.0
        assert threshold_from_percent(100) == 1.0

    @pytest.mark.parametrize("bad", [-1, 100.5, 150])
    def test_out_of_range(self, bad):
        with pytest.raises(ValueError):
            threshold_from_percent(bad)


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.detect.threshold == 70.0
        assert cfg.threshold_fraction == pytest.approx(0.70)
        assert cfg.output.format == "text"
        assert cfg.extensions == DEFAULT_EXTENSIONS
        assert cfg.skip_dirs == DEFAULT_SKIP_DIRS
        assert cfg.patterns.custom_dir == ".vgx-patterns"

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".vgx.toml").write_text(
            'version = "1.0"\n'
            "[detect]\n"
            "threshold = 55\n"
            "[walk]\n"
            'extensions = [".py"]\n'
            "[patterns]\n"
            'disable = ["go_defer"]\n'
            "[output]\n"
            'format = "json"\n'
            "show_patterns = true\n"
        )
        cfg = load_config(tmp_path)
        assert cfg.threshold_fraction == pytest.approx(0.55)
        assert cfg.extensions == (".py",)
        assert cfg.skip_dirs == DEFAULT_SKIP_DIRS
        assert cfg.patterns.disable == ["go_defer"]
        assert cfg.output.format == "json"
        assert cfg.output.show_patterns is True

    def test_unknown_keys_ignored(self, tmp_path: Path):
        (tmp_path / ".vgx.toml").write_text("[detect]\nthreshold = 80\nmystery = 1\n")
        assert load_config(tmp_path).detect.threshold == 80

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text("[detect]\nthreshold = 90\n")
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.detect.threshold == 90

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".vgx.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    @pytest.mark.parametrize("value", ["150", "-5", '"high"', "true"])
    def test_bad_threshold_raises(self, tmp_path: Path, value):
        (tmp_path / ".vgx.toml").write_text(f"[detect]\nthreshold = {value}\n")
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_bad_format_raises(self, tmp_path: Path):
        (tmp_path / ".vgx.toml").write_text('[output]\nformat = "xml"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_starter_template_loads(self, tmp_path: Path):
        (tmp_path / ".vgx.toml").write_text(DEFAULT_TOML)
        cfg = load_config(tmp_path)
        assert cfg.detect.threshold == 70


class TestEnvVarOverrides:
    def test_threshold_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VGX_THRESHOLD", "85")
        assert load_config(tmp_path).threshold_fraction == pytest.approx(0.85)

    @pytest.mark.parametrize("value", ["abc", "101", "-1"])
    def test_invalid_threshold_ignored(self, tmp_path: Path, monkeypatch, value):
        monkeypatch.setenv("VGX_THRESHOLD", value)
        assert load_config(tmp_path).detect.threshold == 70.0

    def test_format_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VGX_FORMAT", "json")
        assert load_config(tmp_path).output.format == "json"

    def test_invalid_format_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VGX_FORMAT", "sarif")
        assert load_config(tmp_path).output.format == "text"

    def test_disable_patterns_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VGX_DISABLE_PATTERNS", "go_defer, promise_chain")
        cfg = load_config(tmp_path)
        assert cfg.patterns.disable == ["go_defer", "promise_chain"]

    def test_skip_dirs_extend_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("VGX_SKIP_DIRS", "generated")
        cfg = load_config(tmp_path)
        assert "generated" in cfg.skip_dirs
        assert "node_modules" in cfg.skip_dirs

    def test_env_beats_file(self, tmp_path: Path, monkeypatch):
        (tmp_path / ".vgx.toml").write_text("[detect]\nthreshold = 40\n")
        monkeypatch.setenv("VGX_THRESHOLD", "60")
        assert load_config(tmp_path).detect.threshold == 60.0
