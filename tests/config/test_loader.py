"""Tests for YAML configuration loading."""

from pathlib import Path

import pytest

from perlinfield.config import REFERENCE_SEED, PerlinFieldConfig
from perlinfield.config.loader import (
    load_config,
    load_config_with_overrides,
    load_yaml,
    merge_configs,
    save_config,
    substitute_params,
    validate_config_file,
)
from perlinfield.config.schema import ConfigurationError

REPO_ROOT = Path(__file__).resolve().parents[2]


def _write(path: Path, text: str) -> Path:
    path.write_text(text)
    return path


class TestSubstituteParams:
    """Test ${param} substitution."""

    def test_runtime_params(self):
        config = {"noise": {"octaves": "${octaves}", "seed": [1, "${octaves}"]}}
        assert substitute_params(config, {"octaves": 4}) == {"noise": {"octaves": 4, "seed": [1, 4]}}

    def test_environment_fallback(self, monkeypatch):
        monkeypatch.setenv("PERLINFIELD_TEST_HEIGHT", "96")
        assert substitute_params({"h": "${PERLINFIELD_TEST_HEIGHT}"}, {}) == {"h": "96"}

    def test_runtime_takes_priority(self, monkeypatch):
        monkeypatch.setenv("size", "1")
        assert substitute_params("${size}", {"size": 2}) == 2

    def test_missing_parameter(self, monkeypatch):
        monkeypatch.delenv("perlinfield_missing", raising=False)
        with pytest.raises(ConfigurationError, match="Missing parameter"):
            substitute_params({"x": "${perlinfield_missing}"}, {})

    def test_partial_strings_untouched(self):
        assert substitute_params("prefix ${x}", {"x": 1}) == "prefix ${x}"


class TestLoadConfig:
    """Test YAML loading and validation."""

    def test_reference_config_file(self):
        config = load_config(REPO_ROOT / "configs" / "reference.yaml")
        assert config.noise.seed == REFERENCE_SEED
        assert config.noise.octaves == 8
        assert config.metadata.name == "reference"

    def test_empty_file_gives_defaults(self, tmp_path):
        config = load_config(_write(tmp_path / "empty.yaml", ""))
        assert config == PerlinFieldConfig()

    def test_runtime_params(self, tmp_path):
        path = _write(tmp_path / "c.yaml", "noise:\n  octaves: ${octaves}\n")
        assert load_config(path, runtime_params={"octaves": 3}).noise.octaves == 3

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = _write(tmp_path / "bad.yaml", "noise: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping(self, tmp_path):
        path = _write(tmp_path / "list.yaml", "- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="YAML dict"):
            load_yaml(path)

    def test_validation_failure(self, tmp_path):
        path = _write(tmp_path / "c.yaml", "noise:\n  attenuation: 1.5\n")
        with pytest.raises(ConfigurationError, match="validation failed"):
            load_config(path)


class TestSaveConfig:
    """Test YAML round trip."""

    def test_round_trip(self, tmp_path):
        original = PerlinFieldConfig(
            noise={"height": 100, "width": 50, "octaves": 3, "attenuation": 0.5, "seed": (1 << 63, 17)},
            output={"image_path": "a/b.png", "field_path": "a/b.h5"},
        )
        path = tmp_path / "nested" / "saved.yaml"
        save_config(original, path)

        assert "0x8000000000000000" in path.read_text()
        assert load_config(path) == original


class TestValidateConfigFile:
    """Test boolean validation helper."""

    def test_valid(self, tmp_path, capsys):
        assert validate_config_file(_write(tmp_path / "ok.yaml", "noise:\n  octaves: 2\n"))
        assert "valid" in capsys.readouterr().out

    def test_invalid(self, tmp_path, capsys):
        assert not validate_config_file(_write(tmp_path / "bad.yaml", "noise:\n  height: 0\n"))
        assert "invalid" in capsys.readouterr().out


class TestMergeConfigs:
    """Test deep merge and override loading."""

    def test_deep_merge(self):
        base = {"noise": {"octaves": 8, "height": 512}}
        override = {"noise": {"height": 64}, "output": {"image_path": "x.png"}}
        assert merge_configs(base, override) == {
            "noise": {"octaves": 8, "height": 64},
            "output": {"image_path": "x.png"},
        }

    def test_base_not_mutated(self):
        base = {"noise": {"octaves": 8}}
        merge_configs(base, {"noise": {"octaves": 2}})
        assert base == {"noise": {"octaves": 8}}

    def test_load_with_overrides(self, tmp_path):
        base = _write(tmp_path / "base.yaml", "noise:\n  octaves: 8\n  height: 512\n")
        override = _write(tmp_path / "small.yaml", "noise:\n  height: 32\n  width: 32\n")
        config = load_config_with_overrides(base, override)
        assert (config.noise.octaves, config.noise.height, config.noise.width) == (8, 32, 32)
