"""
Tests for configuration loading — flags, redux-scaffold.yml, validation.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from redux_scaffold.core.config.loader import (
    CONFIG_FILE,
    ConfigError,
    build_config,
    find_config_file,
    load_file_config,
)
from redux_scaffold.core.models.scaffold import REDUX_PACKAGES


class TestBuildConfig:
    def test_defaults(self, tmp_path: Path):
        config = build_config(project_dir=tmp_path)
        assert config.project_dir == tmp_path.resolve()
        assert config.flags == frozenset()
        assert config.package_manager is None
        assert config.packages == REDUX_PACKAGES

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert build_config().project_dir == tmp_path.resolve()

    def test_unknown_flags_dropped(self, tmp_path: Path):
        config = build_config(project_dir=tmp_path, flags=["yarn", "bun", "verbose"])
        assert config.flags == frozenset({"yarn"})

    def test_reads_config_file(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE).write_text("package_manager: pnpm\n")
        assert build_config(project_dir=tmp_path).package_manager == "pnpm"

    def test_explicit_config_path(self, tmp_path: Path):
        elsewhere = tmp_path / "conf" / "custom.yml"
        elsewhere.parent.mkdir()
        elsewhere.write_text("package_manager: yarn\n")
        config = build_config(project_dir=tmp_path, config_path=elsewhere)
        assert config.package_manager == "yarn"

    def test_frozen(self, tmp_path: Path):
        config = build_config(project_dir=tmp_path)
        with pytest.raises(ValidationError):
            config.package_manager = "npm"


class TestFindConfigFile:
    def test_missing(self, tmp_path: Path):
        assert find_config_file(tmp_path) is None

    def test_found(self, tmp_path: Path):
        (tmp_path / CONFIG_FILE).write_text("")
        assert find_config_file(tmp_path) == tmp_path / CONFIG_FILE


class TestLoadFileConfig:
    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILE
        path.write_text("")
        assert load_file_config(path).package_manager is None

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_file_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILE
        path.write_text("package_manager: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_file_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILE
        path.write_text("- pnpm\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_file_config(path)

    def test_unknown_manager(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILE
        path.write_text("package_manager: bun\n")
        with pytest.raises(ConfigError, match="package_manager"):
            load_file_config(path)

    def test_unknown_key(self, tmp_path: Path):
        path = tmp_path / CONFIG_FILE
        path.write_text("packages: [zustand]\n")
        with pytest.raises(ConfigError, match="packages"):
            load_file_config(path)
