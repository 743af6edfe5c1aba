"""Tests for config file discovery."""

from pathlib import Path

import pytest

from pieshop.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    DATA_DIRNAME,
    find_config,
    resolve_shop_root,
)


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[shop]\nname = "test"\n')
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[shop]\nname = "test"\n')
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        monkeypatch.chdir(tmp_path)
        assert find_config() == config_file.resolve()

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text('[shop]\nname = "env"\n')
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path) == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestResolveShopRoot:
    def test_config_parent(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert resolve_shop_root(config_file, tmp_path / "elsewhere") == tmp_path.resolve()

    def test_nearest_data_dir(self, tmp_path: Path) -> None:
        (tmp_path / DATA_DIRNAME).mkdir()
        child = tmp_path / "counter" / "till"
        child.mkdir(parents=True)
        assert resolve_shop_root(None, child) == tmp_path.resolve()

    def test_falls_back_to_start(self, tmp_path: Path) -> None:
        assert resolve_shop_root(None, tmp_path) == tmp_path.resolve()

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert resolve_shop_root(None) == tmp_path.resolve()
