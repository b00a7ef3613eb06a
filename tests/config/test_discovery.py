"""Tests for vrule.toml discovery and loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from vrule.config.discovery import CONFIG_ENV_VAR, find_config, load_config


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_in_start_directory(self, tmp_path: Path) -> None:
        (tmp_path / "vrule.toml").write_text("")
        assert find_config(tmp_path) == (tmp_path / "vrule.toml").resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "vrule.toml").write_text("")
        deep = tmp_path / "a" / "b" / "c"
        deep.mkdir(parents=True)
        assert find_config(deep) == (tmp_path / "vrule.toml").resolve()

    def test_nearest_wins(self, tmp_path: Path) -> None:
        (tmp_path / "vrule.toml").write_text("")
        inner = tmp_path / "inner"
        inner.mkdir()
        (inner / "vrule.toml").write_text("")
        assert find_config(inner) == (inner / "vrule.toml").resolve()

    def test_not_found(self, tmp_path: Path) -> None:
        # tmp_path lives under the system temp dir, which holds no vrule.toml
        assert find_config(tmp_path) is None

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "vrule.toml").write_text("")
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config(tmp_path) == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestLoadConfig:
    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        config = load_config(cwd=tmp_path)
        assert config.check.schema_path is None
        assert config.plugins.enabled is True

    def test_sparse_file(self, tmp_path: Path) -> None:
        path = tmp_path / "vrule.toml"
        path.write_text('[check]\nrule = "Node"\n')
        config = load_config(path)
        assert config.check.rule == "Node"
        assert config.check.schema_path is None
        assert config.plugins.local_dir == ".vrule/plugins"

    def test_discovers_from_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "vrule.toml").write_text("[plugins]\nenabled = false\n")
        assert load_config(cwd=tmp_path).plugins.enabled is False

    def test_invalid_value(self, tmp_path: Path) -> None:
        path = tmp_path / "vrule.toml"
        path.write_text('[plugins]\nenabled = "sometimes"\n')
        with pytest.raises(ValidationError):
            load_config(path)

    def test_models_are_frozen(self, tmp_path: Path) -> None:
        config = load_config(cwd=tmp_path)
        with pytest.raises(ValidationError):
            config.check.rule = "Other"  # type: ignore[misc]
