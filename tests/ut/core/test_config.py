"""Config 加载与校验测试"""

from __future__ import annotations

from pathlib import Path

import pytest

from bower_git.core.config import Config
from bower_git.core.exceptions import ConfigError


class TestConfig:
    def test_defaults(self) -> None:
        cfg = Config()
        assert cfg.manifest_name == "bower.json"
        assert cfg.default_branch == "master"
        assert cfg.vcs_dir == ".git"
        assert cfg.clone_timeout is None

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        cfg = Config.from_file(str(tmp_path / "nope.yml"))
        assert cfg == Config()

    def test_from_file_with_extra(self, tmp_path: Path) -> None:
        f = tmp_path / "cfg.yml"
        f.write_text("default_branch: develop\nmax_workers: 2\nteam: web\n", encoding="utf-8")
        cfg = Config.from_file(str(f))
        assert cfg.default_branch == "develop"
        assert cfg.max_workers == 2
        assert cfg.extra == {"team": "web"}

    def test_malformed_yaml_raises(self, tmp_path: Path) -> None:
        f = tmp_path / "cfg.yml"
        f.write_text("a: [1, 2\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="配置文件无效"):
            Config.from_file(str(f))

    def test_non_mapping_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / "cfg.yml"
        f.write_text("- a\n- b\n", encoding="utf-8")
        assert Config.from_file(str(f)) == Config()

    @pytest.mark.parametrize("kwargs", [
        {"max_workers": 0},
        {"max_workers": "many"},
        {"clone_timeout": -5},
        {"manifest_name": ""},
    ])
    def test_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(ConfigError):
            Config(**kwargs)

    def test_to_dict_roundtrip_fields(self) -> None:
        d = Config(default_branch="main").to_dict()
        assert d["default_branch"] == "main"
        assert "extra" in d
