"""集中配置管理

替代各模块散落的默认常量，提供统一的配置入口。
支持从 YAML 文件加载 + 编程式覆盖。

配置对象由 CLI 入口构造后显式传入 ServiceContainer，不存在进程级全局配置。
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any

from bower_git.core.exceptions import ConfigError
from bower_git.utils.yaml_io import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".bower-git.yml"


@dataclass
class Config:
    """运行配置"""

    # 组件清单
    manifest_name: str = "bower.json"
    vcs_dir: str = ".git"

    # clone
    git_bin: str = "git"
    default_branch: str = "master"
    clone_timeout: int | None = None  # 秒，None 表示不限时

    # 临时目录
    scratch_prefix: str = "tmp"

    # 执行
    max_workers: int = 8

    # 自定义扩展 (放不到字段里的配置项)
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.max_workers, int) or self.max_workers < 1:
            raise ConfigError(f"max_workers 必须为正整数: {self.max_workers!r}")
        if self.clone_timeout is not None and (
            not isinstance(self.clone_timeout, int) or self.clone_timeout <= 0
        ):
            raise ConfigError(f"clone_timeout 必须为正整数或留空: {self.clone_timeout!r}")
        if not self.manifest_name:
            raise ConfigError("manifest_name 不能为空")

    @classmethod
    def from_file(cls, path: str = DEFAULT_CONFIG_FILE) -> Config:
        """从 YAML 文件加载配置，不存在则返回默认"""
        data = load_yaml(path)
        if not data:
            return cls()
        known = {f.name for f in cls.__dataclass_fields__.values()} - {"extra"}
        matched = {k: v for k, v in data.items() if k in known}
        extra = {k: v for k, v in data.items() if k not in known}
        cfg = cls(**matched)
        cfg.extra = extra
        logger.debug("配置已加载: %s", path)
        return cfg

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
