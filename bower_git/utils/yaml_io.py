"""配置文件读取

.bower-git.yml 为可选文件：不存在或为空时返回空字典，由调用方使用默认值。
任何读取或解析失败统一抛 ConfigError，调用方无需区分 yaml / IO 异常。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from bower_git.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# 配置文件只有少量键，超过此大小视为误指向了其他文件
MAX_CONFIG_SIZE = 64 * 1024


def load_yaml(path: str | Path) -> dict[str, Any]:
    """读取 YAML 配置为字典，非字典内容告警后忽略"""
    p = Path(path)
    if not p.is_file():
        return {}

    size = p.stat().st_size
    if size > MAX_CONFIG_SIZE:
        raise ConfigError(f"配置文件过大: {p} ({size} 字节 > {MAX_CONFIG_SIZE})")

    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"配置文件无效: {p} - {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("%s 不是映射类型 (%s)，使用默认配置", p, type(data).__name__)
        return {}
    return data
