"""bower-git 日志配置

日志统一输出到 stderr（stdout 只留给 --goto 的路径），支持文本与 JSON 两种格式。

环境变量:
    BOWER_GIT_LOG_LEVEL  未指定 --verbose 时的日志级别（默认 WARNING）
    BOWER_GIT_LOG_JSON   为 "1" 时输出 JSON，便于 CI 采集
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone

ENV_LEVEL = "BOWER_GIT_LOG_LEVEL"
ENV_JSON = "BOWER_GIT_LOG_JSON"

# 正常运行由 CLI 摘要输出结果，日志只显示告警以上
DEFAULT_LEVEL = "WARNING"


class JSONFormatter(logging.Formatter):
    """每条日志一行 JSON: timestamp / level / logger / message / thread，异常时附 exception

    thread 字段用于区分并行处理的不同目标。
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "thread": record.threadName,
        }
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level: str = DEFAULT_LEVEL, json_output: bool = False) -> None:
    """重新配置根日志器：清理已有 handlers 后挂一个 stderr handler"""
    reset_logging()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.WARNING))

    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)-7s] %(message)s"))
    root.addHandler(handler)


def setup_cli_logging(verbose: bool = False) -> None:
    """按 --verbose 与环境变量配置日志，--verbose 优先于 BOWER_GIT_LOG_LEVEL"""
    level = "DEBUG" if verbose else os.getenv(ENV_LEVEL, DEFAULT_LEVEL)
    setup_logging(level=level, json_output=os.getenv(ENV_JSON, "") == "1")


def reset_logging() -> None:
    """清理根日志器上已注册的 handlers"""
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
