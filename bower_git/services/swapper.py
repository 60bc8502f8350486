"""目录替换 - 删除原组件目录，将 clone 好的临时目录重命名就位

两个检查点：
  1. 递归删除 target —— 失败时 scratch 原样保留，原目录可能部分残留
  2. scratch 重命名为 target —— 失败时原目录已不存在，scratch 保留待人工处理

不做自动重试，也不会在任何失败路径上删除 scratch。
"""

from __future__ import annotations

import logging
from pathlib import Path

from bower_git.core.exceptions import SwapFailedError
from bower_git.core.fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)


class DirectorySwapper:
    """目录替换器"""

    def __init__(self, fs: FileSystem | None = None) -> None:
        self._fs = fs or LocalFileSystem()

    def swap(self, target: str | Path, scratch: str | Path) -> Path:
        """用 scratch 替换 target，成功返回 target 路径"""
        target, scratch = Path(target), Path(scratch)
        if not self._fs.is_dir(scratch):
            raise SwapFailedError(f"临时目录不存在: {scratch}", scratch=str(scratch))

        logger.debug("Deleting bower component folder %s...", target)
        try:
            self._fs.remove_tree(target)
        except OSError as e:
            raise SwapFailedError(
                f"Could not delete bower component in {target}: {e}; "
                f"clone preserved at {scratch}",
                scratch=str(scratch),
            ) from e
        if self._fs.exists(target):
            raise SwapFailedError(
                f"Could not delete bower component in {target}; clone preserved at {scratch}",
                scratch=str(scratch),
            )

        logger.debug("Renaming %s -> %s...", scratch, target)
        try:
            self._fs.rename(scratch, target)
        except OSError as e:
            logger.critical(
                "原目录 %s 已删除但重命名失败，clone 保留在 %s，请手动完成重命名", target, scratch,
            )
            raise SwapFailedError(
                f"Original content of {target} was deleted but renaming {scratch} failed: {e}; "
                f"move {scratch} to {target} manually",
                scratch=str(scratch),
                original_deleted=True,
            ) from e
        if not self._fs.is_dir(target):
            raise SwapFailedError(
                f"Original content of {target} was deleted but {scratch} did not land in place",
                scratch=str(scratch),
                original_deleted=True,
            )
        return target
