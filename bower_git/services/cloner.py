"""Git 仓库 clone

职责：
- 将远程仓库 clone 到临时目录，可选指定分支
- 失败时清理 git 留下的残余目录，原样返回 git 的错误输出
"""

from __future__ import annotations

import logging
import re
import subprocess
from pathlib import Path

from bower_git.core.exceptions import CloneFailedError
from bower_git.core.fs import FileSystem, LocalFileSystem
from bower_git.utils.shell import CommandExecutor, LocalExecutor

logger = logging.getLogger(__name__)

_SAFE_REF_RE = re.compile(r"^[a-zA-Z0-9_./@\-]+$")


class RepositoryCloner:
    """git clone 封装"""

    def __init__(
        self,
        executor: CommandExecutor | None = None,
        fs: FileSystem | None = None,
        *,
        git_bin: str = "git",
        timeout: int | None = None,
    ) -> None:
        self._executor = executor or LocalExecutor()
        self._fs = fs or LocalFileSystem()
        self.git_bin = git_bin
        self.timeout = timeout

    def clone(self, url: str, destination: str | Path, branch: str = "") -> Path:
        """clone 到 destination（必须不存在），成功返回 destination"""
        dest = Path(destination)
        if branch and not _SAFE_REF_RE.match(branch):
            raise CloneFailedError(f"分支名包含非法字符: {branch}")
        if self._fs.exists(dest):
            raise CloneFailedError(f"clone 目标已存在: {dest}")

        cmd = [self.git_bin, "clone"]
        if branch:
            cmd += ["-b", branch]
        # url 来自 bower.json，"--" 之后不会被当作 git 选项解析
        cmd += ["--", url, str(dest)]

        logger.debug("Cloning from %s to temporary directory %s...", url, dest)
        try:
            r = self._executor.execute(cmd, cwd=str(dest.parent), timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            self._remove_debris(dest)
            raise CloneFailedError(f"git clone 超时 ({self.timeout}秒): {url}") from e
        except OSError as e:
            self._remove_debris(dest)
            raise CloneFailedError(f"无法执行 {self.git_bin}", detail=str(e)) from e

        if not r.success:
            self._remove_debris(dest)
            raise CloneFailedError(
                f"git clone 失败 (rc={r.returncode}): {url}",
                detail=r.stderr.strip(),
            )
        if not self._fs.is_dir(dest):
            raise CloneFailedError(f"git clone 未生成目录: {dest}")

        if r.stdout.strip():
            logger.debug("%s", r.stdout.strip())
        logger.debug("  Done!")
        return dest

    def _remove_debris(self, dest: Path) -> None:
        """清理失败 clone 留下的部分目录（尽力而为）"""
        if not self._fs.exists(dest):
            return
        try:
            self._fs.remove_tree(dest)
            logger.debug("已清理残余目录: %s", dest)
        except OSError as e:
            logger.warning("残余目录清理失败 %s: %s", dest, e)
