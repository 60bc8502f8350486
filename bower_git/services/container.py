"""服务容器 — 统一依赖注入

所有组件通过容器获取，同一容器内共享同一个 Config、CommandExecutor 和 FileSystem。

依赖关系图（→ 表示依赖）:
  orchestrator → reader, cloner, swapper
  cloner       → executor, fs
  reader, swapper → fs

用法:
    cfg = Config.from_file(".bower-git.yml")
    container = ServiceContainer(config=cfg)
    result = container.orchestrator.run(["bower_components/widget"])

    # 测试中注入 fake 执行器 / 文件系统
    container = ServiceContainer(executor=FakeGit(), fs=FlakyFs())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bower_git.core.config import Config
from bower_git.core.fs import FileSystem, LocalFileSystem
from bower_git.utils.shell import CommandExecutor, LocalExecutor

if TYPE_CHECKING:
    from bower_git.services.cloner import RepositoryCloner
    from bower_git.services.manifest import ManifestReader
    from bower_git.services.orchestrator import CheckoutOrchestrator
    from bower_git.services.swapper import DirectorySwapper

logger = logging.getLogger(__name__)


class ServiceContainer:
    """懒加载服务容器"""

    def __init__(
        self,
        config: Config | None = None,
        *,
        executor: CommandExecutor | None = None,
        fs: FileSystem | None = None,
    ) -> None:
        self._instances: dict[str, object] = {}
        self._config = config or Config()
        self._executor = executor or LocalExecutor()
        self._fs = fs or LocalFileSystem()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def reader(self) -> ManifestReader:
        if "reader" not in self._instances:
            from bower_git.services.manifest import ManifestReader
            self._instances["reader"] = ManifestReader(
                manifest_name=self._config.manifest_name, fs=self._fs,
            )
        return self._instances["reader"]  # type: ignore[return-value]

    @property
    def cloner(self) -> RepositoryCloner:
        if "cloner" not in self._instances:
            from bower_git.services.cloner import RepositoryCloner
            self._instances["cloner"] = RepositoryCloner(
                self._executor, self._fs,
                git_bin=self._config.git_bin,
                timeout=self._config.clone_timeout,
            )
        return self._instances["cloner"]  # type: ignore[return-value]

    @property
    def swapper(self) -> DirectorySwapper:
        if "swapper" not in self._instances:
            from bower_git.services.swapper import DirectorySwapper
            self._instances["swapper"] = DirectorySwapper(fs=self._fs)
        return self._instances["swapper"]  # type: ignore[return-value]

    @property
    def orchestrator(self) -> CheckoutOrchestrator:
        if "orchestrator" not in self._instances:
            from bower_git.services.orchestrator import CheckoutOrchestrator
            self._instances["orchestrator"] = CheckoutOrchestrator(
                self.reader, self.cloner, self.swapper, self._fs,
                vcs_dir=self._config.vcs_dir,
                scratch_prefix=self._config.scratch_prefix,
                max_workers=self._config.max_workers,
            )
        return self._instances["orchestrator"]  # type: ignore[return-value]
