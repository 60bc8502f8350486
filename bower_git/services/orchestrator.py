"""Checkout 编排器 - 批量将组件目录替换为 Git 仓库

流程（每个目标独立执行，目标之间并行）:
  读取清单 → clone 到临时目录 → 删除原目录 → 临时目录重命名就位

已是 Git 仓库的目录默认跳过，force=True 时重新处理。
单个目标失败不影响同批次的其他目标。
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from bower_git.core.exceptions import (
    BowerGitError,
    NoTargetProvidedError,
    TargetNotFoundError,
)
from bower_git.core.fs import FileSystem, LocalFileSystem
from bower_git.core.models import (
    STATUS_FAILED,
    STATUS_SKIPPED,
    STATUS_SUCCESS,
    BatchResult,
    RunOutcome,
)
from bower_git.services.cloner import RepositoryCloner
from bower_git.services.manifest import ManifestReader
from bower_git.services.swapper import DirectorySwapper

logger = logging.getLogger(__name__)


class CheckoutOrchestrator:
    """批量 checkout 编排器"""

    def __init__(
        self,
        reader: ManifestReader,
        cloner: RepositoryCloner,
        swapper: DirectorySwapper,
        fs: FileSystem | None = None,
        *,
        vcs_dir: str = ".git",
        scratch_prefix: str = "tmp",
        max_workers: int = 8,
    ) -> None:
        self.reader = reader
        self.cloner = cloner
        self.swapper = swapper
        self._fs = fs or LocalFileSystem()
        self.vcs_dir = vcs_dir
        self.scratch_prefix = scratch_prefix
        self.max_workers = max(1, max_workers)

    def run(
        self,
        targets: list[str],
        *,
        branch: str = "",
        force: bool = False,
        expose_first_result: bool = False,
    ) -> BatchResult:
        """处理一批目标目录，返回每个目标的结果

        输入为空抛 NoTargetProvidedError，任一目标不存在抛 TargetNotFoundError，
        两种情况下均不做任何修改。
        """
        paths = self._validate(targets)

        under_vcs = [p for p in paths if self.is_repository(p)]
        plain = [p for p in paths if not self.is_repository(p)]

        result = BatchResult()
        if under_vcs and not force:
            logger.warning(
                "已是 Git 仓库，跳过（使用 --force 重新 checkout）: %s",
                ", ".join(str(p) for p in under_vcs),
            )
            result.outcomes.extend(
                RunOutcome(target=str(p), status=STATUS_SKIPPED, message="already a git repository")
                for p in under_vcs
            )
            todo = plain
        else:
            todo = under_vcs + plain

        processed = self._run_all(todo, branch)
        result.outcomes.extend(processed)

        if expose_first_result:
            first = next((o for o in processed if o.success), None)
            if first is not None:
                result.first_path = first.final_path

        logger.info(
            "完成: %d 成功, %d 失败, %d 跳过",
            len(result.succeeded), len(result.failed), len(result.skipped),
        )
        return result

    def is_repository(self, target: Path) -> bool:
        """目录中是否已有版本控制元数据"""
        return self._fs.exists(target / self.vcs_dir)

    def _validate(self, targets: list[str]) -> list[Path]:
        """整批校验，任何修改之前执行"""
        cleaned = [t for t in (targets or []) if t and str(t).strip()]
        if not cleaned:
            raise NoTargetProvidedError()
        paths = [Path(os.path.abspath(t)) for t in cleaned]
        for p in paths:
            if not self._fs.is_dir(p):
                raise TargetNotFoundError(str(p))
        return paths

    def _run_all(self, targets: list[Path], branch: str) -> list[RunOutcome]:
        """并行处理所有目标，返回结果与输入顺序一致"""
        if not targets:
            return []
        if self.max_workers == 1 or len(targets) == 1:
            return [self._process_one(t, seq, branch) for seq, t in enumerate(targets)]

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(targets))) as executor:
            futures = [
                executor.submit(self._process_one, t, seq, branch)
                for seq, t in enumerate(targets)
            ]
            return [f.result() for f in futures]

    def _process_one(self, target: Path, seq: int, branch: str) -> RunOutcome:
        """单个目标: 读取清单 → clone → 替换，任一步失败即停止"""
        try:
            manifest = self.reader.read(target)
            logger.info("Replacing bower component %s with git repository...", manifest.name)
            scratch = self.scratch_path(target, seq)
            self.cloner.clone(manifest.repository_url, scratch, branch)
            final = self.swapper.swap(target, scratch)
        except BowerGitError as e:
            critical = bool(getattr(e, "critical", False))
            if critical:
                logger.critical("%s: %s", target, e)
            else:
                logger.error("%s: %s", target, e)
            return RunOutcome(
                target=str(target), status=STATUS_FAILED, message=str(e), critical=critical,
            )
        except (OSError, ValueError, RuntimeError) as e:
            logger.exception("处理 '%s' 时出错", target)
            return RunOutcome(
                target=str(target), status=STATUS_FAILED, message=f"{type(e).__name__}: {e}",
            )

        logger.info('Bower component "%s" has been replaced by its git repository', manifest.name)
        return RunOutcome(
            target=str(target),
            status=STATUS_SUCCESS,
            name=manifest.name,
            final_path=str(final),
            message=f"replaced by {manifest.repository_url}",
        )

    def scratch_path(self, target: Path, seq: int = 0) -> Path:
        """与目标同级的临时目录，名称含纳秒时间戳与批内序号"""
        return target.parent / f"{self.scratch_prefix}{time.time_ns()}-{seq}-{target.name}"
