"""组件清单读取 - 解析 bower.json 中的名称与仓库信息"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from bower_git.core.exceptions import (
    InvalidManifestError,
    ManifestMissingError,
    MissingRepositoryInfoError,
    UnsupportedRepositoryTypeError,
)
from bower_git.core.fs import FileSystem, LocalFileSystem
from bower_git.core.models import ComponentManifest

logger = logging.getLogger(__name__)

SUPPORTED_REPOSITORY_TYPE = "git"


class ManifestReader:
    """组件清单读取器（除读文件外无副作用）"""

    def __init__(self, manifest_name: str = "bower.json", fs: FileSystem | None = None) -> None:
        self.manifest_name = manifest_name
        self._fs = fs or LocalFileSystem()

    def read(self, target: str | Path) -> ComponentManifest:
        """读取目标目录中的组件清单"""
        target = Path(target)
        path = target / self.manifest_name
        if not self._fs.exists(path):
            raise ManifestMissingError(f"ABORTING: No {self.manifest_name} found in {target}")

        try:
            data = json.loads(self._fs.read_text(path))
        except (OSError, ValueError, RecursionError) as e:
            raise InvalidManifestError(f"ABORTING: Cannot parse {path}: {e}") from e
        if not isinstance(data, dict):
            raise InvalidManifestError(f"ABORTING: {path} is not a JSON object")

        repo = data.get("repository")
        if not isinstance(repo, dict) or not repo.get("url") or not repo.get("type"):
            raise MissingRepositoryInfoError(
                f"ABORTING: No repository information found in {path}"
            )
        if repo["type"] != SUPPORTED_REPOSITORY_TYPE:
            raise UnsupportedRepositoryTypeError(
                f"ABORTING: Not a git repository ({target}: type={repo['type']})",
                repo_type=str(repo["type"]),
            )

        name = data.get("name") or target.name
        logger.debug("Found bower component: %s", name)
        return ComponentManifest(
            name=str(name),
            repository_url=str(repo["url"]),
            repository_type=SUPPORTED_REPOSITORY_TYPE,
        )
