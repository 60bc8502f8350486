"""文件系统操作抽象

通过 FileSystem 协议抽象目录的存在性检查、删除与重命名，
方便测试注入失败场景（删除失败、重命名失败等）而无需 patch os / shutil。
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """文件系统协议"""

    def exists(self, path: Path) -> bool:
        ...

    def is_dir(self, path: Path) -> bool:
        ...

    def read_text(self, path: Path) -> str:
        ...

    def remove_tree(self, path: Path) -> None:
        """递归删除目录，失败抛 OSError"""
        ...

    def rename(self, src: Path, dst: Path) -> None:
        """重命名目录，失败抛 OSError"""
        ...


class LocalFileSystem:
    """本地文件系统（默认实现）"""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def remove_tree(self, path: Path) -> None:
        shutil.rmtree(path)

    def rename(self, src: Path, dst: Path) -> None:
        os.rename(src, dst)

