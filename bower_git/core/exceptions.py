"""统一异常体系

所有业务异常继承 BowerGitError，替代散落的 ValueError / RuntimeError。
编排器据此把单个目标的失败转为 RunOutcome，CLI 层据此输出友好提示。
"""

from __future__ import annotations


class BowerGitError(Exception):
    """基础异常"""

    code: str = "UNKNOWN"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(BowerGitError):
    """配置文件内容无效"""

    code = "CONFIG_ERROR"


# =========================================================================
# 输入校验（整批失败，未做任何修改）
# =========================================================================

class NoTargetProvidedError(BowerGitError):
    """未提供任何目标目录"""

    code = "NO_TARGET"

    def __init__(self, message: str = "ABORTING: No path provided!") -> None:
        super().__init__(message)


class TargetNotFoundError(BowerGitError):
    """目标目录不存在"""

    code = "TARGET_NOT_FOUND"

    def __init__(self, path: str) -> None:
        super().__init__(f'ABORTING: Folder "{path}" does not exist')
        self.path = path


# =========================================================================
# 清单解析（仅影响单个目标）
# =========================================================================

class ManifestMissingError(BowerGitError):
    """目标目录中没有组件清单"""

    code = "MANIFEST_MISSING"


class InvalidManifestError(BowerGitError):
    """组件清单无法解析"""

    code = "INVALID_MANIFEST"


class MissingRepositoryInfoError(BowerGitError):
    """组件清单缺少 repository.url / repository.type"""

    code = "MISSING_REPOSITORY_INFO"


class UnsupportedRepositoryTypeError(BowerGitError):
    """仓库类型不是 git"""

    code = "UNSUPPORTED_REPOSITORY_TYPE"

    def __init__(self, message: str, repo_type: str = "") -> None:
        super().__init__(message)
        self.repo_type = repo_type


# =========================================================================
# Clone / 替换
# =========================================================================

class CloneFailedError(BowerGitError):
    """git clone 失败，detail 为底层工具的原始输出"""

    code = "CLONE_FAILED"

    def __init__(self, message: str, detail: str = "") -> None:
        super().__init__(f"{message}: {detail}" if detail else message)
        self.detail = detail


class SwapFailedError(BowerGitError):
    """删除原目录或重命名临时目录失败

    original_deleted=True 表示原目录已删除但临时目录未能就位，
    此时临时目录保留在 scratch 路径，需要人工完成重命名。
    """

    code = "SWAP_FAILED"

    def __init__(self, message: str, *, scratch: str = "", original_deleted: bool = False) -> None:
        super().__init__(message)
        self.scratch = scratch
        self.original_deleted = original_deleted

    @property
    def critical(self) -> bool:
        return self.original_deleted
