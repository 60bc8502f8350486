"""核心数据模型

组件清单、单目标执行结果与批量结果集中定义于此。
"""

from __future__ import annotations

from dataclasses import dataclass, field

# 单目标状态
STATUS_SUCCESS = "success"
STATUS_FAILED = "failed"
STATUS_SKIPPED = "skipped"


@dataclass(frozen=True)
class ComponentManifest:
    """bower.json 中解析出的组件信息（只读）"""

    name: str
    repository_url: str
    repository_type: str = "git"


@dataclass
class RunOutcome:
    """单个目标的处理结果"""

    target: str
    status: str  # "success", "failed", "skipped"
    name: str = ""
    final_path: str = ""
    message: str = ""
    critical: bool = False  # 原目录已删除但新目录未就位

    @property
    def success(self) -> bool:
        return self.status == STATUS_SUCCESS


@dataclass
class BatchResult:
    """一次运行的全部目标结果，顺序与输入一致（已跳过的目标在前）"""

    outcomes: list[RunOutcome] = field(default_factory=list)
    first_path: str = ""  # 第一个成功目标的最终路径，仅在请求时填充

    @property
    def succeeded(self) -> list[RunOutcome]:
        return [o for o in self.outcomes if o.status == STATUS_SUCCESS]

    @property
    def failed(self) -> list[RunOutcome]:
        return [o for o in self.outcomes if o.status == STATUS_FAILED]

    @property
    def skipped(self) -> list[RunOutcome]:
        return [o for o in self.outcomes if o.status == STATUS_SKIPPED]

    @property
    def success(self) -> bool:
        return not self.failed
