"""组件替换服务

- manifest.py: 读取 bower.json
- cloner.py: git clone 到临时目录
- swapper.py: 删除原目录并将临时目录重命名就位
- orchestrator.py: 批量编排、已有仓库跳过、结果汇总
- container.py: 依赖注入
"""

from bower_git.services.cloner import RepositoryCloner
from bower_git.services.container import ServiceContainer
from bower_git.services.manifest import ManifestReader
from bower_git.services.orchestrator import CheckoutOrchestrator
from bower_git.services.swapper import DirectorySwapper

__all__ = [
    "ManifestReader",
    "RepositoryCloner",
    "DirectorySwapper",
    "CheckoutOrchestrator",
    "ServiceContainer",
]
