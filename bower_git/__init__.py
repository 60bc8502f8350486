"""bower-git - 将 bower 组件目录替换为其 Git 仓库的工作副本"""

__version__ = "1.0.0"
