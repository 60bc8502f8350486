"""测试共享 fixture — 组件目录构造 + fake git 执行器

FakeGit 模拟 `git clone [-b <branch>] -- <url> <dest>`：
  - 成功时创建 dest/.git 和 dest/README，不访问网络
  - fail_urls 中的 url 返回非零退出码，可选择留下残余目录
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from bower_git.core.config import Config
from bower_git.services.container import ServiceContainer
from bower_git.utils.shell import CommandResult


class FakeGit:
    """记录调用并模拟 git clone 的执行器"""

    def __init__(self, fail_urls: dict[str, str] | None = None, leave_debris: bool = False) -> None:
        self.fail_urls = fail_urls or {}
        self.leave_debris = leave_debris
        self.calls: list[list[str]] = []

    def execute(self, cmd, *, cwd=".", timeout=None):  # type: ignore[no-untyped-def]
        self.calls.append(list(cmd))
        url, dest = cmd[-2], Path(cmd[-1])
        if url in self.fail_urls:
            if self.leave_debris:
                (dest / ".git").mkdir(parents=True)
            return CommandResult(returncode=128, stdout="", stderr=self.fail_urls[url])
        (dest / ".git").mkdir(parents=True)
        (dest / "README").write_text(f"cloned from {url}\n", encoding="utf-8")
        return CommandResult(returncode=0, stdout=f"Cloning into '{dest}'...", stderr="")


def write_component(
    root: Path, dirname: str, manifest: dict | str | None, *, git: bool = False,
) -> Path:
    """创建组件目录；manifest 为 None 时不写 bower.json，为 str 时原样写入"""
    target = root / dirname
    target.mkdir(parents=True)
    (target / "index.js").write_text("module.exports = {};\n", encoding="utf-8")
    if manifest is not None:
        text = manifest if isinstance(manifest, str) else json.dumps(manifest)
        (target / "bower.json").write_text(text, encoding="utf-8")
    if git:
        (target / ".git").mkdir()
    return target


def git_manifest(name: str = "widget") -> dict:
    return {
        "name": name,
        "repository": {"url": f"https://example.com/{name}.git", "type": "git"},
    }


def siblings(root: Path) -> list[str]:
    return sorted(p.name for p in root.iterdir())


@pytest.fixture()
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture()
def container(fake_git: FakeGit) -> ServiceContainer:
    return ServiceContainer(config=Config(max_workers=4), executor=fake_git)


@pytest.fixture()
def make_component():
    """组件目录工厂 fixture

    用法:
        def test_xxx(self, tmp_path, make_component):
            target = make_component(tmp_path, "demo", {"name": "widget", ...})
    """
    return write_component


@pytest.fixture()
def manifest_for():
    """生成 git 类型 bower.json 内容: manifest_for("widget")"""
    return git_manifest


@pytest.fixture()
def fake_git_cls():
    """FakeGit 类本身，用于构造失败场景"""
    return FakeGit
