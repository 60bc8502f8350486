"""bower-git 命令行接口

用法:
    bower-git bower_components/widget [more paths...] [-b BRANCH] [-f] [-g] [-v]

摘要输出到 stderr；--goto 时第一个成功目标的路径单独输出到 stdout，
便于 cd "$(bower-git -g bower_components/widget)"。
"""

from __future__ import annotations

import click

from bower_git import __version__
from bower_git.core.config import DEFAULT_CONFIG_FILE, Config
from bower_git.core.exceptions import BowerGitError
from bower_git.core.models import STATUS_SKIPPED, STATUS_SUCCESS, BatchResult
from bower_git.services.container import ServiceContainer
from bower_git.utils.logger import setup_cli_logging


def _echo_summary(result: BatchResult) -> None:
    """逐个目标输出结果：跳过为提示，失败为错误"""
    for o in result.outcomes:
        if o.status == STATUS_SUCCESS:
            click.secho(
                f'Bower component "{o.name}" has been replaced by its git repository ({o.target})',
                fg="green", err=True,
            )
        elif o.status == STATUS_SKIPPED:
            click.secho(f"Skipped (already a git repository): {o.target}", fg="yellow", err=True)
        else:
            click.secho(f"Failed: {o.target}", fg="red", bold=o.critical, err=True)
            click.secho(f"  {o.message}", fg="red", err=True)
    if result.failed:
        click.secho("Aborted", fg="red", err=True)


@click.command()
@click.version_option(version=__version__, message="Bower Git version: v%(version)s")
@click.argument("paths", nargs=-1, type=click.Path())
@click.option("--branch", "-b", default=None, help="checkout 指定分支（默认取配置，通常为 master）")
@click.option("--force", "-f", is_flag=True, help="已是 Git 仓库的目录也重新 checkout")
@click.option("--goto", "-g", is_flag=True, help="成功后将第一个组件的路径输出到 stdout")
@click.option("--verbose", "-v", is_flag=True, help="输出每一步的详细日志")
@click.option("--jobs", "-j", type=int, default=None, help="并行处理的目录数（覆盖配置）")
@click.option("--config", "-c", "config_path", default=DEFAULT_CONFIG_FILE, help="配置文件路径")
@click.pass_context
def main(
    ctx: click.Context, paths: tuple[str, ...], branch: str | None, force: bool,
    goto: bool, verbose: bool, jobs: int | None, config_path: str,
) -> None:
    """将 bower 组件目录替换为其 Git 仓库的 clone"""
    setup_cli_logging(verbose)

    try:
        cfg = Config.from_file(config_path)
        if jobs is not None:
            cfg = Config(**{**cfg.to_dict(), "max_workers": jobs})
        container = ServiceContainer(config=cfg)
        result = container.orchestrator.run(
            list(paths),
            branch=cfg.default_branch if branch is None else branch,
            force=force,
            expose_first_result=goto,
        )
    except BowerGitError as e:
        click.secho(str(e), fg="red", err=True)
        ctx.exit(1)

    _echo_summary(result)
    if goto and result.first_path:
        click.echo(result.first_path)
    if not result.success:
        ctx.exit(1)
