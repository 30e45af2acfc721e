"""
CLI 入口模块 - 使用 Typer 构建命令行界面

检查流程：
1. 打开仓库
2. 解析最新的版本标签
3. 获取标签之后的提交并分组
4. 给出版本建议并生成报告
"""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from release_checker.config import CheckerConfig, FORMAT_ENV_VAR
from release_checker.core.gitmoji import Gitmoji
from release_checker.exceptions import NoCommitsError, ReleaseCheckerError
from release_checker.logging import setup_logging
from release_checker.pipeline import analyze_repository
from release_checker.repo import open_repository
from release_checker.reporters import JsonReporter, Reporter, RichReporter

# 创建 Typer 应用实例
app = typer.Typer(
    name="release-checker",
    help="Release-Checker: suggest the next semantic version from gitmoji commits. 🔖",
    add_completion=False,
)

# Rich Console 用于输出
console = Console()

logger = logging.getLogger(__name__)


def get_reporter(output_format: str) -> Reporter:
    """获取对应的报告器"""
    if output_format == "json":
        return JsonReporter()
    return RichReporter(console)


@app.command()
def check(
    target: str = typer.Argument(
        ".",
        help="Path to the git repository (or any directory inside it)",
    ),
    format: str = typer.Option(
        "rich",
        "--format",
        "-f",
        envvar=FORMAT_ENV_VAR,
        help="Output format: rich (default) or json",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show detailed output",
    ),
    no_parent_search: bool = typer.Option(
        False,
        "--no-parent-search",
        help="Do not look for the repository in parent directories",
    ),
) -> None:
    """
    Classify the commits since the latest version tag and suggest a version bump.

    Examples:
        release-checker check
        release-checker check ./my-project
        release-checker check --format json
    """
    try:
        config = CheckerConfig(
            path=Path(target),
            output_format=format,
            verbose=verbose,
            search_parent_directories=not no_parent_search,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    setup_logging(config.verbose)

    try:
        # 1. 打开仓库
        repo = open_repository(config.path, config.search_parent_directories)
        if config.verbose:
            console.print(f"[dim]Current directory: {escape(str(repo.path))}[/dim]")

        # 2-4. 标签 → 提交 → 分组 → 版本建议
        result = analyze_repository(repo)
    except NoCommitsError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        console.print("[dim]Nothing to classify. Make a commit first.[/dim]")
        raise typer.Exit(1)
    except ReleaseCheckerError as e:
        logger.debug("Release check failed", exc_info=True)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    # 5. 生成报告
    get_reporter(config.output_format).report(result, str(repo.path))


@app.command()
def gitmojis() -> None:
    """List the gitmoji intentions and the version bump each one triggers."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Emoji", no_wrap=True)
    table.add_column("Code", no_wrap=True)
    table.add_column("Bump", no_wrap=True)
    table.add_column("Description")

    for gitmoji in Gitmoji:
        table.add_row(gitmoji.glyph, gitmoji.shortcode, gitmoji.severity.value, gitmoji.description)

    console.print(table)


@app.command()
def version() -> None:
    """Show the version of Release-Checker."""
    from release_checker import __version__
    console.print(f"[bold]Release-Checker[/bold] v{__version__}")


if __name__ == "__main__":
    app()
