"""
Rich 终端报告器 - 使用 Rich 库输出彩色终端格式

按 major / minor / patch / other 分组列出提交，最后给出版本建议。
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from release_checker.core.changes import SemanticVersionAction
from release_checker.core.gitmoji import Severity
from release_checker.pipeline import ReleaseReport


# 分组样式
BUCKET_STYLES: dict[Severity, tuple[str, str]] = {
    Severity.MAJOR: ("💥", "red"),
    Severity.MINOR: ("✨", "green"),
    Severity.PATCH: ("🐛", "cyan"),
    Severity.OTHER: ("📝", "dim"),
}

# 版本动作样式
ACTION_STYLES: dict[SemanticVersionAction, str] = {
    SemanticVersionAction.INCREMENT_MAJOR: "red",
    SemanticVersionAction.INCREMENT_MINOR: "green",
    SemanticVersionAction.INCREMENT_PATCH: "cyan",
    SemanticVersionAction.KEEP: "yellow",
}


class RichReporter:
    """Rich 终端报告器"""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def report(self, result: ReleaseReport, target: str) -> None:
        """生成 Rich 格式报告"""
        self.console.print()
        self.console.print("─" * 80, style="dim")
        self.console.print(
            "🔖 Release-Checker 🔖",
            style="bold cyan",
            justify="center"
        )
        self.console.print("─" * 80, style="dim")

        self.console.print(f"[dim]Repository:[/dim] {escape(target)}")
        if result.latest_tag:
            self.console.print(
                f"[dim]Latest version tag:[/dim] [bold]{result.latest_tag}[/bold] "
                f"[dim]({result.latest_tag.commit[:7]})[/dim]"
            )
        else:
            self.console.print("[dim]Latest version tag:[/dim] [yellow]none, checking the whole history[/yellow]")

        self._print_changes(result)
        self._print_action(result)

    def _print_changes(self, result: ReleaseReport) -> None:
        """打印各分组的提交"""
        self.console.print()
        self.console.print("[bold]◆ Changes in the repository[/bold]")
        self.console.print()

        table = Table(show_header=True, header_style="bold cyan", box=None)
        table.add_column("Bucket", width=12)
        table.add_column("Count", justify="right", width=6)
        table.add_column("Commits")

        for severity in Severity:
            icon, style = BUCKET_STYLES[severity]
            lines = [str(commit) for commit in result.changes.gitmoji_commits(severity)]
            commits = "\n".join(escape(line) for line in lines) if lines else "[dim]-[/dim]"
            table.add_row(
                f"[{style}]{icon} {severity.value}[/{style}]",
                str(len(lines)),
                commits,
            )

        self.console.print(table)

    def _print_action(self, result: ReleaseReport) -> None:
        """打印版本建议"""
        color = ACTION_STYLES[result.action]
        text = f"[bold {color}]Action for semantic version ➡️  {result.action}[/bold {color}]"
        if result.next_version is not None:
            text += f"\n[dim]{result.latest_tag} → v{result.next_version}[/dim]"

        self.console.print()
        self.console.print(Panel(text, border_style=color))
        self.console.print()
