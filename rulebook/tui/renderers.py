from pathlib import Path
from typing import Optional

from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel

from rulebook.builder import BuildResult
from rulebook.rules.models import Rule
from rulebook.tui.enums import UIStyle
from rulebook.tui.tables import BuildTable, RulesTable


class RulebookConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _panel(
        self,
        title: str,
        body: RenderableType,
        style: str = UIStyle.BLUE.value,
        subtitle: Optional[str] = None,
    ) -> None:
        self.console.print(
            Panel(body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1))
        )

    def render_build(self, result: BuildResult, verbose: bool = False) -> None:
        if verbose:
            self._panel("build overview", BuildTable.summary_block(result))
            if result.rules:
                self._panel(
                    "categories",
                    BuildTable.category_table(result),
                    style=UIStyle.CYAN.value,
                )
        self.console.print(
            escape(f"Generated {result.output_path} with {result.rule_count} rules"),
            highlight=False,
            soft_wrap=True,
        )

    def render_check(self, result: BuildResult) -> None:
        if result.is_current:
            self._panel(
                "check",
                escape(f"{result.output_path} is up to date ({result.rule_count} rules)."),
                style=UIStyle.GREEN.value,
            )
            return
        self._panel(
            "check",
            escape(f"{result.output_path} is out of date ({result.status.value} needed).")
            + "\n- rulebook build",
            style=UIStyle.YELLOW.value,
        )

    def render_rules(self, rules: list[Rule], rules_dir: Path) -> None:
        if not rules:
            self._panel("rules", "No rules found.", style=UIStyle.YELLOW.value)
            return
        self._panel(
            "rules",
            RulesTable.rules_table(rules, rules_dir),
            subtitle=f"{len(rules)} rules",
        )
