from pathlib import Path

from rich.markup import escape
from rich.table import Column, Table

from rulebook.builder import BuildResult
from rulebook.rules.assembler import category_title
from rulebook.rules.models import Priority, Rule
from rulebook.tui.enums import OUTPUT_STATUS_STYLE, PRIORITY_STYLE, UIStyle
from rulebook.utils import display_path


def _priority_text(value: str | None) -> str:
    if value is None:
        return f"[{UIStyle.RED.value}](missing)[/{UIStyle.RED.value}]"
    try:
        style = PRIORITY_STYLE[Priority(value)]
    except ValueError:
        style = UIStyle.WHITE.value
    return f"[{style}]{escape(value)}[/{style}]"


class RulesTable:
    @staticmethod
    def rules_table(rules: list[Rule], rules_dir: Path) -> Table:
        table = Table(
            Column(header="Category", width=22),
            Column(header="Priority", width=10),
            Column(header="Title", overflow="fold"),
            Column(header="Source", overflow="ellipsis", max_width=48),
            expand=True,
            header_style="bold",
        )
        for rule in rules:
            source = display_path(rule.source_path, rules_dir) if rule.source_path else ""
            table.add_row(
                escape(category_title(rule.metadata.category or "")),
                _priority_text(rule.metadata.priority),
                escape(rule.metadata.title or ""),
                escape(source),
            )
        return table


class BuildTable:
    @staticmethod
    def summary_block(result: BuildResult) -> Table:
        style = OUTPUT_STATUS_STYLE.get(result.status, UIStyle.WHITE.value)
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Output", escape(str(result.output_path)))
        table.add_row("Rules", str(result.rule_count))
        table.add_row("Status", f"[{style}]{result.status.value}[/{style}]")
        return table

    @staticmethod
    def category_table(result: BuildResult) -> Table:
        table = Table(
            Column(header="Category", width=24),
            Column(header="Rules", width=8, justify="right"),
            expand=True,
            header_style="bold",
        )
        for slug, count in result.category_counts().items():
            table.add_row(escape(category_title(slug)), str(count))
        return table
