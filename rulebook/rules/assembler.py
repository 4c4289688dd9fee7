"""Sort collected rules and render them as a single markdown document."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from rulebook.constants import (
    DOCUMENT_DESCRIPTION,
    DOCUMENT_TITLE,
    HORIZONTAL_RULE,
    STATIC_RULE_COUNT,
    STATIC_SUMMARY_ROWS,
)
from rulebook.errors import MissingRuleFieldError
from rulebook.rules.models import Category, Rule


class SummaryMode(str, Enum):
    STATIC = "static"
    COMPUTED = "computed"


@dataclass(frozen=True)
class SummaryRow:
    priority: str
    category: str
    count: int


@dataclass(frozen=True)
class DocumentSettings:
    title: str = DOCUMENT_TITLE
    description: tuple[str, ...] = DOCUMENT_DESCRIPTION
    summary: SummaryMode = SummaryMode.STATIC


def sort_rules(rules: Iterable[Rule]) -> list[Rule]:
    # list.sort is stable: equal (category, priority) keys keep input order.
    return sorted(rules, key=lambda rule: (rule.category_rank, rule.priority_rank))


def category_title(slug: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-"))


def summary_rows(rules: Sequence[Rule], mode: SummaryMode) -> list[SummaryRow]:
    if mode == SummaryMode.STATIC:
        return [SummaryRow(*row) for row in STATIC_SUMMARY_ROWS]

    counts = Counter(rule.metadata.category or "" for rule in rules)
    rows = [
        SummaryRow(category.impact.label, category.label, counts.pop(category.value, 0))
        for category in Category.ordered()
    ]
    for slug in sorted(counts):
        rows.append(SummaryRow("-", category_title(slug), counts[slug]))
    return rows


def _required(rule: Rule, field: str) -> str:
    value: Optional[str] = getattr(rule.metadata, field)
    if value is None:
        raise MissingRuleFieldError(field, rule.source_path)
    return value


class DocumentAssembler:
    def __init__(self, settings: Optional[DocumentSettings] = None) -> None:
        self.settings = settings or DocumentSettings()

    def rule_count(self, rules: Sequence[Rule]) -> int:
        if self.settings.summary == SummaryMode.STATIC:
            return STATIC_RULE_COUNT
        return len(rules)

    def header_lines(self, rules: Sequence[Rule]) -> list[str]:
        count = self.rule_count(rules)
        lines: list[str] = [f"# {self.settings.title}", ""]
        for line in self.settings.description:
            lines.append("> " + line.replace("{count}", str(count)))
        lines.append("")
        lines.append("## Categories")
        lines.append("")
        lines.append("| Priority | Category | Rules |")
        lines.append("|----------|----------|-------|")
        for row in summary_rows(rules, self.settings.summary):
            lines.append(f"| {row.priority} | {row.category} | {row.count} |")
        lines.append("")
        lines.append(HORIZONTAL_RULE)
        lines.append("")
        return lines

    def rule_lines(self, rule: Rule) -> list[str]:
        priority = _required(rule, "priority")
        title = _required(rule, "title")
        return [
            f"### [{priority.upper()}] {title}",
            "",
            rule.content,
            "",
            HORIZONTAL_RULE,
            "",
        ]

    def render(self, rules: Iterable[Rule]) -> str:
        ordered = sort_rules(rules)
        lines = self.header_lines(ordered)

        current_category: Optional[str] = None
        for rule in ordered:
            category = rule.metadata.category or ""
            if category != current_category:
                current_category = category
                lines.append(f"## {category_title(category)}")
                lines.append("")
            lines.extend(self.rule_lines(rule))

        return "\n".join(lines)
