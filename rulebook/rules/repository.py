"""Collect rules from a category-per-directory tree."""

from __future__ import annotations

from pathlib import Path

from rulebook.constants import RULE_FILE_SUFFIX
from rulebook.errors import MissingRulesDirError, RuleReadError
from rulebook.rules.models import Rule
from rulebook.rules.parser import parse_rule


class RulesRepository:
    def __init__(self, rules_dir: Path) -> None:
        self._rules_dir = rules_dir

    @property
    def rules_dir(self) -> Path:
        return self._rules_dir

    def category_dirs(self) -> list[Path]:
        if not self._rules_dir.is_dir():
            raise MissingRulesDirError(self._rules_dir)
        try:
            children = sorted(self._rules_dir.iterdir())
        except OSError as exc:
            raise RuleReadError(self._rules_dir, str(exc)) from exc
        return [child for child in children if child.is_dir()]

    def rule_files(self, category_dir: Path) -> list[Path]:
        try:
            children = sorted(category_dir.iterdir())
        except OSError as exc:
            raise RuleReadError(category_dir, str(exc)) from exc
        return [
            child
            for child in children
            if child.name.endswith(RULE_FILE_SUFFIX) and child.is_file()
        ]

    def list_rules(self) -> list[Rule]:
        rules: list[Rule] = []
        for category_dir in self.category_dirs():
            for path in self.rule_files(category_dir):
                rules.append(parse_rule(path, default_category=category_dir.name))
        return rules
