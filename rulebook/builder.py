from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from rulebook.config import BuildConfig
from rulebook.errors import OutputWriteError
from rulebook.rules.assembler import DocumentAssembler, sort_rules
from rulebook.rules.models import Rule
from rulebook.rules.repository import RulesRepository


class OutputStatus(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    NOOP = "noop"


@dataclass
class BuildResult:
    output_path: Path
    rules: list[Rule]
    status: OutputStatus
    content: str = field(repr=False, default="")

    @property
    def rule_count(self) -> int:
        return len(self.rules)

    @property
    def is_current(self) -> bool:
        return self.status == OutputStatus.NOOP

    def category_counts(self) -> dict[str, int]:
        return dict(Counter(rule.metadata.category or "" for rule in self.rules))


def output_status(path: Path, content: str) -> OutputStatus:
    if not path.is_file():
        return OutputStatus.CREATE
    try:
        current = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return OutputStatus.UPDATE
    return OutputStatus.NOOP if current == content else OutputStatus.UPDATE


class BuildService:
    def __init__(self, config: BuildConfig, repository: Optional[RulesRepository] = None) -> None:
        self.config = config
        self.repository = repository or RulesRepository(config.rules_dir)
        self.assembler = DocumentAssembler(config.document_settings())

    def collect(self) -> list[Rule]:
        return sort_rules(self.repository.list_rules())

    def render(self) -> BuildResult:
        rules = self.collect()
        content = self.assembler.render(rules)
        status = output_status(self.config.output_path, content)
        return BuildResult(
            output_path=self.config.output_path,
            rules=rules,
            status=status,
            content=content,
        )

    def build(self) -> BuildResult:
        """Render fully in memory, then write once."""
        result = self.render()
        path = result.output_path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(result.content, encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(path, str(exc)) from exc
        return result
