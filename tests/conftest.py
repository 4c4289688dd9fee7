import sys
from pathlib import Path
from typing import Callable, Optional

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()


def rule_text(
    title: Optional[str] = "Example rule",
    priority: Optional[str] = "medium",
    category: Optional[str] = None,
    tags: Optional[str] = None,
    body: str = "Rule body.",
) -> str:
    lines = ["---"]
    if title is not None:
        lines.append(f"title: {title}")
    if priority is not None:
        lines.append(f"priority: {priority}")
    if category is not None:
        lines.append(f"category: {category}")
    if tags is not None:
        lines.append(f"tags: {tags}")
    lines.append("---")
    lines.append("")
    lines.append(body)
    return "\n".join(lines) + "\n"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def rules_dir(tmp_path: Path) -> Path:
    path = tmp_path / "rules"
    path.mkdir()
    return path


@pytest.fixture
def write_rule(rules_dir: Path) -> Callable[..., Path]:
    def _write(directory: str, name: str, **kwargs) -> Path:
        kwargs.setdefault("category", directory)
        path = rules_dir / directory / f"{name}.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(rule_text(**kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
