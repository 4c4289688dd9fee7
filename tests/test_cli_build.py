"""Tests for the build, check and list commands."""

from pathlib import Path

from rulebook.__main__ import cli, main


def test_no_arguments_builds_default_layout(
    tmp_path: Path, rules_dir: Path, write_rule, cli_runner, monkeypatch
) -> None:
    monkeypatch.chdir(tmp_path)
    write_rule("data-fetching", "cache", title="Cache API calls", priority="critical")
    write_rule("reactivity", "watchers", title="Avoid watcher overuse", priority="high")

    result = cli_runner.invoke(cli, [])

    assert result.exit_code == 0
    assert "Generated AGENTS.md with 2 rules" in result.output
    text = (tmp_path / "AGENTS.md").read_text(encoding="utf-8")
    assert "### [CRITICAL] Cache API calls" in text


def test_build_with_explicit_paths(tmp_path: Path, rules_dir: Path, write_rule, cli_runner) -> None:
    write_rule("performance", "lazy", title="Lazy load", priority="medium")
    output = tmp_path / "out" / "RULES.md"

    result = cli_runner.invoke(
        cli, ["build", "--rules-dir", str(rules_dir), "--output", str(output)]
    )

    assert result.exit_code == 0
    assert "with 1 rules" in result.output
    assert output.is_file()


def test_build_computed_summary(tmp_path: Path, rules_dir: Path, write_rule, cli_runner) -> None:
    write_rule("performance", "lazy", title="Lazy load", priority="medium")
    output = tmp_path / "AGENTS.md"

    result = cli_runner.invoke(
        cli,
        ["build", "--rules-dir", str(rules_dir), "-o", str(output), "--summary", "computed"],
    )

    assert result.exit_code == 0
    assert "| Medium | Performance | 1 |" in output.read_text(encoding="utf-8")


def test_build_verbose_shows_categories(tmp_path: Path, rules_dir: Path, write_rule, cli_runner) -> None:
    write_rule("state-management", "pinia", title="Use Pinia stores", priority="medium")

    result = cli_runner.invoke(
        cli,
        ["build", "--rules-dir", str(rules_dir), "-o", str(tmp_path / "AGENTS.md"), "-v"],
    )

    assert result.exit_code == 0
    assert "State Management" in result.output
    assert "create" in result.output


def test_build_missing_rules_dir_is_fatal(tmp_path: Path, cli_runner) -> None:
    result = cli_runner.invoke(
        cli, ["build", "--rules-dir", str(tmp_path / "absent"), "-o", str(tmp_path / "AGENTS.md")]
    )

    assert result.exit_code != 0
    assert "Fatal: Missing rules directory" in result.output
    assert not (tmp_path / "AGENTS.md").exists()


def test_build_missing_priority_is_fatal(tmp_path: Path, rules_dir: Path, write_rule, cli_runner) -> None:
    write_rule("performance", "broken", title="No priority", priority=None)

    result = cli_runner.invoke(
        cli, ["build", "--rules-dir", str(rules_dir), "-o", str(tmp_path / "AGENTS.md")]
    )

    assert result.exit_code != 0
    assert "missing required field 'priority'" in result.output


def test_build_with_config_file(tmp_path: Path, rules_dir: Path, write_rule, cli_runner) -> None:
    write_rule("performance", "lazy", title="Lazy load", priority="medium")
    config = tmp_path / "rulebook.yaml"
    config.write_text("output: generated/AGENTS.md\ntitle: Team Rules\n", encoding="utf-8")

    result = cli_runner.invoke(cli, ["build", "--config", str(config)])

    assert result.exit_code == 0
    text = (tmp_path / "generated" / "AGENTS.md").read_text(encoding="utf-8")
    assert text.startswith("# Team Rules\n")


def test_build_with_invalid_config(tmp_path: Path, cli_runner) -> None:
    config = tmp_path / "rulebook.yaml"
    config.write_text("colour: blue\n", encoding="utf-8")

    result = cli_runner.invoke(cli, ["build", "--config", str(config)])

    assert result.exit_code != 0
    assert "Invalid config schema" in result.output


def test_check_reports_stale_then_current(tmp_path: Path, rules_dir: Path, write_rule, cli_runner) -> None:
    write_rule("performance", "lazy", title="Lazy load", priority="medium")
    args = ["--rules-dir", str(rules_dir), "-o", str(tmp_path / "AGENTS.md")]

    stale = cli_runner.invoke(cli, ["check", *args])
    assert stale.exit_code == 1
    assert not (tmp_path / "AGENTS.md").exists()

    assert cli_runner.invoke(cli, ["build", *args]).exit_code == 0

    current = cli_runner.invoke(cli, ["check", *args])
    assert current.exit_code == 0


def test_list_shows_rules_in_document_order(rules_dir: Path, write_rule, cli_runner) -> None:
    write_rule("performance", "lazy", title="Lazy load", priority="medium")
    write_rule("ssr-hydration", "mismatch", title="Hydration", priority="critical")

    result = cli_runner.invoke(cli, ["list", "--rules-dir", str(rules_dir)])

    assert result.exit_code == 0
    assert result.output.index("Hydration") < result.output.index("Lazy")


def test_list_empty(rules_dir: Path, cli_runner) -> None:
    result = cli_runner.invoke(cli, ["list", "--rules-dir", str(rules_dir)])
    assert result.exit_code == 0
    assert "No rules found" in result.output


def test_main_returns_two_on_fatal_error(tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(
        "sys.argv", ["rulebook", "build", "--rules-dir", str(tmp_path / "absent")]
    )
    assert main() == 2
    assert "Fatal" in capsys.readouterr().err


def test_main_returns_check_exit_code(tmp_path: Path, rules_dir: Path, write_rule, monkeypatch) -> None:
    write_rule("performance", "lazy", title="Lazy load", priority="medium")
    monkeypatch.setattr(
        "sys.argv",
        ["rulebook", "check", "--rules-dir", str(rules_dir), "-o", str(tmp_path / "AGENTS.md")],
    )
    assert main() == 1
