from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console

from rulebook.builder import BuildService
from rulebook.config import BuildConfig, resolve_config
from rulebook.errors import RulebookError
from rulebook.rules.assembler import SummaryMode
from rulebook.tui import RulebookConsoleUI


SUMMARY_VALUES = [mode.value for mode in SummaryMode]


def _source_options(func: Callable) -> Callable:
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="YAML config file; its paths resolve relative to the file.",
    )(func)
    func = click.option(
        "--rules-dir",
        type=click.Path(path_type=Path, file_okay=False),
        default=None,
        help="Root directory with one subdirectory per category.",
    )(func)
    return func


def _output_options(func: Callable) -> Callable:
    func = click.option(
        "--summary",
        type=click.Choice(SUMMARY_VALUES, case_sensitive=False),
        default=None,
        help="Summary table: fixed counts (static) or counted from rules (computed).",
    )(func)
    func = click.option(
        "--output",
        "-o",
        "output_path",
        type=click.Path(path_type=Path, dir_okay=False),
        default=None,
        help="Markdown file to generate.",
    )(func)
    return func


def _resolve(
    config_path: Optional[Path],
    rules_dir: Optional[Path],
    output_path: Optional[Path] = None,
    summary: Optional[str] = None,
) -> BuildConfig:
    try:
        config = resolve_config(config_path)
    except RulebookError as exc:
        raise click.ClickException(f"Fatal: {exc}")
    return config.with_overrides(
        rules_dir=rules_dir, output_path=output_path, summary=summary
    )


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Aggregate categorized markdown rules into one AGENTS.md.

    Without a subcommand, runs `build` with its defaults.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(build)


@cli.command(help="Collect rules and write the aggregated document.")
@_source_options
@_output_options
@click.option("--verbose", "-v", is_flag=True, help="Show per-category counts.")
def build(
    config_path: Optional[Path],
    rules_dir: Optional[Path],
    output_path: Optional[Path],
    summary: Optional[str],
    verbose: bool,
) -> None:
    ui = RulebookConsoleUI(Console())
    config = _resolve(config_path, rules_dir, output_path, summary)

    try:
        result = BuildService(config).build()
    except RulebookError as exc:
        raise click.ClickException(f"Fatal: {exc}")

    ui.render_build(result, verbose=verbose)


@cli.command(help="Exit non-zero when the generated document is out of date.")
@_source_options
@_output_options
def check(
    config_path: Optional[Path],
    rules_dir: Optional[Path],
    output_path: Optional[Path],
    summary: Optional[str],
) -> None:
    ui = RulebookConsoleUI(Console())
    config = _resolve(config_path, rules_dir, output_path, summary)

    try:
        result = BuildService(config).render()
    except RulebookError as exc:
        raise click.ClickException(f"Fatal: {exc}")

    ui.render_check(result)
    if not result.is_current:
        raise click.exceptions.Exit(1)


@cli.command("list", help="List collected rules in document order.")
@_source_options
def list_rules(config_path: Optional[Path], rules_dir: Optional[Path]) -> None:
    ui = RulebookConsoleUI(Console())
    config = _resolve(config_path, rules_dir)

    try:
        rules = BuildService(config).collect()
    except RulebookError as exc:
        raise click.ClickException(f"Fatal: {exc}")

    ui.render_rules(rules, config.rules_dir)


def main() -> int:
    try:
        code = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
