"""comelint CLI — Typer application validating a single commit message."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.markup import escape

from comelint import __version__
from comelint.config.schema import OUTPUT_FORMATS, UNLIMITED_LENGTH, ComelintConfig

app = typer.Typer(
    name="comelint",
    help="Linter for commit messages.",
    add_completion=False,
)

console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        print(f"comelint {__version__}")
        raise typer.Exit()


def _apply_cli_overrides(
    cfg: ComelintConfig,
    *,
    no_merge: bool,
    no_revert: bool,
    no_wip: bool,
    no_multiline: bool,
    min_length: Optional[int],
    max_length: Optional[int],
    regexp: Optional[str],
) -> None:
    """Layer CLI flags over the loaded config. Prohibition flags only switch rules on."""
    overrides: Dict[str, Any] = {}
    if no_merge:
        overrides["prohibit_merge"] = True
    if no_revert:
        overrides["prohibit_revert"] = True
    if no_wip:
        overrides["prohibit_wip"] = True
    if no_multiline:
        overrides["prohibit_multiline"] = True
    if min_length is not None:
        overrides["min_length"] = min_length
    if max_length is not None:
        overrides["max_length"] = max_length
    if regexp is not None:
        overrides["pattern"] = regexp
    if overrides:
        cfg.rules = dataclasses.replace(cfg.rules, **overrides)


def _print_settings(cfg: ComelintConfig) -> None:
    rules = cfg.rules
    max_text = "unlimited" if rules.max_length == UNLIMITED_LENGTH else str(rules.max_length)
    console.print(
        f"[dim]Prohibit: merge={rules.prohibit_merge} revert={rules.prohibit_revert} "
        f"wip={rules.prohibit_wip} multiline={rules.prohibit_multiline}[/dim]"
    )
    console.print(f"[dim]Length: min={rules.min_length} max={max_text}[/dim]")
    console.print(f"[dim]Pattern: {escape(rules.pattern)}[/dim]")


@app.command()
def lint(
    message: str = typer.Argument("", help="Commit message to validate", show_default=False),
    no_merge: bool = typer.Option(False, "--no-merge", help="Prohibit MERGE messages"),
    no_revert: bool = typer.Option(False, "--no-revert", help="Prohibit REVERT messages"),
    no_wip: bool = typer.Option(False, "--no-wip", help="Prohibit WIP messages"),
    no_multiline: bool = typer.Option(False, "--no-multiline", help="Prohibit multiline messages"),
    min_length: Optional[int] = typer.Option(
        None, "--min-length", help="Minimum length of messages  [default: 1]", show_default=False,
    ),
    max_length: Optional[int] = typer.Option(
        None, "--max-length", help="Maximum length of messages  [default: Unlimited]", show_default=False,
    ),
    regexp: Optional[str] = typer.Option(
        None, "--regexp", "-r", help="RegExp rule for messages  [default: .*]", show_default=False,
    ),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .comelint.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    list_rules: bool = typer.Option(False, "--list-rules", help="List rules in evaluation order and exit"),
) -> None:
    """Validate a commit message. Exits 0 if accepted, 1 if rejected."""
    from comelint.config.loader import ConfigError, find_config_file, load_config
    from comelint.output import json_report, terminal
    from comelint.rules.registry import build_registry
    from comelint.validator import validate

    # --- Load config ---
    try:
        cfg = load_config(config_override=config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    # --- CLI overrides ---
    if format:
        if format not in OUTPUT_FORMATS:
            console.print(f"[bold red]Invalid format:[/bold red] {escape(format)}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]

    _apply_cli_overrides(
        cfg,
        no_merge=no_merge,
        no_revert=no_revert,
        no_wip=no_wip,
        no_multiline=no_multiline,
        min_length=min_length,
        max_length=max_length,
        regexp=regexp,
    )

    if list_rules:
        terminal.render_rules(build_registry(), cfg.rules)
        raise typer.Exit()

    if verbose:
        source = find_config_file(Path.cwd(), config)
        console.print(f"[dim]Config: {escape(str(source)) if source else 'defaults'}[/dim]")
        _print_settings(cfg)

    # --- Validate ---
    outcome = validate(message, cfg.rules)

    if verbose and outcome.is_configuration_error:
        console.print("[dim]The configured pattern does not compile.[/dim]")

    # --- Output ---
    if cfg.output.format == "json":
        print(json_report.render(outcome))
    else:
        terminal.render(outcome, verbose=verbose)

    # --- Exit code ---
    raise typer.Exit(code=0 if outcome.accepted else 1)
