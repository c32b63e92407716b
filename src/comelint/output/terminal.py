"""Rich terminal reporter."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from comelint.config.schema import ValidationConfig
from comelint.results.models import ValidationOutcome
from comelint.rules.registry import RuleRegistry


def render(
    outcome: ValidationOutcome,
    *,
    verbose: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Print the rejection message to stdout as a bare line. Silent on acceptance unless *verbose*."""
    console = console or Console()

    if outcome.rejection is None:
        if verbose:
            console.print("[green]✓[/green] Commit message accepted")
        return

    console.print(escape(outcome.rejection.message), highlight=False, soft_wrap=True)


def render_rules(
    registry: RuleRegistry,
    config: Optional[ValidationConfig] = None,
    *,
    console: Optional[Console] = None,
) -> None:
    """Print the rule table, in evaluation order."""
    console = console or Console()
    config = config or ValidationConfig()

    table = Table(
        title="comelint rules",
        show_lines=False,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Rule", style="cyan", no_wrap=True)
    table.add_column("Enabled", justify="center")
    table.add_column("Description")

    for idx, rule in enumerate(registry.all_rules, start=1):
        enabled = "[green]yes[/green]" if rule.is_enabled(config) else "[dim]no[/dim]"
        table.add_row(str(idx), rule.id, enabled, rule.description)

    console.print(table)
