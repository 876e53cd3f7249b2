"""
CLI Entry Point for SmartSpin.

Commands:
  wager   - Optimal wager for a luck level, side and score
  odds    - Win probability and Kelly fraction across luck levels
  config  - Show current configuration
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from smart_spin import __version__
from smart_spin.config import SmartSpinConfig
from smart_spin.strategies.wheel_kelly import BetSide, WagerCalculator

console = Console()

SIDES = [side.value for side in BetSide]


@click.group()
@click.version_option(version=__version__, prog_name="SmartSpin")
@click.option("--verbose", "-v", is_flag=True, help="Show calculator debug output")
def cli(verbose):
    """SmartSpin - optimal wagers for the Fair's spinning wheel."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@cli.command()
@click.option("--luck", "luck_level", default=0, type=int, help="Player luck level")
@click.option("--side", type=click.Choice(SIDES, case_sensitive=False), default="green",
              help="Color the bet is placed on")
@click.option("--score", type=click.IntRange(min=0), required=True, help="Current star tokens")
@click.option("--ceiling", type=click.IntRange(min=0), default=None,
              help="Score ceiling (defaults to config)")
def wager(luck_level, side, score, ceiling):
    """Work out the optimal wager."""
    cfg = SmartSpinConfig()
    if ceiling is not None:
        cfg.wheel.score_ceiling = ceiling

    calculator = WagerCalculator(cfg.wheel)
    decision = calculator.decide(luck_level, BetSide(side.lower()).is_green, score)

    wager_style = "bold green" if decision.wager else "yellow"
    growth = decision.growth_rate
    console.print(Panel(
        f"Side: [bold]{decision.side.value}[/bold]  Luck: {decision.luck_level}  Score: {decision.score}\n"
        f"Win Probability: [cyan]{float(decision.win_probability):.2%}[/cyan]\n"
        f"Kelly Fraction: [cyan]{float(decision.fraction):.2%}[/cyan]\n"
        f"Kelly Stake: {decision.raw_wager}\n"
        f"Max Winnable: {decision.max_winnable}"
        f"{' [yellow](ceiling binds)[/yellow]' if decision.ceiling_bound else ''}\n"
        f"Growth / Spin: {growth:+.4f}\n\n"
        f"Wager: [{wager_style}]{decision.wager}[/{wager_style}] ({decision.verdict})",
        title="[bold]Optimal Wager[/bold]",
    ))


@cli.command()
@click.option("--min-luck", default=-4, type=int, help="Lowest luck level to show")
@click.option("--max-luck", default=10, type=int, help="Highest luck level to show")
def odds(min_luck, max_luck):
    """Show win probability and Kelly fraction per luck level."""
    if min_luck > max_luck:
        raise click.BadParameter("--min-luck must not exceed --max-luck")

    calculator = WagerCalculator(SmartSpinConfig().wheel)

    table = Table(title="Wheel Odds by Luck Level")
    table.add_column("Luck", justify="right", style="cyan")
    table.add_column("P(win) Green", justify="right")
    table.add_column("Kelly Green", justify="right", style="green")
    table.add_column("P(win) Orange", justify="right")
    table.add_column("Kelly Orange", justify="right", style="green")

    for luck in range(min_luck, max_luck + 1):
        row = [str(luck)]
        for is_green in (True, False):
            p = calculator.win_probability(luck, is_green)
            f = calculator.optimal_fraction(luck, is_green)
            row.append(f"{float(p):.2%}")
            row.append(f"{float(f):.2%}" if f else "[dim]-[/dim]")
        table.add_row(*row)

    console.print(table)


@cli.command()
def config():
    """Show current configuration."""
    cfg = SmartSpinConfig()

    console.print(Panel(
        f"Score Ceiling: {cfg.wheel.score_ceiling}\n"
        f"Green Outcomes: {cfg.wheel.green_outcomes} / {cfg.wheel.total_outcomes}\n"
        f"Orange Outcomes: {cfg.wheel.orange_outcomes} / {cfg.wheel.total_outcomes}\n"
        f"Green Luck Divisor: {cfg.wheel.green_luck_divisor}\n"
        f"Orange Luck Divisor: {cfg.wheel.orange_luck_divisor}\n"
        f"Festival: {cfg.festival.festival_id}\n"
        f"Question Key: {cfg.festival.wheel_question_key}",
        title="[bold]SmartSpin Configuration[/bold]",
    ))


def main():
    cli()


if __name__ == "__main__":
    main()
