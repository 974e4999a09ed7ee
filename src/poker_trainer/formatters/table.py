"""Rich table formatting for terminal output."""

import math
from typing import List, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from poker_trainer.analysis.odds import (
    EquityShortcut, ImpliedOddsAssessment, SetMiningCheck, SPRAnalysis,
)
from poker_trainer.analysis.outs import DrawVisibility, OutsReport
from poker_trainer.models.card import Card
from poker_trainer.simulation.equity import PlayerEquity
from poker_trainer.simulation.evaluator import HAND_NAMES, EvaluatedHand


def _cards(cards: Sequence[Card]) -> str:
    return " ".join(c.to_display() for c in cards)


def _amount(value: float) -> str:
    return "∞" if math.isinf(value) else f"{value:,.2f}"


class TableFormatter:
    """Format engine results as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_evaluation(self, cards: Sequence[Card], hand: EvaluatedHand) -> None:
        """Print an evaluated hand with its tie-break values."""
        table = Table(title=f"Hand: {_cards(cards)}")
        table.add_column("Category", style="cyan")
        table.add_column("Kickers", justify="right", style="green")
        table.add_row(hand.name, ", ".join(str(k) for k in hand.kickers))
        self.console.print(table)

    def print_outs(self, report: OutsReport, draws: List[DrawVisibility]) -> None:
        """Print outs grouped by draw type, then draw visibility."""
        table = Table(title=f"Outs from {HAND_NAMES[report.current_category]}")
        table.add_column("Draw", style="cyan")
        table.add_column("Outs", justify="right", style="green")
        table.add_column("Cards")

        for draw_type, count in report.by_type.items():
            cards = [o.card for o in report.outs if o.draw_type == draw_type]
            table.add_row(draw_type.value, str(count), _cards(cards))
        table.add_row("[bold]total[/bold]", f"[bold]{report.total_outs}[/bold]", "")
        self.console.print(table)

        if not draws:
            return

        vis = Table(title="Draw Visibility")
        vis.add_column("Draw", style="cyan")
        vis.add_column("Outs", justify="right")
        vis.add_column("Visibility")
        vis.add_column("Implied Odds")
        vis.add_column("Why", style="dim")
        for d in draws:
            vis.add_row(d.type, str(d.outs), d.visibility, d.implied_odds, d.reason)
        self.console.print(vis)

    def print_equity(self, hands: List[str], results: List[PlayerEquity],
                     iterations: int) -> None:
        """Print Monte Carlo equity per player."""
        table = Table(title=f"Equity ({iterations:,} iterations)")
        table.add_column("Player", style="cyan")
        table.add_column("Hand")
        table.add_column("Equity", justify="right", style="green")
        table.add_column("Wins", justify="right")
        table.add_column("Ties", justify="right")

        for i, (hand, r) in enumerate(zip(hands, results), 1):
            table.add_row(str(i), hand, f"{r.equity * 100:.1f}%", str(r.wins), str(r.ties))
        self.console.print(table)

    def print_odds(self, call: float, pot: float, pot_odds: float,
                   assessment: ImpliedOddsAssessment | None = None,
                   ev: float | None = None,
                   spr_value: float | None = None,
                   spr_analysis: SPRAnalysis | None = None) -> None:
        """Print pot odds and, when available, EV, implied odds and SPR."""
        table = Table(title="Pot Odds")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right", style="green")

        table.add_row("Call", _amount(call))
        table.add_row("Pot", _amount(pot))
        table.add_row("Pot odds", f"{pot_odds * 100:.1f}%")
        if ev is not None:
            table.add_row("EV of calling", f"{ev:+,.2f}")
        if assessment is not None:
            table.add_row("", "")
            table.add_row("Implied odds F", _amount(assessment.f))
            table.add_row("F % of pot", f"{assessment.f_as_pct_of_pot:.1f}%")
            table.add_row("Feasibility", assessment.feasibility)
        if spr_value is not None and spr_analysis is not None:
            table.add_row("", "")
            table.add_row("SPR", _amount(spr_value))
            table.add_row("SPR category", spr_analysis.category)
            table.add_row("Implied odds", spr_analysis.implied_odds)

        self.console.print(table)

    def print_shortcut(self, outs: int, shortcut: EquityShortcut) -> None:
        content = Text()
        content.append(f"Estimate: {shortcut.estimate}%  ", style="bold")
        content.append(f"Exact: {shortcut.exact}%\n")
        if shortcut.warning:
            content.append(f"\n{shortcut.warning}", style="yellow")
        self.console.print(Panel(content, title=f"{outs} outs, {shortcut.method}"))

    def print_set_mining(self, check: SetMiningCheck) -> None:
        style = "green" if check.profitable else "red"
        self.console.print(Panel(
            check.reason,
            title=f"Set mining: {check.ratio}× (need {check.threshold}×)",
            border_style=style,
        ))
