"""Poker Trainer CLI — Typer-based command line interface."""

import logging
import random
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from poker_trainer import config
from poker_trainer.errors import PokerEngineError
from poker_trainer.models.card import Card, parse_card

app = typer.Typer(
    name="poker-trainer",
    help="Texas Hold'em hand evaluator, outs counter and equity calculator",
    no_args_is_help=True,
)
console = Console()


def _parse_run(text: str) -> List[Card]:
    """Parse cards written together ('Ts6s3d') or separated ('Ts 6s,3d')."""
    compact = text.replace(",", "").replace(" ", "")
    if len(compact) % 2:
        raise PokerEngineError(f"Cannot split {text!r} into two-character cards")
    return [parse_card(compact[i:i + 2]) for i in range(0, len(compact), 2)]


def _fail(error: Exception) -> None:
    console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.LOG_LEVEL,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def evaluate(
    cards: List[str] = typer.Argument(..., help="5 to 7 cards, e.g. As Kd Qh 7s 2d"),
):
    """Rank the best 5-card hand."""
    from poker_trainer.formatters.table import TableFormatter
    from poker_trainer.simulation.evaluator import evaluate7

    try:
        parsed = _parse_run("".join(cards))
        hand = evaluate7(parsed)
    except PokerEngineError as e:
        _fail(e)

    TableFormatter(console).print_evaluation(parsed, hand)


@app.command()
def outs(
    hole: str = typer.Option(..., "--hole", help="Two hole cards, e.g. As9s"),
    board: str = typer.Option(..., "--board", "-b", help="Flop or turn, e.g. Ts6s3d"),
):
    """Count the cards that improve your hand."""
    from poker_trainer.analysis.outs import analyze_draw_visibility, count_outs
    from poker_trainer.formatters.table import TableFormatter

    try:
        report = count_outs(_parse_run(hole), _parse_run(board))
    except PokerEngineError as e:
        _fail(e)

    TableFormatter(console).print_outs(report, analyze_draw_visibility(report.by_type))


@app.command()
def equity(
    hands: List[str] = typer.Option(..., "--hand", "-h",
                                    help="Hole cards per player, '?' for a random hand"),
    board: str = typer.Option("", "--board", "-b", help="Known board cards"),
    iterations: int = typer.Option(config.DEFAULT_EQUITY_ITERATIONS, "--iterations", "-n",
                                   help="Number of simulated deals"),
    seed: Optional[int] = typer.Option(config.EQUITY_SEED, "--seed",
                                       help="Seed for reproducible runs"),
    workers: int = typer.Option(config.DEFAULT_EQUITY_WORKERS, "--workers", "-w",
                                help="Worker processes"),
):
    """Estimate each player's equity by Monte Carlo simulation."""
    from poker_trainer.formatters.table import TableFormatter
    from poker_trainer.simulation.equity import calculate_equity

    try:
        players = [None if h.strip() == "?" else _parse_run(h) for h in hands]
        results = calculate_equity(
            players,
            _parse_run(board),
            iterations=iterations,
            rng=random.Random(seed),
            workers=workers,
        )
    except PokerEngineError as e:
        _fail(e)

    labels = ["random" if p is None else " ".join(c.to_display() for c in p) for p in players]
    TableFormatter(console).print_equity(labels, results, iterations)


@app.command()
def odds(
    call: float = typer.Option(..., "--call", help="Amount to call"),
    pot: float = typer.Option(..., "--pot", help="Pot before calling, including the bet"),
    hero_equity: Optional[float] = typer.Option(None, "--equity",
                                                help="Hero equity as a fraction (0-1)"),
    stack: Optional[float] = typer.Option(None, "--stack",
                                          help="Effective stack behind after calling"),
):
    """Pot odds, EV, implied odds and SPR for a call."""
    from poker_trainer.analysis import odds as poker_odds
    from poker_trainer.formatters.table import TableFormatter

    if hero_equity is not None and not 0 <= hero_equity <= 1:
        _fail(PokerEngineError(f"Equity must be between 0 and 1, got {hero_equity}"))

    ev = assessment = spr_value = spr_analysis = None
    if hero_equity is not None:
        ev = poker_odds.ev_of_calling(hero_equity, pot, call)
        if stack is not None:
            assessment = poker_odds.assess_implied_odds(call, hero_equity, pot, stack)
    if stack is not None:
        spr_value = poker_odds.spr(stack, pot + 2 * call)
        spr_analysis = poker_odds.analyze_spr(spr_value)

    TableFormatter(console).print_odds(
        call, pot, poker_odds.pot_odds(call, pot),
        assessment=assessment, ev=ev,
        spr_value=spr_value, spr_analysis=spr_analysis,
    )


@app.command()
def shortcut(
    outs_count: int = typer.Argument(..., help="Number of outs"),
    cards_to_come: int = typer.Option(2, "--cards-to-come", "-c", help="1 or 2"),
    all_in: bool = typer.Option(False, "--all-in", help="No more betting will happen"),
):
    """Convert outs to equity with the right rule of thumb."""
    from poker_trainer.analysis.odds import equity_shortcut
    from poker_trainer.formatters.table import TableFormatter

    try:
        result = equity_shortcut(outs_count, cards_to_come, all_in)
    except PokerEngineError as e:
        _fail(e)

    TableFormatter(console).print_shortcut(outs_count, result)


@app.command()
def set_mine(
    call: float = typer.Option(..., "--call", help="Amount to call with a pocket pair"),
    stack: float = typer.Option(..., "--stack", help="Effective stack"),
):
    """Check whether stacks are deep enough to set mine."""
    from poker_trainer.analysis.odds import set_mining_check
    from poker_trainer.formatters.table import TableFormatter

    try:
        check = set_mining_check(call, stack)
    except PokerEngineError as e:
        _fail(e)

    TableFormatter(console).print_set_mining(check)


if __name__ == "__main__":
    app()
