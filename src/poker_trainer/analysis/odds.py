"""Poker math: pot odds, EV, implied odds, SPR, and equity shortcuts.

Every function here is a pure formula over chip amounts and equities
(fractions in [0, 1]) unless noted. Shortcut helpers work in percent.
"""

import math
from dataclasses import dataclass
from typing import Optional

from poker_trainer.errors import InvalidInputError

SET_MINING_THRESHOLD = 15


@dataclass(frozen=True)
class ImpliedOddsAssessment:
    f: float
    feasibility: str
    f_as_pct_of_pot: float
    pot_after_call: float


@dataclass(frozen=True)
class SPRAnalysis:
    category: str
    description: str
    implied_odds: str


@dataclass(frozen=True)
class EquityShortcut:
    estimate: float
    exact: float
    method: str
    warning: Optional[str] = None


@dataclass(frozen=True)
class SetMiningCheck:
    ratio: float
    threshold: int
    profitable: bool
    reason: str


def pot_odds(call: float, pot: float) -> float:
    """Fraction of the final pot the hero must put in to call.

    ``pot`` is everything in the middle before the call, villain's bet included.
    """
    if call <= 0:
        return 0.0
    return call / (pot + call)


def ev_of_calling(equity: float, pot: float, call: float) -> float:
    """EV = Equity x (Pot + Call) - (1 - Equity) x Call."""
    return equity * (pot + call) - (1 - equity) * call


def implied_odds_f(call: float, equity: float, pot: float) -> float:
    """Extra chips F that must be won later for a call to break even.

    F = Call / Equity - (Pot + 2 x Call). Negative F means the direct pot
    odds already justify the call.
    """
    if equity <= 0:
        return math.inf
    return (call / equity) - (pot + 2 * call)


def assess_implied_odds(call: float, equity: float, pot: float,
                        remaining_stack: float) -> ImpliedOddsAssessment:
    """Classify how realistic it is to win F on later streets."""
    f = implied_odds_f(call, equity, pot)
    pot_after_call = pot + 2 * call
    f_pct = f / pot_after_call * 100 if pot_after_call > 0 else 0.0

    if f < 0:
        feasibility = "not_needed"
    elif f > remaining_stack:
        feasibility = "impossible"
    elif f_pct <= 30:
        feasibility = "very_achievable"
    elif f_pct <= 70:
        feasibility = "borderline"
    else:
        feasibility = "very_difficult"

    return ImpliedOddsAssessment(
        f=round(f, 2) if math.isfinite(f) else f,
        feasibility=feasibility,
        f_as_pct_of_pot=round(f_pct, 1) if math.isfinite(f_pct) else f_pct,
        pot_after_call=pot_after_call,
    )


def spr(remaining_stack: float, pot: float) -> float:
    """Stack-to-pot ratio."""
    if pot <= 0:
        return math.inf
    return remaining_stack / pot


def analyze_spr(value: float) -> SPRAnalysis:
    if value < 1:
        return SPRAnalysis("very_shallow", "Essentially committed to the pot", "none")
    if value <= 3:
        return SPRAnalysis("short", "Limited implied odds available", "poor")
    if value <= 8:
        return SPRAnalysis("medium", "Reasonable implied odds for strong draws", "moderate")
    return SPRAnalysis("deep", "Excellent implied odds for disguised hands", "excellent")


def rule_of_2(outs: int) -> int:
    """Percent equity with one card to come."""
    return outs * 2


def rule_of_4(outs: int) -> int:
    """Percent equity with two cards to come. Overestimates above 8 outs."""
    return outs * 4


def corrected_rule(outs: int) -> int:
    """Replacement for the Rule of 4 when there are 9 or more outs."""
    return 3 * outs + 8


def exact_equity_1_card(outs: int) -> float:
    return outs / 46


def exact_equity_2_cards(outs: int) -> float:
    return 1 - ((47 - outs) * (46 - outs)) / (47 * 46)


def equity_shortcut(outs: int, cards_to_come: int, all_in: bool = False) -> EquityShortcut:
    """Pick the right mental shortcut for the situation.

    With betting still to come only the next card is guaranteed, so the
    1-card figure applies even on the flop.

    Args:
        outs: Number of outs.
        cards_to_come: 1 (turn to river) or 2 (flop to river).
        all_in: True when no more betting can happen.
    """
    if cards_to_come not in (1, 2):
        raise InvalidInputError(f"cards_to_come must be 1 or 2, got {cards_to_come}")

    if cards_to_come == 1 or not all_in:
        warning = None
        if cards_to_come == 2:
            warning = "Using 1-card equity because there is still betting on the turn"
        return EquityShortcut(
            estimate=rule_of_2(outs),
            exact=round(exact_equity_1_card(outs) * 100, 1),
            method="Rule of 2",
            warning=warning,
        )

    exact = round(exact_equity_2_cards(outs) * 100, 1)
    if outs <= 8:
        return EquityShortcut(estimate=rule_of_4(outs), exact=exact, method="Rule of 4")

    return EquityShortcut(
        estimate=corrected_rule(outs),
        exact=exact,
        method="Corrected Rule (3×outs+8)",
        warning=(f"Rule of 4 would say {rule_of_4(outs)}% but actual is {exact}%; "
                 f"corrected formula is more accurate"),
    )


def set_mining_check(call: float, effective_stack: float) -> SetMiningCheck:
    """Check whether stacks are deep enough to call for a set."""
    if call <= 0:
        raise InvalidInputError(f"Call amount must be positive, got {call}")

    ratio = effective_stack / call
    profitable = ratio >= SET_MINING_THRESHOLD
    if profitable:
        reason = (f"Stack depth ({round(ratio)}×) exceeds {SET_MINING_THRESHOLD}× "
                  f"threshold, set mining is profitable")
    else:
        reason = (f"Stack depth ({round(ratio)}×) is below {SET_MINING_THRESHOLD}× "
                  f"threshold, not enough implied odds to set mine")
    return SetMiningCheck(
        ratio=round(ratio, 1),
        threshold=SET_MINING_THRESHOLD,
        profitable=profitable,
        reason=reason,
    )
