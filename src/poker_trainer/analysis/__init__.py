"""Outs counting and poker math."""

from poker_trainer.analysis.outs import (
    DrawType, Out, OutsReport, DrawVisibility, count_outs, analyze_draw_visibility,
)
from poker_trainer.analysis import odds

__all__ = [
    "DrawType", "Out", "OutsReport", "DrawVisibility",
    "count_outs", "analyze_draw_visibility", "odds",
]
