"""Tests for the outs counter and draw visibility table."""

import pytest

from poker_trainer.analysis.outs import (
    DrawType, analyze_draw_visibility, classify_improvement, count_outs,
)
from poker_trainer.errors import InvalidInputError
from poker_trainer.models.card import parse_card, parse_cards
from poker_trainer.simulation.evaluator import HandCategory


def outs_for(hole, board):
    return count_outs(parse_cards(hole), parse_cards(board))


class TestCountOuts:
    """Exhaustive outs counting on flops and turns."""

    def test_nut_flush_draw(self):
        report = outs_for(["As", "9s"], ["Ts", "6s", "3d"])
        assert report.by_type[DrawType.FLUSH] == 9
        assert report.current_category == HandCategory.HIGH_CARD

    def test_open_ended_straight_draw(self):
        report = outs_for(["9h", "8h"], ["Td", "7c", "2s"])
        assert report.by_type[DrawType.STRAIGHT] == 8
        straight_cards = {o.card for o in report.outs if o.draw_type == DrawType.STRAIGHT}
        assert {c.rank for c in straight_cards} == {6, 11}

    def test_gutshot_on_turn(self):
        report = outs_for(["9s", "8d"], ["Jh", "5c", "3s", "6d"])
        assert report.by_type[DrawType.STRAIGHT] == 4

    def test_overcards(self):
        report = outs_for(["Ac", "Kd"], ["8h", "5c", "2d"])
        assert report.by_type[DrawType.PAIR] == 15
        assert report.total_outs == 15

    def test_combo_draw(self):
        report = outs_for(["Ts", "9s"], ["Js", "8s", "2c"])
        assert report.by_type[DrawType.STRAIGHT_FLUSH] == 2
        assert report.by_type[DrawType.FLUSH] == 7
        assert report.by_type[DrawType.STRAIGHT] == 6
        assert report.by_type[DrawType.PAIR] == 14
        assert report.total_outs == 29

    def test_flush_draw_on_turn(self):
        report = outs_for(["As", "9s"], ["Ts", "6s", "3d", "2h"])
        assert report.by_type[DrawType.FLUSH] == 9

    def test_trips_improve_to_boat_or_quads(self):
        report = outs_for(["Ah", "Ad"], ["Ac", "Kd", "Qs"])
        assert report.current_category == HandCategory.THREE_OF_A_KIND
        assert report.by_type == {DrawType.FULL_HOUSE: 6, DrawType.QUADS: 1}
        assert report.total_outs == 7

    def test_outs_are_distinct_and_unseen(self):
        hole = parse_cards(["Ts", "9s"])
        board = parse_cards(["Js", "8s", "2c"])
        report = count_outs(hole, board)
        cards = [o.card for o in report.outs]
        assert len(cards) == len(set(cards))
        assert not set(cards) & set(hole + board)
        assert sum(report.by_type.values()) == report.total_outs

    def test_every_out_raises_category(self):
        report = outs_for(["9h", "8h"], ["Td", "7c", "2s"])
        for out in report.outs:
            assert out.to_category > out.from_category
            assert out.from_category == report.current_category

    def test_out_card_for_flush(self):
        report = outs_for(["As", "9s"], ["Ts", "6s", "3d"])
        flush_cards = {o.card for o in report.outs if o.draw_type == DrawType.FLUSH}
        assert parse_card("Ks") in flush_cards

    @pytest.mark.parametrize("board", [
        ["2h", "3h"],
        ["2h", "3h", "4h", "5h", "6h"],
    ])
    def test_invalid_board_size(self, board):
        with pytest.raises(InvalidInputError):
            outs_for(["Ah", "Kh"], board)

    def test_invalid_hole_size(self):
        with pytest.raises(InvalidInputError):
            outs_for(["Ah"], ["2c", "3d", "4s"])

    def test_duplicate_cards(self):
        with pytest.raises(InvalidInputError):
            outs_for(["Ah", "Kh"], ["Ah", "3d", "4s"])


class TestClassifyImprovement:

    def test_destination_category_names_draw(self):
        assert classify_improvement(HandCategory.STRAIGHT_FLUSH) == DrawType.STRAIGHT_FLUSH
        assert classify_improvement(HandCategory.FOUR_OF_A_KIND) == DrawType.QUADS
        assert classify_improvement(HandCategory.THREE_OF_A_KIND) == DrawType.TRIPS
        assert classify_improvement(HandCategory.TWO_PAIR) == DrawType.TWO_PAIR

    def test_high_card_is_other(self):
        assert classify_improvement(HandCategory.HIGH_CARD) == DrawType.OTHER


class TestDrawVisibility:
    """The fixed visibility table."""

    def test_flush_draw_is_high_visibility(self):
        draws = analyze_draw_visibility({"flush": 9})
        assert len(draws) == 1
        assert draws[0].type == "Flush draw"
        assert draws[0].visibility == "high"
        assert draws[0].implied_odds == "worst"

    def test_open_ender(self):
        draws = analyze_draw_visibility({DrawType.STRAIGHT: 8})
        assert draws[0].visibility == "medium"
        assert draws[0].implied_odds == "medium"

    def test_gutshot(self):
        draws = analyze_draw_visibility({"straight": 4})
        assert draws[0].type == "Gutshot straight draw"
        assert draws[0].visibility == "low"
        assert draws[0].implied_odds == "good"

    def test_overcards(self):
        draws = analyze_draw_visibility({"pair": 6})
        assert draws[0].visibility == "high"
        assert draws[0].implied_odds == "worst"

    def test_sets_combine_trips_and_full_house(self):
        draws = analyze_draw_visibility({"trips": 2, "full_house": 3})
        assert len(draws) == 1
        assert draws[0].outs == 5
        assert draws[0].visibility == "very_low"
        assert draws[0].implied_odds == "best"

    def test_fixed_order(self):
        draws = analyze_draw_visibility({"trips": 2, "pair": 6, "straight": 8, "flush": 9})
        assert [d.type for d in draws] == [
            "Flush draw", "Open-ended straight draw", "Overcard outs", "Set/trips outs",
        ]

    def test_unlisted_types_ignored(self):
        assert analyze_draw_visibility({"two_pair": 9, "quads": 1}) == []

    def test_from_outs_report(self):
        report = outs_for(["As", "9s"], ["Ts", "6s", "3d"])
        types = [d.type for d in analyze_draw_visibility(report.by_type)]
        assert types[0] == "Flush draw"

    def test_rejects_unknown_draw_type(self):
        with pytest.raises(InvalidInputError):
            analyze_draw_visibility({"backdoor": 1})
