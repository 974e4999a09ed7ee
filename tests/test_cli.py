"""Tests for the command line interface."""

from typer.testing import CliRunner

from poker_trainer import config
from poker_trainer.cli import app

runner = CliRunner()


class TestEvaluateCommand:

    def test_names_the_hand(self):
        result = runner.invoke(app, ["evaluate", "Ah", "2d", "3c", "4s", "5h"])
        assert result.exit_code == 0
        assert "Straight" in result.output

    def test_accepts_compact_cards(self):
        result = runner.invoke(app, ["evaluate", "AhAdAcAs2h"])
        assert result.exit_code == 0
        assert "Four of a Kind" in result.output

    def test_bad_card_exits_with_error(self):
        result = runner.invoke(app, ["evaluate", "Zz", "2d", "3c", "4s", "5h"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_too_few_cards(self):
        result = runner.invoke(app, ["evaluate", "Ah", "2d"])
        assert result.exit_code == 1


class TestOutsCommand:

    def test_flush_draw(self):
        result = runner.invoke(app, ["outs", "--hole", "As9s", "--board", "Ts6s3d"])
        assert result.exit_code == 0
        assert "flush" in result.output
        assert "Flush" in result.output

    def test_river_board_rejected(self):
        result = runner.invoke(app, ["outs", "--hole", "As9s", "--board", "Ts6s3d2c4h"])
        assert result.exit_code == 1


class TestEquityCommand:

    def test_fully_dealt(self):
        result = runner.invoke(app, [
            "equity", "--hand", "AhKh", "--hand", "QsQd",
            "--board", "QhJhTh2s3c", "--iterations", "100",
        ])
        assert result.exit_code == 0
        assert "100.0%" in result.output

    def test_random_opponent(self):
        result = runner.invoke(app, [
            "equity", "--hand", "AhAs", "--hand", "?",
            "--iterations", "200", "--seed", "7",
        ])
        assert result.exit_code == 0
        assert "random" in result.output

    def test_single_player_rejected(self):
        result = runner.invoke(app, ["equity", "--hand", "AhAs", "--iterations", "10"])
        assert result.exit_code == 1


class TestMathCommands:

    def test_odds(self):
        result = runner.invoke(app, [
            "odds", "--call", "5000", "--pot", "15000",
            "--equity", "0.2", "--stack", "40000",
        ])
        assert result.exit_code == 0
        assert "25.0%" in result.output

    def test_odds_rejects_bad_equity(self):
        result = runner.invoke(app, ["odds", "--call", "10", "--pot", "30", "--equity", "2"])
        assert result.exit_code == 1

    def test_shortcut(self):
        result = runner.invoke(app, ["shortcut", "15", "--cards-to-come", "2", "--all-in"])
        assert result.exit_code == 0
        assert "53%" in result.output

    def test_set_mine(self):
        result = runner.invoke(app, ["set-mine", "--call", "1500", "--stack", "25000"])
        assert result.exit_code == 0
        assert "16.7" in result.output


class TestLogging:

    def test_fallback_level_runs_commands(self, monkeypatch):
        monkeypatch.setenv("POKER_LOG_LEVEL", "LOUD")
        monkeypatch.setattr(config, "LOG_LEVEL", config._log_level("POKER_LOG_LEVEL"))
        result = runner.invoke(app, ["set-mine", "--call", "1500", "--stack", "25000"])
        assert result.exit_code == 0
