"""Tests for the command line interface (main.py)."""

import pytest
from typer.testing import CliRunner

from config.settings import Config, EquityConfig, save_config
from main import app

runner = CliRunner()


@pytest.fixture
def thread_config_file(tmp_path):
    path = tmp_path / "config.yaml"
    save_config(Config(equity=EquityConfig(trials=100, workers=2, executor="thread", seed=3)), path)
    return path


class TestEquityCommand:
    """holdem-equity equity ..."""

    def test_river_result(self, thread_config_file):
        result = runner.invoke(
            app,
            ["equity", "-p", "AsAd", "-p", "KsKd", "-b", "2c7d9hJcQs", "-c", str(thread_config_file)],
        )
        assert result.exit_code == 0, result.output
        assert "100.00" in result.output
        assert "Tie: 0.00%" in result.output

    def test_command_line_overrides(self, thread_config_file):
        result = runner.invoke(
            app,
            [
                "equity", "-p", "AsAd", "-p", "KsKd", "-b", "2c 7d 9h",
                "-c", str(thread_config_file), "-n", "60", "-w", "3",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "60 trials" in result.output
        assert "3 workers" in result.output

    def test_preflop_message(self, thread_config_file):
        result = runner.invoke(app, ["equity", "-p", "AsAd", "-p", "KsKd", "-c", str(thread_config_file)])
        assert result.exit_code == 0
        assert "three community cards" in result.output

    @pytest.mark.parametrize(
        "args",
        [
            ["-p", "AsZz", "-b", "2c7d9h"],  # bad card
            ["-p", "AsAd", "-p", "AsKd", "-b", "2c7d9h"],  # card dealt twice
            ["-p", "AsAdAh", "-b", "2c7d9h"],  # three hole cards
            ["-p", "AsAd", "-b", "2c7d9hJcQs3d"],  # six board cards
        ],
    )
    def test_invalid_input(self, args, thread_config_file):
        result = runner.invoke(app, ["equity", *args, "-c", str(thread_config_file)])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_missing_config(self, tmp_path):
        result = runner.invoke(
            app, ["equity", "-p", "AsAd", "-b", "2c7d9h", "-c", str(tmp_path / "nope.yaml")]
        )
        assert result.exit_code == 1


class TestEvaluateCommand:
    """holdem-equity evaluate ..."""

    def test_royal_flush(self):
        result = runner.invoke(app, ["evaluate", "As", "Ks", "Qs", "Js", "Ts"])
        assert result.exit_code == 0
        assert "Straight Flush" in result.output
        assert "8014" in result.output

    def test_too_few_cards(self):
        result = runner.invoke(app, ["evaluate", "As", "Ks"])
        assert result.exit_code == 1
        assert "at least 5" in result.output


def test_info(thread_config_file):
    result = runner.invoke(app, ["info", "-c", str(thread_config_file)])
    assert result.exit_code == 0
    assert "thread" in result.output
    assert "100" in result.output
