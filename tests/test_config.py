"""Tests for configuration loading (config/settings.py)."""

import pytest

from config.settings import Config, EquityConfig, TableConfig, load_config, save_config


class TestEquityConfig:
    """Defaults and validation."""

    def test_defaults(self):
        config = EquityConfig()
        assert config.trials == 15000
        assert config.executor == "process"
        assert config.distribute_remainder is False
        assert config.seed is None

    def test_workers_default_to_cpu_count(self, monkeypatch):
        monkeypatch.setattr("config.settings.os.cpu_count", lambda: 6)
        assert EquityConfig().resolved_workers() == 6
        monkeypatch.setattr("config.settings.os.cpu_count", lambda: None)
        assert EquityConfig().resolved_workers() == 1
        assert EquityConfig(workers=3).resolved_workers() == 3

    @pytest.mark.parametrize(
        "kwargs",
        [{"trials": 0}, {"workers": 0}, {"executor": "gpu"}],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            EquityConfig(**kwargs)

    def test_negative_players(self):
        with pytest.raises(ValueError):
            TableConfig(initial_players=-1)


class TestConfigFiles:
    """YAML round trips."""

    def test_save_and_load(self, tmp_path):
        config = Config(
            equity=EquityConfig(trials=500, workers=2, executor="thread", distribute_remainder=True, seed=7),
            table=TableConfig(initial_players=3),
        )
        path = tmp_path / "nested" / "config.yaml"
        save_config(config, path)
        assert load_config(path) == config

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("equity:\n  trials: 1000\n")
        config = load_config(path)
        assert config.equity.trials == 1000
        assert config.equity.executor == "process"
        assert config.table == TableConfig()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_values_in_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("equity:\n  executor: cluster\n")
        with pytest.raises(ValueError):
            load_config(path)
