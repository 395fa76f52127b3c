"""Tests for configuration and the statistic factory."""
import pytest
import yaml
import sys
from pathlib import Path

from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).parent.parent))

from config import RollstatsConfig, StatisticConfig, StreamConfig, load_config, save_example_config
from config.config import find_config_path
from rollstats import (
    build_statistic,
    build_from_config,
    InvalidParameter,
    Mean,
    Rolling,
    RollingQuantile,
    Variance,
)


def test_load_config(temp_dir, sample_config):
    """Test loading a YAML config file."""
    path = temp_dir / "config.yaml"
    path.write_text(yaml.safe_dump(sample_config))

    config = load_config(str(path))
    assert config.log_level == "DEBUG"
    assert [s.name for s in config.stream.statistics] == ["mean", "var_w", "p90"]


def test_load_config_from_env(temp_dir, sample_config, monkeypatch):
    """Test the environment variable is used when no path is given."""
    path = temp_dir / "env.yaml"
    path.write_text(yaml.safe_dump(sample_config))
    monkeypatch.setenv("ROLLSTATS_CONFIG", str(path))

    assert load_config().stream.default_window == 4


def test_load_config_missing(temp_dir):
    """Test a missing config file."""
    with pytest.raises(FileNotFoundError):
        load_config(str(temp_dir / "nope.yaml"))


def test_example_config_round_trip(temp_dir):
    """Test the example config loads and builds."""
    path = temp_dir / "example.yaml"
    save_example_config(str(path))
    config = load_config(str(path))
    stats = [build_from_config(s) for s in config.stream.resolved_statistics()]
    assert len(stats) == 7


def test_resolved_statistics_fill_default_window(sample_config):
    """Test rolling kinds without a window get the default one."""
    config = RollstatsConfig(**sample_config)
    resolved = {s.name: s for s in config.stream.resolved_statistics()}
    assert resolved["mean"].window is None
    assert resolved["var_w"].window == 4
    assert resolved["p90"].window == 10


@pytest.mark.parametrize("bad", [
    {"name": "x", "kind": "median_of_medians"},
    {"name": "x", "kind": "quantile", "q": 1.5},
    {"name": "x", "kind": "rolling_min", "window": 0},
    {"name": "x", "kind": "ewmean", "alpha": 0.0},
])
def test_invalid_statistic_config(bad):
    """Test schema level validation."""
    with pytest.raises(ValidationError):
        StatisticConfig(**bad)


def test_build_from_config():
    """Test building accumulators from config entries."""
    stat = build_from_config(StatisticConfig(name="p", kind="rolling_quantile", q=0.9, window=5))
    assert isinstance(stat, RollingQuantile)
    assert stat.q == 0.9
    assert stat.window_size == 5

    stat = build_from_config(StatisticConfig(name="v", kind="rolling_var", window=3, ddof=0))
    assert isinstance(stat, Rolling)
    assert isinstance(stat.to_roll, Variance)
    assert stat.to_roll.ddof == 0


def test_build_statistic_defaults():
    """Test kinds build with default parameters."""
    assert isinstance(build_statistic("mean"), Mean)
    assert build_statistic("quantile").q == 0.5


def test_build_statistic_errors():
    """Test unknown kinds, missing windows and bad values."""
    with pytest.raises(InvalidParameter):
        build_statistic("nope")
    with pytest.raises(InvalidParameter):
        build_statistic("rolling_min")
    with pytest.raises(InvalidParameter):
        build_statistic("mean", q=0.5)
    with pytest.raises(InvalidParameter):
        build_statistic("iqr", q_inf=0.9, q_sup=0.1)


def test_duplicate_statistic_names_rejected():
    """Test two statistics cannot share an output name."""
    with pytest.raises(ValidationError, match="duplicate statistic names: m"):
        StreamConfig(statistics=[
            {"name": "m", "kind": "mean"},
            {"name": "v", "kind": "var"},
            {"name": "m", "kind": "rolling_mean", "window": 5},
        ])


def test_load_config_empty_file(temp_dir):
    """Test an empty YAML file gives the defaults."""
    path = temp_dir / "empty.yaml"
    path.write_text("")
    assert load_config(str(path)) == RollstatsConfig()


def test_load_config_not_a_mapping(temp_dir):
    """Test a YAML list is refused."""
    path = temp_dir / "list.yaml"
    path.write_text("- mean\n- var\n")
    with pytest.raises(ValueError, match="must contain a mapping"):
        load_config(str(path))


def test_find_config_path_prefers_env(temp_dir, monkeypatch):
    """Test the environment variable wins over default locations."""
    monkeypatch.setenv("ROLLSTATS_CONFIG", str(temp_dir / "custom.yaml"))
    assert find_config_path() == temp_dir / "custom.yaml"


def test_find_config_path_none(temp_dir, monkeypatch):
    """Test no env var and no default file finds nothing."""
    monkeypatch.delenv("ROLLSTATS_CONFIG", raising=False)
    monkeypatch.chdir(temp_dir)
    monkeypatch.setattr("config.config.DEFAULT_CONFIG_PATHS", [temp_dir / "config" / "config.yaml"])
    assert find_config_path() is None
    with pytest.raises(FileNotFoundError):
        load_config()
