"""Config package."""
from .config import RollstatsConfig, StatisticConfig, StreamConfig, load_config, save_example_config

__all__ = ["RollstatsConfig", "StatisticConfig", "StreamConfig", "load_config", "save_example_config"]
