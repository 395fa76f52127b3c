"""rollstats - Incremental global and rolling statistics over numeric streams."""

__version__ = "0.1.0"
__author__ = "rollstats Contributors"
__license__ = "MIT"

from config import RollstatsConfig, load_config

__all__ = ["RollstatsConfig", "load_config", "__version__"]
