"""Configuration management for rollstats."""
import os
from collections import Counter
import yaml
from pathlib import Path
from typing import Optional, Dict, Any, List, Literal
from pydantic import BaseModel, Field, field_validator

from rollstats.factory import STATISTIC_KINDS


class StatisticConfig(BaseModel):
    """One statistic to compute over the stream."""
    name: str = Field(..., description="Output column name for this statistic")
    kind: str = Field(..., description="Statistic kind, e.g. 'mean', 'rolling_quantile'")
    window: Optional[int] = Field(None, ge=1, description="Window size for rolling kinds")
    q: Optional[float] = Field(None, ge=0.0, le=1.0)
    q_inf: Optional[float] = Field(None, ge=0.0, le=1.0)
    q_sup: Optional[float] = Field(None, ge=0.0, le=1.0)
    ddof: Optional[int] = Field(None, ge=0)
    bias: Optional[bool] = None
    alpha: Optional[float] = Field(None, gt=0.0, le=1.0)
    fading_factor: Optional[float] = Field(None, ge=0.0, lt=1.0)

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, v: str) -> str:
        """Reject kinds the factory cannot build."""
        if v not in STATISTIC_KINDS:
            raise ValueError(f"unknown statistic kind '{v}'")
        return v

    @property
    def is_rolling(self) -> bool:
        return self.kind.startswith("rolling_")

    def params(self) -> Dict[str, Any]:
        """Constructor parameters that were explicitly set."""
        return self.model_dump(exclude={"name", "kind"}, exclude_none=True)


class StreamConfig(BaseModel):
    """Statistics computed over a single numeric stream."""
    default_window: int = Field(100, ge=1, description="Window used by rolling kinds without one")
    statistics: List[StatisticConfig] = Field(default_factory=lambda: [
        StatisticConfig(name="mean", kind="mean"),
        StatisticConfig(name="var", kind="var"),
        StatisticConfig(name="median", kind="quantile", q=0.5),
    ])

    @field_validator("statistics")
    @classmethod
    def validate_unique_names(cls, v: List[StatisticConfig]) -> List[StatisticConfig]:
        """Reject statistics sharing an output name."""
        counts = Counter(s.name for s in v)
        duplicates = sorted(name for name, n in counts.items() if n > 1)
        if duplicates:
            raise ValueError(f"duplicate statistic names: {', '.join(duplicates)}")
        return v

    def resolved_statistics(self) -> List[StatisticConfig]:
        """Statistics with ``default_window`` filled in for rolling kinds."""
        resolved = []
        for stat in self.statistics:
            if stat.is_rolling and stat.window is None:
                stat = stat.model_copy(update={"window": self.default_window})
            resolved.append(stat)
        return resolved


class RollstatsConfig(BaseModel):
    """Root configuration for rollstats."""
    stream: StreamConfig = Field(default_factory=StreamConfig)

    # Output
    output_format: Literal["csv", "ndjson"] = "csv"

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


CONFIG_ENV_VAR = "ROLLSTATS_CONFIG"
DEFAULT_CONFIG_PATHS = [
    Path("./config/config.yaml"),
    Path.home() / ".rollstats" / "config.yaml",
]


def find_config_path() -> Optional[Path]:
    """Config path from ``ROLLSTATS_CONFIG``, else the first existing default location."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return next((p for p in DEFAULT_CONFIG_PATHS if p.exists()), None)


def load_config(config_path: Optional[str] = None) -> RollstatsConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses ``find_config_path``.

    Returns:
        RollstatsConfig instance. An empty file yields the defaults.

    Raises:
        FileNotFoundError: no config file could be found
        ValueError: the YAML document is not a mapping
    """
    path = Path(config_path) if config_path is not None else find_config_path()
    if path is None:
        raise FileNotFoundError(
            f"No config file found. Set {CONFIG_ENV_VAR} or create config/config.yaml"
        )
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    yaml_data = yaml.safe_load(path.read_text())
    if yaml_data is None:
        return RollstatsConfig()
    if not isinstance(yaml_data, dict):
        raise ValueError(f"Config file {path} must contain a mapping, got {type(yaml_data).__name__}")
    return RollstatsConfig(**yaml_data)


def save_example_config(output_path: str = "./config/config.example.yaml"):
    """
    Save an example configuration file.
    
    Args:
        output_path: Where to save the example config
    """
    example = {
        "stream": {
            "default_window": 50,
            "statistics": [
                {"name": "mean", "kind": "mean"},
                {"name": "var_window", "kind": "rolling_var", "window": 20},
                {"name": "p95", "kind": "quantile", "q": 0.95},
                {"name": "iqr_window", "kind": "rolling_iqr", "q_inf": 0.25, "q_sup": 0.75},
                {"name": "skew", "kind": "skew", "bias": False},
                {"name": "kurtosis", "kind": "kurtosis", "bias": False},
                {"name": "ewmean", "kind": "ewmean", "alpha": 0.3},
            ],
        },
        "output_format": "csv",
        "log_level": "INFO",
    }
    
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    
    with open(output_path, 'w') as f:
        yaml.dump(example, f, default_flow_style=False, sort_keys=False)
    
    print(f"Example config saved to {output_path}")
