# jump61/config.py
import logging
import os
import tomllib
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    depth: int = 3
    maximizing_side: str = "red"  # side whose advantage counts as positive


@dataclass
class BoardConfig:
    size: int = 6


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    board: BoardConfig = field(default_factory=BoardConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "jump61.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "board"):
            for k, v in raw.get(section, {}).items():
                if hasattr(getattr(cfg, section), k):
                    setattr(getattr(cfg, section), k, v)
        if "log_level" in raw:
            cfg.log_level = raw["log_level"]
        return cfg


def apply_env_overrides(cfg: Config) -> Config:
    """Let JUMP61_SEARCH_DEPTH override the configured search depth."""
    override_depth = os.environ.get("JUMP61_SEARCH_DEPTH")
    if override_depth:
        try:
            cfg.search.depth = int(override_depth)
        except ValueError:
            logger.warning("ignoring non-integer JUMP61_SEARCH_DEPTH=%r", override_depth)
    return cfg


# single globally importable config instance
CONFIG = apply_env_overrides(
    Config.load_from_toml(os.environ.get("JUMP61_CONFIG_TOML", "jump61.toml")))
