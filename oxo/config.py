# oxo/config.py
import logging
import os
import tomllib
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class SearchConfig:
    depth: int = 4
    random_move_probability: float = 0.1  # chance the computer ignores the search
    seed: Optional[int] = None  # None means nondeterministic random moves


@dataclass
class UIConfig:
    engine_name: str = "Oxo"
    computer_delay_ms: int = 300  # pause before the computer answers
    api_port: int = 8000


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "ui"):
            target = getattr(cfg, section)
            for k, v in raw.get(section, {}).items():
                if hasattr(target, k):
                    setattr(target, k, v)
                else:
                    logger.warning("Unknown config key [%s] %s in %s", section, k, path)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg

    def apply_env(self, environ=os.environ) -> "Config":
        """Apply OXO_SEARCH_DEPTH / OXO_RANDOM_MOVE_PROBABILITY overrides."""
        depth = environ.get("OXO_SEARCH_DEPTH")
        if depth:
            try:
                self.search.depth = int(depth)
            except ValueError:
                logger.warning("Ignoring invalid OXO_SEARCH_DEPTH=%r", depth)
        probability = environ.get("OXO_RANDOM_MOVE_PROBABILITY")
        if probability:
            try:
                self.search.random_move_probability = float(probability)
            except ValueError:
                logger.warning("Ignoring invalid OXO_RANDOM_MOVE_PROBABILITY=%r", probability)
        return self


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("OXO_CONFIG_TOML", "config.toml")).apply_env()
