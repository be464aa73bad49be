# graph_search/config.py
# Tunables read from the environment, in the same spirit as the benchmark knobs
# (DLS_LIMIT, BEAM_K, ...) but collected into one frozen settings object.
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

ENV_PREFIX = "GRAPH_SEARCH_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class SearchSettings:
    max_expansions: Optional[int] = None   # None = unlimited
    early_goal_test: bool = False
    log_level: str = "WARNING"
    tree_limit: int = 5000                 # expansion cap for TreeSearch benchmark runs


def _int(env: Mapping[str, str], name: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{ENV_PREFIX}{name} must be >= 0, got {value}")
    return value


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(ENV_PREFIX + name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigError(f"{ENV_PREFIX}{name} must be a boolean flag, got {raw!r}")


def _level(env: Mapping[str, str], default: str) -> str:
    raw = env.get(ENV_PREFIX + "LOG_LEVEL", "").strip().upper() or default
    if not isinstance(logging.getLevelName(raw), int):
        raise ConfigError(f"{ENV_PREFIX}LOG_LEVEL: unknown level {raw!r}")
    return raw


def load_settings(env: Optional[Mapping[str, str]] = None) -> SearchSettings:
    """Build SearchSettings from GRAPH_SEARCH_* variables (os.environ by default)."""
    env = os.environ if env is None else env
    defaults = SearchSettings()
    return SearchSettings(
        max_expansions=_int(env, "MAX_EXPANSIONS", defaults.max_expansions),
        early_goal_test=_bool(env, "EARLY_GOAL_TEST", defaults.early_goal_test),
        log_level=_level(env, defaults.log_level),
        tree_limit=_int(env, "TREE_LIMIT", defaults.tree_limit),
    )


def configure_logging(settings: SearchSettings) -> None:
    """Entry-point helper; library modules only ever call logging.getLogger."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
