"""
Configuration loader for bugcount.

Loads default filter settings (categories, abbrevs, min_priority, plugin
descriptors, extra bug patterns) from:
  - explicit path via -config, or
  - one of: .bugcount.toml, bugcount.toml,
            .bugcount.yaml/yml, bugcount.yaml/yml,
            pyproject.toml ([tool.bugcount]),
            setup.cfg ([tool:bugcount] or [bugcount]).
Command-line options override anything loaded here.
"""

import os
import toml
import yaml
import configparser
from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field

from bugcount.errors import ConfigError
from bugcount.utils.logger import get_logger
from bugcount.utils.settings import NORMAL_PRIORITY

LOG = get_logger(__name__)

# Ordered search paths
_CONFIG_FILES = [
    ".bugcount.toml",
    "bugcount.toml",
    ".bugcount.yaml", ".bugcount.yml",
    "bugcount.yaml", "bugcount.yml",
    "pyproject.toml",
    "setup.cfg",
]


@dataclass
class Config:
    categories: List[str] = field(default_factory=list)
    abbrevs: List[str] = field(default_factory=list)
    min_priority: int = NORMAL_PRIORITY
    plugins: List[str] = field(default_factory=list)
    patterns: Dict[str, Dict[str, str]] = field(default_factory=dict)

    @classmethod
    def load(cls, path: str = None) -> "Config":
        cfg_path = path or cls._find_config_file(os.getcwd())
        if not cfg_path:
            return cls()
        LOG.debug("Reading configuration from %s", cfg_path)
        try:
            cfg = cls._read(cfg_path)
        except (OSError, toml.TomlDecodeError, yaml.YAMLError, configparser.Error) as e:
            raise ConfigError(f"Cannot read config file {cfg_path}: {e}") from e
        if not isinstance(cfg, dict):
            raise ConfigError(f"Config file {cfg_path} must contain a table of settings")
        return cls._from_dict(cfg)

    @staticmethod
    def _read(cfg_path: str) -> Dict[str, Any]:
        ext = os.path.splitext(cfg_path)[1].lower()
        if ext == ".toml":
            raw = toml.load(cfg_path)
            if os.path.basename(cfg_path) == "pyproject.toml":
                return raw.get("tool", {}).get("bugcount", {})
            return raw.get("tool", {}).get("bugcount", raw)
        if ext in (".yaml", ".yml"):
            with open(cfg_path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        if os.path.basename(cfg_path) == "setup.cfg":
            parser = configparser.ConfigParser()
            parser.read(cfg_path)
            if parser.has_section("tool:bugcount"):
                return dict(parser.items("tool:bugcount"))
            if parser.has_section("bugcount"):
                return dict(parser.items("bugcount"))
        return {}

    @staticmethod
    def _find_config_file(start_dir: str) -> Optional[str]:
        for name in _CONFIG_FILES:
            candidate = os.path.join(start_dir, name)
            if not os.path.isfile(candidate):
                continue
            # pyproject.toml / setup.cfg only count if they have a bugcount section
            if name == "pyproject.toml":
                try:
                    if "bugcount" not in toml.load(candidate).get("tool", {}):
                        continue
                except toml.TomlDecodeError:
                    continue
            if name == "setup.cfg":
                parser = configparser.ConfigParser()
                parser.read(candidate)
                if not (parser.has_section("tool:bugcount") or parser.has_section("bugcount")):
                    continue
            return candidate
        return None

    @staticmethod
    def _ensure_list(val: Any) -> List[Any]:
        if val is None:
            return []
        if isinstance(val, list):
            return val
        return [v.strip() for v in str(val).split(",") if v.strip()]

    @classmethod
    def _from_dict(cls, raw: Dict[str, Any]) -> "Config":
        def get(key, default=None):
            for k in raw:
                if k.lower() == key.lower():
                    return raw[k]
            return default

        categories = cls._ensure_list(get("categories"))
        abbrevs = cls._ensure_list(get("abbrevs", get("abbreviations")))
        plugins = cls._ensure_list(get("plugins"))
        patterns = get("patterns", {}) or {}
        if not isinstance(patterns, dict):
            raise ConfigError("'patterns' must be a table of bug type entries")

        min_priority = get("min_priority", get("minPriority", NORMAL_PRIORITY))
        if isinstance(min_priority, bool) or not isinstance(min_priority, (int, str)):
            raise ConfigError(f"min_priority must be an integer, got {min_priority!r}")
        try:
            min_priority = int(min_priority)
        except ValueError:
            raise ConfigError(f"min_priority must be an integer, got {min_priority!r}")

        return cls(
            categories=[str(c) for c in categories],
            abbrevs=[str(a) for a in abbrevs],
            min_priority=min_priority,
            plugins=[str(p) for p in plugins],
            patterns={str(k): v for k, v in patterns.items()},
        )
