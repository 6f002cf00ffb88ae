"""
Runtime settings for the tool discovery service.
Defaults are the fixed limits of the discovery engine; config.json may override them.
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = 'DEV_TOOLS_CONFIG_DIR'


@dataclass
class Settings:
    """Limits and tuning knobs for search and the persisted stores."""
    history_limit: int = 10
    history_max_age_days: int = 30
    share_log_limit: int = 100
    favorites_limit: Optional[int] = None  # None = unbounded
    search_threshold: float = 0.4  # 0 = exact match, 1 = match anything
    min_match_length: int = 2
    score_deadband: float = 0.1
    share_cooldown_seconds: int = 30
    storage_dir: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Settings':
        """Build settings from a config mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


def get_config_directory() -> Path:
    """Get the config directory path."""
    config_dir = os.environ.get(CONFIG_DIR_ENV)
    if config_dir:
        return Path(config_dir)

    # Default to ~/.config/dev-tools
    return Path.home() / '.config' / 'dev-tools'


def load_settings(config_dir: Optional[Path] = None) -> Settings:
    """Load settings from <config_dir>/config.json, falling back to defaults"""
    config_dir = Path(config_dir) if config_dir else get_config_directory()
    config_file = config_dir / 'config.json'

    overrides: Dict[str, Any] = {}
    if config_file.exists():
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config = json.load(f)
            overrides = config.get('discovery', {}) if isinstance(config, dict) else {}
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Could not read %s, using default settings: %s", config_file, e)

    settings = Settings.from_dict(overrides if isinstance(overrides, dict) else {})
    if not settings.storage_dir:
        settings.storage_dir = str(config_dir / 'storage')
    return settings
