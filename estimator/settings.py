"""Display settings for the Streamlit page, read from config/app.yaml.

Loan assumptions are fixed in estimator.engine and are not read from here.
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from estimator.errors import SettingsError

logger = logging.getLogger(__name__)

CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "app.yaml"
CONFIG_ENV = "ESTIMATOR_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "title": "Housing Affordability Estimator",
    "currency_symbol": "RM",
    "locale_label": "en-MY",
    "footer_label": "Made with ❤️ by Muhammad Azri",
    "footer_url": "https://www.linkedin.com/in/jason-ng-94411119a/",
    "tips": [],
    "log_level": "INFO",
}


def config_path() -> Path:
    override = os.getenv(CONFIG_ENV)
    return Path(override) if override else CONFIG_PATH


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    path = path or config_path()
    raw: Any = {}
    if path.exists():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        logger.info("loaded settings from %s", path)
    else:
        logger.warning("settings file %s not found, using defaults", path)
    if not isinstance(raw, dict):
        raise SettingsError(f"{path} must contain a mapping, got {type(raw).__name__}")
    settings = dict(DEFAULTS)
    settings.update({k: v for k, v in raw.items() if v is not None})
    return settings


def configure_logging(level: Any = "INFO") -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
