"""Configuration for TradeJournal.

Settings live in ``~/.config/tradejournal/config.toml``::

    [import]
    delimiter = ";"
    encoding = "utf-8-sig"

    [display]
    currency_symbol = "$"
    weekday_names = "en"
"""

import logging
from pathlib import Path
from typing import Literal, Optional

import toml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tradejournal" / "config.toml"


class JournalConfig(BaseModel):
    """Import and display settings."""

    delimiter: str = Field(default=";", min_length=1, max_length=1, description="Field delimiter")
    encoding: str = Field(default="utf-8-sig", description="Source file encoding")
    currency_symbol: str = Field(default="$", description="Currency symbol for display")
    weekday_names: Literal["en", "fr"] = Field(default="en", description="Weekday name language")

    model_config = {"frozen": True}


def load_config(config_path: Optional[Path] = None) -> JournalConfig:
    """Load configuration, falling back to defaults.

    Args:
        config_path: Path to a TOML file. Uses the default location if not provided.

    Returns:
        JournalConfig built from the file, or defaults if the file is
        missing or unreadable.
    """
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return JournalConfig()

    try:
        data = toml.load(path)
        return JournalConfig(**data.get("import", {}), **data.get("display", {}))
    except (OSError, TypeError, toml.TomlDecodeError, ValidationError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return JournalConfig()
