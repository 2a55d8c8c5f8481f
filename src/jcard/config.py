from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_CONF_NAME = "jcard.toml"


@dataclass
class Settings:
    default_region: str = "GB"
    log_level: str = "WARNING"
    indent: int = 2


def load_settings(path: Path | None = None) -> Settings:
    """Read ``path`` (default ``./jcard.toml``); anything unreadable keeps the defaults."""
    conf = Path(path) if path is not None else Path.cwd() / DEFAULT_CONF_NAME
    settings = Settings()
    if not conf.is_file():
        logger.debug("no config at %s, using defaults", conf)
        return settings
    try:
        data = tomllib.loads(conf.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        logger.debug("ignoring malformed config %s: %s", conf, exc)
        return settings

    settings.default_region = str(data.get("default_region", settings.default_region)).upper()
    level = str(data.get("log_level", settings.log_level)).upper()
    if isinstance(logging.getLevelName(level), int):
        settings.log_level = level
    else:
        logger.debug("ignoring unknown log_level %r in %s", level, conf)
    indent = data.get("indent", settings.indent)
    if isinstance(indent, int) and not isinstance(indent, bool) and indent >= 0:
        settings.indent = indent
    else:
        logger.debug("ignoring indent %r in %s", indent, conf)
    return settings
