"""Loads and validates zenn-scaffold.yaml into a ScaffoldConfig."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml

from zenn_scaffold.errors import ConfigError
from zenn_scaffold.logger import get_logger
from zenn_scaffold.models import ARTICLE_TYPES, ArticleTemplate, ScaffoldConfig

log = get_logger(__name__)

DEFAULT_CONFIG_NAME = "zenn-scaffold.yaml"

# Zenn rejects articles with more than five topics
MAX_TOPICS = 5

KNOWN_KEYS = {
    "articles_dir",
    "templates_dir",
    "title",
    "emoji",
    "type",
    "topics",
    "published",
}


def _validate_template(template: ArticleTemplate) -> ArticleTemplate:
    if template.type not in ARTICLE_TYPES:
        raise ConfigError(f"type must be one of {', '.join(ARTICLE_TYPES)}, got {template.type!r}")
    if not template.emoji:
        raise ConfigError("emoji must not be empty")
    if len(template.topics) > MAX_TOPICS:
        raise ConfigError(f"at most {MAX_TOPICS} topics are allowed, got {len(template.topics)}")
    for topic in template.topics:
        if not isinstance(topic, str) or not topic.strip():
            raise ConfigError(f"topics must be non-empty strings, got {topic!r}")
    if not isinstance(template.published, bool):
        raise ConfigError(f"published must be true or false, got {template.published!r}")
    return template


def _path_value(raw: dict[str, Any], key: str) -> Optional[Path]:
    value = raw.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, (str, os.PathLike)):
        raise ConfigError(f"{key} must be a path, got {value!r}")
    return Path(value)


def build_config(raw: dict[str, Any]) -> ScaffoldConfig:
    """Turn a plain mapping (from YAML or CLI flags) into a validated config."""
    unknown = sorted(set(raw) - KNOWN_KEYS)
    if unknown:
        log.warning("Ignoring unknown config keys", keys=unknown)

    defaults = ArticleTemplate()
    topics = raw.get("topics", defaults.topics)
    if isinstance(topics, str) or not isinstance(topics, (list, tuple)):
        raise ConfigError(f"topics must be a list, got {topics!r}")

    template = _validate_template(
        ArticleTemplate(
            title=defaults.title if raw.get("title") is None else str(raw["title"]),
            emoji=str(raw.get("emoji", defaults.emoji) or ""),
            type=raw.get("type", defaults.type),
            topics=topics,
            published=raw.get("published", defaults.published),
        )
    )

    return ScaffoldConfig(
        articles_dir=_path_value(raw, "articles_dir") or Path("articles"),
        templates_dir=_path_value(raw, "templates_dir"),
        template=template,
    )


def read_config_file(config_path: Optional[Path] = None) -> dict[str, Any]:
    """Return the raw mapping from a config file.

    An explicit *config_path* must exist.  Without one, ``zenn-scaffold.yaml``
    in the working directory is used when present and ignored otherwise.
    """
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_NAME)
        if not config_path.exists():
            log.debug("No config file found, using defaults", path=str(config_path))
            return {}
    elif not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Cannot parse {config_path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"{config_path} must contain a mapping at the top level")

    log.info("Config loaded", path=str(config_path), keys=sorted(raw))
    return raw


def load_config(
    config_path: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> ScaffoldConfig:
    """Read the config file, apply non-None *overrides* and validate the result."""
    raw = read_config_file(config_path)
    for key, value in (overrides or {}).items():
        if value is not None:
            raw[key] = value
    return build_config(raw)
