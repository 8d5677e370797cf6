"""Data models for zenn-scaffold."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_TOPICS: tuple[str, ...] = ("CakePHP", "PHP8", "ドメイン駆動設計", "DDD")

ARTICLE_TYPES = ("tech", "idea")


@dataclass(frozen=True)
class ArticleTemplate:
    """Front-matter values written into every new article stub."""

    title: str = ""
    emoji: str = "🦉"
    type: str = "idea"
    topics: tuple[str, ...] = DEFAULT_TOPICS
    published: bool = False

    def __post_init__(self) -> None:
        # Accept any iterable of tags but store an immutable copy
        object.__setattr__(self, "topics", tuple(self.topics))


@dataclass
class ScaffoldConfig:
    """Settings resolved from the config file and command-line flags."""

    articles_dir: Path = Path("articles")
    templates_dir: Optional[Path] = None
    template: ArticleTemplate = field(default_factory=ArticleTemplate)


@dataclass(frozen=True)
class CreatedArticle:
    """Represents one scaffolded article file."""

    slug: str
    path: Path
    content: str
    written: bool = True
