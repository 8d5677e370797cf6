"""Article stub rendering.

The stub is a Jinja2 template (``templates/article.md.j2`` by default) that
receives the fields of an ``ArticleTemplate``.  A custom templates directory may
provide its own ``article.md.j2``.
"""
from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from zenn_scaffold.errors import ConfigError
from zenn_scaffold.logger import get_logger
from zenn_scaffold.models import ArticleTemplate

log = get_logger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "templates"
ARTICLE_TEMPLATE_NAME = "article.md.j2"


def yaml_str(value: object) -> str:
    """Render *value* as a double-quoted YAML scalar.

    Non-ASCII text is kept as-is so tags like ``ドメイン駆動設計`` stay readable.
    """
    text = str(value)
    text = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{text}"'


class ArticleRenderer:
    """Renders article stubs from a Jinja2 templates directory."""

    def __init__(self, templates_dir: Optional[Path] = None) -> None:
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self.env.filters["yaml_str"] = yaml_str

    def render(self, template: ArticleTemplate) -> str:
        try:
            tpl = self.env.get_template(ARTICLE_TEMPLATE_NAME)
            content = tpl.render(**asdict(template))
        except TemplateError as exc:
            raise ConfigError(
                f"Cannot render {ARTICLE_TEMPLATE_NAME} from {self.templates_dir}: {exc}"
            ) from exc
        log.debug("Article template rendered", templates_dir=str(self.templates_dir))
        return content
