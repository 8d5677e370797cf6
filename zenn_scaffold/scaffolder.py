"""Article scaffolder – writes one new Zenn article stub per call.

The target directory is created on demand (repeat calls and concurrent runs are
fine).  The article file itself is opened with exclusive creation so an
existing file is never overwritten.  No atomic-rename step is added: a write
interrupted by the OS (e.g. disk full) can leave a partial file behind.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from zenn_scaffold.errors import DirectoryCreationError, WriteError
from zenn_scaffold.logger import get_logger
from zenn_scaffold.models import ArticleTemplate, CreatedArticle, ScaffoldConfig
from zenn_scaffold.slug import generate_slug, normalize_slug
from zenn_scaffold.templating import ArticleRenderer

log = get_logger(__name__)


def ensure_directory(directory: Path) -> None:
    """Create *directory* and any missing parents; an existing directory is fine."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except FileExistsError as exc:
        raise DirectoryCreationError(
            f"Cannot create articles directory {directory}: a non-directory entry is in the way"
        ) from exc
    except OSError as exc:
        raise DirectoryCreationError(
            f"Cannot create articles directory {directory}: {exc.strerror or exc}"
        ) from exc


def write_new_file(path: Path, content: str) -> None:
    """Write *content* to *path* as UTF-8, failing if *path* already exists."""
    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise WriteError(f"Cannot write {path}: content is not valid UTF-8 ({exc.reason})") from exc

    try:
        with path.open("xb") as fh:
            fh.write(data)
    except FileExistsError as exc:
        raise WriteError(f"Cannot write {path}: a file with that name already exists") from exc
    except OSError as exc:
        raise WriteError(f"Cannot write {path}: {exc.strerror or exc}") from exc


class Scaffolder:
    """Creates article stubs under a configurable directory."""

    def __init__(self, config: Optional[ScaffoldConfig] = None) -> None:
        self.config = config or ScaffoldConfig()
        self.renderer = ArticleRenderer(self.config.templates_dir)

    @property
    def template(self) -> ArticleTemplate:
        return self.config.template

    def render(self) -> str:
        return self.renderer.render(self.template)

    def create_article(
        self,
        articles_dir: Union[str, Path, None] = None,
        slug: Optional[str] = None,
        dry_run: bool = False,
    ) -> CreatedArticle:
        """Write a new article stub and return where it went.

        Args:
            articles_dir: Overrides the configured directory for this call.
            slug: Explicit slug; normalised and checked against the Zenn rule.
                  A random ``article-<hex>`` slug is generated when omitted.
            dry_run: Resolve slug, path and content without touching the disk.

        Raises:
            InvalidSlugError: *slug* is not an acceptable Zenn slug.
            DirectoryCreationError: the directory cannot be created.
            WriteError: the file cannot be created, including a name collision.
        """
        directory = Path(articles_dir) if articles_dir is not None else self.config.articles_dir
        slug = normalize_slug(slug) if slug is not None else generate_slug()
        path = directory / f"{slug}.md"
        content = self.render()

        if dry_run:
            log.info("DRY RUN – article not written", slug=slug, path=str(path))
            return CreatedArticle(slug=slug, path=path, content=content, written=False)

        ensure_directory(directory)
        write_new_file(path, content)

        log.info("Article created", slug=slug, path=str(path), bytes=len(content.encode("utf-8")))
        return CreatedArticle(slug=slug, path=path, content=content)


def create_article(articles_dir: Union[str, Path] = "articles") -> Path:
    """Scaffold one article with the default template and return its path."""
    return Scaffolder().create_article(articles_dir).path
