"""Shared pytest fixtures for the zenn-scaffold test suite.

Provides reusable fixtures for:
- An isolated working directory
- The exact stub text produced by the default template
- Writing throwaway config files and template directories
"""

from __future__ import annotations

from pathlib import Path

import pytest

from zenn_scaffold.logger import configure_logging


DEFAULT_ARTICLE = (
    "---\n"
    'title: ""\n'
    'emoji: "🦉"\n'
    'type: "idea"\n'
    'topics: ["CakePHP", "PHP8", "ドメイン駆動設計", "DDD"]\n'
    "published: false\n"
    "---\n"
    "\n"
)

SLUG_PATTERN = r"article-[0-9a-f]{16}"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True, scope="session")
def _structlog_configured():
    """Route structlog through stdlib logging so nothing lands on stdout."""
    configure_logging("DEBUG")


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary directory that is also the current working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def default_article() -> str:
    """Byte-for-byte content of a stub rendered from the default template."""
    return DEFAULT_ARTICLE


@pytest.fixture
def write_config(tmp_path: Path):
    """Factory writing a YAML config file and returning its path."""

    def _write(text: str, name: str = "zenn-scaffold.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def custom_templates_dir(tmp_path: Path) -> Path:
    """Templates directory with a minimal custom article.md.j2."""
    templates = tmp_path / "custom-templates"
    templates.mkdir()
    (templates / "article.md.j2").write_text(
        "# {{ title }}\n\ntags: {{ topics | join(',') }}\n",
        encoding="utf-8",
    )
    return templates
