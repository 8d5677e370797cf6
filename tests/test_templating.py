"""Tests for article stub rendering (zenn_scaffold.templating)."""

from __future__ import annotations

import pytest
import yaml

from zenn_scaffold.errors import ConfigError
from zenn_scaffold.models import ArticleTemplate
from zenn_scaffold.templating import ArticleRenderer, yaml_str

pytestmark = pytest.mark.unit


class TestYamlStr:
    def test_plain(self):
        assert yaml_str("idea") == '"idea"'

    def test_empty(self):
        assert yaml_str("") == '""'

    def test_non_ascii_kept(self):
        assert yaml_str("ドメイン駆動設計") == '"ドメイン駆動設計"'

    def test_quotes_and_backslashes_escaped(self):
        rendered = yaml_str('say "hi" \\ bye')
        assert yaml.safe_load(f"v: {rendered}")["v"] == 'say "hi" \\ bye'


class TestArticleRenderer:
    def test_default_template_exact(self, default_article):
        assert ArticleRenderer().render(ArticleTemplate()) == default_article

    def test_front_matter_parses_as_yaml(self):
        content = ArticleRenderer().render(
            ArticleTemplate(title='Value "objects"', type="tech", topics=["Python"], published=True)
        )
        front_matter = content.split("---")[1]
        data = yaml.safe_load(front_matter)
        assert data == {
            "title": 'Value "objects"',
            "emoji": "🦉",
            "type": "tech",
            "topics": ["Python"],
            "published": True,
        }

    def test_empty_topics(self):
        content = ArticleRenderer().render(ArticleTemplate(topics=[]))
        assert "topics: []\n" in content

    def test_custom_templates_dir(self, custom_templates_dir):
        renderer = ArticleRenderer(custom_templates_dir)
        content = renderer.render(ArticleTemplate(title="Hello", topics=["a", "b"]))
        assert content == "# Hello\n\ntags: a,b\n"

    def test_missing_template_raises_config_error(self, tmp_path):
        with pytest.raises(ConfigError):
            ArticleRenderer(tmp_path).render(ArticleTemplate())

    def test_undefined_variable_raises_config_error(self, tmp_path):
        (tmp_path / "article.md.j2").write_text("{{ author }}\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            ArticleRenderer(tmp_path).render(ArticleTemplate())
