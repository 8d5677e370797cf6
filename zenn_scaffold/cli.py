"""Command-line entry point – scaffolds one Zenn article stub.

Usage:
    zenn-new-article                       # articles/article-<hex>.md
    zenn-new-article --dir drafts          # drafts/article-<hex>.md
    zenn-new-article --topic Python --topic pytest
    zenn-new-article --dry-run             # print the path, write nothing

Environment variables:
    LOG_LEVEL        Optional: DEBUG | INFO | WARNING (default: WARNING)
"""
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from zenn_scaffold.config_loader import load_config
from zenn_scaffold.errors import ERR_NOT_FOUND, OK, ScaffoldError
from zenn_scaffold.logger import configure_logging, get_logger
from zenn_scaffold.models import ARTICLE_TYPES
from zenn_scaffold.scaffolder import Scaffolder


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="zenn-new-article",
        description="Create a new Zenn article stub with a random slug.",
    )
    parser.add_argument(
        "--dir",
        dest="articles_dir",
        type=Path,
        help="Directory to create the article in (default: articles).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML config file (default: zenn-scaffold.yaml if present).",
    )
    parser.add_argument(
        "--topic",
        dest="topics",
        action="append",
        metavar="TAG",
        help="Topic tag; repeat for several. Replaces the configured topics.",
    )
    parser.add_argument("--title", help="Front-matter title (default: empty).")
    parser.add_argument("--emoji", help="Front-matter emoji.")
    parser.add_argument("--type", choices=ARTICLE_TYPES, help="Article type.")
    parser.add_argument("--slug", help="Use this slug instead of a random one.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the path that would be created without writing anything.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(os.environ.get("LOG_LEVEL", "WARNING"))
    log = get_logger("zenn_scaffold.cli")

    try:
        config = load_config(
            args.config,
            overrides={
                "articles_dir": args.articles_dir,
                "topics": args.topics,
                "title": args.title,
                "emoji": args.emoji,
                "type": args.type,
            },
        )
        article = Scaffolder(config).create_article(slug=args.slug, dry_run=args.dry_run)
    except FileNotFoundError as exc:
        print(f"❌ Error creating article: {exc}", file=sys.stderr)
        return ERR_NOT_FOUND
    except ScaffoldError as exc:
        log.debug("Scaffolding failed", error_type=type(exc).__name__, code=exc.code)
        print(f"❌ Error creating article: {exc}", file=sys.stderr)
        return exc.code

    if article.written:
        print(f"✅ Created: {article.path}")
    else:
        print(f"Would create: {article.path}")
    return OK


if __name__ == "__main__":
    sys.exit(main())
