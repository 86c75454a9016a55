"""Blog post indexer.

Reads all posts of both languages and generates structured JSON data
files: a post index with reading times, the translation pair map, and
tag frequencies.

CLI: python -m src.indexer --content-dir src/content/blog --output-dir data/
"""

import argparse
import json
import logging
import math
import re
import sys
from collections import Counter
from datetime import date
from pathlib import Path

from .config_loader import load_config
from .posts import Language, Post, PostSet, load_posts

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
DATE_RE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})")


def reading_time(body: str) -> int:
    """Estimated reading time in whole minutes."""
    # Strip markdown formatting for word count
    clean = re.sub(r"[#*_`\[\]()>|]", " ", body)
    clean = re.sub(r"https?://\S+", "", clean)
    words = clean.split()
    return math.ceil(len(words) / WORDS_PER_MINUTE)


def pub_date_key(post: Post) -> tuple[date, str]:
    """Sort key on the parsed pubDate; unparseable dates sort as oldest."""
    raw = post.meta.pub_date or ""
    match = DATE_RE.match(raw.strip())
    parsed = date.min
    if match:
        try:
            parsed = date(*(int(g) for g in match.groups()))
        except ValueError:
            pass
    return parsed, raw


def published(posts: list[Post]) -> list[Post]:
    return [p for p in posts if not p.meta.is_draft]


def build_posts_index(
    posts: list[Post], default_author: str, include_drafts: bool = False
) -> dict:
    """Build the posts-index.json structure, newest first."""
    selected = posts if include_drafts else published(posts)
    selected = sorted(selected, key=lambda p: p.slug)
    selected = sorted(selected, key=pub_date_key, reverse=True)

    entries = []
    for p in selected:
        meta = p.meta
        entries.append({
            "lang": p.language.value,
            "slug": p.slug,
            "title": meta.title or "",
            "description": meta.description or "",
            "pubDate": meta.pub_date or "",
            "author": meta.author or default_author,
            "tags": meta.tags if isinstance(meta.tags, list) else [],
            "draft": meta.is_draft,
            "reading_time": reading_time(p.body),
            "relatedSlug": meta.related_slug or "",
        })

    return {
        "version": "1.0",
        "updated": date.today().isoformat(),
        "total_posts": len(entries),
        "languages": dict(Counter(e["lang"] for e in entries)),
        "posts": entries,
    }


def build_translation_map(post_set: PostSet) -> dict:
    """Build translations.json: symmetric es/en pairs and unpaired slugs."""
    pairs = []
    paired = {lang: set() for lang in Language}

    for slug, post in sorted(post_set.by_language[Language.ES].items()):
        related = post.meta.related_slug
        target = post_set.lookup(Language.EN, related) if related else None
        if target is not None and target.meta.related_slug == slug:
            pairs.append({"es": slug, "en": target.slug})
            paired[Language.ES].add(slug)
            paired[Language.EN].add(target.slug)

    unpaired = {
        lang.value: sorted(set(post_set.by_language[lang]) - paired[lang])
        for lang in Language
    }
    return {
        "version": "1.0",
        "updated": date.today().isoformat(),
        "total_pairs": len(pairs),
        "pairs": pairs,
        "unpaired": unpaired,
    }


def build_tag_index(posts: list[Post]) -> dict:
    """Build tags.json from published posts."""
    tags = Counter()
    for p in published(posts):
        if isinstance(p.meta.tags, list):
            tags.update(p.meta.tags)

    return {
        "version": "1.0",
        "updated": date.today().isoformat(),
        "tags": sorted(tags),
        "tag_frequency": dict(sorted(tags.items(), key=lambda x: (-x[1], x[0]))),
    }


def _write_json(path: Path, data: dict) -> None:
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def index_all(
    content_dir: str,
    output_dir: str,
    config: dict | None = None,
    include_drafts: bool = False,
) -> dict:
    """Index all posts and write JSON data files.

    Returns a summary dict with counts.
    """
    config = config or load_config()
    post_set = load_posts(content_dir, config["extension"])

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    index = build_posts_index(post_set.posts, config["default_author"], include_drafts)
    translations = build_translation_map(post_set)
    tags = build_tag_index(post_set.posts)

    _write_json(out / "posts-index.json", index)
    _write_json(out / "translations.json", translations)
    _write_json(out / "tags.json", tags)
    logger.info("Wrote index files to %s", out)

    return {
        "posts": index["total_posts"],
        "pairs": translations["total_pairs"],
        "tags": len(tags["tags"]),
    }


def main():
    parser = argparse.ArgumentParser(description="Index blog posts and generate data files")
    parser.add_argument("--content-dir", help="Content root holding es/ and en/ directories")
    parser.add_argument("--output-dir", required=True, help="Path to output data/ directory")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--include-drafts", action="store_true", help="Index draft posts too")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        summary = index_all(
            args.content_dir or config["content_dir"],
            args.output_dir,
            config,
            args.include_drafts,
        )
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(
        f"Indexed {summary['posts']} posts with "
        f"{summary['pairs']} translation pairs ({summary['tags']} tags)"
    )
    sys.exit(0)


if __name__ == "__main__":
    main()
