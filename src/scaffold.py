"""Create a new blog post with a complete front matter header.

CLI: python -m src.scaffold --lang es --title "Hola mundo" --description "..."
"""

import argparse
import logging
import re
import sys
import unicodedata
from datetime import date
from pathlib import Path

from .config_loader import load_config
from .posts import Language

logger = logging.getLogger(__name__)


def slugify(text: str) -> str:
    """Convert a title to a URL-safe slug."""
    s = unicodedata.normalize("NFD", text.lower())
    s = "".join(c for c in s if unicodedata.category(c) != "Mn")
    s = re.sub(r"[^\w\s-]", "", s)
    s = re.sub(r"\s+", "-", s.strip())
    s = re.sub(r"-{2,}", "-", s)
    return s.strip("-")


def _quoted(value: str) -> str:
    return '"' + value.replace('"', "'") + '"'


def render_post(
    title: str,
    description: str,
    author: str,
    tags: list[str] | None = None,
    related_slug: str = "",
    image_url: str = "",
    image_alt: str = "",
    pub_date: str | None = None,
) -> str:
    """Render the Markdown source of a new, non-draft post."""
    pub_date = pub_date or date.today().isoformat()
    tag_list = ", ".join(_quoted(t) for t in tags or [])

    lines = [
        "---",
        f"title: {_quoted(title)}",
        f"description: {_quoted(description)}",
        f"pubDate: {pub_date}",
        f"author: {_quoted(author)}",
        f"tags: [{tag_list}]",
        "draft: false",
        f"relatedSlug: {_quoted(related_slug)}",
    ]
    if image_url:
        lines += [
            "image:",
            f"  url: {_quoted(image_url)}",
            f"  alt: {_quoted(image_alt or title)}",
        ]
    lines += [
        "---",
        "",
        f"## {title}",
        "",
        "<!-- Write your content here -->",
        "",
    ]
    return "\n".join(lines)


def create_post(content_dir: str, language: Language, slug: str, content: str) -> Path:
    """Write a post file under the language directory.

    Raises:
        FileExistsError: If a post with this slug already exists.
    """
    lang_dir = Path(content_dir) / language.value
    path = lang_dir / f"{slug}.md"
    if path.exists():
        raise FileExistsError(f"File already exists: {path}")

    lang_dir.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info("Created %s", path)
    return path


def _parse_tags(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [t.strip() for t in raw.split(",") if t.strip()]


def main():
    parser = argparse.ArgumentParser(description="Create a new blog post")
    parser.add_argument("--lang", required=True, choices=[lang.value for lang in Language])
    parser.add_argument("--title", required=True)
    parser.add_argument("--description", required=True)
    parser.add_argument("--slug", help="Defaults to the slugified title")
    parser.add_argument("--tags", help="Comma-separated tags")
    parser.add_argument("--related-slug", default="", help="Slug of the translation")
    parser.add_argument("--image-url", default="")
    parser.add_argument("--image-alt", default="")
    parser.add_argument("--author", help="Defaults to the configured default author")
    parser.add_argument("--date", help="Publication date (YYYY-MM-DD), defaults to today")
    parser.add_argument("--content-dir", help="Content root holding es/ and en/ directories")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    language = Language(args.lang)
    slug = args.slug or slugify(args.title)
    if not slug:
        print("Error: could not derive a slug from the title, pass --slug", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(args.config)
        content = render_post(
            title=args.title,
            description=args.description,
            author=args.author or config["default_author"],
            tags=_parse_tags(args.tags),
            related_slug=args.related_slug,
            image_url=args.image_url,
            image_alt=args.image_alt,
            pub_date=args.date,
        )
        path = create_post(args.content_dir or config["content_dir"], language, slug, content)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Created blog post: {path}")
    other = language.opposite.value
    if args.related_slug:
        print("Remember to update the relatedSlug in the translation:")
        print(f"  {other}/{args.related_slug}.md -> relatedSlug: \"{slug}\"")
    else:
        print(f"Remember to create the {other} translation and link both posts with relatedSlug")
    print("Run python -m src.validator to verify links")
    sys.exit(0)


if __name__ == "__main__":
    main()
