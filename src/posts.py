"""Bilingual post model and content tree loader.

Posts live in one directory per language under a content root::

    <content_dir>/es/*.md
    <content_dir>/en/*.md

The slug of a post is its filename without extension.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from .frontmatter import extract_body, parse_frontmatter

logger = logging.getLogger(__name__)

KNOWN_FIELDS = (
    "title",
    "description",
    "pubDate",
    "relatedSlug",
    "author",
    "draft",
    "tags",
    "image",
)


class Language(str, Enum):
    ES = "es"
    EN = "en"

    @property
    def opposite(self) -> "Language":
        return Language.EN if self is Language.ES else Language.ES


def _text(value: Any) -> str | None:
    """Coerce a header value to a non-empty string, or None when absent/empty."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value or None
    if isinstance(value, (dict, list)):
        return str(value) if value else None
    return str(value)


@dataclass(frozen=True)
class PostImage:
    url: str | None = None
    alt: str | None = None

    @classmethod
    def from_value(cls, value: Any) -> "PostImage":
        if isinstance(value, dict):
            return cls(url=_text(value.get("url")), alt=_text(value.get("alt")))
        return cls()


@dataclass(frozen=True)
class PostMeta:
    """Typed view of a post header.

    ``draft`` and ``tags`` keep the raw value when it has the wrong shape so
    the field validator can tell "absent" from "malformed".
    """

    title: str | None = None
    description: str | None = None
    pub_date: str | None = None
    related_slug: str | None = None
    author: str | None = None
    draft: Any = None
    tags: Any = None
    image: PostImage | None = None
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_fields(cls, fields: dict) -> "PostMeta":
        return cls(
            title=_text(fields.get("title")),
            description=_text(fields.get("description")),
            pub_date=_text(fields.get("pubDate")),
            related_slug=_text(fields.get("relatedSlug")),
            author=_text(fields.get("author")),
            draft=fields.get("draft"),
            tags=fields.get("tags"),
            image=PostImage.from_value(fields["image"]) if "image" in fields else None,
            extra={k: v for k, v in fields.items() if k not in KNOWN_FIELDS},
        )

    @property
    def is_draft(self) -> bool:
        return self.draft is True


@dataclass(frozen=True)
class Post:
    language: Language
    slug: str
    file_path: Path
    meta: PostMeta
    fields: dict = field(default_factory=dict)
    body: str = ""

    @property
    def file(self) -> str:
        return str(self.file_path)


@dataclass
class PostSet:
    """All posts of a content tree plus per-language slug lookups."""

    posts: list[Post] = field(default_factory=list)
    by_language: dict[Language, dict[str, Post]] = field(
        default_factory=lambda: {lang: {} for lang in Language}
    )
    read_failures: list[tuple[str, str]] = field(default_factory=list)

    def add(self, post: Post) -> None:
        self.posts.append(post)
        self.by_language[post.language][post.slug] = post

    def count(self, language: Language) -> int:
        return len(self.by_language[language])

    def lookup(self, language: Language, slug: str) -> Post | None:
        return self.by_language[language].get(slug)


def read_post(filepath: Path, language: Language) -> Post:
    """Read and parse a single post file.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid UTF-8.
    """
    text = filepath.read_text(encoding="utf-8")
    fields = parse_frontmatter(text)
    return Post(
        language=language,
        slug=filepath.stem,
        file_path=filepath,
        meta=PostMeta.from_fields(fields),
        fields=fields,
        body=extract_body(text),
    )


def load_posts(content_dir: str | Path, extension: str = ".md") -> PostSet:
    """Load every post of both language partitions under content_dir.

    A missing language directory contributes no posts. Files that cannot be
    read are recorded in ``read_failures`` and skipped.

    Raises:
        FileNotFoundError: If content_dir does not exist or is not a directory.
    """
    root = Path(content_dir)
    if not root.is_dir():
        raise FileNotFoundError(f"Content directory not found: {content_dir}")

    post_set = PostSet()
    for language in Language:
        lang_dir = root / language.value
        if not lang_dir.is_dir():
            logger.debug("No %s directory under %s", language.value, root)
            continue

        for filepath in sorted(lang_dir.glob(f"*{extension}")):
            if not filepath.is_file():
                continue
            try:
                post = read_post(filepath, language)
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Could not read %s: %s", filepath, e)
                post_set.read_failures.append((str(filepath), str(e)))
                continue
            logger.debug("Loaded %s post %s", language.value, post.slug)
            post_set.add(post)

    logger.info(
        "Loaded %d posts (%d es, %d en) from %s",
        len(post_set.posts),
        post_set.count(Language.ES),
        post_set.count(Language.EN),
        root,
    )
    return post_set
