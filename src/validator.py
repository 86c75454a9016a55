"""Front matter and translation link validator for bilingual blog posts.

Reads every post under ``<content-dir>/es`` and ``<content-dir>/en``, checks
required and recommended header fields, then checks that each post's
``relatedSlug`` names an existing post in the other language which links
back to it.

CLI: python -m src.validator --content-dir src/content/blog
"""

import argparse
import logging
import sys

from .config_loader import load_config
from .findings import Finding
from .posts import Language, Post, PostSet, load_posts
from .report import print_report

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    ("title", "title"),
    ("description", "description"),
    ("pubDate", "pub_date"),
    ("relatedSlug", "related_slug"),
)


def validate_post_fields(post: Post, default_author: str) -> list[Finding]:
    """Check presence and shape of a single post's header fields."""
    findings = []
    meta = post.meta

    for field_name, attr in REQUIRED_FIELDS:
        if not getattr(meta, attr):
            findings.append(Finding.error(post.file, f"Missing required field: {field_name}"))

    if meta.draft is None:
        findings.append(Finding.warning(post.file, "Missing 'draft' field (defaults to false)"))
    elif not isinstance(meta.draft, bool):
        findings.append(Finding.error(post.file, "'draft' must be true or false"))

    if not meta.tags:
        findings.append(Finding.warning(post.file, "No tags specified"))
    elif not isinstance(meta.tags, list):
        findings.append(Finding.error(post.file, "'tags' must be a list of strings"))

    if not meta.author:
        findings.append(
            Finding.warning(post.file, f"Missing 'author' field (defaults to {default_author})")
        )

    if meta.image is None:
        findings.append(Finding.warning(post.file, "No image specified"))
    elif not meta.image.url:
        findings.append(Finding.error(post.file, "Image object missing 'url' field"))
    elif not meta.image.alt:
        findings.append(Finding.warning(post.file, "Image missing 'alt' text"))

    return findings


def validate_fields(posts: list[Post], default_author: str) -> list[Finding]:
    findings = []
    for post in posts:
        findings.extend(validate_post_fields(post, default_author))
    return findings


def validate_links(post_set: PostSet, report_both_sides: bool = True) -> list[Finding]:
    """Check the translation link of every post against the other language.

    A link A -> B is valid when B exists in the opposite language and
    B links back to A. Mismatches are reported by every post whose check
    fails; with ``report_both_sides`` off, a post already named in a
    reported mismatch is not reported again.
    """
    findings = []
    in_reported_mismatch: set[tuple[Language, str]] = set()

    for post in post_set.posts:
        related = post.meta.related_slug
        if not related:
            findings.append(
                Finding.warning(post.file, "No translation link (relatedSlug) specified")
            )
            continue

        if related == post.slug:
            findings.append(Finding.error(post.file, f"relatedSlug points to itself: '{related}'"))
            continue

        target_lang = post.language.opposite
        target = post_set.lookup(target_lang, related)
        if target is None:
            findings.append(
                Finding.error(
                    post.file,
                    f"relatedSlug '{related}' not found in {target_lang.value} posts",
                )
            )
            continue

        back = target.meta.related_slug
        if back == post.slug:
            continue

        if not report_both_sides and (post.language, post.slug) in in_reported_mismatch:
            logger.debug("Skipping repeated mismatch for %s", post.file)
            continue

        findings.append(
            Finding.error(
                post.file,
                f"relatedSlug mismatch: this post links to '{related}', "
                f"but that post links to '{back or 'nothing'}' instead of '{post.slug}'",
            )
        )
        in_reported_mismatch.add((post.language, post.slug))
        in_reported_mismatch.add((target.language, target.slug))

    return findings


def validate_all(post_set: PostSet, config: dict) -> list[Finding]:
    """Run read-failure, field and link checks over a loaded post set."""
    findings = [
        Finding.error(path, f"Could not read file: {reason}")
        for path, reason in post_set.read_failures
    ]
    findings.extend(validate_fields(post_set.posts, config["default_author"]))
    findings.extend(validate_links(post_set, config["report_both_sides"]))
    return findings


def run(content_dir: str | None = None, config: dict | None = None) -> int:
    """Validate the content tree and print the report. Returns the exit status."""
    config = config or load_config()
    content_dir = content_dir or config["content_dir"]

    print("Validating blog posts...\n")
    post_set = load_posts(content_dir, config["extension"])
    print(
        f"Found {len(post_set.posts)} blog posts "
        f"({post_set.count(Language.ES)} ES, {post_set.count(Language.EN)} EN)\n"
    )

    findings = validate_all(post_set, config)
    return print_report(findings)


def main():
    parser = argparse.ArgumentParser(description="Validate bilingual blog posts")
    parser.add_argument("--content-dir", help="Content root holding es/ and en/ directories")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument(
        "--single-sided-mismatches",
        action="store_true",
        help="Report each broken translation link once instead of from both posts",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        if args.single_sided_mismatches:
            config["report_both_sides"] = False
        status = run(args.content_dir, config)
    except Exception as e:
        logger.debug("Validation aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main()
