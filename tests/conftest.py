"""Shared helpers for building content trees in tests."""

import pytest

COMPLETE_FIELDS = {
    "title": '"A post"',
    "description": '"A short description"',
    "pubDate": "2024-01-01",
    "author": '"Test Author"',
    "tags": "[testing]",
    "draft": "false",
}


def render_header(fields: dict, image: dict | None = None) -> str:
    lines = ["---"]
    for key, value in fields.items():
        lines.append(f"{key}: {value}")
    if image is not None:
        lines.append("image:")
        for key, value in image.items():
            lines.append(f"  {key}: {value}")
    lines.append("---")
    return "\n".join(lines) + "\n\nBody text.\n"


@pytest.fixture
def content_dir(tmp_path):
    root = tmp_path / "blog"
    root.mkdir()
    return root


@pytest.fixture
def write_post(content_dir):
    """Write a post with a complete header; override or drop fields per call.

    Pass ``field=None`` to omit a field, ``image=None`` to omit the image.
    """

    def _write(lang, slug, related=None, image=..., **overrides):
        fields = dict(COMPLETE_FIELDS)
        if related is not None:
            fields["relatedSlug"] = f'"{related}"'
        for key, value in overrides.items():
            if value is None:
                fields.pop(key, None)
            else:
                fields[key] = value
        if image is ...:
            image = {"url": '"https://img.example.com/a.png"', "alt": '"Alt text"'}

        lang_dir = content_dir / lang
        lang_dir.mkdir(exist_ok=True)
        path = lang_dir / f"{slug}.md"
        path.write_text(render_header(fields, image), encoding="utf-8")
        return path

    return _write
