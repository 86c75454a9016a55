"""Lenient front matter parser for blog posts.

Post headers use a small YAML-like subset: top-level ``key: value`` pairs,
an empty value opening a nested object (indented ``key: value`` lines),
dash-prefixed list items, inline ``[a, b]`` arrays and ``true``/``false``.
Lines that fit none of these shapes are skipped, never raised on; missing
or malformed fields surface later as validation findings.
"""

import re

HEADER_RE = re.compile(r"\A---\s*\n(.*?)\n---", re.DOTALL)
QUOTES_RE = re.compile(r"^[\"']|[\"']$")


def _unquote(value: str) -> str:
    return QUOTES_RE.sub("", value)


def _parse_inline_array(value: str) -> list[str]:
    inner = value[1:-1]
    if not inner.strip():
        return []
    return [_unquote(item.strip()) for item in inner.split(",")]


def _normalize(text: str) -> str:
    return text.replace("\r\n", "\n")


def parse_frontmatter(text: str) -> dict:
    """Parse the leading header block of a document into a mapping.

    Only the first block is read. Returns an empty dict when the document
    does not start with a header.
    """
    match = HEADER_RE.match(_normalize(text))
    if not match:
        return {}

    data: dict = {}
    current_key: str | None = None
    current_object: dict | None = None

    for line in match.group(1).split("\n"):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        indent = len(line) - len(line.lstrip())

        # List items belong to the last top-level key, indented or not.
        # Indented items under an empty key become a list, not nested "- x" keys.
        if trimmed.startswith("- "):
            if current_key is not None:
                if not isinstance(data.get(current_key), list):
                    data[current_key] = []
                    current_object = None
                data[current_key].append(_unquote(trimmed[2:].strip()))
            continue

        if indent >= 2:
            if current_key is not None and current_object is not None:
                key, _, value = trimmed.partition(":")
                current_object[key.strip()] = _unquote(value.strip())
            continue

        if indent == 0 and ":" in trimmed:
            key, _, value = trimmed.partition(":")
            key = key.strip()
            value = _unquote(value.strip())
            current_key = key
            current_object = None

            if value == "":
                data[key] = {}
                current_object = data[key]
            elif value.startswith("[") and value.endswith("]"):
                data[key] = _parse_inline_array(value)
            elif value in ("true", "false"):
                data[key] = value == "true"
            else:
                data[key] = value

    return data


def extract_body(text: str) -> str:
    """Return the document text following the header block."""
    text = _normalize(text)
    match = HEADER_RE.match(text)
    if not match:
        return text
    _, _, body = text[match.end():].partition("\n")
    return body
