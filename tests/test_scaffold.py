"""Tests for new post scaffolding."""

import sys

import pytest

from src.config_loader import get_default_config
from src.frontmatter import parse_frontmatter
from src.posts import Language, load_posts
from src.scaffold import create_post, main, render_post, slugify
from src.validator import validate_all


class TestSlugify:
    def test_basic(self):
        assert slugify("Hello World") == "hello-world"

    def test_strips_diacritics(self):
        assert slugify("Año de programación en España") == "ano-de-programacion-en-espana"

    def test_removes_punctuation(self):
        assert slugify("¿Qué es Astro? ¡Una guía!") == "que-es-astro-una-guia"

    def test_collapses_dashes(self):
        assert slugify("  rutas -- y   colecciones ") == "rutas-y-colecciones"

    def test_pure(self):
        assert slugify("Same Title") == slugify("Same Title")


class TestRenderPost:
    def test_header_round_trips_through_parser(self):
        text = render_post(
            title='Notas "rápidas"',
            description="Una descripción",
            author="Óscar Gallego",
            tags=["astro", "web"],
            related_slug="quick-notes",
            image_url="https://img.example.com/n.png",
            pub_date="2024-02-01",
        )
        fm = parse_frontmatter(text)
        assert fm["title"] == "Notas 'rápidas'"
        assert fm["pubDate"] == "2024-02-01"
        assert fm["tags"] == ["astro", "web"]
        assert fm["draft"] is False
        assert fm["relatedSlug"] == "quick-notes"
        assert fm["image"] == {"url": "https://img.example.com/n.png", "alt": "Notas 'rápidas'"}
        assert "## Notas \"rápidas\"" in text

    def test_without_image(self):
        text = render_post("T", "D", "A")
        assert "image" not in parse_frontmatter(text)
        assert parse_frontmatter(text)["tags"] == []


class TestCreatePost:
    def test_created_pair_validates(self, content_dir):
        config = get_default_config()
        es = render_post("Hola", "Saludo", "A", tags=["x"], related_slug="hello",
                         image_url="https://img/a.png", image_alt="alt")
        en = render_post("Hello", "Greeting", "A", tags=["x"], related_slug="hola",
                         image_url="https://img/a.png", image_alt="alt")
        create_post(str(content_dir), Language.ES, "hola", es)
        create_post(str(content_dir), Language.EN, "hello", en)
        assert validate_all(load_posts(content_dir), config) == []

    def test_refuses_overwrite(self, content_dir):
        create_post(str(content_dir), Language.EN, "dup", "first")
        with pytest.raises(FileExistsError):
            create_post(str(content_dir), Language.EN, "dup", "second")
        assert (content_dir / "en" / "dup.md").read_text(encoding="utf-8") == "first"


class TestMain:
    def test_creates_file(self, monkeypatch, capsys, content_dir):
        monkeypatch.setattr(sys, "argv", [
            "scaffold", "--lang", "es", "--title", "Mi Primer Post",
            "--description", "Algo", "--tags", "a, b", "--related-slug", "my-first-post",
            "--content-dir", str(content_dir),
        ])
        with pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 0
        path = content_dir / "es" / "mi-primer-post.md"
        fm = parse_frontmatter(path.read_text(encoding="utf-8"))
        assert fm["author"] == "Óscar Gallego"
        assert fm["tags"] == ["a", "b"]
        assert 'en/my-first-post.md -> relatedSlug: "mi-primer-post"' in capsys.readouterr().out

    def test_existing_file_fails(self, monkeypatch, capsys, content_dir, write_post):
        write_post("en", "taken", related="x")
        monkeypatch.setattr(sys, "argv", [
            "scaffold", "--lang", "en", "--title", "Taken", "--description", "D",
            "--content-dir", str(content_dir),
        ])
        with pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 1
        assert "already exists" in capsys.readouterr().err

    def test_malformed_config_fails(self, monkeypatch, capsys, content_dir, tmp_path):
        config = tmp_path / "blog.yml"
        config.write_text("content_dir: [unclosed\n")
        monkeypatch.setattr(sys, "argv", [
            "scaffold", "--lang", "es", "--title", "Hola", "--description", "D",
            "--content-dir", str(content_dir), "--config", str(config),
        ])
        with pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 1
        assert "Error: Invalid YAML" in capsys.readouterr().err
        assert not (content_dir / "es").exists()
