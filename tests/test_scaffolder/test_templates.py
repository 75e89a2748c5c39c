"""Tests for the Jinja2 TemplateRenderer."""

from __future__ import annotations

from pathlib import Path

import pytest

from zenith_create.scaffolder.templates import TemplateRenderer


pytestmark = pytest.mark.unit


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    files = {
        "starter/README.md.j2": "# {{ project_name }}\n",
        "starter/app/pages/index.zen.j2": "<h1>{{ project_name }}</h1>\n",
        "starter/notes.txt": "not a template\n",
    }
    for rel_path, content in files.items():
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


class TestPackagedTemplates:
    def test_minimal_page_is_packaged(self):
        root = TemplateRenderer().template_dir
        assert sorted(
            p.relative_to(root).as_posix() for p in (root / "minimal").rglob("*.j2")
        ) == ["minimal/app/pages/index.zen.j2"]

    def test_minimal_page_needs_no_context(self):
        page = TemplateRenderer().render("minimal/app/pages/index.zen.j2")
        assert page.startswith("<script>\n")
        assert "{{" not in page


class TestRendering:
    def test_render_keeps_trailing_newline(self, template_dir: Path):
        renderer = TemplateRenderer(template_dir)
        assert renderer.render("starter/README.md.j2", {"project_name": "x"}) == "# x\n"

    def test_render_to_file_creates_parents(self, template_dir: Path, tmp_path: Path):
        renderer = TemplateRenderer(template_dir)
        out = renderer.render_to_file(
            "starter/README.md.j2", tmp_path / "out" / "a" / "README.md", {"project_name": "x"}
        )
        assert out.read_text(encoding="utf-8") == "# x\n"

    def test_render_tree(self, template_dir: Path, tmp_path: Path):
        renderer = TemplateRenderer(template_dir)
        written = renderer.render_tree("starter", tmp_path / "out", {"project_name": "my app"})

        assert sorted(p.relative_to(tmp_path / "out").as_posix() for p in written) == [
            "README.md",
            "app/pages/index.zen",
        ]
        assert (tmp_path / "out" / "app" / "pages" / "index.zen").read_text(
            encoding="utf-8"
        ) == "<h1>my app</h1>\n"
        assert not (tmp_path / "out" / "notes.txt").exists()

    def test_render_tree_rename(self, template_dir: Path, tmp_path: Path):
        renderer = TemplateRenderer(template_dir)
        renderer.render_tree(
            "starter", tmp_path / "out", {"project_name": "x"}, rename={".zen": ".page"}
        )
        assert (tmp_path / "out" / "app" / "pages" / "index.page").is_file()
        assert (tmp_path / "out" / "README.md").is_file()

    def test_render_tree_missing_prefix(self, template_dir: Path, tmp_path: Path):
        renderer = TemplateRenderer(template_dir)
        assert renderer.render_tree("nope", tmp_path / "out", {}) == []
        assert not (tmp_path / "out").exists()
