"""Tests for template rendering."""

from pathlib import Path

import pytest
from pagewiki.assets import get_templates_dir
from pagewiki.core.renderer import TemplateRenderer
from pagewiki.core.store import Page
from pagewiki.core.types import Title
from pagewiki.errors import RenderError, TemplateLoadError


def _write_templates(directory: Path, view: str, edit: str) -> Path:
    directory.mkdir(exist_ok=True)
    (directory / "view.html").write_text(view)
    (directory / "edit.html").write_text(edit)
    return directory


class TestTemplateRendererInit:
    """Tests for TemplateRenderer construction."""

    def test__bundled_templates__load(self) -> None:
        """Load the templates shipped with the package."""
        renderer = TemplateRenderer(get_templates_dir())

        assert renderer.templates_dir == get_templates_dir()

    def test__missing_template__raises_load_error(self, tmp_path: Path) -> None:
        """Fail at construction when a template file is absent."""
        (tmp_path / "view.html").write_text("{{ body }}")

        with pytest.raises(TemplateLoadError, match="edit.html"):
            TemplateRenderer(tmp_path)

    def test__syntax_error__raises_load_error(self, tmp_path: Path) -> None:
        """Fail at construction when a template doesn't compile."""
        _write_templates(tmp_path, "{% if %}", "{{ body }}")

        with pytest.raises(TemplateLoadError, match="view.html"):
            TemplateRenderer(tmp_path)

    def test__non_utf8_template__raises_load_error(self, tmp_path: Path) -> None:
        """Fail at construction when a template isn't valid UTF-8."""
        (tmp_path / "view.html").write_bytes(b"\xff\xfe{{ body }}")
        (tmp_path / "edit.html").write_text("{{ body }}")

        with pytest.raises(TemplateLoadError, match="view.html"):
            TemplateRenderer(tmp_path)


class TestTemplateRendererRender:
    """Tests for TemplateRenderer.render()."""

    def test__view__contains_title_and_body(self) -> None:
        """Render view template with page title and body."""
        renderer = TemplateRenderer(get_templates_dir())

        html = renderer.render("view", Page(title=Title("Test"), body=b"hello"))

        assert b"<h1>Test</h1>" in html
        assert b"hello" in html
        assert b'href="/edit/Test"' in html

    def test__edit__posts_body_to_save(self) -> None:
        """Render edit form targeting the save route."""
        renderer = TemplateRenderer(get_templates_dir())

        html = renderer.render("edit", Page(title=Title("Test"), body=b"draft"))

        assert b'action="/save/Test"' in html
        assert b'name="body"' in html
        assert b"draft</textarea>" in html

    def test__body__is_html_escaped(self) -> None:
        """Escape markup in the page body."""
        renderer = TemplateRenderer(get_templates_dir())

        html = renderer.render("view", Page(title=Title("Test"), body=b"<script>x</script>"))

        assert b"<script>x</script>" not in html
        assert b"&lt;script&gt;" in html

    def test__unknown_view__raises_render_error(self) -> None:
        """Raise RenderError for a template that wasn't loaded."""
        renderer = TemplateRenderer(get_templates_dir())

        with pytest.raises(RenderError, match="history"):
            renderer.render("history", Page(title=Title("Test")))

    def test__undefined_variable__raises_render_error(self, tmp_path: Path) -> None:
        """Raise RenderError when a template references an unknown name."""
        _write_templates(tmp_path, "{{ missing }}", "{{ body }}")
        renderer = TemplateRenderer(tmp_path)

        with pytest.raises(RenderError, match="missing"):
            renderer.render("view", Page(title=Title("Test")))

    def test__runtime_error__raises_render_error(self, tmp_path: Path) -> None:
        """Wrap plain Python errors raised while rendering."""
        _write_templates(tmp_path, "{{ title + 1 }}", "{{ body }}")
        renderer = TemplateRenderer(tmp_path)

        with pytest.raises(RenderError, match="can only concatenate str"):
            renderer.render("view", Page(title=Title("Test")))
