"""HTML rendering of pages with Jinja2 templates.

Templates are loaded and compiled once, when the renderer is created, and
the renderer is then shared read-only between requests.
"""

from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

from pagewiki.core.store import Page
from pagewiki.errors import RenderError, TemplateLoadError

VIEW_NAMES = ("view", "edit")
TEMPLATE_SUFFIX = ".html"


class TemplateRenderer:
    """Renders pages through the "view" and "edit" templates.

    Every template is compiled in the constructor so a missing or broken
    template fails at startup instead of on the first request.
    """

    def __init__(self, templates_dir: Path) -> None:
        """Load and compile templates.

        Args:
            templates_dir: Directory containing view.html and edit.html

        Raises:
            TemplateLoadError: If a template is missing or fails to compile
        """
        self._templates_dir = templates_dir
        self._env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
        )
        self._templates: dict[str, Template] = {}
        for name in VIEW_NAMES:
            filename = f"{name}{TEMPLATE_SUFFIX}"
            try:
                self._templates[name] = self._env.get_template(filename)
            except (TemplateError, UnicodeDecodeError) as e:
                raise TemplateLoadError(
                    f"Cannot load template {filename} from {templates_dir}: {e}"
                ) from e

    @property
    def templates_dir(self) -> Path:
        """Directory the templates were loaded from."""
        return self._templates_dir

    def render(self, view: str, page: Page) -> bytes:
        """Render a page with the named view template.

        Args:
            view: Template name without suffix ("view" or "edit")
            page: Page to render

        Returns:
            UTF-8 encoded HTML

        Raises:
            RenderError: If the view is unknown or rendering fails
        """
        template = self._templates.get(view)
        if template is None:
            raise RenderError(f'template: no template "{view}{TEMPLATE_SUFFIX}"')
        try:
            html = template.render(page=page, title=page.title, body=page.text)
        except Exception as e:
            raise RenderError(f"template {view}{TEMPLATE_SUFFIX}: {e}") from e
        return html.encode("utf-8")
