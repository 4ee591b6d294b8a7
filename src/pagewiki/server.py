"""aiohttp server for pagewiki.

Application factory and route registration.
"""

import logging

from aiohttp import web

from pagewiki.api.pages import create_pages_routes
from pagewiki.app_keys import renderer_key, store_key
from pagewiki.assets import get_templates_dir
from pagewiki.config import Config
from pagewiki.core.renderer import TemplateRenderer
from pagewiki.core.store import PageStore

logger = logging.getLogger(__name__)


def create_app(config: Config, *, renderer: TemplateRenderer | None = None) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        renderer: Preloaded template renderer. When omitted, templates are
                  loaded from config.wiki.templates_dir or the bundled set.

    Returns:
        Configured aiohttp application

    Raises:
        TemplateLoadError: If templates can't be loaded
    """
    app = web.Application()

    if renderer is None:
        renderer = load_renderer(config)

    app[store_key] = PageStore(config.wiki.pages_dir)
    app[renderer_key] = renderer

    app.router.add_routes(create_pages_routes())

    return app


def load_renderer(config: Config) -> TemplateRenderer:
    templates_dir = config.wiki.templates_dir or get_templates_dir()
    return TemplateRenderer(templates_dir)


def run_server(config: Config, *, renderer: TemplateRenderer | None = None) -> None:
    """Run the server until interrupted.

    Args:
        config: Application configuration
        renderer: Preloaded template renderer

    Raises:
        SystemExit: If the listener can't be started
    """
    app = create_app(config, renderer=renderer)
    try:
        web.run_app(app, host=config.server.host, port=config.server.port, print=None)
    except OSError as e:
        logger.error(f"Cannot listen on {config.server.host}:{config.server.port}: {e}")
        raise SystemExit(1) from e
