"""Page view, edit and save endpoints.

Every route is wrapped by make_handler(), which validates the request path
and extracts the title before the operation handler runs.
"""

import logging
from collections.abc import Awaitable, Callable

from aiohttp import web

from pagewiki.app_keys import renderer_key, store_key
from pagewiki.core.store import Page
from pagewiki.core.titles import parse_path
from pagewiki.core.types import Operation, Title
from pagewiki.errors import (
    InvalidPathError,
    PageLoadError,
    PageReadError,
    RenderError,
    StorageError,
)

logger = logging.getLogger(__name__)

PageHandler = Callable[[web.Request, Title], Awaitable[web.StreamResponse]]
RouteHandler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/view/{tail:.*}", make_handler(Operation.VIEW, view_page)),
        web.post("/view/{tail:.*}", make_handler(Operation.VIEW, view_page)),
        web.get("/edit/{tail:.*}", make_handler(Operation.EDIT, edit_page)),
        web.post("/save/{tail:.*}", make_handler(Operation.SAVE, save_page)),
    ]


def make_handler(operation: Operation, handler: PageHandler) -> RouteHandler:
    """Wrap an operation handler with path validation.

    Args:
        operation: Operation the route serves
        handler: Coroutine called with the request and the extracted title

    Returns:
        aiohttp handler responding 404 for invalid paths
    """

    async def wrapper(request: web.Request) -> web.StreamResponse:
        try:
            match = parse_path(request.path)
        except InvalidPathError:
            raise web.HTTPNotFound() from None
        if match.operation != operation:
            raise web.HTTPNotFound()
        return await handler(request, match.title)

    return wrapper


async def view_page(request: web.Request, title: Title) -> web.StreamResponse:
    store = request.app[store_key]
    try:
        page = store.load(title)
    except PageLoadError as e:
        _log_load_error(e)
        raise web.HTTPFound(f"/edit/{title}") from None
    return _render(request, "view", page)


async def edit_page(request: web.Request, title: Title) -> web.StreamResponse:
    store = request.app[store_key]
    try:
        page = store.load(title)
    except PageLoadError as e:
        # Treated as a new page
        _log_load_error(e)
        page = Page(title=title)
    return _render(request, "edit", page)


async def save_page(request: web.Request, title: Title) -> web.StreamResponse:
    form = await request.post()
    page = Page(title=title, body=_field_bytes(form.get("body")))
    try:
        request.app[store_key].save(page)
    except StorageError as e:
        return web.Response(status=500, text=str(e))
    raise web.HTTPFound(f"/view/{title}")


def _render(request: web.Request, view: str, page: Page) -> web.Response:
    renderer = request.app[renderer_key]
    try:
        html = renderer.render(view, page)
    except RenderError as e:
        return web.Response(status=500, text=str(e))
    return web.Response(body=html, content_type="text/html", charset="utf-8")


def _field_bytes(value: object) -> bytes:
    """Convert a submitted form field to raw bytes; missing means empty."""
    if value is None:
        return b""
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, bytes):
        return value
    if isinstance(value, web.FileField):
        return value.file.read()
    return str(value).encode("utf-8")


def _log_load_error(error: PageLoadError) -> None:
    # Read failures other than a missing file are still treated as a new page
    if isinstance(error, PageReadError):
        logger.debug(f"Treating unreadable page as missing: {error}")
