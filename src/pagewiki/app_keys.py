"""Application keys for type-safe app configuration access."""

from aiohttp import web

from pagewiki.core.renderer import TemplateRenderer
from pagewiki.core.store import PageStore

store_key = web.AppKey("store", PageStore)
renderer_key = web.AppKey("renderer", TemplateRenderer)
