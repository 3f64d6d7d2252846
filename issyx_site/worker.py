"""
Cloudflare Python Worker entry point.

Only the contact endpoint runs through FastAPI; every other request goes to
the ASSETS binding, which serves the built Astro site.
"""

from urllib.parse import urlparse
from workers import WorkerEntrypoint  # Official import
import asgi  # ASGI adapter

from issyx_site.main import create_app
from issyx_site.core.config import Settings

CONTACT_PATH = "/api/contact"


class StaticAssetsBinding:
    """Placeholder mount; at the edge non-contact paths never reach the app"""

    async def __call__(self, scope, receive, send):
        raise RuntimeError("Static assets are served by the ASSETS binding")


app = create_app(settings=Settings(), assets=StaticAssetsBinding())


class Default(WorkerEntrypoint):
    async def fetch(self, request):
        if urlparse(request.url).path == CONTACT_PATH:
            # Bindings travel in the ASGI scope and are read by get_settings
            return await asgi.fetch(app, request, self.env)
        return await self.env.ASSETS.fetch(request)
