#run it with uvicorn issyx_site.main:app --reload
from fastapi import FastAPI
from starlette.staticfiles import StaticFiles
from starlette.types import ASGIApp
from typing import Optional
from dotenv import load_dotenv
import logging

from issyx_site.api.api_router import api_router
from issyx_site.core.config import Settings, load_settings

# Load environment variables from .env file
load_dotenv()

# Set up logging
logging.basicConfig(
    level=load_settings().log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, assets: Optional[ASGIApp] = None) -> FastAPI:
    """
    Build the site application.

    /api/contact is answered by the contact router; every other path, for
    every method, is handed to the static-asset app mounted last at "/".
    By default that is the built Astro site in settings.static_dir.
    """
    settings = settings or load_settings()

    # No docs/openapi routes: every non-API path belongs to the static site
    app = FastAPI(
        title="Issyx Website Backend",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Read by get_settings for every request outside the Worker
    app.state.settings = settings

    app.include_router(api_router)

    if assets is None:
        assets = StaticFiles(directory=settings.static_dir, html=True, check_dir=False)
        logger.info(f"Serving static assets from {settings.static_dir}")
    app.mount("/", assets, name="assets")

    return app


app = create_app()
