import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from .crm import get_settings
from .routers.games import router as games_router
from .utils.config import Settings, load_settings
from .utils.external import CrmClient

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"
SERVICE_NAME = "GameCRM Web"


def create_app(settings: Optional[Settings] = None, crm_client: Optional[CrmClient] = None) -> FastAPI:
    """
    Build the application around one settings object. The CRM client is
    created from those settings unless one is handed in.
    """
    if settings is None:
        settings = load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(f"[Startup] {SERVICE_NAME} serving CRM object type {settings.object_type}")
        if not settings.is_configured:
            logger.warning("[Startup] No CRM access token configured; list pages will render empty")
        yield

    app = FastAPI(title=SERVICE_NAME, lifespan=lifespan)
    app.state.settings = settings
    app.state.crm_client = crm_client or CrmClient(settings)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(games_router)

    @app.get("/health")
    def health(request: Request):
        current = get_settings(request)
        return {"ok": True, "service": SERVICE_NAME, "configured": current.is_configured}

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings: Settings = app.state.settings
    logger.info(f"Listening on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
