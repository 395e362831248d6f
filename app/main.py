import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

import httpx
from fastapi import FastAPI

from app.api.routes import characters, health
from app.config import Settings, get_settings
from app.services.connectors import CharacterFetcher, build_http_client
from app.services.store import CharacterStore
from app.web.routes import router as web_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_app(transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        settings = get_settings()
        configure_logging(settings)
        client = build_http_client(settings.api_base_url, transport=transport)
        store = CharacterStore(CharacterFetcher(client, resource=settings.character_resource))
        app.state.store = store
        if settings.load_on_startup:
            store.load()
        try:
            yield
        finally:
            store.close()
            await client.aclose()
            logger.info("Character store closed")

    app = FastAPI(
        title="LifeStatus",
        version="0.1.0",
        description="Character list and detail views over the public Rick and Morty API.",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(characters.router)
    app.include_router(web_router)

    @app.get("/meta")
    def meta() -> dict:
        settings = get_settings()
        return {
            "service": "lifestatus",
            "version": "0.1.0",
            "source": f"{settings.api_base_url}{settings.character_resource}",
            "timestamp": datetime.now(UTC).isoformat(),
        }

    return app


app = create_app()
