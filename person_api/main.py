# person_api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from person_api.api.error_handlers import register_error_handlers
from person_api.api.v1.api import api_router
from person_api.core.config import Settings, settings as default_settings
from person_api.core.errors import StorageConfigurationError, StorageUnavailableError
from person_api.crud.base import PersonStore
from person_api.db.session import close_client, connect

logger = logging.getLogger("persons.main")


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[PersonStore] = None,
) -> FastAPI:
    """
    Monta a aplicação.

    Com ``store`` injetado (testes) o lifespan não abre conexão com o MongoDB.
    Sem ``store``, o startup conecta usando MONGO_URI e falha se não conseguir.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is not None:
            try:
                yield
            finally:
                await store.close()
            return

        try:
            client, mongo_store = await connect(settings)
        except (StorageConfigurationError, StorageUnavailableError):
            logger.critical("Falha ao iniciar: armazenamento indisponível", exc_info=True)
            raise
        app.state.person_store = mongo_store
        try:
            yield
        finally:
            await close_client(client)

    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )
    if store is not None:
        app.state.person_store = store

    register_error_handlers(app)

    @app.get("/health", tags=["health"])
    async def healthcheck():
        return {"status": "ok"}

    app.include_router(api_router, prefix=settings.API_PREFIX)
    return app


app = create_app()
