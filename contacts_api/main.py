from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import Engine

from contacts_api.api.routes import contacts, health
from contacts_api.core.config import Settings, get_settings
from contacts_api.core.errors import register_exception_handlers
from contacts_api.core.logging_setup import logger
from contacts_api.db.repository import ContactRepository
from contacts_api.db.session import build_engine, init_db
from contacts_api.services.contact import ContactService


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """
    Composition root: the engine is built once here and handed explicitly to
    the repository, the service and the routers.
    """
    settings = settings or get_settings()
    owns_engine = engine is None
    engine = engine or build_engine(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
        init_db(engine)
        logger.info("%s pronta em %s", settings.project_name, settings.api_prefix)
        yield
        if owns_engine:
            engine.dispose()

    application = FastAPI(
        title=settings.project_name,
        version="1.0",
        debug=settings.debug,
        docs_url=settings.docs_url,
        lifespan=lifespan,
    )
    register_exception_handlers(application)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    repository = ContactRepository(engine)
    service = ContactService(repository, settings)

    application.include_router(health.build_router(repository), prefix=settings.api_prefix)
    application.include_router(contacts.build_router(service), prefix=settings.api_prefix)

    return application
