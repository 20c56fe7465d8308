import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine

from contacts_api.core.config import Settings
from contacts_api.core.logging_setup import logger
from contacts_api.models.contact import Contact  # noqa: F401 registers the table in metadata


def build_engine(settings: Settings) -> Engine:
    connect_args: dict[str, Any] = {}
    if settings.database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    elif settings.database_url.startswith("postgresql"):
        client_encoding = os.getenv("POSTGRES_CLIENT_ENCODING", "UTF8")
        connect_args["options"] = f"-c client_encoding={client_encoding}"

    return create_engine(
        settings.database_url,
        echo=settings.debug,
        connect_args=connect_args,
    )


def init_db(engine: Engine) -> None:
    SQLModel.metadata.create_all(bind=engine)
    logger.info("Tabela 'contacts' verificada em %s", engine.url.render_as_string(hide_password=True))


@contextmanager
def session_scope(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session
