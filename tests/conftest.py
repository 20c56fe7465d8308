from __future__ import annotations

import os
import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text
from sqlmodel import SQLModel, create_engine

from contacts_api.core.config import Settings
from contacts_api.db.repository import ContactRepository
from contacts_api.main import create_app

API = "/api"


@pytest.fixture()
def db_engine(tmp_path):
    test_database_url = os.getenv("TEST_DATABASE_URL")
    if not test_database_url:
        db_path = tmp_path / f"test_{uuid.uuid4().hex}.db"
        test_database_url = f"sqlite:///{db_path}"

    is_postgres = test_database_url.startswith("postgresql")

    admin_engine = None
    schema_name = None

    if is_postgres:
        schema_name = f"test_{uuid.uuid4().hex}"
        admin_engine = create_engine(test_database_url)
        with admin_engine.connect() as conn:
            conn.execution_options(isolation_level="AUTOCOMMIT").execute(
                text(f'CREATE SCHEMA IF NOT EXISTS "{schema_name}"')
            )
        connect_args = {"options": f"-csearch_path={schema_name},public"}
        engine = create_engine(test_database_url, connect_args=connect_args)
    else:
        engine = create_engine(test_database_url, connect_args={"check_same_thread": False})

    SQLModel.metadata.create_all(bind=engine)

    yield engine

    engine.dispose()
    if is_postgres and admin_engine and schema_name:
        with admin_engine.connect() as conn:
            conn.execution_options(isolation_level="AUTOCOMMIT").execute(
                text(f'DROP SCHEMA IF EXISTS "{schema_name}" CASCADE')
            )
        admin_engine.dispose()


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None, api_prefix=API)


@pytest.fixture()
def app(db_engine, settings):
    return create_app(settings=settings, engine=db_engine)


@pytest.fixture()
def client(app) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def repository(db_engine) -> ContactRepository:
    return ContactRepository(db_engine)


def contact_payload(**overrides: str) -> dict[str, str]:
    payload = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "phone_number": "555-0100",
        "street": "1 Analytical Ave",
    }
    payload.update(overrides)
    return payload


def create_contact(client: TestClient, **overrides: str) -> dict:
    response = client.post(f"{API}/contacts/", json=contact_payload(**overrides))
    assert response.status_code == 200, response.json()
    return response.json()
