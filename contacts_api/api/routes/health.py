from fastapi import APIRouter

from contacts_api.db.repository import ContactRepository
from contacts_api.schemas.contact import StatusMessage


def build_router(repository: ContactRepository) -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/healthcheck", response_model=StatusMessage)
    def healthcheck() -> StatusMessage:
        return StatusMessage(status="success", message="The contact API is working fine")

    @router.get("/health/ready", response_model=StatusMessage)
    def ready() -> StatusMessage:
        repository.ping()
        return StatusMessage(status="ready", message="Database connection is healthy")

    return router
