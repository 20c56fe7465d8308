from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configurações do serviço de contatos.
    Lê automaticamente variáveis do arquivo .env e do ambiente.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Projeto
    project_name: str = "Contacts API"
    api_prefix: str = "/api"
    debug: bool = False
    docs_url: str = "/swagger"

    # Banco de dados
    database_url: str = "sqlite:///./contacts.db"

    # Servidor
    server_host: str = "0.0.0.0"
    server_port: int = 8000

    # CORS
    allowed_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Paginação
    default_page_size: int = 10
    max_page_size: int = 100


@lru_cache
def get_settings() -> Settings:
    """Retorna a instância de configurações (cacheada)."""
    return Settings()
