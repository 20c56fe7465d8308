"""
Inicia a API de contatos: `python -m contacts_api`.
"""

import uvicorn

from contacts_api.core.config import get_settings
from contacts_api.core.logging_setup import configure_logging, logger
from contacts_api.main import create_app


def main() -> None:
    settings = get_settings()
    configure_logging(settings)
    app = create_app(settings)
    logger.info("Iniciando servidor em http://%s:%s", settings.server_host, settings.server_port)
    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
