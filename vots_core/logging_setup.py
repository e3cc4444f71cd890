"""
Configuración de logging del proceso.

Se usa el módulo estándar `logging`; cada módulo obtiene su logger con
`logging.getLogger(__name__)`.

Nunca se loguean secretos ni tokens completos: para tokens usar `token_hint()`.
"""

import logging

from .config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configura el root logger según `LOG_LEVEL` y `LOG_FILE`."""
    log_level = getattr(logging, settings.log_level, logging.INFO)
    kwargs = {"level": log_level, "format": LOG_FORMAT}
    if settings.log_file:
        kwargs["filename"] = settings.log_file
    logging.basicConfig(**kwargs)


def token_hint(token: str) -> str:
    """Prefijo corto del token, suficiente para correlacionar logs."""
    if not token:
        return "<vacío>"
    return f"{token[:8]}…"
