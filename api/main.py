"""
API HTTP principal del gateway VOTS (Vault-based One-Time Secret).

Esta aplicación FastAPI expone endpoints que usan el core (vots_core.engine)
para envolver secretos/archivos en wrapping tokens de Vault y leerlos una
sola vez.

Uso:
    uvicorn api.main:app --port 8080
    (o `python run_api.py`, que toma host/puerto/workers del entorno)
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from vots_core.config import Settings, load_settings
from vots_core.errors import VotsError
from vots_core.logging_setup import configure_logging, token_hint

from .models.responses import HealthResponse
from .routes import files, forms, links, secrets

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"

_ANY_METHOD = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def _loggable_path(request: Request) -> str:
    """
    Path apto para logs: el template de la ruta (`/secret/{token}`) o, si no
    hubo match, el path con cada parámetro reducido a `token_hint()`.
    """
    route = request.scope.get("route")
    template = getattr(route, "path", None)
    if template:
        return template
    path = request.url.path
    for value in request.path_params.values():
        if isinstance(value, str) and value:
            path = path.replace(value, token_hint(value))
    return path


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Construye la aplicación.

    Args:
        settings: Configuración explícita (tests). Si es None se carga del
            entorno una única vez.

    Returns:
        FastAPI con `app.state.settings` inicializado.
    """
    if settings is None:
        settings = load_settings()
    configure_logging(settings)

    app = FastAPI(
        title="VOTS",
        description="Secretos y archivos de un solo uso sobre Vault response wrapping",
        version=API_VERSION,
    )
    app.state.settings = settings

    logger.info(
        f"🚀 Iniciando gateway contra {settings.vault_addr} "
        f"(upload máximo {settings.max_upload_kb} KB)"
    )

    @app.exception_handler(VotsError)
    async def vots_error_handler(request: Request, exc: VotsError):
        """Traduce errores del core a text/plain con su status."""
        path = _loggable_path(request)
        if exc.status_code >= 500:
            logger.error(f"{request.method} {path} -> {exc.status_code}: {exc.message}")
        else:
            logger.warning(f"{request.method} {path} -> {exc.status_code}: {exc.message}")
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.get("/health", response_model=HealthResponse)
    async def health():
        """Health check (no consulta a Vault)."""
        return HealthResponse(status="ok", service="vots", version=API_VERSION)

    # Registrar rutas
    app.include_router(forms.router)
    app.include_router(secrets.router)
    app.include_router(files.router)
    app.include_router(links.router)

    # Catch-all: debe registrarse último
    @app.api_route("/{path:path}", methods=_ANY_METHOD, include_in_schema=False)
    async def not_found(path: str):
        return PlainTextResponse("404", status_code=404)

    return app


app = create_app()
