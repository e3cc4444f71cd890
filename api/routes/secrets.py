"""
Endpoints de secretos de texto.

Este endpoint maneja:
- POST /secret: Envolver un secreto (params `secret`, `time`)
- GET /secret/{token}: Leer el secreto UNA vez (HTML o JSON)

Los handlers son `def` (no `async`): la llamada a Vault es bloqueante y
FastAPI los corre en su threadpool.
"""

from typing import Callable, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from vots_core.domain_models import WrappedSecret
from vots_core.engine import create_secret, resolve_secret
from vots_core.renderer import secret_link_page, view_secret_page
from vots_core.vault_client import VaultClient

from ..dependencies import get_vault_client
from ..negotiation import Representation, respond_to

router = APIRouter(tags=["secrets"])


def respond_created(
    request: Request,
    wrapped: WrappedSecret,
    html_page: Callable[[str, int, str], str],
) -> Response:
    """
    Representa un secreto recién creado.

    - txt (default si el cliente no pide nada concreto): el token crudo
    - html: página con el link para compartir
    - json: el token como string JSON
    """
    base_url = str(request.base_url)
    return respond_to(
        request,
        {
            Representation.TEXT: lambda: PlainTextResponse(wrapped.token),
            Representation.HTML: lambda: HTMLResponse(
                html_page(wrapped.token, wrapped.ttl_days, base_url)
            ),
            Representation.JSON: lambda: JSONResponse(wrapped.token),
        },
        fallback=Representation.TEXT,
    )


@router.post("/secret")
def create_secret_route(
    request: Request,
    secret: Optional[str] = Form(None),
    time: Optional[str] = Form(None),
    client: VaultClient = Depends(get_vault_client),
):
    """
    Crea un secreto de texto de un solo uso.

    Args:
        secret: Texto a compartir
        time: Días de validez (1..30; valores mayores se acotan a 30)

    Returns:
        El wrapping token (texto, HTML o JSON según negociación)

    Raises:
        500: `time` inválido o Vault no devolvió token
        400: Falta `secret`
    """
    wrapped = create_secret(client, secret=secret, time=time)
    return respond_created(request, wrapped, secret_link_page)


@router.get("/secret/{token}")
def view_secret_route(
    request: Request,
    token: str,
    client: VaultClient = Depends(get_vault_client),
):
    """
    Desenvuelve y muestra el secreto. El token queda quemado en Vault.

    Raises:
        400: Token con formato inválido (sin llamar a Vault) o token inválido
        500: Vault no disponible
    """
    unwrapped = resolve_secret(client, token)
    return respond_to(
        request,
        {
            Representation.HTML: lambda: HTMLResponse(view_secret_page(unwrapped.data)),
            Representation.JSON: lambda: JSONResponse(unwrapped.data),
        },
        fallback=Representation.JSON,
    )
