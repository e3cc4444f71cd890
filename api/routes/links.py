"""
Página de "link al secreto".

GET /link/{token} devuelve una página que solo referencia `/secret/{token}`.
Sirve para compartir por Slack/mail sin que el preview del cliente abra el
secreto y lo queme. Nunca llama a Vault.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from vots_core.engine import link_token
from vots_core.renderer import link_page

router = APIRouter(tags=["links"])


@router.get("/link/{token}", response_class=HTMLResponse)
async def link_route(token: str):
    """
    Raises:
        400: Token con formato inválido
    """
    return HTMLResponse(link_page(link_token(token)))
