"""
Formularios de creación.

- GET / y GET /secret: formulario de secreto de texto
- GET /file: formulario de subida de archivo (informa el tamaño máximo)
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from vots_core.config import Settings
from vots_core.renderer import new_file_page, new_secret_page

from ..dependencies import get_settings

router = APIRouter(tags=["forms"])


@router.get("/", response_class=HTMLResponse)
async def index():
    return HTMLResponse(new_secret_page())


@router.get("/secret", response_class=HTMLResponse)
async def new_secret_form():
    """Alias de `/`."""
    return HTMLResponse(new_secret_page())


@router.get("/file", response_class=HTMLResponse)
async def new_file_form(settings: Settings = Depends(get_settings)):
    return HTMLResponse(new_file_page(settings.max_upload_kb))
