"""
Endpoints de archivos.

Este endpoint maneja:
- POST /file: Envolver un archivo (multipart `secret`, `time`)
- GET /file/{token}: Servir el archivo inline con su content-type original
- GET /dfile/{token}: Forzar la descarga (Content-Disposition: attachment)

El archivo viaja a Vault en base64; el tamaño se controla antes de llamar a
Vault y solo se leen `max + 1` bytes del upload.
"""

from typing import Dict, Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import Response

from vots_core.config import Settings
from vots_core.domain_models import FilePayload
from vots_core.engine import create_file_secret, resolve_file
from vots_core.renderer import file_link_page
from vots_core.vault_client import VaultClient

from ..dependencies import get_settings, get_vault_client
from .secrets import respond_created

router = APIRouter(tags=["files"])

DEFAULT_DOWNLOAD_NAME = "download"


def _file_headers(file: FilePayload) -> Dict[str, str]:
    # content-type explícito: Starlette no le agrega charset
    return {
        "Content-Type": file.content_type,
        "X-Content-Type-Options": "nosniff",
        # Se renderiza inline pero sin ejecutar scripts del archivo subido
        "Content-Security-Policy": "sandbox",
        "Cache-Control": "no-cache, no-store, must-revalidate",
        "Pragma": "no-cache",
        "Expires": "0",
    }


def content_disposition(filename: Optional[str]) -> str:
    """Header `attachment` con filename ASCII o `filename*` RFC 5987."""
    name = (filename or DEFAULT_DOWNLOAD_NAME).replace("\r", "").replace("\n", "")
    quoted = quote(name)
    if quoted != name:
        return f"attachment; filename*=utf-8''{quoted}"
    return 'attachment; filename="' + name.replace('"', "") + '"'


@router.post("/file")
def create_file_route(
    request: Request,
    secret: Optional[UploadFile] = File(None),
    time: Optional[str] = Form(None),
    settings: Settings = Depends(get_settings),
    client: VaultClient = Depends(get_vault_client),
):
    """
    Crea un secreto de un solo uso a partir de un archivo.

    Args:
        secret: Archivo subido (multipart/form-data)
        time: Días de validez (1..30)

    Returns:
        El wrapping token (texto, HTML o JSON según negociación)

    Raises:
        500: `time` inválido, archivo demasiado grande o Vault sin token
        400: No se subió archivo
    """
    payload = None
    content_type = None
    filename = None
    if secret is not None:
        payload = secret.file.read(settings.max_upload_bytes + 1)
        content_type = secret.content_type
        filename = secret.filename

    wrapped = create_file_secret(
        client,
        payload=payload,
        content_type=content_type,
        filename=filename,
        time=time,
        max_upload_kb=settings.max_upload_kb,
    )
    return respond_created(request, wrapped, file_link_page)


@router.get("/file/{token}")
def view_file_route(token: str, client: VaultClient = Depends(get_vault_client)):
    """Sirve el archivo inline (un solo uso)."""
    file = resolve_file(client, token)
    return Response(content=file.content, headers=_file_headers(file))


@router.get("/dfile/{token}")
def download_file_route(token: str, client: VaultClient = Depends(get_vault_client)):
    """Sirve el archivo como descarga (un solo uso)."""
    file = resolve_file(client, token)
    headers = _file_headers(file)
    headers["Content-Disposition"] = content_disposition(file.filename)
    return Response(content=file.content, headers=headers)
