from __future__ import annotations

"""
vots_core.engine
================

Operaciones del gateway, sin HTTP de por medio.

Cada operación valida su input, hace como máximo UNA llamada a Vault y
devuelve un único valor de resultado. La capa HTTP (`api/`) decide después
cómo representarlo (texto, HTML, JSON o archivo).

Operaciones
-----------
- `create_secret`: envuelve un texto.
- `create_file_secret`: envuelve un archivo (base64 + content_type + filename).
- `resolve_secret`: unwrap y devuelve el mapa `data`.
- `resolve_file`: unwrap y decodifica el archivo.
- `link_token`: solo valida; la página de link nunca llama a Vault.
"""

import logging
from typing import Any, Dict, Optional, Protocol

from .domain_models import FilePayload, SecretSubmission, UnwrappedSecret, WrappedSecret
from .errors import MissingSecretError
from .validation import check_token, check_upload_size, parse_ttl_days

logger = logging.getLogger(__name__)


class WrappingBackend(Protocol):
    """Interfaz mínima que el engine necesita de Vault."""

    def wrap(self, fields: Dict[str, Any], ttl_seconds: int) -> str:
        ...

    def unwrap(self, token: str) -> Dict[str, Any]:
        ...


def _wrap(client: WrappingBackend, submission: SecretSubmission) -> WrappedSecret:
    token = client.wrap(submission.to_wrap_fields(), submission.ttl_seconds)
    return WrappedSecret(token=token, ttl_days=submission.ttl_days)


def create_secret(
    client: WrappingBackend,
    *,
    secret: Optional[str],
    time: Optional[str],
) -> WrappedSecret:
    """
    Crea un secreto de texto.

    Args:
        client: Backend de wrapping (VaultClient en producción).
        secret: Texto a compartir.
        time: Días de vida tal como llegaron del formulario.

    Raises:
        InvalidTTLError: `time` ausente o inválido (se valida primero).
        MissingSecretError: Falta `secret`.
        BackendUnavailableError: Vault no devolvió token.
    """
    ttl_days, _ = parse_ttl_days(time)
    if secret is None:
        raise MissingSecretError()
    return _wrap(client, SecretSubmission.from_text(secret, ttl_days))


def create_file_secret(
    client: WrappingBackend,
    *,
    payload: Optional[bytes],
    content_type: Optional[str],
    filename: Optional[str],
    time: Optional[str],
    max_upload_kb: int,
) -> WrappedSecret:
    """
    Crea un secreto a partir de un archivo.

    El tamaño se controla ANTES de llamar a Vault. El binario viaja en base64
    junto a `content_type` y `filename`.

    Raises:
        InvalidTTLError: `time` ausente o inválido.
        MissingSecretError: No se subió archivo.
        FileTooLargeError: Supera `max_upload_kb`.
        BackendUnavailableError: Vault no devolvió token.
    """
    ttl_days, _ = parse_ttl_days(time)
    if payload is None:
        raise MissingSecretError("Missing file")
    check_upload_size(len(payload), max_upload_kb)

    submission = SecretSubmission.from_file(payload, ttl_days, content_type, filename)
    logger.info(f"Archivo recibido: {len(payload)} bytes, content_type={submission.content_type}")
    return _wrap(client, submission)


def resolve_secret(client: WrappingBackend, token: str) -> UnwrappedSecret:
    """
    Desenvuelve un secreto (consume el token en Vault).

    Raises:
        InvalidTokenFormatError: Token con sintaxis inválida (sin llamar a Vault).
        TokenInvalidError: Vault no devolvió datos.
        BackendUnavailableError: Vault no disponible.
    """
    check_token(token)
    return UnwrappedSecret(data=client.unwrap(token))


def resolve_file(client: WrappingBackend, token: str) -> FilePayload:
    """
    Desenvuelve un secreto y lo decodifica como archivo.

    Raises:
        NotAFileError: El contenido no es base64 válido.
        (además de los errores de `resolve_secret`)
    """
    return resolve_secret(client, token).to_file()


def link_token(token: str) -> str:
    return check_token(token)
