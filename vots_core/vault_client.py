from __future__ import annotations

"""
vots_core.vault_client
======================

Cliente HTTP mínimo para la API de response wrapping de Vault.

Endpoints usados
----------------
- POST {VAULT_ADDR}/v1/sys/wrapping/wrap
    Headers: X-Vault-Token (token administrativo), X-Vault-Wrap-TTL (segundos)
    Body:    JSON con los campos a envolver
    Respuesta: {"wrap_info": {"token": "..."}}

- POST {VAULT_ADDR}/v1/sys/wrapping/unwrap
    Headers: X-Vault-Token (el propio wrapping token)
    Respuesta: {"data": {...}}

Política de errores
-------------------
- Nunca se reintenta: un unwrap tiene efecto secundario (quema el token) y un
  reintento tras un timeout podría consumir un token cuya primera respuesta
  solo se perdió en tránsito. `requests` no reintenta por defecto.
- Fallas de transporte, timeouts y 5xx -> BackendUnavailableError.
- Wrap sin `wrap_info.token` -> BackendUnavailableError.
- Unwrap sin `data` -> TokenInvalidError (vencido, usado o inexistente).

Cada request construye su propio cliente; no hay sesión compartida.
"""

import logging
from typing import Any, Dict, Optional

import requests

from .config import Settings
from .errors import BackendUnavailableError, TokenInvalidError
from .logging_setup import token_hint

logger = logging.getLogger(__name__)

WRAP_PATH = "v1/sys/wrapping/wrap"
UNWRAP_PATH = "v1/sys/wrapping/unwrap"


class VaultClient:
    """
    Wrapper sobre `requests` para wrap/unwrap.

    Args:
        base_uri: URI base de Vault.
        admin_token: Token con permiso para `sys/wrapping/wrap`.
        timeout: Timeout (segundos) de conexión y lectura.
        namespace: Namespace opcional (`X-Vault-Namespace`).
        verify: Verificación TLS (`True`, `False` o ruta a un CA bundle).
    """

    def __init__(
        self,
        base_uri: str,
        admin_token: str,
        timeout: float = 10.0,
        namespace: Optional[str] = None,
        verify: bool | str = True,
    ):
        self.base_uri = base_uri.rstrip("/")
        self._admin_token = admin_token
        self.timeout = timeout
        self.namespace = namespace
        self.verify = verify

    @classmethod
    def from_settings(cls, settings: Settings) -> "VaultClient":
        return cls(
            base_uri=settings.vault_addr,
            admin_token=settings.vault_token,
            timeout=settings.vault_timeout,
            namespace=settings.vault_namespace,
            verify=settings.vault_cacert or True,
        )

    # ------------------------------------------------------------------
    # API pública
    # ------------------------------------------------------------------

    def wrap(self, fields: Dict[str, Any], ttl_seconds: int) -> str:
        """
        Envuelve `fields` y devuelve el wrapping token.

        Raises:
            BackendUnavailableError: Si Vault no responde o no devuelve token.
        """
        headers = self._headers(self._admin_token)
        headers["X-Vault-Wrap-TTL"] = str(ttl_seconds)

        body = self._post(WRAP_PATH, headers=headers, json=fields)
        wrap_info = body.get("wrap_info") or {}
        token = wrap_info.get("token") if isinstance(wrap_info, dict) else None
        if not token:
            logger.error(f"Vault no devolvió wrap_info.token (errors={body.get('errors')})")
            raise BackendUnavailableError()

        logger.info(f"Secreto envuelto, token={token_hint(token)}, ttl={ttl_seconds}s")
        return token

    def unwrap(self, token: str) -> Dict[str, Any]:
        """
        Intercambia el wrapping token por los datos originales (una sola vez).

        El token se usa como credencial: el token administrativo NO participa.

        Raises:
            TokenInvalidError: Si Vault no devuelve `data`.
            BackendUnavailableError: Si Vault no responde o responde 5xx.
        """
        body = self._post(UNWRAP_PATH, headers=self._headers(token))
        data = body.get("data")
        if not data or not isinstance(data, dict):
            logger.warning(f"Unwrap sin data para token={token_hint(token)}")
            raise TokenInvalidError()

        logger.info(f"Secreto desenvuelto, token={token_hint(token)}")
        return data

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _headers(self, token: str) -> Dict[str, str]:
        headers = {"X-Vault-Token": token}
        if self.namespace:
            headers["X-Vault-Namespace"] = self.namespace
        return headers

    def _post(
        self,
        path: str,
        headers: Dict[str, str],
        json: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        POST a Vault; devuelve el body JSON (o {} si no es JSON).

        Raises:
            BackendUnavailableError: Falla de transporte, timeout o 5xx.
        """
        url = f"{self.base_uri}/{path}"
        try:
            response = requests.post(
                url,
                headers=headers,
                json=json,
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.exceptions.Timeout:
            logger.error(f"Timeout ({self.timeout}s) llamando a {path}")
            raise BackendUnavailableError()
        except requests.exceptions.RequestException as e:
            logger.error(f"Error de conexión con Vault en {path}: {type(e).__name__}")
            raise BackendUnavailableError()

        if response.status_code >= 500:
            logger.error(f"Vault respondió {response.status_code} en {path}")
            raise BackendUnavailableError()

        try:
            body = response.json()
        except ValueError:
            logger.warning(f"Respuesta no JSON de Vault en {path} (status {response.status_code})")
            return {}
        return body if isinstance(body, dict) else {}
