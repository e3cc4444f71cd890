"""
Dependencias de FastAPI.

- `get_settings`: devuelve el `Settings` creado al levantar la app
  (guardado en `app.state.settings`).
- `get_vault_client`: construye un `VaultClient` por request. No se comparte
  estado mutable entre requests.

En tests se reemplaza `get_vault_client` con `app.dependency_overrides`.
"""

from fastapi import Depends, Request

from vots_core.config import Settings
from vots_core.vault_client import VaultClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_vault_client(settings: Settings = Depends(get_settings)) -> VaultClient:
    """Cliente de Vault configurado con el token administrativo."""
    return VaultClient.from_settings(settings)
