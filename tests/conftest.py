"""
Fixtures compartidas: un Vault falso en memoria y un TestClient de la app.

El Vault falso imita el comportamiento de response wrapping:
- `wrap` guarda los campos y devuelve un token nuevo
- `unwrap` devuelve los datos UNA vez (burn-after-read)
y registra cada llamada para poder afirmar que no hubo requests a Vault.
"""

import itertools
from typing import Any, Dict, List, Tuple

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_vault_client
from api.main import create_app
from vots_core.config import Settings
from vots_core.errors import TokenInvalidError


class FakeVault:
    def __init__(self):
        self._store: Dict[str, Dict[str, Any]] = {}
        self._counter = itertools.count(1)
        self.calls: List[Tuple[str, Any]] = []
        self.ttls: List[int] = []

    def wrap(self, fields: Dict[str, Any], ttl_seconds: int) -> str:
        self.calls.append(("wrap", fields))
        self.ttls.append(ttl_seconds)
        token = f"hvs.CAES{next(self._counter):04d}"
        self._store[token] = dict(fields)
        return token

    def unwrap(self, token: str) -> Dict[str, Any]:
        self.calls.append(("unwrap", token))
        data = self._store.pop(token, None)
        if data is None:
            raise TokenInvalidError()
        return data


@pytest.fixture
def settings() -> Settings:
    return Settings(vault_addr="http://vault.test:8200", vault_token="admin-token")


@pytest.fixture
def vault() -> FakeVault:
    return FakeVault()


@pytest.fixture
def app(settings, vault):
    app = create_app(settings)
    app.dependency_overrides[get_vault_client] = lambda: vault
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
