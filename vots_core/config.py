# vots_core/config.py
from dataclasses import dataclass
import os
from typing import Mapping, Optional

from dotenv import load_dotenv

"""
vots_core.config
================

Configuración del gateway de secretos de un solo uso.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargarla desde el entorno (.env incluido)

Objetivos de diseño
-------------------
1. **Construcción explícita**
   `load_settings()` se llama una sola vez al levantar la app; el resultado se
   guarda en `app.state.settings` y se pasa a las rutas por dependencia.
   No hay singletons globales mutables.

2. **Inmutabilidad**
   `Settings` es un dataclass congelado: ningún request puede alterarlo.

3. **Errores tempranos**
   Un valor numérico mal formado (ej. `LISTEN_PORT=abc`) o un `LOG_LEVEL`
   desconocido falla al arrancar, no en medio de un request ni en uvicorn.

Notas importantes
-----------------
- `VAULT_TOKEN` debería ser un token con permiso SOLO para crear wrapping
  tokens. La lectura (unwrap) se autentica con el propio wrapping token.
- Si `VAULT_TOKEN` está vacío NO se falla acá; Vault rechazará el wrap y el
  request devolverá 500.
"""


def _as_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} debe ser un entero, se recibió {raw!r}")


def _as_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} debe ser un número, se recibió {raw!r}")


_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
_LOG_LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


def _as_log_level(env: Mapping[str, str], name: str, default: str) -> str:
    raw = (env.get(name) or default).strip().upper()
    level = _LOG_LEVEL_ALIASES.get(raw, raw)
    if level not in _LOG_LEVELS:
        valid = ", ".join(_LOG_LEVELS)
        raise ValueError(f"{name} debe ser uno de {valid}, se recibió {raw!r}")
    return level


def _as_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """
    Contenedor tipado de configuración del proceso.

    Attributes
    ----------
    vault_addr:
        URI base de Vault (ej. `https://vault.example.com:8200`).
    vault_token:
        Token administrativo usado SOLO para `sys/wrapping/wrap`.
    vault_namespace:
        Namespace de Vault Enterprise (header `X-Vault-Namespace`), opcional.
    vault_timeout:
        Timeout (segundos) de cada llamada saliente a Vault.
    vault_cacert:
        Bundle de CA para verificar TLS de Vault. None = CAs del sistema.
    listen_ip / listen_port:
        Dirección de escucha del servidor HTTP.
    workers:
        Cantidad de procesos worker de uvicorn.
    proxy_headers:
        Confiar en `X-Forwarded-*` (el servicio corre detrás de un proxy).
    max_upload_kb:
        Tamaño máximo de archivo aceptado, en KiB.
    log_level / log_file:
        Nivel de logging y archivo destino (None = stderr).
    """

    vault_addr: str = "http://127.0.0.1:8200"
    vault_token: str = ""
    vault_namespace: Optional[str] = None
    vault_timeout: float = 10.0
    vault_cacert: Optional[str] = None

    listen_ip: str = "127.0.0.1"
    listen_port: int = 8080
    workers: int = 10
    proxy_headers: bool = True

    max_upload_kb: int = 768

    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_kb * 1024


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Construye `Settings` a partir de variables de entorno.

    Args:
        env: Mapping alternativo (tests). Si es None se usa `os.environ`
            después de cargar `.env` si existe.

    Returns:
        Settings inmutable.

    Raises:
        ValueError: Si un valor numérico o `LOG_LEVEL` no se puede interpretar.

    Variables de entorno utilizadas
    -------------------------------
    - VAULT_ADDR, VAULT_TOKEN, VAULT_NAMESPACE, VAULT_TIMEOUT, VAULT_CACERT
    - LISTEN_IP, LISTEN_PORT, WORKERS, PROXY_HEADERS
    - MAX_UPLOAD_KB
    - LOG_LEVEL, LOG_FILE
    """
    if env is None:
        load_dotenv()
        env = os.environ

    return Settings(
        vault_addr=env.get("VAULT_ADDR", "http://127.0.0.1:8200").rstrip("/"),
        vault_token=env.get("VAULT_TOKEN", ""),
        vault_namespace=env.get("VAULT_NAMESPACE") or None,
        vault_timeout=_as_float(env, "VAULT_TIMEOUT", 10.0),
        vault_cacert=env.get("VAULT_CACERT") or None,
        listen_ip=env.get("LISTEN_IP", "127.0.0.1"),
        listen_port=_as_int(env, "LISTEN_PORT", 8080),
        workers=_as_int(env, "WORKERS", 10),
        proxy_headers=_as_bool(env, "PROXY_HEADERS", True),
        max_upload_kb=_as_int(env, "MAX_UPLOAD_KB", 768),
        log_level=_as_log_level(env, "LOG_LEVEL", "INFO"),
        log_file=env.get("LOG_FILE") or None,
    )
