from __future__ import annotations

"""
vots_core.domain_models
=======================

Modelos de dominio (dataclasses) del gateway.

Todos son transitorios: viven lo que dura un request y nunca se persisten.

- `SecretSubmission`: lo que el usuario quiere compartir (texto o archivo).
- `WrappedSecret`: resultado de crear un secreto (token + TTL aplicado).
- `UnwrappedSecret`: el mapa `data` que devuelve Vault al hacer unwrap.
- `FilePayload`: binario ya decodificado listo para servir.

Principios de diseño
--------------------
- Sin IO: este módulo no habla con Vault ni con HTTP.
- El transporte de archivos es base64 dentro del JSON que se envuelve.
"""

import base64
import binascii
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import NotAFileError


@dataclass
class SecretSubmission:
    """
    Secreto a envolver.

    Attributes
    ----------
    payload:
        Contenido crudo. Para texto es el UTF-8 del string ingresado.
    ttl_days:
        Días de vida ya validados y acotados a [1, 30].
    content_type / filename:
        Solo para archivos.
    is_file:
        Define la forma del body enviado a Vault.
    """

    payload: bytes
    ttl_days: int
    content_type: str = "text/plain"
    filename: Optional[str] = None
    is_file: bool = False

    @classmethod
    def from_text(cls, text: str, ttl_days: int) -> "SecretSubmission":
        return cls(payload=text.encode("utf-8"), ttl_days=ttl_days)

    @classmethod
    def from_file(
        cls,
        payload: bytes,
        ttl_days: int,
        content_type: Optional[str],
        filename: Optional[str],
    ) -> "SecretSubmission":
        return cls(
            payload=payload,
            ttl_days=ttl_days,
            content_type=content_type or "application/octet-stream",
            filename=filename,
            is_file=True,
        )

    @property
    def ttl_seconds(self) -> int:
        return self.ttl_days * 86400

    def to_wrap_fields(self) -> Dict[str, Any]:
        """
        Campos que se envían a `sys/wrapping/wrap`.

        - Texto:   {"secret": "<texto>"}
        - Archivo: {"secret": "<base64>", "content_type": ..., "filename": ...}
        """
        if not self.is_file:
            return {"secret": self.payload.decode("utf-8")}
        return {
            "secret": base64.b64encode(self.payload).decode("ascii"),
            "content_type": self.content_type,
            "filename": self.filename,
        }


@dataclass
class WrappedSecret:
    """Token devuelto por Vault y los días de vida efectivamente aplicados."""

    token: str
    ttl_days: int


@dataclass
class FilePayload:
    content: bytes
    content_type: str = "application/octet-stream"
    filename: Optional[str] = None


@dataclass
class UnwrappedSecret:
    """
    Contenido devuelto por `sys/wrapping/unwrap` (`data`).

    Se conserva el mapa completo para las vistas HTML/JSON; las propiedades
    exponen los campos conocidos.
    """

    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def secret(self) -> Optional[str]:
        value = self.data.get("secret")
        return None if value is None else str(value)

    def _text_field(self, name: str) -> Optional[str]:
        # Datos envueltos fuera del gateway pueden traer tipos arbitrarios
        value = self.data.get(name)
        if not isinstance(value, str) or any(c in value for c in "\r\n\x00"):
            return None
        return value.strip() or None

    @property
    def content_type(self) -> Optional[str]:
        return self._text_field("content_type")

    @property
    def filename(self) -> Optional[str]:
        return self._text_field("filename")

    def to_file(self) -> FilePayload:
        """
        Decodifica el secreto como archivo.

        Raises:
            NotAFileError: Si `secret` falta o no es base64 válido.
        """
        if self.secret is None:
            raise NotAFileError()
        try:
            # b64decode descarta saltos de línea (base64 con wrap a 76 columnas)
            content = base64.b64decode(self.secret)
        except (binascii.Error, ValueError):
            raise NotAFileError()
        return FilePayload(
            content=content,
            content_type=self.content_type or "application/octet-stream",
            filename=self.filename,
        )
