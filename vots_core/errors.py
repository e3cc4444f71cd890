"""
Taxonomía de errores del gateway.

Cada error lleva el `status_code` HTTP y el `message` visible para el cliente.
La capa HTTP (`api.main`) los traduce a una respuesta text/plain; el core no
conoce FastAPI.

- ClientInputError: input mal formado, no se llama a Vault.
- TokenInvalidError: Vault no devolvió `data` (vencido, usado o inexistente;
  nunca se distingue cuál).
- BackendUnavailableError: Vault no respondió o no devolvió un resultado usable.
"""

from __future__ import annotations


class VotsError(Exception):
    """Base de todos los errores de request del gateway."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ClientInputError(VotsError):
    status_code = 400
    default_message = "Bad request"


class InvalidTokenFormatError(ClientInputError):
    default_message = "Invalid Token Format"


class MissingSecretError(ClientInputError):
    default_message = "Missing secret"


class NotAFileError(ClientInputError):
    default_message = "Secret is not a file"


class InvalidTTLError(ClientInputError):
    # Tiempo inválido responde 500 ("FAIL MODE"), no 400
    status_code = 500
    default_message = "FAIL MODE: time must be a positive number of days"


class FileTooLargeError(ClientInputError):
    status_code = 500

    def __init__(self, max_upload_kb: int):
        self.max_upload_kb = max_upload_kb
        super().__init__(f"File too big, {max_upload_kb} KB max")


class TokenInvalidError(VotsError):
    status_code = 400
    default_message = "Invalid Token"


class BackendUnavailableError(VotsError):
    status_code = 500
    default_message = "Could not finish the request"
