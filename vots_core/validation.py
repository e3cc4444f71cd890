"""
Validación de input previa a cualquier llamada a Vault.

- Tokens: solo `[A-Za-z0-9.]`, evita inyección en el path/headers hacia Vault.
- Tiempo de vida: entero positivo de días, acotado a 30.
- Archivos: techo de tamaño configurable (768 KiB por defecto).
"""

import re
from typing import Optional, Tuple

from .errors import FileTooLargeError, InvalidTTLError, InvalidTokenFormatError

TOKEN_PATTERN = re.compile(r"[A-Za-z0-9.]+")
TTL_PATTERN = re.compile(r"[0-9]+")

MAX_TTL_DAYS = 30
SECONDS_PER_DAY = 86400


def is_valid_token(token: Optional[str]) -> bool:
    return bool(token) and TOKEN_PATTERN.fullmatch(token) is not None


def check_token(token: Optional[str]) -> str:
    """
    Valida la sintaxis del token.

    Raises:
        InvalidTokenFormatError: Si el token no matchea `^[A-Za-z0-9.]+$`.
    """
    if not is_valid_token(token):
        raise InvalidTokenFormatError()
    return token


def parse_ttl_days(raw: Optional[str]) -> Tuple[int, int]:
    """
    Interpreta el parámetro `time` (días de vida del secreto).

    Args:
        raw: Valor tal como llegó del formulario.

    Returns:
        Tupla (días, segundos). Valores > 30 se acotan a 30 sin error.

    Raises:
        InvalidTTLError: Si falta, no es numérico o es 0. No hay default.
    """
    if raw is None:
        raise InvalidTTLError()
    if not TTL_PATTERN.fullmatch(raw):
        raise InvalidTTLError()
    days = int(raw)
    if days < 1:
        raise InvalidTTLError()
    days = min(days, MAX_TTL_DAYS)
    return days, days * SECONDS_PER_DAY


def check_upload_size(size: int, max_upload_kb: int) -> None:
    """
    Raises:
        FileTooLargeError: Si `size` supera `max_upload_kb * 1024` bytes.
    """
    if size > max_upload_kb * 1024:
        raise FileTooLargeError(max_upload_kb)
