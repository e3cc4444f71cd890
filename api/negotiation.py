"""
Selección de representación de la respuesta.

Cada operación produce un único resultado; este módulo elige UN encoder
según lo que pidió el cliente:

1. Parámetro `?format=html|json|txt` explícito.
2. Header `Accept` (se respetan los q-values; q=0 excluye).
3. Si no hay un tipo concreto que matchee (sin header o solo comodines),
   se usa el `fallback` de la ruta.

Solo se envía una respuesta por request.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from fastapi import Request
from fastapi.responses import Response


class Representation(str, Enum):
    HTML = "html"
    JSON = "json"
    TEXT = "txt"


_FORMAT_PARAM = {
    "html": Representation.HTML,
    "json": Representation.JSON,
    "txt": Representation.TEXT,
    "text": Representation.TEXT,
}

_MEDIA_TYPES = {
    "text/html": Representation.HTML,
    "application/xhtml+xml": Representation.HTML,
    "application/json": Representation.JSON,
    "text/plain": Representation.TEXT,
}


def _parse_accept(header: str) -> List[str]:
    """Media types del header Accept ordenados por q (estable), sin q=0."""
    entries: List[Tuple[float, int, str]] = []
    for index, part in enumerate(header.split(",")):
        pieces = [p.strip() for p in part.split(";")]
        media_type = pieces[0].lower()
        if not media_type:
            continue
        quality = 1.0
        for param in pieces[1:]:
            name, _, value = param.partition("=")
            if name.strip().lower() == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality <= 0:
            continue
        entries.append((-quality, index, media_type))
    return [media_type for _, _, media_type in sorted(entries)]


def negotiate(
    request: Request,
    offered: List[Representation],
    fallback: Representation,
) -> Representation:
    """Elige la representación para `request` entre las ofrecidas."""
    requested = request.query_params.get("format")
    if requested:
        choice = _FORMAT_PARAM.get(requested.lower())
        if choice in offered:
            return choice

    for media_type in _parse_accept(request.headers.get("accept", "")):
        choice = _MEDIA_TYPES.get(media_type)
        if choice in offered:
            return choice

    return fallback


def respond_to(
    request: Request,
    encoders: Dict[Representation, Callable[[], Response]],
    fallback: Optional[Representation] = None,
) -> Response:
    """
    Ejecuta el encoder elegido para el request.

    Args:
        request: Request entrante.
        encoders: Mapa representación -> función que arma la respuesta.
        fallback: Representación por defecto (primera de `encoders` si es None).
    """
    offered = list(encoders)
    choice = negotiate(request, offered, fallback or offered[0])
    return encoders[choice]()
