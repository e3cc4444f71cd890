"""
Modelos de response de la API.

Las respuestas de secretos son texto, HTML, JSON libre (el mapa `data` de
Vault) o binario; solo el health check tiene un schema fijo.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response del health check."""

    status: str = Field(..., description="Estado del proceso: ok")
    service: str = Field(..., description="Nombre del servicio")
    version: str = Field(..., description="Versión de la API")
