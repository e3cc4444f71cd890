"""Rutas de la API."""

from . import files, forms, links, secrets

__all__ = ["files", "forms", "links", "secrets"]
