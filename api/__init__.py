"""
API HTTP del gateway VOTS.

Esta capa expone los endpoints que usan el core (vots_core.engine) para
crear y leer secretos de un solo uso sobre Vault.

La API está diseñada para ser consumida por:
- Navegadores (formularios y páginas HTML)
- Clientes de línea de comandos (curl) vía texto plano o JSON
"""
