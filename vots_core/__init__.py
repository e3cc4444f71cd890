"""
Core del gateway VOTS (Vault-based One-Time Secret).

Este paquete contiene la lógica que no depende de FastAPI:
- Configuración (`config`) y logging (`logging_setup`)
- Validación de input (`validation`)
- Cliente de Vault para wrap/unwrap (`vault_client`)
- Operaciones del gateway (`engine`) y páginas HTML (`renderer`)
"""
