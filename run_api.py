#!/usr/bin/env python3
"""
Script para ejecutar el gateway con uvicorn.
Ejecuta desde la raíz del proyecto para asegurar que Python encuentre los módulos
'api' y 'vots_core'.

Host, puerto, workers y proxy headers salen del entorno
(LISTEN_IP, LISTEN_PORT, WORKERS, PROXY_HEADERS).
"""

import sys
from pathlib import Path

# Asegurar que el directorio raíz esté en el PYTHONPATH
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from vots_core.config import load_settings


def main() -> None:
    import uvicorn

    settings = load_settings()
    print(f"🚀 Iniciando VOTS en http://{settings.listen_ip}:{settings.listen_port}")
    try:
        uvicorn.run(
            "api.main:app",
            host=settings.listen_ip,
            port=settings.listen_port,
            workers=settings.workers,
            proxy_headers=settings.proxy_headers,
            # LOG_LEVEL ya validado: critical|error|warning|info|debug
            log_level=settings.log_level.lower(),
        )
    except Exception as e:
        print(f"❌ Error al iniciar el servidor: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
