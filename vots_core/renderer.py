"""
Renderer HTML de las páginas del gateway.

Páginas mínimas armadas con fragmentos en código; todo valor interpolado pasa
por `html.escape`.

Importante: `link_page` solo REFERENCIA `/secret/{token}`. Los bots de
preview (Slack, mail, etc.) que abren el link no queman el token; el usuario
tiene que hacer click.
"""

from __future__ import annotations

import html
from typing import Any, Dict

_BASE_CSS = """
body { font-family: 'Helvetica Neue', Arial, sans-serif; max-width: 720px; margin: 3em auto; color: #1a1a1a; }
h1 { font-size: 1.5em; border-bottom: 1px solid #ddd; padding-bottom: 0.2em; }
textarea { width: 100%; min-height: 10em; font-family: monospace; }
pre { background: #f6f6f6; border: 1px solid #ddd; padding: 1em; white-space: pre-wrap; word-break: break-all; }
.note { color: #666; font-size: 0.9em; }
a.button, button { display: inline-block; padding: 0.5em 1em; background: #222; color: #fff; border: 0; text-decoration: none; }
"""


def _page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        "<html>\n<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="robots" content="noindex, nofollow">\n'
        f"<title>{html.escape(title)}</title>\n"
        f"<style>{_BASE_CSS}</style>\n"
        "</head>\n<body>\n"
        f"{body}\n"
        "</body>\n</html>\n"
    )


def _ttl_field() -> str:
    return (
        '<label for="time">Días de validez (máximo 30)</label>\n'
        '<input type="number" id="time" name="time" min="1" max="30" value="1" required>\n'
    )


def _url(base_url: str, path: str) -> str:
    return base_url.rstrip("/") + path


def new_secret_page() -> str:
    body = (
        "<h1>Nuevo secreto</h1>\n"
        '<form method="post" action="/secret">\n'
        '<textarea name="secret" required></textarea>\n'
        f"{_ttl_field()}"
        "<button type=\"submit\">Crear link</button>\n"
        "</form>\n"
        '<p class="note">El secreto se puede leer una sola vez. '
        '<a href="/file">Compartir un archivo</a></p>'
    )
    return _page("Nuevo secreto", body)


def new_file_page(max_upload_kb: int) -> str:
    body = (
        "<h1>Nuevo archivo</h1>\n"
        '<form method="post" action="/file" enctype="multipart/form-data">\n'
        '<input type="file" name="secret" required>\n'
        f"{_ttl_field()}"
        "<button type=\"submit\">Crear link</button>\n"
        "</form>\n"
        f'<p class="note">Tamaño máximo: {int(max_upload_kb)} KB. '
        "El archivo se puede descargar una sola vez.</p>"
    )
    return _page("Nuevo archivo", body)


def secret_link_page(token: str, ttl_days: int, base_url: str = "") -> str:
    link = html.escape(_url(base_url, f"/link/{token}"))
    direct = html.escape(_url(base_url, f"/secret/{token}"))
    body = (
        "<h1>Link al secreto</h1>\n"
        f"<p>Compartí este link (válido por {int(ttl_days)} día(s), un solo uso):</p>\n"
        f"<pre>{link}</pre>\n"
        f'<p class="note">Link directo (se quema al abrirlo): {direct}</p>\n'
        f"<p>Token: <code>{html.escape(token)}</code></p>"
    )
    return _page("Link al secreto", body)


def file_link_page(token: str, ttl_days: int, base_url: str = "") -> str:
    view = html.escape(_url(base_url, f"/file/{token}"))
    download = html.escape(_url(base_url, f"/dfile/{token}"))
    body = (
        "<h1>Link al archivo</h1>\n"
        f"<p>Válido por {int(ttl_days)} día(s), un solo uso. Elegí UNA opción:</p>\n"
        f"<p>Ver en el navegador:</p>\n<pre>{view}</pre>\n"
        f"<p>Descargar:</p>\n<pre>{download}</pre>\n"
        f"<p>Token: <code>{html.escape(token)}</code></p>"
    )
    return _page("Link al archivo", body)


def link_page(token: str) -> str:
    href = html.escape(f"/secret/{token}")
    body = (
        "<h1>Te compartieron un secreto</h1>\n"
        "<p>El secreto se puede ver una sola vez. Al abrirlo deja de existir.</p>\n"
        f'<p><a class="button" href="{href}" rel="nofollow">Ver secreto</a></p>\n'
        f'<p class="note">Token: <code>{html.escape(token)}</code></p>'
    )
    return _page("Secreto compartido", body)


def view_secret_page(data: Dict[str, Any]) -> str:
    rows = []
    for key, value in data.items():
        rows.append(
            f"<h2>{html.escape(str(key))}</h2>\n"
            f"<pre>{html.escape('' if value is None else str(value))}</pre>"
        )
    body = (
        "<h1>Secreto</h1>\n"
        + "\n".join(rows)
        + '\n<p class="note">Este secreto ya fue consumido: copialo ahora.</p>'
    )
    return _page("Secreto", body)
