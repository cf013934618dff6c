"""Metadata de la página que devuelve `tools/htmlextract`.

Vive en `core/` porque solo parsea texto, no hace I/O.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urljoin

from bs4 import BeautifulSoup

# clave -> (selector CSS, atributo con el valor; None = texto del nodo)
_FIELDS: dict[str, tuple[str, str | None]] = {
    "title": ("head > title, title", None),
    "meta_description": ('meta[name="description"], meta[property="og:description"]', "content"),
    "og_image": ('meta[property="og:image"], meta[name="twitter:image"]', "content"),
}


def extract_html_metadata(*, html: str, base_url: str | None = None) -> dict[str, Any]:
    """Devuelve solo las claves encontradas de `title`, `meta_description`, `og_image`.

    `og_image` se resuelve contra `base_url` o, si falta, contra el
    `<link rel="canonical">` de la propia página.
    """

    if not html:
        return {}

    soup = BeautifulSoup(html, "html.parser")
    found: dict[str, Any] = {}
    for key, (selector, attribute) in _FIELDS.items():
        node = soup.select_one(selector)
        if node is None:
            continue
        value = node.get_text() if attribute is None else node.get(attribute)
        if value and str(value).strip():
            found[key] = str(value).strip()

    canonical = soup.select_one('link[rel="canonical"][href]')
    base = base_url or (canonical["href"] if canonical else None)
    if base and "og_image" in found:
        found["og_image"] = urljoin(base, found["og_image"])
    return found
