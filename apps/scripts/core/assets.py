# apps/scripts/core/assets.py
from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .context import BuildContext

log = logging.getLogger("scripts.core.assets")

JAVASCRIPT = "js"
STYLESHEET = "css"
IMAGE = "img"
OTHER = "other"

KINDS = (JAVASCRIPT, STYLESHEET, IMAGE, OTHER)

PRIORITY_DEFAULT = 1
PRIORITY_FIRST = 2

_EXTENSIONS = {
    JAVASCRIPT: ".js",
    STYLESHEET: ".css",
}

_ABSOLUTE_RE = re.compile(r"^(?:https?:)?//", re.IGNORECASE)


def get_extension(kind: str) -> Optional[str]:
    return _EXTENSIONS.get(kind)


def strip_extension(name: str, kind: str) -> str:
    ext = get_extension(kind)
    if ext and name.endswith(ext):
        return name[: -len(ext)]
    return name


def fix_extension(url: str, kind: str) -> str:
    """Ajoute l'extension canonique du type si absente (sauf URL avec query string)."""
    if "?" in url:
        return url
    ext = get_extension(kind)
    if ext and not url.endswith(ext):
        url += ext
    return url


def is_local(url: str) -> bool:
    return _ABSOLUTE_RE.match(url or "") is None


def join_url(*parts: Optional[str]) -> str:
    segments = [str(p).strip("/") for p in parts if p]
    return "/".join(s for s in segments if s)


class Asset:
    """
    Groupe de fichiers statiques d'un paquet logique (ex: "semantic-ui").

    Plusieurs scripts peuvent partager la même instance; le cycle de vie est
    celui du BuildContext qui l'utilise.
    """

    def __init__(self, name: Optional[str] = None, *, alias: Optional[str] = None):
        self.name = name or ""
        self.alias = alias
        self.paths: Dict[str, str] = {}
        self.cdn = True

    def __repr__(self) -> str:
        return f"<Asset {self.name!r}>"

    @property
    def cdn_key(self) -> str:
        return self.alias or self.name

    def set_path(self, kind: str, path: Optional[str]) -> "Asset":
        if path:
            self.paths[kind] = path
        else:
            self.paths.pop(kind, None)
        return self

    def get_path(self, kind: str) -> Optional[str]:
        return self.paths.get(kind)

    def get_dir(self, kind: str) -> str:
        return join_url(self.name, self.get_path(kind))

    def generate(self, context: "BuildContext", name: str, kind: str) -> str:
        """
        Construit l'URL finale d'un fichier de l'asset:
          1) URL absolue (http(s):// ou //) : inchangée
          2) fournisseur CDN (clé = alias ou nom du paquet)
          3) chemin local [racine]/[paquet]/[chemin du type]/[fichier]
        L'extension est normalisée sur le nom demandé, pas sur l'URL produite
        (un modèle CDN peut porter sa propre query string).
        """
        if not is_local(name):
            return fix_extension(name, kind)
        name = fix_extension(name, kind)
        url = None
        provider = context.get_cdn(self.cdn_key) if self.cdn_key else None
        if provider is not None:
            url = provider.get(context, kind, name, self.get_path(kind))
            if url:
                log.debug("Asset %s/%s resolved through CDN %s: %s", kind, name, provider.key, url)
        if not url:
            url = self._local_url(context, name, kind)
        return url

    def _local_url(self, context: "BuildContext", name: str, kind: str) -> str:
        root = context.asset_root if self.cdn else None
        path = join_url(self.get_dir(kind), name)
        if root and not is_local(root):
            # racine absolue (ex: https://static.example.com/js)
            return f"{root.rstrip('/')}/{path}"
        return "/" + join_url(root, path)

    def use(self, context: "BuildContext", kind: str, name: str, priority: int = PRIORITY_DEFAULT) -> "Asset":
        context.add_url(kind, self.generate(context, name, kind), priority)
        return self
