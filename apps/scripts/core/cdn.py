# apps/scripts/core/cdn.py
from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from apps.scripts.errors import ConfigurationError

from .assets import KINDS, strip_extension

if TYPE_CHECKING:  # pragma: no cover
    from .context import BuildContext

log = logging.getLogger("scripts.core.cdn")

TAG_PACKAGE = "PKG"
TAG_PATH = "TYPE"
TAG_VERSION = "VER"
TAG_NAME = "NAME"

# ensemble fermé de balises reconnues
TAGS = (TAG_PACKAGE, TAG_PATH, TAG_VERSION, TAG_NAME)

# clé réservée: modèles d'URL partagés {provider_id: url}
SHARED_KEY = ""

# deux styles acceptés: %TAG% et {TAG}
_PLACEHOLDER_RE = re.compile(r"%([A-Z_]+)%|\{([A-Z_]+)\}")
_TAG_RE = re.compile(
    r"(?P<at>@)?(?:%(?P<pct>{0})%|\{{(?P<brace>{0})\}})(?P<sep>/)?".format("|".join(TAGS))
)


def _template_tags(template: str) -> List[str]:
    return [m.group(1) or m.group(2) for m in _PLACEHOLDER_RE.finditer(template or "")]


def has_tag(template: str, tag: str) -> bool:
    return tag in _template_tags(template)


def render_template(template: str, values: Mapping[str, Optional[str]], *, key: str = "") -> str:
    """
    Substitution pure, en une passe, des balises PKG, TYPE, VER et NAME.

    Une balise sans valeur est retirée avec son séparateur '/' final
    (ou le '@' qui précède VER, ex: "pkg@%VER%/"), jamais laissée telle quelle.
    Seul le modèle est inspecté: les valeurs substituées ne le sont jamais.
    """
    for tag in _template_tags(template):
        if tag not in TAGS:
            raise ConfigurationError(key, f"balise inconnue {tag} dans le modèle {template!r}")

    def _replace(m: "re.Match[str]") -> str:
        tag = m.group("pct") or m.group("brace")
        at, sep = m.group("at") or "", m.group("sep") or ""
        value = values.get(tag)
        if value:
            return at + str(value) + sep
        if tag == TAG_VERSION and at:
            return sep
        return at

    return _TAG_RE.sub(_replace, template)


class CDNProvider:
    """Règle de synthèse d'URL distante pour un paquet."""

    def __init__(self, key: str):
        self.key = key
        self.url: Optional[str] = None
        self.provider: Optional[str] = None
        self.package: Optional[str] = None
        self.version: Optional[str] = None
        self.paths: Dict[str, str] = {}
        self.files: Dict[str, Dict[str, Optional[str]]] = {}
        self.disabled = False

    def __repr__(self) -> str:
        return f"<CDNProvider {self.key!r}>"

    def configure(self, entry: Mapping[str, Any]) -> "CDNProvider":
        if entry.get("url"):
            self.url = str(entry["url"])
        if entry.get("provider"):
            self.provider = str(entry["provider"])
        if entry.get("package"):
            self.package = str(entry["package"])
        if entry.get("version") is not None:
            self.version = str(entry["version"])
        paths = entry.get("paths")
        if isinstance(paths, Mapping):
            for kind, path in paths.items():
                if path:
                    self.paths[str(kind)] = str(path)
        for kind in KINDS:
            files = entry.get(kind)
            if isinstance(files, Mapping):
                self.files.setdefault(kind, {}).update(
                    {str(k): (str(v) if v else None) for k, v in files.items()}
                )
        self.disabled = bool(entry.get("disabled", False))
        return self

    def resolve_file(self, kind: str, name: str) -> Optional[str]:
        remaps = self.files.get(kind)
        if remaps:
            for candidate in (name, strip_extension(name, kind)):
                if candidate in remaps:
                    return remaps[candidate]
        return name or None

    def get_template(self, context: "BuildContext") -> str:
        if self.url:
            return self.url
        if self.provider:
            template = context.get_cdn_template(self.provider)
            if not template:
                raise ConfigurationError(self.key, f"fournisseur CDN inconnu '{self.provider}'")
            return template
        raise ConfigurationError(self.key, "aucune URL ni fournisseur déclaré")

    def get(self, context: "BuildContext", kind: str, name: str, path: Optional[str] = None) -> Optional[str]:
        """Renvoie l'URL CDN du fichier, ou None pour revenir au chemin local."""
        if self.disabled:
            return None
        filename = self.resolve_file(kind, name)
        if not filename:
            return None
        template = self.get_template(context)
        if not has_tag(template, TAG_NAME):
            raise ConfigurationError(self.key, f"le modèle {template!r} ne référence pas %{TAG_NAME}%")
        values = {
            TAG_PACKAGE: self.package or self.key,
            TAG_PATH: self.paths.get(kind) or path,
            TAG_VERSION: self.version,
            TAG_NAME: filename,
        }
        return render_template(template, values, key=self.key)


def parse_cdn(context: "BuildContext", config: Optional[Mapping[str, Any]]) -> int:
    """
    Configure les fournisseurs CDN depuis un document déclaratif:

        "":        {jsdelivr: "https://cdn.jsdelivr.net/npm/%PKG%@%VER%/%NAME%"}
        jquery:    {provider: jsdelivr, version: "3.7.1", paths: {js: dist}}
        popper.js: "https://unpkg.com/%PKG%/%TYPE%/%NAME%"

    Aucune validation ici: les erreurs remontent à la génération d'URL.
    """
    count = 0
    for key, entry in (config or {}).items():
        key = str(key)
        if key == SHARED_KEY:
            for provider_id, url in (entry or {}).items():
                context.add_cdn_template(str(provider_id), str(url))
            continue
        if isinstance(entry, str):
            entry = {"url": entry}
        if not isinstance(entry, Mapping):
            log.warning("CDN entry %s ignored: expected mapping, got %s", key, type(entry).__name__)
            continue
        if entry.get("disabled"):
            log.debug("CDN entry %s disabled", key)
            existing = context.get_cdn(key)
            if existing is not None:
                existing.disabled = True
            continue
        context.add_cdn(key).configure(entry)
        count += 1
    return count
