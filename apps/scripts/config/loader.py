# apps/scripts/config/loader.py
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from django.conf import settings

from apps.scripts.core.assets import KINDS
from apps.scripts.core.context import DEFAULT_ASSET_ROOT, DEFAULT_EOL, BuildContext

log = logging.getLogger("scripts.config.loader")

LIBRARY_DIR = Path(__file__).resolve().parents[1] / "library"


def lookup_dirs() -> List[Path]:
    """Bibliothèque intégrée d'abord, puis SCRIPTS_DIRS dans l'ordre déclaré."""
    dirs = [LIBRARY_DIR]
    for d in getattr(settings, "SCRIPTS_DIRS", []) or []:
        p = Path(d)
        if p not in dirs:
            dirs.append(p)
    return dirs


def default_scripts() -> List[str]:
    return [str(n) for n in (getattr(settings, "SCRIPTS_DEFAULTS", []) or [])]


def default_assets() -> List[Tuple[str, str]]:
    out: List[Tuple[str, str]] = []
    for item in getattr(settings, "SCRIPTS_DEFAULT_ASSETS", []) or []:
        kind, name = item
        if kind not in KINDS:
            raise ValueError(f"SCRIPTS_DEFAULT_ASSETS: type inconnu {kind!r} (attendu: {', '.join(KINDS)})")
        out.append((kind, str(name)))
    return out


@lru_cache(maxsize=8)
def _load_yaml(path: str) -> Dict[str, Any]:
    p = Path(path)
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"YAML invalide ({p}): {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Document CDN invalide ({p}): mapping attendu, reçu {type(data).__name__}")
    return data


def clear_config_cache() -> None:
    _load_yaml.cache_clear()


def load_cdn_config() -> Dict[str, Any]:
    """
    Document CDN effectif: SCRIPTS_CDN (inline) sinon SCRIPTS_CDN_FILE (YAML).
    Vide si SCRIPTS_CDN_ENABLED est faux.
    """
    if not getattr(settings, "SCRIPTS_CDN_ENABLED", True):
        return {}
    inline = getattr(settings, "SCRIPTS_CDN", None)
    if inline is not None:
        return dict(inline)
    path: Optional[str] = getattr(settings, "SCRIPTS_CDN_FILE", None)
    if not path:
        return {}
    if not Path(path).exists():
        log.warning("SCRIPTS_CDN_FILE %s introuvable, CDN désactivé", path)
        return {}
    return _load_yaml(str(path))


def build_context() -> BuildContext:
    """Nouveau BuildContext configuré depuis les settings Django."""
    context = BuildContext(
        lookup_dirs(),
        asset_root=getattr(settings, "SCRIPTS_ASSET_ROOT", DEFAULT_ASSET_ROOT),
        eol=getattr(settings, "SCRIPTS_EOL", DEFAULT_EOL),
    )
    for name in default_scripts():
        context.add_default(name)
    for kind, name in default_assets():
        context.add_asset(kind, name)
    count = context.parse_cdn(load_cdn_config())
    log.debug("BuildContext ready: %d dirs, %d CDN entries", len(context.loader.dirs), count)
    return context
