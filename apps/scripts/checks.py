# apps/scripts/checks.py
from __future__ import annotations

from collections.abc import Mapping

from django.core.checks import Error, Warning, register

from .config.loader import default_scripts, load_cdn_config, lookup_dirs
from .core.cdn import SHARED_KEY
from .core.loader import ScriptLoader


@register()
def lookup_dirs_check(app_configs, **kwargs):
    warns = []
    for d in lookup_dirs():
        if not d.is_dir():
            warns.append(Warning(
                f"Répertoire de scripts introuvable: {d}",
                hint="Corrige SCRIPTS_DIRS ou crée le répertoire.",
                id="scripts.W001"))
    return warns


@register()
def defaults_resolvable_check(app_configs, **kwargs):
    loader = ScriptLoader(lookup_dirs())
    warns = []
    for name in default_scripts():
        if not loader.exists(name):
            warns.append(Warning(
                f"Script par défaut introuvable: {name}",
                hint="Vérifie SCRIPTS_DEFAULTS et SCRIPTS_DIRS.",
                id="scripts.W002"))
    return warns


@register()
def cdn_shape_check(app_configs, **kwargs):
    """
    Vérification légère de la forme du document CDN; les modèles d'URL
    eux-mêmes ne sont évalués qu'à la génération.
    """
    try:
        config = load_cdn_config()
    except ValueError as e:
        return [Error(str(e), hint="Corrige SCRIPTS_CDN_FILE.", id="scripts.E001")]

    errors = []
    shared = config.get(SHARED_KEY) or {}
    if not isinstance(shared, Mapping):
        errors.append(Error(
            "Clé CDN réservée '' : mapping {provider_id: url} attendu.",
            id="scripts.E002"))
        shared = {}
    for key, entry in config.items():
        if key == SHARED_KEY or isinstance(entry, str):
            continue
        if not isinstance(entry, Mapping):
            errors.append(Error(
                f"Entrée CDN {key}: mapping ou URL attendu, reçu {type(entry).__name__}.",
                id="scripts.E003"))
            continue
        if entry.get("disabled"):
            continue
        provider = entry.get("provider")
        if not entry.get("url") and not provider:
            errors.append(Error(
                f"Entrée CDN {key}: ni 'url' ni 'provider'.",
                hint="Déclare url: ... ou provider: <id déclaré sous la clé ''>.",
                id="scripts.E004"))
        elif provider and not entry.get("url") and provider not in shared:
            errors.append(Error(
                f"Entrée CDN {key}: fournisseur inconnu '{provider}'.",
                hint=f"Fournisseurs déclarés: {sorted(shared)}",
                id="scripts.E005"))
    return errors
