# apps/scripts/core/loader.py
from __future__ import annotations

import hashlib
import importlib.util
import logging
import re
from pathlib import Path
from types import ModuleType
from typing import Dict, Iterable, List, Tuple

from apps.scripts.errors import ResolutionError

log = logging.getLogger("scripts.core.loader")

INDEX_FILENAME = "__init__.py"
FACTORY_NAME = "instance"

_SPLIT_RE = re.compile(r"[/\\.]+")

# Cache process-wide: (répertoires, nom) -> fichier. Immuable une fois rempli.
_RESOLVED: Dict[Tuple[Tuple[str, ...], str], Path] = {}
# Modules exécutés, par chemin absolu
_MODULES: Dict[Path, ModuleType] = {}


def clear_cache() -> None:
    _RESOLVED.clear()
    _MODULES.clear()


def _candidates(base: Path, name: str) -> List[Path]:
    parts = [p for p in _SPLIT_RE.split(name) if p]
    if not parts:
        return []
    target = base.joinpath(*parts)
    return [target.with_name(target.name + ".py"), target / INDEX_FILENAME]


def _module_name(path: Path) -> str:
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:12]
    stem = path.parent.name if path.name == INDEX_FILENAME else path.stem
    return f"scripts_unit_{re.sub(r'[^0-9A-Za-z_]', '_', stem)}_{digest}"


class ScriptLoader:
    """
    Localise et charge les définitions de scripts.

    Un nom "JQuery/Define" (ou "JQuery.Define") est cherché dans chaque
    répertoire, dans l'ordre d'enregistrement:
        <dir>/JQuery/Define.py
        <dir>/JQuery/Define/__init__.py
    La première correspondance l'emporte.
    """

    def __init__(self, dirs: Iterable[str | Path] = ()):
        self.dirs: List[Path] = []
        for d in dirs:
            self.add_dir(d)

    def add_dir(self, path: str | Path) -> "ScriptLoader":
        p = Path(path)
        if p not in self.dirs:
            self.dirs.append(p)
        return self

    def _cache_key(self, name: str) -> Tuple[Tuple[str, ...], str]:
        return tuple(str(d) for d in self.dirs), name

    def find(self, name: str) -> Path:
        key = self._cache_key(name)
        cached = _RESOLVED.get(key)
        if cached is not None:
            return cached
        for base in self.dirs:
            for script_file in _candidates(base, name):
                log.debug("Try loading script file %s...", script_file)
                if script_file.is_file():
                    log.debug("Script %s matched with %s", name, script_file)
                    resolved = script_file.resolve()
                    _RESOLVED[key] = resolved
                    return resolved
        raise ResolutionError(name, self.dirs)

    def exists(self, name: str) -> bool:
        try:
            self.find(name)
            return True
        except ResolutionError:
            return False

    def load(self, name: str) -> ModuleType:
        path = self.find(name)
        module = _MODULES.get(path)
        if module is None:
            spec = importlib.util.spec_from_file_location(_module_name(path), path)
            if spec is None or spec.loader is None:
                raise ResolutionError(name, self.dirs)
            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)
            _MODULES[path] = module
        return module

    def instance(self, name: str):
        module = self.load(name)
        factory = getattr(module, FACTORY_NAME, None)
        if not callable(factory):
            raise ResolutionError(name, self.dirs)
        return factory()
