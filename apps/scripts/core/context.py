# apps/scripts/core/context.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from . import assets as A
from .assets import Asset
from .cdn import CDNProvider, parse_cdn
from .loader import ScriptLoader
from .repository import Repository
from .script import Script

log = logging.getLogger("scripts.core.context")

DEFAULT_ASSET_ROOT = "/js"
DEFAULT_EOL = "\n"


class BuildContext:
    """
    État d'une passe de construction: scripts résolus, dépôts, URLs d'assets
    et fournisseurs CDN. Un contexte neuf par build; seul le cache de
    résolution des fichiers (ScriptLoader) est partagé entre contextes.
    """

    def __init__(
        self,
        dirs: Iterable[str | Path] = (),
        *,
        asset_root: Optional[str] = DEFAULT_ASSET_ROOT,
        eol: str = DEFAULT_EOL,
        loader: Optional[ScriptLoader] = None,
    ):
        self.loader = loader or ScriptLoader()
        for d in dirs:
            self.loader.add_dir(d)
        self.asset_root = asset_root
        self.eol = eol
        self.defaults: List[str] = []
        self.default_assets: List[Tuple[str, str, Asset]] = []
        self.cdn: Dict[str, CDNProvider] = {}
        self.cdn_templates: Dict[str, str] = {}
        self.resolving: List[str] = []
        self._global_asset: Optional[Asset] = None
        self.clear()

    # --- scripts -------------------------------------------------------

    def add_dir(self, path: str | Path) -> "BuildContext":
        self.loader.add_dir(path)
        return self

    def create(self, name: str) -> Script:
        script = self.scripts.get(name)
        if script is None:
            script = self.loader.instance(name)
            script.bind(self)
            self.scripts[name] = script
            log.debug("Script %s created (%s)", name, script.__class__.__name__)
        return script

    def include(self, *names: str) -> "BuildContext":
        for name in names:
            self.create(name).include()
        return self

    def add_default(self, name: str) -> "BuildContext":
        if name not in self.defaults:
            self.defaults.append(name)
        return self

    def include_defaults(self) -> "BuildContext":
        return self.include(*self.defaults)

    # --- assets --------------------------------------------------------

    def global_asset(self) -> Asset:
        if self._global_asset is None:
            asset = Asset("")
            asset.set_path(A.JAVASCRIPT, A.JAVASCRIPT)
            asset.set_path(A.STYLESHEET, A.STYLESHEET)
            asset.cdn = False
            self._global_asset = asset
        return self._global_asset

    def add_asset(self, kind: str, name: str, asset: Optional[Asset] = None) -> "BuildContext":
        self.default_assets.append((kind, name, asset or self.global_asset()))
        return self

    def include_assets(self) -> "BuildContext":
        for kind, name, asset in self.default_assets:
            asset.use(self, kind, name)
        return self

    def add_url(self, kind: str, url: str, priority: int = A.PRIORITY_DEFAULT) -> "BuildContext":
        urls = self.assets.setdefault(kind, [])
        if url not in urls:
            if priority == A.PRIORITY_FIRST:
                urls.insert(0, url)
            else:
                urls.append(url)
        return self

    def get_assets(self, kind: str) -> List[str]:
        return list(self.assets.get(kind, []))

    # --- CDN -----------------------------------------------------------

    def add_cdn(self, key: str) -> CDNProvider:
        provider = self.cdn.get(key)
        if provider is None:
            provider = CDNProvider(key)
            self.cdn[key] = provider
        return provider

    def get_cdn(self, key: str) -> Optional[CDNProvider]:
        return self.cdn.get(key)

    def add_cdn_template(self, provider_id: str, url: str) -> "BuildContext":
        self.cdn_templates[provider_id] = url
        return self

    def get_cdn_template(self, provider_id: str) -> Optional[str]:
        return self.cdn_templates.get(provider_id)

    def parse_cdn(self, config: Optional[Mapping[str, Any]]) -> int:
        return parse_cdn(self, config)

    # --- dépôts --------------------------------------------------------

    def get_repository(self, name: Optional[str], *, owner: Optional[Script] = None) -> Repository:
        if not name:
            raise ValueError("Nom de dépôt vide.")
        repo = self.repositories.get(name)
        if repo is None:
            repo = Repository(name, eol=self.eol)
            self.repositories[name] = repo
            if owner is not None:
                owner.init_repository(repo)
        return repo

    def get_content(self) -> str:
        result: List[str] = []
        for repo in self.repositories.values():
            content = repo.get_content()
            if content:
                result.append(content)
        return self.eol.join(result)

    def clear(self) -> "BuildContext":
        self.scripts: Dict[str, Script] = {}
        self.repositories: Dict[str, Repository] = {}
        self.assets: Dict[str, List[str]] = {}
        self.resolving = []
        return self
