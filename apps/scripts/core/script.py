# apps/scripts/core/script.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, TypedDict, Union

from apps.scripts.errors import CycleError

from . import assets as A
from .assets import Asset
from .repository import POSITION_FIRST, POSITION_LAST, POSITION_MIDDLE, Repository

if TYPE_CHECKING:  # pragma: no cover
    from .context import BuildContext

log = logging.getLogger("scripts.core.script")


class AssetRef(TypedDict):
    type: str
    asset: Asset
    name: str
    priority: int


def _as_list(value: Union[str, Iterable[str], None]) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


class Script:
    """
    Unité de code incluable une seule fois par BuildContext.

    Les sous-classes surchargent les hooks dont elles ont besoin:
      - initialize()            : nom, dépendances, position, assets
      - get_script()            : fragment principal (ou None)
      - get_init_script()       : code d'initialisation ajouté après le fragment
      - init_repository(repo)   : appelé à la création du dépôt cible
    """

    def __init__(self, name: Optional[str] = None, repository: Optional[str] = None):
        self.name = name
        self.repository = repository
        self.position = POSITION_LAST
        self.dependencies: List[str] = []
        self.included = False
        self.default_asset: Optional[Asset] = None
        self.asset: Optional[Asset] = None
        self.assets: Dict[str, AssetRef] = {}
        self.context: Optional["BuildContext"] = None
        self._resolving = False
        self.initialize()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r}>"

    # --- hooks ---------------------------------------------------------

    def initialize(self) -> None:
        pass

    def get_script(self) -> Optional[str]:
        return None

    def get_init_script(self) -> Optional[str]:
        return None

    def init_repository(self, repository: Repository) -> None:
        pass

    # --- déclaration ---------------------------------------------------

    @property
    def repository_name(self) -> Optional[str]:
        return self.repository or self.name

    def bind(self, context: "BuildContext") -> "Script":
        self.context = context
        return self

    def get_context(self) -> "BuildContext":
        if self.context is None:
            raise RuntimeError(f"Script {self.name} n'est rattaché à aucun BuildContext.")
        return self.context

    def add_dependencies(self, dependencies: Union[str, Iterable[str]]) -> "Script":
        for dep in _as_list(dependencies):
            if dep not in self.dependencies:
                self.dependencies.append(dep)
        return self

    def get_default_asset(self) -> Asset:
        if self.default_asset is None:
            self.default_asset = Asset(self.repository_name)
        return self.default_asset

    def get_asset(self) -> Asset:
        return self.asset if self.asset is not None else self.get_default_asset()

    def add_asset(self, kind: str, name: str, priority: int = A.PRIORITY_DEFAULT) -> "Script":
        asset = self.get_asset()
        key = ":".join([kind, asset.name, name])
        if key not in self.assets:
            self.assets[key] = {"type": kind, "asset": asset, "name": name, "priority": priority or A.PRIORITY_DEFAULT}
        return self

    def get_repository(self) -> Repository:
        return self.get_context().get_repository(self.repository_name, owner=self)

    # --- inclusion -----------------------------------------------------

    def include(self) -> "Script":
        if self.included:
            return self
        context = self.get_context()
        if self._resolving:
            raise CycleError(context.resolving + [self.name or "?"])
        self._resolving = True
        context.resolving.append(self.name or "?")
        try:
            self.include_dependencies(self.dependencies)
        finally:
            context.resolving.pop()
            self._resolving = False
        self.included = True
        log.debug("Including script %s", self.name)
        self.include_assets()
        self.include_script()
        return self

    def include_dependencies(self, dependencies: Iterable[str]) -> "Script":
        context = self.get_context()
        for dep in dependencies:
            context.create(dep).include()
        return self

    def include_assets(self) -> "Script":
        for data in self.assets.values():
            if data["type"] == A.JAVASCRIPT:
                self.use_javascript(data["name"], data["asset"], data["priority"])
            elif data["type"] == A.STYLESHEET:
                self.use_stylesheet(data["name"], data["asset"], data["priority"])
            else:
                self.use_asset(data["type"], data["name"], data["asset"], data["priority"])
        return self

    def include_script(self) -> "Script":
        script = self.get_script()
        if script:
            self.add(script)
        init_script = self.get_init_script()
        if init_script:
            self.add(init_script, POSITION_LAST)
        return self

    def use_dependencies(self, dependencies: Union[str, Iterable[str]]) -> "Script":
        return self.include_dependencies(_as_list(dependencies))

    def use_asset(
        self,
        kind: str,
        name: str,
        asset: Optional[Asset] = None,
        priority: int = A.PRIORITY_DEFAULT,
    ) -> "Script":
        (asset or self.get_asset()).use(self.get_context(), kind, name, priority)
        return self

    def use_javascript(self, name: str, asset: Optional[Asset] = None, priority: int = A.PRIORITY_DEFAULT) -> "Script":
        return self.use_asset(A.JAVASCRIPT, name, asset, priority)

    def use_stylesheet(self, name: str, asset: Optional[Asset] = None, priority: int = A.PRIORITY_DEFAULT) -> "Script":
        return self.use_asset(A.STYLESHEET, name, asset, priority)

    # --- contenu -------------------------------------------------------

    def add(self, content: str, position: Optional[str] = None) -> "Script":
        self.include()
        self.get_repository().add(content, position or self.position)
        return self

    def add_first(self, content: str) -> "Script":
        return self.add(content, POSITION_FIRST)

    def add_middle(self, content: str) -> "Script":
        return self.add(content, POSITION_MIDDLE)

    def add_last(self, content: str) -> "Script":
        return self.add(content, POSITION_LAST)
