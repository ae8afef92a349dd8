# apps/scripts/library/SemanticUI/__init__.py
from __future__ import annotations

from apps.scripts.core import assets
from apps.scripts.library.JQuery import JQuery


class SemanticUI(JQuery):
    def initialize(self) -> None:
        self.name = "SemanticUI"
        self.dependencies = ["JQuery"]
        self.asset = assets.Asset("semantic-ui")
        self.add_asset(assets.JAVASCRIPT, "semantic.min")
        self.add_asset(assets.STYLESHEET, "semantic.min")


def instance() -> SemanticUI:
    return SemanticUI()
