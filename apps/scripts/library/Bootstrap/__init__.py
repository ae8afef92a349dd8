# apps/scripts/library/Bootstrap/__init__.py
from __future__ import annotations

from apps.scripts.core import assets
from apps.scripts.library.JQuery import JQuery


class Bootstrap(JQuery):
    def initialize(self) -> None:
        self.name = "Bootstrap"
        self.add_dependencies(["JQuery", "Popper"])
        self.asset = assets.Asset("bootstrap")
        self.asset.set_path(assets.JAVASCRIPT, "js")
        self.asset.set_path(assets.STYLESHEET, "css")
        self.add_asset(assets.JAVASCRIPT, "bootstrap.min")
        self.add_asset(assets.STYLESHEET, "bootstrap.min")


def instance() -> Bootstrap:
    return Bootstrap()
