# apps/scripts/library/Popper.py
from __future__ import annotations

from django.conf import settings

from apps.scripts.core import assets
from apps.scripts.core.script import Script

UMD = "umd"
ESM = "esm"
CJS = "cjs"

VERSIONS = (UMD, ESM, CJS)


class Popper(Script):
    def initialize(self) -> None:
        self.name = "Popper"
        self.version = getattr(settings, "SCRIPTS_POPPER_VERSION", UMD)
        if self.version not in VERSIONS:
            raise ValueError(f"Popper version not supported {self.version}")
        self.asset = assets.Asset("popper.js")
        self.asset.set_path(assets.JAVASCRIPT, self.version)
        self.add_asset(assets.JAVASCRIPT, "popper.min")


def instance() -> Popper:
    return Popper()
