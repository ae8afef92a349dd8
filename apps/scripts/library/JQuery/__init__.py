# apps/scripts/library/JQuery/__init__.py
from __future__ import annotations

from apps.scripts.core import assets
from apps.scripts.core.script import Script

LOADER_WRAPPER = """
(function($) {
    (function loader(f) {
        if (document.ntloader && !document.ntloader.isScriptLoaded()) {
            setTimeout(function() {
                loader(f);
            }, 100);
        } else {
            f($);
        }
    })(function($) {%s});
})(jQuery);"""


class JQuery(Script):
    """Base des scripts jQuery: dépôt "jquery" enveloppé dans le loader."""

    def __init__(self, name: str = "JQuery", repository: str = "jquery"):
        super().__init__(name, repository)

    def initialize(self) -> None:
        self.add_asset(assets.JAVASCRIPT, "jquery.min", assets.PRIORITY_FIRST)

    def init_repository(self, repository) -> None:
        repository.wrapper = LOADER_WRAPPER
        repository.wrap_size = 2


def instance() -> JQuery:
    return JQuery()
