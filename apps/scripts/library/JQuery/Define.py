# apps/scripts/library/JQuery/Define.py
from __future__ import annotations

from apps.scripts.core.repository import POSITION_FIRST
from apps.scripts.library.JQuery import JQuery


class Define(JQuery):
    """Helper $.define / $.namespace, rendu avant tout script qui l'utilise."""

    def initialize(self) -> None:
        self.name = "JQuery/Define"
        self.position = POSITION_FIRST
        self.add_dependencies(["JQuery"])

    def get_script(self) -> str:
        return """
if (!$.define) {
    $.namespace = {
        create: function(ns) {
            var o = $;
            var p = ns.split('.');
            for (var i = 0; i < p.length; i++) {
                o[p[i]] = o[p[i]] || {};
                o = o[p[i]];
            }
            return o;
        },
        has: function(ns) {
            var o = $;
            var p = ns.split('.');
            for (var i = 0; i < p.length; i++) {
                if (!o[p[i]]) {
                    return false;
                }
                o = o[p[i]];
            }
            return true;
        },
        define: function(ns, o, e) {
            if (!e && $.namespace.has(ns)) return;
            $.extend($.namespace.create(ns), o);
        }
    }
    $.define = $.namespace.define;
}
"""


def instance() -> Define:
    return Define()
