from apps.scripts.core import assets
from apps.scripts.library.JQuery import JQuery


class Widget(JQuery):
    def initialize(self):
        self.name = "Widget"
        self.add_dependencies(["JQuery/Define"])
        self.asset = assets.Asset("widget")
        self.add_asset(assets.JAVASCRIPT, "widget")
        self.add_asset(assets.JAVASCRIPT, "widget")
        self.add_asset(assets.STYLESHEET, "widget.css")

    def get_script(self):
        return "$.define('widget', {});"

    def get_init_script(self):
        return "$.widget.init();"


def instance():
    return Widget()
