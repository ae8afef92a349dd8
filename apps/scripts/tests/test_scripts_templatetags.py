from __future__ import annotations

from django.template import Context, Template
from django.test import SimpleTestCase, override_settings

from apps.scripts.templatetags.scripts import script_asset_tags, script_assets, script_inline
from apps.scripts.tests._support import UNITS


@override_settings(SCRIPTS_DIRS=[str(UNITS)], SCRIPTS_DEFAULTS=[])
class ScriptsTemplateTagsTests(SimpleTestCase):
    def _render(self, body: str) -> str:
        return Template("{% load scripts %}" + body).render(Context())

    def test_inline_bundle(self) -> None:
        html = self._render("{% scripts_build 'B' as build %}{% script_inline build %}")
        self.assertEqual(html, "<script>y();\nx();</script>")

    def test_inline_bundle_emitted_once(self) -> None:
        html = self._render(
            "{% scripts_build 'B' as build %}{% script_inline build %}|{% script_inline build %}"
        )
        self.assertEqual(html, "<script>y();\nx();</script>|")

    def test_asset_tags(self) -> None:
        html = self._render("{% scripts_build 'Widget' as build %}{% script_asset_tags build %}")
        self.assertEqual(
            html,
            '<link rel="stylesheet" href="/js/widget/widget.css">\n'
            '<script src="/js/jquery/jquery.min.js"></script>\n'
            '<script src="/js/widget/widget.js"></script>',
        )

    def test_assets_filter(self) -> None:
        html = self._render(
            "{% scripts_build 'Widget' as build %}"
            "{% for url in build|script_assets:'js' %}{{ url }};{% endfor %}"
        )
        self.assertEqual(html, "/js/jquery/jquery.min.js;/js/widget/widget.js;")

    @override_settings(SCRIPTS_DEFAULTS=["A"], SCRIPTS_DEFAULT_ASSETS=[("js", "app")])
    def test_defaults_and_global_assets(self) -> None:
        html = self._render(
            "{% scripts_build as build %}{% script_asset_tags build 'js' %}{% script_inline build %}"
        )
        self.assertEqual(html, '<script src="/js/app.js"></script><script>x();</script>')

    def test_none_build(self) -> None:
        self.assertEqual(script_assets(None, "js"), [])
        self.assertEqual(script_asset_tags(None), "")
        self.assertEqual(script_inline(None), "")
