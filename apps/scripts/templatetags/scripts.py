# apps/scripts/templatetags/scripts.py
from __future__ import annotations

from django import template
from django.utils.html import format_html, format_html_join
from django.utils.safestring import mark_safe

from apps.scripts.config.loader import build_context
from apps.scripts.core import assets

register = template.Library()


@register.simple_tag
def scripts_build(*names):
    """
    {% scripts_build "JQuery/Define" "SemanticUI" as build %}
    Construit un BuildContext neuf: défauts, scripts demandés, assets globaux.
    """
    context = build_context()
    context.include_defaults()
    context.include(*[str(n) for n in names if n])
    context.include_assets()
    return context


@register.filter(name="script_assets")
def script_assets(build, kind):
    if build is None:
        return []
    return build.get_assets(str(kind))


@register.simple_tag
def script_asset_tags(build, kind=None):
    """Balises <link>/<script src> pour les assets CSS puis JS."""
    if build is None:
        return ""
    kinds = [kind] if kind else [assets.STYLESHEET, assets.JAVASCRIPT]
    parts = []
    for k in kinds:
        urls = build.get_assets(k)
        if k == assets.STYLESHEET:
            parts.append(format_html_join("\n", '<link rel="stylesheet" href="{}">', ((u,) for u in urls)))
        elif k == assets.JAVASCRIPT:
            parts.append(format_html_join("\n", '<script src="{}"></script>', ((u,) for u in urls)))
    return mark_safe("\n".join(p for p in parts if p))


@register.simple_tag
def script_inline(build):
    """Contenu du bundle (émis une seule fois par BuildContext)."""
    if build is None:
        return ""
    content = build.get_content()
    if not content:
        return ""
    return format_html("<script>{}</script>", mark_safe(content))
