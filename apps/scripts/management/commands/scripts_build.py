"""Build a script bundle and print its content and asset URLs."""
from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from apps.scripts.config.loader import build_context
from apps.scripts.core.assets import KINDS
from apps.scripts.errors import ScriptError


class Command(BaseCommand):
    help = "Include the given scripts (plus SCRIPTS_DEFAULTS) and print the bundle."

    def add_arguments(self, parser):
        parser.add_argument("names", nargs="*", help="Script names, e.g. JQuery/Define SemanticUI")
        parser.add_argument("--no-defaults", action="store_true", help="Skip SCRIPTS_DEFAULTS.")
        parser.add_argument("--assets", choices=KINDS, action="append", default=[],
                            help="Print asset URLs of this kind instead of the bundle (repeatable).")

    def handle(self, *args, **options) -> None:
        context = build_context()
        try:
            if not options["no_defaults"]:
                context.include_defaults()
            context.include(*options["names"])
            context.include_assets()
        except ScriptError as e:
            raise CommandError(str(e)) from e

        kinds = options["assets"]
        if kinds:
            for kind in kinds:
                for url in context.get_assets(kind):
                    self.stdout.write(f"{kind}\t{url}")
            return

        content = context.get_content()
        if content:
            self.stdout.write(content)
