from __future__ import annotations

from pathlib import Path
from unittest import mock

from django.test import SimpleTestCase

from apps.scripts.core import loader as loader_module
from apps.scripts.core.loader import ScriptLoader
from apps.scripts.errors import ResolutionError
from apps.scripts.tests._support import OVERRIDE, UNITS


class ScriptLoaderTests(SimpleTestCase):
    def setUp(self) -> None:
        loader_module.clear_cache()

    def tearDown(self) -> None:
        loader_module.clear_cache()

    def test_direct_file_match(self) -> None:
        self.assertEqual(ScriptLoader([UNITS]).find("A"), (UNITS / "A.py").resolve())

    def test_index_file_match(self) -> None:
        self.assertEqual(ScriptLoader([UNITS]).find("Widget"), (UNITS / "Widget" / "__init__.py").resolve())

    def test_slashed_and_dotted_names(self) -> None:
        loader = ScriptLoader([UNITS])
        expected = (UNITS / "Cycle" / "Left.py").resolve()
        self.assertEqual(loader.find("Cycle/Left"), expected)
        self.assertEqual(loader.find("Cycle.Left"), expected)

    def test_first_directory_wins(self) -> None:
        self.assertEqual(ScriptLoader([OVERRIDE, UNITS]).instance("A").get_script(), "override();")
        self.assertEqual(ScriptLoader([UNITS, OVERRIDE]).instance("A").get_script(), "x();")

    def test_add_dir_deduplicates(self) -> None:
        loader = ScriptLoader([UNITS])
        loader.add_dir(UNITS).add_dir(str(UNITS))
        self.assertEqual(loader.dirs, [UNITS])

    def test_missing_script_raises(self) -> None:
        loader = ScriptLoader([UNITS])
        with self.assertRaises(ResolutionError) as ctx:
            loader.find("Missing/Thing")
        self.assertEqual(ctx.exception.name, "Missing/Thing")
        self.assertIn(str(UNITS), ctx.exception.dirs)
        self.assertFalse(loader.exists("Missing/Thing"))
        self.assertTrue(loader.exists("A"))

    def test_module_without_factory_raises(self) -> None:
        with self.assertRaises(ResolutionError):
            ScriptLoader([UNITS]).instance("NoFactory")

    def test_resolution_is_cached_across_loaders(self) -> None:
        ScriptLoader([UNITS]).find("A")
        with mock.patch.object(Path, "is_file", side_effect=AssertionError("filesystem hit")):
            self.assertEqual(ScriptLoader([UNITS]).find("A"), (UNITS / "A.py").resolve())

    def test_module_loaded_once_and_instances_are_fresh(self) -> None:
        loader = ScriptLoader([UNITS])
        self.assertIs(loader.load("A"), loader.load("A"))
        self.assertIsNot(loader.instance("A"), loader.instance("A"))
