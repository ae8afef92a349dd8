from __future__ import annotations

from django.test import SimpleTestCase

from apps.scripts.core.repository import (
    POSITION_FIRST,
    POSITION_LAST,
    POSITION_MIDDLE,
    Repository,
)


class RepositoryTests(SimpleTestCase):
    def test_buckets_render_first_middle_last(self) -> None:
        repo = Repository("R")
        repo.add("last1();", POSITION_LAST)
        repo.add("mid1();", POSITION_MIDDLE)
        repo.add("first1();", POSITION_FIRST)
        repo.add("last2();")
        repo.add("first2();", POSITION_FIRST)
        self.assertEqual(
            repo.render(),
            "first1();\nfirst2();\nmid1();\nlast1();\nlast2();",
        )

    def test_outer_blank_lines_stripped_inner_kept(self) -> None:
        repo = Repository("R")
        repo.add("\r\n\r\na();\r\n\r\nb();\r\n\r\n")
        self.assertEqual(repo.render(), "a();\n\nb();")

    def test_empty_content_is_ignored(self) -> None:
        repo = Repository("R")
        repo.add("")
        repo.add("\n\n")
        self.assertEqual(repo.render(), "")
        self.assertEqual(repo.scripts, {})

    def test_unknown_position_raises(self) -> None:
        with self.assertRaises(ValueError):
            Repository("R").add("a();", "top")

    def test_eol_is_configurable(self) -> None:
        repo = Repository("R", eol="\r\n")
        repo.add("a();\nb();")
        self.assertEqual(repo.render(), "a();\r\nb();")

    def test_get_content_is_one_shot(self) -> None:
        repo = Repository("R")
        repo.add("a();")
        self.assertEqual(repo.get_content(), "a();")
        self.assertIsNone(repo.get_content())
        repo.clear()
        self.assertFalse(repo.included)
        self.assertEqual(repo.get_content(), "")

    def test_wrapper_indents_body(self) -> None:
        repo = Repository("R")
        repo.wrapper = "\n(function() {%s})();"
        repo.add("if (x) {\n    y();\n}\n\nz();")
        self.assertEqual(
            repo.render(),
            "(function() {\n    if (x) {\n        y();\n    }\n\n    z();\n})();",
        )

    def test_wrapper_depth(self) -> None:
        repo = Repository("R")
        repo.wrapper = "f(function() {%s});"
        repo.wrap_size = 2
        repo.add("a();")
        self.assertEqual(repo.render(), "f(function() {\n        a();\n});")

    def test_wrapper_skipped_for_empty_body_or_missing_placeholder(self) -> None:
        repo = Repository("R")
        repo.wrapper = "(function() {%s})();"
        self.assertEqual(repo.render(), "")
        repo.wrapper = "no placeholder"
        repo.add("a();")
        self.assertEqual(repo.render(), "a();")
