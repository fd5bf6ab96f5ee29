"""Resolution pipeline tests."""

import tempfile
import threading
import unittest
from pathlib import Path

from slidetheme.errors import MalformedTheme, ThemeNotFound, ThemeValidationFailed
from slidetheme.load.loader import ThemeSource
from slidetheme.logging_utils import read_events
from slidetheme.models.resolved import FooterMode
from slidetheme.pipeline import ActiveTheme, resolve_default, resolve_theme
from slidetheme.registry.builtin import builtin_names


class TestResolveTheme(unittest.TestCase):
    def test_every_builtin_resolves(self) -> None:
        for name in builtin_names():
            with self.subTest(name=name):
                resolve_theme(name)

    def test_builtin_overrides_default(self) -> None:
        theme = resolve_theme("catppuccin-macchiato")
        self.assertEqual(theme.headings.h2.colors.foreground.hex, "c6a0f6")
        self.assertEqual(theme.headings.h2.prefix, "▓▓▓")
        self.assertEqual(theme.alert.styles.note.title, "Note")
        self.assertEqual(theme.footer.right, "{current_slide} / {total_slides}")

    def test_resolution_is_deterministic(self) -> None:
        first = resolve_theme("gruvbox-dark")
        second = resolve_theme("gruvbox-dark")
        self.assertIsNot(first, second)
        self.assertEqual(first, second)
        self.assertEqual(first.to_json(), second.to_json())

    def test_overrides_apply_in_order(self) -> None:
        theme = resolve_theme(
            "dark",
            [
                ThemeSource.text("d2:\n  theme: 4\ninline_code:\n  colors:\n    foreground: red\n"),
                ThemeSource.text("inline_code:\n  colors:\n    foreground: blue\n"),
            ],
        )
        self.assertEqual(theme.d2.theme, 4)
        self.assertEqual(theme.inline_code.colors.foreground.name, "blue")

    def test_file_reference(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "talk.yaml"
            path.write_text("slide_title:\n  alignment: left\n", encoding="utf-8")
            theme = resolve_theme(path)
        self.assertEqual(theme.slide_title.alignment.value, "left")

    def test_footer_style_override_keeps_preset_footer_colors(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "progress.yaml"
            path.write_text("footer:\n  style: progress_bar\n", encoding="utf-8")
            theme = resolve_theme("light", [path])
        self.assertIs(theme.footer.style, FooterMode.PROGRESS_BAR)
        self.assertEqual(theme.footer.colors.foreground.hex, "495057")
        self.assertEqual(theme.footer.height, 3)

    def test_load_failure_stops_pipeline(self) -> None:
        with self.assertRaises(ThemeNotFound):
            resolve_theme("dark", ["missing-preset"])

    def test_validation_failure_lists_all_issues(self) -> None:
        source = ThemeSource.text("code:\n  alignment: diagonal\nblock_quote:\n  colors:\n    background: zzzzzz\n")
        with self.assertRaises(ThemeValidationFailed) as ctx:
            resolve_theme(source)
        self.assertEqual(len(ctx.exception.issues), 2)

    def test_resolve_default(self) -> None:
        self.assertEqual(resolve_default(), resolve_theme(ThemeSource.text("")))


class TestPipelineEvents(unittest.TestCase):
    def test_success_events(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            log_path = Path(temp_dir) / "logs" / "theme.jsonl"
            resolve_theme("light", log_path=log_path)
            events = read_events(log_path)
        self.assertEqual(
            [event["event_type"] for event in events],
            ["THEME_LOADED", "THEME_MERGED", "THEME_RESOLVED"],
        )
        self.assertEqual(events[0]["payload"]["sources"], ["builtin:light"])

    def test_validation_rejection_event(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            log_path = Path(temp_dir) / "theme.jsonl"
            with self.assertRaises(ThemeValidationFailed):
                resolve_theme(ThemeSource.text("d2:\n  theme: -1\n"), log_path=log_path)
            events = read_events(log_path)
        self.assertEqual(events[-1]["event_type"], "THEME_REJECTED")
        self.assertEqual(events[-1]["payload"]["stage"], "validate")
        self.assertEqual(events[-1]["payload"]["issues"][0]["path"], "d2.theme")

    def test_load_rejection_event(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            log_path = Path(temp_dir) / "theme.jsonl"
            with self.assertRaises(MalformedTheme):
                resolve_theme(ThemeSource.text("[1, 2"), log_path=log_path)
            events = read_events(log_path)
        self.assertEqual([event["event_type"] for event in events], ["THEME_REJECTED"])
        self.assertEqual(events[0]["payload"]["stage"], "load")


class TestActiveTheme(unittest.TestCase):
    def test_starts_with_default(self) -> None:
        self.assertEqual(ActiveTheme().current, resolve_default())

    def test_reload_swaps_theme(self) -> None:
        active = ActiveTheme()
        resolved = active.reload("terminal-light")
        self.assertIs(active.current, resolved)
        self.assertEqual(active.current.default.colors.background.name, "white")

    def test_failed_reload_keeps_previous_theme(self) -> None:
        active = ActiveTheme()
        previous = active.reload("light")
        with self.assertRaises(ThemeValidationFailed):
            active.reload(ThemeSource.text("slide_title:\n  alignment: diagonal\n"))
        self.assertIs(active.current, previous)

    def test_concurrent_reloads_publish_complete_themes(self) -> None:
        active = ActiveTheme()
        candidates = {name: resolve_theme(name) for name in ("dark", "light", "gruvbox-dark")}
        threads = [
            threading.Thread(target=active.reload, args=(name,))
            for name in list(candidates) * 3
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        self.assertIn(active.current, list(candidates.values()))


if __name__ == "__main__":
    unittest.main()
