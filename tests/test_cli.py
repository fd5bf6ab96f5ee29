"""CLI tests."""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from slidetheme.cli import build_parser, main
from slidetheme.registry.builtin import builtin_names


def _run(argv):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        code = main(argv)
    return code, buffer.getvalue()


class TestCLI(unittest.TestCase):
    def test_parser_structure(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["list"])
        self.assertEqual(args.command, "list")

        args = parser.parse_args(["validate", "--theme", "light", "--override", "a.yaml", "--override", "b.yaml"])
        self.assertEqual(args.command, "validate")
        self.assertEqual(args.override, ["a.yaml", "b.yaml"])

        args = parser.parse_args(["show"])
        self.assertIsNone(args.theme)

    def test_list(self) -> None:
        code, output = _run(["list"])
        self.assertEqual(code, 0)
        self.assertEqual(output.split(), builtin_names())

    def test_validate_passes(self) -> None:
        code, output = _run(["validate", "--theme", "catppuccin-macchiato"])
        self.assertEqual(code, 0)
        self.assertIn("passed", output)

    def test_validate_reports_every_issue(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            path = Path(temp_dir) / "bad.yaml"
            path.write_text(
                "code:\n  alignment: diagonal\nheadings:\n  h3:\n    colors:\n      foreground: eed49\n",
                encoding="utf-8",
            )
            code, output = _run(["validate", "--theme", str(path)])
        self.assertEqual(code, 1)
        lines = output.strip().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("ERROR: code.alignment: UNKNOWN_ENUM_VALUE"))
        self.assertTrue(lines[1].startswith("ERROR: headings.h3.colors.foreground: INVALID_COLOR"))

    def test_validate_unknown_theme(self) -> None:
        code, output = _run(["validate", "--theme", "nope"])
        self.assertEqual(code, 1)
        self.assertIn("Unknown built-in theme: nope", output)

    def test_show_prints_resolved_json(self) -> None:
        code, output = _run(["show", "--theme", "gruvbox-dark"])
        self.assertEqual(code, 0)
        data = json.loads(output)
        self.assertEqual(data["default"]["colors"]["background"], "282828")
        self.assertEqual(data["default"]["margin"], {"unit": "percent", "value": 8})
        self.assertEqual(data["slide_title"]["colors"]["background"], "282828")

    def test_show_uses_config(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "slidetheme.yaml"
            (Path(temp_dir) / "brand.yaml").write_text("d2:\n  theme: 7\n", encoding="utf-8")
            config_path.write_text(
                "theme: light\noverrides:\n  - brand.yaml\nlog_path: theme.jsonl\n", encoding="utf-8"
            )
            code, output = _run(["show", "--config", str(config_path)])
            self.assertTrue((Path(temp_dir) / "theme.jsonl").exists())
        self.assertEqual(code, 0)
        data = json.loads(output)
        self.assertEqual(data["d2"]["theme"], 7)
        self.assertEqual(data["default"]["colors"]["background"], "f8f9fa")


if __name__ == "__main__":
    unittest.main()
