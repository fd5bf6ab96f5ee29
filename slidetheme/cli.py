"""CLI entry point for slidetheme."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Optional, Tuple

from .config import load_config
from .errors import ThemeLoadError, ThemeValidationFailed
from .models.config import Config
from .models.resolved import ResolvedTheme
from .pipeline import resolve_theme
from .registry.builtin import builtin_names


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config file (default: built-in defaults)",
    )
    parser.add_argument(
        "--theme",
        type=str,
        default=None,
        help="Built-in theme name or theme file path (default: from config)",
    )
    parser.add_argument(
        "--override",
        action="append",
        default=None,
        help="Theme reference applied on top of --theme; may be repeated",
    )


def _settings(args: argparse.Namespace) -> Tuple[Config, str, List[str]]:
    config = load_config(Path(args.config) if args.config else None)
    theme = args.theme or config.theme
    overrides = list(args.override) if args.override else list(config.overrides)
    return config, theme, overrides


def _resolve(args: argparse.Namespace) -> Optional[ResolvedTheme]:
    config, theme, overrides = _settings(args)
    log_path = Path(config.log_path) if config.log_path else None
    try:
        return resolve_theme(theme, overrides, log_path=log_path)
    except ThemeLoadError as exc:
        print(f"ERROR: {exc}")
    except ThemeValidationFailed as exc:
        for issue in exc.issues:
            print(f"ERROR: {issue}")
    return None


def cmd_list(args: argparse.Namespace) -> int:
    for name in builtin_names():
        print(name)
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    resolved = _resolve(args)
    if resolved is None:
        return 1
    print("Theme validation passed.")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Print the resolved theme as JSON."""
    resolved = _resolve(args)
    if resolved is None:
        return 1
    print(json.dumps(resolved.to_dict(), indent=2, sort_keys=True, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="slidetheme - presentation theme resolver")
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="List built-in theme names")
    list_parser.set_defaults(func=cmd_list)

    validate_parser = subparsers.add_parser(
        "validate", help="Resolve a theme and report every problem found"
    )
    _add_common_args(validate_parser)
    validate_parser.set_defaults(func=cmd_validate)

    show_parser = subparsers.add_parser("show", help="Print the resolved theme as JSON")
    _add_common_args(show_parser)
    show_parser.set_defaults(func=cmd_show)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
