"""CLI entrypoints for vjsgen commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from .config import ConfigError
from .logging import configure_logging
from .orchestrator import ManifestReadError, Orchestrator
from .registry import UnresolvedDependencyError

_FEATURE_FLAGS: dict[str, str] = {
    "docs": "Include documentation tooling (jsdoc, doctoc).",
    "css": "Include the postcss stylesheet pipeline.",
    "lang": "Include localization tooling.",
    "precommit": "Lint staged files in a git pre-commit hook.",
    "prepush": "Run tests in a git pre-push hook.",
}

_IDENTITY_OPTIONS: dict[str, tuple[str, str]] = {
    "--name": ("pluginName", "Plugin name used in entry points and build scripts."),
    "--package-name": ("packageName", "npm package name (defaults to videojs-<name>)."),
    "--description": ("description", "Package description."),
    "--author": ("author", "Package author."),
    "--license": ("licenseName", "License identifier."),
    "--pkg-version": ("version", "Package version (defaults to the current version)."),
}


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vjsgen",
        description="Generate and maintain package.json for video.js plugin projects.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only report warnings and errors.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    update_parser = subparsers.add_parser(
        "update",
        help="Regenerate package.json, keeping hand-edited scripts and dependencies.",
    )
    _add_verbose_option(update_parser, suppress_default=True)
    update_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    update_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview package.json changes without writing them.",
    )
    for flag, (dest, help_text) in _IDENTITY_OPTIONS.items():
        update_parser.add_argument(flag, dest=dest, default=None, help=help_text)
    for name, help_text in _FEATURE_FLAGS.items():
        update_parser.add_argument(
            f"--{name}",
            dest=name,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=help_text,
        )

    return parser


def _collect_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    names = [dest for dest, _ in _IDENTITY_OPTIONS.values()] + list(_FEATURE_FLAGS)
    overrides = {name: getattr(args, name, None) for name in names}
    return {name: value for name, value in overrides.items() if value is not None}


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for vjsgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        quiet=bool(args.quiet),
        log_file=args.log_file,
    )

    orchestrator = Orchestrator()

    if args.command == "update":
        dry_run = bool(getattr(args, "dry_run", False))
        try:
            result = orchestrator.run_update(
                args.path,
                _collect_overrides(args),
                dry_run=dry_run,
            )
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except UnresolvedDependencyError as exc:
            parser.exit(1, f"vjsgen update failed: {exc}\nThe generator's dependency metadata is out of sync.\n")
        except (ConfigError, ManifestReadError) as exc:
            parser.exit(1, f"vjsgen update failed: {exc}\n")
        if result is None:
            message = "package.json already up to date"
            if dry_run:
                message += " (dry-run)"
            print(message)
        elif dry_run:
            print("package.json changes (dry-run):")
            print(result.diff or "(no diff)")
        else:
            print(f"package.json updated at {_relativize(result.path)}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
