"""CLI parser behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from vjsgen.cli import _build_parser, _collect_overrides, main


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "update"])
    assert args.verbose is True
    assert args.command == "update"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["update", "--verbose"])
    assert args.verbose is True
    assert args.command == "update"


def test_cli_accepts_dry_run_flag() -> None:
    parser = _build_parser()
    args = parser.parse_args(["update", "--dry-run"])
    assert args.dry_run is True


def test_feature_flags_default_to_config() -> None:
    parser = _build_parser()
    args = parser.parse_args(["update", "--docs", "--no-prepush", "--name", "awesome"])

    assert _collect_overrides(args) == {"pluginName": "awesome", "docs": True, "prepush": False}


def test_update_command_writes_package_json(tmp_path: Path, capsys) -> None:
    main(["update", str(tmp_path), "--name", "awesome", "--author", "Jane Doe", "--precommit"])

    written = json.loads((tmp_path / "package.json").read_text(encoding="utf-8"))
    assert written["author"] == "Jane Doe"
    assert written["husky"]["hooks"] == {"pre-commit": "lint-staged"}
    assert "package.json updated" in capsys.readouterr().out


def test_update_command_fails_without_plugin_name(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["update", str(tmp_path)])
    assert excinfo.value.code == 1
