"""Reads, regenerates and writes package.json for a plugin project."""

from __future__ import annotations

import difflib
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from . import __version__
from .config import VjsGenConfig, build_context, load_config, load_registry
from .logging import get_logger
from .models import Manifest
from .package_json import package_json
from .registry import VersionRegistry

PACKAGE_JSON = "package.json"


class ManifestReadError(RuntimeError):
    """Raised when an existing package.json is not a JSON object."""


@dataclass
class UpdateOutcome:
    """Result of a package.json update operation."""

    path: Path
    diff: str
    dry_run: bool


class Orchestrator:
    """Connects configuration, the filesystem and the package.json pipeline."""

    def __init__(
        self,
        registry: VersionRegistry | None = None,
        *,
        generator_version: str = __version__,
    ) -> None:
        self._registry = registry
        self.generator_version = generator_version
        self.logger = get_logger("orchestrator")

    def run_update(
        self,
        path: str,
        overrides: Optional[Mapping[str, Any]] = None,
        *,
        dry_run: bool = False,
    ) -> UpdateOutcome | None:
        """Regenerate package.json in ``path``; returns None when nothing changed."""
        project_path = Path(path).expanduser().resolve()
        if not project_path.is_dir():
            raise FileNotFoundError(f"Project directory not found: {project_path}")
        manifest_path = project_path / PACKAGE_JSON
        self.logger.info("Starting update run for %s", project_path)

        config = load_config(project_path)
        original = manifest_path.read_text(encoding="utf-8") if manifest_path.exists() else ""
        current = self._parse_manifest(original, manifest_path)

        options: Dict[str, Any] = {"version": current.get("version") or "1.0.0"}
        options.update(overrides or {})
        context = build_context(config, options)
        self.logger.debug("Generating %s with context %s", PACKAGE_JSON, context)

        result = package_json(
            current,
            context,
            self._resolve_registry(config),
            generator_version=self.generator_version,
        )
        updated = self.render(result)
        if updated == original:
            self.logger.info("%s already up to date", PACKAGE_JSON)
            return None

        diff = self._render_diff(original, updated)
        if dry_run:
            self.logger.info("Dry run: %s left unchanged", manifest_path)
        else:
            manifest_path.write_text(updated, encoding="utf-8")
            self.logger.info("Wrote %s", manifest_path)
        return UpdateOutcome(path=manifest_path, diff=diff, dry_run=dry_run)

    def generate(self, current: Optional[Mapping[str, Any]], options: Mapping[str, Any]) -> Manifest:
        """Run the pipeline on an in-memory document without reading configuration."""
        config = VjsGenConfig(root=Path.cwd())
        context = build_context(config, options)
        return package_json(
            current,
            context,
            self._resolve_registry(None),
            generator_version=self.generator_version,
        )

    @staticmethod
    def render(manifest: Mapping[str, Any]) -> str:
        return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"

    def _resolve_registry(self, config: VjsGenConfig | None) -> VersionRegistry:
        if self._registry is not None:
            return self._registry
        registry = load_registry(config)
        self.logger.debug("Loaded version registry with %d packages", len(registry))
        return registry

    @staticmethod
    def _parse_manifest(text: str, path: Path) -> Manifest:
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ManifestReadError(f"Failed to parse {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ManifestReadError(f"{path} must contain a JSON object")
        return data

    @staticmethod
    def _render_diff(original: str, updated: str) -> str:
        diff = difflib.unified_diff(
            original.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{PACKAGE_JSON} (original)",
            tofile=f"{PACKAGE_JSON} (updated)",
        )
        return "".join(diff)


__all__ = ["ManifestReadError", "Orchestrator", "UpdateOutcome"]
