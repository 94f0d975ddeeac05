"""Baseline fields shared by every generated package.json."""

from __future__ import annotations

from typing import Sequence, Union

from ..logging import get_logger
from ..models import GenerationContext, Manifest
from ..registry import VersionRegistry
from .constants import (
    BASELINE_DEPENDENCIES,
    BASELINE_DEV_DEPENDENCIES,
    BASELINE_KEYWORDS,
    BASELINE_SCRIPTS,
    BROWSERSLIST,
    ENGINES,
    ENTRY_POINTS,
    FILES,
    GENERATOR_FIELD,
    HOOKS,
    LINT_IGNORE,
    LINT_STAGED,
    fresh,
)

logger = get_logger("package_json.baseline")

PLACEHOLDER = "%s"


def scriptify(command: Union[str, Sequence[str]], plugin_name: str) -> str:
    """Replace every ``%s`` token with the plugin name, joining list commands first."""
    if not isinstance(command, str):
        command = " ".join(command)
    return command.replace(PLACEHOLDER, plugin_name)


def compose(
    context: GenerationContext,
    registry: VersionRegistry,
    *,
    generator_version: str,
) -> Manifest:
    """Build the tool-managed fields for ``context``.

    Dependencies are resolved before anything else so that a registry that is
    out of sync with the generator fails the whole merge.
    """
    dependencies = registry.resolve_many(BASELINE_DEPENDENCIES)
    dev_dependencies = registry.resolve_many(BASELINE_DEV_DEPENDENCIES)
    logger.debug(
        "Resolved %d dependencies and %d devDependencies",
        len(dependencies),
        len(dev_dependencies),
    )

    manifest: Manifest = {
        "name": context.package_name,
        "version": context.version,
        "description": context.description,
    }
    for field_name, template in ENTRY_POINTS.items():
        manifest[field_name] = scriptify(template, context.plugin_name)

    manifest.update(
        {
            GENERATOR_FIELD: {"version": generator_version},
            "browserslist": fresh(BROWSERSLIST),
            "scripts": {
                name: scriptify(command, context.plugin_name)
                for name, command in BASELINE_SCRIPTS.items()
            },
            "engines": fresh(ENGINES),
            "keywords": fresh(BASELINE_KEYWORDS),
            "author": context.author,
            "license": context.license_name,
            "vjsstandard": {"ignore": fresh(LINT_IGNORE)},
            "files": fresh(FILES),
            "husky": {"hooks": fresh(HOOKS)},
            "lint-staged": fresh(LINT_STAGED),
            "dependencies": dependencies,
            "devDependencies": dev_dependencies,
        }
    )
    # Unset identity fields are left to whatever the current document holds.
    return {key: value for key, value in manifest.items() if value is not None}


__all__ = ["PLACEHOLDER", "compose", "scriptify"]
