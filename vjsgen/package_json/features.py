"""Optional feature blocks layered onto a reconciled package.json."""

from __future__ import annotations

import copy
from typing import Any, Dict, Mapping

from ..logging import get_logger
from ..models import GenerationContext, Manifest
from ..registry import VersionRegistry
from .baseline import scriptify
from .constants import FEATURES, HOOK_DEV_DEPENDENCIES, Feature

logger = get_logger("package_json.features")


def apply_features(
    manifest: Mapping[str, Any],
    context: GenerationContext,
    registry: VersionRegistry,
) -> Manifest:
    """Return a copy of ``manifest`` with every optional feature added or stripped.

    Each feature only touches its own scripts, devDependencies and tool
    blocks, so the order in which they are applied does not matter.
    """
    result: Manifest = copy.deepcopy(dict(manifest))
    result["scripts"] = _as_dict(result.get("scripts"))
    result["devDependencies"] = _as_dict(result.get("devDependencies"))

    for feature in FEATURES:
        if getattr(context, feature.flag):
            _enable(result, feature, context, registry)
        else:
            _disable(result, feature)

    _apply_hooks(result, context)
    return result


def _enable(
    manifest: Manifest,
    feature: Feature,
    context: GenerationContext,
    registry: VersionRegistry,
) -> None:
    dev_dependencies = registry.resolve_many(feature.dev_dependencies)
    manifest["scripts"].update(
        {name: scriptify(command, context.plugin_name) for name, command in feature.scripts.items()}
    )
    manifest["devDependencies"].update(dev_dependencies)
    logger.debug("Enabled %s feature", feature.flag)


def _disable(manifest: Manifest, feature: Feature) -> None:
    for name in feature.scripts:
        manifest["scripts"].pop(name, None)


def _apply_hooks(manifest: Manifest, context: GenerationContext) -> None:
    scripts = manifest["scripts"]
    husky = manifest.get("husky")
    hooks = husky.get("hooks") if isinstance(husky, dict) else None
    if not isinstance(hooks, dict):
        hooks = {}

    # Hooks that were installed before but are now disabled are removed entirely.
    if not context.precommit:
        scripts.pop("precommit", None)
        hooks.pop("pre-commit", None)
        manifest.pop("lint-staged", None)

    if not context.prepush:
        scripts.pop("prepush", None)
        hooks.pop("pre-push", None)

    if not context.hooks_enabled:
        dependencies = manifest.get("dependencies")
        for name in HOOK_DEV_DEPENDENCIES:
            manifest["devDependencies"].pop(name, None)
            scripts.pop(name, None)
            if isinstance(dependencies, dict):
                dependencies.pop(name, None)
        manifest.pop("husky", None)
        logger.debug("No git hooks enabled; dropped %s", ", ".join(HOOK_DEV_DEPENDENCIES))


def _as_dict(value: Any) -> Dict[str, Any]:
    return dict(value) if isinstance(value, Mapping) else {}


__all__ = ["apply_features"]
