"""package.json generation pipeline for video.js plugin projects."""

from __future__ import annotations

from typing import Any, Mapping

from .. import __version__
from ..logging import get_logger
from ..models import GenerationContext, Manifest
from ..registry import VersionRegistry
from .baseline import compose, scriptify
from .features import apply_features
from .ordering import alphabetize, alphabetize_scripts, key_order, normalize, script_order
from .reconcile import reconcile

logger = get_logger("package_json")


def package_json(
    current: Mapping[str, Any] | None,
    context: GenerationContext,
    registry: VersionRegistry,
    *,
    generator_version: str = __version__,
) -> Manifest:
    """Create a new package.json document from ``current`` and ``context``.

    ``current`` is never modified. Any package missing from ``registry``
    raises :class:`~vjsgen.registry.UnresolvedDependencyError` before a
    document is produced.
    """
    generated = compose(context, registry, generator_version=generator_version)
    merged = reconcile(current, generated)
    featured = apply_features(merged, context, registry)
    result = normalize(featured)
    logger.debug(
        "Generated package.json for %s with %d scripts",
        context.package_name,
        len(result.get("scripts", {})),
    )
    return result


__all__ = [
    "alphabetize",
    "alphabetize_scripts",
    "apply_features",
    "compose",
    "key_order",
    "normalize",
    "package_json",
    "reconcile",
    "script_order",
    "scriptify",
]
