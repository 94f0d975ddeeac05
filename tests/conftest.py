from __future__ import annotations

from typing import Any, Callable

import pytest

from vjsgen.models import GenerationContext
from vjsgen.registry import VersionRegistry

VERSIONS = {
    "global": "^4.3.2",
    "video.js": "^6 || ^7",
    "conventional-changelog-cli": "^2.0.1",
    "conventional-changelog-videojs": "^3.0.0",
    "doctoc": "^1.3.1",
    "husky": "^1.0.0",
    "jsdoc": "^3.5.5",
    "karma": "^3.0.0",
    "lint-staged": "^7.2.2",
    "not-prerelease": "^1.0.1",
    "npm-merge-driver-install": "^1.0.0",
    "npm-run-all": "^4.1.5",
    "postcss-cli": "^6.0.0",
    "rollup": "^0.66.0",
    "shx": "^0.3.2",
    "sinon": "^6.1.5",
    "videojs-generate-karma-config": "~3.0.0",
    "videojs-generate-postcss-config": "~1.0.0",
    "videojs-generate-rollup-config": "~2.2.0",
    "videojs-generator-verify": "~1.0.4",
    "videojs-languages": "^1.0.0",
    "videojs-standard": "^7.1.0",
}


@pytest.fixture
def registry() -> VersionRegistry:
    """Registry that knows every package the generator can request."""
    return VersionRegistry(VERSIONS)


@pytest.fixture
def make_context() -> Callable[..., GenerationContext]:
    """Build a context for a plugin named "awesome" with optional overrides."""

    def _make(**overrides: Any) -> GenerationContext:
        values: dict[str, Any] = {
            "plugin_name": "awesome",
            "package_name": "videojs-awesome",
            "version": "1.2.3",
            "description": "An awesome plugin",
            "author": "Jane Doe",
            "license_name": "MIT",
        }
        values.update(overrides)
        return GenerationContext(**values)

    return _make
