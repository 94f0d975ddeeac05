"""Tests for the baseline package.json fields."""

from __future__ import annotations

import pytest

from vjsgen.package_json.baseline import compose, scriptify
from vjsgen.package_json.constants import BASELINE_DEV_DEPENDENCIES
from vjsgen.registry import UnresolvedDependencyError, VersionRegistry


def test_scriptify_replaces_every_placeholder() -> None:
    assert scriptify("dist/%s.js dist/%s.min.js", "awesome") == "dist/awesome.js dist/awesome.min.js"


def test_scriptify_joins_list_commands() -> None:
    assert scriptify(["postcss", "-o", "dist/%s.css"], "awesome") == "postcss -o dist/awesome.css"


def test_compose_fills_identity_and_entry_points(registry, make_context) -> None:
    manifest = compose(make_context(), registry, generator_version="9.9.9")

    assert manifest["name"] == "videojs-awesome"
    assert manifest["version"] == "1.2.3"
    assert manifest["description"] == "An awesome plugin"
    assert manifest["author"] == "Jane Doe"
    assert manifest["license"] == "MIT"
    assert manifest["main"] == "dist/awesome.cjs.js"
    assert manifest["module"] == "dist/awesome.es.js"
    assert manifest["generator-videojs-plugin"] == {"version": "9.9.9"}
    assert manifest["engines"] == {"node": ">=8", "npm": ">=5"}
    assert manifest["browserslist"] == ["defaults", "ie 11"]
    assert manifest["vjsstandard"] == {"ignore": ["dist", "docs", "test/dist"]}
    assert manifest["keywords"] == ["videojs", "videojs-plugin"]


def test_compose_resolves_dependencies_through_registry(registry, make_context) -> None:
    manifest = compose(make_context(), registry, generator_version="1.0.0")

    assert manifest["dependencies"] == {"global": "^4.3.2", "video.js": "^6 || ^7"}
    assert set(manifest["devDependencies"]) == set(BASELINE_DEV_DEPENDENCIES)
    assert manifest["devDependencies"]["karma"] == registry.resolve("karma")


def test_compose_includes_hooks_and_lint_staged(registry, make_context) -> None:
    manifest = compose(make_context(), registry, generator_version="1.0.0")

    assert manifest["husky"] == {"hooks": {"pre-commit": "lint-staged", "pre-push": "npm run test"}}
    assert manifest["lint-staged"]["*.js"] == ["vjsstandard --fix", "git add"]


def test_compose_omits_unset_identity_fields(registry, make_context) -> None:
    manifest = compose(make_context(author=None, license_name=None), registry, generator_version="1.0.0")

    assert "author" not in manifest
    assert "license" not in manifest


def test_compose_builds_fresh_documents(registry, make_context) -> None:
    first = compose(make_context(), registry, generator_version="1.0.0")
    first["scripts"]["build"] = "changed"
    first["files"].append("extra/")
    first["husky"]["hooks"].clear()

    second = compose(make_context(), registry, generator_version="1.0.0")

    assert second["scripts"]["build"] == "npm-run-all -p build:*"
    assert "extra/" not in second["files"]
    assert second["husky"]["hooks"]


def test_compose_fails_on_unknown_dependency(make_context) -> None:
    registry = VersionRegistry({"global": "^4.3.2"})

    with pytest.raises(UnresolvedDependencyError) as excinfo:
        compose(make_context(), registry, generator_version="1.0.0")

    assert excinfo.value.package_name == "video.js"
