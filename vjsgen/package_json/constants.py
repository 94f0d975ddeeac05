"""Fixed field values written into every generated package.json."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

GENERATOR_FIELD = "generator-videojs-plugin"

BASELINE_KEYWORDS: tuple[str, ...] = ("videojs", "videojs-plugin")

BASELINE_DEPENDENCIES: tuple[str, ...] = ("global", "video.js")

BASELINE_DEV_DEPENDENCIES: tuple[str, ...] = (
    "conventional-changelog-cli",
    "conventional-changelog-videojs",
    "karma",
    "npm-run-all",
    "rollup",
    "shx",
    "videojs-generate-rollup-config",
    "videojs-generate-karma-config",
    "not-prerelease",
    "sinon",
    "videojs-standard",
    "npm-merge-driver-install",
    "husky",
    "lint-staged",
    "videojs-generator-verify",
)

HOOK_DEV_DEPENDENCIES: tuple[str, ...] = ("husky", "lint-staged")

# Values may contain "%s", replaced by the plugin name.
BASELINE_SCRIPTS: Dict[str, str] = {
    "prebuild": "npm run clean",
    "build": "npm-run-all -p build:*",
    "build:js": "rollup -c scripts/rollup.config.js",
    "clean": "shx rm -rf ./dist ./test/dist",
    "postclean": "shx mkdir -p ./dist ./test/dist",
    "lint": "vjsstandard",
    "prepublishOnly": "npm-run-all build test:verify",
    "start": "npm-run-all -p server watch",
    "server": "karma start scripts/karma.conf.js --singleRun=false --auto-watch",
    "pretest": "npm-run-all lint build",
    "test": "npm-run-all test:*",
    "test:verify": "vjsverify --verbose",
    "test:unit": "karma start scripts/karma.conf.js",
    "posttest": "shx cat test/dist/coverage/text.txt",
    "preversion": "npm test",
    "version": "is-prerelease || npm run update-changelog && git add CHANGELOG.md",
    "update-changelog": "conventional-changelog -p videojs -i CHANGELOG.md -s",
    "watch": "npm-run-all -p watch:*",
    "watch:js": "npm run build:js -- -w",
}

ENTRY_POINTS: Dict[str, str] = {
    "main": "dist/%s.cjs.js",
    "module": "dist/%s.es.js",
}

ENGINES: Dict[str, str] = {"node": ">=8", "npm": ">=5"}

BROWSERSLIST: tuple[str, ...] = ("defaults", "ie 11")

LINT_IGNORE: tuple[str, ...] = ("dist", "docs", "test/dist")

FILES: tuple[str, ...] = (
    "CONTRIBUTING.md",
    "dist/",
    "docs/",
    "index.html",
    "scripts/",
    "src/",
    "test/",
)

HOOKS: Dict[str, str] = {
    "pre-commit": "lint-staged",
    "pre-push": "npm run test",
}

LINT_STAGED: Dict[str, tuple[str, ...]] = {
    "*.js": ("vjsstandard --fix", "git add"),
    "README.md": ("npm run docs:toc", "git add"),
}


@dataclass(frozen=True)
class Feature:
    """Scripts and devDependencies contributed by one optional feature."""

    flag: str
    scripts: Dict[str, str]
    dev_dependencies: tuple[str, ...]


FEATURES: tuple[Feature, ...] = (
    Feature(
        "docs",
        {
            "docs": "npm-run-all docs:*",
            "docs:api": "jsdoc src -g plugins/markdown -r -d docs/api",
            "docs:toc": "doctoc README.md",
        },
        ("doctoc", "jsdoc"),
    ),
    Feature(
        "css",
        {
            "build:css": "postcss -o dist/%s.css --config scripts/postcss.config.js src/plugin.css",
            "watch:css": "npm run build:css -- -w",
        },
        ("postcss-cli", "videojs-generate-postcss-config"),
    ),
    Feature(
        "lang",
        {"build:lang": "vjslang --dir dist/lang"},
        ("videojs-languages",),
    ),
)


def fresh(value: Any) -> Any:
    """Return a mutable copy of a constant so callers never share state."""
    if isinstance(value, dict):
        return {key: fresh(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [fresh(item) for item in value]
    return value


__all__ = [
    "BASELINE_DEPENDENCIES",
    "BASELINE_DEV_DEPENDENCIES",
    "BASELINE_KEYWORDS",
    "BASELINE_SCRIPTS",
    "BROWSERSLIST",
    "ENGINES",
    "ENTRY_POINTS",
    "FEATURES",
    "FILES",
    "GENERATOR_FIELD",
    "HOOKS",
    "HOOK_DEV_DEPENDENCIES",
    "LINT_IGNORE",
    "LINT_STAGED",
    "Feature",
    "fresh",
]
