"""Tests for vjsgen.models."""

from __future__ import annotations

import dataclasses

import pytest

from vjsgen.models import GenerationContext


def test_from_options_accepts_generator_option_names() -> None:
    context = GenerationContext.from_options(
        {
            "pluginName": "awesome",
            "packageName": "@scope/videojs-awesome",
            "version": "2.0.0",
            "description": "desc",
            "author": "Jane Doe",
            "licenseName": "Apache-2.0",
            "docs": True,
            "prepush": True,
            "unknown": "ignored",
        }
    )

    assert context.plugin_name == "awesome"
    assert context.package_name == "@scope/videojs-awesome"
    assert context.license_name == "Apache-2.0"
    assert context.docs is True
    assert context.css is False
    assert context.hooks_enabled is True


def test_from_options_derives_package_name() -> None:
    context = GenerationContext.from_options({"plugin_name": "awesome"})
    assert context.package_name == "videojs-awesome"
    assert context.hooks_enabled is False


def test_context_is_immutable() -> None:
    context = GenerationContext(plugin_name="awesome", package_name="videojs-awesome")
    with pytest.raises(dataclasses.FrozenInstanceError):
        context.docs = True  # type: ignore[misc]


def test_unset_description_defaults_to_none() -> None:
    context = GenerationContext(plugin_name="awesome", package_name="videojs-awesome")
    assert context.description is None
