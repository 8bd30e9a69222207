"""Shared pytest fixtures."""

import json
import logging

import pytest
import structlog
import yaml

from parley.i18n import TranslationRegistry
from parley.i18n.locales import ENGLISH
from tests.factories.messages import make_message_tree, make_registry


@pytest.fixture(autouse=True, scope="session")
def silence_logging():
    """Drop parley log output below CRITICAL for the whole test run."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def registry():
    """Empty English-default registry."""
    return TranslationRegistry(ENGLISH)


@pytest.fixture
def populated_registry():
    """Registry with English and French translations."""
    return make_registry()


@pytest.fixture
def message_tree():
    """Nested document tree with every message kind."""
    return make_message_tree()


@pytest.fixture
def write_json(tmp_path):
    """Write a tree as JSON under tmp_path and return the file path."""

    def _write(name, tree):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(tree), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_yaml(tmp_path):
    """Write a tree as YAML under tmp_path and return the file path."""

    def _write(name, tree):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(tree, f, allow_unicode=True)
        return path

    return _write
