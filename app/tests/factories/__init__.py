"""Test data factories for deterministic test data generation."""

from tests.factories.messages import (
    make_message_tree,
    make_registry,
    make_sound_message,
    make_title_message,
)

__all__ = [
    "make_message_tree",
    "make_registry",
    "make_sound_message",
    "make_title_message",
]
