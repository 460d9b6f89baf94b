# topmark:header:start
#
#   project      : TextAlchemy
#   file         : test_settings.py
#   file_relpath : tests/config/test_settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the immutable settings model."""

from __future__ import annotations

import dataclasses

import pytest

from textalchemy.config.model import Settings
from textalchemy.constants import DEFAULT_DEPTH, DEFAULT_INDENT, DEFAULT_TITLE
from textalchemy.core.formats import RenderFormat
from textalchemy.core.values import UNBOUNDED


def test_defaults() -> None:
    """Defaults match the documented constants."""
    settings = Settings()
    assert settings.depth == DEFAULT_DEPTH
    assert settings.render_depth == UNBOUNDED
    assert settings.indent == DEFAULT_INDENT
    assert settings.title == DEFAULT_TITLE
    assert settings.render_format is RenderFormat.HTML
    assert not settings.decode_base64


def test_merged_skips_none() -> None:
    """Unset (None) overrides never mask existing values."""
    base = Settings(depth=7)
    merged = base.merged(depth=None, title="T")
    assert merged.depth == 7
    assert merged.title == "T"
    assert base.title == DEFAULT_TITLE


def test_merged_rejects_unknown_fields() -> None:
    """Typos in override names are caught."""
    with pytest.raises(TypeError, match="colour"):
        Settings().merged(colour="red")


def test_settings_are_frozen() -> None:
    """Settings cannot be modified in place."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        Settings().depth = 1  # type: ignore[misc]
