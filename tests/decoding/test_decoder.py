# topmark:header:start
#
#   project      : TextAlchemy
#   file         : test_decoder.py
#   file_relpath : tests/decoding/test_decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for canonical Base64 detection and decoding."""

from __future__ import annotations

import pytest

from tests.conftest import b64
from textalchemy.decoding.decoder import decode_if_valid, is_canonical_base64, try_parse_json


@pytest.mark.parametrize(
    "text",
    ["dGVzdA==", "aGk=", "abcd", "test", b64("hello world"), b64('{"a":1}')],
)
def test_canonical_base64_accepted(text: str) -> None:
    """Correctly padded strings that survive a round trip are canonical."""
    assert is_canonical_base64(text)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "abc",
        "not-base64",
        "ab=c",
        "dGVzdA=",
        "YR==",
        "dGVzdA===",
        "dGVz dA==",
    ],
)
def test_non_canonical_base64_rejected(text: str) -> None:
    """Short, unpadded, non-alphabet or non-canonical strings are rejected."""
    assert not is_canonical_base64(text)


def test_decode_to_text() -> None:
    """Canonical Base64 decodes to its UTF-8 text."""
    assert decode_if_valid("dGVzdA==") == "test"
    assert decode_if_valid(b64("héllo")) == "héllo"


def test_undecodable_bytes_fall_back_to_original() -> None:
    """Canonical Base64 that is not UTF-8 is kept as-is."""
    assert decode_if_valid("test") == "test"


def test_non_base64_is_unchanged() -> None:
    """Other strings are returned unchanged."""
    assert decode_if_valid("hello world", recursive_json=True) == "hello world"


def test_recursive_json() -> None:
    """With recursive_json, decoded JSON is parsed."""
    assert decode_if_valid(b64('{"a": [1, 2]}'), recursive_json=True) == {"a": [1, 2]}
    assert decode_if_valid(b64("42"), recursive_json=True) == 42


def test_recursive_json_keeps_plain_text() -> None:
    """Decoded text that is not JSON stays text."""
    assert decode_if_valid(b64("just text"), recursive_json=True) == "just text"


def test_without_recursive_json_json_stays_text() -> None:
    """Without recursive_json, decoded JSON is not parsed."""
    assert decode_if_valid(b64('{"a": 1}')) == '{"a": 1}'


@pytest.mark.parametrize("text", ["NaN", "Infinity", "-Infinity", "{", "nope"])
def test_try_parse_json_rejects_non_json(text: str) -> None:
    """Only strict JSON is accepted."""
    assert try_parse_json(text) == (False, text)


def test_try_parse_json_accepts_json() -> None:
    """Valid JSON parses, including null."""
    assert try_parse_json("null") == (True, None)
    assert try_parse_json("[1]") == (True, [1])


def test_decoding_is_not_idempotent() -> None:
    """Each application peels one Base64 layer; repeated calls keep decoding."""
    doubly_encoded = b64(b64("x"))
    once = decode_if_valid(doubly_encoded)
    assert once == b64("x")
    assert decode_if_valid(once) == "x"
    assert decode_if_valid(once) != once
