"""Property-based tests for the host API.

Uses hypothesis to check greet and the save/read round trip for all
representable text, not just hand-picked examples.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from textbridge import greet, read_file, save_file

# Text that UTF-8 can encode: everything except lone surrogates.
ENCODABLE_TEXT = st.text(alphabet=st.characters(blacklist_categories=("Cs",)))


@pytest.mark.os_agnostic
@given(name=st.text())
@settings(max_examples=200)
def test_greet_is_prefix_name_suffix(name: str) -> None:
    """greet(name) is exactly 'Hello, ' + name + '!' for any text."""
    assert greet(name) == "Hello, " + name + "!"


@pytest.mark.os_agnostic
@given(content=ENCODABLE_TEXT)
@settings(max_examples=100, deadline=None)
def test_save_then_read_returns_the_same_text(content: str) -> None:
    """Any encodable text survives a save/read cycle unchanged."""
    with tempfile.TemporaryDirectory() as directory:
        target = Path(directory) / "prop.txt"

        save_file(target, content)

        assert read_file(target) == content


@pytest.mark.os_agnostic
@given(first=ENCODABLE_TEXT, second=ENCODABLE_TEXT)
@settings(max_examples=50, deadline=None)
def test_second_save_fully_replaces_the_first(first: str, second: str) -> None:
    """The last write wins regardless of relative lengths."""
    with tempfile.TemporaryDirectory() as directory:
        target = Path(directory) / "prop.txt"

        save_file(target, first)
        save_file(target, second)

        assert read_file(target) == second
