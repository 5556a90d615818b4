"""Shared test fixtures."""

from __future__ import annotations

import pytest

SAMPLE_INPUT = "foo\nbar\nbaz\nboo\n"


@pytest.fixture
def sample_input() -> str:
    """Four short lines, newline terminated."""
    return SAMPLE_INPUT
