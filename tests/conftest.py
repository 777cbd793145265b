"""Shared fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from simple_test_engine.registration import RunContext, default_context, new_context


@pytest.fixture(autouse=True)
def _reset_default_context() -> Iterator[None]:
    default_context().reset()
    yield
    default_context().reset()


@pytest.fixture
def context() -> RunContext:
    return new_context()
