"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from paramstyle.model.params import Sets
from tests.sample_targets import Layer, make_sets


@pytest.fixture
def sample_sets() -> Sets:
    return make_sets()


@pytest.fixture
def hidden_layer() -> Layer:
    return Layer(name="Hidden1", style_class="Hidden Fast")
