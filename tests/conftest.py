"""Shared fixtures."""

import os

import pytest

from slitwave.pipeline.data import SimulationConfig


@pytest.fixture
def small_config():
    """A tiny screen that renders quickly."""
    return SimulationConfig(width=8, height=64, slit_offset=6, distance=30.0, num_frames=6)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep SLITWAVE_* variables and any local .env out of the tests."""
    for key in list(os.environ):
        if key.startswith("SLITWAVE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
