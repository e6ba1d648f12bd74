"""pytest fixtures for suites asserting on rendered templates.

Loaded automatically through the ``pytest11`` entry point once rendercheck is
installed.
"""

from __future__ import annotations

import shutil

import pytest

from rendercheck.config import RendererConfig


@pytest.fixture(scope="session")
def renderer_config() -> RendererConfig:
    """Return renderer settings read from ``RENDERCHECK_*`` variables."""
    return RendererConfig.from_env()


@pytest.fixture(scope="session")
def require_renderer(renderer_config: RendererConfig) -> None:
    """Skip tests if the configured renderer is not installed."""
    if shutil.which(renderer_config.executable) is None:
        pytest.skip(f"{renderer_config.executable} is not installed")
