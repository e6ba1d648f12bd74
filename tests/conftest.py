"""Shared fixtures for unit, integration and feature tests."""

from __future__ import annotations

import os
import stat
import sys
import typing as typ
from pathlib import Path

import pytest

from rendercheck.config import RendererConfig

_FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

DEPLOYMENT_TEMPLATE = """\
apiVersion: apps/v1
kind: Deployment
metadata:
  name: web
  labels:
    app: web
spec:
  replicas: 2
  template:
    spec:
      containers:
      - name: web
        image: $image
        ports:
        - containerPort: 8080
        env:
        - name: LOG_LEVEL
          value: info
      - name: sidecar
        image: envoyproxy/envoy:v1.30
"""


class TemplateWriter(typ.Protocol):
    """Callable protocol for the ``write_template`` fixture."""

    def __call__(self, name: str, content: str) -> str:
        """Write ``content`` to ``name`` and return its path."""
        ...


@pytest.fixture
def fake_renderer(tmp_path: Path) -> Path:
    """Install the fake renderer as an executable script and return its path."""
    if os.name != "posix":
        pytest.skip("the fake renderer relies on a shebang line")

    source = (_FIXTURES_DIR / "fake_renderer.py").read_text(encoding="utf-8")
    script = tmp_path / "bin" / "fake-ytt"
    script.parent.mkdir()
    script.write_text(f"#!{sys.executable}\n{source}", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def fake_config(fake_renderer: Path) -> RendererConfig:
    """Return renderer settings pointing at the fake renderer."""
    return RendererConfig(executable=str(fake_renderer), timeout=30)


@pytest.fixture
def write_template(tmp_path: Path) -> TemplateWriter:
    """Return a helper that writes template files under ``tmp_path``."""
    template_dir = tmp_path / "templates"
    template_dir.mkdir()

    def _write(name: str, content: str) -> str:
        path = template_dir / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def deployment_template(write_template: TemplateWriter) -> str:
    """Write the web Deployment template and return its path."""
    return write_template("deployment.yml", DEPLOYMENT_TEMPLATE)
