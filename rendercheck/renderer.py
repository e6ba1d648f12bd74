"""Invoke the external template renderer and capture what it produced.

The renderer is an opaque executable (``ytt`` by default) run once per call:

    <executable> -f base.yml -f overlay.yml -v key=value ...

Templates are passed in order, one template flag each, followed by one value
flag per data binding. The call blocks until the process exits or the
configured timeout elapses; output is fully buffered before returning.

A process that cannot be started raises ``RenderSpawnError``. A process that
runs and exits non-zero is NOT an error here: the exit status is reported on
the returned ``RenderResult`` and callers decide what it means.

Examples
--------
    result = render(["config/"], {"image": "nginx:1.25"})
    if result.ok:
        print(result.stdout.decode())

"""

from __future__ import annotations

import dataclasses as dc
import subprocess
import typing as typ

from rendercheck.config import RendererConfig
from rendercheck.errors import RenderExitError, RenderSpawnError, RenderTimeoutError
from rendercheck.logging import (
    get_logger,
    log_debug,
    log_error,
    log_exception,
    log_warning,
)

if typ.TYPE_CHECKING:
    from collections import abc as cabc

logger = get_logger(__name__)


@dc.dataclass(frozen=True, slots=True)
class RenderResult:
    """Captured outcome of one renderer invocation.

    Attributes
    ----------
    stdout
        Everything the renderer wrote to standard output.
    stderr
        Everything the renderer wrote to standard error.
    exit_code
        Process exit status; ``0`` signals success.
    args
        Full command line, executable first.

    """

    stdout: bytes
    stderr: bytes
    exit_code: int
    args: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        """Return True when the renderer exited with status 0."""
        return self.exit_code == 0

    @property
    def stderr_text(self) -> str:
        """Return the error output decoded as UTF-8."""
        return self.stderr.decode("utf-8", errors="replace")

    def raise_for_status(self) -> RenderResult:
        """Raise ``RenderExitError`` on a non-zero exit, else return self."""
        if not self.ok:
            raise RenderExitError(
                self.stderr_text, exit_code=self.exit_code, command=self.args
            )
        return self


def build_render_args(
    templates: cabc.Sequence[str],
    data: cabc.Mapping[str, str],
    config: RendererConfig,
) -> list[str]:
    """Build the renderer command line for ``templates`` and ``data``.

    Parameters
    ----------
    templates : Sequence[str]
        Template identifiers, emitted in order.
    data : Mapping[str, str]
        Value bindings, emitted as ``key=value`` in mapping iteration order.
    config : RendererConfig
        Supplies the executable and flag spellings.

    Returns
    -------
    list[str]
        The command line, executable first.

    Raises
    ------
    ValueError
        If ``templates`` is empty.

    """
    if not templates:
        msg = "at least one template is required to render"
        raise ValueError(msg)

    args = [config.executable]
    for template in templates:
        args.extend([config.template_flag, template])
    for key, value in data.items():
        args.extend([config.value_flag, f"{key}={value}"])
    return args


def render(
    templates: cabc.Sequence[str],
    data: cabc.Mapping[str, str] | None = None,
    *,
    config: RendererConfig | None = None,
) -> RenderResult:
    """Run the renderer synchronously and capture its output.

    Parameters
    ----------
    templates : Sequence[str]
        Template identifiers, passed in order. Must not be empty.
    data : Mapping[str, str] | None, optional
        Value bindings. ``None`` binds nothing.
    config : RendererConfig | None, optional
        Renderer settings. Defaults to ``RendererConfig.from_env()``.

    Returns
    -------
    RenderResult
        Buffered stdout/stderr and the exit status, whatever that status is.

    Raises
    ------
    ValueError
        If ``templates`` is empty.
    RenderSpawnError
        If the executable is missing or cannot be started.
    RenderTimeoutError
        If the renderer outlives ``config.timeout``. The process is killed.

    """
    cfg = config or RendererConfig.from_env()
    args = build_render_args(templates, data or {}, cfg)
    log_debug(logger, "Running renderer: %s", " ".join(args))

    try:
        # S603: the command line is built from caller-supplied configuration
        completed = subprocess.run(  # noqa: S603
            args,
            capture_output=True,
            check=False,
            timeout=cfg.timeout,
        )
    except subprocess.TimeoutExpired as exc:
        log_error(
            logger, "Renderer %r timed out after %ss", cfg.executable, exc.timeout
        )
        raise RenderTimeoutError(cfg.executable, exc.timeout) from exc
    except OSError as exc:
        log_exception(logger, f"Renderer {cfg.executable!r} could not be started", exc)
        raise RenderSpawnError(cfg.executable, str(exc)) from exc

    result = RenderResult(
        stdout=completed.stdout or b"",
        stderr=completed.stderr or b"",
        exit_code=completed.returncode,
        args=tuple(args),
    )
    if not result.ok:
        log_warning(
            logger,
            "Renderer exited with status %d: %s",
            result.exit_code,
            result.stderr_text.strip(),
        )
    return result


__all__ = ["RenderResult", "build_render_args", "render"]
