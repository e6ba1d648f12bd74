"""Configuration for the external template renderer.

The renderer executable, its flag spelling and the render timeout are all
injected through ``RendererConfig`` rather than compiled into the matchers.

Usage
-----
Create a configuration with defaults:

>>> config = RendererConfig()
>>> config.executable
'ytt'

Or load from environment variables, e.g. with
``RENDERCHECK_RENDER_TIMEOUT=30`` exported by the caller:

>>> RendererConfig.from_env().timeout  # doctest: +SKIP
30.0

"""

from __future__ import annotations

import dataclasses as dc
import os

_DISABLED_TIMEOUT_VALUES = frozenset({"none", "off"})


@dc.dataclass(frozen=True, slots=True)
class RendererConfig:
    """Settings used when invoking the renderer executable.

    Attributes
    ----------
    executable
        Name or path of the renderer. Bare names are resolved through
        ``PATH``. Default is ``ytt``.
    template_flag
        Flag emitted before each template identifier. Default is ``-f``.
    value_flag
        Flag emitted before each ``key=value`` data binding. Default is ``-v``.
    timeout
        Seconds to wait for the renderer before killing it. ``None`` waits
        indefinitely. Default is 120 seconds.

    """

    executable: str = "ytt"
    template_flag: str = "-f"
    value_flag: str = "-v"
    timeout: float | None = 120.0

    def __post_init__(self) -> None:
        """Reject unusable settings early."""
        if not self.executable.strip():
            msg = "executable cannot be empty"
            raise ValueError(msg)
        if self.timeout is not None and self.timeout <= 0:
            msg = f"timeout must be positive, got: {self.timeout}"
            raise ValueError(msg)

    @staticmethod
    def _read(env_var: str, default: str) -> str:
        raw = os.environ.get(env_var, "")
        return raw.strip() or default

    @staticmethod
    def _parse_timeout(env_var: str, default: float | None) -> float | None:
        """Read a positive timeout in seconds, or ``none`` to disable it."""
        raw = os.environ.get(env_var, "").strip()
        if not raw:
            return default
        if raw.lower() in _DISABLED_TIMEOUT_VALUES:
            return None
        try:
            value = float(raw)
        except ValueError as exc:
            msg = f"{env_var} must be a number of seconds, got: {raw!r}"
            raise ValueError(msg) from exc
        if value <= 0:
            msg = f"{env_var} must be positive, got: {value}"
            raise ValueError(msg)
        return value

    @classmethod
    def from_env(cls) -> RendererConfig:
        """Create configuration from environment variables.

        Reads the following environment variables:

        - ``RENDERCHECK_RENDERER``: Renderer executable name or path.
        - ``RENDERCHECK_TEMPLATE_FLAG``: Flag preceding each template.
        - ``RENDERCHECK_VALUE_FLAG``: Flag preceding each data binding.
        - ``RENDERCHECK_RENDER_TIMEOUT``: Timeout in seconds, or ``none`` to
          wait indefinitely.

        Returns
        -------
        RendererConfig
            Configuration instance with values from environment or defaults.

        Raises
        ------
        ValueError
            If ``RENDERCHECK_RENDER_TIMEOUT`` is not a positive number.

        """
        defaults = cls()
        return cls(
            executable=cls._read("RENDERCHECK_RENDERER", defaults.executable),
            template_flag=cls._read(
                "RENDERCHECK_TEMPLATE_FLAG", defaults.template_flag
            ),
            value_flag=cls._read("RENDERCHECK_VALUE_FLAG", defaults.value_flag),
            timeout=cls._parse_timeout(
                "RENDERCHECK_RENDER_TIMEOUT", defaults.timeout
            ),
        )
