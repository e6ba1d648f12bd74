"""Rendering contexts: templates plus the data bound while rendering them."""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

if typ.TYPE_CHECKING:
    from collections import abc as cabc


def _freeze(data: cabc.Mapping[str, str]) -> cabc.Mapping[str, str]:
    return types.MappingProxyType(dict(data))


@dc.dataclass(frozen=True, slots=True)
class RenderingContext:
    """Immutable bundle of template identifiers and variable bindings.

    Attributes
    ----------
    templates
        Ordered template identifiers handed to the renderer. Never empty.
    data
        Variable name to value bindings. Read-only.

    Examples
    --------
    >>> base = RenderingContext.of("config/deployment.yml")
    >>> tuned = base.with_data({"replicas": "3"})
    >>> tuned.templates == base.templates
    True
    >>> dict(base.data)
    {}

    """

    templates: tuple[str, ...]
    data: cabc.Mapping[str, str] = dc.field(
        default_factory=lambda: types.MappingProxyType({})
    )

    def __post_init__(self) -> None:
        """Normalize inputs and enforce at least one template."""
        if isinstance(self.templates, str):
            msg = f"templates must be a sequence, not the string {self.templates!r}"
            raise TypeError(msg)
        templates = tuple(self.templates)
        if not templates:
            msg = "a rendering context needs at least one template"
            raise ValueError(msg)
        object.__setattr__(self, "templates", templates)
        object.__setattr__(self, "data", _freeze(self.data))

    @classmethod
    def of(cls, *templates: str) -> RenderingContext:
        """Build a context from ``templates`` with no data bound."""
        return cls(templates=templates)

    def with_data(self, data: cabc.Mapping[str, str]) -> RenderingContext:
        """Return a copy whose data is replaced by ``data``."""
        return dc.replace(self, data=data)

    def with_overlay(self, overlay: str) -> RenderingContext:
        """Return a copy with ``overlay`` appended after the base templates."""
        return dc.replace(self, templates=(*self.templates, overlay))


def new_rendering_context(*templates: str) -> RenderingContext:
    """Build a context from ``templates`` with no data bound."""
    return RenderingContext.of(*templates)


__all__ = ["RenderingContext", "new_rendering_context"]
