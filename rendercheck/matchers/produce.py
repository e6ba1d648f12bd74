"""Matcher that renders a context, decodes the output and delegates."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from rendercheck.config import RendererConfig
from rendercheck.context import RenderingContext
from rendercheck.errors import TypeMismatchError
from rendercheck.renderer import render
from rendercheck.resources.decoder import decode

if typ.TYPE_CHECKING:
    from rendercheck.resources.registry import SchemaRegistry

    from .protocol import Matcher


def _describe(actual: object) -> str:
    if isinstance(actual, RenderingContext):
        return ", ".join(actual.templates)
    return repr(actual)


@dc.dataclass(frozen=True, slots=True)
class ProduceObjectMatcher:
    """Render a context, decode the single resource and apply ``matcher``.

    Render failures, non-zero exits and decode failures are raised before the
    nested matcher is consulted, so it only ever sees a decoded resource.
    """

    matcher: Matcher
    config: RendererConfig | None = None
    registry: SchemaRegistry | None = None

    def match(self, actual: object) -> bool:
        """Render ``actual`` and return the nested matcher's verdict."""
        if not isinstance(actual, RenderingContext):
            raise TypeMismatchError("ProduceObject", "a RenderingContext", actual)

        result = render(actual.templates, actual.data, config=self.config)
        result.raise_for_status()
        resource = decode(result.stdout, registry=self.registry)
        return self.matcher.match(resource)

    def failure_message(self, actual: object) -> str:
        """Describe a positive mismatch."""
        return (
            f"Expected rendering of {_describe(actual)} to produce a matching object"
        )

    def negated_failure_message(self, actual: object) -> str:
        """Describe a negated mismatch."""
        return (
            f"Expected rendering of {_describe(actual)} "
            "not to produce a matching object"
        )


def produce_object(
    matcher: Matcher,
    *,
    config: RendererConfig | None = None,
    registry: SchemaRegistry | None = None,
) -> ProduceObjectMatcher:
    """Build a matcher applying ``matcher`` to the decoded render output."""
    return ProduceObjectMatcher(matcher, config, registry)


produce_yaml = produce_object
