"""Matcher asserting that a rendering context satisfies an overlay template."""

from __future__ import annotations

import dataclasses as dc

from rendercheck.config import RendererConfig
from rendercheck.context import RenderingContext
from rendercheck.errors import TypeMismatchError
from rendercheck.renderer import render


@dc.dataclass(frozen=True, slots=True)
class SatisfyOverlayMatcher:
    """Match when base templates plus ``overlay`` render with exit status 0.

    Overlays typically carry assertions that make the renderer fail, so a
    failing render raises ``RenderExitError`` whose text is the renderer's own
    error output. Errors starting the renderer propagate unchanged.
    """

    overlay: str
    config: RendererConfig | None = None

    def match(self, actual: object) -> bool:
        """Render ``actual`` with the overlay appended."""
        if not isinstance(actual, RenderingContext):
            raise TypeMismatchError("SatisfyOverlay", "a RenderingContext", actual)

        overlaid = actual.with_overlay(self.overlay)
        render(overlaid.templates, overlaid.data, config=self.config).raise_for_status()
        return True

    def failure_message(self, actual: object) -> str:
        """Describe a positive mismatch."""
        return f"Expected rendering to satisfy overlay {self.overlay}"

    def negated_failure_message(self, actual: object) -> str:
        """Describe a negated mismatch."""
        return f"Expected rendering not to satisfy overlay {self.overlay}"


def satisfy_overlay(
    overlay: str, *, config: RendererConfig | None = None
) -> SatisfyOverlayMatcher:
    """Build a matcher that renders the context plus ``overlay``."""
    return SatisfyOverlayMatcher(overlay, config)
